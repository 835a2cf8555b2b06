# catalog_server/api/movies.py

from typing import List
from fastapi import APIRouter, Depends, File, Form, Query, Response, UploadFile, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.orm import Session

from catalog_server.api.auth import get_current_user
from catalog_server.core import movies as movie_service
from catalog_server.core.errors import InvalidFieldError
from catalog_server.core.posters import check_extension, remove_poster, save_poster
from catalog_server.core.utils import timed
from catalog_server.database import get_db
from catalog_server.models.user import User
from catalog_server.schemas import MovieCreate, MovieOut, MoviePage, MovieUpdate


router = APIRouter(prefix="/movies", tags=["movies"])


# -------------------------------
# Multipart form -> typed schema
# -------------------------------

def movie_create_form(
    title: str = Form(...),
    release_year: str = Form(..., alias="releaseYear"),
) -> MovieCreate:
    try:
        return MovieCreate(title=title, release_year=release_year)
    except ValidationError as e:
        raise RequestValidationError(e.errors())


def movie_update_form(
    title: str | None = Form(None),
    release_year: str | None = Form(None, alias="releaseYear"),
) -> MovieUpdate:
    fields = {}
    if title:
        fields["title"] = title
    if release_year:
        fields["release_year"] = release_year
    try:
        return MovieUpdate(**fields)
    except ValidationError as e:
        raise RequestValidationError(e.errors())


def poster_upload(poster: UploadFile | None = File(None)) -> UploadFile | None:
    # Multipart clients send an empty part when no file was chosen.
    if poster is None or not poster.filename:
        return None
    check_extension(poster.filename)
    return poster


# -------------------------------
# Endpoints
# -------------------------------

@router.post("", response_model=MovieOut, status_code=status.HTTP_201_CREATED)
@timed
def create_movie(
    current_user: User = Depends(get_current_user),
    data: MovieCreate = Depends(movie_create_form),
    poster: UploadFile | None = Depends(poster_upload),
    db: Session = Depends(get_db),
):
    if poster is None:
        raise InvalidFieldError("Poster image is required")
    poster_url = save_poster(poster)
    return movie_service.create_movie(db, data, poster_url)


@router.get("", response_model=MoviePage)
@timed
def list_movies(
    page: int = Query(movie_service.DEFAULT_PAGE, ge=1),
    limit: int = Query(movie_service.DEFAULT_LIMIT, ge=1),
    db: Session = Depends(get_db),
):
    return movie_service.list_movies(db, page, limit)


@router.get("/search", response_model=List[MovieOut])
@timed
def search_movies(q: str = "", db: Session = Depends(get_db)):
    return movie_service.search_movies(db, q)


@router.get("/{movie_id}", response_model=MovieOut)
def get_movie(movie_id: str, db: Session = Depends(get_db)):
    return movie_service.get_movie(db, movie_id)


@router.patch("/{movie_id}", response_model=MovieOut)
@timed
def update_movie(
    movie_id: str,
    current_user: User = Depends(get_current_user),
    data: MovieUpdate = Depends(movie_update_form),
    poster: UploadFile | None = Depends(poster_upload),
    db: Session = Depends(get_db),
):
    movie = movie_service.get_movie(db, movie_id)
    old_poster = movie.poster_url

    poster_url = save_poster(poster) if poster is not None else None
    movie = movie_service.update_movie(db, movie_id, data, poster_url)

    if poster_url is not None and old_poster != poster_url:
        remove_poster(old_poster)
    return movie


@router.delete("/{movie_id}", status_code=status.HTTP_204_NO_CONTENT)
@timed
def delete_movie(
    movie_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    movie = movie_service.delete_movie(db, movie_id)
    remove_poster(movie.poster_url)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
