# catalog_server/core/movies.py

import math
from sqlalchemy.orm import Session

from catalog_server.core.errors import NotFoundError
from catalog_server.core.logger import logger
from catalog_server.models.movie import Movie
from catalog_server.schemas import MovieCreate, MovieUpdate


DEFAULT_PAGE = 1
DEFAULT_LIMIT = 8


def create_movie(db: Session, data: MovieCreate, poster_url: str | None = None) -> Movie:
    movie = Movie(title=data.title, release_year=data.release_year, poster_url=poster_url)
    db.add(movie)
    db.commit()
    db.refresh(movie)
    logger.info(f"created movie {movie.id} ({movie.title!r}, {movie.release_year})")
    return movie


def list_movies(db: Session, page: int = DEFAULT_PAGE, limit: int = DEFAULT_LIMIT) -> dict:
    """
    One page of movies, most recently created first, plus the paging envelope.
    """
    skip = (page - 1) * limit
    query = db.query(Movie)
    total = query.count()
    data = (
        query.order_by(Movie.created_at.desc(), Movie.id.desc())
        .offset(skip)
        .limit(limit)
        .all()
    )
    return {
        "data": data,
        "total": total,
        "page": page,
        "total_pages": math.ceil(total / limit),
    }


def get_movie(db: Session, movie_id: str) -> Movie:
    movie = db.get(Movie, movie_id)
    if movie is None:
        raise NotFoundError(f"Movie with ID {movie_id} not found")
    return movie


def update_movie(db: Session, movie_id: str, data: MovieUpdate, poster_url: str | None = None) -> Movie:
    """
    Merges the provided fields onto the stored movie. Fields the caller did
    not send keep their current values.
    """
    movie = get_movie(db, movie_id)
    for field, value in data.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(movie, field, value)
    if poster_url is not None:
        movie.poster_url = poster_url
    db.commit()
    db.refresh(movie)
    logger.info(f"updated movie {movie.id}")
    return movie


def delete_movie(db: Session, movie_id: str) -> Movie:
    movie = get_movie(db, movie_id)
    db.delete(movie)
    db.commit()
    logger.info(f"deleted movie {movie_id}")
    return movie


def escape_like(text: str) -> str:
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def search_movies(db: Session, query: str) -> list[Movie]:
    """
    Case-insensitive literal substring match on the title.
    """
    return (
        db.query(Movie)
        .filter(Movie.title.ilike(f"%{escape_like(query)}%", escape="\\"))
        .order_by(Movie.created_at.desc(), Movie.id.desc())
        .all()
    )
