# catalog_app/ui/movie_form.py

from datetime import date
import streamlit as st

from catalog_app.services.api import ApiError, MovieApi
from catalog_app.services.form import MIN_RELEASE_YEAR, validate_movie_form
from catalog_app.store import MovieStore


ACCEPTED_TYPES = ["jpg", "jpeg", "png", "gif", "webp"]


def movie_form(key, initial=None, poster_preview=None):
    """
    Renders the add/edit form. Returns (submitted, title, year, poster, cancelled)
    where poster is a (filename, bytes, content_type) tuple or None.
    """
    initial = initial or {}
    poster_col, fields_col = st.columns([1, 2])

    with poster_col:
        upload = st.file_uploader(
            "Drop an image here",
            type=ACCEPTED_TYPES,
            key=f"{key}_poster",
        )
        if upload is not None:
            st.image(upload.getvalue(), width="stretch")
        elif poster_preview:
            st.image(poster_preview, width="stretch")
            st.caption("Upload a file to change the poster")

    with fields_col:
        with st.form(f"{key}_form"):
            title = st.text_input("Title", value=initial.get("title", ""))
            year = st.number_input(
                "Publishing year",
                min_value=MIN_RELEASE_YEAR - 1,
                value=int(initial.get("releaseYear") or date.today().year),
                step=1,
            )
            submitted = st.form_submit_button("Update" if initial else "Submit")
        cancelled = st.button("Cancel", key=f"{key}_cancel")

    poster = (upload.name, upload.getvalue(), upload.type) if upload is not None else None
    return submitted, title, int(year), poster, cancelled


def show_errors(errors):
    for message in errors.values():
        st.error(message)


def add_movie_page(movies: MovieStore, navigate):
    st.title("Create a new movie")
    submitted, title, year, poster, cancelled = movie_form("add")

    if cancelled:
        navigate("list")
    if not submitted:
        return

    errors = validate_movie_form(title, year, poster[1] if poster else None)
    if errors:
        show_errors(errors)
        return

    try:
        movies.add_movie(title.strip(), year, poster)
    except ApiError as e:
        st.error(e.message or "Failed to add movie")
        return
    st.session_state["movies_loaded"] = False
    navigate("list")


def edit_movie_page(movies: MovieStore, api: MovieApi, movie_id, navigate):
    st.title("Edit")
    try:
        movie = api.get_movie(movie_id)
    except ApiError as e:
        st.error(e.message if e.status_code != 404 else "Movie not found")
        return

    submitted, title, year, poster, cancelled = movie_form(
        f"edit_{movie_id}",
        initial=movie,
        poster_preview=api.poster_url(movie.get("posterUrl")),
    )

    if cancelled:
        navigate("detail", movie_id=movie_id)
    if not submitted:
        return

    errors = validate_movie_form(title, year, poster[1] if poster else None, movie.get("posterUrl"))
    if errors:
        show_errors(errors)
        return

    try:
        movies.update_movie(movie_id, title.strip(), year, poster)
    except ApiError as e:
        st.error(e.message or "Failed to update movie")
        return
    navigate("detail", movie_id=movie_id)
