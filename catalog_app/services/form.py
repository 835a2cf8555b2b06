# catalog_app/services/form.py

import io
from datetime import date
from PIL import Image, UnidentifiedImageError


TITLE_MAX_LENGTH = 100
MIN_RELEASE_YEAR = 1888

MIN_POSTER_SIZE = (300, 400)
MAX_POSTER_SIZE = (2000, 3000)


def max_release_year() -> int:
    return date.today().year + 5


def validate_poster_dimensions(data: bytes) -> str | None:
    """
    Returns an error message for posters outside the accepted pixel range,
    or None when the image is fine.
    """
    try:
        with Image.open(io.BytesIO(data)) as img:
            width, height = img.size
    except (UnidentifiedImageError, OSError):
        return "Failed to load image. Please try another file."

    if width < MIN_POSTER_SIZE[0] or height < MIN_POSTER_SIZE[1]:
        return (
            f"Image is too small ({width}x{height}px). "
            f"Please use an image at least {MIN_POSTER_SIZE[0]}x{MIN_POSTER_SIZE[1]} pixels."
        )
    if width > MAX_POSTER_SIZE[0] or height > MAX_POSTER_SIZE[1]:
        return (
            f"Image is too large ({width}x{height}px). "
            f"Please use an image no larger than {MAX_POSTER_SIZE[0]}x{MAX_POSTER_SIZE[1]} pixels."
        )
    return None


def validate_movie_form(title, release_year, poster: bytes | None = None, existing_poster: str | None = None) -> dict:
    """
    Validates the add/edit movie form. Returns {field: message}; an empty
    dict means the form can be submitted.
    """
    errors = {}

    title = (title or "").strip()
    if not title:
        errors["title"] = "Title is required"
    elif len(title) > TITLE_MAX_LENGTH:
        errors["title"] = "Title is too long"

    try:
        year = int(release_year)
    except (TypeError, ValueError):
        errors["releaseYear"] = "Year must be a number"
    else:
        if year < MIN_RELEASE_YEAR:
            errors["releaseYear"] = f"Year must be {MIN_RELEASE_YEAR} or later"
        elif year > max_release_year():
            errors["releaseYear"] = "Year is too far in the future"

    if poster:
        message = validate_poster_dimensions(poster)
        if message:
            errors["poster"] = message
    elif not existing_poster:
        errors["poster"] = "Poster image is required"

    return errors
