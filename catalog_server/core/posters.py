# catalog_server/core/posters.py

import os
import random
import time
from pathlib import Path
from fastapi import UploadFile, status

from catalog_server.core import config
from catalog_server.core.errors import UploadRejectedError
from catalog_server.core.logger import logger


ALLOWED_EXTENSIONS = {".jpg", ".jpeg", ".png", ".gif", ".webp"}
CHUNK_SIZE = 64 * 1024


def check_extension(filename: str | None) -> str:
    """
    Returns the lower-cased extension of an accepted poster filename.
    """
    ext = Path(filename or "").suffix
    if ext.lower() not in ALLOWED_EXTENSIONS:
        logger.warning(f"rejected poster upload {filename!r}: bad extension")
        raise UploadRejectedError("Only image files are allowed!")
    return ext


def generate_poster_name(ext: str) -> str:
    unique_suffix = f"{int(time.time() * 1000)}-{random.randint(0, 10**9)}"
    return f"poster-{unique_suffix}{ext}"


def _too_large(filename: str | None) -> UploadRejectedError:
    logger.warning(f"rejected poster upload {filename!r}: larger than {config.MAX_POSTER_SIZE} bytes")
    return UploadRejectedError(
        "File too large",
        status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
    )


def save_poster(upload: UploadFile) -> str:
    """
    Validates an uploaded poster and writes it under POSTER_DIR.
    Returns the public reference path stored on the movie row.
    """
    ext = check_extension(upload.filename)

    if upload.size is not None and upload.size > config.MAX_POSTER_SIZE:
        raise _too_large(upload.filename)

    os.makedirs(config.POSTER_DIR, exist_ok=True)
    name = generate_poster_name(ext)
    path = config.POSTER_DIR / name

    written = 0
    with path.open("wb") as buffer:
        while True:
            chunk = upload.file.read(CHUNK_SIZE)
            if not chunk:
                break
            written += len(chunk)
            if written > config.MAX_POSTER_SIZE:
                break
            buffer.write(chunk)

    if written > config.MAX_POSTER_SIZE:
        path.unlink(missing_ok=True)
        raise _too_large(upload.filename)

    logger.info(f"stored poster {name} ({written} bytes)")
    return f"{config.POSTER_URL_PREFIX}/{name}"


def remove_poster(reference: str | None) -> None:
    """
    Deletes the file behind a stored poster reference, if it still exists.
    References outside the posters prefix are ignored.
    """
    prefix = config.POSTER_URL_PREFIX + "/"
    if not reference or not reference.startswith(prefix):
        return

    name = Path(reference[len(prefix):]).name
    path = config.POSTER_DIR / name
    if path.exists():
        path.unlink()
        logger.info(f"removed poster {name}")
