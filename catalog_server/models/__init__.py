# catalog_server/models/__init__.py

from sqlalchemy.orm import declarative_base


Base = declarative_base()

from .movie import Movie  # noqa: E402,F401
from .user import User  # noqa: E402,F401
