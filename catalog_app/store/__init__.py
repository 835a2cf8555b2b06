# catalog_app/store/__init__.py

from .auth import AuthStore
from .movies import MovieStore

__all__ = ["AuthStore", "MovieStore"]
