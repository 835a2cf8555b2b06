# catalog_app/store/movies.py

from catalog_app.config import PAGE_SIZE
from catalog_app.services.api import ApiError, MovieApi


def error_message(error: Exception, fallback: str) -> str:
    if isinstance(error, ApiError) and error.message:
        return error.message
    return fallback


class MovieStore:
    """
    Cache of the current page of movies. Every action reflects what the
    server confirmed; nothing is applied optimistically.
    """

    key = "movies"

    def __init__(self, state, api: MovieApi):
        self.state = state
        self.api = api
        if self.key not in self.state:
            self.state[self.key] = {
                "movies": [],
                "total": 0,
                "currentPage": 1,
                "totalPages": 0,
                "isLoading": False,
                "error": None,
            }

    @property
    def snapshot(self) -> dict:
        return self.state[self.key]

    def _set(self, **changes):
        self.snapshot.update(changes)

    def _start(self):
        self._set(isLoading=True, error=None)

    def _fail(self, error: Exception, fallback: str):
        self._set(error=error_message(error, fallback), isLoading=False)

    # -------------------------------
    # Actions
    # -------------------------------

    def fetch_movies(self, page=1, limit=PAGE_SIZE):
        self._start()
        try:
            response = self.api.list_movies(page, limit)
        except Exception as e:
            self._fail(e, "Failed to fetch movies")
            return
        if not response["data"] and response["total"] > 0 and page > response["totalPages"]:
            # The requested page no longer exists, e.g. after deleting its last row.
            return self.fetch_movies(response["totalPages"], limit)
        self._set(
            movies=response["data"],
            total=response["total"],
            currentPage=response["page"],
            totalPages=response["totalPages"],
            isLoading=False,
        )

    def add_movie(self, title, release_year, poster=None):
        self._start()
        try:
            new_movie = self.api.create_movie(title, release_year, poster)
        except Exception as e:
            self._fail(e, "Failed to add movie")
            raise
        self._set(movies=self.snapshot["movies"] + [new_movie], isLoading=False)
        return new_movie

    def update_movie(self, movie_id, title=None, release_year=None, poster=None):
        self._start()
        try:
            updated = self.api.update_movie(movie_id, title, release_year, poster)
        except Exception as e:
            self._fail(e, "Failed to update movie")
            raise
        self._set(
            movies=[updated if m["id"] == movie_id else m for m in self.snapshot["movies"]],
            isLoading=False,
        )
        return updated

    def delete_movie(self, movie_id):
        self._start()
        try:
            self.api.delete_movie(movie_id)
        except Exception as e:
            self._fail(e, "Failed to delete movie")
            raise
        self._set(
            movies=[m for m in self.snapshot["movies"] if m["id"] != movie_id],
            isLoading=False,
        )

    def search_movies(self, query):
        self._start()
        try:
            movies = self.api.search_movies(query)
        except Exception as e:
            self._fail(e, "Failed to search movies")
            return
        self._set(movies=movies, isLoading=False)
