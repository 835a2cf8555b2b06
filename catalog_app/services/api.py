# catalog_app/services/api.py

import requests

from catalog_app.config import API_URL, REQUEST_TIMEOUT


class ApiError(Exception):
    """
    Raised for any non-2xx response. `message` is the server's error
    message when it sent one.
    """

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class MovieApi:
    """
    Thin wrapper over the backend REST endpoints.
    The bearer token is read through `token_getter` on every call so the
    auth store stays the only owner of the session.
    """

    def __init__(self, base_url: str = API_URL, token_getter=None, session: requests.Session | None = None):
        self.base_url = base_url.rstrip("/")
        self.token_getter = token_getter or (lambda: None)
        self.session = session or requests.Session()

    # -------------------------------
    # Plumbing
    # -------------------------------

    def _headers(self):
        token = self.token_getter()
        return {"Authorization": f"Bearer {token}"} if token else {}

    def _request(self, method, path, **kwargs):
        try:
            res = self.session.request(
                method,
                f"{self.base_url}{path}",
                headers=self._headers(),
                timeout=REQUEST_TIMEOUT,
                **kwargs,
            )
        except requests.RequestException as e:
            raise ApiError(0, str(e)) from e

        if res.status_code >= 400:
            try:
                message = res.json().get("message") or res.reason
            except ValueError:
                message = res.reason or f"Status {res.status_code}"
            raise ApiError(res.status_code, message)

        if res.status_code == 204 or not res.content:
            return None
        return res.json()

    # -------------------------------
    # Authentication
    # -------------------------------

    def login(self, email, password):
        """
        Logs in a user and returns {"user": ..., "token": ...}.
        """
        return self._request("POST", "/auth/login", json={"email": email, "password": password})

    def register(self, username, email, password, first_name=None, last_name=None):
        payload = {"username": username, "email": email, "password": password}
        if first_name:
            payload["firstName"] = first_name
        if last_name:
            payload["lastName"] = last_name
        return self._request("POST", "/auth/register", json=payload)

    def get_me(self):
        return self._request("GET", "/auth/me")

    # -------------------------
    # Movies
    # -------------------------

    def list_movies(self, page=1, limit=8):
        return self._request("GET", "/movies", params={"page": page, "limit": limit})

    def get_movie(self, movie_id):
        return self._request("GET", f"/movies/{movie_id}")

    def create_movie(self, title, release_year, poster=None):
        """
        `poster` is a (filename, bytes, content_type) tuple.
        """
        data = {"title": title, "releaseYear": str(release_year)}
        files = {"poster": poster} if poster else None
        return self._request("POST", "/movies", data=data, files=files)

    def update_movie(self, movie_id, title=None, release_year=None, poster=None):
        data = {}
        if title:
            data["title"] = title
        if release_year:
            data["releaseYear"] = str(release_year)
        files = {"poster": poster} if poster else None
        return self._request("PATCH", f"/movies/{movie_id}", data=data, files=files)

    def delete_movie(self, movie_id):
        self._request("DELETE", f"/movies/{movie_id}")

    def search_movies(self, query):
        return self._request("GET", "/movies/search", params={"q": query})

    def poster_url(self, reference):
        """
        Resolves a stored poster reference against the API base URL.
        """
        if not reference:
            return None
        if reference.startswith("http://") or reference.startswith("https://"):
            return reference
        return f"{self.base_url}{reference}"
