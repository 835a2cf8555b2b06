import json

import pytest
import requests

from catalog_app.services.api import ApiError, MovieApi


def make_response(status_code, body=None, reason="OK"):
    res = requests.Response()
    res.status_code = status_code
    res.reason = reason
    res._content = json.dumps(body).encode() if body is not None else b""
    return res


class RecordingSession:
    def __init__(self, response):
        self.response = response
        self.calls = []

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        if isinstance(self.response, Exception):
            raise self.response
        return self.response


def test_sends_bearer_token():
    session = RecordingSession(make_response(200, {"data": [], "total": 0, "page": 1, "totalPages": 0}))
    api = MovieApi("http://api.test/", token_getter=lambda: "tok", session=session)
    api.list_movies(2, 4)
    method, url, kwargs = session.calls[0]
    assert method == "GET"
    assert url == "http://api.test/movies"
    assert kwargs["params"] == {"page": 2, "limit": 4}
    assert kwargs["headers"] == {"Authorization": "Bearer tok"}


def test_no_token_no_header():
    session = RecordingSession(make_response(200, []))
    MovieApi("http://api.test", session=session).search_movies("dune")
    _, url, kwargs = session.calls[0]
    assert url == "http://api.test/movies/search"
    assert kwargs["params"] == {"q": "dune"}
    assert kwargs["headers"] == {}


def test_create_movie_sends_multipart_fields():
    session = RecordingSession(make_response(201, {"id": "m1"}))
    api = MovieApi("http://api.test", session=session)
    poster = ("dune.jpg", b"bytes", "image/jpeg")
    assert api.create_movie("Dune", 2021, poster) == {"id": "m1"}
    method, url, kwargs = session.calls[0]
    assert method == "POST"
    assert kwargs["data"] == {"title": "Dune", "releaseYear": "2021"}
    assert kwargs["files"] == {"poster": poster}


def test_update_movie_sends_only_given_fields():
    session = RecordingSession(make_response(200, {"id": "m1"}))
    MovieApi("http://api.test", session=session).update_movie("m1", title="X")
    method, url, kwargs = session.calls[0]
    assert method == "PATCH"
    assert url == "http://api.test/movies/m1"
    assert kwargs["data"] == {"title": "X"}
    assert kwargs["files"] is None


def test_delete_returns_none_on_204():
    session = RecordingSession(make_response(204))
    assert MovieApi("http://api.test", session=session).delete_movie("m1") is None


def test_error_carries_server_message():
    body = {"status": "error", "statusCode": 404, "message": "Movie with ID x not found"}
    session = RecordingSession(make_response(404, body, reason="Not Found"))
    with pytest.raises(ApiError) as exc:
        MovieApi("http://api.test", session=session).get_movie("x")
    assert exc.value.status_code == 404
    assert exc.value.message == "Movie with ID x not found"


def test_error_without_json_body():
    session = RecordingSession(make_response(502, reason="Bad Gateway"))
    with pytest.raises(ApiError) as exc:
        MovieApi("http://api.test", session=session).get_movie("x")
    assert exc.value.status_code == 502
    assert exc.value.message == "Bad Gateway"


def test_connection_error():
    session = RecordingSession(requests.ConnectionError("refused"))
    with pytest.raises(ApiError) as exc:
        MovieApi("http://api.test", session=session).login("a@b.com", "pw")
    assert exc.value.status_code == 0


def test_poster_url():
    api = MovieApi("http://api.test", session=RecordingSession(None))
    assert api.poster_url("/uploads/posters/p.jpg") == "http://api.test/uploads/posters/p.jpg"
    assert api.poster_url("https://cdn.test/p.jpg") == "https://cdn.test/p.jpg"
    assert api.poster_url(None) is None


def test_get_me_uses_current_token():
    session = RecordingSession(make_response(200, {"id": "u1", "email": "demo@demo.com"}))
    api = MovieApi("http://api.test", token_getter=lambda: "tok", session=session)
    assert api.get_me()["email"] == "demo@demo.com"
    method, url, kwargs = session.calls[0]
    assert (method, url) == ("GET", "http://api.test/auth/me")
    assert kwargs["headers"] == {"Authorization": "Bearer tok"}
