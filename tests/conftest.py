import os
import shutil
import tempfile
from pathlib import Path

# Settings are read at import time, so point them at scratch locations first.
TMP_ROOT = Path(tempfile.mkdtemp(prefix="movie-catalog-tests-"))
os.environ["DATABASE_URL"] = f"sqlite:///{TMP_ROOT / 'test.db'}"
os.environ["UPLOAD_DIR"] = str(TMP_ROOT / "uploads")
os.environ["JWT_SECRET_KEY"] = "test-secret"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from catalog_server.core import config  # noqa: E402
from catalog_server.database import SessionLocal, engine  # noqa: E402
from catalog_server.main import app  # noqa: E402
from catalog_server.models import Base  # noqa: E402


@pytest.fixture
def client():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    shutil.rmtree(config.POSTER_DIR, ignore_errors=True)
    config.POSTER_DIR.mkdir(parents=True, exist_ok=True)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db(client):
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def register(client, email="demo@demo.com", password="demo123", username="demo"):
    res = client.post(
        "/auth/register",
        json={"username": username, "email": email, "password": password},
    )
    assert res.status_code == 201, res.text
    return res.json()


@pytest.fixture
def auth_headers(client):
    token = register(client)["token"]
    return {"Authorization": f"Bearer {token}"}


def jpg(name="poster.jpg", data=b"\xff\xd8\xff\xe0fake-jpeg-bytes"):
    return {"poster": (name, data, "image/jpeg")}


def create_movie(client, headers, title="Dune", year=2021, files=None):
    res = client.post(
        "/movies",
        data={"title": title, "releaseYear": str(year)},
        files=files or jpg(),
        headers=headers,
    )
    assert res.status_code == 201, res.text
    return res.json()


def poster_files():
    return sorted(p.name for p in config.POSTER_DIR.iterdir())
