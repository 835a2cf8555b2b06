# catalog_server/core/config.py

import os
from pathlib import Path
from dotenv import load_dotenv


load_dotenv()


DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./data/app.db")

SECRET_KEY = os.getenv("JWT_SECRET_KEY", "dev-secret-change-me")
ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "1440"))

UPLOAD_DIR = Path(os.getenv("UPLOAD_DIR", "uploads"))
POSTER_DIR = UPLOAD_DIR / "posters"
POSTER_URL_PREFIX = "/uploads/posters"
MAX_POSTER_SIZE = 5 * 1024 * 1024

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

DEBUG = bool(os.getenv("DEBUG"))
