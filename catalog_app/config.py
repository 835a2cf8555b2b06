# catalog_app/config.py

import os
from dotenv import load_dotenv


load_dotenv()


# Base URL of the FastAPI backend
API_URL = os.getenv("API_URL", "http://localhost:8000").rstrip("/")
COOKIE_PASSWORD = os.getenv("COOKIE_PASSWORD", "dev-cookie-password")
COOKIE_PREFIX = "movie-catalog/"

PAGE_SIZE = 8
REQUEST_TIMEOUT = 30
