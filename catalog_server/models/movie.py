# catalog_server/models/movie.py

import uuid
from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime
from . import Base


class Movie(Base):
    __tablename__ = "movies"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title = Column(String(255), nullable=False)
    release_year = Column(Integer, nullable=False)
    poster_url = Column(String(500), nullable=True)
    created_at = Column(DateTime, default=datetime.now, index=True, nullable=False)
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now, nullable=False)
