# catalog_server/schemas.py

from datetime import datetime
from typing import Optional, List
from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel


# ------------------------------------------------------------
# Wire models use camelCase names (releaseYear, posterUrl, ...)
# while the Python side keeps snake_case attributes.
# ------------------------------------------------------------
class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


MIN_RELEASE_YEAR = 1800
MAX_RELEASE_YEAR = 2100


class MovieCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=255)
    release_year: int = Field(..., ge=MIN_RELEASE_YEAR, le=MAX_RELEASE_YEAR)


class MovieUpdate(CamelModel):
    # Unset fields are left untouched on the stored row.
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    release_year: Optional[int] = Field(None, ge=MIN_RELEASE_YEAR, le=MAX_RELEASE_YEAR)


class MovieOut(CamelModel):
    id: str
    title: str
    release_year: int
    poster_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class MoviePage(CamelModel):
    data: List[MovieOut]
    total: int
    page: int
    total_pages: int


# ------------------------------------------------------------
# Authentication
# ------------------------------------------------------------
class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class RegisterRequest(CamelModel):
    username: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=72)
    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)


class UserOut(CamelModel):
    id: str
    username: str
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class AuthResponse(CamelModel):
    user: UserOut
    token: str
