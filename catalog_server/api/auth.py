# catalog_server/api/auth.py

from jose import JWTError, jwt
from passlib.context import CryptContext
from fastapi import APIRouter, Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from datetime import datetime, timedelta, timezone
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from catalog_server.database import get_db
from catalog_server.core.config import SECRET_KEY, ALGORITHM, ACCESS_TOKEN_EXPIRE_MINUTES
from catalog_server.core.errors import ConflictError, UnauthorizedError
from catalog_server.core.logger import logger
from catalog_server.models.user import User as UserModel
from catalog_server.schemas import AuthResponse, LoginRequest, RegisterRequest, UserOut


router = APIRouter(prefix="/auth", tags=["auth"])
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")
bearer_scheme = HTTPBearer(auto_error=False)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def authenticate_user(db: Session, email: str, password: str):
    user = db.query(UserModel).filter(UserModel.email == email).first()
    if not user or not verify_password(password, user.hashed_password):
        return None
    return user


def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def issue_token(user: UserModel) -> dict:
    token = create_access_token(data={"sub": user.id, "email": user.email})
    return {"user": user, "token": token}


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> UserModel:
    """
    Resolves the bearer token to a stored user. Any missing, malformed or
    expired token, or one for a user that no longer exists, is a 401.
    """
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise UnauthorizedError("Unauthorized")
    try:
        payload = jwt.decode(credentials.credentials, SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError:
        raise UnauthorizedError("Unauthorized")

    user_id = payload.get("sub")
    if user_id is None:
        raise UnauthorizedError("Unauthorized")
    user = db.get(UserModel, user_id)
    if user is None:
        raise UnauthorizedError("Unauthorized")
    return user


@router.post("/login", response_model=AuthResponse)
def login(req: LoginRequest, db: Session = Depends(get_db)):
    user = authenticate_user(db, req.email, req.password)
    if not user:
        logger.info(f"failed login for {req.email}")
        raise UnauthorizedError("Invalid credentials")
    return issue_token(user)


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(req: RegisterRequest, db: Session = Depends(get_db)):
    user_exists = db.query(UserModel).filter(UserModel.email == req.email).first()
    if user_exists:
        raise ConflictError("Email already exists")
    new_user = UserModel(
        username=req.username,
        email=req.email,
        hashed_password=get_password_hash(req.password),
        first_name=req.first_name,
        last_name=req.last_name,
    )
    db.add(new_user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("Email already exists")
    db.refresh(new_user)
    logger.info(f"registered user {new_user.id} ({new_user.email})")
    return issue_token(new_user)


@router.get("/me", response_model=UserOut)
def read_users_me(current_user: UserModel = Depends(get_current_user)):
    return current_user
