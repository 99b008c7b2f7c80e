"""Authentication service for JWT and password handling."""

import logging
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.config import get_settings
from src.exceptions import ConflictError, UnauthorizedError
from src.messages import ErrorMessages
from src.models.user import User

logger = logging.getLogger(__name__)

settings = get_settings()

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def create_access_token(user_id: int, username: str) -> str:
    """Create a JWT access token carrying the user's id and username."""
    expire = datetime.now(UTC) + timedelta(minutes=settings.jwt_expiration_minutes)
    to_encode = {
        "sub": str(user_id),
        "id": user_id,
        "username": username,
        "exp": expire,
    }
    encoded_jwt = jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)
    return encoded_jwt


def decode_access_token(token: str) -> dict | None:
    """Decode and validate a JWT token."""
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
        return payload
    except JWTError:
        return None


def get_user_by_id(db: Session, user_id: int) -> User | None:
    """Get a user by id."""
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email."""
    return db.query(User).filter(User.email == email).first()


def get_user_by_username(db: Session, username: str) -> User | None:
    """Get a user by username."""
    return db.query(User).filter(User.username == username).first()


def create_user(db: Session, username: str, email: str, password: str) -> User:
    """Register a new user.

    Raises:
        ConflictError: if the username or the email is already taken.
    """
    if get_user_by_username(db, username):
        raise ConflictError(ErrorMessages.USERNAME_IN_USE)
    if get_user_by_email(db, email):
        raise ConflictError(ErrorMessages.EMAIL_IN_USE)

    user = User(username=username, email=email, password_hash=get_password_hash(password))
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        # Lost a race against a concurrent registration with the same credentials
        db.rollback()
        logger.warning(f"Concurrent registration conflict for {username} / {email}: {e.orig}")
        raise ConflictError(ErrorMessages.CONFLICT) from e
    db.refresh(user)
    return user


def authenticate_user(db: Session, email: str, password: str) -> User | None:
    """Authenticate a user by email and password."""
    user = get_user_by_email(db, email)
    if not user:
        return None
    if not verify_password(password, user.password_hash):
        return None
    return user


def login(db: Session, email: str, password: str) -> tuple[str, User]:
    """Check credentials and issue an access token.

    Unknown email and wrong password fail with the same message.
    """
    user = authenticate_user(db, email, password)
    if not user:
        logger.warning(f"Failed login for {email}: invalid credentials")
        raise UnauthorizedError(ErrorMessages.INVALID_CREDENTIALS)
    return create_access_token(user.id, user.username), user


def change_password(db: Session, user: User, old_password: str, new_password: str) -> None:
    """Replace the user's password after verifying the current one."""
    if not verify_password(old_password, user.password_hash):
        logger.warning(f"Password change failed for {user.username}: wrong current password")
        raise UnauthorizedError(ErrorMessages.PASSWORD_OLD_INCORRECT)

    user.password_hash = get_password_hash(new_password)
    db.commit()
