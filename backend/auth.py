from typing import Optional

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from database import get_session
from errors import AuthError
from models import User
from repository import BookingRepository
from schemas import MAX_ID

TOKEN_PREFIX = "Token"


def parse_token(raw_token: Optional[str]) -> int:
    """Extract the user id from a ``Token-<id>`` header value."""
    if not raw_token:
        raise AuthError()

    prefix, _, user_id = raw_token.strip().partition("-")
    if prefix != TOKEN_PREFIX:
        raise AuthError()
    try:
        parsed = int(user_id)
    except ValueError:
        raise AuthError() from None
    if not 1 <= parsed <= MAX_ID:
        raise AuthError()
    return parsed


def resolve_caller(raw_token: Optional[str], repository: BookingRepository) -> User:
    user = repository.find_user_by_id(parse_token(raw_token))
    if user is None:
        raise AuthError()
    return user


def get_current_user(
    x_user_token: Optional[str] = Header(default=None),
    db: Session = Depends(get_session),
) -> User:
    return resolve_caller(x_user_token, BookingRepository(db))
