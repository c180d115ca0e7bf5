from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import APIKeyCookie

from isupipe.core.auth import get_user_id_from_session
from isupipe.core.config import settings
from isupipe.core.database import SessionLocal

session_cookie = APIKeyCookie(name=settings.SESSION_COOKIE_NAME, auto_error=False)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        # no-op after a successful commit; releases the transaction on every other exit
        db.rollback()
        db.close()


def verify_user_session(token: Optional[str] = Depends(session_cookie)) -> int:
    """
    Resolve the authenticated user id from the session cookie.
    """
    return get_user_id_from_session(token)


def get_livestream_id(livestream_id: str) -> int:
    try:
        return int(livestream_id)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="livestream_id in path must be integer",
        )


def get_limit(limit: Optional[str] = None) -> Optional[int]:
    """An absent or empty ``limit`` means no limit."""
    if limit is None or limit == "":
        return None
    try:
        value = int(limit)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="limit query parameter must be integer",
        )
    if value < 0:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="limit query parameter must be a non-negative integer",
        )
    return value
