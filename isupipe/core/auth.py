from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import HTTPException, status
from jose import ExpiredSignatureError, JWTError, jwt

from isupipe.core.config import settings


def create_session_token(user_id: int, name: str, expires_delta: Optional[timedelta] = None) -> str:
    """
    Mint the signed session value stored in the session cookie.
    """
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(seconds=settings.SESSION_TTL_SECONDS))
    to_encode = {"sub": str(user_id), "name": name, "exp": expire}
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def get_user_id_from_session(token: Optional[str]) -> int:
    if not token:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="failed to get session",
        )
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except ExpiredSignatureError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="session has expired",
        )
    except JWTError:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="failed to get session",
        )

    user_id = payload.get("sub")
    if user_id is None or not str(user_id).isdigit():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="failed to get USERID value from session",
        )
    return int(user_id)
