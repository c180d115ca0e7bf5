from typing import Dict, Iterable, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from isupipe.core.exceptions import InternalError
from isupipe.crud.base import get_by_id, get_by_ids
from isupipe.models import Icon, IconHash, Theme, User

# Users
def get_user(db: Session, user_id: int) -> User:
    return get_by_id(db, User, user_id)

def get_users_by_ids(db: Session, user_ids: Iterable[int]) -> Dict[int, User]:
    return get_by_ids(db, User, user_ids)

# Themes are keyed by owning user, not by theme id
def get_theme_by_user_id(db: Session, user_id: int) -> Theme:
    return get_by_id(db, Theme, user_id, key="user_id")

def get_themes_by_user_ids(db: Session, user_ids: Iterable[int]) -> Dict[int, Theme]:
    return get_by_ids(db, Theme, user_ids, key="user_id")

# Icon hashes
def _icon_hash_query(db: Session):
    return db.query(Icon.user_id, IconHash.hash).select_from(IconHash).join(Icon, Icon.id == IconHash.icon_id)

def get_icon_hash_by_user_id(db: Session, user_id: int) -> Optional[str]:
    """Return the user's icon hash, or None when the user never uploaded an icon."""
    try:
        row = _icon_hash_query(db).filter(Icon.user_id == user_id).first()
    except SQLAlchemyError as e:
        raise InternalError(f"failed to get icon hash: {e}") from e
    return row.hash if row is not None else None

def get_icon_hashes_by_user_ids(db: Session, user_ids: Iterable[int]) -> Dict[int, str]:
    distinct_ids = sorted(set(user_ids))
    if not distinct_ids:
        return {}
    try:
        rows = _icon_hash_query(db).filter(Icon.user_id.in_(distinct_ids)).all()
    except SQLAlchemyError as e:
        raise InternalError(f"failed to get icon hashes: {e}") from e
    return {row.user_id: row.hash for row in rows}
