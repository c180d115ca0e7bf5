from typing import Dict, Iterable

from sqlalchemy.orm import Session

from isupipe.core.config import settings
from isupipe.core.exceptions import InternalError
from isupipe.crud import crud_user
from isupipe.models import Theme as ThemeModel, User as UserModel
from isupipe.schemas import user as schemas_user


def _build_user(user_model: UserModel, theme_model: ThemeModel, icon_hash: str) -> schemas_user.User:
    return schemas_user.User(
        id=user_model.id,
        name=user_model.name,
        display_name=user_model.display_name,
        description=user_model.description,
        theme=schemas_user.Theme(id=theme_model.id, dark_mode=theme_model.dark_mode),
        icon_hash=icon_hash,
    )


def fill_user_response(db: Session, user_model: UserModel) -> schemas_user.User:
    theme_model = crud_user.get_theme_by_user_id(db, user_model.id)
    icon_hash = crud_user.get_icon_hash_by_user_id(db, user_model.id)
    if icon_hash is None:
        icon_hash = settings.FALLBACK_IMAGE_HASH
    return _build_user(user_model, theme_model, icon_hash)


def fill_user_responses(db: Session, user_ids: Iterable[int]) -> Dict[int, schemas_user.User]:
    """
    Hydrate many users with three queries in total: users, themes and icon
    hashes, each filtered with an IN over the distinct ids.

    Every requested id must resolve to a user row and a theme row; a missing
    one is a data integrity problem and raises ``InternalError``. A missing
    icon hash falls back to ``settings.FALLBACK_IMAGE_HASH``.
    """
    distinct_ids = sorted(set(user_ids))
    if not distinct_ids:
        return {}

    user_map = crud_user.get_users_by_ids(db, distinct_ids)
    theme_map = crud_user.get_themes_by_user_ids(db, distinct_ids)
    hash_map = crud_user.get_icon_hashes_by_user_ids(db, distinct_ids)

    user_responses = {}
    for user_id in distinct_ids:
        user_model = user_map.get(user_id)
        if user_model is None:
            raise InternalError(f"user {user_id} not found")
        theme_model = theme_map.get(user_id)
        if theme_model is None:
            raise InternalError(f"theme for user {user_id} not found")
        icon_hash = hash_map.get(user_id, settings.FALLBACK_IMAGE_HASH)
        user_responses[user_id] = _build_user(user_model, theme_model, icon_hash)

    return user_responses
