from typing import Dict, List, Optional, Sequence

from sqlalchemy.orm import Session

from isupipe.core.exceptions import InternalError
from isupipe.crud import crud_user
from isupipe.models import Livestream as LivestreamModel
from isupipe.schemas import livestream as schemas_livestream, user as schemas_user
from isupipe.services import user_service


def _build_livestream(livestream_model: LivestreamModel, owner: schemas_user.User) -> schemas_livestream.Livestream:
    return schemas_livestream.Livestream(
        id=livestream_model.id,
        owner=owner,
        title=livestream_model.title,
        description=livestream_model.description,
        playlist_url=livestream_model.playlist_url,
        thumbnail_url=livestream_model.thumbnail_url,
        start_at=livestream_model.start_at,
        end_at=livestream_model.end_at,
    )


def fill_livestream_response(db: Session, livestream_model: LivestreamModel) -> schemas_livestream.Livestream:
    owner_model = crud_user.get_user(db, livestream_model.user_id)
    owner = user_service.fill_user_response(db, owner_model)
    return _build_livestream(livestream_model, owner)


def fill_livestream_responses(
    db: Session,
    livestream_models: Sequence[LivestreamModel],
    owners: Optional[Dict[int, schemas_user.User]] = None,
) -> List[schemas_livestream.Livestream]:
    """
    Hydrate livestreams in input order.

    ``owners`` may carry already resolved users keyed by id; when omitted the
    owners are loaded in bulk through ``user_service.fill_user_responses``.
    """
    if not livestream_models:
        return []

    if owners is None:
        owners = user_service.fill_user_responses(db, {ls.user_id for ls in livestream_models})

    livestreams = []
    for livestream_model in livestream_models:
        owner = owners.get(livestream_model.user_id)
        if owner is None:
            raise InternalError(f"owner {livestream_model.user_id} of livestream {livestream_model.id} not resolved")
        livestreams.append(_build_livestream(livestream_model, owner))
    return livestreams
