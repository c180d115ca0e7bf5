import logging
import time
from typing import List, Optional, Sequence

from sqlalchemy.orm import Session

from isupipe.core.exceptions import InternalError, IsupipeError
from isupipe.crud import crud_livestream, crud_reaction, crud_user
from isupipe.models import Reaction as ReactionModel
from isupipe.schemas import reaction as schemas_reaction
from isupipe.services import livestream_service, user_service

logger = logging.getLogger(__name__)


def _build_reaction(reaction_model: ReactionModel, user, livestream) -> schemas_reaction.Reaction:
    return schemas_reaction.Reaction(
        id=reaction_model.id,
        emoji_name=reaction_model.emoji_name,
        user=user,
        livestream=livestream,
        created_at=reaction_model.created_at,
    )


def fill_reaction_response(db: Session, reaction_model: ReactionModel) -> schemas_reaction.Reaction:
    """
    Hydrate one reaction with scalar lookups. Any failure along the way,
    including a missing related row, is reported as ``InternalError``.
    """
    try:
        user_model = crud_user.get_user(db, reaction_model.user_id)
        user = user_service.fill_user_response(db, user_model)

        livestream_model = crud_livestream.get_livestream(db, reaction_model.livestream_id)
        livestream = livestream_service.fill_livestream_response(db, livestream_model)
    except InternalError:
        raise
    except IsupipeError as e:
        raise InternalError(e.message) from e

    return _build_reaction(reaction_model, user, livestream)


def fill_reaction_responses(db: Session, reaction_models: Sequence[ReactionModel]) -> List[schemas_reaction.Reaction]:
    """
    Hydrate a batch of reactions without per-row queries.

    Issues one query each for livestreams, users, themes and icon hashes no
    matter how many reactions are passed in. Livestream owners are folded into
    the same user lookup as the reacting users. Output order matches input
    order. Nothing is returned unless every reaction resolves.
    """
    if not reaction_models:
        return []

    livestream_ids = {r.livestream_id for r in reaction_models}
    livestream_map = crud_livestream.get_livestreams_by_ids(db, livestream_ids)
    missing = livestream_ids - livestream_map.keys()
    if missing:
        raise InternalError(f"livestreams {sorted(missing)} not found")

    user_ids = {r.user_id for r in reaction_models}
    user_ids.update(ls.user_id for ls in livestream_map.values())
    user_map = user_service.fill_user_responses(db, user_ids)

    livestream_models = list(livestream_map.values())
    livestreams = livestream_service.fill_livestream_responses(db, livestream_models, owners=user_map)
    livestream_responses = {ls.id: ls for ls in livestreams}

    return [
        _build_reaction(r, user_map[r.user_id], livestream_responses[r.livestream_id])
        for r in reaction_models
    ]


def list_reactions(db: Session, livestream_id: int, limit: Optional[int] = None) -> List[schemas_reaction.Reaction]:
    try:
        reaction_models = crud_reaction.get_reactions_by_livestream(db, livestream_id, limit=limit)
    except InternalError as e:
        logger.error(f"Failed to get reactions for livestream {livestream_id}: {e}")
        raise InternalError(f"failed to get reactions: {e}") from e

    try:
        return fill_reaction_responses(db, reaction_models)
    except IsupipeError as e:
        logger.error(f"Failed to fill reactions for livestream {livestream_id}: {e}")
        raise InternalError(f"failed to fill reactions: {e}") from e


def create_reaction(db: Session, livestream_id: int, user_id: int, emoji_name: str) -> schemas_reaction.Reaction:
    """
    Insert a reaction owned by ``user_id`` and return it fully hydrated.

    The emoji name is stored verbatim. The re-read happens in the caller's
    transaction, so the new row is visible before commit.
    """
    try:
        reaction_model = crud_reaction.create_reaction(
            db,
            livestream_id=livestream_id,
            user_id=user_id,
            emoji_name=emoji_name,
            created_at=int(time.time()),
        )
    except InternalError as e:
        logger.error(f"Failed to insert reaction on livestream {livestream_id} by user {user_id}: {e}")
        raise InternalError(f"failed to insert reaction: {e}") from e

    logger.info(f"User {user_id} reacted {emoji_name!r} on livestream {livestream_id} (reaction {reaction_model.id})")

    try:
        return fill_reaction_response(db, reaction_model)
    except IsupipeError as e:
        logger.error(f"Failed to fill reaction {reaction_model.id}: {e}")
        raise InternalError(f"failed to fill reaction: {e}") from e
