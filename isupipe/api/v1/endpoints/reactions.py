from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List, Optional

from isupipe.core.dependencies import get_db, get_limit, get_livestream_id, verify_user_session
from isupipe.core.exceptions import IsupipeError
from isupipe.schemas import reaction as schemas_reaction
from isupipe.services import reaction_service

router = APIRouter()


def _commit(db: Session) -> None:
    try:
        db.commit()
    except SQLAlchemyError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"failed to commit: {e}")


# Dependencies resolve in declaration order: the session is checked first here.
@router.get("/{livestream_id}/reaction", response_model=List[schemas_reaction.Reaction])
def get_reactions(
    user_id: int = Depends(verify_user_session),
    livestream_id: int = Depends(get_livestream_id),
    limit: Optional[int] = Depends(get_limit),
    db: Session = Depends(get_db),
):
    """List reactions on a livestream, newest first."""
    try:
        reactions = reaction_service.list_reactions(db, livestream_id, limit=limit)
    except IsupipeError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

    _commit(db)
    return reactions


# The path id is rejected before the session is looked at.
@router.post("/{livestream_id}/reaction", response_model=schemas_reaction.Reaction, status_code=status.HTTP_201_CREATED)
def post_reaction(
    reaction: schemas_reaction.PostReactionRequest,
    livestream_id: int = Depends(get_livestream_id),
    user_id: int = Depends(verify_user_session),
    db: Session = Depends(get_db),
):
    """React on a livestream as the session user."""
    try:
        created = reaction_service.create_reaction(db, livestream_id, user_id, reaction.emoji_name)
    except IsupipeError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

    _commit(db)
    return created
