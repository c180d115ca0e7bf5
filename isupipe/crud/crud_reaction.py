from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from isupipe.core.exceptions import InternalError
from isupipe.models import Reaction

def get_reactions_by_livestream(db: Session, livestream_id: int, limit: Optional[int] = None) -> List[Reaction]:
    """
    Newest first. Rows sharing a created_at come back in whatever order the
    database returns them.
    """
    query = db.query(Reaction).filter(Reaction.livestream_id == livestream_id).order_by(Reaction.created_at.desc())
    if limit is not None:
        query = query.limit(limit)
    try:
        return query.all()
    except SQLAlchemyError as e:
        raise InternalError(str(e)) from e

def create_reaction(db: Session, livestream_id: int, user_id: int, emoji_name: str, created_at: int) -> Reaction:
    """Insert a reaction and flush so the new id is assigned. The caller owns the commit."""
    db_reaction = Reaction(
        user_id=user_id,
        livestream_id=livestream_id,
        emoji_name=emoji_name,
        created_at=created_at,
    )
    try:
        db.add(db_reaction)
        db.flush()
    except SQLAlchemyError as e:
        raise InternalError(str(e)) from e
    return db_reaction
