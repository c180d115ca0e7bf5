"""
Generic row loaders.

``get_by_id`` expects exactly one row and raises ``NotFoundError`` otherwise;
``get_by_ids`` issues a single IN query and returns whatever rows exist,
keyed by identifier. Callers decide what a missing key means.
"""
import logging
from typing import Dict, Iterable, Optional, Type, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from isupipe.core.exceptions import InternalError, NotFoundError

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType")


def get_by_id(db: Session, model: Type[ModelType], id_: int, key: Optional[str] = None) -> ModelType:
    column = getattr(model, key or "id")
    try:
        row = db.query(model).filter(column == id_).first()
    except SQLAlchemyError as e:
        logger.error(f"Failed to load {model.__tablename__} where {column.key}={id_}: {e}")
        raise InternalError(f"failed to get {model.__tablename__}: {e}") from e
    if row is None:
        raise NotFoundError(f"{model.__tablename__} with {column.key}={id_} not found")
    return row


def get_by_ids(db: Session, model: Type[ModelType], ids: Iterable[int], key: Optional[str] = None) -> Dict[int, ModelType]:
    column = getattr(model, key or "id")
    distinct_ids = sorted(set(ids))
    if not distinct_ids:
        return {}
    try:
        rows = db.query(model).filter(column.in_(distinct_ids)).all()
    except SQLAlchemyError as e:
        logger.error(f"Failed to bulk load {model.__tablename__} ({len(distinct_ids)} ids): {e}")
        raise InternalError(f"failed to get {model.__tablename__}: {e}") from e
    return {getattr(row, column.key): row for row in rows}
