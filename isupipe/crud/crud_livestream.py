from typing import Dict, Iterable

from sqlalchemy.orm import Session

from isupipe.crud.base import get_by_id, get_by_ids
from isupipe.models import Livestream

def get_livestream(db: Session, livestream_id: int) -> Livestream:
    return get_by_id(db, Livestream, livestream_id)

def get_livestreams_by_ids(db: Session, livestream_ids: Iterable[int]) -> Dict[int, Livestream]:
    return get_by_ids(db, Livestream, livestream_ids)
