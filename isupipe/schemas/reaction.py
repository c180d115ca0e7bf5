from pydantic import BaseModel

from isupipe.schemas.livestream import Livestream
from isupipe.schemas.user import User

class PostReactionRequest(BaseModel):
    emoji_name: str

class Reaction(BaseModel):
    id: int
    emoji_name: str
    user: User
    livestream: Livestream
    created_at: int
