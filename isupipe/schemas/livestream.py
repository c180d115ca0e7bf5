from pydantic import BaseModel

from isupipe.schemas.user import User

class Livestream(BaseModel):
    id: int
    owner: User
    title: str
    description: str
    playlist_url: str
    thumbnail_url: str
    start_at: int
    end_at: int
