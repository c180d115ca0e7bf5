from pydantic import BaseModel, ConfigDict
from typing import Optional

class Theme(BaseModel):
    id: int
    dark_mode: bool

    model_config = ConfigDict(from_attributes=True)

class User(BaseModel):
    id: int
    name: str
    display_name: Optional[str] = None
    description: Optional[str] = None
    theme: Theme
    icon_hash: str
