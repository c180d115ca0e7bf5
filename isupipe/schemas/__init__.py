from isupipe.schemas.user import Theme, User
from isupipe.schemas.livestream import Livestream
from isupipe.schemas.reaction import PostReactionRequest, Reaction
