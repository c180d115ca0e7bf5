from isupipe.models.user import User
from isupipe.models.theme import Theme
from isupipe.models.icon import Icon, IconHash
from isupipe.models.livestream import Livestream
from isupipe.models.reaction import Reaction
