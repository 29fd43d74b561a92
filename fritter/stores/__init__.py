from .users import UserCollection
from .freets import FreetCollection
from .quotes import QuoteCollection
from .likes import LikeCollection, POST_TYPES
from .fritforms import FritFormCollection, split_fields

__all__ = [
    "UserCollection",
    "FreetCollection",
    "QuoteCollection",
    "LikeCollection",
    "POST_TYPES",
    "FritFormCollection",
    "split_fields",
]
