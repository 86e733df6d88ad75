from accounts.domain.models import Actor, Profile
from accounts.domain.value_objects import Photo, PhotoKind, UserId

__all__ = [
    "Actor",
    "Profile",
    "Photo",
    "PhotoKind",
    "UserId",
]
