"""Domain primitives for accounts and profiles."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class UserId:
    """Identifier shared by the auth user and its profile."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 1:
            raise ValueError("UserId must be positive")


class PhotoKind(Enum):
    FACE = "face"
    BODY = "body"


@dataclass(frozen=True)
class Photo:
    """A stored photo reference and the slot it was uploaded into."""

    url: str
    kind: PhotoKind

    def __post_init__(self) -> None:
        if not self.url:
            raise ValueError("Photo url cannot be empty")
