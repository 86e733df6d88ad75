"""Domain models for accounts.

Django ORM models are in accounts/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import date, datetime

from accounts.domain.value_objects import Photo, PhotoKind, UserId
from common.domain.values import Gender


@dataclass(frozen=True)
class Profile:
    """Reusable personal attributes of a user, used to prefill applications."""

    id: UserId
    email: str
    name: str
    gender: Gender | None
    birth_year: int | None
    phone: str
    height: int | None
    weight: int | None
    ideal_type: str
    photos: tuple[Photo, ...]
    is_admin: bool
    created_at: datetime

    @property
    def photo_urls(self) -> tuple[str, ...]:
        return tuple(photo.url for photo in self.photos)

    def photos_of(self, kind: PhotoKind) -> tuple[Photo, ...]:
        return tuple(photo for photo in self.photos if photo.kind is kind)

    def age_on(self, today: date) -> int | None:
        if self.birth_year is None:
            return None
        return today.year - self.birth_year


def merge_photos(
    current: tuple[Photo, ...],
    face: tuple[Photo, ...] | None = None,
    body: tuple[Photo, ...] | None = None,
) -> tuple[Photo, ...]:
    """Replace the photos of each given kind; face photos come first."""
    if face is None:
        face = tuple(photo for photo in current if photo.kind is PhotoKind.FACE)
    if body is None:
        body = tuple(photo for photo in current if photo.kind is PhotoKind.BODY)
    return face + body


@dataclass(frozen=True)
class Actor:
    """The authenticated caller of a service operation."""

    user_id: UserId
    is_admin: bool = False
