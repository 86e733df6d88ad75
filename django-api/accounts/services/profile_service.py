"""Profile service.

Owners read and update their own profile; the email is bound to the
account and never changes here.
"""

import logging
import uuid
from pathlib import PurePath

from accounts.domain import Actor, Profile, UserId
from accounts.domain.errors import ProfileNotFoundError
from accounts.domain.forms import ProfileUpdate
from accounts.stores.interfaces import PhotoStorage, ProfileStore
from common.domain.errors import ValidationError

logger = logging.getLogger(__name__)


class ProfileService:
    """Service for profile operations."""

    def __init__(self, store: ProfileStore) -> None:
        self._store = store

    def get_profile(self, user_id: UserId) -> Profile:
        """Return a user's profile.

        Raises:
            ProfileNotFoundError: If the user has no profile.
        """
        profile = self._store.get_profile(user_id)
        if profile is None:
            raise ProfileNotFoundError(user_id.value)
        return profile

    def update_profile(self, user_id: UserId, update: ProfileUpdate) -> Profile:
        """Validate and apply a partial update to the caller's own profile.

        Raises:
            ValidationError: If any provided field is out of range.
            ProfileNotFoundError: If the user has no profile.
        """
        changes = update.validate()
        self.get_profile(user_id)
        profile = self._store.update_profile(user_id, changes)
        logger.info(f"Profile {user_id.value} updated: {sorted(changes)}")
        return profile

    def actor_for(self, user_id: UserId) -> Actor:
        profile = self._store.get_profile(user_id)
        return Actor(user_id=user_id, is_admin=bool(profile and profile.is_admin))


class PhotoService:
    """Validates photo uploads and hands them to durable storage."""

    def __init__(self, storage: PhotoStorage, max_bytes: int) -> None:
        self._storage = storage
        self._max_bytes = max_bytes

    def upload(self, user_id: UserId, filename: str, content_type: str, size: int, content) -> str:
        """Store an image and return its URL.

        Raises:
            ValidationError: If the file is not an image or is too large.
            UpstreamError: If the storage backend fails.
        """
        if not (content_type or "").startswith("image/"):
            raise ValidationError.single("photo", "Only image files can be uploaded")
        if size > self._max_bytes:
            raise ValidationError.single(
                "photo", f"Photos must be at most {self._max_bytes // (1024 * 1024)} MB"
            )
        suffix = PurePath(filename).suffix.lower() or ".jpg"
        name = f"photos/{user_id.value}/{uuid.uuid4().hex}{suffix}"
        url = self._storage.save(name, content)
        logger.info(f"Photo uploaded for user {user_id.value}: {name}")
        return url
