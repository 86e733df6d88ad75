"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from accounts.domain import Profile, UserId


class ProfileStore(ABC):
    """Interface for profile persistence operations."""

    @abstractmethod
    def get_profile(self, user_id: UserId) -> Profile | None:
        """Return the profile for a user, or None if it does not exist."""
        ...

    @abstractmethod
    def update_profile(self, user_id: UserId, changes: dict) -> Profile:
        """Apply validated changes and return the updated profile.

        ``face_photos``/``body_photos`` replace the photos of that kind,
        keeping face photos ahead of body photos.
        """
        ...


class PhotoStorage(ABC):
    """Interface for durable photo storage."""

    @abstractmethod
    def save(self, name: str, content) -> str:
        """Store the file and return a stable, publicly fetchable URL."""
        ...
