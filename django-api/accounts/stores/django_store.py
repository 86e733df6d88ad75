"""Django implementations of the account stores."""

import logging

from django.core.files.storage import default_storage
from django.db import transaction

from accounts import models
from accounts.domain import Photo, PhotoKind, Profile, UserId
from accounts.domain.models import merge_photos
from accounts.stores.interfaces import PhotoStorage, ProfileStore
from common.domain.errors import UpstreamError
from common.domain.values import Gender

logger = logging.getLogger(__name__)


def profile_to_domain(row: models.Profile) -> Profile:
    return Profile(
        id=UserId(row.pk),
        email=row.email,
        name=row.name,
        gender=Gender(row.gender) if row.gender else None,
        birth_year=row.birth_year,
        phone=row.phone,
        height=row.height,
        weight=row.weight,
        ideal_type=row.ideal_type,
        photos=tuple(
            Photo(url=item["url"], kind=PhotoKind(item["kind"])) for item in row.photos
        ),
        is_admin=row.is_admin,
        created_at=row.created_at,
    )


class DjangoProfileStore(ProfileStore):
    """Database-backed profile store using Django ORM."""

    def get_profile(self, user_id: UserId) -> Profile | None:
        row = models.Profile.objects.filter(pk=user_id.value).first()
        return profile_to_domain(row) if row else None

    def update_profile(self, user_id: UserId, changes: dict) -> Profile:
        with transaction.atomic():
            row = models.Profile.objects.select_for_update().get(pk=user_id.value)
            face = changes.pop("face_photos", None)
            body = changes.pop("body_photos", None)
            if face is not None or body is not None:
                current = profile_to_domain(row).photos
                row.photos = [
                    {"url": photo.url, "kind": photo.kind.value}
                    for photo in merge_photos(current, face=face, body=body)
                ]
            for field, value in changes.items():
                setattr(row, field, value.value if isinstance(value, Gender) else value)
            row.save()
        return profile_to_domain(row)


class DjangoPhotoStorage(PhotoStorage):
    """Photo storage backed by Django's configured default storage."""

    def save(self, name: str, content) -> str:
        try:
            stored_name = default_storage.save(name, content)
            return default_storage.url(stored_name)
        except OSError as e:
            logger.error(f"Photo storage failed for {name}: {e}", exc_info=True)
            raise UpstreamError("photo upload") from e
