"""Profile update input and its validation rules."""

from dataclasses import dataclass

from accounts.domain.value_objects import Photo, PhotoKind
from common.domain.errors import FieldErrors
from common.domain.values import Gender

BIRTH_YEAR_RANGE = (1950, 2010)
HEIGHT_RANGE = (100, 250)
WEIGHT_RANGE = (30, 200)
MAX_PHOTOS_PER_KIND = 2


@dataclass(frozen=True)
class ProfileUpdate:
    """Partial profile update. ``None`` leaves the stored value unchanged."""

    name: str | None = None
    gender: str | None = None
    birth_year: int | None = None
    phone: str | None = None
    height: int | None = None
    weight: int | None = None
    ideal_type: str | None = None
    face_photos: tuple[str, ...] | None = None
    body_photos: tuple[str, ...] | None = None

    def validate(self) -> dict:
        """Return the normalized changes, or raise ValidationError."""
        errors = FieldErrors()
        changes: dict = {}

        if self.name is not None:
            if not self.name.strip():
                errors.add("name", "Name is required")
            changes["name"] = self.name.strip()

        if self.gender is not None:
            try:
                changes["gender"] = Gender(self.gender)
            except ValueError:
                errors.add("gender", "Gender must be male or female")

        for field, (low, high) in (
            ("birth_year", BIRTH_YEAR_RANGE),
            ("height", HEIGHT_RANGE),
            ("weight", WEIGHT_RANGE),
        ):
            value = getattr(self, field)
            if value is None:
                continue
            if not low <= value <= high:
                errors.add(field, f"Must be between {low} and {high}")
            changes[field] = value

        if self.phone is not None:
            changes["phone"] = self.phone.strip()
        if self.ideal_type is not None:
            changes["ideal_type"] = self.ideal_type.strip()

        for field, kind in (("face_photos", PhotoKind.FACE), ("body_photos", PhotoKind.BODY)):
            urls = getattr(self, field)
            if urls is None:
                continue
            if len(urls) > MAX_PHOTOS_PER_KIND:
                errors.add(field, f"At most {MAX_PHOTOS_PER_KIND} photos allowed")
            if any(not url for url in urls):
                errors.add(field, "Photo reference cannot be empty")
            else:
                changes[field] = tuple(Photo(url=url, kind=kind) for url in urls)

        errors.raise_if_any()
        return changes
