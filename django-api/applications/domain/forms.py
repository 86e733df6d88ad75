"""The application submission form.

One canonical schema: age 18-80 and 1-3 photos.
"""

from dataclasses import dataclass
from datetime import date

from accounts.domain import Profile
from applications.domain.models import FormSnapshot, ParticipationType
from common.domain.errors import FieldErrors
from common.domain.values import Gender
from events.domain import TicketTier

AGE_RANGE = (18, 80)
HEIGHT_RANGE = (100, 250)
WEIGHT_RANGE = (30, 200)
PHOTO_RANGE = (1, 3)


@dataclass(frozen=True)
class ApplicationForm:
    """Raw submission input, validated into a FormSnapshot."""

    name: str = ""
    gender: str | None = None
    age: int | None = None
    phone: str = ""
    height: int | None = None
    weight: int | None = None
    ideal_type: str = ""
    photos: tuple[str, ...] = ()
    consent: bool = False
    participation_type: str | None = None
    ticket_tier: str | None = None

    def validate(self) -> FormSnapshot:
        """Return the snapshot to store, or raise ValidationError with every failing field."""
        errors = FieldErrors()

        if not self.name.strip():
            errors.add("name", "Name is required")

        gender = None
        try:
            gender = Gender(self.gender)
        except ValueError:
            errors.add("gender", "Select male or female")

        for field, (low, high), unit in (
            ("age", AGE_RANGE, ""),
            ("height", HEIGHT_RANGE, "cm"),
            ("weight", WEIGHT_RANGE, "kg"),
        ):
            value = getattr(self, field)
            if value is None:
                errors.add(field, f"{field.capitalize()} is required")
            elif not low <= value <= high:
                errors.add(field, f"{field.capitalize()} must be between {low}{unit} and {high}{unit}")

        if not self.phone.strip():
            errors.add("phone", "Phone number is required")
        if not self.ideal_type.strip():
            errors.add("ideal_type", "Tell us about your ideal type")
        if self.consent is not True:
            errors.add("consent", "You must agree to the collection and use of personal data")

        low, high = PHOTO_RANGE
        if len(self.photos) < low:
            errors.add("photos", f"Upload at least {low} photo")
        elif len(self.photos) > high:
            errors.add("photos", f"Upload at most {high} photos")
        if any(not photo for photo in self.photos):
            errors.add("photos", "Photo reference cannot be empty")

        participation_type = None
        if self.participation_type:
            try:
                participation_type = ParticipationType(self.participation_type)
            except ValueError:
                errors.add("participation_type", "Choose part1, part2 or both")

        ticket_tier = None
        if self.ticket_tier:
            try:
                ticket_tier = TicketTier(self.ticket_tier)
            except ValueError:
                errors.add("ticket_tier", "Choose standard or premium")

        errors.raise_if_any()
        return FormSnapshot(
            name=self.name.strip(),
            gender=gender,
            age=self.age,
            phone=self.phone.strip(),
            height=self.height,
            weight=self.weight,
            photos=tuple(self.photos),
            ideal_type=self.ideal_type.strip(),
            participation_type=participation_type,
            ticket_tier=ticket_tier,
        )


def prefill(profile: Profile, today: date) -> ApplicationForm:
    """Start a form from the profile. Consent is never carried over."""
    return ApplicationForm(
        name=profile.name,
        gender=profile.gender.value if profile.gender else None,
        age=profile.age_on(today),
        phone=profile.phone,
        height=profile.height,
        weight=profile.weight,
        ideal_type=profile.ideal_type,
        photos=profile.photo_urls[: PHOTO_RANGE[1]],
        consent=False,
    )
