"""Read-only report shapes for administrators."""

from dataclasses import dataclass
from datetime import datetime

from applications.domain import Application
from events.domain import Event, Headcount

EXPORT_HEADERS = ("Name", "Gender", "Age", "Phone", "Height", "Weight", "Status", "Applied At")


@dataclass(frozen=True)
class ExportRow:
    """One applicant as it appears in the spreadsheet export."""

    name: str
    gender: str
    age: int
    phone: str
    height: int
    weight: int
    status: str
    applied_at: datetime

    @classmethod
    def from_application(cls, application: Application) -> "ExportRow":
        snapshot = application.form_snapshot
        return cls(
            name=snapshot.name,
            gender=snapshot.gender.value,
            age=snapshot.age,
            phone=snapshot.phone,
            height=snapshot.height,
            weight=snapshot.weight,
            status=application.status.value,
            applied_at=application.applied_at,
        )


@dataclass(frozen=True)
class EventExport:
    event: Event
    rows: list[ExportRow]

    @property
    def filename(self) -> str:
        return f"{self.event.title or 'event'}_applications.csv"


@dataclass(frozen=True)
class EventSummary:
    """Confirmed seats against capacity; ``total_applications`` counts every status."""

    event: Event
    headcount: Headcount
    total_applications: int

    @property
    def confirmed_male(self) -> int:
        return self.headcount.confirmed_male

    @property
    def confirmed_female(self) -> int:
        return self.headcount.confirmed_female

    @property
    def total_confirmed(self) -> int:
        return self.headcount.total_confirmed

    @property
    def capacity_male(self) -> int:
        return self.event.capacity_male.value

    @property
    def capacity_female(self) -> int:
        return self.event.capacity_female.value
