"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from datetime import time
from enum import Enum
from typing import Self
from uuid import UUID



@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Money:
    """Whole-won price; the currency has no minor unit."""

    amount: int

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount:,}"


@dataclass(frozen=True)
class Capacity:
    """Non-negative integer representing capacity."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Capacity cannot be negative")


class TicketTier(Enum):
    STANDARD = "standard"
    PREMIUM = "premium"


@dataclass(frozen=True)
class Pricing:
    """Ticket prices per gender and tier."""

    male_standard: Money
    male_premium: Money
    female_standard: Money
    female_premium: Money


@dataclass(frozen=True)
class TimePart:
    """A named slot of an event, e.g. 1부 20:00-23:00.

    ``ends`` may be earlier than ``starts`` when the part runs past midnight.
    """

    label: str
    starts: time
    ends: time

    def __post_init__(self) -> None:
        if not self.label.strip():
            raise ValueError("Time part label cannot be empty")

    def __str__(self) -> str:
        return f"{self.label} {self.starts:%H:%M}-{self.ends:%H:%M}"
