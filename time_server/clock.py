from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable

Clock = Callable[[], datetime]


def zero_fill(value: int) -> str:
    """Left-pad single digit values with one zero."""
    return ("0" if value < 10 else "") + str(value)


@dataclass(frozen=True)
class TimeSnapshot:
    year: int
    month: str
    date: str
    hour: str
    minute: str

    @classmethod
    def from_datetime(cls, now: datetime) -> TimeSnapshot:
        return cls(
            year=now.year,
            month=zero_fill(now.month),
            date=zero_fill(now.day),
            hour=zero_fill(now.hour),
            minute=zero_fill(now.minute),
        )

    def to_dict(self) -> dict[str, int | str]:
        return {
            "year": self.year,
            "month": self.month,
            "date": self.date,
            "hour": self.hour,
            "minute": self.minute,
        }


def current_snapshot(clock: Clock | None = None) -> TimeSnapshot:
    now = (clock or datetime.now)()
    return TimeSnapshot.from_datetime(now)
