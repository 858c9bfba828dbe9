"""Data classes for the study configuration and its derived values."""
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Optional

DEFAULT_EXAM_OFFSET_DAYS = 30
DEFAULT_SUBJECTS = ("Mathematics", "Physics")
DEFAULT_WEAK_TOPICS = ("Calculus", "Quantum Mechanics")
DEFAULT_DAILY_HOURS = 4

FALLBACK_FOCUS = "your core subjects"


class ConfigurationError(ValueError):
    """Raised when a configuration value cannot be interpreted."""


def parse_exam_date(value) -> date:
    """Return a calendar date from a date object or an ISO ``YYYY-MM-DD`` string."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError:
            raise ConfigurationError(f"Invalid exam date: {value!r} (expected YYYY-MM-DD)") from None
    raise ConfigurationError(f"Invalid exam date: {value!r}")


def parse_daily_hours(value) -> int:
    """Return daily hours as an int. The range is left to the caller."""
    if isinstance(value, bool):
        raise ConfigurationError(f"Invalid daily hours: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise ConfigurationError(f"Invalid daily hours: {value!r}")


@dataclass
class StudyConfiguration:
    exam_date: date
    subjects: list[str] = field(default_factory=list)
    weak_topics: list[str] = field(default_factory=list)
    daily_hours: int = DEFAULT_DAILY_HOURS

    @classmethod
    def default(cls, today: Optional[date] = None) -> "StudyConfiguration":
        today = today or date.today()
        return cls(
            exam_date=today + timedelta(days=DEFAULT_EXAM_OFFSET_DAYS),
            subjects=list(DEFAULT_SUBJECTS),
            weak_topics=list(DEFAULT_WEAK_TOPICS),
            daily_hours=DEFAULT_DAILY_HOURS,
        )

    def to_dict(self) -> dict:
        return {
            "exam_date": self.exam_date.isoformat(),
            "subjects": list(self.subjects),
            "weak_topics": list(self.weak_topics),
            "daily_hours": self.daily_hours,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "StudyConfiguration":
        """Build a configuration from the flat record produced by ``to_dict``."""
        try:
            exam_date = data["exam_date"]
        except KeyError:
            raise ConfigurationError("Missing exam_date") from None
        return cls(
            exam_date=parse_exam_date(exam_date),
            subjects=[str(s) for s in data.get("subjects", [])],
            weak_topics=[str(t) for t in data.get("weak_topics", [])],
            daily_hours=parse_daily_hours(data.get("daily_hours", DEFAULT_DAILY_HOURS)),
        )


@dataclass
class RepetitionInterval:
    offset_days: int
    date: date


@dataclass
class RepetitionItem:
    topic: str
    intervals: list[RepetitionInterval] = field(default_factory=list)


@dataclass
class PriorityFocus:
    topic: Optional[str]
    recommended_hours: int

    @property
    def display_topic(self) -> str:
        return self.topic if self.topic is not None else FALLBACK_FOCUS
