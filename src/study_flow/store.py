"""In-memory holder for the study configuration."""
import logging
from datetime import date
from typing import Optional

from study_flow.models import StudyConfiguration, parse_daily_hours, parse_exam_date

logger = logging.getLogger(__name__)


def _append_trimmed(items: list[str], name: str) -> bool:
    name = name.strip()
    if not name:
        return False
    items.append(name)
    return True


def _remove_at(items: list[str], index: int) -> bool:
    if not 0 <= index < len(items):
        logger.debug("Ignoring removal at index %s (size %s)", index, len(items))
        return False
    del items[index]
    return True


class ConfigStore:
    """Single owner of the current configuration and plan request state."""

    def __init__(self, config: Optional[StudyConfiguration] = None, today: Optional[date] = None):
        self.config = config or StudyConfiguration.default(today)
        self.plan_text: Optional[str] = None
        self.is_generating = False

    def set_exam_date(self, value) -> None:
        self.config.exam_date = parse_exam_date(value)

    def add_subject(self, name: str) -> bool:
        return _append_trimmed(self.config.subjects, name)

    def remove_subject(self, index: int) -> bool:
        return _remove_at(self.config.subjects, index)

    def add_weak_topic(self, name: str) -> bool:
        return _append_trimmed(self.config.weak_topics, name)

    def remove_weak_topic(self, index: int) -> bool:
        return _remove_at(self.config.weak_topics, index)

    def set_daily_hours(self, value) -> None:
        self.config.daily_hours = parse_daily_hours(value)
