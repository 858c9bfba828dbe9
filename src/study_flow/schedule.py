"""Countdown, readiness and spaced repetition scheduling."""
import math
from datetime import date, timedelta
from typing import Optional

from study_flow.models import PriorityFocus, RepetitionInterval, RepetitionItem

REVIEW_OFFSETS = (1, 3, 7, 14, 30)

BASE_READINESS = 50
TOPIC_PENALTY = 5
MAX_TIME_BONUS = 50
FULL_BONUS_DAYS = 60
FOCUS_SHARE = 0.4


def _today(today: Optional[date]) -> date:
    return today if today is not None else date.today()


def days_remaining(exam_date: date, today: Optional[date] = None) -> int:
    """Whole calendar days until the exam, never negative."""
    return max(0, (exam_date - _today(today)).days)


def readiness_score(days_left: int, weak_topic_count: int) -> int:
    """Heuristic readiness in [0, 100].

    Starts from a neutral 50, subtracts 5 per weak topic (uncapped) and adds
    a time bonus that grows linearly to 50 at 60 days out.
    """
    topic_penalty = weak_topic_count * TOPIC_PENALTY
    time_bonus = min(MAX_TIME_BONUS, (days_left / FULL_BONUS_DAYS) * MAX_TIME_BONUS)
    score = max(0, min(100, BASE_READINESS - topic_penalty + time_bonus))
    # Half up, not banker's rounding: 52.5 -> 53
    return math.floor(score + 0.5)


def repetition_schedule(weak_topics: list[str], today: Optional[date] = None) -> list[RepetitionItem]:
    """Review ladder per weak topic, shifted later by the topic's position."""
    today = _today(today)
    return [
        RepetitionItem(
            topic=topic,
            intervals=[
                RepetitionInterval(offset_days=offset, date=today + timedelta(days=offset + index))
                for offset in REVIEW_OFFSETS
            ],
        )
        for index, topic in enumerate(weak_topics)
    ]


def is_interval_passed(interval: RepetitionInterval, today: Optional[date] = None) -> bool:
    return _today(today) > interval.date


def priority_focus(weak_topics: list[str], daily_hours: int) -> PriorityFocus:
    return PriorityFocus(
        topic=weak_topics[0] if weak_topics else None,
        recommended_hours=math.ceil(daily_hours * FOCUS_SHARE),
    )


def weekday_index(day: date) -> int:
    """Day of week with Sunday as 0."""
    return day.isoweekday() % 7


def next_mock_test_date(today: Optional[date] = None) -> date:
    """The coming Sunday. A Sunday maps to the one a week later."""
    today = _today(today)
    return today + timedelta(days=7 - weekday_index(today))
