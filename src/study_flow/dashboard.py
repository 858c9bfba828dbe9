"""Readiness dashboard labels and summary."""
from datetime import date
from typing import Optional

from study_flow.models import RepetitionItem, StudyConfiguration
from study_flow.schedule import (
    days_remaining, is_interval_passed, next_mock_test_date, priority_focus,
    readiness_score, repetition_schedule,
)


def get_readiness_label(score: float) -> str:
    if score >= 80:
        return "READY"
    elif score >= 65:
        return "LIKELY"
    elif score >= 50:
        return "NEEDS WORK"
    return "NOT READY"


def get_readiness_color(score: float) -> str:
    if score >= 80:
        return "green"
    elif score >= 65:
        return "yellow"
    elif score >= 50:
        return "dark_orange"
    return "red"


def build_summary(config: StudyConfiguration, today: Optional[date] = None) -> dict:
    """Recompute every derived value from the configuration."""
    today = today or date.today()
    days_left = days_remaining(config.exam_date, today)
    score = readiness_score(days_left, len(config.weak_topics))
    return {
        "days_remaining": days_left,
        "readiness_score": score,
        "readiness_label": get_readiness_label(score),
        "readiness_color": get_readiness_color(score),
        "schedule": repetition_schedule(config.weak_topics, today),
        "priority_focus": priority_focus(config.weak_topics, config.daily_hours),
        "next_mock_test": next_mock_test_date(today),
        "weak_topic_count": len(config.weak_topics),
        "subject_count": len(config.subjects),
    }


def get_review_rows(schedule: list[RepetitionItem], today: Optional[date] = None) -> list[dict]:
    today = today or date.today()
    return [
        {
            "topic": item.topic,
            "offset_days": interval.offset_days,
            "date": interval.date,
            "passed": is_interval_passed(interval, today),
        }
        for item in schedule
        for interval in item.intervals
    ]
