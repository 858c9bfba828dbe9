# tests/test_dashboard.py
from datetime import date, timedelta

from study_flow.dashboard import (
    build_summary, get_readiness_color, get_readiness_label, get_review_rows,
)
from study_flow.models import StudyConfiguration
from study_flow.schedule import repetition_schedule


def test_readiness_label():
    assert get_readiness_label(85) == "READY"
    assert get_readiness_label(70) == "LIKELY"
    assert get_readiness_label(55) == "NEEDS WORK"
    assert get_readiness_label(40) == "NOT READY"


def test_readiness_color():
    assert get_readiness_color(100) == "green"
    assert get_readiness_color(65) == "yellow"
    assert get_readiness_color(50) == "dark_orange"
    assert get_readiness_color(0) == "red"


def test_summary_for_default_config(store, today):
    summary = build_summary(store.config, today)
    assert summary["days_remaining"] == 30
    assert summary["readiness_score"] == 65
    assert summary["readiness_label"] == "LIKELY"
    assert summary["weak_topic_count"] == 2
    assert summary["subject_count"] == 2
    assert summary["priority_focus"].topic == "Calculus"
    assert summary["priority_focus"].recommended_hours == 2
    assert summary["next_mock_test"] == date(2024, 1, 7)
    assert len(summary["schedule"]) == 2


def test_summary_recomputes_after_mutation(store, today):
    before = build_summary(store.config, today)
    store.remove_weak_topic(0)
    store.remove_weak_topic(0)
    after = build_summary(store.config, today)
    assert before["readiness_score"] == 65
    assert after["readiness_score"] == 75
    assert after["schedule"] == []
    assert after["priority_focus"].topic is None


def test_summary_with_past_exam(today):
    config = StudyConfiguration(today - timedelta(days=3), [], ["A"] * 12, 4)
    summary = build_summary(config, today)
    assert summary["days_remaining"] == 0
    assert summary["readiness_score"] == 0
    assert summary["readiness_label"] == "NOT READY"


def test_review_rows_mark_passed(today):
    schedule = repetition_schedule(["Calculus"], today)
    rows = get_review_rows(schedule, today + timedelta(days=5))
    assert [r["offset_days"] for r in rows] == [1, 3, 7, 14, 30]
    # Jan 2 and Jan 4 are before Jan 6
    assert [r["passed"] for r in rows] == [True, True, False, False, False]
    assert all(r["topic"] == "Calculus" for r in rows)


def test_review_rows_empty_schedule(today):
    assert get_review_rows([], today) == []
