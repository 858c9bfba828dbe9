"""Tests for data model classes."""
from datetime import date, datetime

import pytest

from study_flow.models import (
    ConfigurationError, PriorityFocus, RepetitionItem, StudyConfiguration,
    parse_daily_hours, parse_exam_date,
)


def test_default_configuration(today):
    config = StudyConfiguration.default(today)
    assert config.exam_date == date(2024, 1, 31)
    assert config.subjects == ["Mathematics", "Physics"]
    assert config.weak_topics == ["Calculus", "Quantum Mechanics"]
    assert config.daily_hours == 4


def test_default_lists_are_not_shared(today):
    a = StudyConfiguration.default(today)
    b = StudyConfiguration.default(today)
    a.subjects.append("Chemistry")
    assert b.subjects == ["Mathematics", "Physics"]


def test_to_dict_flat_record():
    config = StudyConfiguration(date(2024, 6, 1), ["Biology"], ["Genetics"], 6)
    assert config.to_dict() == {
        "exam_date": "2024-06-01",
        "subjects": ["Biology"],
        "weak_topics": ["Genetics"],
        "daily_hours": 6,
    }


def test_from_dict_parses_record():
    config = StudyConfiguration.from_dict({
        "exam_date": "2024-06-01",
        "subjects": ["Biology", "Biology"],
        "weak_topics": [],
        "daily_hours": "6",
    })
    assert config.exam_date == date(2024, 6, 1)
    assert config.subjects == ["Biology", "Biology"]
    assert config.weak_topics == []
    assert config.daily_hours == 6


def test_from_dict_missing_date():
    with pytest.raises(ConfigurationError):
        StudyConfiguration.from_dict({"subjects": []})


def test_from_dict_bad_date():
    with pytest.raises(ConfigurationError):
        StudyConfiguration.from_dict({"exam_date": "next tuesday"})


def test_parse_exam_date_accepts_dates_and_strings():
    assert parse_exam_date(date(2024, 2, 29)) == date(2024, 2, 29)
    assert parse_exam_date(datetime(2024, 2, 29, 23, 59)) == date(2024, 2, 29)
    assert parse_exam_date(" 2024-02-29 ") == date(2024, 2, 29)


@pytest.mark.parametrize("value", ["2024-02-30", "", None, 20240101])
def test_parse_exam_date_rejects_garbage(value):
    with pytest.raises(ConfigurationError):
        parse_exam_date(value)


def test_parse_daily_hours():
    assert parse_daily_hours(4) == 4
    assert parse_daily_hours("12") == 12
    assert parse_daily_hours(3.0) == 3
    # Range is the caller's concern
    assert parse_daily_hours(0) == 0
    assert parse_daily_hours(-2) == -2


@pytest.mark.parametrize("value", ["four", 2.5, True, None])
def test_parse_daily_hours_rejects_non_integers(value):
    with pytest.raises(ConfigurationError):
        parse_daily_hours(value)


def test_repetition_item_defaults():
    item = RepetitionItem(topic="Optics")
    assert item.intervals == []


def test_priority_focus_display_topic():
    assert PriorityFocus(topic="Calculus", recommended_hours=2).display_topic == "Calculus"
    assert PriorityFocus(topic=None, recommended_hours=2).display_topic == "your core subjects"
