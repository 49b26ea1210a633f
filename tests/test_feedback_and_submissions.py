"""
Tests for results display, feedback messages and submission handling.
"""

from datetime import datetime, timezone

import pytest

from writewise.modules.assessment.feedback import (
    build_display_summary,
    build_feedback_message,
    display_level_for,
)
from writewise.modules.assessment.feedback_data import CEFR_DESCRIPTORS
from writewise.modules.assessment.models import AssessmentResult, CEFRLevel, SubScores
from writewise.modules.submissions.models import SubmissionError, SubmissionTooShortError
from writewise.modules.submissions.submission_manager import (
    build_submission,
    count_words,
    html_to_text,
    validate_submission,
)


def make_result(score=72, level=CEFRLevel.B1, confidence=0.85, sublevels=None):
    return AssessmentResult(
        score=score,
        cefr_level=level,
        sublevels=sublevels or SubScores(70, 75, 70, 75, 60),
        errors=(),
        overview=(),
        suggestions=(),
        confidence_level=confidence,
        word_count=42,
    )


@pytest.mark.parametrize(
    "average,expected",
    [(100, "C1-C2"), (80, "C1-C2"), (79, "B2"), (75, "B2"), (70, "B1"), (65, "A2"), (64, "A1"), (0, "A1")],
)
def test_display_level_scale(average, expected):
    assert display_level_for(average) == expected


def test_display_summary_excludes_task_achievement():
    summary = build_display_summary(make_result())

    # (70 + 75 + 70 + 75) / 4 = 72.5
    assert summary.average_score == 73
    assert summary.display_level == "B1"
    assert summary.passed is True
    assert summary.confidence_percent == 85
    assert summary.descriptor == CEFR_DESCRIPTORS[CEFRLevel.B1]


def test_display_summary_failing_without_confidence():
    summary = build_display_summary(make_result(confidence=None, sublevels=SubScores(40, 60, 50, 40, 100)))

    assert summary.average_score == 48
    assert summary.passed is False
    assert summary.confidence_percent is None
    assert summary.to_dict()["confidencePercent"] is None


def test_display_summary_pass_mark_is_inclusive():
    summary = build_display_summary(make_result(sublevels=SubScores(60, 60, 60, 60, 0)))
    assert summary.passed is True


@pytest.mark.parametrize(
    "score,closing",
    [(95, "Excellent work!"), (80, "Excellent work!"), (79, "Good job!"), (70, "Good job!"), (69, "Keep practicing!")],
)
def test_feedback_message(score, closing):
    message = build_feedback_message(make_result(score=score, level=CEFRLevel.B2))
    assert message == f"Your writing demonstrates B2 level proficiency. {closing}"


def test_html_to_text_strips_markup():
    html = "<p>Hello <strong>world</strong></p><ul><li>one</li><li>two</li></ul>"
    assert html_to_text(html) == "Hello worldonetwo"


def test_html_to_text_handles_entities_and_empty():
    assert html_to_text("<p>Fish &amp; chips</p>") == "Fish & chips"
    assert html_to_text("") == ""
    assert html_to_text(None) == ""


@pytest.mark.parametrize("text,expected", [("", 0), ("   ", 0), ("one", 1), ("  one two\nthree\t four ", 4)])
def test_count_words(text, expected):
    assert count_words(text) == expected


def test_validate_submission_accepts_long_enough_text():
    assert validate_submission("This is long enough.") == "This is long enough."


def test_validate_submission_rejects_short_text():
    with pytest.raises(SubmissionTooShortError) as exc_info:
        validate_submission("   too short   ")

    assert exc_info.value.min_chars == 10
    assert str(exc_info.value) == "Please write at least 10 characters to submit."
    assert isinstance(exc_info.value, SubmissionError)


def test_validate_submission_custom_minimum():
    with pytest.raises(SubmissionTooShortError):
        validate_submission("abcdefghijklmnopqrst", min_chars=25)
    validate_submission("abcdefghij", min_chars=5)


def test_build_submission_record():
    submitted_at = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)
    submission = build_submission(
        make_result(score=82, level=CEFRLevel.C1),
        content="My essay text here.",
        user_id="student-1",
        day_id="day-2",
        assignment_id="writing-assignment-1",
        time_spent=300,
        submitted_at=submitted_at,
    )

    assert submission.score == 82
    assert submission.cefr_level == "C1"
    assert submission.word_count == 4
    assert submission.html_content == "My essay text here."
    assert submission.feedback == "Your writing demonstrates C1 level proficiency. Excellent work!"

    data = submission.to_dict()
    assert data["submittedAt"] == "2024-05-01T12:30:00+00:00"
    assert data["userId"] == "student-1"
    assert data["dayId"] == "day-2"
    assert data["timeSpent"] == 300


def test_build_submission_defaults():
    first = build_submission(make_result(), content="Some words", html_content="<p>Some words</p>", time_spent=-5)
    second = build_submission(make_result(), content="Some words")

    assert first.id != second.id
    assert first.html_content == "<p>Some words</p>"
    assert first.time_spent == 0
    assert first.submitted_at.tzinfo is not None
