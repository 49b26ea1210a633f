"""
Submission Manager
==================

Caller-side handling around the scorer: extracting plain text from the rich
text editor's HTML, enforcing the minimum length and building the submission
record that is shown to the student.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Optional

from bs4 import BeautifulSoup

from writewise.modules.assessment.feedback import build_feedback_message
from writewise.modules.assessment.models import AssessmentResult

from .models import SubmissionTooShortError, WritingSubmission

logger = logging.getLogger(__name__)

DEFAULT_MIN_CHARS = 10


def html_to_text(html: str) -> str:
    """Return the text content of an HTML fragment"""
    if not html:
        return ""
    return BeautifulSoup(html, "html.parser").get_text()


def count_words(text: str) -> int:
    """Count whitespace-separated words, 0 for blank text"""
    stripped = (text or "").strip()
    if not stripped:
        return 0
    return len(stripped.split())


def validate_submission(text: str, min_chars: int = DEFAULT_MIN_CHARS) -> str:
    """Check the text is long enough to assess and return it unchanged"""
    if len((text or "").strip()) < min_chars:
        logger.warning(f"Rejected submission of {len((text or '').strip())} characters (minimum {min_chars})")
        raise SubmissionTooShortError(min_chars)
    return text


def build_submission(
    result: AssessmentResult,
    content: str,
    html_content: Optional[str] = None,
    user_id: Optional[str] = None,
    day_id: Optional[str] = None,
    assignment_id: Optional[str] = None,
    time_spent: int = 0,
    submitted_at: Optional[datetime] = None,
) -> WritingSubmission:
    """Create the submission record for an assessed text"""
    return WritingSubmission(
        id=str(uuid.uuid4()),
        user_id=user_id,
        day_id=day_id,
        assignment_id=assignment_id,
        content=content,
        html_content=html_content if html_content is not None else content,
        submitted_at=submitted_at or datetime.now(timezone.utc),
        score=result.score,
        cefr_level=result.cefr_level.value,
        feedback=build_feedback_message(result),
        word_count=count_words(content),
        time_spent=max(0, time_spent),
    )
