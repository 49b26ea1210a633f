"""
Assessment and assignment endpoints
"""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from writewise.modules.assessment.assessment_manager import get_assessment_manager
from writewise.modules.assessment.feedback import build_display_summary
from writewise.modules.assessment.profiles import SCORING_PROFILES
from writewise.modules.assignments.assignment_manager import get_assignment_manager
from writewise.modules.submissions.models import SubmissionError
from writewise.modules.submissions.submission_manager import build_submission, html_to_text, validate_submission
from writewise.settings import get_settings

logger = logging.getLogger(__name__)

assessment_router = APIRouter(prefix="/assessments", tags=["assessments"])
assignment_router = APIRouter(prefix="/assignments", tags=["assignments"])


class WritingSubmissionRequest(BaseModel):
    text: Optional[str] = None
    html_content: Optional[str] = None
    user_id: Optional[str] = None
    day_id: Optional[str] = None
    assignment_id: Optional[str] = None
    time_spent: int = Field(default=0, ge=0)


@assessment_router.post("/writing")
async def assess_writing(req: WritingSubmissionRequest):
    """Score a writing submission and build its submission record."""
    settings = get_settings()

    if req.html_content is not None:
        plain_text = html_to_text(req.html_content)
    else:
        plain_text = req.text or ""

    try:
        validate_submission(plain_text, settings.MIN_SUBMISSION_CHARS)
    except SubmissionError as e:
        raise HTTPException(status_code=400, detail=str(e))

    result = get_assessment_manager(settings.SCORING_PROFILE).assess_text(plain_text)
    submission = build_submission(
        result,
        content=plain_text,
        html_content=req.html_content,
        user_id=req.user_id,
        day_id=req.day_id,
        assignment_id=req.assignment_id,
        time_spent=req.time_spent,
    )

    logger.info(
        f"Assessment completed for day {req.day_id}: score={result.score} level={result.cefr_level.value} "
        f"words={result.word_count}"
    )

    return {
        "assessment": result.to_dict(),
        "display": build_display_summary(result).to_dict(),
        "submission": submission.to_dict(),
    }


@assessment_router.get("/profiles")
async def list_profiles():
    """List the scoring profiles and which one is active."""
    return {
        "active": get_settings().SCORING_PROFILE,
        "profiles": [profile.to_dict() for profile in SCORING_PROFILES.values()],
    }


@assignment_router.get("/{course_id}/{lesson_id}/{assignment_id}")
async def get_assignment(course_id: str, lesson_id: str, assignment_id: str):
    """Get assignment details, or the default writing task when unknown."""
    manager = get_assignment_manager()
    assignment = manager.get_assignment_details(course_id, lesson_id, assignment_id)
    return {
        **assignment.to_dict(),
        "timeLimitSeconds": assignment.time_limit_seconds,
        "found": manager.has_assignment(course_id, lesson_id, assignment_id),
    }
