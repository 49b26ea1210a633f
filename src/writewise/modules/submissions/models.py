"""
Models for writing submissions
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Optional


class SubmissionError(ValueError):
    """A submission that cannot be assessed"""


class SubmissionTooShortError(SubmissionError):
    """Submitted text is below the minimum length"""

    def __init__(self, min_chars: int):
        self.min_chars = min_chars
        super().__init__(f"Please write at least {min_chars} characters to submit.")


@dataclass
class WritingSubmission:
    """One scored writing submission"""

    id: str
    user_id: Optional[str]
    day_id: Optional[str]
    assignment_id: Optional[str]
    content: str  # plain text that was scored
    html_content: str
    submitted_at: datetime
    score: int
    cefr_level: str
    feedback: str
    word_count: int
    time_spent: int  # seconds

    def to_dict(self) -> Dict[str, object]:
        return {
            "id": self.id,
            "userId": self.user_id,
            "dayId": self.day_id,
            "assignmentId": self.assignment_id,
            "content": self.content,
            "htmlContent": self.html_content,
            "submittedAt": self.submitted_at.isoformat(),
            "score": self.score,
            "cefrLevel": self.cefr_level,
            "feedback": self.feedback,
            "wordCount": self.word_count,
            "timeSpent": self.time_spent,
        }
