"""
Data models for writing assignments
"""

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class WritingAssignment:
    """A writing task shown to the student before they start"""

    title: str
    prompt: str
    prompt_details: Optional[str] = None
    word_count: Optional[int] = None  # target words
    time_limit: Optional[int] = None  # minutes

    @property
    def time_limit_seconds(self) -> Optional[int]:
        if self.time_limit is None:
            return None
        return self.time_limit * 60

    def to_dict(self) -> Dict[str, object]:
        return {
            "title": self.title,
            "prompt": self.prompt,
            "promptDetails": self.prompt_details,
            "wordCount": self.word_count,
            "timeLimit": self.time_limit,
        }
