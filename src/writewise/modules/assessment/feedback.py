"""
Feedback and results-display helpers built on top of an AssessmentResult
"""

from dataclasses import dataclass
from typing import Dict, Optional

from .analyzers import round_half_up
from .feedback_data import CEFR_DESCRIPTORS, DISPLAY_SCALE, PASS_MARK
from .models import AssessmentResult


@dataclass(frozen=True)
class DisplaySummary:
    """What the results page shows above the detailed breakdown"""

    average_score: int
    display_level: str
    passed: bool
    confidence_percent: Optional[int]
    descriptor: str

    def to_dict(self) -> Dict[str, object]:
        return {
            "averageScore": self.average_score,
            "displayLevel": self.display_level,
            "passed": self.passed,
            "confidencePercent": self.confidence_percent,
            "descriptor": self.descriptor,
        }


def display_level_for(average_score: int) -> str:
    """Map an average score onto the interpretation scale (A1 .. C1-C2)"""
    for minimum, label in DISPLAY_SCALE:
        if average_score >= minimum:
            return label
    return DISPLAY_SCALE[-1][1]


def build_display_summary(result: AssessmentResult) -> DisplaySummary:
    # Task achievement is not part of the displayed average
    sub = result.sublevels
    average = round_half_up((sub.vocabulary + sub.grammar + sub.coherence + sub.complexity) / 4)

    confidence = None
    if result.confidence_level is not None:
        confidence = round_half_up(result.confidence_level * 100)

    return DisplaySummary(
        average_score=average,
        display_level=display_level_for(average),
        passed=average >= PASS_MARK,
        confidence_percent=confidence,
        descriptor=CEFR_DESCRIPTORS[result.cefr_level],
    )


def build_feedback_message(result: AssessmentResult) -> str:
    """One-line feedback stored with a submission"""
    if result.score >= 80:
        closing = "Excellent work!"
    elif result.score >= 70:
        closing = "Good job!"
    else:
        closing = "Keep practicing!"
    return f"Your writing demonstrates {result.cefr_level.value} level proficiency. {closing}"
