"""
Models for the writing assessment engine and its scoring profiles
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple


class CEFRLevel(Enum):
    """Common European Framework of Reference for Languages levels"""

    A1 = "A1"  # Beginner
    A2 = "A2"  # Elementary
    B1 = "B1"  # Intermediate
    B2 = "B2"  # Upper Intermediate
    C1 = "C1"  # Advanced
    C2 = "C2"  # Proficient

    @property
    def rank(self) -> int:
        """Position in the A1..C2 progression, starting at 1"""
        return CEFR_ORDER.index(self) + 1


CEFR_ORDER: Tuple[CEFRLevel, ...] = (
    CEFRLevel.A1,
    CEFRLevel.A2,
    CEFRLevel.B1,
    CEFRLevel.B2,
    CEFRLevel.C1,
    CEFRLevel.C2,
)


@dataclass(frozen=True)
class GrammarError:
    """A grammar mistake detected in the student's text"""

    description: str
    level: CEFRLevel
    severity: int

    def to_dict(self) -> Dict[str, object]:
        return {"description": self.description, "level": self.level.value, "severity": self.severity}


@dataclass(frozen=True)
class SubScores:
    """The five component scores, each in 0-100"""

    vocabulary: int
    grammar: int
    coherence: int
    complexity: int
    task_achievement: int

    def to_dict(self) -> Dict[str, int]:
        return {
            "vocabulary": self.vocabulary,
            "grammar": self.grammar,
            "coherence": self.coherence,
            "complexity": self.complexity,
            "taskAchievement": self.task_achievement,
        }


@dataclass(frozen=True)
class AssessmentResult:
    """Complete result of scoring one piece of writing"""

    score: int  # 0-100
    cefr_level: CEFRLevel
    sublevels: SubScores
    errors: Tuple[GrammarError, ...]
    overview: Tuple[str, ...]
    suggestions: Tuple[str, ...]
    confidence_level: Optional[float]  # 0-1, None when the profile has no confidence model
    word_count: int

    @property
    def grammar_errors(self) -> List[str]:
        """Grammar error descriptions in detection order"""
        return [error.description for error in self.errors]

    def to_dict(self) -> Dict[str, object]:
        """JSON-ready representation using the portal's camelCase keys"""
        return {
            "score": self.score,
            "cefrLevel": self.cefr_level.value,
            "overview": list(self.overview),
            "grammarErrors": self.grammar_errors,
            "errors": [error.to_dict() for error in self.errors],
            "suggestions": list(self.suggestions),
            "confidenceLevel": self.confidence_level,
            "sublevels": self.sublevels.to_dict(),
            "wordCount": self.word_count,
        }


@dataclass(frozen=True)
class ScoringWeights:
    """Weights of each sub-score in the overall score"""

    vocabulary: float
    grammar: float
    coherence: float
    complexity: float
    task_achievement: float


@dataclass(frozen=True)
class LevelThresholds:
    """Minimum overall score for each level above A1"""

    C2: int
    C1: int
    B2: int
    B1: int
    A2: int


@dataclass(frozen=True)
class ScoringProfile:
    """Every tunable of one scoring variant"""

    name: str
    weights: ScoringWeights
    thresholds: LevelThresholds
    discourse_multiplier: int
    task_achievement_floor: int
    apply_length_corrections: bool
    report_confidence: bool
    description: str = ""

    def to_dict(self) -> Dict[str, object]:
        return {
            "name": self.name,
            "description": self.description,
            "weights": {
                "vocabulary": self.weights.vocabulary,
                "grammar": self.weights.grammar,
                "coherence": self.weights.coherence,
                "complexity": self.weights.complexity,
                "taskAchievement": self.weights.task_achievement,
            },
            "thresholds": {
                "C2": self.thresholds.C2,
                "C1": self.thresholds.C1,
                "B2": self.thresholds.B2,
                "B1": self.thresholds.B1,
                "A2": self.thresholds.A2,
            },
            "discourseMultiplier": self.discourse_multiplier,
            "taskAchievementFloor": self.task_achievement_floor,
            "applyLengthCorrections": self.apply_length_corrections,
            "reportConfidence": self.report_confidence,
        }


@dataclass
class TextFeatures:
    """Tokenized view of a text shared by all analyzers"""

    raw_text: str
    words: List[str] = field(default_factory=list)
    sentences: List[str] = field(default_factory=list)
    paragraphs: List[str] = field(default_factory=list)

    @property
    def word_count(self) -> int:
        return len(self.words)

    @property
    def sentence_count(self) -> int:
        return len(self.sentences)


@dataclass
class CoherenceAnalysis:
    """Coherence score plus the per-band marker totals used by level corrections"""

    score: int
    band_totals: Dict[CEFRLevel, int]


@dataclass
class GrammarAnalysis:
    """Grammar score and the rules that fired"""

    score: int
    errors: List[GrammarError]
    total_severity: int
