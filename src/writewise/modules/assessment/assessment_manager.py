"""
Main manager for heuristic writing assessment.

Scores a student's essay on five dimensions and assigns a CEFR level. The
manager holds only immutable configuration, so a single instance can score
texts from any number of callers at once.
"""

import logging
from functools import lru_cache
from typing import Dict, Optional, Tuple

from .analyzers import (
    CoherenceAnalyzer,
    ComplexityAnalyzer,
    GrammarAnalyzer,
    TaskAchievementAnalyzer,
    VocabularyAnalyzer,
    clamp,
    extract_features,
    round_half_up,
)
from .feedback_data import OVERVIEW_MAP, SUGGESTIONS_MAP
from .models import AssessmentResult, CEFRLevel, ScoringProfile, SubScores, TextFeatures
from .pattern_data import LEXICAL_COMPLEXITY_MARKERS
from .profiles import DEFAULT_PROFILE, get_profile

logger = logging.getLogger(__name__)

# Confidence in a level assigned straight from the score
BASE_CONFIDENCE: Dict[CEFRLevel, float] = {
    CEFRLevel.C2: 0.90,
    CEFRLevel.C1: 0.88,
    CEFRLevel.B2: 0.85,
    CEFRLevel.B1: 0.85,
    CEFRLevel.A2: 0.85,
    CEFRLevel.A1: 0.90,
}

SHORT_TEXT_WORDS = 70
VERY_SHORT_TEXT_WORDS = 30
BASIC_VOCABULARY_RATIO = 0.6
BASIC_VOCABULARY_MAX_WORDS = 50


class WritingAssessmentManager:
    """Scores writing with the analyzers configured by one scoring profile"""

    def __init__(self, profile: Optional[ScoringProfile] = None):
        self.logger = logging.getLogger(__name__)
        self.profile = profile or DEFAULT_PROFILE
        self.vocabulary_analyzer = VocabularyAnalyzer()
        self.complexity_analyzer = ComplexityAnalyzer()
        self.coherence_analyzer = CoherenceAnalyzer()
        self.grammar_analyzer = GrammarAnalyzer()
        self.task_achievement_analyzer = TaskAchievementAnalyzer(
            discourse_multiplier=self.profile.discourse_multiplier,
            floor=self.profile.task_achievement_floor,
        )

    def assess_text(self, text: str) -> AssessmentResult:
        """Assess a piece of plain text. Never raises; empty text gets the minimum scores."""
        features = extract_features(text)

        coherence = self.coherence_analyzer.analyze(features)
        grammar = self.grammar_analyzer.analyze(features)
        sublevels = SubScores(
            vocabulary=self.vocabulary_analyzer.score(features),
            grammar=grammar.score,
            coherence=coherence.score,
            complexity=self.complexity_analyzer.score(features),
            task_achievement=self.task_achievement_analyzer.score(features),
        )

        score = self._calculate_overall_score(sublevels)
        cefr_level, confidence = self._score_to_level(score)

        if self.profile.apply_length_corrections:
            cefr_level, confidence = self._apply_length_corrections(
                cefr_level, confidence, features, coherence.band_totals
            )

        self.logger.debug(
            f"Assessed {features.word_count} words with profile '{self.profile.name}': "
            f"score={score} level={cefr_level.value} sublevels={sublevels}"
        )

        return AssessmentResult(
            score=score,
            cefr_level=cefr_level,
            sublevels=sublevels,
            errors=tuple(grammar.errors),
            overview=OVERVIEW_MAP[cefr_level],
            suggestions=SUGGESTIONS_MAP[cefr_level],
            confidence_level=round_half_up(confidence * 100) / 100 if self.profile.report_confidence else None,
            word_count=features.word_count,
        )

    def _calculate_overall_score(self, sublevels: SubScores) -> int:
        """Weighted average of the sub-scores"""
        weights = self.profile.weights
        weighted = (
            sublevels.vocabulary * weights.vocabulary
            + sublevels.grammar * weights.grammar
            + sublevels.coherence * weights.coherence
            + sublevels.complexity * weights.complexity
            + sublevels.task_achievement * weights.task_achievement
        )
        return clamp(round_half_up(weighted))

    def _score_to_level(self, score: int) -> Tuple[CEFRLevel, float]:
        """Convert the overall score to a CEFR level"""
        thresholds = self.profile.thresholds
        if score >= thresholds.C2:
            level = CEFRLevel.C2
        elif score >= thresholds.C1:
            level = CEFRLevel.C1
        elif score >= thresholds.B2:
            level = CEFRLevel.B2
        elif score >= thresholds.B1:
            level = CEFRLevel.B1
        elif score >= thresholds.A2:
            level = CEFRLevel.A2
        else:
            level = CEFRLevel.A1
        return level, BASE_CONFIDENCE[level]

    def _apply_length_corrections(
        self,
        level: CEFRLevel,
        confidence: float,
        features: TextFeatures,
        band_totals: Dict[CEFRLevel, int],
    ) -> Tuple[CEFRLevel, float]:
        """Downgrade levels the formula tends to overestimate for short texts"""
        word_count = features.word_count

        if word_count < SHORT_TEXT_WORDS:
            if level in (CEFRLevel.C1, CEFRLevel.C2):
                level = CEFRLevel.B1 if word_count < 40 else CEFRLevel.B2
                confidence = 0.80
            elif level == CEFRLevel.B2:
                level = CEFRLevel.B1 if word_count < 50 else CEFRLevel.B2
                confidence = 0.80
            elif level == CEFRLevel.B1 and word_count < VERY_SHORT_TEXT_WORDS:
                level = CEFRLevel.A2
                confidence = 0.85

        # Mostly A1 structures in a very short text
        if word_count < VERY_SHORT_TEXT_WORDS and band_totals[CEFRLevel.A1] > (
            band_totals[CEFRLevel.A2] + band_totals[CEFRLevel.B1]
        ):
            level = CEFRLevel.A1
            confidence = 0.90

        # Mostly basic vocabulary in a short text
        basic_words = self._count_basic_words(features)
        if (
            word_count > 0
            and basic_words / word_count > BASIC_VOCABULARY_RATIO
            and word_count < BASIC_VOCABULARY_MAX_WORDS
        ):
            if level in (CEFRLevel.A2, CEFRLevel.B1):
                level = CEFRLevel.A1
                confidence = 0.90

        return level, confidence

    def _count_basic_words(self, features: TextFeatures) -> int:
        markers = LEXICAL_COMPLEXITY_MARKERS[CEFRLevel.A1]
        return sum(1 for word in features.words if any(marker in word for marker in markers))


@lru_cache
def _manager_for_profile(profile_name: str) -> WritingAssessmentManager:
    return WritingAssessmentManager(get_profile(profile_name))


def get_assessment_manager(profile_name: Optional[str] = None) -> WritingAssessmentManager:
    """Get the shared assessment manager for a scoring profile (default: corrected)"""
    profile = get_profile(profile_name) if profile_name else DEFAULT_PROFILE
    return _manager_for_profile(profile.name)


def assess_text(text: str, profile: Optional[ScoringProfile] = None) -> AssessmentResult:
    """Score a piece of writing with the given profile (default: corrected)"""
    if profile is None:
        return get_assessment_manager().assess_text(text)
    return WritingAssessmentManager(profile).assess_text(text)
