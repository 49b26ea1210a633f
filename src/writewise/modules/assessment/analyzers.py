"""
Analyzers for the sub-scores of a writing assessment: vocabulary, complexity,
coherence, grammar and task achievement
"""

import math
from typing import Dict, List

from .models import CEFRLevel, CoherenceAnalysis, GrammarAnalysis, GrammarError, TextFeatures
from .pattern_data import (
    BAND_WEIGHTS,
    DISCOURSE_PATTERNS,
    GRAMMAR_ERROR_RULES,
    MAX_MATCHES_PER_PATTERN,
    PARAGRAPH_SPLIT,
    SENTENCE_SPLIT,
    STRUCTURE_PATTERNS,
    WORD_SPLIT,
)


def round_half_up(value: float) -> int:
    """Round like JavaScript's Math.round for the non-negative values scores take"""
    return math.floor(value + 0.5)


def clamp(value: int, lower: int = 0, upper: int = 100) -> int:
    return max(lower, min(upper, value))


def extract_features(text: str) -> TextFeatures:
    """Split text into lower-cased words, sentences and paragraphs"""
    text = text or ""
    words = [w for w in WORD_SPLIT.split(text.lower()) if w]
    sentences = [s for s in SENTENCE_SPLIT.split(text) if s.strip()]
    paragraphs = [p for p in PARAGRAPH_SPLIT.split(text) if p.strip()]
    return TextFeatures(raw_text=text, words=words, sentences=sentences, paragraphs=paragraphs)


class VocabularyAnalyzer:
    """Lexical diversity scaled by text length"""

    # (exclusive upper word count, cap, factor); short texts get a lower cap and factor
    LENGTH_BANDS = (
        (30, 55, 80),
        (50, 65, 90),
        (100, 75, 100),
    )
    LONG_TEXT_BAND = (95, 110)

    def lexical_diversity(self, features: TextFeatures) -> float:
        if features.word_count == 0:
            return 0.0
        return len(set(features.words)) / features.word_count

    def score(self, features: TextFeatures) -> int:
        diversity = self.lexical_diversity(features)
        cap, factor = self.LONG_TEXT_BAND
        for limit, band_cap, band_factor in self.LENGTH_BANDS:
            if features.word_count < limit:
                cap, factor = band_cap, band_factor
                break
        return clamp(min(cap, math.floor(diversity * factor)))


class ComplexityAnalyzer:
    """Sentence complexity from average words per sentence"""

    def average_sentence_length(self, features: TextFeatures) -> float:
        if features.sentence_count == 0:
            return 0.0
        return features.word_count / features.sentence_count

    def score(self, features: TextFeatures) -> int:
        x = self.average_sentence_length(features)

        if x < 4:
            # Very simple sentences
            value = min(40, math.floor(x * 9))
        elif x < 6:
            value = min(50, math.floor(40 + (x - 4) * 5))
        elif x < 8:
            value = min(60, math.floor(50 + (x - 6) * 5))
        elif x < 12:
            value = min(75, math.floor(60 + (x - 8) * 3.75))
        elif x < 16:
            value = min(85, math.floor(75 + (x - 12) * 2.5))
        else:
            value = min(100, math.floor(85 + (x - 16) * 1.5))

        return clamp(value)


class CoherenceAnalyzer:
    """Coherence from CEFR-banded structure markers; higher-level markers raise the score"""

    BASELINE = 50
    SCALE = 15

    def band_totals(self, text: str) -> Dict[CEFRLevel, int]:
        totals = {}
        for level, rules in STRUCTURE_PATTERNS.items():
            totals[level] = sum(min(MAX_MATCHES_PER_PATTERN, rule.count(text)) for rule in rules)
        return totals

    def analyze(self, features: TextFeatures) -> CoherenceAnalysis:
        totals = self.band_totals(features.raw_text)

        weighted = sum(count * BAND_WEIGHTS[level] for level, count in totals.items())
        total = sum(totals.values())
        coherence_base = (weighted / total) * self.SCALE if total > 0 else 0

        return CoherenceAnalysis(score=clamp(math.floor(self.BASELINE + coherence_base)), band_totals=totals)


class GrammarAnalyzer:
    """Grammar accuracy from a table of common learner errors"""

    PENALTY_PER_SEVERITY = 6
    MAX_PENALTY = 65
    MIN_SCORE = 20

    def detect_errors(self, text: str) -> List[GrammarError]:
        return [
            GrammarError(description=rule.description, level=rule.level, severity=rule.weight)
            for rule in GRAMMAR_ERROR_RULES
            if rule.matches(text)
        ]

    def baseline(self, word_count: int) -> int:
        # Longer texts start from a higher baseline
        if word_count > 200:
            return 85
        if word_count > 100:
            return 80
        return 75

    def analyze(self, features: TextFeatures) -> GrammarAnalysis:
        errors = self.detect_errors(features.raw_text)
        total_severity = sum(error.severity for error in errors)

        penalty = min(self.MAX_PENALTY, total_severity * self.PENALTY_PER_SEVERITY)
        score = max(self.MIN_SCORE, self.baseline(features.word_count) - penalty)

        return GrammarAnalysis(score=clamp(score), errors=errors, total_severity=total_severity)


class TaskAchievementAnalyzer:
    """Task achievement from length, paragraphing and discourse markers"""

    BASELINE = 50
    MAX_DISCOURSE_BONUS = 20
    PARAGRAPH_BONUS = 10

    def __init__(self, discourse_multiplier: int = 3, floor: int = 20):
        self.discourse_multiplier = discourse_multiplier
        self.floor = floor

    def discourse_marker_count(self, text: str) -> int:
        return sum(rule.count(text) for rule in DISCOURSE_PATTERNS)

    def score(self, features: TextFeatures) -> int:
        base = self.BASELINE
        word_count = features.word_count

        # Penalize very short texts
        if word_count < 50:
            base = max(30, base - 20)
        elif word_count < 100:
            base = max(40, base - 10)
        elif word_count > 250:
            base = min(70, base + 10)

        if len(features.paragraphs) > 1:
            base += self.PARAGRAPH_BONUS

        # Each marker group counts once, however often it appears
        markers = self.discourse_marker_count(features.raw_text)
        base += min(self.MAX_DISCOURSE_BONUS, markers * self.discourse_multiplier)

        return clamp(base, self.floor, 100)
