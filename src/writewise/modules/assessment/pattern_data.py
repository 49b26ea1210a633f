"""
Pattern Data
============

Regex tables used by the writing analyzers.
Each entry is a PatternRule so weights, severities and descriptions are data,
separate from the scoring logic.
"""

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Pattern, Tuple

from .models import CEFRLevel

# JavaScript-style regex semantics: case-insensitive, ASCII word boundaries
PATTERN_FLAGS = re.IGNORECASE | re.ASCII


@dataclass(frozen=True)
class PatternRule:
    """One regex with the CEFR level, weight (or severity) and description it carries"""

    pattern: Pattern[str]
    level: Optional[CEFRLevel]
    weight: int
    description: str

    def count(self, text: str) -> int:
        """1 if the rule matches anywhere in the text, else 0; repeats do not add up"""
        return 1 if self.matches(text) else 0

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None


def _rule(regex: str, level: Optional[CEFRLevel], weight: int, description: str) -> PatternRule:
    return PatternRule(re.compile(regex, PATTERN_FLAGS), level, weight, description)


# Weight factors for each level (higher levels have more impact on coherence)
BAND_WEIGHTS: Mapping[CEFRLevel, int] = MappingProxyType(
    {
        CEFRLevel.A1: 1,
        CEFRLevel.A2: 2,
        CEFRLevel.B1: 3,
        CEFRLevel.B2: 4,
        CEFRLevel.C1: 5,
        CEFRLevel.C2: 6,
    }
)

# Per-pattern match counts are capped before summing into a band total
MAX_MATCHES_PER_PATTERN = 5


def _structure_band(level: CEFRLevel, *entries: Tuple[str, str]) -> Tuple[PatternRule, ...]:
    return tuple(_rule(regex, level, BAND_WEIGHTS[level], description) for regex, description in entries)


STRUCTURE_PATTERNS: Mapping[CEFRLevel, Tuple[PatternRule, ...]] = MappingProxyType(
    {
        CEFRLevel.A1: _structure_band(
            CEFRLevel.A1,
            (r"\bI am\b|\bYou are\b|\bIt is\b", "Basic 'be' statements"),
            (r"\bcan\b", "Ability with 'can'"),
            (r"\band\b", "Joining with 'and'"),
            (r"\bthis is\b|\bthat is\b", "Demonstrative statements"),
            (r"\bhello\b|\bhi\b|\bbye\b", "Greetings"),
        ),
        CEFRLevel.A2: _structure_band(
            CEFRLevel.A2,
            (r"\bI think\b|\bI like\b", "Simple opinions and preferences"),
            (r"\bwant to\b|\bneed to\b", "Wants and needs"),
            (r"\bbecause\b|\bbut\b|\bso\b", "Basic connectors"),
            (r"\byesterday\b|\blast\b", "Simple past time markers"),
            (r"\btomorrow\b|\bnext\b", "Simple future time markers"),
        ),
        CEFRLevel.B1: _structure_band(
            CEFRLevel.B1,
            (r"\balthough\b|\bhowever\b|\btherefore\b", "Mid-level connectors"),
            (r"\bused to\b|\bwould rather\b", "Habit and preference expressions"),
            (r"\bI believe\b|\bIn my opinion\b", "Opinion phrases"),
            (r"\bfirstly\b|\bsecondly\b|\bfinally\b", "Simple sequencing"),
            (r"\bmust\b|\bhave to\b|\bshould\b", "Obligation modals"),
        ),
        CEFRLevel.B2: _structure_band(
            CEFRLevel.B2,
            (r"\bin contrast\b|\bconsequently\b|\bfurthermore\b", "Higher-level connectors"),
            (r"\bdespite\b|\beven though\b", "Complex subordination"),
            (r"\bmight\b|\bcould\b|\bshould\b", "Modal verbs"),
            (r"\bwould have\b|\bcould have\b|\bshould have\b", "Perfect conditionals"),
            (r"\bin addition\b|\bon the other hand\b", "Academic connectors"),
        ),
        CEFRLevel.C1: _structure_band(
            CEFRLevel.C1,
            (r"\bnevertheless\b|\bnonetheless\b|\balternatively\b", "Advanced connectors"),
            (r"\bin light of\b|\bwith regard to\b|\bin the event that\b", "Advanced phrases"),
            (r"\bhad been\b", "Past perfect"),
            (r"\bhaving been\b", "Perfect participle"),
            (r"\badmittedly\b|\bconversely\b|\bnotwithstanding\b", "Concession and contrast adverbs"),
            (r"\bcompelling\b|\bconclusive\b|\bcontroversial\b", "Academic vocabulary"),
        ),
        CEFRLevel.C2: _structure_band(
            CEFRLevel.C2,
            (r"\balbeit\b|\blest\b|\bwhereas\b", "Sophisticated connectors"),
            (r"\bwould have been\b|\bmight have been\b|\bcould have been\b", "Perfect modal conditionals"),
            (r"\bhad it not been for\b|\bwere it not for\b", "Inverted conditionals"),
            (r"\bon the grounds that\b|\bin so far as\b", "Formal causal phrases"),
            (r"\bparadoxically\b|\bincontrovertibly\b|\bunequivocally\b", "Advanced academic lexis"),
        ),
    }
)

# A1-A2 errors are weighted heavily for low-level detection
GRAMMAR_ERROR_RULES: Tuple[PatternRule, ...] = (
    _rule(r"\bam go\b|\bis go\b|\bare go\b", CEFRLevel.A1, 5, "Basic verb form errors"),
    _rule(r"\bthey is\b|\bshe are\b|\bhe are\b|\bwe is\b", CEFRLevel.A1, 5, "Subject-verb agreement errors"),
    _rule(r"\bmore better\b|\bmost fastest\b", CEFRLevel.A2, 4, "Incorrect comparative forms"),
    _rule(r"\bin the yesterday\b|\bin the tomorrow\b", CEFRLevel.A1, 4, "Incorrect time expressions"),
    _rule(r"\bI no like\b|\bhe no have\b", CEFRLevel.A1, 5, "Incorrect negation"),
    _rule(r"\bhave went\b|\bhas went\b", CEFRLevel.B1, 3, "Incorrect past participle forms"),
    _rule(r"\bif I would\b|\bif I will\b", CEFRLevel.B1, 3, "Incorrect conditional structures"),
    _rule(r"\bI am agree\b|\bhe is belong\b", CEFRLevel.B1, 3, "Incorrect verb patterns"),
    _rule(r"\bknow not\b|\blike not\b", CEFRLevel.A2, 4, "Incorrect word order with negation"),
    _rule(r"\bvery much like\b|\balways am\b", CEFRLevel.B1, 3, "Incorrect adverb placement"),
)

# Discourse markers that signal argumentation and structure
DISCOURSE_PATTERNS: Tuple[PatternRule, ...] = (
    _rule(r"\bfirstly\b|\bsecondly\b|\bfinally\b|\bin conclusion\b", None, 1, "Basic structure"),
    _rule(r"\bmoreover\b|\bfurthermore\b|\bin addition\b", None, 1, "Adding points"),
    _rule(r"\bhowever\b|\bnevertheless\b|\bon the other hand\b", None, 1, "Contrast"),
    _rule(r"\btherefore\b|\bconsequently\b|\bas a result\b", None, 1, "Cause and effect"),
    _rule(r"\bin my opinion\b|\bI believe\b|\bit seems that\b", None, 1, "Opinion markers"),
)

# Lexical markers that might indicate a proficiency level
LEXICAL_COMPLEXITY_MARKERS: Mapping[CEFRLevel, Tuple[str, ...]] = MappingProxyType(
    {
        CEFRLevel.A1: ("basic", "simple", "everyday", "hello", "like", "want"),
        CEFRLevel.A2: ("routine", "familiar", "direct", "yesterday", "tomorrow", "because"),
        CEFRLevel.B1: ("connected", "descriptive", "experiences", "opinion", "agree", "disagree"),
        CEFRLevel.B2: ("detailed", "viewpoint", "advantage", "disadvantage", "certainly", "therefore"),
        CEFRLevel.C1: ("complex", "implication", "academic", "professional", "nevertheless", "consequently"),
        CEFRLevel.C2: ("nuanced", "idiomatic", "colloquial", "sophisticated", "albeit", "notwithstanding"),
    }
)

# Tokenization
WORD_SPLIT = re.compile(r"\s+")
SENTENCE_SPLIT = re.compile(r"[.!?]+")
PARAGRAPH_SPLIT = re.compile(r"\n\s*\n")
