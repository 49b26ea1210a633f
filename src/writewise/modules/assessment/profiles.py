"""
Named scoring profiles.

Two calibrations of the scorer exist. ``corrected`` weights grammar, coherence
and task achievement more heavily, uses wider level boundaries and applies the
short-text downgrade rules; it is the default. ``legacy`` is the earlier
calibration, kept whole so results stay reproducible. A profile is always used
as a unit; values are never mixed between profiles.
"""

from types import MappingProxyType
from typing import Mapping

from .models import LevelThresholds, ScoringProfile, ScoringWeights

CORRECTED_PROFILE = ScoringProfile(
    name="corrected",
    weights=ScoringWeights(
        vocabulary=0.15,
        grammar=0.25,
        coherence=0.25,
        complexity=0.15,
        task_achievement=0.2,
    ),
    thresholds=LevelThresholds(C2=90, C1=82, B2=74, B1=65, A2=55),
    # TODO: confirm the discourse multiplier with the product owner, the calibrations disagree (3 vs 2)
    discourse_multiplier=3,
    task_achievement_floor=20,
    apply_length_corrections=True,
    report_confidence=True,
    description="Recalibrated weights and boundaries with short-text corrections",
)

LEGACY_PROFILE = ScoringProfile(
    name="legacy",
    weights=ScoringWeights(
        vocabulary=0.25,
        grammar=0.2,
        coherence=0.2,
        complexity=0.25,
        task_achievement=0.1,
    ),
    thresholds=LevelThresholds(C2=90, C1=80, B2=70, B1=60, A2=40),
    discourse_multiplier=2,
    task_achievement_floor=0,
    apply_length_corrections=False,
    report_confidence=False,
    description="Original weights and boundaries without length corrections",
)

SCORING_PROFILES: Mapping[str, ScoringProfile] = MappingProxyType(
    {
        CORRECTED_PROFILE.name: CORRECTED_PROFILE,
        LEGACY_PROFILE.name: LEGACY_PROFILE,
    }
)

DEFAULT_PROFILE = CORRECTED_PROFILE


def get_profile(name: str) -> ScoringProfile:
    """Look up a scoring profile by name"""
    try:
        return SCORING_PROFILES[name.strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown scoring profile '{name}', expected one of {', '.join(SCORING_PROFILES)}") from None
