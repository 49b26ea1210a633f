"""
Level-appropriate feedback text for writing assessments
"""

from types import MappingProxyType
from typing import Mapping, Tuple

from .models import CEFRLevel

OVERVIEW_MAP: Mapping[CEFRLevel, Tuple[str, ...]] = MappingProxyType(
    {
        CEFRLevel.A1: (
            "You can use very basic phrases and expressions",
            "You can introduce yourself and answer simple personal questions",
            "You have a limited vocabulary focused on common words",
        ),
        CEFRLevel.A2: (
            "You can communicate in simple and routine tasks",
            "You can describe aspects of your background in simple terms",
            "You have a basic grasp of grammar structures and everyday vocabulary",
        ),
        CEFRLevel.B1: (
            "You can deal with most situations likely to arise while traveling",
            "You can produce simple connected text on familiar topics",
            "You show reasonable accuracy in familiar contexts",
        ),
        CEFRLevel.B2: (
            "You can interact with a degree of fluency and spontaneity",
            "You can write clear, detailed text on a wide range of subjects",
            "You demonstrate good control of grammatical structures",
        ),
        CEFRLevel.C1: (
            "You can express ideas fluently and spontaneously",
            "You can use language flexibly and effectively for social and professional purposes",
            "You display a good command of complex language structures",
        ),
        CEFRLevel.C2: (
            "You can express yourself spontaneously and with great fluency",
            "You can summarize information from different sources into a coherent presentation",
            "You show complete and consistent grammatical control of complex language",
        ),
    }
)

SUGGESTIONS_MAP: Mapping[CEFRLevel, Tuple[str, ...]] = MappingProxyType(
    {
        CEFRLevel.A1: (
            "Practice basic everyday expressions and vocabulary",
            "Focus on simple present tense and basic question formation",
            "Work on building your vocabulary with simple, high-frequency words",
        ),
        CEFRLevel.A2: (
            "Practice describing past experiences using simple past tense",
            "Expand your vocabulary on topics of immediate relevance",
            'Work on connecting sentences with basic conjunctions like "and", "but", and "because"',
        ),
        CEFRLevel.B1: (
            "Practice expressing opinions and giving reasons",
            "Work on using a variety of tenses appropriately",
            "Expand your vocabulary related to work, school, and leisure",
        ),
        CEFRLevel.B2: (
            "Practice expressing more nuanced opinions and arguments",
            "Work on more complex grammatical structures like conditionals",
            "Focus on developing clearer organization in longer texts",
        ),
        CEFRLevel.C1: (
            "Focus on precision in expressing subtle differences in meaning",
            "Practice using idiomatic expressions naturally",
            "Work on adapting your language to different contexts and purposes",
        ),
        CEFRLevel.C2: (
            "Refine your precision in expressing nuanced ideas",
            "Work on maintaining consistent tone and style in writing",
            "Focus on mastering specialized vocabulary in your field of interest",
        ),
    }
)

# Level descriptors based on the CEFR framework
CEFR_DESCRIPTORS: Mapping[CEFRLevel, str] = MappingProxyType(
    {
        CEFRLevel.A1: (
            "Can understand and use familiar everyday expressions and very basic phrases. "
            "Can introduce themselves and others and can ask and answer questions about personal details."
        ),
        CEFRLevel.A2: (
            "Can understand sentences and frequently used expressions related to areas of most immediate "
            "relevance. Can communicate in simple and routine tasks."
        ),
        CEFRLevel.B1: (
            "Can understand the main points of clear standard input on familiar matters. "
            "Can produce simple connected text on topics that are familiar or of personal interest."
        ),
        CEFRLevel.B2: (
            "Can understand the main ideas of complex text on both concrete and abstract topics. "
            "Can interact with a degree of fluency and spontaneity with native speakers."
        ),
        CEFRLevel.C1: (
            "Can understand a wide range of demanding, longer texts. "
            "Can express ideas fluently and spontaneously without much obvious searching for expressions."
        ),
        CEFRLevel.C2: (
            "Can understand with ease virtually everything heard or read. "
            "Can express themselves spontaneously, very fluently and precisely, "
            "differentiating finer shades of meaning."
        ),
    }
)

# Score interpretation scale shown next to the results (minimum average score, label)
DISPLAY_SCALE: Tuple[Tuple[int, str], ...] = (
    (80, "C1-C2"),
    (75, "B2"),
    (70, "B1"),
    (65, "A2"),
    (0, "A1"),
)

PASS_MARK = 60
