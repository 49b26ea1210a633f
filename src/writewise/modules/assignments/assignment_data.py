"""
Writing assignment catalog by course, lesson and assignment
"""

from typing import Dict, List

from .models import WritingAssignment

GENERATED_DAYS = 10

DAY_PROMPTS: List[str] = [
    "Write about your daily routine and how you spend your time.",
    "Do you think technology has improved the way we learn? Why or why not?",
    "Write a short story that begins with the sentence: 'The door opened unexpectedly.'",
    "Describe your ideal vacation destination and explain why you would like to visit there.",
    "Write about a person who has influenced your life and explain how they have helped you grow.",
    "Do you prefer living in a city or in the countryside? Give reasons for your preference.",
    "Write about a memorable experience from your childhood that taught you an important lesson.",
    "Should students be required to learn a second language? Support your opinion with examples.",
    "Describe a challenge you have overcome and explain what you learned from the experience.",
    "Write about how you think education will change in the next 20 years.",
]

DAY_PROMPT_DETAILS: List[str] = [
    "Include activities you do in the morning, afternoon, and evening. "
    "Explain which part of the day you enjoy the most and why.",
    "Consider both the advantages and disadvantages of using technology in education. "
    "Support your opinion with specific examples.",
    "Your story should have a clear beginning, middle, and end. Include at least two characters and some dialogue.",
    "Consider factors like climate, culture, activities, and food. Describe what makes this place special to you.",
    "Explain specific ways this person has impacted your thinking, behavior, or goals. Use concrete examples.",
    "Compare the advantages and disadvantages of both environments. "
    "Consider factors like lifestyle, opportunities, and personal preferences.",
    "Describe the situation clearly and explain the specific lesson you learned. "
    "How has this experience shaped who you are today?",
    "Think about the benefits and challenges of multilingual education. "
    "Use examples from your own experience or observations.",
    "Describe the challenge in detail and explain the steps you took to overcome it. "
    "What skills or knowledge did you gain?",
    "Consider technology, teaching methods, student needs, and global trends. "
    "Be specific about the changes you predict.",
]

DEFAULT_ASSIGNMENT = WritingAssignment(
    title="Writing Assessment",
    prompt="Write an essay on the given topic.",
    prompt_details="Your response will be assessed based on vocabulary usage, grammar, coherence, and complexity.",
)

DAILY_ASSIGNMENT_ID = "writing-assignment-1"


def prompt_for_day(day_number: int) -> str:
    if 1 <= day_number <= len(DAY_PROMPTS):
        return DAY_PROMPTS[day_number - 1]
    return DAY_PROMPTS[0]


def prompt_details_for_day(day_number: int) -> str:
    if 1 <= day_number <= len(DAY_PROMPT_DETAILS):
        return DAY_PROMPT_DETAILS[day_number - 1]
    return DAY_PROMPT_DETAILS[0]


def build_catalog() -> Dict[str, Dict[str, Dict[str, WritingAssignment]]]:
    """Hand-written assignments plus one generated writing assignment per course day"""
    catalog: Dict[str, Dict[str, Dict[str, WritingAssignment]]] = {
        "example-course": {
            "day-1": {
                DAILY_ASSIGNMENT_ID: WritingAssignment(
                    title="Daily Journal Entry",
                    prompt=DAY_PROMPTS[0],
                    prompt_details=DAY_PROMPT_DETAILS[0],
                    word_count=150,
                    time_limit=20,
                )
            },
            "day-2": {
                DAILY_ASSIGNMENT_ID: WritingAssignment(
                    title="Opinion Essay",
                    prompt=DAY_PROMPTS[1],
                    prompt_details=DAY_PROMPT_DETAILS[1],
                    word_count=200,
                    time_limit=30,
                )
            },
            "day-3": {
                DAILY_ASSIGNMENT_ID: WritingAssignment(
                    title="Story Writing",
                    prompt=DAY_PROMPTS[2],
                    prompt_details=DAY_PROMPT_DETAILS[2],
                    word_count=250,
                    time_limit=40,
                )
            },
        },
        "beginner-english": {
            "lesson-1": {
                "practice-essay": WritingAssignment(
                    title="Self Introduction",
                    prompt="Write a short paragraph introducing yourself.",
                    prompt_details="Include your name, age, where you're from, and some of your hobbies or interests.",
                    word_count=100,
                    time_limit=15,
                )
            },
            "lesson-2": {
                "practice-essay": WritingAssignment(
                    title="My Family",
                    prompt="Write about your family members and what they like to do.",
                    prompt_details=(
                        "Describe at least two family members. What do they look like? "
                        "What are their personalities like?"
                    ),
                    word_count=120,
                    time_limit=20,
                )
            },
        },
    }

    course = catalog["example-course"]
    for day_number in range(1, GENERATED_DAYS + 1):
        day = course.setdefault(f"day-{day_number}", {})
        # Targets grow with the day number
        day.setdefault(
            DAILY_ASSIGNMENT_ID,
            WritingAssignment(
                title=f"Day {day_number} Writing Assessment",
                prompt=prompt_for_day(day_number),
                prompt_details=prompt_details_for_day(day_number),
                word_count=150 + day_number * 10,
                time_limit=20 + day_number * 2,
            ),
        )

    return catalog
