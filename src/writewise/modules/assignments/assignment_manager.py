"""
Assignment Manager
==================

Read-only lookup of writing assignments. Unknown assignments resolve to a
generic essay task so the writing page can always render.
"""

import logging
from typing import List

from .assignment_data import DEFAULT_ASSIGNMENT, build_catalog
from .models import WritingAssignment

logger = logging.getLogger(__name__)


class AssignmentManager:
    """Lookup of writing assignments by course, lesson and assignment id"""

    def __init__(self):
        self.logger = logging.getLogger(__name__)
        self._catalog = build_catalog()

    def get_assignment_details(self, course_id: str, lesson_id: str, assignment_id: str) -> WritingAssignment:
        """Get an assignment, falling back to the default writing task"""
        assignment = self._catalog.get(course_id, {}).get(lesson_id, {}).get(assignment_id)
        if assignment is None:
            self.logger.warning(
                f"No assignment {assignment_id} for {course_id}/{lesson_id}, using default writing assessment"
            )
            return DEFAULT_ASSIGNMENT
        return assignment

    def has_assignment(self, course_id: str, lesson_id: str, assignment_id: str) -> bool:
        return assignment_id in self._catalog.get(course_id, {}).get(lesson_id, {})

    def get_courses(self) -> List[str]:
        return sorted(self._catalog)

    def get_lessons(self, course_id: str) -> List[str]:
        """Lesson ids of a course in catalog order"""
        return list(self._catalog.get(course_id, {}))


# Global assignment manager instance
assignment_manager = AssignmentManager()


def get_assignment_manager() -> AssignmentManager:
    """Get the global assignment manager instance"""
    return assignment_manager
