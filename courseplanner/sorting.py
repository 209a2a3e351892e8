"""Ordering of course lists by a chosen field."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from .course import Course


class SortMethod(Enum):
    """The field a course list is ordered by."""

    BY_ID = "course_id"
    BY_TITLE = "title"
    BY_TEACHER = "teacher"


def quick_sort(courses: Iterable[Course], method: SortMethod = SortMethod.BY_ID) -> list[Course]:
    """Return a new list of the courses ordered by the field that method names."""
    attribute = method.value
    return sorted(courses, key=lambda course: getattr(course, attribute))