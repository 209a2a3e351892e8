"""A hash table of courses keyed by course identifier."""

from __future__ import annotations

from collections.abc import Iterator

from .course import Course
from .sorting import SortMethod, quick_sort

DEFAULT_SIZE = 179


class CourseMap:
    """Stores courses in separately chained buckets keyed by course ID."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size < 1:
            raise ValueError(f"table size must be positive, got {size}")
        self._buckets: list[list[Course]] = [[] for _ in range(size)]

    def _bucket(self, course_id: str) -> list[Course]:
        return self._buckets[hash(course_id) % len(self._buckets)]

    def insert(self, course: Course) -> None:
        """Add a course, replacing any stored course with the same ID."""
        bucket = self._bucket(course.course_id)
        for position, stored in enumerate(bucket):
            if stored.course_id == course.course_id:
                bucket[position] = course
                return
        bucket.append(course)

    def search(self, course_id: str) -> Course | None:
        """Return the course with this ID, or None if there is none."""
        return next(
            (course for course in self._bucket(course_id) if course.course_id == course_id),
            None,
        )

    def _all(self) -> Iterator[Course]:
        for bucket in self._buckets:
            yield from bucket

    def sorted_courses(self, method: SortMethod = SortMethod.BY_ID) -> list[Course]:
        """Return every stored course ordered by the given method."""
        return quick_sort(self._all(), method)

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)