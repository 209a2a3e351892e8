from collections import Counter

import pytest

from courseplanner.course import Course
from courseplanner.sorting import SortMethod, quick_sort


@pytest.fixture
def courses():
    return [
        Course("MATH201", "Discrete Mathematics", [], "Brown"),
        Course("CSCI300", "Introduction to Algorithms", ["CSCI200"], "Adams"),
        Course("CSCI100", "Introduction to Computer Science", [], "Clark"),
        Course("CSCI200", "Data Structures", ["CSCI101"], "Davis"),
    ]


@pytest.mark.parametrize(
    "method, attribute",
    [
        (SortMethod.BY_ID, "course_id"),
        (SortMethod.BY_TITLE, "title"),
        (SortMethod.BY_TEACHER, "teacher"),
    ],
)
def test_result_is_ordered_permutation(courses, method, attribute):
    result = quick_sort(courses, method)
    keys = [getattr(course, attribute) for course in result]
    assert all(a <= b for a, b in zip(keys, keys[1:]))
    assert Counter(c.course_id for c in result) == Counter(c.course_id for c in courses)


def test_by_id_puts_smallest_first(courses):
    result = quick_sort(courses, SortMethod.BY_ID)
    assert result[0].course_id == "CSCI100"
    assert result[-1].course_id == "MATH201"


def test_default_method_is_by_id(courses):
    assert quick_sort(courses) == quick_sort(courses, SortMethod.BY_ID)


def test_input_is_left_untouched(courses):
    original = list(courses)
    quick_sort(courses, SortMethod.BY_TITLE)
    assert courses == original


def test_empty_input():
    assert quick_sort([], SortMethod.BY_TEACHER) == []