from courseplanner.course import Course


def test_defaults_are_empty():
    course = Course("CSCI100", "Introduction to Computer Science")
    assert course.prerequisites == []
    assert course.teacher == ""


def test_prerequisite_lists_are_not_shared():
    first = Course("A", "First")
    second = Course("B", "Second")
    first.prerequisites.append("X")
    assert second.prerequisites == []


def test_equality_compares_all_fields():
    one = Course("CSCI200", "Data Structures", ["CSCI101"], "Smith")
    same = Course("CSCI200", "Data Structures", ["CSCI101"], "Smith")
    other = Course("CSCI200", "Data Structures", ["CSCI101"], "Jones")
    assert one == same
    assert (one == other) is False