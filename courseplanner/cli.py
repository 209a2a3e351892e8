"""Interactive menu for loading, listing and searching courses."""

from __future__ import annotations

import argparse
from pathlib import Path

from .course import Course
from .hashmap import CourseMap
from .sorting import SortMethod

DEFAULT_FILE = "courses.csv"

_MENU = (
    "+------------------------------------------+\n"
    "|          Course Planner Menu             |\n"
    "|------------------------------------------|\n"
    "| 1. Load Courses from File                |\n"
    "| 2. Print All Courses                     |\n"
    "| 3. Search for a Course                   |\n"
    "| 4. Display Sorted Courses                |\n"
    "| 9. Exit                                  |\n"
    "+------------------------------------------+"
)


def format_course(course: Course) -> str:
    """Return one table row describing the course."""
    if course.prerequisites:
        prereqs = "".join(f"{pre} " for pre in course.prerequisites)
    else:
        prereqs = "None"
    return (
        f"{course.course_id:<12}{course.title:<35}{prereqs:<25}{course.teacher:<20}"
    )


def format_header() -> str:
    """Return the table heading and its rule line."""
    return f"{'Course ID':<12}{'Title':<40}Prerequisites | Instructor\n" + "-" * 80


def format_menu() -> str:
    """Return the boxed main menu."""
    return _MENU


def _split(text: str, delimiter: str) -> list[str]:
    # A trailing delimiter does not start an extra empty field.
    parts = text.split(delimiter)
    if parts[-1] == "":
        parts.pop()
    return parts


def parse_course_line(line: str) -> Course | None:
    """Build a course from one CSV line, or return None if it has under two fields."""
    columns = _split(line, ",")
    if len(columns) < 2:
        return None
    prerequisites = []
    if len(columns) > 2:
        prerequisites = [pre for pre in columns[2].split(" ") if pre]
    teacher = columns[3] if len(columns) > 3 else ""
    return Course(columns[0], columns[1], prerequisites, teacher)


def load_courses(path: str | Path, course_map: CourseMap) -> int:
    """Insert every course in the file into the map; return how many lines gave a course.

    Raises OSError if the file cannot be read.
    """
    count = 0
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            course = parse_course_line(line.rstrip("\n"))
            if course is not None:
                course_map.insert(course)
                count += 1
    return count


def _read_token(prompt: str) -> str:
    words = input(prompt).split()
    return words[0] if words else ""


def _print_table(courses: list[Course]) -> None:
    print(format_header())
    for course in courses:
        print(format_course(course))


def main(argv: list[str] | None = None) -> int:
    """Run the interactive course planner."""
    parser = argparse.ArgumentParser(prog="courseplanner", description="Course planner")
    parser.add_argument("file", nargs="?", default=DEFAULT_FILE, help="course CSV file")
    args = parser.parse_args(argv)

    course_map = CourseMap()
    data_loaded = False

    try:
        while True:
            print("\n" + format_menu())
            choice = _read_token("\nEnter your choice: ")

            if choice == "1":
                try:
                    load_courses(args.file, course_map)
                    data_loaded = True
                except OSError:
                    data_loaded = False
                print("Courses loaded successfully!" if data_loaded else "Failed to load courses.")
            elif choice in ("2", "3", "4") and not data_loaded:
                print("\nPlease load course data first.")
            elif choice == "2":
                _print_table(course_map.sorted_courses())
            elif choice == "3":
                search_id = _read_token("\nEnter a Course ID to search: ")
                found = course_map.search(search_id)
                if found is not None:
                    _print_table([found])
                else:
                    print("Course not found.")
            elif choice == "4":
                print("\nChoose sorting method:")
                print("  1. By Course ID")
                print("  2. By Title")
                sort_choice = _read_token("Enter choice: ")
                method = SortMethod.BY_TITLE if sort_choice == "2" else SortMethod.BY_ID
                _print_table(course_map.sorted_courses(method))
            elif choice == "9":
                print("\nExiting...")
                return 0
            else:
                print("\nInvalid choice. Please try again.")
    except EOFError:
        return 0