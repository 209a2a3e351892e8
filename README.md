# courseplanner

A small interactive course planner for the terminal. It reads a course
catalogue from a CSV file, looks a course up by its ID, and lists the whole
catalogue sorted by course ID or by title.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Usage

```
courseplanner [FILE]
```

`FILE` is the catalogue to read; it defaults to `courses.csv` in the current
directory. The planner shows a menu:

```
1. Load Courses from File
2. Print All Courses
3. Search for a Course
4. Display Sorted Courses
9. Exit
```

- **1** reads the catalogue file (as UTF-8) and reports whether it could be
  opened. Loading again adds the file's courses to those already loaded;
  a course with an ID already present replaces the stored one.
- **2** lists every course, ordered by course ID.
- **3** asks for a course ID and shows that course, or says it was not found.
- **4** asks whether to sort by course ID (1) or by title (2); any other answer
  sorts by course ID.
- **9** exits. End of input also ends the program.

Options 2–4 ask you to load the data first until a load has succeeded. Any
other choice is reported as invalid.

## Catalogue format

Each line describes one course:

```
COURSE_ID,Title,PREREQ1 PREREQ2,Teacher
```

- The course ID and title are required. Lines with fewer than two fields are
  skipped.
- Prerequisites are optional and separated by spaces.
- The teacher's name is optional.
- Fields are split on every comma; there is no quoting.
- If an ID appears more than once, the later line replaces the earlier one.

Example:

```
CSCI100,Introduction to Computer Science,,Dr. Example
CSCI200,Data Structures,CSCI101,Prof. Sample
CSCI300,Introduction to Algorithms,CSCI200 MATH201,
```

## Library use

```python
from courseplanner.course import Course
from courseplanner.hashmap import CourseMap
from courseplanner.sorting import SortMethod

catalogue = CourseMap()
catalogue.insert(Course("CSCI200", "Data Structures", ["CSCI101"], "Prof. Sample"))
catalogue.insert(Course("CSCI100", "Introduction to Computer Science"))

print(catalogue.search("CSCI200"))   # None when the ID is unknown
print(len(catalogue))                # 2
for course in catalogue.sorted_courses(SortMethod.BY_TITLE):
    print(course.course_id, course.title)
```

- `courseplanner.course.Course` is a dataclass with `course_id`, `title`,
  `prerequisites` and `teacher`.
- `courseplanner.hashmap.CourseMap(size=179)` stores courses keyed by ID;
  `insert`, `search`, `sorted_courses(method)` and `len()` are available.
  A size below 1 raises `ValueError`.
- `courseplanner.sorting.SortMethod` has `BY_ID`, `BY_TITLE` and `BY_TEACHER`;
  `quick_sort(courses, method)` returns a new sorted list. Ordering by teacher
  is available here but not from the menu.
- `courseplanner.cli` provides `parse_course_line(line)`,
  `load_courses(path, course_map)` (returns the number of courses read and
  raises `OSError` if the file cannot be opened), `format_course(course)`,
  `format_header()` and `format_menu()`.

## Limitations

The planner only reads catalogues. It does not add, edit or remove courses
from the menu, does not save the catalogue back to a file, and does not check
that prerequisites name courses in the catalogue.