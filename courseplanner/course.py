"""The course record kept by the planner."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Course:
    """A course with its identifier, title, prerequisites and teacher."""

    course_id: str
    title: str
    prerequisites: list[str] = field(default_factory=list)
    teacher: str = ""