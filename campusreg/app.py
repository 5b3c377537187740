"""Top-level container holding one university and all students."""

from __future__ import annotations

from campusreg.roster import StudentList
from campusreg.university import University

DEFAULT_UNIVERSITY_NAME = "Vilnius Tech"


class App:
    """Owns a university and the global student list."""

    def __init__(self, uni_name: str = DEFAULT_UNIVERSITY_NAME) -> None:
        self.university = University(uni_name)
        self.students = StudentList()

    def close(self) -> None:
        """Release all students, then the university."""
        self.students.clear()
        self.university.close()

    def __enter__(self) -> App:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()