"""Students, groups and the many-to-many enrolment between them."""

from __future__ import annotations

from typing import Iterator

NAME_LIMIT = 31


class RosterError(Exception):
    """Base class for registry errors."""


class DuplicateIdError(RosterError):
    """An object with the same id already exists."""


class NotFoundError(RosterError):
    """The requested object or relation does not exist."""


def _clip(name: str) -> str:
    return name[:NAME_LIMIT]


def _swap_remove(items: list, item: object) -> None:
    """Remove ``item`` by identity, moving the last element into its slot."""
    for position, candidate in enumerate(items):
        if candidate is item:
            last = items.pop()
            if position < len(items):
                items[position] = last
            return
    raise NotFoundError(item)


def _holds(items: list, item: object) -> bool:
    return any(candidate is item for candidate in items)


class Student:
    """A student who may be enrolled in any number of groups."""

    def __init__(self, student_id: int, name: str) -> None:
        self.id = student_id
        self.name = name
        self._groups: list[Group] = []

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = _clip(value)

    @property
    def groups(self) -> tuple[Group, ...]:
        """Groups the student is enrolled in, in enrolment order."""
        return tuple(self._groups)

    def join(self, group: Group) -> None:
        """Enrol in ``group``; joining twice has no further effect."""
        group.add_student(self)

    def leave(self, group: Group) -> None:
        """Leave ``group``; raises NotFoundError if not enrolled."""
        group.remove_student(self)

    def leave_all(self) -> None:
        """Leave every group, latest enrolment first."""
        while self._groups:
            self._groups[-1].remove_student(self)

    def __str__(self) -> str:
        return f"{self.id} {self.name}"

    def __repr__(self) -> str:
        return f"Student(id={self.id!r}, name={self.name!r})"


class Group:
    """A group that references its enrolled students without owning them."""

    def __init__(self, group_id: int, name: str) -> None:
        self.id = group_id
        self.name = name
        self._students: list[Student] = []

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = _clip(value)

    @property
    def students(self) -> tuple[Student, ...]:
        """Enrolled students."""
        return tuple(self._students)

    def add_student(self, student: Student) -> None:
        """Enrol ``student`` in both directions; already enrolled is a no-op."""
        if _holds(self._students, student):
            return
        self._students.append(student)
        student._groups.append(self)

    def remove_student(self, student: Student) -> None:
        """Unenrol ``student``; raises NotFoundError if not enrolled."""
        if not _holds(self._students, student):
            raise NotFoundError(f"student {student.id} is not in group {self.id}")
        _swap_remove(self._students, student)
        _swap_remove(student._groups, self)

    def detach_all(self) -> None:
        """Unenrol every student, last first."""
        while self._students:
            self.remove_student(self._students[-1])

    def __len__(self) -> int:
        return len(self._students)

    def __str__(self) -> str:
        return f"{self.id} {self.name}"

    def __repr__(self) -> str:
        return f"Group(id={self.id!r}, name={self.name!r})"


class StudentList:
    """All students of the registry, kept in insertion order."""

    def __init__(self) -> None:
        self._by_id: dict[int, Student] = {}

    def add(self, student_id: int, name: str) -> Student:
        """Create and append a student; raises DuplicateIdError on a taken id."""
        if student_id in self._by_id:
            raise DuplicateIdError(f"student {student_id} already exists")
        student = Student(student_id, name)
        self._by_id[student_id] = student
        return student

    def remove(self, student_id: int) -> None:
        """Remove a student and unenrol them from every group."""
        student = self._by_id.get(student_id)
        if student is None:
            raise NotFoundError(f"no student with id {student_id}")
        student.leave_all()
        del self._by_id[student_id]

    def find(self, student_id: int) -> Student | None:
        """Return the student with ``student_id`` or None."""
        return self._by_id.get(student_id)

    def clear(self) -> None:
        """Remove all students, detaching each from their groups."""
        for student in self._by_id.values():
            while student._groups:
                student.leave(student._groups[0])
        self._by_id.clear()

    def __iter__(self) -> Iterator[Student]:
        return iter(list(self._by_id.values()))

    def __len__(self) -> int:
        return len(self._by_id)

    def __contains__(self, student_id: object) -> bool:
        return student_id in self._by_id