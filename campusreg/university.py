"""Faculties and the university that owns them."""

from __future__ import annotations

from typing import Iterator

from campusreg.roster import DuplicateIdError, Group, NotFoundError, NAME_LIMIT


def _clip(name: str) -> str:
    return name[:NAME_LIMIT]


def _swap_remove_at(items: list, position: int) -> None:
    """Remove the element at ``position`` by moving the last element into its slot."""
    last = items.pop()
    if position < len(items):
        items[position] = last


class Faculty:
    """A faculty that owns its groups."""

    def __init__(self, faculty_id: int, name: str) -> None:
        self.id = faculty_id
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
        """Groups owned by the faculty."""
        return tuple(self._groups)

    def find_group(self, group_id: int) -> Group | None:
        """Return the group with ``group_id`` in this faculty, or None."""
        return next((g for g in self._groups if g.id == group_id), None)

    def remove_group(self, group: Group) -> None:
        """Remove ``group`` and unenrol all its students."""
        position = next(
            (pos for pos, held in enumerate(self._groups) if held is group), None
        )
        if position is None:
            raise NotFoundError(f"group {group.id} is not in faculty {self.id}")
        _swap_remove_at(self._groups, position)
        group.detach_all()

    def _dissolve(self) -> None:
        for group in self._groups:
            group.detach_all()
        self._groups.clear()

    def __iter__(self) -> Iterator[Group]:
        return iter(list(self._groups))

    def __len__(self) -> int:
        return len(self._groups)

    def __str__(self) -> str:
        return f"{self.id} {self.name}"

    def __repr__(self) -> str:
        return f"Faculty(id={self.id!r}, name={self.name!r})"


class University:
    """A university that owns faculties, which in turn own groups."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._faculties: list[Faculty] = []

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = _clip(value)

    @property
    def faculties(self) -> tuple[Faculty, ...]:
        """Faculties of the university."""
        return tuple(self._faculties)

    def _faculty_position(self, faculty_id: int) -> int | None:
        return next(
            (pos for pos, f in enumerate(self._faculties) if f.id == faculty_id), None
        )

    def add_faculty(self, faculty: Faculty) -> None:
        """Add ``faculty``; raises DuplicateIdError if its id is taken."""
        if self._faculty_position(faculty.id) is not None:
            raise DuplicateIdError(f"faculty {faculty.id} already exists")
        self._faculties.append(faculty)

    def remove_faculty(self, faculty: Faculty) -> None:
        """Remove the faculty with ``faculty``'s id and dissolve its groups."""
        position = self._faculty_position(faculty.id)
        if position is None:
            raise NotFoundError(f"no faculty with id {faculty.id}")
        stored = self._faculties[position]
        _swap_remove_at(self._faculties, position)
        stored._dissolve()
        if faculty is not stored:
            faculty._dissolve()

    def find_faculty(self, faculty_id: int) -> Faculty | None:
        """Return the faculty with ``faculty_id``, or None."""
        position = self._faculty_position(faculty_id)
        return None if position is None else self._faculties[position]

    def add_group(self, faculty: Faculty, group: Group) -> None:
        """Give ``group`` to ``faculty``; group ids are unique across the university."""
        if faculty.find_group(group.id) is not None:
            raise DuplicateIdError(
                f"group {group.id} already exists in faculty {faculty.id}"
            )
        if self.find_group(group.id) is not None:
            raise DuplicateIdError(f"group {group.id} already exists")
        faculty._groups.append(group)

    def find_group(self, group_id: int) -> Group | None:
        """Return the group with ``group_id`` in any faculty, or None."""
        return next((g for g in self.iter_groups() if g.id == group_id), None)

    def find_group_by_name(self, name: str) -> Group | None:
        """Return the first group named ``name``, or None."""
        return next((g for g in self.iter_groups() if g.name == name), None)

    def iter_groups(self) -> Iterator[Group]:
        """Yield every group, faculty by faculty."""
        for faculty in list(self._faculties):
            yield from faculty

    def group_count(self) -> int:
        """Total number of groups across all faculties."""
        return sum(len(faculty) for faculty in self._faculties)

    def close(self) -> None:
        """Dissolve every faculty and its groups."""
        for faculty in self._faculties:
            faculty._dissolve()
        self._faculties.clear()

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"University(name={self.name!r})"