"""Interactive command shell over an :class:`App`."""

from __future__ import annotations

import re
import sys
from typing import Callable, Iterable, TextIO

from campusreg.app import App
from campusreg.roster import RosterError

MAX_TOKENS = 16
PROMPT = "> "
INTRO = (
    "Type 'help' to see the list of commands or 'help [command]' to see the command's format.",
    "Type 'quit' to exit.",
)

_DELIMITERS = re.compile(r"[ \t\r\n]+")
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


class CommandError(Exception):
    """A command failed; ``shown`` tells whether the shell reports it."""

    def __init__(self, message: str, *, shown: bool = True) -> None:
        super().__init__(message)
        self.shown = shown


def _atoi(text: str) -> int:
    """Parse a leading integer the lenient way; anything else reads as 0."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _tokenize(line: str) -> list[str]:
    line = line.split("\n", 1)[0]
    return [token for token in _DELIMITERS.split(line) if token][:MAX_TOKENS]


Handler = Callable[[list[str]], None]


class Shell:
    """Reads command lines and applies them to an application."""

    def __init__(self, app: App | None = None, out: TextIO | None = None) -> None:
        self.app = app if app is not None else App()
        self.out = out if out is not None else sys.stdout
        self._commands: dict[str, tuple[Handler, str]] = {
            "list-groups": (
                self._list_groups,
                "list-groups - List groups across the university in such format: <id> <name>",
            ),
            "add-faculty": (
                self._add_faculty,
                "add-faculty <id> <name> - Create a new faculty and add it to the university; "
                "fails if a faculty with the same ID already exists",
            ),
            "remove-faculty": (
                self._remove_faculty,
                "remove-faculty <id> - Remove faculty from the university",
            ),
            "list-faculties": (
                self._list_faculties,
                "list-faculties - List all faculties across the whole university in such format: <id> <name>",
            ),
            "add-student": (
                self._add_student,
                "add-student <id> <name> - Add a student into the global doubly linked list",
            ),
            "remove-student": (
                self._remove_student,
                "remove-student <id> - Remove a student from the global doubly linked list "
                "and all groups they belong to",
            ),
            "list-students": (
                self._list_students,
                "list-students - List all students across the university; format: <id> <name>",
            ),
            "student-list-groups": (
                self._student_list_groups,
                "student-list-groups <student_id> - List groups of a particualar student",
            ),
            "faculty-add-group": (
                self._faculty_add_group,
                "faculty-add-group <faculty_id> <group_id> <group_name> - Add a group into a particular "
                "faculty; fails if a groups with the same ID exists anywhere in the university",
            ),
            "faculty-remove-group": (
                self._faculty_remove_group,
                "faculty-remove-group <faculty_id> <group_id> - Remove group from a particular faculty",
            ),
            "faculty-list-groups": (
                self._faculty_list_groups,
                "faculty-list-groups <faculty_id> - List all groups that belong to a particular "
                "faculty in such format: <id> <name>",
            ),
            "group-list-students": (
                self._group_list_students,
                "group-list-students <group_id> - List students of a particular group in such format: <id> <name>",
            ),
            "enroll": (
                self._enroll,
                "enroll <student_id> <group_id> - Enroll a student into a group",
            ),
            "unenroll": (
                self._unenroll,
                "unenroll <student_id> <group_id> - Remove a student from a group",
            ),
            "uni-info": (
                self._uni_info,
                "uni-info - Print short summary of the university",
            ),
            "uni-rename": (
                self._uni_rename,
                "uni-rename <name> - Rename the university (default: Vilnius Tech)",
            ),
            "quit": (self._quit, "quit - Exit the program and clean up"),
            "help": (
                self._help,
                "help - List all commands or help [command] - print format of the command",
            ),
        }
        self._quitting = False

    def _emit(self, text: str = "") -> None:
        print(text, file=self.out)

    def execute(self, line: str) -> bool:
        """Run one command line; return False once ``quit`` is given."""
        tokens = _tokenize(line)
        if not tokens:
            return True
        name, args = tokens[0], tokens[1:]
        entry = self._commands.get(name)
        if entry is None:
            raise CommandError(f"Unknown command: {name}")
        handler, _ = entry
        self._quitting = False
        try:
            handler(args)
        except RosterError as exc:
            raise CommandError(str(exc), shown=False) from exc
        return not self._quitting

    def run(self, lines: Iterable[str]) -> None:
        """Prompt for and execute lines until ``quit`` or the input ends."""
        for text in INTRO:
            self._emit(text)
        for line in _prompted(self, lines):
            try:
                if not self.execute(line):
                    break
            except CommandError as exc:
                if exc.shown:
                    self._emit(str(exc))

    # Commands

    def _list_groups(self, args: list[str]) -> None:
        for group in self.app.university.iter_groups():
            self._emit(str(group))

    def _add_faculty(self, args: list[str]) -> None:
        from campusreg.university import Faculty

        if len(args) < 2:
            raise CommandError("Error: failed to add the faculty (invalid input).")
        faculty_id = _atoi(args[0])
        university = self.app.university
        if university.find_faculty(faculty_id) is not None:
            if len(args) >= 3:
                raise CommandError(f"faculty {faculty_id} already exists", shown=False)
            raise CommandError("Error: failed to add faculty (duplicate id).")
        university.add_faculty(Faculty(faculty_id, " ".join(args[1:])))

    def _remove_faculty(self, args: list[str]) -> None:
        if not args:
            raise CommandError("Error: failed to remove the faculty (invalid input).")
        faculty_id = _atoi(args[0])
        university = self.app.university
        faculty = university.find_faculty(faculty_id)
        if faculty is None:
            raise CommandError(f"Error: failed to remove the faculty with id  {faculty_id}")
        university.remove_faculty(faculty)

    def _list_faculties(self, args: list[str]) -> None:
        for faculty in self.app.university.faculties:
            self._emit(str(faculty))

    def _add_student(self, args: list[str]) -> None:
        if len(args) < 2:
            raise CommandError("Error: failed to add the student (invalid input).")
        self.app.students.add(_atoi(args[0]), args[1])

    def _remove_student(self, args: list[str]) -> None:
        if not args:
            raise CommandError("Error: failed to remove the faculty (invalid input).")
        student_id = _atoi(args[0])
        if student_id not in self.app.students:
            raise CommandError(f"Error: failed to remove the student with id  {student_id}")
        self.app.students.remove(student_id)

    def _list_students(self, args: list[str]) -> None:
        for student in self.app.students:
            self._emit(str(student))

    def _student_list_groups(self, args: list[str]) -> None:
        if not args:
            raise CommandError(
                "Error: failed to list the groups which the student is enrolled in (invalid input)."
            )
        student_id = _atoi(args[0])
        student = self.app.students.find(student_id)
        if student is None:
            raise CommandError(f"no student with id {student_id}", shown=False)
        for group in student.groups:
            self._emit(str(group))

    def _faculty_add_group(self, args: list[str]) -> None:
        from campusreg.roster import Group

        if len(args) < 3:
            raise CommandError(
                "Error: failed to add the group to the faculty (invalid input)."
            )
        faculty_id = _atoi(args[0])
        group_id = _atoi(args[1])
        university = self.app.university
        faculty = university.find_faculty(faculty_id)
        if faculty is None or university.find_group(group_id) is not None:
            raise CommandError(
                "Error: failed to add a group to the faculty (duplicate id)."
            )
        university.add_group(faculty, Group(group_id, " ".join(args[2:])))

    def _faculty_remove_group(self, args: list[str]) -> None:
        if len(args) < 2:
            raise CommandError("Error: failed to remove the group (invalid input).")
        faculty_id = _atoi(args[0])
        group_id = _atoi(args[1])
        faculty = self.app.university.find_faculty(faculty_id)
        group = faculty.find_group(group_id) if faculty is not None else None
        if faculty is None or group is None:
            raise CommandError(
                f"Error: failed to remove the group with id  {group_id}  "
                f"from the faculty with id  {faculty_id} "
            )
        faculty.remove_group(group)

    def _faculty_list_groups(self, args: list[str]) -> None:
        if not args:
            raise CommandError(
                "Error: failed to groups that belong to a partucular faculty (invalid input)."
            )
        faculty_id = _atoi(args[0])
        faculty = self.app.university.find_faculty(faculty_id)
        if faculty is None:
            raise CommandError(f"no faculty with id {faculty_id}", shown=False)
        for group in faculty:
            self._emit(str(group))

    def _group_list_students(self, args: list[str]) -> None:
        if not args:
            raise CommandError(
                "Error: failed to list the students that are enrolled into a particular group (invalid input)."
            )
        group_id = _atoi(args[0])
        group = self.app.university.find_group(group_id)
        if group is None:
            raise CommandError(f"no group with id {group_id}", shown=False)
        for student in group.students:
            self._emit(str(student))

    def _lookup_pair(self, args: list[str]):
        student_id = _atoi(args[0])
        group_id = _atoi(args[1])
        student = self.app.students.find(student_id)
        group = self.app.university.find_group(group_id)
        if student is None:
            raise CommandError(f"no student with id {student_id}", shown=False)
        if group is None:
            raise CommandError(f"no group with id {group_id}", shown=False)
        return student, group

    def _enroll(self, args: list[str]) -> None:
        if len(args) < 2:
            raise CommandError(
                "Error: failed to enroll the student into a group (invalid input)."
            )
        student, group = self._lookup_pair(args)
        group.add_student(student)

    def _unenroll(self, args: list[str]) -> None:
        if len(args) < 2:
            raise CommandError(
                "Error: failed to uneneroll the student from a group (invalid input)."
            )
        student, group = self._lookup_pair(args)
        group.remove_student(student)

    def _uni_info(self, args: list[str]) -> None:
        university = self.app.university
        self._emit(f"University: {university.name}")
        self._emit(f"Faculties: {len(university.faculties)}")
        self._emit(f"Groups: {university.group_count()}")
        self._emit(f"Students: {len(self.app.students)}")

    def _uni_rename(self, args: list[str]) -> None:
        if not args:
            raise CommandError("no name given", shown=False)
        self.app.university.name = " ".join(args)

    def _quit(self, args: list[str]) -> None:
        self._quitting = True

    def _help(self, args: list[str]) -> None:
        if not args:
            self._emit("Available commands")
            for name in self._commands:
                self._emit(f" {name:<15}")
            return
        entry = self._commands.get(args[0])
        if entry is not None:
            self._emit(entry[1])


def _prompted(shell: Shell, lines: Iterable[str]):
    """Write the prompt before each line is taken from ``lines``."""
    iterator = iter(lines)
    while True:
        shell.out.write(PROMPT)
        try:
            yield next(iterator)
        except StopIteration:
            return


def main(argv=None) -> int:
    """Run the interactive shell on standard input."""
    with App() as app:
        Shell(app).run(sys.stdin)
    return 0