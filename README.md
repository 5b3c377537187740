# campusreg

campusreg keeps a university's structure in memory. A university holds
faculties, each faculty holds groups, and students can be enrolled in any
number of groups across the university. Faculty ids are unique within the
university, group ids are unique across all faculties, and student ids are
unique in the student list.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Interactive shell

```
campusreg
```

The shell starts with a university named "Vilnius Tech", prints a short
greeting and reads one command per line after a `> ` prompt. It stops at
`quit` or at the end of input.

| Command | Effect |
| --- | --- |
| `add-faculty <id> <name>` | Add a faculty. Fails if the id is already taken. |
| `remove-faculty <id>` | Remove a faculty and its groups. |
| `list-faculties` | Print `<id> <name>` for every faculty. |
| `faculty-add-group <faculty_id> <group_id> <group_name>` | Add a group to a faculty. Fails if the faculty does not exist or the group id is already taken anywhere. |
| `faculty-remove-group <faculty_id> <group_id>` | Remove a group from a faculty. |
| `faculty-list-groups <faculty_id>` | List a faculty's groups. |
| `list-groups` | List every group in the university, faculty by faculty. |
| `add-student <id> <name>` | Register a student. |
| `remove-student <id>` | Remove a student from the register and from all their groups. |
| `list-students` | List every student in the order they were added. |
| `student-list-groups <student_id>` | List the groups a student is in. |
| `group-list-students <group_id>` | List the students in a group. |
| `enroll <student_id> <group_id>` | Put a student in a group. Enrolling twice has no further effect. |
| `unenroll <student_id> <group_id>` | Take a student out of a group. |
| `uni-info` | Show the university name and its faculty, group and student counts. |
| `uni-rename <name>` | Rename the university. |
| `help [command]` | List the commands, or show how one command is used. |
| `quit` | Leave the shell. |

Faculty, group and university names may contain spaces; a student name is a
single word. Ids are read leniently: text that does not start with a number
counts as 0. Names are cut to 31 characters, and at most 16 words of a line
are read.

An unknown command prints `Unknown command: <name>`. Missing arguments and
some failed lookups print an `Error: ...` line; other failures (for example a
duplicate student id) leave the registry unchanged without printing anything.

## Library use

```python
from campusreg.app import App
from campusreg.cli import Shell

with App("Vilnius Tech") as app:
    shell = Shell(app)
    shell.execute("add-faculty 1 Electronics")
    shell.execute("faculty-add-group 1 10 EIfu-23")
    shell.execute("add-student 7 Ada")
    shell.execute("enroll 7 10")
    shell.execute("group-list-students 10")   # prints "7 Ada"
```

`Shell(app=None, out=None)` writes to `out` (standard output by default).
`Shell.execute(line)` runs one line and returns `False` once `quit` is given;
a failing command raises `CommandError`, whose `shown` attribute says whether
the interactive shell would print it. `Shell.run(lines)` runs the prompt loop
over any iterable of lines.

You can also work with the model directly:

```python
from campusreg.roster import Group, StudentList
from campusreg.university import Faculty, University

university = University("Vilnius Tech")
faculty = Faculty(1, "Electronics")
university.add_faculty(faculty)
group = Group(10, "EIfu-23")
university.add_group(faculty, group)

students = StudentList()
ada = students.add(7, "Ada")
ada.join(group)
assert group.students == (ada,)
students.remove(7)          # also takes Ada out of the group
```

- `campusreg.roster`: `Student` (`join`, `leave`, `leave_all`, `groups`),
  `Group` (`add_student`, `remove_student`, `detach_all`, `students`) and
  `StudentList` (`add`, `remove`, `find`, `clear`, iteration, `len`, `in`
  by id).
- `campusreg.university`: `Faculty` (`find_group`, `remove_group`, iteration
  over its groups, `len`) and `University` (`add_faculty`, `remove_faculty`,
  `find_faculty`, `add_group`, `find_group`, `find_group_by_name`,
  `iter_groups`, `group_count`, `close`).
- `campusreg.app`: `App`, holding `university` and `students`; usable as a
  context manager that clears both on exit.

A failed operation raises `DuplicateIdError` or `NotFoundError`, both
subclasses of `RosterError`.

## Limitations

Everything lives in memory only. There is no saving to or loading from a
file, so the registry is empty each time the shell starts.