from campusreg.app import App
from campusreg.roster import Group
from campusreg.university import Faculty


def test_default_university_name():
    app = App()
    assert app.university.name == "Vilnius Tech"
    assert len(app.students) == 0


def test_custom_name_is_clipped():
    app = App("n" * 50)
    assert app.university.name == "n" * 31


def test_close_clears_students_and_university():
    app = App("TestU")
    f = Faculty(1, "F")
    app.university.add_faculty(f)
    g = Group(10, "G")
    app.university.add_group(f, g)
    s = app.students.add(1, "A")
    s.join(g)
    app.close()
    assert len(app.students) == 0
    assert app.university.faculties == ()
    assert len(g) == 0
    assert s.groups == ()


def test_context_manager_closes():
    with App("TestU") as app:
        app.students.add(1, "A")
        app.university.add_faculty(Faculty(1, "F"))
        assert len(app.students) == 1
    assert len(app.students) == 0
    assert app.university.group_count() == 0
    assert app.university.faculties == ()