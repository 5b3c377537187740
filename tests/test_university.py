import pytest

from campusreg.roster import DuplicateIdError, Group, NotFoundError, StudentList
from campusreg.university import Faculty, University


@pytest.fixture
def uni():
    return University("TestU")


@pytest.fixture
def fac(uni):
    f = Faculty(100, "F1")
    uni.add_faculty(f)
    return f


# Faculty cases


def test_add_groups(uni, fac):
    uni.add_group(fac, Group(10, "EIfu-23"))
    uni.add_group(fac, Group(11, "ISKfu-23"))
    assert len(fac) == 2


def test_group_duplicates(uni, fac):
    g1 = Group(10, "EIfu-23")
    uni.add_group(fac, g1)
    with pytest.raises(DuplicateIdError):
        uni.add_group(fac, g1)
    assert len(fac) == 1


def test_across_faculty_group_duplicates(uni, fac):
    f2 = Faculty(200, "F2")
    uni.add_faculty(f2)
    uni.add_group(f2, Group(42, "EIfu-23"))
    with pytest.raises(DuplicateIdError):
        uni.add_group(fac, Group(42, "ISKfu-23"))
    assert len(f2) == 1
    assert len(fac) == 0


def test_remove_groups(uni, fac):
    g1 = Group(10, "EIfu-23")
    g2 = Group(11, "ISKfu-23")
    uni.add_group(fac, g1)
    uni.add_group(fac, g2)
    assert len(fac) == 2
    fac.remove_group(g2)
    assert len(fac) == 1
    fac.remove_group(g1)
    assert len(fac) == 0


def test_remove_missing_group_raises(fac):
    with pytest.raises(NotFoundError):
        fac.remove_group(Group(99, "X"))


def test_remove_group_unenrols_students(uni, fac):
    students = StudentList()
    s = students.add(1, "A")
    g = Group(10, "EIfu-23")
    uni.add_group(fac, g)
    s.join(g)
    fac.remove_group(g)
    assert s.groups == ()
    assert uni.find_group(10) is None


def test_find_group_in_faculty(uni, fac):
    g = Group(10, "EIfu-23")
    uni.add_group(fac, g)
    assert fac.find_group(10) is g
    assert fac.find_group(11) is None


def test_faculty_name_is_clipped():
    f = Faculty(1, "x" * 40)
    assert f.name == "x" * 31


# University cases


def test_add_faculties(uni):
    f = Faculty(100, "Elec")
    uni.add_faculty(f)
    assert len(uni.faculties) == 1
    assert uni.find_faculty(100) is f


def test_faculty_duplicates(uni):
    f1 = Faculty(100, "Elec")
    f2 = Faculty(100, "Fund")
    uni.add_faculty(f1)
    with pytest.raises(DuplicateIdError):
        uni.add_faculty(f2)
    assert len(uni.faculties) == 1
    assert uni.find_faculty(100) is f1


def test_group_duplicates_across_university(uni):
    f1 = Faculty(100, "Elec")
    f2 = Faculty(101, "Fund")
    uni.add_faculty(f1)
    uni.add_faculty(f2)
    uni.add_group(f1, Group(10, "EIfu-23"))
    with pytest.raises(DuplicateIdError):
        uni.add_group(f2, Group(10, "ISKfu-23"))


def test_remove_faculties(uni):
    f1 = Faculty(100, "Elec")
    f2 = Faculty(101, "Fund")
    uni.add_faculty(f1)
    uni.add_faculty(f2)
    assert len(uni.faculties) == 2
    uni.remove_faculty(f2)
    assert len(uni.faculties) == 1
    uni.remove_faculty(f1)
    assert len(uni.faculties) == 0


def test_remove_missing_faculty_raises(uni):
    with pytest.raises(NotFoundError):
        uni.remove_faculty(Faculty(5, "Ghost"))


def test_remove_faculty_swaps_last_in(uni):
    fs = [Faculty(i, f"F{i}") for i in (1, 2, 3)]
    for f in fs:
        uni.add_faculty(f)
    uni.remove_faculty(fs[0])
    assert [f.id for f in uni.faculties] == [3, 2]


def test_find_group_and_by_name(uni, fac):
    g = Group(10, "EIfu-23")
    uni.add_group(fac, g)
    assert uni.find_group(10) is g
    assert uni.find_group_by_name("EIfu-23") is g
    assert uni.find_group_by_name("nope") is None
    assert uni.find_faculty(999) is None


def test_iter_groups_and_count(uni, fac):
    f2 = Faculty(200, "F2")
    uni.add_faculty(f2)
    uni.add_group(fac, Group(1, "a"))
    uni.add_group(f2, Group(2, "b"))
    uni.add_group(fac, Group(3, "c"))
    assert [g.id for g in uni.iter_groups()] == [1, 3, 2]
    assert uni.group_count() == 3


def test_close_detaches_everything(uni, fac):
    students = StudentList()
    s = students.add(1, "A")
    g = Group(10, "EIfu-23")
    uni.add_group(fac, g)
    s.join(g)
    uni.close()
    assert uni.faculties == ()
    assert s.groups == ()
    assert len(g) == 0