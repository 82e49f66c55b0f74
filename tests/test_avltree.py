import io
import math

import pytest

from dogshelter.avltree import AVLTree, Animal


def make(name, donation=0, type_="Dog"):
    return Animal(name, type_, "M", 3, "A", "2020-01-01", donation)


@pytest.fixture
def tree():
    t = AVLTree()
    for name in ["Max", "Bella", "Rex", "Coco", "Luna", "Zeus", "Ace"]:
        t.insert(make(name))
    return t


def test_describe_format():
    animal = Animal("Rex", "Dog", "M", 3, "A", "2020-01-01", 100)
    assert animal.describe() == (
        "Name: Rex Type: Dog Gender: M Age: 3 Cage: A "
        "Date: 2020-01-01 Donation: 100"
    )


def test_empty_tree():
    t = AVLTree()
    assert len(t) == 0
    assert t.height() == -1
    assert list(t) == []
    assert t.find("Rex") == []


def test_iteration_is_alphabetical(tree):
    names = [a.name for a in tree]
    assert names == sorted(names)
    assert len(tree) == 7


def test_sorted_inserts_stay_balanced():
    t = AVLTree()
    names = [f"dog{i:03d}" for i in range(100)]
    for name in names:
        t.insert(make(name))
    assert [a.name for a in t] == names
    assert t.height() <= 1.44 * math.log2(len(t) + 2)


def test_reverse_inserts_stay_balanced():
    t = AVLTree()
    names = [f"cat{i:03d}" for i in range(64)]
    for name in reversed(names):
        t.insert(make(name))
    assert [a.name for a in t] == names
    assert t.height() <= 1.44 * math.log2(len(t) + 2)


def test_seven_sequential_inserts_form_perfect_tree():
    t = AVLTree()
    for name in "abcdefg":
        t.insert(make(name))
    assert t.height() == 2


def test_zigzag_inserts_trigger_double_rotation():
    t = AVLTree()
    for name in ["m", "c", "f"]:
        t.insert(make(name))
    assert t.height() == 1
    assert [a.name for a in t] == ["c", "f", "m"]
    for name in ["t", "p"]:
        t.insert(make(name))
    assert t.height() == 2


def test_duplicates_kept_in_insertion_order():
    t = AVLTree()
    first = make("Rex", 10)
    second = make("Rex", 20, "Cat")
    t.insert(first)
    t.insert(make("Ace"))
    t.insert(second)
    assert t.find("Rex") == [first, second]
    assert len(t) == 3
    assert t.height() == 1


def test_find_missing(tree):
    assert tree.find("Nobody") == []


def test_find_present(tree):
    found = tree.find("Luna")
    assert [a.name for a in found] == ["Luna"]


def test_clear(tree):
    tree.clear()
    assert len(tree) == 0
    assert list(tree) == []
    assert tree.height() == -1


def test_display_writes_descriptions(tree):
    buf = io.StringIO()
    tree.display(buf)
    lines = buf.getvalue().splitlines()
    assert lines == [a.describe() for a in tree]