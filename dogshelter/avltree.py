"""An AVL tree of shelter animals keyed by name."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Iterator, Optional, TextIO


@dataclass
class Animal:
    """One animal record held by the shelter."""

    name: str
    type: str
    gender: str
    age: int
    cage: str
    date: str
    donation: int

    def describe(self) -> str:
        """Return the one-line description used in every listing."""
        return (
            f"Name: {self.name} Type: {self.type} Gender: {self.gender} "
            f"Age: {self.age} Cage: {self.cage} Date: {self.date} "
            f"Donation: {self.donation}"
        )


@dataclass
class _Node:
    animals: list[Animal]
    left: Optional[_Node] = None
    right: Optional[_Node] = None
    height: int = 0

    @property
    def key(self) -> str:
        return self.animals[0].name


def _height(node: Optional[_Node]) -> int:
    return -1 if node is None else node.height


def _refresh(node: _Node) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _rotate_with_left(k1: _Node) -> _Node:
    k2 = k1.left
    assert k2 is not None
    k1.left = k2.right
    k2.right = k1
    _refresh(k1)
    _refresh(k2)
    return k2


def _rotate_with_right(k1: _Node) -> _Node:
    k2 = k1.right
    assert k2 is not None
    k1.right = k2.left
    k2.left = k1
    _refresh(k1)
    _refresh(k2)
    return k2


def _double_rotate_with_left(k3: _Node) -> _Node:
    assert k3.left is not None
    k3.left = _rotate_with_right(k3.left)
    return _rotate_with_left(k3)


def _double_rotate_with_right(k3: _Node) -> _Node:
    assert k3.right is not None
    k3.right = _rotate_with_left(k3.right)
    return _rotate_with_right(k3)


def _insert(node: Optional[_Node], animal: Animal) -> _Node:
    if node is None:
        return _Node([animal])
    name = animal.name
    if name < node.key:
        node.left = _insert(node.left, animal)
        if _height(node.left) - _height(node.right) == 2:
            assert node.left is not None
            if name < node.left.key:
                node = _rotate_with_left(node)
            else:
                node = _double_rotate_with_left(node)
    elif name > node.key:
        node.right = _insert(node.right, animal)
        if _height(node.right) - _height(node.left) == 2:
            assert node.right is not None
            if name > node.right.key:
                node = _rotate_with_right(node)
            else:
                node = _double_rotate_with_right(node)
    else:
        node.animals.append(animal)
    _refresh(node)
    return node


def _in_order(node: Optional[_Node]) -> Iterator[_Node]:
    if node is None:
        return
    yield from _in_order(node.left)
    yield node
    yield from _in_order(node.right)


@dataclass
class AVLTree:
    """Animals ordered by name; animals sharing a name keep insertion order."""

    _root: Optional[_Node] = field(default=None, init=False, repr=False)
    _size: int = field(default=0, init=False, repr=False)

    def __init__(self) -> None:
        self._root = None
        self._size = 0

    def insert(self, animal: Animal) -> None:
        """Add an animal, rebalancing the tree as needed."""
        self._root = _insert(self._root, animal)
        self._size += 1

    def find(self, name: str) -> list[Animal]:
        """Return every animal with this name, or an empty list."""
        node = self._root
        while node is not None:
            if name < node.key:
                node = node.left
            elif name > node.key:
                node = node.right
            else:
                return list(node.animals)
        return []

    def __iter__(self) -> Iterator[Animal]:
        for node in _in_order(self._root):
            yield from node.animals

    def __len__(self) -> int:
        return self._size

    def height(self) -> int:
        """Height of the tree; -1 when it is empty."""
        return _height(self._root)

    def clear(self) -> None:
        """Remove every animal."""
        self._root = None
        self._size = 0

    def display(self, file: Optional[TextIO] = None) -> None:
        """Print every animal in alphabetical order."""
        out = sys.stdout if file is None else file
        for animal in self:
            print(animal.describe(), file=out)