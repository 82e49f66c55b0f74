"""Interactive shelter application working on an animal file."""

from __future__ import annotations

import re
import sys
from typing import Optional, Sequence, TextIO

from dogshelter.avltree import AVLTree, Animal

MENU = (
    "\n-------Menu-------\n"
    "(1)Insert animal\n"
    "(2)Display the full index of animals\n"
    "(3)Display the details of the animals\n"
    "(4)Display the popular animal\n"
    "(5)Exit\n"
    "Enter your option:"
)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_animal(line: str) -> Animal:
    """Parse one 'name;type;gender;age;cage;date;donation' record."""
    fields = [part for part in line.rstrip("\n").split(";") if part]
    if len(fields) < 7:
        raise ValueError(f"malformed animal record: {line!r}")
    name, type_, gender, age, cage, date, donation = fields[:7]
    return Animal(
        name=name,
        type=type_,
        gender=gender[0],
        age=_atoi(age),
        cage=cage[0],
        date=date,
        donation=_atoi(donation),
    )


def load_animals(path: str) -> AVLTree:
    """Read every record of the file into a new tree."""
    tree = AVLTree()
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            if line.strip():
                tree.insert(parse_animal(line))
    return tree


def display_animals(tree: AVLTree) -> list[str]:
    """Descriptions of all animals in alphabetical order."""
    return [animal.describe() for animal in tree]


def info_animal(tree: AVLTree, name: str) -> list[str]:
    """Descriptions of the animals with this name, or a not-found message."""
    found = tree.find(name)
    if not found:
        return [f"There is no available animal whose name is {name}."]
    return [animal.describe() for animal in found]


def find_popular_donation(tree: AVLTree) -> Optional[Animal]:
    """The animal with the largest donation, or None for an empty tree."""
    return max(tree, key=lambda animal: animal.donation, default=None)


def popular_animals(tree: AVLTree) -> list[Animal]:
    """All animals sharing the largest donation, in alphabetical order."""
    top = find_popular_donation(tree)
    if top is None:
        return []
    return [animal for animal in tree if animal.donation == top.donation]


class _Scanner:
    """Whitespace-delimited reading of an input stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending = ""

    def _next_char(self) -> str:
        if self._pending:
            char, self._pending = self._pending, ""
            return char
        return self._stream.read(1)

    def char(self) -> str:
        char = self._next_char()
        while char and char.isspace():
            char = self._next_char()
        if not char:
            raise EOFError
        return char

    def word(self) -> str:
        chars = [self.char()]
        while True:
            char = self._next_char()
            if not char:
                break
            if char.isspace():
                self._pending = char
                break
            chars.append(char)
        return "".join(chars)

    def number(self) -> int:
        try:
            return int(self.word())
        except ValueError:
            return 0


def _insert_from_input(tree: AVLTree, scan: _Scanner, out: TextIO) -> None:
    out.write("Please enter animal details:\n")
    out.write("Name:")
    name = scan.word()
    out.write("Type:")
    type_ = scan.word()
    out.write("Cage:")
    cage = scan.char()
    out.write("Gender:")
    gender = scan.char()
    out.write("Date:")
    date = scan.word()
    out.write("Age:")
    age = scan.number()
    out.write("Donation:")
    donation = scan.number()
    tree.insert(Animal(name, type_, gender, age, cage, date, donation))
    out.write(f"{type_} {name} has been added successfully.\n")


def _write_lines(out: TextIO, lines: Sequence[str]) -> None:
    for line in lines:
        out.write(line + "\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive menu on the animal file named in argv."""
    args = list(sys.argv[1:] if argv is None else argv)
    out = sys.stdout
    if not args:
        out.write("Please provide a file name: ")
        return 0

    try:
        tree = load_animals(args[0])
    except FileNotFoundError:
        out.write("File not found.\n")
        tree = AVLTree()

    out.write("Welcome to data analysis @ Animal Shelter\n")
    scan = _Scanner(sys.stdin)
    try:
        while True:
            out.write(MENU)
            token = scan.word()
            try:
                option = int(token)
            except ValueError:
                out.write(f"Option {token} can't be recognized.")
                continue
            if option == 1:
                _insert_from_input(tree, scan, out)
            elif option == 2:
                _write_lines(out, display_animals(tree))
            elif option == 3:
                out.write("Name: ")
                _write_lines(out, info_animal(tree, scan.word()))
            elif option == 4:
                out.write("Detailed information of the most popular animal: \n")
                _write_lines(out, [a.describe() for a in popular_animals(tree)])
            elif option == 5:
                break
            else:
                out.write(f"Option {option} can't be recognized.")
    except EOFError:
        pass
    finally:
        tree.clear()
    return 0


if __name__ == "__main__":
    sys.exit(main())