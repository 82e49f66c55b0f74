# dogshelter

A small record keeper for an animal shelter. Animals are stored in an AVL tree
keyed by name. Animals that share a name are kept together under one entry, in
the order they were added.

## Installing

```
pip install .
```

## The interactive menu

Start it with a data file:

```
dogshelter animals.txt
```

Without a file name it prints `Please provide a file name: ` and stops. If the
file does not exist it prints `File not found.` and starts with an empty tree.

Each non-blank line of the file describes one animal. The fields are separated
by `;` and come in this order:

```
name;type;gender;age;cage;date;donation
```

For example:

```
Rex;Dog;M;3;A;01/02/2023;150
Luna;Cat;F;2;B;15/06/2023;300
```

Only the first character of the gender and cage fields is kept. Age and
donation are read from their leading digits, and count as 0 when there are
none. A line with fewer than seven non-empty fields makes loading fail with
`ValueError`.

The menu reads its answers from standard input and has these options:

1. Insert an animal. You are asked for name, type, cage, gender, date, age and
   donation in turn.
2. Show every animal in alphabetical order by name.
3. Show the details of every animal with a given name, or a message saying
   there is none.
4. Show every animal that shares the largest donation.
5. Exit.

Any other option prints a message and the menu is shown again. The program also
ends when standard input runs out.

## Using it as a library

```python
from dogshelter.avltree import Animal, AVLTree
from dogshelter.app import load_animals, find_popular_donation, popular_animals

tree = load_animals("animals.txt")
tree.insert(Animal(name="Max", type="Dog", gender="M", age=4,
                   cage="C", date="03/03/2024", donation=50))

for animal in tree:
    print(animal.describe())

best = find_popular_donation(tree)   # None when the tree is empty
tied = popular_animals(tree)         # all animals with that donation
```

`AVLTree` supports `insert(animal)`, `find(name)` (a list of the animals under
that name, empty if there are none), iteration in name order, `len()`,
`height()` (-1 when empty), `clear()` and `display(file)`, which writes every
animal to a text stream (standard output by default).

`dogshelter.app` also offers `parse_animal(line)` for a single record,
`display_animals(tree)` and `info_animal(tree, name)`, which return the lines
the menu prints.

## What it does not do

Nothing is ever written back to disk. Animals inserted from the menu or through
`AVLTree.insert` live only in memory and are gone when the program ends. There
is no way to remove or edit a single animal.