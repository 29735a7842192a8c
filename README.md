# practicas

Classic data structures, console input helpers and three small
interactive console programs that use them.

## Data structures

- `practicas.lista.LinkedList`: a singly linked list with `append`,
  `prepend`, `insert_sorted`, `insert_at`, `delete_at`, `find`,
  `remove`, `clear`, `reorder` and `show`. `reorder(compare)` re-sorts
  the list and makes `compare` its ordering from then on.
- `practicas.listadoble.DoublyLinkedList`: the same operations on a
  doubly linked list. It also supports `reversed()`, and
  `show(ascending=False)` writes it back to front. Its `reorder` keeps
  the list's own ordering for later `insert_sorted` calls.
- `practicas.pila.Stack`: a stack with an optional capacity (negative
  means no limit). `push` raises `StackOverflow` when full, `pop`
  raises `StackUnderflow` when empty, and `destroy` pops everything,
  passing each item to the `release` callback if one is set.

Comparison functions take two items and return a negative number, zero
or a positive number, like a classic `cmp`. `insert_sorted` places an
item before the first element it compares less than. `find` returns
the first matching element or `None`; `remove` raises `ValueError` when
nothing matches; `insert_at` and `delete_at` raise `IndexError` for
positions out of range.

```python
from practicas.listadoble import DoublyLinkedList

def compare(a, b):
    return (a > b) - (a < b)

numbers = DoublyLinkedList(compare, str)
for n in (5, 1, 3):
    numbers.insert_sorted(n)

print(list(numbers))            # [1, 3, 5]
print(list(reversed(numbers)))  # [5, 3, 1]
numbers.show()                  # Lista[3]:  1-> 3-> 5->NULL
```

## String checks

```python
from practicas.cadenas import is_palindrome, is_balanced

is_palindrome("Anita lava la tina")  # True
is_balanced("{[()]}")                # True
is_balanced("{[)]}")                 # False
```

`is_palindrome` ignores spaces and ASCII letter case. `is_balanced`
checks that every `(`, `[` and `{` is closed by its matching bracket in
the right order.

## Students and console input

`practicas.alumnos` holds the `Student` dataclass (`enrollment`,
`name`, `semesters`, `average`), comparison functions for each field,
`format_student`, `describe_student` and `read_student`, which prompts
for a new student and asks again while the enrollment number is taken.

`practicas.captura` has the prompt-and-read helpers `input_int`,
`input_float`, `input_char` and `input_string`. Each takes optional
input and output streams; they raise `ValueError` on input that is not
a number and `EOFError` at end of input.

## Console programs

Each program shows a menu in Spanish and reads its choices from
standard input. They stop at the menu's exit option or at end of input.

```
practicas-registro          # student register on a singly linked list
practicas-registro-doble    # student register on a doubly linked list
practicas-cadenas           # palindrome and bracket checker
```

The two register programs record students by name, enrollment number,
semesters and grade average. They can show the students, sort them by
any of these fields, look a student up and delete one by enrollment
number. In `practicas-registro`, sorting by semesters or average is
descending; `practicas-registro-doble` keeps students in enrollment
order after each registration, can show them in either direction, and
follows a search with the delete prompt.

`practicas-cadenas` exits with status 1 when its exit option is chosen.

## What it does not do

The register programs keep students in memory only; nothing is saved
to or loaded from a file.

## Tests

```
pip install -e ".[test]"
pytest
```