"""Palindrome and bracket-balance checks built on the stack, with their menu."""

from __future__ import annotations

import sys
from typing import TextIO

from .captura import input_int, input_string
from .pila import Stack, StackUnderflow

INPUT_LENGTH = 255

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = "([{"


def _ascii_upper(char: str) -> str:
    return chr(ord(char) - 32) if "a" <= char <= "z" else char


def is_palindrome(text: str) -> bool:
    """True if the text reads the same both ways, ignoring spaces and ASCII case."""
    letters = [char for char in text if char != " "]
    stack = Stack()
    for char in letters:
        stack.push(char)
    return all(_ascii_upper(char) == _ascii_upper(stack.pop()) for char in letters)


def is_balanced(text: str) -> bool:
    """True if every (, [ and { is closed by its matching partner in order."""
    stack = Stack()
    for char in text:
        if char in _OPENERS:
            stack.push(char)
        elif char in _PAIRS:
            try:
                opener = stack.pop()
            except StackUnderflow:
                return False
            if opener != _PAIRS[char]:
                return False
    return stack.is_empty()


def run(stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    """Run the checks menu; quitting returns 1, end of input returns 0."""
    stdin = stdin if stdin is not None else sys.stdin
    out = stdout if stdout is not None else sys.stdout
    while True:
        out.write("\n---MENU---\n[1] Palindromo [2] Cerraduras [3] Salir\n")
        try:
            option = input_int("Opcion>> ", stdin, out)
            if option == 1:
                text = input_string("Ingresa una cadena palindroma>> ", INPUT_LENGTH, stdin, out)
                if is_palindrome(text):
                    out.write("La cadena es palindroma!\n")
                else:
                    out.write("La cadena no es palindroma\n")
            elif option == 2:
                text = input_string("Ingresa una cadena>> ", INPUT_LENGTH, stdin, out)
                if is_balanced(text):
                    out.write("\nLa cadena es corecta!!\n")
                else:
                    out.write("\nLa cadena no esta bien :(\n")
            elif option == 3:
                out.write("Finalizando programa...\n")
                return 1
            else:
                out.write("Opcion invalida...")
        except ValueError:
            out.write("Opcion invalida...")
        except EOFError:
            return 0


def main(argv: list[str] | None = None) -> int:
    """Command entry point."""
    return run()