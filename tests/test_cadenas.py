import io

import pytest

from practicas.cadenas import is_balanced, is_palindrome, run


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Anita lava la tina", True),
        ("oso", True),
        ("Aa", True),
        ("", True),
        ("abc", False),
        ("ab a", True),
    ],
)
def test_is_palindrome(text, expected):
    assert is_palindrome(text) is expected


def test_palindrome_is_reverse_invariant():
    text = "Hola mundo"
    assert is_palindrome(text) == is_palindrome(text[::-1])
    assert is_palindrome(text + text[::-1]) is True


@pytest.mark.parametrize(
    "text, expected",
    [
        ("{[()]}", True),
        ("{[)]}", False),
        (")(", False),
        ("((", False),
        ("a(b)c[d]{e}", True),
        ("", True),
    ],
)
def test_is_balanced(text, expected):
    assert is_balanced(text) is expected


def _run(text):
    out = io.StringIO()
    code = run(io.StringIO(text), out)
    return code, out.getvalue()


def test_menu_palindrome():
    code, output = _run("1\nanita lava la tina\n1\nhola\n3\n")
    assert code == 1
    assert "La cadena es palindroma!" in output
    assert "La cadena no es palindroma" in output


def test_menu_brackets():
    code, output = _run("2\n{[()]}\n2\n{[)]}\n3\n")
    assert code == 1
    assert "La cadena es corecta!!" in output
    assert "La cadena no esta bien :(" in output


def test_menu_invalid_option_and_end_of_input():
    code, output = _run("7\n")
    assert code == 0
    assert "Opcion invalida..." in output