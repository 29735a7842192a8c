import io

import pytest

from practicas.captura import (
    clear_buffer,
    input_char,
    input_float,
    input_int,
    input_string,
    strip_newline,
)


def test_clear_buffer_consumes_one_line():
    stream = io.StringIO("junk here\nnext\n")
    assert clear_buffer(stream) == "junk here\n"
    assert stream.read() == "next\n"


def test_strip_newline_cuts_at_first_newline():
    assert strip_newline("ab\ncd\n") == "ab"
    assert strip_newline("plain") == "plain"


def test_input_int_reads_prefix_and_discards_rest():
    stdin = io.StringIO("42 extra\nnext\n")
    stdout = io.StringIO()
    assert input_int("Opcion>> ", stdin, stdout) == 42
    assert stdout.getvalue() == "Opcion>> "
    assert stdin.read() == "next\n"


def test_input_int_skips_blank_lines():
    stdin = io.StringIO("\n   \n  -7\n")
    assert input_int("", stdin, io.StringIO()) == -7


def test_input_int_rejects_text_and_consumes_line():
    stdin = io.StringIO("abc\n5\n")
    with pytest.raises(ValueError):
        input_int("", stdin, io.StringIO())
    assert input_int("", stdin, io.StringIO()) == 5


def test_input_int_eof():
    with pytest.raises(EOFError):
        input_int("", io.StringIO(""), io.StringIO())


def test_input_float_reads_value():
    stdin = io.StringIO("8.5xyz\n")
    assert input_float("", stdin, io.StringIO()) == 8.5
    assert stdin.read() == ""


def test_input_float_rejects_text():
    with pytest.raises(ValueError):
        input_float("", io.StringIO("nope\n"), io.StringIO())


def test_input_char_returns_first_char():
    stdin = io.StringIO("xyz\nrest\n")
    assert input_char("", stdin, io.StringIO()) == "x"
    assert stdin.read() == "rest\n"


def test_input_string_within_length():
    stdin = io.StringIO("hola\nrest\n")
    assert input_string("Nombre>> ", 255, stdin, io.StringIO()) == "hola"
    assert stdin.read() == "rest\n"


def test_input_string_truncates_and_clears():
    stdin = io.StringIO("abcdefg\nrest\n")
    result = input_string("", 5, stdin, io.StringIO())
    assert result == "abcdefg"[:4]
    assert stdin.read() == "rest\n"


def test_input_string_exact_fit_keeps_next_line():
    stdin = io.StringIO("abc\nrest\n")
    assert input_string("", 5, stdin, io.StringIO()) == "abc"
    assert stdin.read() == "rest\n"


def test_input_string_too_short_length():
    with pytest.raises(ValueError):
        input_string("", 1, io.StringIO("abc\n"), io.StringIO())


def test_input_string_eof():
    with pytest.raises(EOFError):
        input_string("", 10, io.StringIO(""), io.StringIO())