"""Console input helpers: prompt, read one value, discard the rest of the line."""

from __future__ import annotations

import re
import sys
from typing import TextIO

_INT_PATTERN = re.compile(r"[+-]?\d+")
_FLOAT_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _streams(stdin: TextIO | None, stdout: TextIO | None) -> tuple[TextIO, TextIO]:
    return (stdin if stdin is not None else sys.stdin,
            stdout if stdout is not None else sys.stdout)


def clear_buffer(stream: TextIO | None = None) -> str:
    """Discard input up to and including the next newline; return what was discarded."""
    stream = stream if stream is not None else sys.stdin
    return stream.readline()


def strip_newline(text: str) -> str:
    """Cut the text at its first newline."""
    return text.split("\n", 1)[0]


def _prompt(message: str, stdout: TextIO) -> None:
    stdout.write(message)
    stdout.flush()


def _scan_number(pattern: re.Pattern[str], stdin: TextIO) -> str:
    """Skip blank lines, match a number at the start of the next line, consume that line."""
    while True:
        line = stdin.readline()
        if not line:
            raise EOFError("end of input while reading a number")
        stripped = line.lstrip()
        if stripped:
            break
    match = pattern.match(stripped)
    if match is None:
        raise ValueError(f"not a number: {strip_newline(stripped)!r}")
    return match.group(0)


def input_int(message: str, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    """Prompt and read an integer from the start of a line."""
    stdin, stdout = _streams(stdin, stdout)
    _prompt(message, stdout)
    return int(_scan_number(_INT_PATTERN, stdin))


def input_float(message: str, stdin: TextIO | None = None, stdout: TextIO | None = None) -> float:
    """Prompt and read a floating point number from the start of a line."""
    stdin, stdout = _streams(stdin, stdout)
    _prompt(message, stdout)
    return float(_scan_number(_FLOAT_PATTERN, stdin))


def input_char(message: str, stdin: TextIO | None = None, stdout: TextIO | None = None) -> str:
    """Prompt and read a single character, discarding the rest of its line."""
    stdin, stdout = _streams(stdin, stdout)
    _prompt(message, stdout)
    line = stdin.readline()
    if not line:
        raise EOFError("end of input while reading a character")
    char = line[0]
    if char == "\n":
        # The newline itself was the character read; the buffer clear eats the next line.
        clear_buffer(stdin)
    return char


def input_string(
    message: str,
    length: int,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> str:
    """Prompt and read at most ``length - 1`` characters of a line, without its newline."""
    if length < 2:
        raise ValueError("length must be at least 2")
    stdin, stdout = _streams(stdin, stdout)
    _prompt(message, stdout)
    chunk = stdin.readline(length - 1)
    if not chunk:
        raise EOFError("end of input while reading a string")
    if len(chunk) == length - 1 and not chunk.endswith("\n"):
        clear_buffer(stdin)
    return strip_newline(chunk)