"""Regex-based parser for number arguments.

Accepts plain base-10 literals of 64-bit unsigned integers only: ASCII
digits, optional leading zeros, nothing else. Signs, whitespace,
underscores, fractions and exponents are rejected even though int()
would take some of them.
"""

import re
from collections.abc import Iterable
from typing import TextIO

from gcd_tool.core.types import U64_MAX, EmptySequenceError, InvalidNumberError, NumberSequence, UsageError

_DIGITS = re.compile(r'[0-9]+')
_NEGATIVE = re.compile(r'-[0-9]+')
_U64_DIGITS = len(str(U64_MAX))

STDIN_ARG = '-'


def parse_number(text: str) -> int:
    """Parse one argument as a 64-bit unsigned integer."""
    if _NEGATIVE.fullmatch(text):
        raise InvalidNumberError(text, 'negative numbers are not supported')
    if not _DIGITS.fullmatch(text):
        raise InvalidNumberError(text, 'not a base-10 unsigned integer')
    # int() refuses very long strings, so bound the significant digits first
    digits = text.lstrip('0') or '0'
    value = int(digits) if len(digits) <= _U64_DIGITS else None
    if value is None or value > U64_MAX:
        raise InvalidNumberError(text, f'exceeds the 64-bit unsigned range (max {U64_MAX})')
    return value


def parse_numbers(args: Iterable[str]) -> NumberSequence:
    """Parse every argument in order. The first bad argument raises."""
    numbers = tuple(parse_number(arg) for arg in args)
    if not numbers:
        raise EmptySequenceError()
    return numbers


def expand_stdin(args: Iterable[str], stream: TextIO) -> list[str]:
    """Replace each '-' argument with the whitespace-separated tokens on stream.

    The stream is read once; later '-' arguments add nothing.
    """
    expanded: list[str] = []
    consumed = False
    for arg in args:
        if arg != STDIN_ARG:
            expanded.append(arg)
            continue
        if not consumed:
            try:
                text = stream.read()
            except UnicodeDecodeError as exc:
                raise UsageError('stdin is not valid UTF-8 text') from exc
            expanded.extend(text.split())
            consumed = True
    return expanded
