"""Turning command-line arguments into a validated pair of stacks."""

from __future__ import annotations

import re
from typing import Iterable, Sequence

from pushswap.stacks import Stacks

INT_MIN = -2147483648
INT_MAX = 2147483647

EMPTY_ARGUMENT = "sorrynotsorry"

_WHITESPACE = " \t\n\v\f\r"
_NUMBER_CHARS = frozenset("0123456789+-")
_DIGITS = re.compile(r"[0-9]*")
_DOUBLE_SIGN = re.compile(r"[+-][+-]")
_WORD_BITS = 64


class ParseError(ValueError):
    """The arguments do not describe a list of distinct integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def join_arguments(args: Iterable[str]) -> str:
    """Join arguments into one space-separated line, each followed by a space.

    An empty argument is replaced by a word that can never pass validation.
    """
    return "".join(f"{arg or EMPTY_ARGUMENT} " for arg in args)


def _split_tokens(line: str) -> list[str]:
    return [token for token in line.split(" ") if token]


def parse_int(text: str) -> int:
    """Read a leading integer the way a 64-bit ``atol`` does.

    Leading whitespace is skipped, one optional sign is read, then digits up
    to the first non-digit. The result wraps around like a signed 64-bit word.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest and rest[0] in "+-":
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = _DIGITS.match(rest).group()
    modulus = 1 << _WORD_BITS
    value = (int(digits or "0") * sign) % modulus
    if value >= modulus >> 1:
        value -= modulus
    return value


def has_only_number_chars(tokens: Iterable[str]) -> bool:
    """Whether every token uses only digits and signs and does not end in a sign."""
    return all(
        set(token) <= _NUMBER_CHARS and not token.endswith(("+", "-"))
        for token in tokens
    )


def has_no_duplicates(tokens: Sequence[str]) -> bool:
    """Whether no two tokens read as the same number."""
    values = [parse_int(token) for token in tokens]
    return len(set(values)) == len(values)


def has_no_double_signs(tokens: Iterable[str]) -> bool:
    """Whether no token holds two signs side by side."""
    return not any(_DOUBLE_SIGN.search(token) for token in tokens)


def fits_in_int(tokens: Iterable[str]) -> bool:
    """Whether every token reads as a value in the 32-bit signed range."""
    return all(INT_MIN <= parse_int(token) <= INT_MAX for token in tokens)


def validate(tokens: Sequence[str]) -> None:
    """Raise :class:`ParseError` unless the tokens pass every check."""
    if not (
        has_only_number_chars(tokens)
        and has_no_duplicates(tokens)
        and has_no_double_signs(tokens)
        and fits_in_int(tokens)
    ):
        raise ParseError()


def parse_arguments(args: Iterable[str]) -> Stacks:
    """Build stacks from command-line arguments, raising :class:`ParseError` on bad input."""
    tokens = _split_tokens(join_arguments(args))
    if not tokens:
        raise ParseError()
    validate(tokens)
    return Stacks(parse_int(token) for token in tokens)