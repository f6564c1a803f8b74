# gs1_checkdigit/check_digit.py
"""GS1 check digit calculation.

Works for any payload length so the same function covers GTIN-8 (7 payload
digits) through SSCC (17 payload digits). The length is never checked against
a GS1 identifier class: a 15-digit payload is accepted even though no such
identifier exists.

Weighting, counted from the rightmost payload digit::

    payload  |1|2|3|4|5|6|7|8|9|0|1|X|
    weight   |3|1|3|1|3|1|3|1|3|1|3|
                                    ^ position 0
"""

from __future__ import annotations

from gs1_checkdigit.exceptions import InvalidInputError


def _require_digits(value: object, min_length: int = 1) -> str:
    if not isinstance(value, str):
        raise InvalidInputError(f"Expected a digit string, got {type(value).__name__}")
    if len(value) < min_length:
        raise InvalidInputError(f"Expected at least {min_length} digit(s), got {len(value)}")
    # str.isdigit() alone also accepts superscripts and non-Latin digits.
    if not (value.isascii() and value.isdigit()):
        raise InvalidInputError(f"Only ASCII digits are allowed: {value!r}")
    return value


def compute_check_digit(base: str) -> str:
    """Return the check digit that makes ``base`` a valid GS1 identifier.

    >>> compute_check_digit("05042829526")
    '7'
    """
    _require_digits(base)

    evens = 0
    odds = 0
    for pos, char in enumerate(reversed(base)):
        if pos % 2 == 0:
            evens += int(char)
        else:
            odds += int(char)

    remainder = (odds + 3 * evens) % 10
    if remainder == 0:
        return "0"
    return str(10 - remainder)


def append_check_digit(base: str) -> str:
    """Return ``base`` followed by its check digit."""
    return base + compute_check_digit(base)


def is_valid_check_digit(code: str) -> bool:
    """Check the trailing digit of a complete identifier."""
    _require_digits(code, min_length=2)
    return code[-1] == compute_check_digit(code[:-1])
