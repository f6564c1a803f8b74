# gs1_checkdigit/case_code.py
"""Master case code (GTIN-14) derivation."""

from __future__ import annotations

from gs1_checkdigit.check_digit import _require_digits, compute_check_digit

# Packaging indicator "1" followed by a "0" pad; an 11-digit GTIN comes out at 14.
CASE_CODE_PREFIX = "10"


def compute_master_case_code(gtin: str) -> str:
    """Return ``"10" + gtin`` followed by the check digit of that string.

    The result is always ``len(gtin) + 3`` characters long.

    >>> compute_master_case_code("04210000526")
    '10042100005261'
    """
    # Validate before prefixing, otherwise "" would pass as "10".
    _require_digits(gtin)
    extended = CASE_CODE_PREFIX + gtin
    return extended + compute_check_digit(extended)
