# gs1_checkdigit/__init__.py
"""GS1 check digit and master case code calculation.

Pure functions with no dependencies, safe to call from any thread. Nothing
here logs or substitutes defaults: bad input raises ``InvalidInputError``.
"""

from gs1_checkdigit.case_code import CASE_CODE_PREFIX, compute_master_case_code
from gs1_checkdigit.check_digit import (
    append_check_digit,
    compute_check_digit,
    is_valid_check_digit,
)
from gs1_checkdigit.exceptions import InvalidInputError

__all__ = [
    "CASE_CODE_PREFIX",
    "InvalidInputError",
    "append_check_digit",
    "compute_check_digit",
    "compute_master_case_code",
    "is_valid_check_digit",
]
