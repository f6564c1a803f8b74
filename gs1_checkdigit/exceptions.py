# gs1_checkdigit/exceptions.py
"""Errors raised by the check digit library."""


class InvalidInputError(ValueError):
    """Input is empty, not a string, or holds something other than ASCII digits."""
