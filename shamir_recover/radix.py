"""
Base Converter
Parse share values written in any base from 2 to 16.

Shares arrive as digit strings in whatever base their holder chose.
Python ints are arbitrary precision, so values of any length convert exactly.
"""

from shamir_recover.errors import InvalidBaseError, InvalidDigitError

# Digit alphabet — a character's value is its index
DIGITS = "0123456789abcdef"

MIN_BASE = 2
MAX_BASE = 16


def convert(digits: str, base: int) -> int:
    """
    Convert a digit string in the given base to a non-negative integer.

    Digits are read most-significant first and matched case-insensitively.
    The empty string converts to 0.

    Args:
        digits: The digit string, e.g. "a3c97ed550c69484".
        base: The base the digits are written in (2-16).

    Returns:
        The integer value.

    Raises:
        InvalidBaseError: If base is not an integer in [2, 16].
        InvalidDigitError: If a character is not a valid digit for base.
    """
    if isinstance(base, bool) or not isinstance(base, int):
        raise InvalidBaseError(base)
    if not MIN_BASE <= base <= MAX_BASE:
        raise InvalidBaseError(base)

    result = 0
    for char in digits:
        digit = DIGITS.find(char.lower())
        if digit < 0 or digit >= base:
            raise InvalidDigitError(char, base)
        result = result * base + digit
    return result
