"""
Reconstruction errors.

Every failure in the core is terminal for the current reconstruction call.
Nothing here is retried: the computation is deterministic, so a second try
with the same shares fails the same way.
"""


class ReconstructionError(Exception):
    """Base class for all failures while recovering a secret."""


class InvalidDigitError(ReconstructionError, ValueError):
    """A share value contains a character that is not a digit in its base."""

    def __init__(self, char: str, base: int):
        self.char = char
        self.base = base
        super().__init__(f"Invalid digit {char!r} for base {base}")


class InvalidBaseError(ReconstructionError, ValueError):
    """A share declares a base outside 2..16."""

    def __init__(self, base):
        self.base = base
        super().__init__(f"Base must be an integer between 2 and 16, got {base!r}")


class NoInverseError(ReconstructionError, ArithmeticError):
    """
    A modular inverse was requested for a non-invertible element.

    During interpolation this means two selected shares have the same
    x-coordinate.
    """

    def __init__(self, value: int, modulus: int):
        self.value = value
        self.modulus = modulus
        super().__init__(f"Modular inverse does not exist for {value} mod {modulus}")


class InsufficientSharesError(ReconstructionError, ValueError):
    """Fewer than k usable shares were found."""

    def __init__(self, found: int, required: int):
        self.found = found
        self.required = required
        super().__init__(f"Need at least {required} shares, got {found}")


class ShareSetError(ValueError):
    """A share-set document is malformed."""


class SealError(ValueError):
    """A sealed share set could not be opened (wrong passphrase or tampered)."""
