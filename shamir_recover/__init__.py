"""
shamir-recover — Secret Reconstruction
Recover a secret from K Shamir shares by Lagrange interpolation over GF(P).

Shares may be written in any base from 2 to 16. Exactly K shares are used,
lowest identifiers first, and the secret is the interpolating polynomial's
value at x=0, with P = 2^256 - 189.

Usage:
    from shamir_recover import load
    secret = load("shares.json").reconstruct()
"""

from shamir_recover.errors import (
    ReconstructionError,
    InvalidDigitError,
    InvalidBaseError,
    NoInverseError,
    InsufficientSharesError,
    ShareSetError,
    SealError,
)
from shamir_recover.field import PRIME, mod_inverse
from shamir_recover.radix import convert
from shamir_recover.shamir import Share, Point, interpolate_at_zero, reconstruct, verify_secret
from shamir_recover.shareset import ShareSet, load
from shamir_recover.sealed import seal, unseal, is_sealed

__version__ = "0.1.0"
__all__ = [
    "PRIME",
    "convert",
    "mod_inverse",
    "Share",
    "Point",
    "interpolate_at_zero",
    "reconstruct",
    "verify_secret",
    "ShareSet",
    "load",
    "seal",
    "unseal",
    "is_sealed",
    "ReconstructionError",
    "InvalidDigitError",
    "InvalidBaseError",
    "NoInverseError",
    "InsufficientSharesError",
    "ShareSetError",
    "SealError",
]
