"""
Shamir's Secret Sharing — Reconstruction
Recover a secret from any K shares using Lagrange interpolation.

Each share is one point on a polynomial of degree K-1 over GF(P).
The secret is the polynomial's constant term, f(0). Any K points fix the
polynomial uniquely, so interpolating at x=0 gives the secret back.

Shares are always selected in ascending identifier order and exactly K are
used, so the same share set always takes the same path through the math.
"""

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import NamedTuple

from shamir_recover.errors import InsufficientSharesError, ReconstructionError
from shamir_recover.field import PRIME, add_mod, mod_inverse, mul_mod, sub_mod
from shamir_recover.radix import convert

logger = logging.getLogger(__name__)


class Point(NamedTuple):
    """A share decoded into the field: (x, y), both in [0, P)."""
    x: int
    y: int


@dataclass(frozen=True)
class Share:
    """A single share as its holder wrote it down."""
    identifier: int  # The x-coordinate (1-indexed, never 0)
    base: int        # Base the value is written in (2-16)
    value: str       # The y-coordinate as a digit string

    def __post_init__(self):
        if isinstance(self.identifier, bool) or not isinstance(self.identifier, int):
            raise ValueError(f"Share identifier must be an int, got {self.identifier!r}")
        if self.identifier < 1:
            raise ValueError(f"Share identifier must be positive, got {self.identifier}")
        if self.identifier % PRIME == 0:
            raise ValueError(f"Share identifier {self.identifier} is 0 in the field")

    def to_point(self) -> Point:
        """Decode the value and reduce both coordinates into the field."""
        return Point(self.identifier % PRIME, convert(self.value, self.base) % PRIME)


def select_shares(shares: Mapping[int, Share] | Iterable[Share], threshold: int) -> list[Share]:
    """
    Pick exactly `threshold` shares, lowest identifiers first.

    Identifiers are probed upward from 1 and gaps are skipped, so shares
    beyond the first K present are ignored.

    Args:
        shares: Shares keyed by identifier, or any iterable of shares.
        threshold: K, the number of shares to use.

    Returns:
        The selected shares in ascending identifier order.

    Raises:
        ValueError: If threshold is less than 1.
        InsufficientSharesError: If fewer than K shares are available.
    """
    if threshold < 1:
        raise ValueError(f"Threshold must be at least 1, got {threshold}")

    if isinstance(shares, Mapping):
        shares = shares.values()
    ordered = sorted(shares, key=lambda share: share.identifier)

    if len(ordered) < threshold:
        raise InsufficientSharesError(len(ordered), threshold)
    return ordered[:threshold]


def interpolate_at_zero(points: Sequence[tuple[int, int]]) -> int:
    """
    Evaluate the interpolating polynomial at x=0.

    For each point i the Lagrange basis at zero is
        L_i(0) = prod_{j != i} (0 - x_j) / (x_i - x_j)
    with numerator and denominator accumulated separately and the
    denominator inverted once.

    Args:
        points: (x, y) pairs with distinct, nonzero x.

    Returns:
        f(0) as a field element.

    Raises:
        InsufficientSharesError: If no points are given.
        ValueError: If any x is 0 mod P.
        NoInverseError: If two points share an x-coordinate.
    """
    if not points:
        raise InsufficientSharesError(0, 1)

    xs = [x % PRIME for x, _ in points]
    if 0 in xs:
        raise ValueError("Points must not include x=0; that is where the secret lives")

    secret = 0
    for i, (_, yi) in enumerate(points):
        xi = xs[i]
        numerator = 1
        denominator = 1
        for j, xj in enumerate(xs):
            if i == j:
                continue
            numerator = mul_mod(numerator, sub_mod(0, xj))
            denominator = mul_mod(denominator, sub_mod(xi, xj))

        basis = mul_mod(numerator, mod_inverse(denominator, PRIME))
        secret = add_mod(secret, mul_mod(yi % PRIME, basis))

    return secret


def reconstruct(shares: Mapping[int, Share] | Iterable[Share], threshold: int) -> int:
    """
    Reconstruct the secret from a set of shares.

    Args:
        shares: At least K shares, keyed by identifier or as an iterable.
        threshold: K, the number of shares the secret was split for.

    Returns:
        The secret as a field element.

    Raises:
        InsufficientSharesError: If fewer than K shares are available.
        InvalidDigitError / InvalidBaseError: If a selected share is malformed.
        NoInverseError: If selected shares repeat an identifier.
    """
    selected = select_shares(shares, threshold)
    logger.debug(
        "Reconstructing from shares %s (threshold %d)",
        [share.identifier for share in selected], threshold,
    )
    points = [share.to_point() for share in selected]
    return interpolate_at_zero(points)


def verify_secret(shares: Mapping[int, Share] | Iterable[Share], threshold: int, secret: int) -> bool:
    """Verify that a set of shares reconstructs the expected secret."""
    try:
        return reconstruct(shares, threshold) == secret % PRIME
    except ReconstructionError as e:
        logger.debug("Verification failed: %s", e)
        return False
