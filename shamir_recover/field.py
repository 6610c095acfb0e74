"""
Prime Field Arithmetic
Exact modular arithmetic over GF(P) for Lagrange interpolation.

Every result is normalized into [0, P). A negative intermediate never
escapes: a wrong sign here would silently produce a wrong secret.
"""

from shamir_recover.errors import NoInverseError

# 256-bit prime field: P = 2^256 - 189, the largest prime below 2^256.
# Verified by tests/test_field.py::test_prime_is_prime.
PRIME = 2**256 - 189

# Miller-Rabin witnesses; the first 13 primes are deterministic below 3.3e24
# and give error probability below 4^-13 beyond that.
_WITNESSES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41)


def add_mod(a: int, b: int, p: int = PRIME) -> int:
    return (a + b) % p


def sub_mod(a: int, b: int, p: int = PRIME) -> int:
    """(a - b) mod p, never negative even when b > a."""
    return (a - b) % p


def mul_mod(a: int, b: int, p: int = PRIME) -> int:
    return (a * b) % p


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """
    Extended Euclidean algorithm.

    Returns (g, x, y) such that a*x + b*y == g == gcd(a, b).
    For a == 0 the result is (b, 0, 1).

    Args:
        a: Non-negative integer.
        b: Non-negative integer.

    Raises:
        ValueError: If either argument is negative.
    """
    if a < 0 or b < 0:
        raise ValueError("extended_gcd requires non-negative arguments")

    # Invariants: a*x0 + b*y0 == r0 and a*x1 + b*y1 == r1
    r0, x0, y0 = b, 0, 1
    r1, x1, y1 = a, 1, 0
    while r1 != 0:
        q = r0 // r1
        r0, r1 = r1, r0 - q * r1
        x0, x1 = x1, x0 - q * x1
        y0, y1 = y1, y0 - q * y1
    return r0, x0, y0


def mod_inverse(a: int, m: int = PRIME) -> int:
    """
    Modular multiplicative inverse via the extended Euclidean algorithm.

    Args:
        a: The element to invert.
        m: The modulus (defaults to PRIME).

    Returns:
        x in [0, m) with a*x ≡ 1 (mod m).

    Raises:
        NoInverseError: If gcd(a, m) != 1, e.g. a ≡ 0 (mod m).
    """
    g, x, _ = extended_gcd(a % m, m)
    if g != 1:
        raise NoInverseError(a, m)
    # Bezout coefficients can be negative; % m folds them into [0, m)
    return x % m


def is_probable_prime(n: int) -> bool:
    """Miller-Rabin primality test with a fixed witness set."""
    if n < 2:
        return False
    for w in _WITNESSES:
        if n % w == 0:
            return n == w

    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1

    for w in _WITNESSES:
        x = pow(w, d, n)
        if x == 1 or x == n - 1:
            continue
        for _ in range(s - 1):
            x = pow(x, 2, n)
            if x == n - 1:
                break
        else:
            return False
    return True
