"""
Tests for prime field arithmetic.
"""

import math
import random
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from shamir_recover.errors import NoInverseError
from shamir_recover.field import (
    PRIME, add_mod, sub_mod, mul_mod, extended_gcd, mod_inverse, is_probable_prime,
)


def test_prime_is_prime():
    """Test that the field modulus is the expected 256-bit prime."""
    print("Testing PRIME is prime...", end=" ")
    assert PRIME == 2**256 - 189
    assert PRIME.bit_length() == 256
    assert is_probable_prime(PRIME)
    print("PASS")


def test_is_probable_prime():
    """Test the primality check on known primes and composites."""
    print("Testing Miller-Rabin...", end=" ")
    for p in (2, 3, 5, 41, 43, 7919, 2**61 - 1, 2**127 - 1):
        assert is_probable_prime(p), p
    # 561 and 3215031751 are Carmichael / strong pseudoprimes to small bases
    for n in (0, 1, 4, 9, 561, 3215031751, 2**256 - 187, (2**61 - 1) * (2**31 - 1)):
        assert not is_probable_prime(n), n
    print("PASS")


def test_add_sub_mul_normalized():
    """Test that results always land in [0, P)."""
    print("Testing add/sub/mul normalization...", end=" ")
    top = PRIME - 1
    assert add_mod(top, 1) == 0
    assert add_mod(top, top) == PRIME - 2
    assert sub_mod(0, 1) == PRIME - 1
    assert sub_mod(3, 10) == PRIME - 7
    assert sub_mod(10, 3) == 7
    assert mul_mod(top, top) == 1  # (-1)^2
    assert mul_mod(2**200, 2**200) == pow(2, 400, PRIME)

    rng = random.Random(99)
    for _ in range(200):
        a = rng.randrange(PRIME)
        b = rng.randrange(PRIME)
        for result in (add_mod(a, b), sub_mod(a, b), mul_mod(a, b)):
            assert 0 <= result < PRIME
        assert add_mod(sub_mod(a, b), b) == a
    print("PASS")


def test_custom_modulus():
    """Test the optional modulus argument."""
    print("Testing custom modulus...", end=" ")
    assert add_mod(5, 4, 7) == 2
    assert sub_mod(2, 5, 7) == 4
    assert mul_mod(3, 5, 7) == 1
    print("PASS")


def test_extended_gcd():
    """Test the Bezout identity a*x + b*y == gcd(a, b)."""
    print("Testing extended GCD...", end=" ")
    assert extended_gcd(0, 7) == (7, 0, 1)
    assert extended_gcd(0, 0) == (0, 0, 1)

    rng = random.Random(7)
    cases = [(240, 46), (7, 0), (1, 1), (17, 3120), (PRIME - 1, PRIME)]
    cases += [(rng.randrange(2**300), rng.randrange(2**300)) for _ in range(50)]
    for a, b in cases:
        g, x, y = extended_gcd(a, b)
        assert g == math.gcd(a, b), (a, b)
        assert a * x + b * y == g, (a, b)
    print("PASS")


def test_extended_gcd_rejects_negative():
    print("Testing extended GCD rejects negatives...", end=" ")
    try:
        extended_gcd(-3, 7)
        raise AssertionError("Should have raised ValueError")
    except ValueError:
        pass
    print("PASS")


def test_mod_inverse():
    """Test a * inverse(a) == 1 mod P for nonzero a."""
    print("Testing modular inverse...", end=" ")
    rng = random.Random(2024)
    values = [1, 2, 3, PRIME - 1, PRIME - 2, 2**255]
    values += [rng.randrange(1, PRIME) for _ in range(100)]
    for a in values:
        inv = mod_inverse(a, PRIME)
        assert 0 <= inv < PRIME
        assert (a * inv) % PRIME == 1, a
    assert mod_inverse(PRIME - 1) == PRIME - 1
    assert mod_inverse(3, 7) == 5
    print("PASS")


def test_mod_inverse_of_zero():
    """Test that 0 and multiples of P have no inverse."""
    print("Testing inverse of zero...", end=" ")
    for a in (0, PRIME, 3 * PRIME):
        try:
            mod_inverse(a, PRIME)
            raise AssertionError(f"Should have raised NoInverseError for {a}")
        except NoInverseError as e:
            assert e.value == a
            assert e.modulus == PRIME
    print("PASS")


def test_mod_inverse_composite_modulus():
    """Test that non-coprime elements are rejected under a composite modulus."""
    print("Testing inverse with shared factor...", end=" ")
    try:
        mod_inverse(6, 9)
        raise AssertionError("Should have raised NoInverseError")
    except NoInverseError:
        pass
    except ArithmeticError:
        raise AssertionError("Expected NoInverseError specifically")
    assert mod_inverse(4, 9) == 7
    print("PASS")


def main():
    print("=" * 50)
    print("  Prime Field Tests")
    print("=" * 50)
    print()

    tests = [
        test_prime_is_prime,
        test_is_probable_prime,
        test_add_sub_mul_normalized,
        test_custom_modulus,
        test_extended_gcd,
        test_extended_gcd_rejects_negative,
        test_mod_inverse,
        test_mod_inverse_of_zero,
        test_mod_inverse_composite_modulus,
    ]

    passed = 0
    failed = 0

    for test in tests:
        try:
            test()
            passed += 1
        except Exception as e:
            print(f"FAIL: {e}")
            import traceback
            traceback.print_exc()
            failed += 1

    print()
    print(f"Results: {passed} passed, {failed} failed")
    return failed == 0


if __name__ == "__main__":
    success = main()
    sys.exit(0 if success else 1)
