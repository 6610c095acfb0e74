"""
shamir-recover — Basic Usage Example

Recovers secrets from two share sets. The shares are written in mixed
bases; only the first K (lowest identifiers) are used.
"""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from shamir_recover import ShareSet, InsufficientSharesError, seal, unseal


def main():
    print("=" * 50)
    print("  shamir-recover — Secret Reconstruction")
    print("=" * 50)

    # 3-of-4: points on f(x) = x^2 + 3
    small = {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        "3": {"base": "10", "value": "12"},
        "6": {"base": "4", "value": "213"},
    }

    # 7-of-10, values in bases from 2 to 15
    large = {
        "keys": {"n": 10, "k": 7},
        "1": {"base": "7", "value": "420020006424065463"},
        "2": {"base": "7", "value": "10511630252064643035"},
        "3": {"base": "2", "value": "101010101001100101011100000001000111010010111101100100010"},
        "4": {"base": "8", "value": "31261003022226126015"},
        "5": {"base": "7", "value": "2564201006101516132035"},
        "6": {"base": "15", "value": "a3c97ed550c69484"},
        "7": {"base": "13", "value": "134b08c8739552a734"},
        "8": {"base": "10", "value": "23600283241050447333"},
        "9": {"base": "9", "value": "375870320616068547135"},
        "10": {"base": "6", "value": "30140555423010311322515333"},
    }

    for name, data in [("small", small), ("large", large)]:
        share_set = ShareSet.from_dict(data)
        print(f"\n{name}: {len(share_set.shares)} shares, threshold {share_set.threshold}")
        print(f"  Secret: {share_set.reconstruct()}")

    # Not enough shares: reconstruction is all-or-nothing
    short = ShareSet.from_dict({"keys": {"k": 3}, "1": small["1"], "2": small["2"]})
    try:
        short.reconstruct()
    except InsufficientSharesError as e:
        print(f"\nShort share set: {e}")

    # Sealing a share set for storage
    envelope = seal(small, "my-secret-passphrase-change-this")
    print(f"\nSealed envelope fields: {sorted(envelope)}")
    recovered = ShareSet.from_dict(unseal(envelope, "my-secret-passphrase-change-this"))
    print(f"Secret after unsealing: {recovered.reconstruct()}")


if __name__ == "__main__":
    main()
