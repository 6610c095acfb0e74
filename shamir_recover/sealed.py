"""
Sealed Share Sets
Passphrase encryption for share sets kept at rest.

A custodian holding several shares on one disk holds part of a secret.
Sealing wraps the whole share-set document in AES-256-GCM under a key
derived from a passphrase, so the file alone reveals nothing.

  Passphrase + salt → key (via PBKDF2-HMAC-SHA256)
  key + nonce       → ciphertext (AES-256-GCM, authenticated)

A wrong passphrase and a tampered file fail the same way: the GCM tag
does not verify.
"""

import base64
import binascii
import json
import os

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from shamir_recover.errors import SealError

# Key derivation parameters
PBKDF2_ITERATIONS = 600_000  # OWASP recommended minimum
SALT_SIZE = 16
NONCE_SIZE = 12  # AES-256-GCM standard
KEY_SIZE = 32    # 256 bits

SEALED_FORMAT = "shamir-recover-sealed-v1"

# Bound into every ciphertext as associated data
_AAD = SEALED_FORMAT.encode()


def derive_key(passphrase: str, salt: bytes, iterations: int = PBKDF2_ITERATIONS) -> bytes:
    """Derive the sealing key from a passphrase using PBKDF2."""
    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=KEY_SIZE,
        salt=salt,
        iterations=iterations,
    )
    return kdf.derive(passphrase.encode("utf-8"))


def is_sealed(data) -> bool:
    """True if a decoded JSON document is a sealed envelope."""
    return isinstance(data, dict) and data.get("format") == SEALED_FORMAT


def seal(data: dict, passphrase: str, iterations: int = PBKDF2_ITERATIONS) -> dict:
    """
    Encrypt a share-set document.

    Args:
        data: The JSON-serializable share-set document.
        passphrase: The passphrase to seal under.
        iterations: PBKDF2 iterations, stored in the envelope.

    Returns:
        The envelope, itself JSON-serializable.
    """
    if not passphrase:
        raise SealError("A passphrase is required to seal a share set")

    salt = os.urandom(SALT_SIZE)
    nonce = os.urandom(NONCE_SIZE)
    key = derive_key(passphrase, salt, iterations)

    plaintext = json.dumps(data, sort_keys=True).encode("utf-8")
    ciphertext = AESGCM(key).encrypt(nonce, plaintext, _AAD)

    return {
        "format": SEALED_FORMAT,
        "iterations": iterations,
        "salt": base64.b64encode(salt).decode(),
        "nonce": base64.b64encode(nonce).decode(),
        "ciphertext": base64.b64encode(ciphertext).decode(),
    }


def unseal(envelope: dict, passphrase: str) -> dict:
    """
    Decrypt a sealed share-set document.

    Raises:
        SealError: If the envelope is malformed, the passphrase is wrong,
            or the ciphertext was modified.
    """
    if not is_sealed(envelope):
        raise SealError("Not a sealed share set")

    try:
        iterations = int(envelope.get("iterations", PBKDF2_ITERATIONS))
        salt = base64.b64decode(envelope["salt"], validate=True)
        nonce = base64.b64decode(envelope["nonce"], validate=True)
        ciphertext = base64.b64decode(envelope["ciphertext"], validate=True)
    except (KeyError, TypeError, ValueError, binascii.Error) as e:
        raise SealError(f"Malformed sealed share set: {e}") from e
    if len(nonce) != NONCE_SIZE:
        raise SealError(f"Malformed sealed share set: nonce must be {NONCE_SIZE} bytes")

    key = derive_key(passphrase, salt, iterations)
    try:
        plaintext = AESGCM(key).decrypt(nonce, ciphertext, _AAD)
    except InvalidTag as e:
        raise SealError("Wrong passphrase or tampered share set") from e

    return json.loads(plaintext.decode("utf-8"))
