"""
Share Sets
Load the JSON documents that carry a threshold and its shares.

Layout:
    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        ...
    }

Only keys that are canonical positive integers ("1", "2", ... but not
"01" or "x") name shares. Anything else is ignored.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from shamir_recover.errors import ShareSetError
from shamir_recover.sealed import is_sealed, unseal
from shamir_recover.shamir import Share, reconstruct

logger = logging.getLogger(__name__)

KEYS_FIELD = "keys"


def _parse_int(raw, what: str) -> int:
    """Accept an int or a decimal string (the format writes both)."""
    if isinstance(raw, bool):
        raise ShareSetError(f"{what} must be an integer, got {raw!r}")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        try:
            return int(raw.strip(), 10)
        except ValueError:
            pass
    raise ShareSetError(f"{what} must be an integer, got {raw!r}")


def _share_identifier(key: str) -> int | None:
    """Return the identifier a key names, or None if it is not a share key."""
    if not key.isdigit() or not key.isascii():
        return None
    identifier = int(key)
    if identifier < 1 or str(identifier) != key:
        return None
    return identifier


@dataclass(frozen=True)
class ShareSet:
    """A threshold K plus the shares available for reconstruction."""
    threshold: int
    shares: dict[int, Share] = field(default_factory=dict)
    total: int | None = None  # N as declared; informational only

    @classmethod
    def from_dict(cls, data: dict) -> "ShareSet":
        """
        Build a share set from its JSON-decoded form.

        Raises:
            ShareSetError: If the threshold or any share entry is malformed.
        """
        if not isinstance(data, dict):
            raise ShareSetError("Share set must be a JSON object")

        keys = data.get(KEYS_FIELD)
        if not isinstance(keys, dict) or "k" not in keys:
            raise ShareSetError('Share set is missing "keys.k"')
        threshold = _parse_int(keys["k"], "keys.k")
        if threshold < 1:
            raise ShareSetError(f"keys.k must be at least 1, got {threshold}")
        total = _parse_int(keys["n"], "keys.n") if "n" in keys else None

        shares = {}
        for key, entry in data.items():
            if key == KEYS_FIELD:
                continue
            identifier = _share_identifier(key)
            if identifier is None:
                logger.debug("Ignoring non-share key %r", key)
                continue
            if not isinstance(entry, dict) or "base" not in entry or "value" not in entry:
                raise ShareSetError(f'Share {key} needs "base" and "value"')
            value = entry["value"]
            if not isinstance(value, str):
                raise ShareSetError(f"Share {key} value must be a string, got {value!r}")
            base = _parse_int(entry["base"], f"Share {key} base")
            try:
                shares[identifier] = Share(identifier=identifier, base=base, value=value)
            except ValueError as e:
                raise ShareSetError(f"Share {key}: {e}") from e

        if total is not None and total != len(shares):
            logger.warning("Share set declares n=%d but holds %d shares", total, len(shares))

        return cls(threshold=threshold, shares=shares, total=total)

    @classmethod
    def from_json(cls, text: str) -> "ShareSet":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ShareSetError(f"Share set is not valid JSON: {e}") from e
        return cls.from_dict(data)

    def to_dict(self) -> dict:
        """Serialize back to the JSON layout."""
        keys = {"k": self.threshold}
        if self.total is not None:
            keys = {"n": self.total, "k": self.threshold}
        data = {KEYS_FIELD: keys}
        for identifier in sorted(self.shares):
            share = self.shares[identifier]
            data[str(identifier)] = {"base": str(share.base), "value": share.value}
        return data

    def reconstruct(self) -> int:
        """Recover the secret from the first K shares."""
        return reconstruct(self.shares, self.threshold)


def load(path: str | Path, passphrase: str | None = None) -> ShareSet:
    """
    Load a share set from a JSON file, unsealing it if needed.

    Args:
        path: File to read.
        passphrase: Passphrase for sealed share sets.

    Raises:
        ShareSetError: If the file is malformed, or sealed without a passphrase.
        SealError: If the passphrase is wrong.
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ShareSetError(f"{path} is not valid JSON: {e}") from e
    except UnicodeDecodeError as e:
        raise ShareSetError(f"{path} is not UTF-8 text: {e}") from e

    if is_sealed(data):
        if passphrase is None:
            raise ShareSetError(f"{path} is sealed; a passphrase is required")
        logger.debug("Unsealing %s", path)
        data = unseal(data, passphrase)

    return ShareSet.from_dict(data)
