"""
Command line entry point.

    shamir-recover shares.json [more.json ...]
    shamir-recover --passphrase-env SHARES_PASS sealed.json
    shamir-recover --seal sealed.json --passphrase-env SHARES_PASS shares.json
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from shamir_recover.errors import ReconstructionError, SealError, ShareSetError
from shamir_recover.sealed import seal
from shamir_recover.shareset import load

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shamir-recover",
        description="Reconstruct a secret from a threshold of Shamir shares.",
    )
    parser.add_argument("files", nargs="+", metavar="FILE", help="share-set JSON file")
    parser.add_argument(
        "--passphrase-env", metavar="VAR",
        help="environment variable holding the passphrase for sealed share sets",
    )
    parser.add_argument(
        "--seal", metavar="OUT", type=Path,
        help="write a sealed copy of FILE to OUT instead of reconstructing",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def _passphrase(args, parser) -> str | None:
    if args.passphrase_env is None:
        return None
    passphrase = os.environ.get(args.passphrase_env)
    if passphrase is None:
        parser.error(f"environment variable {args.passphrase_env} is not set")
    return passphrase


def _seal_file(source: Path, out: Path, passphrase: str) -> None:
    share_set = load(source)
    envelope = seal(share_set.to_dict(), passphrase)
    out.write_text(json.dumps(envelope, indent=2), encoding="utf-8")
    logger.info("Sealed %s -> %s", source, out)


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    passphrase = _passphrase(args, parser)

    if args.seal is not None:
        if len(args.files) != 1:
            parser.error("--seal takes exactly one FILE")
        if passphrase is None:
            parser.error("--seal requires --passphrase-env")
        try:
            _seal_file(Path(args.files[0]), args.seal, passphrase)
        except (OSError, ShareSetError, SealError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        return 0

    failed = 0
    for name in args.files:
        try:
            secret = load(name, passphrase=passphrase).reconstruct()
        except (OSError, ShareSetError, SealError, ReconstructionError) as e:
            print(f"Error: {e}", file=sys.stderr)
            failed += 1
            continue
        print(f"Secret for {name}: {secret}")

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
