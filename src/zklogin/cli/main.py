#!/usr/bin/env python3
"""
zklogin CLI - seedless threshold wallets from identity proofs.

Commands:
  zklogin register -k K <identities>   Register a wallet needing K identities
  zklogin login <identities>           Recover the wallet for a namespace
  zklogin sign <message> <identities>  Log in and sign a message
  zklogin show                         Show the stored record
  zklogin forget                       Delete the stored record
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from ..core.exceptions import ZkLoginException
from ..core.logging import configure_logging, redact
from .commands import COMMAND_MODULES
from .output import output_error

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="zklogin",
        description="Seedless K-of-N wallets derived from identity proofs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Register a 2-of-3 demo wallet
  zklogin register -k 2 --demo google --demo github --demo passkey

  # Recover it with two of the three identities
  zklogin login --demo google --demo passkey

Environment Variables:
  ZKLOGIN_STORE_PATH        Wallet record file (default: ~/.zklogin/wallets.json)
  ZKLOGIN_NAMESPACE         Record namespace (default: demo)
  ZKLOGIN_PROVING_SYSTEM    Proving system (default: mock)
        """,
    )

    parser.add_argument(
        "--store",
        type=Path,
        default=None,
        help="Wallet record file (default: ZKLOGIN_STORE_PATH)",
    )
    parser.add_argument(
        "--namespace",
        "-n",
        default=None,
        help="Record namespace, e.g. 'demo' or 'live' (default: ZKLOGIN_NAMESPACE)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose output",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)
    for module in COMMAND_MODULES:
        module.register(subparsers)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(level="DEBUG" if args.verbose else None, json_format=False)

    try:
        return args.func(args)
    except ZkLoginException as e:
        logger.debug(f"{args.command} failed: {redact(e.to_dict())}")
        output_error(e.message)
        return 1


if __name__ == "__main__":
    sys.exit(main())
