"""CLI commands for wallet registration and recovery.

``zklogin register``  Commit to identities and store the wallet record
``zklogin login``     Recover the wallet from a threshold of identities
``zklogin sign``      Log in and produce a (stub) message signature
``zklogin show``      Print the stored record for a namespace
``zklogin forget``    Delete the stored record for a namespace
"""

from __future__ import annotations

import argparse
import asyncio
import json
from pathlib import Path

from ...api import ZkLoginResult, init_zklogin
from ...core.config import get_config
from ...core.exceptions import ValidationException
from ...identity.demo import DEMO_IDENTITIES, demo_identities
from ...identity.models import (
    GitHubIdentity,
    GoogleIdentity,
    IdentityProof,
    PasskeyAssertion,
    PasskeyIdentity,
    TwitterIdentity,
    identity_from_dict,
)
from ...storage.records import (
    JsonFileWalletRecordStore,
    StoredWalletRecord,
    require_record,
)
from ..output import output_result

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _load_store(args: argparse.Namespace) -> JsonFileWalletRecordStore:
    path = getattr(args, "store", None) or get_config().store_path
    return JsonFileWalletRecordStore(Path(path))


def _namespace(args: argparse.Namespace) -> str:
    return getattr(args, "namespace", None) or get_config().namespace


def _read_identities_file(path: Path) -> list[IdentityProof]:
    try:
        with open(path) as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ValidationException(f"Cannot read identities file {path}: {e}", field="identities_file") from e
    if not isinstance(data, list):
        raise ValidationException("Identities file must contain a JSON list", field="identities_file")
    return [identity_from_dict(item) for item in data]


def collect_identities(args: argparse.Namespace) -> list[IdentityProof]:
    """Build the identity list from CLI flags, in a fixed provider order."""
    identities: list[IdentityProof] = []

    for provider in getattr(args, "demo", None) or []:
        if provider == "all":
            identities.extend(demo_identities())
        else:
            identities.extend(demo_identities(provider))
    if args.identities_file:
        identities.extend(_read_identities_file(args.identities_file))
    if args.google_token:
        identities.append(GoogleIdentity(id_token=args.google_token))
    if args.github_token:
        identities.append(GitHubIdentity(access_token=args.github_token))
    if args.twitter_token:
        identities.append(TwitterIdentity(access_token=args.twitter_token))
    if args.passkey_credential:
        identities.append(PasskeyIdentity(assertion=PasskeyAssertion(credential_id=args.passkey_credential)))

    if not identities:
        raise ValidationException("No identities given; use --demo, --identities-file or a token flag")
    return identities


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


def cmd_register(args: argparse.Namespace) -> int:
    service = init_zklogin()
    # Open the store first so an unreadable file fails before a salt is drawn
    store = _load_store(args)
    identities = collect_identities(args)
    result = service.register_wallet(identities, args.threshold, args.expose_private_key)

    namespace = _namespace(args)
    store.save(namespace, StoredWalletRecord.from_registration(result, args.threshold))

    output_result(
        {
            "namespace": namespace,
            "address": result.address,
            "threshold": args.threshold,
            "identities": len(result.commitments),
            **({"privateKey": result.private_key} if result.private_key else {}),
        }
    )
    return 0


def _login(args: argparse.Namespace) -> ZkLoginResult:
    service = init_zklogin()
    record = require_record(_load_store(args), _namespace(args))
    identities = collect_identities(args)
    return service.zk_login(
        identities,
        record.commitments,
        record.salt,
        record.threshold,
        getattr(args, "expose_private_key", False),
    )


def cmd_login(args: argparse.Namespace) -> int:
    result = _login(args)
    output_result(result.to_dict())
    return 0


def cmd_sign(args: argparse.Namespace) -> int:
    result = _login(args)
    signature = asyncio.run(result.wallet.sign_message(args.message))
    output_result({"address": result.wallet.address, "message": args.message, "signature": signature})
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    namespace = _namespace(args)
    record = require_record(_load_store(args), namespace)
    data = record.to_dict()
    data.pop("salt")
    data.pop("privateKey", None)
    output_result({"namespace": namespace, **data})
    return 0


def cmd_forget(args: argparse.Namespace) -> int:
    namespace = _namespace(args)
    deleted = _load_store(args).delete(namespace)
    output_result({"namespace": namespace, "deleted": deleted})
    return 0


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------


def _add_identity_args(parser: argparse.ArgumentParser) -> None:
    group = parser.add_argument_group("identities")
    group.add_argument(
        "--demo",
        action="append",
        choices=[p.value for p in DEMO_IDENTITIES] + ["all"],
        help="Use a deterministic demo identity (repeatable; 'all' for every provider)",
    )
    group.add_argument(
        "--identities-file",
        type=Path,
        default=None,
        help="JSON list of identities, e.g. [{\"provider\": \"github\", \"accessToken\": \"...\"}]",
    )
    group.add_argument("--google-token", default=None, help="Google ID token (JWT)")
    group.add_argument("--github-token", default=None, help="GitHub access token")
    group.add_argument("--twitter-token", default=None, help="Twitter access token")
    group.add_argument("--passkey-credential", default=None, help="WebAuthn credential ID")


def register(subparsers: argparse._SubParsersAction) -> None:
    """Register the wallet commands."""
    register_p = subparsers.add_parser("register", help="Register a new threshold wallet")
    register_p.add_argument("--threshold", "-k", type=int, required=True, help="Identities required to log in")
    register_p.add_argument("--expose-private-key", action="store_true", help="Print and store the private key")
    _add_identity_args(register_p)
    register_p.set_defaults(func=cmd_register)

    login_p = subparsers.add_parser("login", help="Recover the wallet for a namespace")
    login_p.add_argument("--expose-private-key", action="store_true", help="Print the private key")
    _add_identity_args(login_p)
    login_p.set_defaults(func=cmd_login)

    sign_p = subparsers.add_parser("sign", help="Log in and sign a message (stub signature)")
    sign_p.add_argument("message", help="Message to sign")
    _add_identity_args(sign_p)
    sign_p.set_defaults(func=cmd_sign)

    show_p = subparsers.add_parser("show", help="Show the stored wallet record")
    show_p.set_defaults(func=cmd_show)

    forget_p = subparsers.add_parser("forget", help="Delete the stored wallet record")
    forget_p.set_defaults(func=cmd_forget)
