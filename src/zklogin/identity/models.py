"""Identity proof and claim models.

An identity proof is one of a closed set of provider-specific variants:

- :class:`GoogleIdentity`: an OAuth ID token (JWT) whose ``sub`` is stable.
- :class:`GitHubIdentity` / :class:`TwitterIdentity`: an OAuth access token.
- :class:`PasskeyIdentity`: a WebAuthn assertion with a credential ID.

Proofs are transient input and are never persisted. Each proof is reduced to
an :class:`IdentityClaim` whose ``stable_id`` is session-independent and never
contains the raw access token.

The wire shape (``to_dict`` / :func:`identity_from_dict`) uses the camelCase
keys emitted by the browser client, e.g.::

    {"provider": "github", "accessToken": "gho_..."}
    {"provider": "passkey", "assertion": {"credentialId": "...", ...}}
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, ClassVar

from ..core.exceptions import ValidationException


class Provider(enum.StrEnum):
    """Supported identity providers."""

    GOOGLE = "google"
    GITHUB = "github"
    TWITTER = "twitter"
    PASSKEY = "passkey"


@dataclass(frozen=True)
class GoogleIdentity:
    """Google Identity Services credential (an OIDC ID token)."""

    id_token: str = field(repr=False)

    provider: ClassVar[Provider] = Provider.GOOGLE

    def to_dict(self) -> dict[str, Any]:
        return {"provider": self.provider.value, "idToken": self.id_token}


@dataclass(frozen=True)
class GitHubIdentity:
    access_token: str = field(repr=False)

    provider: ClassVar[Provider] = Provider.GITHUB

    def to_dict(self) -> dict[str, Any]:
        return {"provider": self.provider.value, "accessToken": self.access_token}


@dataclass(frozen=True)
class TwitterIdentity:
    access_token: str = field(repr=False)

    provider: ClassVar[Provider] = Provider.TWITTER

    def to_dict(self) -> dict[str, Any]:
        return {"provider": self.provider.value, "accessToken": self.access_token}


@dataclass(frozen=True)
class PasskeyAssertion:
    """A WebAuthn ``navigator.credentials.get`` assertion.

    Only ``credential_id`` feeds the claim; the remaining fields are carried
    so a verifying backend can check the assertion signature.

    Attributes:
        credential_id: Base64url credential identifier (provider-scoped, opaque).
        client_data_json: Base64url clientDataJSON.
        authenticator_data: Base64url authenticator data.
        signature: Base64url assertion signature.
    """

    credential_id: str
    client_data_json: str = ""
    authenticator_data: str = ""
    signature: str = field(default="", repr=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "credentialId": self.credential_id,
            "clientDataJSON": self.client_data_json,
            "authenticatorData": self.authenticator_data,
            "signature": self.signature,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PasskeyAssertion:
        return cls(
            credential_id=data.get("credentialId", ""),
            client_data_json=data.get("clientDataJSON", ""),
            authenticator_data=data.get("authenticatorData", ""),
            signature=data.get("signature", ""),
        )


@dataclass(frozen=True)
class PasskeyIdentity:
    assertion: PasskeyAssertion

    provider: ClassVar[Provider] = Provider.PASSKEY

    def to_dict(self) -> dict[str, Any]:
        return {"provider": self.provider.value, "assertion": self.assertion.to_dict()}


IdentityProof = GoogleIdentity | GitHubIdentity | TwitterIdentity | PasskeyIdentity


@dataclass(frozen=True)
class IdentityClaim:
    """A provider-scoped, session-independent identifier.

    Attributes:
        provider: Provider name (``google``, ``github``, ...).
        stable_id: Stable identifier for the underlying account.
    """

    provider: str
    stable_id: str

    def to_dict(self) -> dict[str, Any]:
        return {"provider": self.provider, "stableId": self.stable_id}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> IdentityClaim:
        try:
            return cls(provider=str(data["provider"]), stable_id=str(data["stableId"]))
        except (KeyError, TypeError) as e:
            raise ValidationException(f"Malformed identity claim: {e}", field="claim") from e


def identity_from_dict(data: dict[str, Any]) -> IdentityProof:
    """Parse the camelCase wire shape into an identity proof.

    Missing token fields parse as empty strings so that extraction reports
    them as :class:`InvalidIdentityTokenError` for the right provider.

    Raises:
        ValidationException: If ``data`` is not an object or names an unknown provider.
    """
    if not isinstance(data, dict):
        raise ValidationException("Identity must be a JSON object", field="identity", value=data)

    provider = data.get("provider")
    if provider == Provider.GOOGLE:
        return GoogleIdentity(id_token=data.get("idToken", ""))
    if provider == Provider.GITHUB:
        return GitHubIdentity(access_token=data.get("accessToken", ""))
    if provider == Provider.TWITTER:
        return TwitterIdentity(access_token=data.get("accessToken", ""))
    if provider == Provider.PASSKEY:
        assertion = data.get("assertion") or {}
        if not isinstance(assertion, dict):
            raise ValidationException("Passkey assertion must be a JSON object", field="assertion")
        return PasskeyIdentity(assertion=PasskeyAssertion.from_dict(assertion))

    raise ValidationException(f"Unsupported provider: {provider}", field="provider", value=provider)
