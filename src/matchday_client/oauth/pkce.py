"""PKCE (Proof Key for Code Exchange) helpers.

RFC 7636 protects public OAuth clients with a *code verifier* (a random string
generated when the flow starts and kept by the caller) and a *code challenge*
derived from it and sent to the authorization endpoint.

Verifier characters are picked as ``byte % 66`` from secure random bytes. The
slight bias this introduces toward the first characters of the alphabet is
accepted for this use.

Nothing in this module logs verifiers or challenges.
"""

from __future__ import annotations

import base64
import secrets
from hashlib import sha256
from typing import Final

from ..config import PkceMethod

DEFAULT_VERIFIER_LENGTH: Final[int] = 64
# RFC 7636 section 4.1
MIN_VERIFIER_LENGTH: Final[int] = 43
MAX_VERIFIER_LENGTH: Final[int] = 128
VERIFIER_ALPHABET: Final[str] = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
    "0123456789"
    "-._~"
)


def generate_code_verifier(length: int = DEFAULT_VERIFIER_LENGTH) -> str:
    """Generate a high-entropy code verifier of exactly ``length`` characters."""

    if not MIN_VERIFIER_LENGTH <= length <= MAX_VERIFIER_LENGTH:
        raise ValueError("code verifier length must be 43-128 characters")
    alphabet_size = len(VERIFIER_ALPHABET)
    return "".join(
        VERIFIER_ALPHABET[byte % alphabet_size] for byte in secrets.token_bytes(length)
    )


def base64url_encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def code_challenge_s256(verifier: str) -> str:
    """Base64url-encoded SHA-256 of ``verifier`` without padding."""

    return base64url_encode(sha256(verifier.encode("ascii")).digest())


def code_challenge(verifier: str, method: PkceMethod = PkceMethod.S256) -> str:
    if method is PkceMethod.S256:
        return code_challenge_s256(verifier)
    return verifier


__all__ = [
    "DEFAULT_VERIFIER_LENGTH",
    "MIN_VERIFIER_LENGTH",
    "MAX_VERIFIER_LENGTH",
    "VERIFIER_ALPHABET",
    "generate_code_verifier",
    "base64url_encode",
    "code_challenge_s256",
    "code_challenge",
]
