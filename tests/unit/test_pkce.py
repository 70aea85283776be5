from __future__ import annotations

import pytest

from matchday_client.config import PkceMethod
from matchday_client.oauth.pkce import (
    DEFAULT_VERIFIER_LENGTH,
    VERIFIER_ALPHABET,
    base64url_encode,
    code_challenge,
    code_challenge_s256,
    generate_code_verifier,
)

RFC7636_VERIFIER = "dBjftJeZ4CVP-mB92K27uhbUJU1p1r_wW1gFWFOEjXk"
RFC7636_CHALLENGE = "E9Melhoa2OwvFrEMTJguCHaoeK1t8URWbuGJSstw-cM"


def test_generate_code_verifier_default_length_and_alphabet():
    verifier = generate_code_verifier()

    assert DEFAULT_VERIFIER_LENGTH == 64
    assert len(verifier) == 64
    assert set(verifier) <= set(VERIFIER_ALPHABET)


def test_verifier_alphabet_is_rfc_unreserved_set():
    assert len(VERIFIER_ALPHABET) == 66
    assert VERIFIER_ALPHABET.endswith("-._~")


@pytest.mark.parametrize("length", [43, 128])
def test_generate_code_verifier_accepts_bounds(length):
    assert len(generate_code_verifier(length)) == length


@pytest.mark.parametrize("length", [0, 42, 129])
def test_generate_code_verifier_rejects_out_of_range_length(length):
    with pytest.raises(ValueError, match="43-128"):
        generate_code_verifier(length)


def test_generate_code_verifier_is_random():
    assert generate_code_verifier() != generate_code_verifier()


def test_code_challenge_s256_matches_rfc_vector():
    assert code_challenge_s256(RFC7636_VERIFIER) == RFC7636_CHALLENGE
    assert code_challenge(RFC7636_VERIFIER) == RFC7636_CHALLENGE


def test_code_challenge_plain_returns_verifier():
    assert code_challenge(RFC7636_VERIFIER, PkceMethod.PLAIN) == RFC7636_VERIFIER


def test_base64url_encode_strips_padding_and_uses_url_alphabet():
    assert base64url_encode(b"\xfb\xff") == "-_8"
    assert "=" not in code_challenge_s256(generate_code_verifier())
