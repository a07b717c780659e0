"""Tests for the token byte layout and base64url wire form."""

import pytest

from fernetex.exceptions import InvalidBase64Error, PayloadSizeError, TokenTooShortError, UnsupportedVersionError
from fernetex.payload import TokenPayload, decode_token, encode_token


def _payload() -> TokenPayload:
    return TokenPayload(
        version=0x80,
        timestamp=499162800,
        iv=bytes(range(16)),
        ciphertext=b"\xaa" * 32,
        mac=b"\xbb" * 32,
    )


def test_signed_bytes_layout() -> None:
    signed = _payload().signed_bytes
    assert signed[:9] == b"\x80\x00\x00\x00\x00\x1d\xc0\x9e\xb0"
    assert signed[9:25] == bytes(range(16))
    assert signed[25:] == b"\xaa" * 32


def test_parse_inverts_to_bytes() -> None:
    payload = _payload()
    assert TokenPayload.parse(payload.to_bytes()) == payload


def test_parse_minimum_sizes() -> None:
    with pytest.raises(TokenTooShortError):
        TokenPayload.parse(b"\x80" * 57)
    with pytest.raises(PayloadSizeError):
        TokenPayload.parse(b"\x80" * 58)
    assert len(TokenPayload.parse(b"\x80" + b"\x00" * 72).ciphertext) == 16


def test_parse_rejects_other_versions() -> None:
    raw = b"\x81" + _payload().to_bytes()[1:]
    with pytest.raises(UnsupportedVersionError, match="0x81") as exc_info:
        TokenPayload.parse(raw)
    assert exc_info.value.version == 0x81


def test_parse_max_timestamp() -> None:
    raw = b"\x80" + b"\xff" * 8 + b"\x00" * 64
    assert TokenPayload.parse(raw).timestamp == 2**64 - 1


def test_encode_token_keeps_padding() -> None:
    token = encode_token(b"\x80" + b"\x00" * 72)
    assert token.startswith("gAAAAA")
    assert token.endswith("=")


def test_decode_token() -> None:
    assert decode_token("gAAAAA==") == b"\x80\x00\x00\x00"
    assert decode_token(b"gAAAAA==") == b"\x80\x00\x00\x00"


@pytest.mark.parametrize("token", ["gA AAA==", "gA/AAA==", "gAAAAA", "gAAAAA=", "ü", b"\xff\xfe"])
def test_decode_token_invalid(token: str | bytes) -> None:
    with pytest.raises(InvalidBase64Error, match="invalid base64"):
        decode_token(token)
