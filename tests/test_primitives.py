"""Tests for padding, AES-CBC and MAC primitives."""

import hashlib
import hmac

import pytest

from fernetex.exceptions import PaddingError, PayloadSizeError
from fernetex.primitives import aes_cbc_decrypt, aes_cbc_encrypt, constant_time_equals, pad, sign, unpad

KEY = bytes(range(16))
IV = bytes(16)


@pytest.mark.parametrize(
    ("data", "expected"),
    [
        (b"", b"\x10" * 16),
        (b"a" * 15, b"a" * 15 + b"\x01"),
        (b"a" * 16, b"a" * 16 + b"\x10" * 16),
        (b"a" * 17, b"a" * 17 + b"\x0f" * 15),
    ],
)
def test_pad(data: bytes, expected: bytes) -> None:
    assert pad(data) == expected
    assert unpad(expected) == data


@pytest.mark.parametrize("data", [b"a" * 15 + b"\x00", b"a" * 15 + b"\x11", b"a" * 14 + b"\x01\x02", b""])
def test_unpad_rejects_malformed(data: bytes) -> None:
    with pytest.raises(PaddingError, match="padding error"):
        unpad(data)


def test_aes_cbc_roundtrip() -> None:
    plaintext = pad(b"attack at dawn")
    ciphertext = aes_cbc_encrypt(KEY, IV, plaintext)
    assert len(ciphertext) == len(plaintext)
    assert ciphertext != plaintext
    assert aes_cbc_decrypt(KEY, IV, ciphertext) == plaintext


def test_aes_cbc_decrypt_rejects_partial_block() -> None:
    with pytest.raises(PayloadSizeError):
        aes_cbc_decrypt(KEY, IV, b"x" * 17)


def test_sign_is_hmac_sha256() -> None:
    assert sign(KEY, b"payload") == hmac.new(KEY, b"payload", hashlib.sha256).digest()
    assert len(sign(KEY, b"")) == 32


def test_constant_time_equals() -> None:
    mac = sign(KEY, b"payload")
    assert constant_time_equals(mac, bytes(mac))
    assert not constant_time_equals(mac, mac[:-1] + bytes([mac[-1] ^ 1]))
    assert not constant_time_equals(mac, mac[:16])
