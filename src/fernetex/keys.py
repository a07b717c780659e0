"""Key decoding, splitting and generation, plus IV helpers."""

import base64
import binascii
import secrets
from collections.abc import Iterable
from dataclasses import dataclass

from fernetex.constants import IV_SIZE, KEY_SIZE, SUBKEY_SIZE
from fernetex.exceptions import InvalidIVError, MissingOrShortKeyError

KeyLike = bytes | bytearray | str


@dataclass(frozen=True, slots=True)
class SplitKey:
    """The two 128-bit halves of a Fernet key."""

    signing_key: bytes
    encryption_key: bytes

    def __repr__(self) -> str:
        return "SplitKey(<redacted>)"


def decode_key(key: KeyLike | None) -> bytes:
    """Return the 32 raw key bytes for *key*.

    Exactly 32 raw bytes are used as-is. Anything longer is treated as base64
    text: the standard alphabet is tried first, then the URL-safe one, so keys
    produced by other implementations are accepted either way.
    """
    if isinstance(key, str):
        try:
            raw = key.encode("ascii")
        except UnicodeEncodeError as e:
            raise MissingOrShortKeyError("key must be base64 text or 32 raw bytes") from e
    elif isinstance(key, bytes | bytearray):
        raw = bytes(key)
    else:
        raise MissingOrShortKeyError()

    if len(raw) < KEY_SIZE:
        raise MissingOrShortKeyError()
    if len(raw) == KEY_SIZE:
        return raw

    # 43-character keys arrive with their padding stripped
    padded = raw + b"=" * (-len(raw) % 4)
    for altchars in (None, b"-_"):
        try:
            decoded = base64.b64decode(padded, altchars=altchars, validate=True)
        except binascii.Error:
            continue
        if len(decoded) == KEY_SIZE:
            return decoded
    raise MissingOrShortKeyError(f"key must decode to {KEY_SIZE} bytes")


def split_key(key: KeyLike | None) -> SplitKey:
    """Decode *key* and split it into signing and encryption subkeys."""
    raw = decode_key(key)
    return SplitKey(signing_key=raw[:SUBKEY_SIZE], encryption_key=raw[SUBKEY_SIZE:])


def generate_key() -> str:
    """Generate a fresh random key, base64url-encoded."""
    return base64.urlsafe_b64encode(secrets.token_bytes(KEY_SIZE)).decode("ascii")


def new_iv() -> bytes:
    return secrets.token_bytes(IV_SIZE)


def coerce_iv(iv: bytes | bytearray | Iterable[int] | None) -> bytes:
    """Return *iv* as bytes, generating one when ``None``.

    Iterables of ints (as found in JSON test vectors) are accepted.
    """
    if iv is None:
        return new_iv()
    if isinstance(iv, int | str):
        raise InvalidIVError()
    try:
        value = bytes(iv)
    except (TypeError, ValueError) as e:
        raise InvalidIVError() from e
    if len(value) != IV_SIZE:
        raise InvalidIVError()
    return value
