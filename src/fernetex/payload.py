"""Binary layout of a Fernet token and its base64url wire form."""

import base64
import binascii
import struct
from dataclasses import dataclass

from fernetex.constants import (
    BLOCK_SIZE,
    HEADER_SIZE,
    IV_SIZE,
    MAC_SIZE,
    MIN_TOKEN_SIZE,
    OVERHEAD,
    URLSAFE_B64_PATTERN,
    VERSION,
)
from fernetex.exceptions import (
    InvalidBase64Error,
    PayloadSizeError,
    TokenTooShortError,
    UnsupportedVersionError,
)

# version (1 byte) + timestamp (8 bytes, big-endian unsigned)
_PREFIX = struct.Struct(">BQ")


@dataclass(frozen=True, slots=True)
class TokenPayload:
    """Decoded token fields.

    Layout::

        version (1) | timestamp (8, BE) | iv (16) | ciphertext (16k) | mac (32)
    """

    version: int
    timestamp: int
    iv: bytes
    ciphertext: bytes
    mac: bytes = b""

    @property
    def signed_bytes(self) -> bytes:
        """The region covered by the MAC."""
        return _PREFIX.pack(self.version, self.timestamp) + self.iv + self.ciphertext

    def to_bytes(self) -> bytes:
        return self.signed_bytes + self.mac

    @classmethod
    def parse(cls, raw: bytes) -> "TokenPayload":
        """Split raw token bytes into fields, validating sizes and version."""
        if len(raw) < MIN_TOKEN_SIZE:
            raise TokenTooShortError()
        cipher_length = len(raw) - OVERHEAD
        if cipher_length % BLOCK_SIZE != 0:
            raise PayloadSizeError()

        version, timestamp = _PREFIX.unpack_from(raw)
        if version != VERSION:
            raise UnsupportedVersionError(version)

        iv_start = _PREFIX.size
        return cls(
            version=version,
            timestamp=timestamp,
            iv=raw[iv_start : iv_start + IV_SIZE],
            ciphertext=raw[HEADER_SIZE:-MAC_SIZE],
            mac=raw[-MAC_SIZE:],
        )


def encode_token(raw: bytes) -> str:
    """base64url-encode token bytes, keeping ``=`` padding."""
    return base64.urlsafe_b64encode(raw).decode("ascii")


def decode_token(token: str | bytes) -> bytes:
    """Decode a base64url token, raising :class:`InvalidBase64Error` on failure."""
    if isinstance(token, bytes | bytearray):
        try:
            token = bytes(token).decode("ascii")
        except UnicodeDecodeError as e:
            raise InvalidBase64Error() from e
    if not isinstance(token, str) or not URLSAFE_B64_PATTERN.fullmatch(token):
        raise InvalidBase64Error()
    try:
        return base64.urlsafe_b64decode(token)
    except (binascii.Error, ValueError) as e:
        raise InvalidBase64Error() from e
