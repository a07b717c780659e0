"""Fernet symmetric tokens: versioned, timestamped, encrypt-then-MAC."""

from fernetex.codec import EncodedToken, decode, encode, generate, verify
from fernetex.encryptor import TokenEncryptor
from fernetex.exceptions import (
    ClockSkewError,
    ErrorKind,
    ExpiredTTLError,
    FernetError,
    InvalidBase64Error,
    InvalidIVError,
    InvalidTimestampError,
    MacMismatchError,
    MissingMessageError,
    MissingOrShortKeyError,
    PaddingError,
    PayloadSizeError,
    TokenTooShortError,
    UnsupportedVersionError,
)
from fernetex.keys import decode_key, generate_key, new_iv, split_key
from fernetex.policy import TTLPolicy
from fernetex.result import Result

__version__ = "0.3.0"

__all__ = [
    "ClockSkewError",
    "EncodedToken",
    "ErrorKind",
    "ExpiredTTLError",
    "FernetError",
    "InvalidBase64Error",
    "InvalidIVError",
    "InvalidTimestampError",
    "MacMismatchError",
    "MissingMessageError",
    "MissingOrShortKeyError",
    "PaddingError",
    "PayloadSizeError",
    "Result",
    "TTLPolicy",
    "TokenEncryptor",
    "TokenTooShortError",
    "UnsupportedVersionError",
    "decode",
    "decode_key",
    "encode",
    "generate",
    "generate_key",
    "new_iv",
    "split_key",
    "verify",
]
