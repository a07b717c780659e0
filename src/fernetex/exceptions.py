"""Error taxonomy for token encoding and verification."""

import enum


class ErrorKind(enum.StrEnum):
    """Categories of failure; every error maps to exactly one."""

    MISSING_MESSAGE = "missing_message"
    MISSING_OR_SHORT_KEY = "missing_or_short_key"
    INVALID_IV = "invalid_iv"
    INVALID_TIMESTAMP = "invalid_timestamp"
    INVALID_BASE64 = "invalid_base64"
    TOKEN_TOO_SHORT = "token_too_short"
    PAYLOAD_SIZE_INVALID = "payload_size_invalid"
    UNSUPPORTED_VERSION = "unsupported_version"
    EXPIRED_TTL = "expired_ttl"
    CLOCK_SKEW_TOO_FAR = "clock_skew_too_far"
    MAC_MISMATCH = "mac_mismatch"
    PADDING_ERROR = "padding_error"


class FernetError(Exception):
    """Base exception for all classified token failures."""

    kind: ErrorKind
    default_message: str = "fernet error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingMessageError(FernetError):
    """Message to encode is empty or absent."""

    kind = ErrorKind.MISSING_MESSAGE
    default_message = "message must be provided"


class MissingOrShortKeyError(FernetError):
    """Key is absent or does not decode to 32 bytes."""

    kind = ErrorKind.MISSING_OR_SHORT_KEY
    default_message = "key must be provided"


class InvalidIVError(FernetError):
    kind = ErrorKind.INVALID_IV
    default_message = "iv must be 16 bytes"


class InvalidTimestampError(FernetError):
    kind = ErrorKind.INVALID_TIMESTAMP
    default_message = "timestamp must be an unsigned 64-bit number of seconds"


class InvalidBase64Error(FernetError):
    kind = ErrorKind.INVALID_BASE64
    default_message = "invalid base64"


class TokenTooShortError(FernetError):
    kind = ErrorKind.TOKEN_TOO_SHORT
    default_message = "too short"


class PayloadSizeError(FernetError):
    kind = ErrorKind.PAYLOAD_SIZE_INVALID
    default_message = "payload size not multiple of block size"


class UnsupportedVersionError(FernetError):
    """Token version byte is not 0x80."""

    kind = ErrorKind.UNSUPPORTED_VERSION
    default_message = "unsupported version"

    def __init__(self, version: int | None = None) -> None:
        self.version = version
        message = None
        if version is not None:
            message = f"unsupported version: 0x{version:02x}"
        super().__init__(message)


class ExpiredTTLError(FernetError):
    kind = ErrorKind.EXPIRED_TTL
    default_message = "expired TTL"


class ClockSkewError(FernetError):
    """Token timestamp is further in the future than the allowed drift."""

    kind = ErrorKind.CLOCK_SKEW_TOO_FAR
    default_message = "far-future TS (unacceptable clock skew)"


class MacMismatchError(FernetError):
    kind = ErrorKind.MAC_MISMATCH
    default_message = "incorrect mac"


class PaddingError(FernetError):
    kind = ErrorKind.PADDING_ERROR
    default_message = "padding error"
