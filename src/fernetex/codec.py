"""Fernet token encoder and decoder.

``encode`` and ``decode`` never raise for classified failures; they return a
:class:`~fernetex.result.Result`. ``generate`` and ``verify`` run the same
logic and raise the carried :class:`~fernetex.exceptions.FernetError`.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from fernetex.clock import TimeLike, to_unix_seconds
from fernetex.constants import DEFAULT_TTL_SECONDS, VERSION
from fernetex.exceptions import FernetError, MacMismatchError, MissingMessageError
from fernetex.keys import KeyLike, SplitKey, coerce_iv, split_key
from fernetex.payload import TokenPayload, decode_token, encode_token
from fernetex.policy import NO_TTL, TTLPolicy
from fernetex.primitives import aes_cbc_decrypt, aes_cbc_encrypt, constant_time_equals, pad, sign, unpad
from fernetex.result import Result

logger = logging.getLogger(__name__)

IVLike = bytes | bytearray | Iterable[int]


@dataclass(frozen=True, slots=True)
class EncodedToken:
    """A freshly generated token together with the IV it was built from."""

    iv: bytes
    token: str


def encode(
    message: bytes | str | None,
    key: KeyLike | None,
    iv: IVLike | None = None,
    now: TimeLike = None,
) -> Result[EncodedToken]:
    """Encrypt and sign *message* into a token.

    A random IV is drawn when *iv* is ``None``, and the system clock is read
    when *now* is ``None``. Identical inputs always yield the identical token.
    """
    try:
        return Result.success(_encode(message, key, iv, now))
    except FernetError as e:
        logger.debug("Token encoding failed", extra={"error_kind": e.kind})
        return Result.failure(e)


def decode(
    token: str | bytes,
    key: KeyLike | None,
    ttl: int = DEFAULT_TTL_SECONDS,
    enforce_ttl: bool = True,
    now: TimeLike = None,
) -> Result[bytes]:
    """Verify *token* and return its plaintext.

    Steps, in order: base64url-decode, parse the fixed layout, apply the TTL
    window (only when *enforce_ttl*), authenticate the MAC, decrypt and unpad.
    """
    try:
        return Result.success(_decode(token, key, TTLPolicy(ttl=ttl) if enforce_ttl else NO_TTL, now))
    except FernetError as e:
        logger.debug("Token rejected: %s", e.message, extra={"error_kind": e.kind})
        return Result.failure(e)


def generate(
    message: bytes | str | None,
    key: KeyLike | None,
    iv: IVLike | None = None,
    now: TimeLike = None,
) -> EncodedToken:
    """Like :func:`encode`, but raise on failure."""
    return encode(message, key, iv=iv, now=now).unwrap()


def verify(
    token: str | bytes,
    key: KeyLike | None,
    ttl: int = DEFAULT_TTL_SECONDS,
    enforce_ttl: bool = True,
    now: TimeLike = None,
) -> bytes:
    """Like :func:`decode`, but raise on failure."""
    return decode(token, key, ttl=ttl, enforce_ttl=enforce_ttl, now=now).unwrap()


def _encode(message: bytes | str | None, key: KeyLike | None, iv: IVLike | None, now: TimeLike) -> EncodedToken:
    if isinstance(message, str):
        message = message.encode("utf-8")
    if not message:
        raise MissingMessageError()

    keys = split_key(key)
    iv_bytes = coerce_iv(iv)
    timestamp = to_unix_seconds(now)

    ciphertext = aes_cbc_encrypt(keys.encryption_key, iv_bytes, pad(bytes(message)))
    payload = TokenPayload(version=VERSION, timestamp=timestamp, iv=iv_bytes, ciphertext=ciphertext)
    signed = payload.signed_bytes
    return EncodedToken(iv=iv_bytes, token=encode_token(signed + sign(keys.signing_key, signed)))


def _decode(token: str | bytes, key: KeyLike | None, policy: TTLPolicy, now: TimeLike) -> bytes:
    keys = split_key(key)
    payload = TokenPayload.parse(decode_token(token))
    policy.check(payload.timestamp, now)
    _authenticate(keys, payload)
    return unpad(aes_cbc_decrypt(keys.encryption_key, payload.iv, payload.ciphertext))


def _authenticate(keys: SplitKey, payload: TokenPayload) -> None:
    expected = sign(keys.signing_key, payload.signed_bytes)
    if not constant_time_equals(payload.mac, expected):
        raise MacMismatchError()
