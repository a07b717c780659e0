"""Block cipher, padding and MAC primitives used by the codec."""

import hashlib
import hmac

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from fernetex.constants import BLOCK_SIZE
from fernetex.exceptions import PaddingError, PayloadSizeError

_PADDING = padding.PKCS7(BLOCK_SIZE * 8)


def pad(data: bytes) -> bytes:
    """PKCS#7-pad *data* to a multiple of the block size.

    A full block of padding is appended when *data* is already aligned, so the
    result is always strictly longer than the input.
    """
    padder = _PADDING.padder()
    return padder.update(data) + padder.finalize()


def unpad(data: bytes) -> bytes:
    """Strip PKCS#7 padding, raising :class:`PaddingError` if it is malformed."""
    unpadder = _PADDING.unpadder()
    try:
        return unpadder.update(data) + unpadder.finalize()
    except ValueError as e:
        raise PaddingError() from e


def aes_cbc_encrypt(key: bytes, iv: bytes, data: bytes) -> bytes:
    """Encrypt block-aligned *data* with AES-128-CBC."""
    encryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).encryptor()
    return encryptor.update(data) + encryptor.finalize()


def aes_cbc_decrypt(key: bytes, iv: bytes, data: bytes) -> bytes:
    if len(data) % BLOCK_SIZE != 0:
        raise PayloadSizeError()
    decryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).decryptor()
    return decryptor.update(data) + decryptor.finalize()


def sign(signing_key: bytes, payload: bytes) -> bytes:
    """HMAC-SHA256 of *payload* under *signing_key*."""
    return hmac.new(signing_key, payload, hashlib.sha256).digest()


def constant_time_equals(a: bytes, b: bytes) -> bool:
    """Compare two byte strings without an early exit on the first mismatch.

    Lengths are public, so a length mismatch returns immediately.
    """
    if len(a) != len(b):
        return False
    return hmac.compare_digest(a, b)
