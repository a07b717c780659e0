"""Key-bound convenience wrapper around the token codec."""

from fernetex.codec import generate, verify
from fernetex.constants import DEFAULT_TTL_SECONDS
from fernetex.keys import KeyLike, decode_key


class TokenEncryptor:
    """Encrypts and decrypts text using a single Fernet key.

    The key is validated once at construction. Each call to encrypt draws a
    fresh random IV, so the same plaintext never produces the same token.
    Failures raise :class:`~fernetex.exceptions.FernetError` subclasses.
    """

    def __init__(self, key: KeyLike, ttl: int = DEFAULT_TTL_SECONDS, enforce_ttl: bool = True) -> None:
        self._key = decode_key(key)
        self._ttl = ttl
        self._enforce_ttl = enforce_ttl

    def encrypt(self, plaintext: str) -> str:
        """Encrypt a plaintext string, returning the token."""
        return generate(plaintext.encode(), self._key).token

    def decrypt(self, token: str) -> str:
        """Verify a token and return the original plaintext string."""
        return verify(token, self._key, ttl=self._ttl, enforce_ttl=self._enforce_ttl).decode()

    def __repr__(self) -> str:
        return f"TokenEncryptor(ttl={self._ttl}, enforce_ttl={self._enforce_ttl})"
