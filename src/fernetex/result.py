"""Tagged success/failure values returned by the codec."""

from dataclasses import dataclass
from typing import Generic, TypeVar

from fernetex.exceptions import ErrorKind, FernetError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Result(Generic[T]):
    """Outcome of an encode or decode call.

    Exactly one of ``value`` and ``error`` is set. Use :meth:`unwrap` for
    fail-fast semantics.
    """

    value: T | None = None
    error: FernetError | None = None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: FernetError) -> "Result[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> ErrorKind | None:
        """Error category, or ``None`` on success."""
        return self.error.kind if self.error is not None else None

    def unwrap(self) -> T:
        """Return the value, raising the carried error on failure."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]
