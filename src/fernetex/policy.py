"""Timestamp acceptance window for token verification."""

from dataclasses import dataclass

from fernetex.clock import TimeLike, to_unix_seconds

from fernetex.constants import DEFAULT_TTL_SECONDS, MAX_CLOCK_DRIFT_SECONDS
from fernetex.exceptions import ClockSkewError, ExpiredTTLError


@dataclass(frozen=True, slots=True)
class TTLPolicy:
    """Expiry and clock-drift limits applied to a token's timestamp.

    When ``enforce`` is false every timestamp is accepted.
    """

    ttl: int = DEFAULT_TTL_SECONDS
    enforce: bool = True
    max_drift: int = MAX_CLOCK_DRIFT_SECONDS

    def check(self, timestamp: int, now: TimeLike = None) -> None:
        """Raise if *timestamp* is expired or too far ahead of *now*.

        Expiry is checked before drift. The clock is only read when the
        policy is enforced.
        """
        if not self.enforce:
            return
        current = to_unix_seconds(now)
        if timestamp + self.ttl <= current:
            raise ExpiredTTLError()
        if timestamp > current + self.max_drift:
            raise ClockSkewError()


NO_TTL = TTLPolicy(enforce=False)
