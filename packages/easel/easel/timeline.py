"""Timeline - elapsed time accumulator for a fixed-duration cycle."""


class Timeline:
    def __init__(self, duration: float) -> None:
        if duration <= 0:
            raise ValueError("duration must be positive")
        self._duration = float(duration)
        self._elapsed = 0.0

    @property
    def duration(self) -> float:
        return self._duration

    @property
    def elapsed(self) -> float:
        return self._elapsed

    @property
    def expired(self) -> bool:
        return self._elapsed >= self._duration

    def advance(self, delta_ms: float) -> float:
        if delta_ms < 0:
            raise ValueError("delta_ms must be non-negative")
        self._elapsed += delta_ms / 1000
        return self._elapsed

    def current_progress(self) -> float:
        """Fraction of the cycle elapsed. Not clamped: may exceed 1 on the completing frame."""
        return self._elapsed / self._duration

    def reset(self) -> None:
        self._elapsed = 0.0
