from dataclasses import dataclass


@dataclass(frozen=True)
class BlinkState:
    """Elapsed time driving the blink animation."""

    time_seconds: float = 0.0
