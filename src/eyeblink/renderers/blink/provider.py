from __future__ import annotations

import reactivex
from reactivex import operators as ops

from eyeblink.renderers.blink.state import BlinkState


class BlinkStateProvider:
    """Accumulates elapsed clock milliseconds into ``BlinkState`` updates."""

    def __init__(
        self,
        clock_ticks: reactivex.Observable[int],
        initial_state: BlinkState | None = None,
    ) -> None:
        self._clock_ticks = clock_ticks
        self._initial_state = initial_state or BlinkState()

    def observable(self) -> reactivex.Observable[BlinkState]:
        def advance_state(state: BlinkState, elapsed_ms: int) -> BlinkState:
            delta_seconds = max(elapsed_ms, 0) / 1000
            return BlinkState(time_seconds=state.time_seconds + delta_seconds)

        return self._clock_ticks.pipe(
            ops.filter(lambda elapsed_ms: elapsed_ms is not None),
            ops.scan(advance_state, seed=self._initial_state),
            ops.start_with(self._initial_state),
            ops.share(),
        )
