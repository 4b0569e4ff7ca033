"""
controller.py — Trace Playback Engine
======================================
The PlaybackController is the ONLY object the UI interacts with while a
trace is on screen.  It owns the installed Trace, the current position
and the auto-advance timer, and exposes a clean
play/pause/next/prev/speed API.

State machine:
    EMPTY   →  install()        →  PAUSED @ 0
    PAUSED  →  toggle_play()    →  PLAYING        (no-op at the last step)
    PLAYING →  toggle_play()    →  PAUSED
    PLAYING →  (last step hit)  →  PAUSED @ N-1
    any     →  reset()          →  PAUSED @ 0
    any     →  install()        →  PAUSED @ 0     (new trace)

Auto-advance:
  While PLAYING exactly one single-shot advance is pending with the
  Scheduler.  When it fires, current_index moves by exactly one and, if
  still playing and not at the end, the next advance is scheduled.
  install / reset / step_forward / step_backward / close cancel the
  pending advance before doing anything else, so a stale timer can
  never overwrite a manual step.  A manual step while playing starts a
  fresh countdown from the new position.

Every scheduled callback carries the generation it was scheduled in; a
callback from an older generation is ignored.  That closes the window
where a ThreadingScheduler timer fires just as it is being cancelled.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from playback.scheduler import Handle, Scheduler, TickScheduler
from tracers.step import Trace, TraceStep

logger = logging.getLogger(__name__)


class InvalidTrace(ValueError):
    """Raised when an empty trace is installed."""


class InvalidSpeed(ValueError):
    """Raised when the auto-advance delay is not a positive integer."""


# ---------------------------------------------------------------------------
# Speed presets (milliseconds per step)
# ---------------------------------------------------------------------------
SPEED_PRESETS: Dict[str, int] = {
    "fast":   500,
    "normal": 1000,
    "slow":   2000,   # teaching mode
}

DEFAULT_SPEED_MS = SPEED_PRESETS["normal"]


@dataclass(frozen=True)
class PlaybackStatus:
    """Read-only progress view for the UI."""
    current_index: int  = 0
    total_steps:   int  = 0
    is_playing:    bool = False
    speed_ms:      int  = DEFAULT_SPEED_MS

    def to_dict(self) -> Dict[str, object]:
        return {
            "current_index": self.current_index,
            "total_steps":   self.total_steps,
            "is_playing":    self.is_playing,
            "speed_ms":      self.speed_ms,
        }


def validate_speed(ms: object) -> int:
    """Positive milliseconds; integral floats such as 500.0 become ints."""
    if isinstance(ms, float) and ms.is_integer():
        ms = int(ms)
    if isinstance(ms, bool) or not isinstance(ms, int) or ms <= 0:
        raise InvalidSpeed(f"Speed must be a positive number of milliseconds, got {ms!r}")
    return ms


# ---------------------------------------------------------------------------
# PlaybackController
# ---------------------------------------------------------------------------
class PlaybackController:
    """
    Attributes:
        current_index : Index into the installed trace that is currently displayed.
        is_playing    : True while auto-advance is active.
        speed_ms      : Delay between auto-advances.
        on_step       : Optional callback(TraceStep) fired every time the current
                        step changes.  The UI hooks its re-render here.
    """

    def __init__(
        self,
        scheduler: Optional[Scheduler] = None,
        speed_ms: int = DEFAULT_SPEED_MS,
        on_step: Optional[Callable[[TraceStep], None]] = None,
    ):
        self.scheduler:     Scheduler = scheduler if scheduler is not None else TickScheduler()
        self.speed_ms:      int       = validate_speed(speed_ms)
        self.on_step:       Optional[Callable[[TraceStep], None]] = on_step
        self.current_index: int       = 0
        self.is_playing:    bool      = False

        self._trace:      Trace            = ()
        self._pending:    Optional[Handle] = None
        self._generation: int              = 0
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def install(self, trace: Iterable[TraceStep]) -> None:
        """Replace the active trace and rewind to its first step, paused."""
        steps = tuple(trace)
        if not steps:
            raise InvalidTrace("Cannot install an empty trace")

        with self._lock:
            self._cancel_pending()
            self._trace        = steps
            self.current_index = 0
            self.is_playing    = False
            logger.debug("Installed trace of %d step(s)", len(steps))
            self._notify()

    def reset(self) -> None:
        """Back to step 0, paused.  The trace stays installed."""
        with self._lock:
            self._cancel_pending()
            self.current_index = 0
            self.is_playing    = False
            self._notify()

    def close(self) -> None:
        """Tear down: cancel any pending advance and stop playing."""
        with self._lock:
            self._cancel_pending()
            self.is_playing = False

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def step_forward(self) -> bool:
        """Advance one step.  Returns False if already at the end."""
        with self._lock:
            self._cancel_pending()
            if not self._trace:
                return False
            if self.current_index >= self._last_index:
                self.is_playing = False
                return False
            self._goto(self.current_index + 1)
            self._continue_playing()
            return True

    def step_backward(self) -> bool:
        """Rewind one step.  Returns False if already at the start."""
        with self._lock:
            self._cancel_pending()
            if self.current_index <= 0:
                self._continue_playing()
                return False
            self._goto(self.current_index - 1)
            self._continue_playing()
            return True

    # ------------------------------------------------------------------
    # Play / Pause
    # ------------------------------------------------------------------
    def toggle_play(self) -> bool:
        """Flip play/pause.  Returns the new is_playing value."""
        with self._lock:
            if self.is_playing:
                self.is_playing = False
                self._cancel_pending()
            elif self._trace and self.current_index < self._last_index:
                self.is_playing = True
                self._schedule()
            return self.is_playing

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, ms: int) -> None:
        """Takes effect on the next scheduled advance; a pending one keeps its deadline."""
        speed = validate_speed(ms)
        with self._lock:
            self.speed_ms = speed

    def set_speed_preset(self, preset: str) -> None:
        if preset not in SPEED_PRESETS:
            raise InvalidSpeed(f"Unknown speed preset: {preset!r}")
        self.set_speed(SPEED_PRESETS[preset])

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    def current_step(self) -> Optional[TraceStep]:
        if 0 <= self.current_index < len(self._trace):
            return self._trace[self.current_index]
        return None

    @property
    def trace(self) -> Trace:
        return self._trace

    @property
    def total_steps(self) -> int:
        return len(self._trace)

    @property
    def has_pending_advance(self) -> bool:
        return self._pending is not None

    @property
    def status(self) -> PlaybackStatus:
        with self._lock:
            return PlaybackStatus(
                current_index=self.current_index,
                total_steps=len(self._trace),
                is_playing=self.is_playing,
                speed_ms=self.speed_ms,
            )

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    @property
    def _last_index(self) -> int:
        return len(self._trace) - 1

    def _continue_playing(self) -> None:
        if not self.is_playing:
            return
        if self.current_index >= self._last_index:
            self.is_playing = False
        else:
            self._schedule()

    def _schedule(self) -> None:
        self._cancel_pending()
        generation = self._generation
        self._pending = self.scheduler.call_later(
            self.speed_ms, lambda: self._on_timer(generation)
        )
        logger.debug("Scheduled advance from step %d in %d ms", self.current_index, self.speed_ms)

    def _cancel_pending(self) -> None:
        self._generation += 1
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
            logger.debug("Cancelled pending advance at step %d", self.current_index)

    def _on_timer(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation:
                return
            self._pending = None
            if not self.is_playing or self.current_index >= self._last_index:
                self.is_playing = False
                return
            self._goto(self.current_index + 1)
            self._continue_playing()

    def _goto(self, idx: int) -> None:
        self.current_index = idx
        self._notify()

    def _notify(self) -> None:
        step = self.current_step()
        if self.on_step and step is not None:
            self.on_step(step)
