"""
playback/
---------
Playback & recording layer.

    from playback import PlaybackController, TickScheduler, Recorder, compare
"""

from playback.scheduler  import Scheduler, TickScheduler, ThreadingScheduler
from playback.controller import (
    PlaybackController,
    PlaybackStatus,
    InvalidTrace,
    InvalidSpeed,
    SPEED_PRESETS,
    DEFAULT_SPEED_MS,
)
from playback.recorder   import Recorder, RunMetrics, ComparisonResult, compare

__all__ = [
    "Scheduler",
    "TickScheduler",
    "ThreadingScheduler",
    "PlaybackController",
    "PlaybackStatus",
    "InvalidTrace",
    "InvalidSpeed",
    "SPEED_PRESETS",
    "DEFAULT_SPEED_MS",
    "Recorder",
    "RunMetrics",
    "ComparisonResult",
    "compare",
]
