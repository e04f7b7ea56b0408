"""
Delivery: The stateful guidance session and its outer surfaces.

Components:
- SessionController: open / close / navigate state machine
- TimerScheduler: AsyncioTimers (event loop) and ManualTimers (virtual clock)
- AnalyticsSink: Fire-and-forget notifications (null, logging, callback sinks)
- cli: Rich terminal reader
"""

from .analytics import AnalyticsSink, CallbackAnalyticsSink, LoggingAnalyticsSink, NullAnalyticsSink
from .session import EXIT_HOLD_DELAY, NAVIGATION_DELAY, SessionController, SessionPhase
from .timers import AsyncioTimers, ManualTimers, TimerHandle, TimerScheduler

__all__ = [
    # Session
    "SessionController",
    "SessionPhase",
    "EXIT_HOLD_DELAY",
    "NAVIGATION_DELAY",
    # Timers
    "TimerScheduler",
    "TimerHandle",
    "AsyncioTimers",
    "ManualTimers",
    # Analytics
    "AnalyticsSink",
    "NullAnalyticsSink",
    "LoggingAnalyticsSink",
    "CallbackAnalyticsSink",
]
