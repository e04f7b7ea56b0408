"""
Guidance Session Controller.

Tracks which guidance entry is presented and drives the open / close /
navigate state machine:

    CLOSED --open_entry--> OPEN --close_session--> CLOSED
    OPEN --navigate_to_related--> TRANSITIONING --(navigation delay)--> OPEN

Closing is logical immediately, but the entry stays readable for the
exit-hold delay so an exit transition can still render it. Every transition
bumps a generation counter and cancels the pending timer, and deferred
callbacks re-check their generation, so a stale clear or reopen can never
overwrite a newer state. The deferred step is scheduled before any state
changes, so a scheduler error (e.g. AsyncioTimers with no running loop)
propagates with the session left as it was.

Single-owner and single-threaded: one controller per UI session, driven
from one event loop.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from enum import Enum

from loguru import logger

from ..config import Settings, get_settings
from ..content.models import Example, GuidanceEntry
from ..content.related import ResolvedRelated, resolve_related
from ..content.relevance import select_examples
from ..content.store import ContentStore
from .analytics import AnalyticsSink, NullAnalyticsSink
from .timers import AsyncioTimers, TimerHandle, TimerScheduler

# Seconds closed content stays readable after close_session()
EXIT_HOLD_DELAY = 0.3

# Seconds between closing and reopening in navigate_to_related()
NAVIGATION_DELAY = 0.15


class SessionPhase(Enum):
    """Presentation state of a guidance session."""

    CLOSED = "closed"
    OPEN = "open"
    TRANSITIONING = "transitioning"  # closed, reopening on a related entry


class SessionController:
    """
    The single mutable surface of the guidance engine.

    Reads entries from a ContentStore, schedules deferred transitions on a
    TimerScheduler, and reports transitions to an AnalyticsSink.
    """

    def __init__(
        self,
        store: ContentStore,
        analytics: AnalyticsSink | None = None,
        timers: TimerScheduler | None = None,
        exit_hold_delay: float = EXIT_HOLD_DELAY,
        navigation_delay: float = NAVIGATION_DELAY,
        on_missing: Callable[[str], None] | None = None,
    ):
        """
        Initialize a closed session.

        Args:
            store: Content to present (read-only)
            analytics: Notification sink (default: discard events)
            timers: Scheduler for deferred transitions (default: asyncio loop)
            exit_hold_delay: Seconds to keep closed content readable
            navigation_delay: Seconds between close and reopen when navigating
            on_missing: Called with the id when a request names unknown content
        """
        self._store = store
        self._analytics = analytics or NullAnalyticsSink()
        self._timers = timers or AsyncioTimers()
        self._exit_hold_delay = exit_hold_delay
        self._navigation_delay = navigation_delay
        self._on_missing = on_missing

        self._phase = SessionPhase.CLOSED
        self._active_entry_id: str | None = None
        self._pending: TimerHandle | None = None
        self._generation = 0

    @classmethod
    def from_settings(
        cls,
        store: ContentStore,
        settings: Settings | None = None,
        **kwargs,
    ) -> SessionController:
        """Create a controller using the configured delays."""
        config = (settings or get_settings()).get_session_config()
        return cls(
            store,
            exit_hold_delay=config["exit_hold_delay"],
            navigation_delay=config["navigation_delay"],
            **kwargs,
        )

    # =========================================================================
    # State
    # =========================================================================

    @property
    def phase(self) -> SessionPhase:
        return self._phase

    @property
    def is_open(self) -> bool:
        return self._phase is SessionPhase.OPEN

    @property
    def active_entry_id(self) -> str | None:
        """Presented question id; still set during the exit hold after close."""
        return self._active_entry_id

    @property
    def active_entry(self) -> GuidanceEntry | None:
        if self._active_entry_id is None:
            return None
        return self._store.get_by_id(self._active_entry_id)

    @property
    def has_pending_transition(self) -> bool:
        return self._pending is not None

    def has_entry(self, question_id: str) -> bool:
        """Check if guidance exists for a question."""
        return self._store.exists(question_id)

    # =========================================================================
    # Transitions
    # =========================================================================

    def open_entry(self, question_id: str) -> bool:
        """
        Present the entry for a question.

        Opening the id that is already open is allowed and notifies again.

        Returns:
            True if opened; False if no entry exists (state unchanged)
        """
        if not self._store.exists(question_id):
            self._report_missing(question_id)
            return False

        self._supersede()
        self._active_entry_id = question_id
        self._phase = SessionPhase.OPEN
        logger.debug(f"Session opened {question_id} (generation {self._generation})")
        self._emit("on_open", question_id)
        return True

    def close_session(self) -> bool:
        """
        Close the session.

        The phase becomes CLOSED at once; the active entry is cleared after
        the exit-hold delay unless a newer transition supersedes it.

        Returns:
            True if the session was open or transitioning; False if already closed
        """
        if self._phase is SessionPhase.CLOSED:
            return False

        was_open = self._phase is SessionPhase.OPEN
        generation = self._generation + 1
        handle = self._timers.call_later(
            self._exit_hold_delay, lambda: self._clear_active(generation)
        )

        self._supersede()
        self._pending = handle
        self._phase = SessionPhase.CLOSED
        if was_open:
            self._emit("on_close")
        logger.debug(f"Session closed (generation {generation})")
        return True

    def dismiss(self) -> bool:
        """Handle an external cancel signal such as the Escape key."""
        if self._phase is SessionPhase.CLOSED:
            return False
        return self.close_session()

    def navigate_to_related(self, question_id: str) -> bool:
        """
        Move to another entry through a full close and reopen.

        Always closes first, even when the target is the active entry, then
        opens the target after the navigation delay. A newer navigation
        replaces a pending one, so only the final target is opened.

        Returns:
            True if navigation started; False if no entry exists (state unchanged)
        """
        if not self._store.exists(question_id):
            self._report_missing(question_id)
            return False

        was_open = self._phase is SessionPhase.OPEN
        generation = self._generation + 1
        handle = self._timers.call_later(
            self._navigation_delay, lambda: self._finish_navigation(generation, question_id)
        )

        self._supersede()
        self._pending = handle
        self._phase = SessionPhase.TRANSITIONING
        if was_open:
            self._emit("on_close")
        logger.debug(f"Session navigating to {question_id} (generation {generation})")
        return True

    # =========================================================================
    # Active Entry Helpers
    # =========================================================================

    def relevant_examples(self, audience_tags: Iterable[str] = ()) -> list[Example]:
        """Examples of the active entry relevant to the given audience."""
        entry = self.active_entry
        if entry is None:
            return []
        return select_examples(entry, audience_tags)

    def related_entries(self) -> list[ResolvedRelated]:
        """Related references of the active entry, resolved against the store."""
        entry = self.active_entry
        if entry is None:
            return []
        return resolve_related(self._store, entry)

    def track_section_toggle(self, section_name: str, is_expanded: bool) -> None:
        """Report that a collapsible section was expanded or collapsed."""
        logger.debug(
            f"Section toggle on {self._active_entry_id}: {section_name} expanded={is_expanded}"
        )
        self._emit("on_section_toggle", section_name, is_expanded)

    def track_feedback(self, is_positive: bool) -> None:
        """Report reader feedback on the active entry."""
        logger.debug(f"Feedback on {self._active_entry_id}: positive={is_positive}")
        self._emit("on_feedback", is_positive)

    # =========================================================================
    # Internals
    # =========================================================================

    def _supersede(self) -> None:
        """Invalidate any pending deferred transition."""
        self._generation += 1
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
            logger.debug(f"Cancelled stale pending transition (now generation {self._generation})")

    def _clear_active(self, generation: int) -> None:
        if generation != self._generation or self._phase is not SessionPhase.CLOSED:
            logger.debug(f"Ignoring stale clear from generation {generation}")
            return
        self._pending = None
        self._active_entry_id = None

    def _finish_navigation(self, generation: int, question_id: str) -> None:
        if generation != self._generation:
            logger.debug(f"Ignoring stale reopen of {question_id} from generation {generation}")
            return
        self._pending = None
        self.open_entry(question_id)

    def _report_missing(self, question_id: str) -> None:
        logger.warning(f"No guidance content found for question: {question_id}")
        if self._on_missing is not None:
            try:
                self._on_missing(question_id)
            except Exception:
                logger.exception(f"Missing-content observer failed for {question_id}")

    def _emit(self, event: str, *args) -> None:
        try:
            getattr(self._analytics, event)(*args)
        except Exception:
            logger.exception(f"Analytics sink failed on {event}")
