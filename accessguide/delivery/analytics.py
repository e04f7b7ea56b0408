"""
Analytics Sink: Fire-and-forget Session Notifications.

The session controller reports transitions and reader interactions here.
The caller owns the sink and decides where events go; the engine never
waits on a sink and never lets a sink failure change session state.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from loguru import logger


class AnalyticsSink(Protocol):
    """Notification callbacks invoked by SessionController."""

    def on_open(self, question_id: str) -> None: ...

    def on_close(self) -> None: ...

    def on_section_toggle(self, section_name: str, is_expanded: bool) -> None: ...

    def on_feedback(self, is_positive: bool) -> None: ...


class NullAnalyticsSink:
    """Default sink: discards every event."""

    def on_open(self, question_id: str) -> None:
        pass

    def on_close(self) -> None:
        pass

    def on_section_toggle(self, section_name: str, is_expanded: bool) -> None:
        pass

    def on_feedback(self, is_positive: bool) -> None:
        pass


class LoggingAnalyticsSink:
    """Writes every event to the debug log."""

    def on_open(self, question_id: str) -> None:
        logger.debug(f"Guidance opened: {question_id}")

    def on_close(self) -> None:
        logger.debug("Guidance closed")

    def on_section_toggle(self, section_name: str, is_expanded: bool) -> None:
        logger.debug(f"Guidance section toggled: {section_name} expanded={is_expanded}")

    def on_feedback(self, is_positive: bool) -> None:
        logger.debug(f"Guidance feedback: {'positive' if is_positive else 'negative'}")


class CallbackAnalyticsSink:
    """Adapts plain callables into a sink; any callback may be omitted."""

    def __init__(
        self,
        on_open: Callable[[str], None] | None = None,
        on_close: Callable[[], None] | None = None,
        on_section_toggle: Callable[[str, bool], None] | None = None,
        on_feedback: Callable[[bool], None] | None = None,
    ):
        self._on_open = on_open
        self._on_close = on_close
        self._on_section_toggle = on_section_toggle
        self._on_feedback = on_feedback

    def on_open(self, question_id: str) -> None:
        if self._on_open:
            self._on_open(question_id)

    def on_close(self) -> None:
        if self._on_close:
            self._on_close()

    def on_section_toggle(self, section_name: str, is_expanded: bool) -> None:
        if self._on_section_toggle:
            self._on_section_toggle(section_name, is_expanded)

    def on_feedback(self, is_positive: bool) -> None:
        if self._on_feedback:
            self._on_feedback(is_positive)
