"""
Access Guide: contextual guidance for an accessibility self-assessment.

Stores structured help content for every audit question and serves it to a
presentation layer: lookup, search, audience-aware examples, related-question
navigation, and the session state machine that opens, closes, and hops
between entries.
"""

from .content import ContentStore, GuidanceEntry, SearchIndex, load_store, resolve_related, select_examples
from .delivery import SessionController, SessionPhase

__version__ = "1.0.0"

__all__ = [
    "ContentStore",
    "GuidanceEntry",
    "SearchIndex",
    "SessionController",
    "SessionPhase",
    "load_store",
    "resolve_related",
    "select_examples",
    "__version__",
]
