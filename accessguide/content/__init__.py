"""
Content: Guidance entries and the read-only operations over them.

Core modules:
- models: Immutable GuidanceEntry and its parts
- store: ContentStore with id/module/category indexes
- loader: JSON content loading (bundled or from a directory)
- search: Keyword SearchIndex
- relevance: Audience-aware example selection, tip ordering
- related: Related-question resolution
"""

from .loader import ContentLoadError, load_entries, load_store
from .models import (
    AUDIENCE_TAGS,
    GENERAL_AUDIENCE,
    Example,
    GuidanceEntry,
    RelatedQuestionRef,
    Solution,
    Tip,
)
from .related import ResolvedRelated, resolve_related
from .relevance import ordered_tips, select_examples
from .search import SearchIndex
from .store import ContentStore, DuplicateEntryError

__all__ = [
    # Models
    "GuidanceEntry",
    "Example",
    "Solution",
    "Tip",
    "RelatedQuestionRef",
    "AUDIENCE_TAGS",
    "GENERAL_AUDIENCE",
    # Store
    "ContentStore",
    "DuplicateEntryError",
    # Loading
    "ContentLoadError",
    "load_entries",
    "load_store",
    # Queries
    "SearchIndex",
    "select_examples",
    "ordered_tips",
    "ResolvedRelated",
    "resolve_related",
]
