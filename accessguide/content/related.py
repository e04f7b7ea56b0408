"""
Related-question navigation.

Each entry lists weak, by-id references to other entries. Nothing is
materialised; references are resolved against the store when asked, and a
reference whose target is missing resolves to an unavailable item instead of
failing the whole list.
"""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from .models import GuidanceEntry, RelatedQuestionRef
from .store import ContentStore


@dataclass(frozen=True)
class ResolvedRelated:
    """A related reference paired with its target, if the target exists."""

    ref: RelatedQuestionRef
    entry: GuidanceEntry | None

    @property
    def available(self) -> bool:
        return self.entry is not None


def resolve_related(store: ContentStore, entry: GuidanceEntry) -> list[ResolvedRelated]:
    """Resolve every related reference of an entry, in declared order."""
    resolved: list[ResolvedRelated] = []
    for ref in entry.related_questions:
        target = store.get_by_id(ref.question_id)
        if target is None:
            logger.debug(f"Related question {ref.question_id} from {entry.question_id} is unavailable")
        resolved.append(ResolvedRelated(ref=ref, entry=target))
    return resolved
