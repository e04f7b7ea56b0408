"""
Keyword search over guidance entries.

Deliberately simple: an entry matches when its title, summary, or any
keyword contains the query as a case-insensitive substring. Results come
back in store order; there is no scoring.
"""

from __future__ import annotations

from .models import GuidanceEntry
from .store import ContentStore


class SearchIndex:
    """Lowercased search fields for every entry, built once from a store."""

    def __init__(self, store: ContentStore):
        self._rows: tuple[tuple[GuidanceEntry, tuple[str, ...]], ...] = tuple(
            (entry, self._fields(entry)) for entry in store
        )

    @staticmethod
    def _fields(entry: GuidanceEntry) -> tuple[str, ...]:
        return (
            entry.title.lower(),
            entry.summary.lower(),
            *(keyword.lower() for keyword in entry.keywords),
        )

    def search(self, query: str, max_results: int | None = None) -> list[GuidanceEntry]:
        """
        Find entries containing the query.

        Args:
            query: Text to look for (case-insensitive)
            max_results: Optional cap on the number of results

        Returns:
            Matching entries in store order; empty for a blank query
        """
        needle = query.strip().lower()
        if not needle:
            return []

        results: list[GuidanceEntry] = []
        for entry, fields in self._rows:
            if any(needle in text for text in fields):
                results.append(entry)
                if max_results is not None and len(results) >= max_results:
                    break
        return results

    def __len__(self) -> int:
        return len(self._rows)
