"""
Content Store: Indexed Guidance Entries.

Built once from a list of entries and read-only afterwards:
- O(1) lookup by question id (primary ids and covered aliases)
- Pre-built indexes by module code, module group, and category
- Insertion order preserved everywhere
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from loguru import logger

from .models import GuidanceEntry


class DuplicateEntryError(ValueError):
    """Raised when two entries share a primary question id."""

    def __init__(self, question_id: str):
        super().__init__(f"Duplicate guidance entry for question id: {question_id}")
        self.question_id = question_id


class ContentStore:
    """
    Immutable collection of guidance entries.

    Use ContentStore.build() to construct one. Once built there are no
    mutating methods, so one instance can be shared by any number of readers.
    """

    def __init__(
        self,
        entries: tuple[GuidanceEntry, ...],
        by_id: dict[str, GuidanceEntry],
        by_module: dict[str, tuple[GuidanceEntry, ...]],
        by_group: dict[str, tuple[GuidanceEntry, ...]],
        by_category: dict[str, tuple[GuidanceEntry, ...]],
    ):
        self._entries = entries
        self._by_id = by_id
        self._by_module = by_module
        self._by_group = by_group
        self._by_category = by_category

    @classmethod
    def build(cls, entries: Iterable[GuidanceEntry]) -> ContentStore:
        """
        Build a store and its indexes.

        Args:
            entries: Guidance entries in source order

        Returns:
            ContentStore

        Raises:
            DuplicateEntryError: Two entries share a primary question id
        """
        ordered = tuple(entries)

        primary: dict[str, GuidanceEntry] = {}
        for entry in ordered:
            if entry.question_id in primary:
                raise DuplicateEntryError(entry.question_id)
            primary[entry.question_id] = entry

        # Covered ids never shadow a primary id; the first entry to claim one keeps it
        by_id = dict(primary)
        for entry in ordered:
            for alias in entry.covered_question_ids:
                owner = by_id.get(alias)
                if owner is None:
                    by_id[alias] = entry
                elif owner is not entry:
                    logger.debug(
                        f"Covered id {alias} on {entry.question_id} already resolves to {owner.question_id}"
                    )

        by_module: dict[str, list[GuidanceEntry]] = {}
        by_group: dict[str, list[GuidanceEntry]] = {}
        by_category: dict[str, list[GuidanceEntry]] = {}
        for entry in ordered:
            by_module.setdefault(entry.module_code, []).append(entry)
            by_group.setdefault(entry.module_group, []).append(entry)
            by_category.setdefault(entry.category, []).append(entry)

        logger.info(f"ContentStore built: {len(ordered)} entries across {len(by_module)} modules")

        return cls(
            entries=ordered,
            by_id=by_id,
            by_module={key: tuple(value) for key, value in by_module.items()},
            by_group={key: tuple(value) for key, value in by_group.items()},
            by_category={key: tuple(value) for key, value in by_category.items()},
        )

    # =========================================================================
    # Access Methods
    # =========================================================================

    def get_by_id(self, question_id: str) -> GuidanceEntry | None:
        """Get an entry by primary or covered question id."""
        return self._by_id.get(question_id)

    def exists(self, question_id: str) -> bool:
        """Check whether a question id resolves to an entry."""
        return question_id in self._by_id

    def get_by_module(self, module_code: str) -> tuple[GuidanceEntry, ...]:
        """Get all entries for a module code, in source order."""
        return self._by_module.get(module_code, ())

    def get_by_module_group(self, module_group: str) -> tuple[GuidanceEntry, ...]:
        """Get all entries for a module group, in source order."""
        return self._by_group.get(module_group, ())

    def get_by_category(self, category: str) -> tuple[GuidanceEntry, ...]:
        """Get all entries for a category, in source order."""
        return self._by_category.get(category, ())

    def get_all(self) -> tuple[GuidanceEntry, ...]:
        """Get all entries in source order."""
        return self._entries

    def question_ids(self) -> list[str]:
        """All resolvable question ids (primary ids and covered aliases)."""
        return list(self._by_id.keys())

    @property
    def modules(self) -> list[str]:
        """Module codes with at least one entry, in first-seen order."""
        return list(self._by_module.keys())

    @property
    def categories(self) -> list[str]:
        """Categories with at least one entry, in first-seen order."""
        return list(self._by_category.keys())

    def __iter__(self) -> Iterator[GuidanceEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, question_id: object) -> bool:
        return question_id in self._by_id

    # =========================================================================
    # Statistics
    # =========================================================================

    def stats(self) -> dict:
        """
        Get store statistics.

        Returns:
            Dictionary with entry totals by module and category
        """
        return {
            "total_entries": len(self._entries),
            "resolvable_ids": len(self._by_id),
            "by_module": {code: len(items) for code, items in self._by_module.items()},
            "by_category": {cat: len(items) for cat, items in self._by_category.items()},
        }
