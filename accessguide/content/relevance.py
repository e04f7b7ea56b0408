"""Audience-aware selection of examples and ordering of tips."""

from __future__ import annotations

from collections.abc import Iterable

from .models import GENERAL_AUDIENCE, Example, GuidanceEntry, Tip


def select_examples(entry: GuidanceEntry, audience_tags: Iterable[str]) -> list[Example]:
    """
    Pick the examples relevant to the caller's audience.

    With no tags every example is returned. Otherwise examples tagged with
    one of the caller's tags or with the general tag are kept, in their
    original order. If that leaves nothing, every example is returned so an
    entry with examples never shows an empty examples section.

    A single string is treated as one tag.
    """
    if isinstance(audience_tags, str):
        audience_tags = [audience_tags]

    examples = list(entry.examples)
    tags = {tag.strip().lower() for tag in audience_tags if tag.strip()}
    if not tags:
        return examples

    matching = [ex for ex in examples if ex.audience in tags or ex.audience == GENERAL_AUDIENCE]
    return matching if matching else examples


def ordered_tips(entry: GuidanceEntry) -> list[Tip]:
    """Tips by priority (1 first), unranked tips last, ties in source order."""
    return sorted(entry.tips, key=lambda tip: tip.sort_priority)
