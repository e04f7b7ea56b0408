"""
Content loader for guidance JSON files.

Reads entries from the bundled accessguide/data/help resources or from a
directory on disk. Each file holds either a JSON list of entries or an
object with an "entries" list. Files are read in name order and entries keep
their in-file order, which becomes the store's insertion order.
"""

from __future__ import annotations

import json
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path

from loguru import logger

from ..config import Settings, get_settings
from .models import GuidanceEntry
from .store import ContentStore

CONTENT_PACKAGE = "accessguide"
CONTENT_SUBDIR = ("data", "help")


class ContentLoadError(ValueError):
    """Raised when a content file cannot be turned into entries."""


def bundled_content_dir() -> Traversable:
    """Location of the content shipped with the package."""
    root = resources.files(CONTENT_PACKAGE)
    for part in CONTENT_SUBDIR:
        root = root.joinpath(part)
    return root


def load_entries(content_dir: Path | str | None = None, strict: bool = False) -> list[GuidanceEntry]:
    """
    Load guidance entries from every JSON file in a directory.

    Args:
        content_dir: Directory to read; None reads the bundled content
        strict: Raise on malformed entries instead of skipping them

    Returns:
        Entries in file-name order, then in-file order

    Raises:
        ContentLoadError: A file is unreadable or has the wrong shape,
            or (strict mode) an entry is malformed
    """
    base: Traversable | Path = bundled_content_dir() if content_dir is None else Path(content_dir)

    if isinstance(base, Path) and not base.is_dir():
        logger.warning(f"Content directory not found: {base}")
        return []

    files = sorted(
        (item for item in base.iterdir() if item.name.endswith(".json")),
        key=lambda item: item.name,
    )
    if not files:
        logger.warning(f"No content files found in {base}")
        return []

    entries: list[GuidanceEntry] = []
    for item in files:
        entries.extend(_load_file(item, strict))

    logger.info(f"Loaded {len(entries)} guidance entries from {len(files)} files")
    return entries


def _load_file(item: Traversable | Path, strict: bool) -> list[GuidanceEntry]:
    """Load entries from a single JSON file."""
    try:
        data = json.loads(item.read_text(encoding="utf-8-sig"))
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Failed to load {item.name}: {e}")
        raise ContentLoadError(f"Unreadable content file {item.name}: {e}") from e

    raw_entries = data.get("entries") if isinstance(data, dict) else data
    if not isinstance(raw_entries, list):
        raise ContentLoadError(f"Content file {item.name} must hold a list of entries")

    loaded: list[GuidanceEntry] = []
    for index, raw in enumerate(raw_entries):
        try:
            if not isinstance(raw, dict):
                raise TypeError(f"expected an object, got {type(raw).__name__}")
            loaded.append(GuidanceEntry.from_dict(raw))
        except (KeyError, TypeError, ValueError) as e:
            if strict:
                raise ContentLoadError(f"Invalid entry #{index} in {item.name}: {e!r}") from e
            logger.warning(f"Skipping invalid entry #{index} in {item.name}: {e!r}")

    logger.debug(f"Loaded {len(loaded)} entries from {item.name}")
    return loaded


def load_store(settings: Settings | None = None) -> ContentStore:
    """Load content per settings and build the store."""
    settings = settings or get_settings()
    entries = load_entries(settings.content_dir, strict=settings.strict_content)
    return ContentStore.build(entries)
