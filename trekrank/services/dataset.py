"""Loading of the bundled episode ranking file.

The file is a JSON array in ranking order; each element has the keys
``season``, ``title``, ``link``, ``episode_num``, ``description`` and
``series``.  It is parsed once per process and shared read‑only.
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional, Tuple

from trekrank.core.constants import DATASET_FILENAME
from trekrank.core.exceptions import DatasetError
from trekrank.core.logging_setup import get_logger
from trekrank.core.models import Episode

log = get_logger("dataset")

DEFAULT_DATASET_PATH = Path(__file__).resolve().parent.parent / "data" / DATASET_FILENAME

_STRING_FIELDS = ("title", "link", "episode_num", "description", "series")


def _parse_record(index: int, raw: Any, source: Path) -> Episode:
    if not isinstance(raw, dict):
        raise DatasetError(f"{source}: record {index} is not an object")

    missing = [k for k in ("season",) + _STRING_FIELDS if k not in raw]
    if missing:
        raise DatasetError(f"{source}: record {index} lacks {', '.join(missing)}")

    season = raw["season"]
    # bool is an int subclass; reject it explicitly
    if not isinstance(season, int) or isinstance(season, bool):
        raise DatasetError(f"{source}: record {index} has non-integer season {season!r}")

    for key in _STRING_FIELDS:
        if not isinstance(raw[key], str):
            raise DatasetError(f"{source}: record {index} field '{key}' must be a string")

    return Episode(
        season=season,
        title=raw["title"],
        link=raw["link"],
        episode_num=raw["episode_num"],
        description=raw["description"],
        series=raw["series"],
    )


def load_episodes(path: Optional[Path] = None) -> Tuple[Episode, ...]:
    """Parse the ranking file at *path* (default: the bundled catalog)."""
    source = Path(path) if path is not None else DEFAULT_DATASET_PATH
    try:
        text = source.read_text(encoding="utf-8")
    except OSError as exc:
        raise DatasetError(f"Cannot read {source}: {exc}") from exc

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DatasetError(f"{source} is not valid JSON: {exc}") from exc

    if not isinstance(data, list):
        raise DatasetError(f"{source} must contain a JSON array")

    episodes = tuple(_parse_record(i, raw, source) for i, raw in enumerate(data))
    log.info("Loaded %d episodes from %s", len(episodes), source.name)
    return episodes


@lru_cache(maxsize=None)
def get_catalog(path: Optional[str] = None) -> Tuple[Episode, ...]:
    """Return the process‑wide catalog, loading it on first use."""
    return load_episodes(Path(path) if path else None)
