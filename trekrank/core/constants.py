"""Constants and closed enums used across the project."""

from __future__ import annotations

from enum import Enum
from typing import Dict


# ── Series ────────────────────────────────────────────────────────────

class Series(str, Enum):
    """Series codes accepted by the ``series`` query parameter."""
    TNG = "TNG"
    DS9 = "DS9"
    VOYAGER = "Voyager"


# Declared order is the order shown in the series selector
SERIES_NAMES: Dict[Series, str] = {
    Series.TNG: "The Next Generation",
    Series.DS9: "Deep Space 9",
    Series.VOYAGER: "Voyager",
}

ALL_SERIES_LABEL = "All Series"


# ── Seasons ───────────────────────────────────────────────────────────

MIN_SEASON = 1
MAX_SEASON = 7
SEASONS = range(MIN_SEASON, MAX_SEASON + 1)

ALL_SEASONS_LABEL = "All Seasons"


# ── Query parameters ──────────────────────────────────────────────────

PARAM_DESCRIPTION = "description"
PARAM_SEASON = "season"
PARAM_SERIES = "series"

DESCRIPTION_SHOW = "show"


# ── Dataset ───────────────────────────────────────────────────────────

DATASET_FILENAME = "star_trek_rank.json"
