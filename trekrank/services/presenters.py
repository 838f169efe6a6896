"""Option lists for the season and series selectors."""

from __future__ import annotations

from typing import Optional, Tuple

from trekrank.core.constants import (
    ALL_SEASONS_LABEL,
    ALL_SERIES_LABEL,
    SEASONS,
    SERIES_NAMES,
    Series,
)
from trekrank.core.models import SeasonOption, SeriesOption


def build_season_options(season_filter: Optional[int]) -> Tuple[SeasonOption, ...]:
    """``All Seasons`` followed by seasons 1‑7; exactly one is selected."""
    options = [SeasonOption(code="", label=ALL_SEASONS_LABEL, selected=season_filter is None)]
    options.extend(
        SeasonOption(code=str(n), label=f"Season {n}", selected=season_filter == n)
        for n in SEASONS
    )
    return tuple(options)


def build_series_options(series_filter: Optional[Series]) -> Tuple[SeriesOption, ...]:
    """``All Series`` followed by each series in declared order."""
    options = [SeriesOption(code="", label=ALL_SERIES_LABEL, selected=series_filter is None)]
    options.extend(
        SeriesOption(code=series.value, label=name, selected=series_filter == series)
        for series, name in SERIES_NAMES.items()
    )
    return tuple(options)
