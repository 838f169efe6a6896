"""Frozen dataclasses for catalog entries and the page view‑model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from trekrank.core.constants import Series


@dataclass(frozen=True)
class Episode:
    """One catalog entry, as stored in the ranking file."""
    season: int
    title: str
    link: str
    episode_num: str                # mixed formats, e.g. "3x15" or "101"
    description: str
    series: str                     # 'TNG' | 'DS9' | 'Voyager'


@dataclass(frozen=True)
class RankedEpisode:
    """An episode together with its position in the full catalog."""
    rank: int
    episode: Episode


@dataclass(frozen=True)
class FilterConfig:
    """Validated request parameters."""
    show_description: bool = False
    season_filter: Optional[int] = None
    series_filter: Optional[Series] = None

    @property
    def is_filtered(self) -> bool:
        return self.season_filter is not None or self.series_filter is not None


@dataclass(frozen=True)
class SeasonOption:
    """One entry of the season selector."""
    code: str
    label: str
    selected: bool


@dataclass(frozen=True)
class SeriesOption:
    """One entry of the series selector."""
    code: str
    label: str
    selected: bool


@dataclass(frozen=True)
class ViewModel:
    """Everything the page template needs."""
    episodes: Tuple[RankedEpisode, ...]
    show_description: bool
    seasons: Tuple[SeasonOption, ...]
    show_rank: bool
    series_list: Tuple[SeriesOption, ...]
