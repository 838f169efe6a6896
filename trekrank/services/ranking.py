"""Rank assignment and season/series filtering."""

from __future__ import annotations

from typing import Iterable, Tuple

from trekrank.core.models import Episode, FilterConfig, RankedEpisode


def rank(episodes: Iterable[Episode]) -> Tuple[RankedEpisode, ...]:
    """Number *episodes* 1..N in their stored order.

    This is the only place ranks are assigned; filtering keeps them.
    """
    return tuple(
        RankedEpisode(rank=position, episode=episode)
        for position, episode in enumerate(episodes, start=1)
    )


def matches(episode: Episode, config: FilterConfig) -> bool:
    if config.season_filter is not None and episode.season != config.season_filter:
        return False
    if config.series_filter is not None and episode.series != config.series_filter.value:
        return False
    return True


def filter_ranked(
    ranked: Iterable[RankedEpisode], config: FilterConfig
) -> Tuple[RankedEpisode, ...]:
    """Keep entries matching *config*, in their original order."""
    return tuple(item for item in ranked if matches(item.episode, config))
