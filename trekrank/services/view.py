"""Composition of the page view‑model."""

from __future__ import annotations

from typing import Sequence

from trekrank.core.logging_setup import get_logger
from trekrank.core.models import Episode, FilterConfig, ViewModel
from trekrank.services.presenters import build_season_options, build_series_options
from trekrank.services.ranking import filter_ranked, rank

log = get_logger("view")


def assemble(episodes: Sequence[Episode], config: FilterConfig) -> ViewModel:
    """Rank, filter and decorate *episodes* according to *config*."""
    ranked = filter_ranked(rank(episodes), config)
    log.debug(
        "season=%s series=%s → %d of %d episodes",
        config.season_filter,
        config.series_filter.value if config.series_filter else None,
        len(ranked),
        len(episodes),
    )
    return ViewModel(
        episodes=ranked,
        show_description=config.show_description,
        seasons=build_season_options(config.season_filter),
        show_rank=config.is_filtered,
        series_list=build_series_options(config.series_filter),
    )
