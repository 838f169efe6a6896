"""Validation of the page's query parameters.

Raw values come from :func:`trekrank.api.routes.decode_query` and are
either ``None`` (absent), a ``str``, or a list/dict for structured
parameters such as ``season[]=1``.  Rules are checked in the order
description, season, series; the first failure is raised.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from trekrank.core.constants import (
    DESCRIPTION_SHOW,
    MAX_SEASON,
    MIN_SEASON,
    PARAM_DESCRIPTION,
    PARAM_SEASON,
    PARAM_SERIES,
    Series,
)
from trekrank.core.exceptions import (
    InvalidDescriptionType,
    InvalidDescriptionValue,
    InvalidSeasonRange,
    InvalidSeriesType,
    InvalidSeriesValue,
    SeasonParseError,
)
from trekrank.core.models import FilterConfig

_SERIES_BY_CODE = {s.value: s for s in Series}


def parse_description(value: Any) -> bool:
    if value is None:
        return False
    if not isinstance(value, str):
        raise InvalidDescriptionType("invalid type for description")
    if value == DESCRIPTION_SHOW:
        return True
    raise InvalidDescriptionValue("invalid value for description")


def parse_season(value: Any) -> Optional[int]:
    """Return the season number, or ``None`` when no season is requested.

    Structured (non‑string) values are ignored rather than rejected.
    """
    if not isinstance(value, str) or value == "":
        return None
    try:
        season = _parse_int(value)
    except ValueError:
        raise SeasonParseError(f"could not parse season '{value}'") from None
    if not (MIN_SEASON <= season <= MAX_SEASON):
        raise InvalidSeasonRange(f"invalid season {season}")
    return season


def _parse_int(value: str) -> int:
    # Plain decimal only: no whitespace, underscores or non-ASCII digits
    body = value[1:] if value[:1] in ("+", "-") else value
    if not body.isascii() or not body.isdigit():
        raise ValueError(value)
    return int(value)


def parse_series(value: Any) -> Optional[Series]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise InvalidSeriesType("invalid type for series")
    if value == "":
        return None
    try:
        return _SERIES_BY_CODE[value]
    except KeyError:
        raise InvalidSeriesValue(f"invalid series '{value}'") from None


def validate(raw_params: Mapping[str, Any]) -> FilterConfig:
    """Turn raw query parameters into a :class:`FilterConfig`.

    Unknown parameter names are ignored.

    Raises
    ------
    ParameterValidationError
        One of its subclasses, for the first parameter that fails.
    """
    show_description = parse_description(raw_params.get(PARAM_DESCRIPTION))
    season_filter = parse_season(raw_params.get(PARAM_SEASON))
    series_filter = parse_series(raw_params.get(PARAM_SERIES))
    return FilterConfig(
        show_description=show_description,
        season_filter=season_filter,
        series_filter=series_filter,
    )
