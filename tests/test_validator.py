"""
Tests for services/validator.py

Coverage:
- description: absent, "show", other strings, structured values
- season: absent, empty, non-numeric, out of range, structured values
- series: absent, empty, known codes, unknown codes, structured values
- Rule order (description → season → series)
"""

import pytest

from trekrank.core.constants import Series
from trekrank.core.exceptions import (
    InvalidDescriptionType,
    InvalidDescriptionValue,
    InvalidSeasonRange,
    InvalidSeriesType,
    InvalidSeriesValue,
    ParameterValidationError,
    SeasonParseError,
)
from trekrank.core.models import FilterConfig
from trekrank.services.validator import validate


class TestDefaults:
    def test_empty_params(self):
        """No parameters gives the unfiltered configuration."""
        assert validate({}) == FilterConfig(
            show_description=False, season_filter=None, series_filter=None
        )

    def test_unknown_params_ignored(self):
        assert validate({"page": "2", "sort": ["a", "b"]}) == FilterConfig()

    def test_deterministic(self):
        raw = {"season": "4", "series": "DS9", "description": "show"}
        assert validate(raw) == validate(raw)


class TestDescription:
    def test_show(self):
        assert validate({"description": "show"}).show_description is True

    @pytest.mark.parametrize("value", ["", "hide", "Show", "true"])
    def test_other_string_rejected(self, value):
        with pytest.raises(InvalidDescriptionValue) as exc_info:
            validate({"description": value})
        assert exc_info.value.code == "InvalidDescriptionValue"
        assert str(exc_info.value) == "invalid value for description"

    @pytest.mark.parametrize("value", [["show"], {"a": "show"}])
    def test_structured_rejected(self, value):
        with pytest.raises(InvalidDescriptionType):
            validate({"description": value})


class TestSeason:
    @pytest.mark.parametrize("value", ["1", "4", "7", "+3"])
    def test_valid(self, value):
        assert validate({"season": value}).season_filter == int(value)

    def test_empty_means_all(self):
        assert validate({"season": ""}).season_filter is None

    def test_absent_means_all(self):
        assert validate({}).season_filter is None

    @pytest.mark.parametrize("value", ["0", "8", "-1", "300"])
    def test_out_of_range(self, value):
        with pytest.raises(InvalidSeasonRange):
            validate({"season": value})

    @pytest.mark.parametrize("value", ["abc", "3.0", " 3", "3a", "٣"])
    def test_not_a_number(self, value):
        with pytest.raises(SeasonParseError) as exc_info:
            validate({"season": value})
        assert value in str(exc_info.value)

    @pytest.mark.parametrize("value", [["3"], {"x": "3"}, ["9", "abc"]])
    def test_structured_value_ignored(self, value):
        """A list or mapping for season is treated as absent, not rejected."""
        assert validate({"season": value}).season_filter is None


class TestSeries:
    @pytest.mark.parametrize(
        "value, expected",
        [("TNG", Series.TNG), ("DS9", Series.DS9), ("Voyager", Series.VOYAGER)],
    )
    def test_known(self, value, expected):
        assert validate({"series": value}).series_filter is expected

    def test_series_compares_to_code(self):
        assert validate({"series": "DS9"}).series_filter == "DS9"

    def test_empty_means_all(self):
        assert validate({"series": ""}).series_filter is None

    @pytest.mark.parametrize("value", ["Enterprise", "tng", "VOYAGER", "TOS"])
    def test_unknown(self, value):
        with pytest.raises(InvalidSeriesValue) as exc_info:
            validate({"series": value})
        assert str(exc_info.value) == f"invalid series '{value}'"

    @pytest.mark.parametrize("value", [["TNG"], {"a": "DS9"}])
    def test_structured_rejected(self, value):
        with pytest.raises(InvalidSeriesType):
            validate({"series": value})


class TestRuleOrder:
    def test_description_checked_first(self):
        with pytest.raises(InvalidDescriptionValue):
            validate({"description": "nope", "season": "99", "series": "X"})

    def test_season_before_series(self):
        with pytest.raises(InvalidSeasonRange):
            validate({"series": "TNG", "season": "9"})

    def test_series_last(self):
        with pytest.raises(InvalidSeriesValue):
            validate({"description": "show", "season": "2", "series": "Enterprise"})

    def test_all_errors_share_base(self):
        with pytest.raises(ParameterValidationError):
            validate({"season": "abc"})
