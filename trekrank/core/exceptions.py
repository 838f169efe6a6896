"""Custom exception hierarchy for TrekRank."""

from __future__ import annotations


class TrekRankError(Exception):
    """Base exception for all TrekRank errors."""


# ── Configuration ──────────────────────────────────────────────────────
class ConfigError(TrekRankError):
    """Raised when the config file is invalid or unreadable."""


class ConfigValidationError(ConfigError):
    """Raised when a config value fails validation."""


# ── Dataset ────────────────────────────────────────────────────────────
class DatasetError(TrekRankError):
    """Raised when the episode catalog cannot be loaded."""


# ── Query parameters ───────────────────────────────────────────────────
class ParameterValidationError(TrekRankError):
    """Base class for rejected query parameters.

    ``code`` names the failure kind; ``str(exc)`` is the message shown
    to the client.
    """

    code = "ParameterValidationError"


class InvalidDescriptionValue(ParameterValidationError):
    """``description`` is a string other than ``"show"``."""

    code = "InvalidDescriptionValue"


class InvalidDescriptionType(ParameterValidationError):
    """``description`` is a list or mapping."""

    code = "InvalidDescriptionType"


class SeasonParseError(ParameterValidationError):
    """``season`` is not an integer."""

    code = "SeasonParseError"


class InvalidSeasonRange(ParameterValidationError):
    """``season`` parsed but lies outside 1‑7."""

    code = "InvalidSeasonRange"


class InvalidSeriesValue(ParameterValidationError):
    """``series`` is not one of the known series codes."""

    code = "InvalidSeriesValue"


class InvalidSeriesType(ParameterValidationError):
    """``series`` is a list or mapping."""

    code = "InvalidSeriesType"


# ── Rendering ──────────────────────────────────────────────────────────
class RenderError(TrekRankError):
    """Raised when the HTML template fails to render."""
