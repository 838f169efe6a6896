"""TrekRank – a ranked, filterable Star Trek episode list served over HTTP."""

__version__ = "1.0.0"
