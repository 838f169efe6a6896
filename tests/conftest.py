"""
Shared test fixtures for the TrekRank test suite.

This module provides:
- A small synthetic catalog with known ranks, seasons and series
- A FastAPI TestClient whose catalog dependency serves that catalog
- Isolation of config-related environment variables
"""

import json

import pytest
from fastapi.testclient import TestClient

from trekrank.api.app import create_app
from trekrank.api.routes import catalog
from trekrank.core.config import DEFAULT_CONFIG
from trekrank.core.models import Episode


def _episode(season, title, series, episode_num="1x01"):
    slug = title.replace(" ", "_")
    return Episode(
        season=season,
        title=title,
        link=f"https://memory-alpha.fandom.com/wiki/{slug}",
        episode_num=episode_num,
        description=f"About {title}.",
        series=series,
    )


# ========== Sample Data Fixtures ==========


@pytest.fixture
def episodes():
    """Six episodes in ranking order (rank = position + 1)."""
    return (
        _episode(3, "Alpha", "TNG", "3x15"),
        _episode(3, "Bravo", "DS9", "3x20"),
        _episode(1, "Charlie", "TNG", "1x01-02"),
        _episode(3, "Delta", "Voyager", "3x26"),
        _episode(6, "Echo", "DS9", "6x19"),
        _episode(3, "Foxtrot", "TNG", "Pilot"),
    )


@pytest.fixture
def dataset_file(tmp_path, episodes):
    """The sample episodes written as a ranking file."""
    path = tmp_path / "ranking.json"
    records = [
        {
            "season": e.season,
            "title": e.title,
            "link": e.link,
            "episode_num": e.episode_num,
            "description": e.description,
            "series": e.series,
        }
        for e in episodes
    ]
    path.write_text(json.dumps(records), encoding="utf-8")
    return path


# ========== Environment Fixtures ==========


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep $PORT and the real data directory out of every test."""
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.setenv("TREKRANK_DATA_DIR", str(tmp_path / "data"))


# ========== HTTP Fixtures ==========


@pytest.fixture
def app(episodes):
    application = create_app(dict(DEFAULT_CONFIG))
    application.dependency_overrides[catalog] = lambda: episodes
    return application


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
