"""
Tests for cli/commands.py

Coverage:
- ``list`` output for filtered requests
- Exit status 2 on invalid parameters
"""

import io

import pytest

from trekrank.cli.commands import main
from trekrank.services.dataset import get_catalog


@pytest.fixture
def use_sample_catalog(dataset_file, monkeypatch):
    monkeypatch.setenv("TREKRANK_DATA_DIR", str(dataset_file.parent))
    (dataset_file.parent / "config.yaml").write_text(
        f"dataset_path: '{dataset_file.as_posix()}'\n", encoding="utf-8"
    )
    get_catalog.cache_clear()
    yield
    get_catalog.cache_clear()


def test_list_filtered(use_sample_catalog):
    out = io.StringIO()
    assert main(["list", "--series", "TNG", "--season", "3"], out=out) == 0
    lines = out.getvalue().splitlines()
    assert lines == [
        "   1. [TNG S3 3x15] Alpha",
        "   6. [TNG S3 Pilot] Foxtrot",
        "2 episode(s)",
    ]


def test_list_with_descriptions(use_sample_catalog):
    out = io.StringIO()
    assert main(["list", "--season", "6", "--description"], out=out) == 0
    assert "About Echo." in out.getvalue()


@pytest.mark.parametrize("argv", [["list", "--season", "9"], ["list", "--series", "TOS"]])
def test_list_invalid(use_sample_catalog, argv, capsys):
    assert main(argv, out=io.StringIO()) == 2
    assert capsys.readouterr().err.startswith("error: ")
