"""Tests for CLI entry point."""

from __future__ import annotations

import subprocess
import sys

import pytest

from booklist.__main__ import main
from booklist.catalog import CatalogProtocolError, CatalogSearch
from booklist.models import PublicationInfo

_CONFIG = """
catalog-url: https://catalog.example.org/
authors:
    - firstname: Sue
      lastname: Grafton
    - firstname: Stephen
      lastname: King
      media-type: large print
"""


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "booklist.yaml"
    path.write_text(_CONFIG)
    return path


class TestCLI:
    def test_no_args_exits_1(self):
        result = subprocess.run(
            [sys.executable, "-m", "booklist"],
            capture_output=True,
            text=True,
        )
        assert result.returncode == 1

    def test_no_args_prints_usage(self):
        result = subprocess.run(
            [sys.executable, "-m", "booklist"],
            capture_output=True,
            text=True,
        )
        assert "usage:" in result.stderr

    def test_missing_config_file(self, tmp_path, caplog):
        assert main([str(tmp_path / "nope.yaml")]) == 1
        assert "does not exist" in caplog.text

    def test_invalid_config(self, tmp_path, caplog):
        path = tmp_path / "bad.yaml"
        path.write_text("catalog-url: https://x.org/\n")
        assert main([str(path)]) == 1
        assert "schema validation" in caplog.text


    def test_invalid_environment(self, config_file, monkeypatch, caplog):
        monkeypatch.setenv("BOOKLIST_TIMEOUT_S", "soon")
        assert main([str(config_file)]) == 1
        assert "invalid environment settings" in caplog.text


class TestRun:
    def test_prints_results(self, config_file, monkeypatch, capsys):
        searched = []

        def fake_search(self, query):
            searched.append((query.author, query.media))
            return [PublicationInfo(media=query.media, title="X")]

        monkeypatch.setattr(CatalogSearch, "search", fake_search)

        assert main([str(config_file)]) == 0

        assert searched == [("Grafton, Sue", "Book"), ("King, Stephen", "Large Print")]
        out = capsys.readouterr().out
        assert "Grafton, Sue -- Books:\n  [Book]  X" in out
        assert "King, Stephen -- Large Prints:\n  [Large Print]  X" in out

    def test_failed_author_does_not_stop_run(self, config_file, monkeypatch, capsys, caplog):
        def fake_search(self, query):
            if query.author == "Grafton, Sue":
                raise CatalogProtocolError("count failed")
            return []

        monkeypatch.setattr(CatalogSearch, "search", fake_search)

        assert main([str(config_file)]) == 1

        assert "King, Stephen -- Large Prints:" in capsys.readouterr().out
        assert "Search for 'Grafton, Sue' failed: count failed" in caplog.text
