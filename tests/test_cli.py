# tests/test_cli.py
"""Tests for the build_query command-line tool."""

import pytest

from querykit.config import settings
from scripts.build_query import main


class TestBuildQueryCli:

    def test_single_pair(self, capsys):
        assert main(["name=John Doe"]) == 0
        assert capsys.readouterr().out.strip() == "?name=John Doe"

    def test_repeated_key_is_multi_valued(self, capsys):
        main(["tag=a", "x=1", "tag=b"])
        assert capsys.readouterr().out.strip() == "?tag=a&tag=b&x=1"

    def test_no_prefix_and_custom_separators(self, capsys):
        main(["a=1", "b=2", "--no-prefix", "--pair-separator", ";", "--key-value-separator", ":"])
        assert capsys.readouterr().out.strip() == "a:1;b:2"

    def test_prefix_can_be_turned_back_on(self, capsys, monkeypatch):
        """--prefix overrides a configured include_prefix=false."""
        monkeypatch.setattr(settings, "include_prefix", False)

        main(["x=1"])
        assert capsys.readouterr().out.strip() == "x=1"

        main(["x=1", "--prefix"])
        assert capsys.readouterr().out.strip() == "?x=1"

    def test_only_first_equals_splits(self, capsys):
        main(["expr=a=b"])
        assert capsys.readouterr().out.strip() == "?expr=a=b"

    def test_blank_values_are_dropped(self, capsys):
        main(["a=", "b= "])
        assert capsys.readouterr().out.strip() == ""

    def test_pair_without_equals_is_an_error(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["novalue"])
        assert exc_info.value.code == 2
        assert "expected key=value" in capsys.readouterr().err
