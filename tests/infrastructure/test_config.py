"""Tests for environment parsing in the settings module."""

import logging

from stockroom.infrastructure.config import _get_bool, _get_int

ENV = "STOCKROOM_TEST_VALUE"


class TestGetInt:

    def test_unset_uses_default(self, monkeypatch):
        monkeypatch.delenv(ENV, raising=False)
        assert _get_int(ENV, 10) == 10

    def test_blank_uses_default(self, monkeypatch):
        monkeypatch.setenv(ENV, "  ")
        assert _get_int(ENV, 10) == 10

    def test_parses_integer(self, monkeypatch):
        monkeypatch.setenv(ENV, " 25 ")
        assert _get_int(ENV, 10) == 25

    def test_garbage_falls_back_with_warning(self, monkeypatch, caplog):
        monkeypatch.setenv(ENV, "ten")
        with caplog.at_level(logging.WARNING):
            assert _get_int(ENV, 10) == 10
        assert "STOCKROOM_TEST_VALUE='ten'" in caplog.text


class TestGetBool:

    def test_truthy_spellings(self, monkeypatch):
        for raw in ("1", "true", "Yes", " on "):
            monkeypatch.setenv(ENV, raw)
            assert _get_bool(ENV) is True

    def test_anything_else_is_false(self, monkeypatch):
        monkeypatch.setenv(ENV, "nope")
        assert _get_bool(ENV, True) is False
