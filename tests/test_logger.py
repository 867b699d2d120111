"""
Tests for logging setup, alerts and loggerRaise.
"""
import logging

import pytest

import utils.logger as logger_module
from utils.logger import alert, loggerRaise, configure_logging, set_alert_handler


class TestAlert:

    def test_forwards_to_handler(self, alerts):
        alert("Colors left unconverted")
        assert alerts == [("Warning", "Colors left unconverted")]

    def test_logged_without_handler(self, caplog):
        with caplog.at_level(logging.WARNING, logger='Toolkit'):
            alert("no handler here")
        assert "no handler here" in caplog.text


class TestLoggerRaise:

    def test_debug_mode_reraises(self, alerts):
        with pytest.raises(KeyError):
            loggerRaise(KeyError("missing"), "Should not alert")
        assert alerts == []

    def test_release_mode_alerts_then_reraises(self, monkeypatch, alerts):
        monkeypatch.setattr(logger_module, 'DEBUG_MODE', False)
        with pytest.raises(ValueError):
            loggerRaise(ValueError("bad palette"), "Error loading palette", title="Palette")
        assert alerts == [("Palette", "Error loading palette")]

    def test_release_mode_without_handler(self, monkeypatch, capsys):
        monkeypatch.setattr(logger_module, 'DEBUG_MODE', False)
        set_alert_handler(None)
        with pytest.raises(RuntimeError):
            loggerRaise(RuntimeError("boom"))
        assert "boom" in capsys.readouterr().err


class TestConfigureLogging:

    def test_levels(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, 'basicConfig', lambda **kwargs: calls.append(kwargs))
        configure_logging()
        configure_logging(verbose=True)
        assert [c['level'] for c in calls] == [logging.WARNING, logging.DEBUG]
