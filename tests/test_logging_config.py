"""Tests for the shared logging setup."""

import logging

from employee_api.app.core.logging_config import setup_logging


def test_setup_logging_writes_to_file(tmp_path, monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    logfile = tmp_path / "directory.log"

    setup_logging("debug", str(logfile))
    try:
        assert root.level == logging.DEBUG
        assert {type(h) for h in root.handlers} == {logging.StreamHandler, logging.FileHandler}

        logging.getLogger("employee_api.tests").debug("directory ready")
    finally:
        for handler in root.handlers:
            handler.close()

    assert "[DEBUG] employee_api.tests: directory ready" in logfile.read_text(encoding="utf-8")


def test_setup_logging_keeps_existing_configuration(tmp_path, monkeypatch):
    root = logging.getLogger()
    existing = logging.NullHandler()
    monkeypatch.setattr(root, "handlers", [existing])
    monkeypatch.setattr(root, "level", logging.WARNING)
    logfile = tmp_path / "unused.log"

    setup_logging("debug", str(logfile))

    assert root.handlers == [existing]
    assert root.level == logging.WARNING
    assert not logfile.exists()


def test_unknown_level_falls_back_to_info(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)

    setup_logging("chatty")

    assert root.level == logging.INFO
