"""Tests for configuration loading and validation."""

import logging

import pytest

from zonecat import config
from zonecat.config import AppConfig, TreeConfig, reload_settings, setup_logging, validate_config


def test_defaults_are_valid():
    validate_config()


def test_validate_collects_all_errors(monkeypatch):
    monkeypatch.setattr(AppConfig, "DEFAULT_OUTPUT_FORMAT", "xml")
    monkeypatch.setattr(TreeConfig, "STYLE", "fancy")
    monkeypatch.setattr(TreeConfig, "INDENT", 0)

    with pytest.raises(ValueError) as exc_info:
        validate_config()

    message = str(exc_info.value)
    assert "ZONECAT_OUTPUT_FORMAT" in message
    assert "ZONECAT_TREE_STYLE" in message
    assert "ZONECAT_TREE_INDENT" in message


def test_reload_settings_reads_environment(monkeypatch):
    monkeypatch.setenv("ZONECAT_TREE_STYLE", "BOX")
    monkeypatch.setenv("ZONECAT_TREE_INDENT", "3")
    monkeypatch.setenv("ZONECAT_OUTPUT_FORMAT", "json")

    reload_settings()

    assert TreeConfig.STYLE == "box"
    assert TreeConfig.INDENT == 3
    assert AppConfig.DEFAULT_OUTPUT_FORMAT == "json"


def test_load_environment_missing_file_warns(tmp_path, caplog):
    with caplog.at_level(logging.WARNING, logger=config.__name__):
        config.load_environment(str(tmp_path / "missing.env"))
    assert "Environment file not found" in caplog.text


def test_setup_logging_verbose_sets_debug():
    root = logging.getLogger()
    previous = root.level
    try:
        setup_logging(verbose=True)
        assert root.level == logging.DEBUG
    finally:
        root.setLevel(previous)


def test_setup_logging_file_handler(tmp_path):
    log_file = tmp_path / "zonecat.log"
    root = logging.getLogger()
    before = list(root.handlers)
    previous = root.level
    try:
        setup_logging(log_file=str(log_file))
        added = [h for h in root.handlers if h not in before]
        assert len(added) == 1
        assert added[0].baseFilename == str(log_file)
    finally:
        for handler in root.handlers[:]:
            if handler not in before:
                root.removeHandler(handler)
                handler.close()
        root.setLevel(previous)


def test_env_int_reads_integer(monkeypatch):
    monkeypatch.setenv("ZONECAT_TREE_INDENT", " 4 ")
    assert config.env_int("ZONECAT_TREE_INDENT", 2) == 4


def test_env_int_default_when_unset_or_blank(monkeypatch):
    monkeypatch.delenv("ZONECAT_TEST_UNSET", raising=False)
    assert config.env_int("ZONECAT_TEST_UNSET", 7) == 7
    monkeypatch.setenv("ZONECAT_TEST_UNSET", "")
    assert config.env_int("ZONECAT_TEST_UNSET", 7) == 7


def test_reload_settings_rejects_non_integer(monkeypatch):
    monkeypatch.setenv("ZONECAT_TREE_INDENT", "two")
    with pytest.raises(ValueError, match="ZONECAT_TREE_INDENT must be an integer"):
        reload_settings()


def test_reload_settings_reads_rotation(monkeypatch):
    monkeypatch.setattr(config.LogConfig, "LOG_FILE_MAX_BYTES", config.LogConfig.LOG_FILE_MAX_BYTES)
    monkeypatch.setattr(config.LogConfig, "LOG_FILE_BACKUP_COUNT", config.LogConfig.LOG_FILE_BACKUP_COUNT)
    monkeypatch.setenv("LOG_FILE_MAX_BYTES", "1024")
    monkeypatch.setenv("LOG_FILE_BACKUP_COUNT", "2")

    reload_settings()

    assert config.LogConfig.LOG_FILE_MAX_BYTES == 1024
    assert config.LogConfig.LOG_FILE_BACKUP_COUNT == 2
