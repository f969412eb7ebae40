from __future__ import annotations

import logging

import pytest

from unitypackage_extractor.common import config
from unitypackage_extractor.common.config import ExtractorSettings, normalize_sanitize_target
from unitypackage_extractor.common.logging_config import configure_logging


def test_settings_defaults(monkeypatch):
    monkeypatch.setattr(config, "default_sanitize_target", lambda: "posix")
    settings = ExtractorSettings({})

    assert settings.sanitize_for() == "posix"
    assert settings.temp_root() is None
    assert settings.log_level() is None


def test_settings_default_target_on_windows_host(monkeypatch):
    monkeypatch.setattr(config, "default_sanitize_target", lambda: "windows")
    assert ExtractorSettings({}).sanitize_for() == "windows"


def test_settings_read_environment_mapping():
    settings = ExtractorSettings({
        "UPE_SANITIZE_FOR": " Windows ",
        "UPE_TMPDIR": "/var/tmp/upe",
        "UPE_LOG_LEVEL": "debug",
    })

    assert settings.sanitize_for() == "windows"
    assert settings.temp_root() == "/var/tmp/upe"
    assert settings.log_level() == "debug"


def test_normalize_sanitize_target_rejects_unknown():
    with pytest.raises(ValueError, match="Unknown sanitize target"):
        normalize_sanitize_target("beos")


def test_configure_logging_invalid_level_warns(monkeypatch, caplog):
    monkeypatch.setenv("UPE_LOG_LEVEL", "VERBOSE")
    caplog.set_level(logging.WARNING, logger="unitypackage_extractor")

    logger = configure_logging()

    assert logger is logging.getLogger("unitypackage_extractor")
    assert "Invalid UPE_LOG_LEVEL" in caplog.text


def test_describe_exception_messages():
    from unitypackage_extractor.cli_helpers import describe_exception
    from unitypackage_extractor.common.errors import WriteError

    assert describe_exception(WriteError("Could not write 'x'")) == "Could not write 'x'"
    assert describe_exception(PermissionError("denied")) == "Filesystem error: denied"
