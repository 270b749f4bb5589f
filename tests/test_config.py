"""
Unit tests for configuration management.
"""

from pathlib import Path

from charchat.config import CONFIG, Config


def test_config_loads_defaults(monkeypatch):
    """Without overrides the class defaults apply."""
    for var in (
        "CHARCHAT_HOST",
        "CHARCHAT_PORT",
        "CHARCHAT_STATIC_DIR",
        "CHARCHAT_CHARACTERS_FILE",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)

    config = Config()

    assert config.host == "0.0.0.0"
    assert config.port == 8080
    assert config.static_dir == Config.STATIC_DIR
    assert config.characters_file is None
    assert config.log_level == "INFO"


def test_config_environment_override(monkeypatch, tmp_path):
    """Environment variables override defaults on reload."""
    monkeypatch.setenv("CHARCHAT_PORT", "9001")
    monkeypatch.setenv("CHARCHAT_STATIC_DIR", str(tmp_path))
    monkeypatch.setenv("CHARCHAT_CHARACTERS_FILE", "chars.json")

    config = Config()

    assert config.port == 9001
    assert config.static_dir == tmp_path
    assert config.characters_file == Path("chars.json")


def test_shared_instance_reload(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    CONFIG.reload()
    try:
        assert CONFIG.log_level == "DEBUG"
    finally:
        monkeypatch.delenv("LOG_LEVEL")
        CONFIG.reload()


def test_config_exposes_only_runtime_settings():
    assert not hasattr(Config, "TITLE")
