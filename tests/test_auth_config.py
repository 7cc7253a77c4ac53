"""Tests for credential lookup and configuration loading."""

import json

import pytest
from pydantic import ValidationError

from embedfix.auth import MissingTokenError, get_bot_token, load_env_file
from embedfix.config import DEFAULT_CONFIG, get_bot_config, get_config_path, load_config, save_config


def test_get_bot_token_from_environment(monkeypatch):
    monkeypatch.setenv("DISCORD_BOT_TOKEN", "env-token")
    assert get_bot_token() == "env-token"


def test_get_bot_token_from_dotenv_in_working_dir(isolated_env):
    (isolated_env / "work" / ".env").write_text('# bot\nexport DISCORD_BOT_TOKEN="file-token"\n')
    assert get_bot_token() == "file-token"


def test_working_dir_dotenv_wins_over_home(isolated_env):
    (isolated_env / "home" / ".env").write_text("DISCORD_BOT_TOKEN=home-token\n")
    (isolated_env / "work" / ".env").write_text("DISCORD_BOT_TOKEN=work-token\n")
    assert get_bot_token() == "work-token"


def test_get_bot_token_missing_raises():
    with pytest.raises(MissingTokenError, match="DISCORD_BOT_TOKEN"):
        get_bot_token()


def test_get_bot_token_custom_env_name(monkeypatch):
    monkeypatch.setenv("MY_TOKEN", "custom")
    assert get_bot_token("MY_TOKEN") == "custom"


def test_load_env_file_skips_noise(tmp_path):
    path = tmp_path / ".env"
    path.write_text("\n# comment\nNOEQUALS\nA=1\nB='two'\n")
    assert load_env_file(path) == {"A": "1", "B": "two"}


def test_load_env_file_missing(tmp_path):
    assert load_env_file(tmp_path / "missing.env") == {}


def test_load_config_defaults():
    config = load_config()
    assert config == DEFAULT_CONFIG
    assert config is not DEFAULT_CONFIG


def test_load_config_merges_user_file():
    save_config({"bot": {"reply_to_hello": False}})

    config = get_bot_config()
    assert config.bot.reply_to_hello is False
    assert config.bot.token_env == "DISCORD_BOT_TOKEN"
    assert config.logging.level == "INFO"


def test_get_bot_config_rejects_bad_types():
    path = get_config_path()
    path.parent.mkdir(parents=True)
    path.write_text(json.dumps({"bot": {"reply_to_hello": "sometimes"}}))

    with pytest.raises(ValidationError):
        get_bot_config()
