from collections.abc import Iterator
from pathlib import Path

import pytest

from atos_bot.config.settings import AppSettings, IGNORE_DOTENV_ENV_VAR, get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_settings_load_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SPOTIFY_CLIENT_SECRET", raising=False)

    monkeypatch.setenv("DISCORD_TOKEN", "discord-token")
    monkeypatch.setenv("SPOTIFY_CLIENT_ID", "client-id")

    settings = get_settings(ignore_dotenv=True)

    assert isinstance(settings, AppSettings)
    assert settings.discord_token == "discord-token"
    assert settings.spotify_client_id == "client-id"
    assert settings.spotify_client_secret is None


def test_get_settings_reads_dotenv(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    dotenv = tmp_path / ".env"
    dotenv.write_text("DISCORD_TOKEN=from-dotenv\n", encoding="utf-8")

    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(IGNORE_DOTENV_ENV_VAR, raising=False)
    monkeypatch.delenv("DISCORD_TOKEN", raising=False)

    settings = get_settings()

    assert settings.discord_token == "from-dotenv"


def test_get_settings_env_override(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    dotenv = tmp_path / ".env"
    dotenv.write_text("DISCORD_TOKEN=from-dotenv\n", encoding="utf-8")

    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv(IGNORE_DOTENV_ENV_VAR, "true")
    monkeypatch.delenv("DISCORD_TOKEN", raising=False)

    settings = get_settings()

    assert settings.discord_token is None


def test_get_settings_ignore_argument(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    dotenv = tmp_path / ".env"
    dotenv.write_text("SPOTIFY_CLIENT_SECRET=from-dotenv\n", encoding="utf-8")

    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(IGNORE_DOTENV_ENV_VAR, raising=False)
    monkeypatch.delenv("SPOTIFY_CLIENT_SECRET", raising=False)

    settings = get_settings(ignore_dotenv=True)

    assert settings.spotify_client_secret is None


def test_get_settings_is_cached() -> None:
    assert get_settings(ignore_dotenv=True) is get_settings(ignore_dotenv=True)
