import pytest

from config import DEFAULT_CORS_ORIGINS, load_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("DATABASE_URL", "FREE_ROUND_LIMIT", "CORS_ORIGINS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    # keep a developer's local .env out of the picture
    monkeypatch.setattr("config.load_dotenv", lambda *args, **kwargs: False)


def test_defaults():
    settings = load_settings()

    assert settings.database_url is None
    assert settings.free_round_limit == 4
    assert settings.cors_origins == DEFAULT_CORS_ORIGINS
    assert settings.log_level == "INFO"


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://golf@localhost/birdie")
    monkeypatch.setenv("FREE_ROUND_LIMIT", "10")
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example,")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = load_settings()

    assert settings.database_url == "postgresql://golf@localhost/birdie"
    assert settings.free_round_limit == 10
    assert settings.cors_origins == ("https://a.example", "https://b.example")
    assert settings.log_level == "DEBUG"


def test_bad_round_limit(monkeypatch):
    monkeypatch.setenv("FREE_ROUND_LIMIT", "four")
    with pytest.raises(ValueError):
        load_settings()
