"""Unit tests for Settings."""

from pathlib import Path

from linker.config import Settings


def test_defaults(tmp_path):
    settings = Settings()

    assert settings.port == 3000
    assert settings.base_url == "http://localhost:3000"
    assert settings.discord.redirect_uri == "http://localhost:3000/auth/discord/callback"
    assert settings.steam.return_to == "http://localhost:3000/auth/steam/callback"
    assert settings.steam.realm == "http://localhost:3000"
    assert settings.steam.api_key is None
    assert not settings.discord.configured
    assert settings.session.secret == "change-this-secret"
    assert not settings.session.https_only
    assert settings.storage.links_file == tmp_path / "links.json"


def test_base_url_follows_port(monkeypatch):
    monkeypatch.setenv("PORT", "8080")

    settings = Settings()

    assert settings.base_url == "http://localhost:8080"
    assert settings.steam.return_to == "http://localhost:8080/auth/steam/callback"


def test_explicit_base_url_and_redirect(monkeypatch):
    """Should strip the trailing slash and keep an explicit Discord redirect."""
    monkeypatch.setenv("BASE_URL", "https://link.example.com/")
    monkeypatch.setenv("DISCORD_REDIRECT_URI", "https://other.example.com/cb")
    monkeypatch.setenv("DISCORD_CLIENT_ID", "id")
    monkeypatch.setenv("DISCORD_CLIENT_SECRET", "secret")
    monkeypatch.setenv("STEAM_API_KEY", "key")

    settings = Settings()

    assert settings.base_url == "https://link.example.com"
    assert settings.discord.configured
    assert settings.discord.redirect_uri == "https://other.example.com/cb"
    assert settings.steam.realm == "https://link.example.com"
    assert settings.steam.return_to == "https://link.example.com/auth/steam/callback"
    assert settings.steam.api_key == "key"


def test_empty_credentials_are_unset(monkeypatch):
    monkeypatch.setenv("DISCORD_CLIENT_ID", "")
    monkeypatch.setenv("DISCORD_CLIENT_SECRET", "secret")

    settings = Settings()

    assert settings.discord.client_id is None
    assert not settings.discord.configured


def test_production_uses_secure_cookies(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("SESSION_SECRET", "s3cret")

    settings = Settings()

    assert settings.session.https_only
    assert settings.session.secret == "s3cret"


def test_static_pages_ship_with_package():
    settings = Settings()

    assert (settings.static_dir / "home.html").is_file()
    assert (settings.static_dir / "link.html").is_file()
    assert isinstance(settings.static_dir, Path)
