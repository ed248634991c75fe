"""Application configuration."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DiscordOAuthSettings(BaseModel):
    """Discord OAuth 2.0 configuration."""

    client_id: str | None = None
    client_secret: str | None = None

    # Callback URL registered with Discord (set by Settings validator)
    redirect_uri: str = "http://localhost:3000/auth/discord/callback"

    @property
    def configured(self) -> bool:
        """Whether both client credentials are present."""
        return bool(self.client_id and self.client_secret)


class SteamOpenIDSettings(BaseModel):
    """Steam OpenID 2.0 configuration."""

    # Optional Web API key, enables persona name lookup
    api_key: str | None = None

    # OpenID return_to and realm (set by Settings validator from base_url)
    return_to: str = "http://localhost:3000/auth/steam/callback"
    realm: str = "http://localhost:3000"


class SessionSettings(BaseModel):
    """Cookie session configuration."""

    secret: str = "change-this-secret"
    cookie_name: str = "linker_session"
    max_age: int = 14 * 24 * 60 * 60
    https_only: bool = False


class StorageSettings(BaseModel):
    """Link store configuration."""

    links_file: Path = Path("links.json")


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # If None, sends only when a token is present
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    The recognised environment variables are flat (``PORT``, ``BASE_URL``,
    ``DISCORD_CLIENT_ID`` ...). The nested groups are derived from them after
    validation:

    Development (default):
        PORT=3000
        -> Base URL: http://localhost:3000
        -> Discord callback: http://localhost:3000/auth/discord/callback
        -> Steam return_to: http://localhost:3000/auth/steam/callback

    Production:
        BASE_URL=https://link.example.com
        DISCORD_REDIRECT_URI=https://link.example.com/auth/discord/callback
        ENVIRONMENT=production
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows OBSERVABILITY__LOGFIRE_TOKEN syntax
        extra="ignore",
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Listen address
    host: str = "0.0.0.0"
    port: int = 3000

    # Public URL of this service, defaults to http://localhost:{port}
    base_url: str | None = None

    discord_client_id: str | None = None
    discord_client_secret: str | None = None
    discord_redirect_uri: str | None = None
    steam_api_key: str | None = None
    session_secret: str = "change-this-secret"
    links_file: Path = Path("links.json")
    static_dir: Path = Path(__file__).parent / "static"

    # Nested settings (derived in validator)
    discord: DiscordOAuthSettings = DiscordOAuthSettings()
    steam: SteamOpenIDSettings = SteamOpenIDSettings()
    session: SessionSettings = SessionSettings()
    storage: StorageSettings = StorageSettings()
    observability: ObservabilitySettings = ObservabilitySettings()

    @model_validator(mode="after")
    def initialize_provider_settings(self) -> "Settings":
        """Derive provider, session and storage settings from flat values."""
        if not self.base_url:
            self.base_url = f"http://localhost:{self.port}"
        self.base_url = self.base_url.rstrip("/")

        self.discord = DiscordOAuthSettings(
            client_id=self.discord_client_id or None,
            client_secret=self.discord_client_secret or None,
            redirect_uri=self.discord_redirect_uri
            or f"{self.base_url}/auth/discord/callback",
        )
        self.steam = SteamOpenIDSettings(
            api_key=self.steam_api_key or None,
            return_to=f"{self.base_url}/auth/steam/callback",
            realm=self.base_url,
        )
        self.session = SessionSettings(
            secret=self.session_secret,
            https_only=self.environment == "production",
        )
        self.storage = StorageSettings(links_file=self.links_file)

        return self
