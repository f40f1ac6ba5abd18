"""
Configuration — Pydantic v2 Settings (env / .env)
=================================================

Purpose
-------
Centralized, strongly-typed application configuration using:
- Pydantic v2 `BaseSettings` for environment-driven values
- `pydantic-settings` v2 for `.env` loading and model config

Load Order & Behavior
---------------------
- Values are read from the environment; if not present, `.env` is used.
- Every field has a default, so an empty environment reproduces the fixed
  layout the application always shipped with (``qaApp.db``, ``templates/``,
  ``public/`` served under ``/static``, port 8080).
- `extra="ignore"`: unknown env vars are ignored (not an error).

Usage
-----
from qaapp.database.config.config import settings

# Example
db_path = settings.DB_PATH
port = settings.PORT
"""


from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    """
    Application configuration settings loaded from environment variables
    or a `.env` file. Provides strongly typed access to environment values.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    DB_PATH: str = Field("qaApp.db", description="Path of the SQLite store file.")
    TEMPLATE_DIR: str = Field("templates", description="Directory holding page and fragment templates.")
    DEFAULT_TEMPLATE: str = Field("index.html", description="Template rendered for the root path.")
    HEADER_TEMPLATE: str = Field("header.html", description="Shared header fragment, parsed with every page.")
    FOOTER_TEMPLATE: str = Field("footer.html", description="Shared footer fragment, parsed with every page.")
    STATIC_DIR: str = Field("public", description="Directory served under `STATIC_PREFIX`.")
    STATIC_PREFIX: str = Field("/static", description="URL prefix stripped before static file lookup.")
    HOST: str = Field("0.0.0.0", description="Interface the HTTP listener binds to.")
    PORT: int = Field(8080, description="Port the HTTP listener binds to.")
    LOG_LEVEL: str = Field("info", description="Uvicorn log level (e.g., `debug`, `info`, `warning`).")
    TEMPLATE_CACHE: bool = Field(False, description="Reuse parsed templates, reloading a file when its mtime changes.")
    STRICT_BOOTSTRAP: bool = Field(False, description="Abort startup when schema creation or sample data loading fails.")
    DEMO_USER: bool = Field(True, description="Render the demo user for requests without a valid token.")
    SECRET_KEY: str = Field("qaapp-development-secret", description="Secret key for signing tokens.")
    ALGORITHM: str = Field("HS256", description="Cryptographic algorithm used for JWT signing.")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(60, description="Duration (in minutes) before access tokens expire.")

# Singleton instance of Settings, ready to be imported across the app
settings = Settings()
"""Defines a Settings object built from the environment and the .env file"""
