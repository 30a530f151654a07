"""
HTTP API configuration settings.

Server bind address, route prefix and CORS origins.

Dependencies: pydantic, pydantic_settings
System role: HTTP surface configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from session_api.configs.base import BaseSettings


class ApiSettings(BaseSettings):
    """HTTP server and routing configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="API_",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = Field(default="0.0.0.0", description="Bind host for uvicorn")
    port: int = Field(default=8000, description="Bind port for uvicorn")
    prefix: str = Field(default="/api", description="Route prefix for all endpoints")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Allowed CORS origins",
    )
    create_tables_on_startup: bool = Field(
        default=True,
        description="Run CREATE TABLE IF NOT EXISTS during application startup",
    )
