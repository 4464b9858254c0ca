"""
Configuration management for the miniblog server
"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="MINIBLOG_",
        case_sensitive=False,
        extra="ignore",
    )

    # Server
    host: str = "127.0.0.1"
    port: int = 8080
    reload: bool = False

    # GraphQL
    graphql_path: str = "/api/graphql"
    graphiql: bool = True

    # CORS
    cors_origins: List[str] = ["*"]

    # Logging
    debug: bool = False
    log_level: str = "INFO"

    # Load the sample users and posts at startup
    seed_sample_data: bool = True


settings = Settings()
