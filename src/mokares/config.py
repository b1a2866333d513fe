"""Application configuration."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Process settings loaded from environment variables."""

    config_file: Path = Path("indexer.toml")
    guide_base_url: str = "https://github.com/MoKa-Reads"
    sort_entries: bool = True
    quote_paths: bool = False
    debug: bool = False

    model_config = SettingsConfigDict(
        env_prefix="MOKARES_",
        env_file=".env",
        env_file_encoding="utf-8",
    )


settings = Settings()
