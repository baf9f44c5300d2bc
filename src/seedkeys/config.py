"""
Configuration management using pydantic-settings.
"""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SEEDKEYS_", env_file=".env", env_file_encoding="utf-8", case_sensitive=False
    )

    log_level: str = "INFO"

    # Default for --sorted/--unsorted
    sort_keys: bool = False

    network: Literal["mainnet", "testnet", "regtest"] = "regtest"
    output_format: Literal["text", "json"] = "text"


def get_settings() -> Settings:
    return Settings()
