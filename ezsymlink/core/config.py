from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RuntimeConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="EZSYMLINK_", case_sensitive=False)

    log_level: str = "info"
    log_format: Literal["json", "text"] = "json"
    history_size: int = Field(default=5, ge=1)
    default_link_type: Literal["auto", "file", "directory"] = "auto"


@lru_cache
def get_runtime_config() -> RuntimeConfig:
    return RuntimeConfig()
