from __future__ import annotations
from typing import Any, Dict, List, Optional
from pathlib import Path

import yaml
from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing_extensions import Annotated
from pydantic import Field
from dotenv import load_dotenv

load_dotenv()


class SerpApiConfig(BaseModel):
    """SerpApi Google Scholar 接口配置"""
    api_key: Annotated[Optional[str], Field(default=None)]
    base_url: Annotated[str, Field(default="https://serpapi.com/search")]
    engine: Annotated[str, Field(default="google_scholar")]
    connect_timeout: Annotated[int, Field(default=10, ge=1)]  # seconds
    timeout: Annotated[int, Field(default=30, ge=1)]  # seconds


class LoggingConfig(BaseModel):
    level: Annotated[str, Field(default="INFO")]
    log_dir: Annotated[str, Field(default="logs")]
    log_file: Annotated[str, Field(default="scientometrics.log")]
    max_bytes: Annotated[int, Field(default=20 * 1024 * 1024)]  # 20MB
    backup_count: Annotated[int, Field(default=5)]


class Settings(BaseSettings):
    database_url: Annotated[str, Field(default="sqlite:///./scientometrics.db")]

    serpapi: SerpApiConfig = Field(default_factory=SerpApiConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    cors_origins: Annotated[List[str], Field(default=["*"])]
    default_max_articles: Annotated[int, Field(default=3, ge=1)]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,             # kwargs
        env_settings,              # env vars, e.g. SERPAPI__API_KEY
        dotenv_settings,           # .env file
        file_secret_settings,      # /secrets/*
    ):
        def yaml_settings() -> Dict[str, Any]:
            path = Path("settings.yaml")
            if not path.exists():
                return {}
            return yaml.safe_load(path.read_text(encoding="utf-8")) or {}

        return (
            init_settings,
            env_settings,
            dotenv_settings,
            yaml_settings,
            file_secret_settings,
        )


Config = Settings()
