from functools import lru_cache
from typing import List
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
import logging
import json


class Settings(BaseSettings):
    # Database
    database_url: str = Field(default="sqlite://data/userhub.db")
    generate_schemas: bool = Field(default=True)

    # Environment
    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")

    # CORS
    cors_origins: List[str] = Field(default=["http://localhost:5173"])

    # Rate limiting
    rate_limit_enabled: bool = Field(default=True)
    register_rate_limit: str = Field(default="5/minute")

    # Security
    password_hash_scheme: str = Field(default="bcrypt")

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        if isinstance(v, str):
            return json.loads(v)
        return v

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, v):
        if not v or "://" not in v:
            raise ValueError("DATABASE_URL must be a URL such as sqlite://data/userhub.db")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown LOG_LEVEL: {v}")
        return level

    @property
    def log_level_value(self) -> int:
        return logging.getLevelNamesMapping()[self.log_level]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"  # Ignore extra environment variables
    )


@lru_cache
def get_settings() -> Settings:
    """設定オブジェクトを取得する（プロセス内で共有）"""
    return Settings()
