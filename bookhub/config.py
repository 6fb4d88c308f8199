"""
Централизованная конфигурация клиента
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bookhub.constants import DEFAULT_API_BASE_URL, DEFAULT_SITE_URL, LOGIN_PATH


class Settings(BaseSettings):
    """Настройки клиента с валидацией через Pydantic"""

    # API
    api_base_url: str = DEFAULT_API_BASE_URL
    api_timeout: Optional[float] = None

    # Публичный адрес сайта
    site_url: str = DEFAULT_SITE_URL

    # Хранилище сессии
    storage_backend: Literal["file", "none"] = "file"
    session_file: Path = Path.home() / ".bookhub" / "session.json"

    # Маршруты
    login_path: str = LOGIN_PATH

    # Логирование
    log_level: str = "INFO"
    json_logs: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("session_file")
    @classmethod
    def expand_session_file(cls, v: Path) -> Path:
        """Раскрыть ~ в пути к файлу сессии"""
        return v.expanduser()


@lru_cache()
def get_settings() -> Settings:
    """Возвращает синглтон настроек"""
    return Settings()
