"""
Модуль конфигурации библиотеки
Загружает и валидирует переменные окружения с префиксом EMOJIKIT_
"""

from pathlib import Path
from typing import Optional

# Логирование (ОБЯЗАТЕЛЬНО loguru)
from loguru import logger

# Сторонние библиотеки
from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Локальные импорты
from emojikit.utils.exceptions import ConfigurationError

# Настройка логгера модуля
logger = logger.bind(module="config")

# Политики разрешения конфликтов алиасов
ALIAS_POLICIES = ("last", "first")

VALID_LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


class Config(BaseSettings):
    """Конфигурация библиотеки с валидацией"""

    model_config = SettingsConfigDict(
        env_prefix="EMOJIKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = False
    LOG_DIR: str = "logs"
    LOG_ROTATION: str = "10 MB"
    LOG_RETENTION: str = "30 days"

    # Catalog
    ALIAS_POLICY: str = "last"

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Валидация уровня логирования"""
        if v.upper() not in VALID_LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL должен быть одним из: {', '.join(VALID_LOG_LEVELS)}")
        return v.upper()

    @field_validator("ALIAS_POLICY")
    @classmethod
    def validate_alias_policy(cls, v: str) -> str:
        """Валидация политики конфликтов алиасов"""
        policy = v.strip().lower()
        if policy not in ALIAS_POLICIES:
            raise ValueError(f"ALIAS_POLICY должен быть одним из: {', '.join(ALIAS_POLICIES)}")
        return policy

    def get_log_dir(self) -> Path:
        """Получить директорию для логов"""
        return Path(self.LOG_DIR)


# Глобальный экземпляр конфигурации
_config: Optional[Config] = None


def get_config() -> Config:
    """Получить глобальный экземпляр конфигурации"""
    global _config
    if _config is None:
        try:
            _config = Config()
        except ValidationError as e:
            raise ConfigurationError("Неверная конфигурация emojikit", str(e)) from e

        logger.debug("Конфигурация загружена: alias_policy={}, log_level={}",
                     _config.ALIAS_POLICY, _config.LOG_LEVEL)
    return _config


def reload_config() -> Config:
    """Перезагрузить конфигурацию"""
    global _config
    _config = None
    return get_config()
