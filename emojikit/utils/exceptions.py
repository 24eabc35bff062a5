"""
Модуль кастомных исключений библиотеки
Содержит специализированные исключения для разных модулей
"""

from typing import Optional, Any

# Логирование (ОБЯЗАТЕЛЬНО loguru)
from loguru import logger

# Настройка логгера модуля
logger = logger.bind(module="exceptions")


class EmojiKitError(Exception):
    """Базовое исключение для всех ошибок библиотеки"""

    def __init__(self, message: str, details: Optional[str] = None):
        self.message = message
        self.details = details
        super().__init__(self.message)

        # Логируем все исключения
        if details:
            logger.error("EmojiKitError: {} | Детали: {}", message, details)
        else:
            logger.error("EmojiKitError: {}", message)


# ==============================================
# ИСКЛЮЧЕНИЯ АРГУМЕНТОВ
# ==============================================

class InvalidArgumentError(EmojiKitError):
    """Обязательный аргумент не передан или имеет неверный тип"""

    def __init__(self, argument: str, details: Optional[str] = None):
        message = f"Неверный аргумент '{argument}'"
        super().__init__(message, details)
        self.argument = argument


# ==============================================
# ИСКЛЮЧЕНИЯ КОНФИГУРАЦИИ
# ==============================================

class ConfigurationError(EmojiKitError):
    """Ошибки конфигурации библиотеки"""
    pass


class InvalidConfigValueError(ConfigurationError):
    """Неверное значение в конфигурации"""

    def __init__(self, parameter: str, value: Any, expected: str):
        message = f"Неверное значение параметра '{parameter}': {value}. Ожидается: {expected}"
        super().__init__(message)
        self.parameter = parameter
        self.value = value
        self.expected = expected


def require_argument(value: Any, argument: str) -> Any:
    """
    Проверить что обязательный аргумент передан

    Args:
        value: Значение аргумента
        argument: Имя аргумента для сообщения об ошибке

    Returns:
        То же значение

    Raises:
        InvalidArgumentError: Если значение None
    """
    if value is None:
        raise InvalidArgumentError(argument)
    return value
