"""
Модуль настройки логирования через loguru
Библиотека не добавляет обработчики при импорте, их подключает приложение
"""

import sys
from pathlib import Path
from typing import Optional, Union

# Логирование (ОБЯЗАТЕЛЬНО loguru)
from loguru import logger

# Настройка логгера модуля
logger = logger.bind(module="logging_config")

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[module]}</cyan> | "
    "<level>{message}</level>"
)

FALLBACK_CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}:{function}:{line}</cyan> | "
    "<level>{message}</level>"
)

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[module]} | {message}"
FALLBACK_FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"


def _has_module(record) -> bool:
    return record["extra"].get("module") is not None


def _has_no_module(record) -> bool:
    return record["extra"].get("module") is None


def setup_logging(
    log_level: str = "INFO",
    log_to_file: bool = False,
    log_dir: Union[str, Path] = "logs",
    log_rotation: str = "10 MB",
    log_retention: str = "30 days",
    sink=None
) -> None:
    """
    Настройка логирования через loguru

    Args:
        log_level: Уровень логирования
        log_to_file: Писать ли логи в файлы
        log_dir: Директория для файлов логов
        log_rotation: Размер файла для ротации
        log_retention: Время хранения логов
        sink: Куда писать консольные логи (по умолчанию sys.stdout)
    """
    console = sink if sink is not None else sys.stdout

    # Удаляем стандартный handler
    logger.remove()

    # Console handler с цветной подсветкой
    logger.add(
        console,
        level=log_level,
        format=CONSOLE_FORMAT,
        colorize=sink is None,
        filter=_has_module
    )

    # Fallback console handler для записей без модуля
    logger.add(
        console,
        level=log_level,
        format=FALLBACK_CONSOLE_FORMAT,
        colorize=sink is None,
        filter=_has_no_module
    )

    if log_to_file:
        logs_dir = Path(log_dir)
        logs_dir.mkdir(parents=True, exist_ok=True)

        # File handler для всех логов
        for file_format, record_filter in ((FILE_FORMAT, _has_module), (FALLBACK_FILE_FORMAT, _has_no_module)):
            logger.add(
                logs_dir / "emojikit.log",
                level="DEBUG",
                format=file_format,
                rotation=log_rotation,
                retention=log_retention,
                compression="zip",
                encoding="utf-8",
                enqueue=True,
                filter=record_filter
            )

        # Отдельный файл для ошибок
        for file_format, record_filter in ((FILE_FORMAT, _has_module), (FALLBACK_FILE_FORMAT, _has_no_module)):
            logger.add(
                logs_dir / "errors.log",
                level="ERROR",
                format=file_format + " | {exception}",
                rotation="5 MB",
                retention="60 days",
                compression="zip",
                encoding="utf-8",
                enqueue=True,
                filter=record_filter
            )

    logger.info("Логирование настроено успешно")
    logger.debug("Уровень логирования: {}", log_level)
    if log_to_file:
        logger.debug("Ротация файлов: {}, время хранения: {}", log_rotation, log_retention)


def setup_logging_from_config(sink=None) -> None:
    """Настройка логирования из конфигурации"""
    try:
        # Импортируем здесь чтобы избежать циклических импортов
        from emojikit.utils.config import get_config

        config = get_config()
        setup_logging(
            log_level=config.LOG_LEVEL,
            log_to_file=config.LOG_TO_FILE,
            log_dir=config.get_log_dir(),
            log_rotation=config.LOG_ROTATION,
            log_retention=config.LOG_RETENTION,
            sink=sink
        )

    except Exception as e:
        # Используем базовую настройку при ошибке загрузки конфигурации
        setup_logging(sink=sink)
        logger.error("Ошибка загрузки конфигурации для логирования: {}", str(e))


def get_module_logger(module_name: Optional[str]):
    """
    Получить логгер для конкретного модуля

    Args:
        module_name: Имя модуля

    Returns:
        Настроенный логгер с привязкой к модулю
    """
    return logger.bind(module=module_name)
