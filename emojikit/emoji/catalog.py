"""
Каталог эмодзи с индексами по последовательности и по алиасу
Строится один раз и после этого не изменяется
"""

from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Tuple

# Логирование (ОБЯЗАТЕЛЬНО loguru)
from loguru import logger

# Локальные импорты
from emojikit.models import EmojiRecord
from emojikit.utils.config import ALIAS_POLICIES
from emojikit.utils.exceptions import InvalidConfigValueError

# Настройка логгера модуля
logger = logger.bind(module="emoji_catalog")


class EmojiCatalog:
    """
    Индекс каталога эмодзи
    Точный поиск по канонической последовательности и по алиасу
    """

    def __init__(self, records: Iterable[Optional[EmojiRecord]], alias_policy: str = "last"):
        """
        Инициализация каталога

        Args:
            records: Записи каталога в порядке загрузки
            alias_policy: Кто побеждает при повторе алиаса: "last" или "first"
        """
        if alias_policy not in ALIAS_POLICIES:
            raise InvalidConfigValueError("alias_policy", alias_policy, " или ".join(ALIAS_POLICIES))

        self._alias_policy = alias_policy

        sequences: Dict[str, EmojiRecord] = {}
        aliases: Dict[str, EmojiRecord] = {}

        for record in records:
            if record is None:
                logger.warning("Пропущена пустая запись каталога")
                continue

            if not record.emoji:
                logger.warning("Пропущена запись без последовательности: {!r}", record)
                continue

            if record.emoji in sequences:
                logger.debug("Повтор последовательности {}, остается последняя запись", record.emoji)
            sequences[record.emoji] = record

            for alias in record.aliases:
                previous = aliases.get(alias)
                if previous is not None and previous is not record:
                    logger.debug("Конфликт алиаса '{}': {} / {}, политика {}",
                                 alias, previous.emoji, record.emoji, alias_policy)
                    if alias_policy == "first":
                        continue
                aliases[alias] = record

        # Одна запись на последовательность, в порядке первого появления
        self._records: Tuple[EmojiRecord, ...] = tuple(sequences.values())
        self._sequences: Mapping[str, EmojiRecord] = MappingProxyType(sequences)
        self._aliases: Mapping[str, EmojiRecord] = MappingProxyType(aliases)

        logger.debug("Каталог построен: {} записей, {} алиасов", len(self._sequences), len(self._aliases))

    def lookup_by_sequence(self, sequence: str) -> Optional[EmojiRecord]:
        """Найти запись по точной последовательности"""
        return self._sequences.get(sequence)

    def lookup_by_alias(self, alias: str) -> Optional[EmojiRecord]:
        """Найти запись по точному алиасу"""
        return self._aliases.get(alias)

    @property
    def records(self) -> Tuple[EmojiRecord, ...]:
        """Записи каталога, по одной на последовательность, в порядке загрузки"""
        return self._records

    @property
    def sequences(self) -> Mapping[str, EmojiRecord]:
        """Индекс последовательность -> запись (только чтение)"""
        return self._sequences

    @property
    def aliases(self) -> Mapping[str, EmojiRecord]:
        """Индекс алиас -> запись (только чтение)"""
        return self._aliases

    @property
    def alias_policy(self) -> str:
        return self._alias_policy

    def __contains__(self, sequence: object) -> bool:
        return sequence in self._sequences

    def __len__(self) -> int:
        return len(self._sequences)
