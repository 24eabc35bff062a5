"""
Процессор эмодзи: проверка, поиск, извлечение, оттенки кожи и алиасы
Общая точка входа поверх каталога, дерева и движков
"""

import threading
from typing import Iterable, List, Optional, Tuple, Union

# Логирование (ОБЯЗАТЕЛЬНО loguru)
from loguru import logger

# Локальные импорты
from emojikit.models import EmojiRecord, ExtractedEmoji, SkinTone
from emojikit.utils.config import get_config
from emojikit.utils.exceptions import InvalidArgumentError, require_argument
from emojikit.utils.text import has_text, trim_whitespace
from .aliases import AliasReplacer
from .catalog import EmojiCatalog
from .extractor import EmojiExtractor
from .tone import SkinToneEngine, strip_skin_tones
from .trie import SequenceTrie

# Настройка логгера модуля
logger = logger.bind(module="emoji_processor")


class EmojiProcessor:
    """
    Процессор эмодзи

    Все индексы строятся в конструкторе и дальше только читаются,
    поэтому один экземпляр можно использовать из любого числа потоков
    """

    def __init__(self, records: Iterable[Optional[EmojiRecord]], alias_policy: Optional[str] = None):
        """
        Инициализация процессора

        Args:
            records: Записи каталога
            alias_policy: Политика повторяющихся алиасов, по умолчанию из конфигурации
        """
        require_argument(records, "records")

        if alias_policy is None:
            alias_policy = get_config().ALIAS_POLICY

        records = list(records)
        self.catalog = EmojiCatalog(records, alias_policy=alias_policy)
        self.trie = SequenceTrie(self.catalog.records)
        self.extractor = EmojiExtractor(self.catalog, self.trie)
        self.tone_engine = SkinToneEngine(self.catalog)
        self.alias_replacer = AliasReplacer(self.catalog)

        logger.info("Процессор эмодзи готов: {} записей", len(self.catalog))

    def is_emoji(self, text: str) -> bool:
        """
        Проверить является ли строка эмодзи, в том числе с оттенками кожи

        Args:
            text: Проверяемая строка

        Returns:
            True если строка без оттенков есть в каталоге
        """
        require_argument(text, "text")
        if not has_text(text):
            return False

        removed = strip_skin_tones(text)
        return bool(removed) and removed in self.catalog

    def find_by_sequence(self, text: str) -> Optional[EmojiRecord]:
        """
        Найти запись по последовательности, оттенки кожи игнорируются

        Args:
            text: Эмодзи

        Returns:
            Запись каталога или None
        """
        require_argument(text, "text")
        if not has_text(text):
            return None

        record = self.catalog.lookup_by_sequence(text)
        if record is not None:
            return record

        removed = strip_skin_tones(text)
        if not has_text(removed):
            return None
        return self.catalog.lookup_by_sequence(removed)

    find_by_unicode = find_by_sequence

    def find_by_alias(self, alias: str) -> Optional[EmojiRecord]:
        """
        Найти запись по алиасу

        Args:
            alias: Алиас без двоеточий, пробелы по краям игнорируются

        Returns:
            Запись каталога или None
        """
        require_argument(alias, "alias")
        if not has_text(alias):
            return None
        return self.catalog.lookup_by_alias(trim_whitespace(alias))

    def extract(self, text: str) -> List[ExtractedEmoji]:
        """
        Извлечь все эмодзи из текста

        Args:
            text: Текст с эмодзи

        Returns:
            Список ExtractedEmoji, смещения start/end в единицах UTF-16
        """
        require_argument(text, "text")
        if not has_text(text):
            return []
        return self.extractor.extract(text)

    def apply_skin_tone(self, emoji: str, *tones: Union[SkinTone, int, str]) -> str:
        """
        Применить оттенки кожи к эмодзи

        Без оттенков эмодзи возвращается как есть. Если оттенков меньше,
        чем окрашиваемых компонентов, остальные получают последний оттенок

        Args:
            emoji: Эмодзи
            *tones: Оттенки, можно передать и одним списком

        Returns:
            Эмодзи с оттенками
        """
        require_argument(emoji, "emoji")
        if len(tones) == 1 and isinstance(tones[0], (list, tuple)):
            tones = tuple(tones[0])
        return self.tone_engine.apply(emoji, tones)

    def remove_skin_tone(self, emoji: str) -> str:
        """
        Удалить оттенки кожи из эмодзи

        Args:
            emoji: Эмодзи

        Returns:
            Эмодзи без оттенков, пустая строка для одиночного модификатора
        """
        require_argument(emoji, "emoji")
        if not has_text(emoji):
            return ""
        return self.tone_engine.remove(emoji)

    def replace_aliases(self, text: str) -> str:
        """
        Заменить алиасы :alias: на эмодзи

        Args:
            text: Текст с алиасами

        Returns:
            Текст с эмодзи, неизвестные алиасы остаются как есть
        """
        require_argument(text, "text")
        if not has_text(text):
            return ""
        return self.alias_replacer.replace(text)

    replace_by_alias = replace_aliases

    @property
    def records(self) -> Tuple[EmojiRecord, ...]:
        """Записи каталога"""
        return self.catalog.records

    def __len__(self) -> int:
        return len(self.catalog)


# Глобальный экземпляр процессора
_emoji_processor: Optional[EmojiProcessor] = None
_processor_lock = threading.Lock()


def get_emoji_processor(records: Optional[Iterable[EmojiRecord]] = None) -> EmojiProcessor:
    """
    Получить общий экземпляр EmojiProcessor

    Первый вызов должен передать записи каталога, последующие получают
    уже построенный экземпляр

    Args:
        records: Записи каталога для первого построения

    Returns:
        Общий процессор
    """
    global _emoji_processor
    if _emoji_processor is not None:
        return _emoji_processor

    with _processor_lock:
        if _emoji_processor is None:
            if records is None:
                raise InvalidArgumentError("records", "общий процессор еще не создан")
            _emoji_processor = EmojiProcessor(records)
    return _emoji_processor


def reset_emoji_processor() -> None:
    """Сбросить общий экземпляр процессора"""
    global _emoji_processor
    with _processor_lock:
        _emoji_processor = None
