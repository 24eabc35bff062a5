"""
Экстрактор эмодзи из произвольного текста
Находит непересекающиеся эмодзи, в том числе с оттенками кожи и ZWJ-последовательности
"""

from typing import Iterator, List

# Логирование (ОБЯЗАТЕЛЬНО loguru)
from loguru import logger

# Локальные импорты
from emojikit.models import ExtractedEmoji
from emojikit.utils.text import from_code_points, to_code_points, utf16_length
from .catalog import EmojiCatalog
from .tone import strip_skin_tones
from .trie import SequenceTrie

# Настройка логгера модуля
logger = logger.bind(module="emoji_extractor")


class EmojiExtractor:
    """
    Экстрактор эмодзи
    Жадно продлевает совпадение по дереву и проверяет его по каталогу
    """

    def __init__(self, catalog: EmojiCatalog, trie: SequenceTrie):
        """
        Инициализация экстрактора

        Args:
            catalog: Каталог для проверки кандидатов
            trie: Дерево последовательностей того же каталога
        """
        self.catalog = catalog
        self.trie = trie

    def iter_extract(self, text: str) -> Iterator[ExtractedEmoji]:
        """
        Найти эмодзи в тексте за один проход

        Args:
            text: Текст

        Yields:
            ExtractedEmoji в порядке появления
        """
        code_points = to_code_points(text)
        start = 0
        # Смещение start в единицах UTF-16
        offset = 0

        while start < len(code_points):
            end = self.trie.try_match(code_points, start)

            if end is None:
                offset += utf16_length(code_points, start, start + 1)
                start += 1
                continue

            end += 1
            origin = from_code_points(code_points[start:end])
            record = self.catalog.lookup_by_sequence(strip_skin_tones(origin))

            if record is None:
                # Повтор начинается со следующей кодовой точки, а не с более короткого префикса
                logger.debug("Кандидат {!r} не найден в каталоге", origin)
                offset += utf16_length(code_points, start, start + 1)
                start += 1
                continue

            length = utf16_length(code_points, start, end)
            yield ExtractedEmoji(
                emoji=origin,
                start=offset,
                end=offset + length,
                detail=record,
                char_start=start,
                char_end=end
            )
            offset += length
            start = end

    def extract(self, text: str) -> List[ExtractedEmoji]:
        """
        Извлечь все эмодзи из текста

        Args:
            text: Текст

        Returns:
            Список ExtractedEmoji в порядке появления
        """
        extracted = list(self.iter_extract(text))
        if extracted:
            logger.debug("Извлечено {} эмодзи", len(extracted))
        return extracted
