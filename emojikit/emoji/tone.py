"""
Применение и удаление оттенков кожи с учетом ZWJ-последовательностей
"""

from typing import List, Sequence, Union

# Логирование (ОБЯЗАТЕЛЬНО loguru)
from loguru import logger

# Локальные импорты
from emojikit.models import SkinTone
from emojikit.utils.exceptions import InvalidArgumentError
from .catalog import EmojiCatalog

# Настройка логгера модуля
logger = logger.bind(module="emoji_tone")

# https://emojipedia.org/emoji-zwj-sequence
ZWJ = "\u200d"

# https://emojipedia.org/variation-selector-16
VARIATION_16 = "\ufe0f"


def to_skin_tone(value: Union[SkinTone, int, str]) -> SkinTone:
    """
    Привести значение к SkinTone

    Args:
        value: SkinTone, кодовая точка или строка модификатора

    Returns:
        Оттенок кожи

    Raises:
        InvalidArgumentError: Если значение не является оттенком
    """
    if isinstance(value, SkinTone):
        return value
    if isinstance(value, (int, str)) and not isinstance(value, bool) and SkinTone.is_skin_tone(value):
        return SkinTone(value if isinstance(value, int) else ord(value))
    raise InvalidArgumentError("tones", f"не является оттенком кожи: {value!r}")


def strip_skin_tones(emoji: str) -> str:
    """Удалить все модификаторы оттенка, сохранив ZWJ и селекторы"""
    return "".join(ch for ch in emoji if not SkinTone.is_skin_tone(ord(ch)))


class SkinToneEngine:
    """
    Движок оттенков кожи
    Каждый компонент ZWJ-последовательности окрашивается отдельно
    """

    def __init__(self, catalog: EmojiCatalog):
        """
        Инициализация движка

        Args:
            catalog: Каталог для проверки поддержки оттенков
        """
        self.catalog = catalog

    def apply(self, emoji: str, tones: Sequence[Union[SkinTone, int, str]]) -> str:
        """
        Применить оттенки кожи к эмодзи

        Если оттенков меньше, чем окрашиваемых компонентов,
        оставшиеся компоненты получают последний оттенок

        Args:
            emoji: Эмодзи, возможно уже с оттенками
            tones: Оттенки по порядку компонентов

        Returns:
            Эмодзи с примененными оттенками
        """
        if not tones:
            return emoji

        tones = [to_skin_tone(tone) for tone in tones]
        segments = strip_skin_tones(emoji).split(ZWJ)
        result: List[str] = []

        index = 0
        for segment in segments:
            record = self.catalog.lookup_by_sequence(segment)
            if record is None or not record.skinnable:
                result.append(segment)
                continue

            tone = tones[min(index, len(tones) - 1)]
            result.append(self._tint(segment, tone))
            index += 1

        logger.debug("Окрашено {} из {} компонентов", index, len(segments))
        return ZWJ.join(result)

    def remove(self, emoji: str) -> str:
        """
        Удалить оттенки кожи из эмодзи

        Если передан сам модификатор, возвращается пустая строка

        Args:
            emoji: Эмодзи

        Returns:
            Эмодзи без оттенков
        """
        if SkinTone.is_skin_tone(emoji):
            return ""
        return strip_skin_tones(emoji)

    @staticmethod
    def _tint(segment: str, tone: SkinTone) -> str:
        # Модификатор оттенка заменяет завершающий VS16
        if segment.endswith(VARIATION_16):
            segment = segment[:-1]
        return segment + tone.unicode
