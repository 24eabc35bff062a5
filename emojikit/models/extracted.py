"""
Результаты поиска эмодзи и алиасов в тексте
"""

from dataclasses import dataclass, field

from .emoji import EmojiRecord


@dataclass(frozen=True)
class ExtractedEmoji:
    """
    Эмодзи, извлеченный из текста

    Два извлечения равны, если совпадают их границы (start, end)

    Attributes:
        emoji: Найденный фрагмент текста как есть, вместе с оттенками
        start: Начало в единицах UTF-16
        end: Конец в единицах UTF-16 (не включительно)
        detail: Базовая запись каталога, без оттенков
        char_start: Начало в индексах str Python
        char_end: Конец в индексах str Python
    """
    emoji: str = field(compare=False)
    start: int
    end: int
    detail: EmojiRecord = field(compare=False)
    char_start: int = field(default=0, compare=False)
    char_end: int = field(default=0, compare=False)


@dataclass(frozen=True)
class MatchedAliasToken:
    """Алиас :token:, найденный в тексте и разрешенный в эмодзи"""
    alias: str    # Алиас без двоеточий
    start: int    # Позиция первого двоеточия
    end: int      # Позиция после второго двоеточия
    emoji: str    # Эмодзи для подстановки
