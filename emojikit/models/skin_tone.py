"""
Модель оттенков кожи эмодзи
Пять модификаторов Фитцпатрика U+1F3FB..U+1F3FF
"""

from enum import IntEnum
from typing import Optional, Union

SKIN_TONE_MIN = 0x1F3FB
SKIN_TONE_MAX = 0x1F3FF


class SkinTone(IntEnum):
    """
    Оттенок кожи эмодзи

    Значение элемента - кодовая точка модификатора,
    поэтому оттенки упорядочены от светлого к темному
    """

    LIGHT = 0x1F3FB
    MEDIUM_LIGHT = 0x1F3FC
    MEDIUM = 0x1F3FD
    MEDIUM_DARK = 0x1F3FE
    DARK = 0x1F3FF

    @property
    def code_point(self) -> int:
        """Кодовая точка модификатора"""
        return int(self.value)

    @property
    def unicode(self) -> str:
        """Модификатор в виде строки из одного символа"""
        return chr(self.value)

    @staticmethod
    def is_skin_tone(value: Union[int, str]) -> bool:
        """
        Проверить является ли значение модификатором оттенка кожи

        Строка считается модификатором только если состоит ровно из одной кодовой точки

        Args:
            value: Кодовая точка или строка

        Returns:
            True если это модификатор оттенка
        """
        if isinstance(value, str):
            if len(value) != 1:
                return False
            value = ord(value)
        return SKIN_TONE_MIN <= value <= SKIN_TONE_MAX

    @classmethod
    def from_unicode(cls, s: str) -> Optional["SkinTone"]:
        """Получить оттенок по строке модификатора"""
        if not cls.is_skin_tone(s):
            return None
        return cls(ord(s))
