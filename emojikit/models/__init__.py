"""
Модели данных: записи каталога, оттенки кожи, результаты извлечения
"""

from .skin_tone import SkinTone, SKIN_TONE_MIN, SKIN_TONE_MAX
from .emoji import EmojiRecord, create_emoji_record
from .extracted import ExtractedEmoji, MatchedAliasToken

__all__ = [
    "SkinTone",
    "SKIN_TONE_MIN",
    "SKIN_TONE_MAX",
    "EmojiRecord",
    "create_emoji_record",
    "ExtractedEmoji",
    "MatchedAliasToken"
]
