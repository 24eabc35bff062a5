"""
Модуль обработки эмодзи
Поиск, извлечение, оттенки кожи и замена алиасов поверх каталога в памяти
"""

from .catalog import EmojiCatalog
from .trie import SequenceTrie
from .extractor import EmojiExtractor
from .tone import SkinToneEngine, strip_skin_tones, ZWJ, VARIATION_16
from .aliases import AliasReplacer, ALIAS_PATTERN
from .processor import EmojiProcessor, get_emoji_processor, reset_emoji_processor

__all__ = [
    "EmojiCatalog",
    "SequenceTrie",
    "EmojiExtractor",
    "SkinToneEngine",
    "strip_skin_tones",
    "ZWJ",
    "VARIATION_16",
    "AliasReplacer",
    "ALIAS_PATTERN",
    "EmojiProcessor",
    "get_emoji_processor",
    "reset_emoji_processor"
]
