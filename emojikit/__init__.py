"""
emojikit - распознавание, извлечение и преобразование эмодзи в тексте
"""

from emojikit.models import (
    EmojiRecord,
    ExtractedEmoji,
    MatchedAliasToken,
    SkinTone,
    create_emoji_record,
)
from emojikit.emoji import EmojiProcessor, get_emoji_processor, reset_emoji_processor
from emojikit.utils.exceptions import (
    EmojiKitError,
    InvalidArgumentError,
    ConfigurationError,
    InvalidConfigValueError,
)

__version__ = "1.0.0"

__all__ = [
    "EmojiRecord",
    "ExtractedEmoji",
    "MatchedAliasToken",
    "SkinTone",
    "create_emoji_record",
    "EmojiProcessor",
    "get_emoji_processor",
    "reset_emoji_processor",
    "EmojiKitError",
    "InvalidArgumentError",
    "ConfigurationError",
    "InvalidConfigValueError"
]
