"""
Замена алиасов вида :grinning: на эмодзи

Пример:
    Emoji :grinning: has a cat variant, :smiley_cat: Grinning Cat Face
    Emoji 😀 has a cat variant, 😺 Grinning Cat Face
"""

import re
from typing import List

# Логирование (ОБЯЗАТЕЛЬНО loguru)
from loguru import logger

# Локальные импорты
from emojikit.models import MatchedAliasToken
from .catalog import EmojiCatalog

# Настройка логгера модуля
logger = logger.bind(module="emoji_aliases")

ALIAS_PATTERN = re.compile(r":(\w+):")


class AliasReplacer:
    """Подстановка эмодзи вместо известных алиасов, неизвестные остаются как есть"""

    def __init__(self, catalog: EmojiCatalog):
        self.catalog = catalog

    def find_tokens(self, text: str) -> List[MatchedAliasToken]:
        """
        Найти в тексте алиасы, известные каталогу

        Args:
            text: Текст

        Returns:
            Список MatchedAliasToken слева направо
        """
        tokens = []
        for match in ALIAS_PATTERN.finditer(text):
            alias = match.group(1)
            record = self.catalog.lookup_by_alias(alias)
            if record is None:
                continue

            tokens.append(MatchedAliasToken(
                alias=alias,
                start=match.start(),
                end=match.end(),
                emoji=record.emoji
            ))
        return tokens

    def replace(self, text: str) -> str:
        """
        Заменить известные алиасы на эмодзи

        Args:
            text: Текст с алиасами

        Returns:
            Текст с эмодзи, или сам text если ни один алиас не найден
        """
        tokens = self.find_tokens(text)
        if not tokens:
            return text

        parts = []
        position = 0
        for token in tokens:
            parts.append(text[position:token.start])
            parts.append(token.emoji)
            position = token.end
        parts.append(text[position:])

        logger.debug("Заменено {} алиасов", len(tokens))
        return "".join(parts)
