"""
Модель записи каталога эмодзи
Каноническая последовательность без оттенков кожи, алиасы и теги
"""

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable, Tuple

# Логирование (ОБЯЗАТЕЛЬНО loguru)
from loguru import logger

# Локальные импорты
from .skin_tone import SkinTone

# Настройка логгера модуля
logger = logger.bind(module="models_emoji")


@dataclass(frozen=True)
class EmojiRecord:
    """
    Запись каталога эмодзи

    Запись неизменяема, равенство и хеш определяются только последовательностью

    Attributes:
        emoji: Каноническая последовательность без модификаторов оттенка
        aliases: Алиасы (например: grinning, smiley_cat)
        tags: Теги
        skinnable: Поддерживает ли эмодзи оттенки кожи
    """

    emoji: str
    aliases: FrozenSet[str] = field(default_factory=frozenset, compare=False)
    tags: FrozenSet[str] = field(default_factory=frozenset, compare=False)
    skinnable: bool = field(default=False, compare=False)

    @property
    def code_points(self) -> Tuple[int, ...]:
        """Кодовые точки последовательности"""
        return tuple(ord(ch) for ch in self.emoji)

    def validate(self) -> bool:
        """Валидация записи"""

        # emoji не должен быть пустым
        if not self.emoji:
            logger.error("emoji не может быть пустым")
            return False

        # Ключи каталога не содержат оттенков, такая запись никогда не найдется
        if any(SkinTone.is_skin_tone(ord(ch)) for ch in self.emoji):
            logger.warning("Последовательность {} содержит модификатор оттенка", self.emoji)
            return False

        return True

    def to_dict(self) -> Dict[str, Any]:
        """Преобразование записи в словарь"""
        return {
            "emoji": self.emoji,
            "aliases": sorted(self.aliases),
            "tags": sorted(self.tags),
            "skinnable": self.skinnable,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EmojiRecord":
        """Создание записи из словаря формата to_dict"""
        return create_emoji_record(
            emoji=data["emoji"],
            aliases=data.get("aliases", ()),
            tags=data.get("tags", ()),
            skinnable=data.get("skinnable", False)
        )

    def __repr__(self) -> str:
        return (
            f"EmojiRecord(emoji='{self.emoji}', skinnable={self.skinnable}, "
            f"aliases={sorted(self.aliases)}, tags={sorted(self.tags)})"
        )


def create_emoji_record(
    emoji: str,
    aliases: Iterable[str] = (),
    tags: Iterable[str] = (),
    skinnable: bool = False
) -> EmojiRecord:
    """
    Фабричная функция для создания записи каталога

    Args:
        emoji: Каноническая последовательность
        aliases: Алиасы
        tags: Теги
        skinnable: Поддерживает ли эмодзи оттенки кожи

    Returns:
        Созданная запись
    """
    # Одиночную строку считаем одним алиасом, а не набором символов
    if isinstance(aliases, str):
        aliases = (aliases,)
    if isinstance(tags, str):
        tags = (tags,)

    record = EmojiRecord(
        emoji=emoji,
        aliases=frozenset(aliases),
        tags=frozenset(tags),
        skinnable=bool(skinnable)
    )

    if not record.validate():
        logger.error("Невалидная запись каталога: {!r}", emoji)

    return record
