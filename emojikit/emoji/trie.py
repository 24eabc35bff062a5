"""
Префиксное дерево кодовых точек эмодзи
Определяет, насколько далеко можно продлить совпадение от заданной позиции
"""

from typing import Dict, Iterable, List, Optional, Sequence

# Логирование (ОБЯЗАТЕЛЬНО loguru)
from loguru import logger

# Локальные импорты
from emojikit.models import EmojiRecord, SkinTone

# Настройка логгера модуля
logger = logger.bind(module="emoji_trie")

ROOT = 0


class SequenceTrie:
    """
    Префиксное дерево по последовательностям каталога

    Узлы хранятся в списке, дети адресуются индексами, корень - узел 0.
    Дерево не хранит записи: окончательная проверка делается по каталогу
    """

    def __init__(self, records: Iterable[Optional[EmojiRecord]]):
        """
        Построение дерева

        Args:
            records: Записи каталога
        """
        self._children: List[Dict[int, int]] = [{}]
        self._terminal: List[bool] = [False]

        for record in records:
            if record is None or not record.emoji:
                continue
            self._insert(record.emoji)

        logger.debug("Дерево построено: {} узлов", len(self._children))

    def _insert(self, sequence: str) -> None:
        node = ROOT
        for ch in sequence:
            cp = ord(ch)
            child = self._children[node].get(cp)
            if child is None:
                child = len(self._children)
                self._children.append({})
                self._terminal.append(False)
                self._children[node][cp] = child
            node = child
        self._terminal[node] = True

    def try_match(self, code_points: Sequence[int], start: int) -> Optional[int]:
        """
        Попытаться сопоставить эмодзи начиная с позиции start

        Модификаторы оттенка пропускаются без спуска по дереву,
        но продлевают совпадение

        Args:
            code_points: Кодовые точки текста
            start: Начальный индекс

        Returns:
            Индекс последней кодовой точки совпадения (включительно) или None
        """
        end = None
        node = ROOT

        for i in range(start, len(code_points)):
            cp = code_points[i]

            if SkinTone.is_skin_tone(cp):
                end = i
                continue

            child = self._children[node].get(cp)
            if child is None:
                break

            node = child
            end = i

        return end

    def is_terminal(self, sequence: str) -> bool:
        """Заканчивается ли какая-либо последовательность каталога ровно здесь"""
        node = ROOT
        for ch in sequence:
            node = self._children[node].get(ord(ch))
            if node is None:
                return False
        return self._terminal[node]

    def __len__(self) -> int:
        """Количество узлов вместе с корнем"""
        return len(self._children)
