"""
Утилиты для работы с текстом на уровне кодовых точек Unicode
"""

from typing import Iterable, List, Sequence

# Первая кодовая точка вне BMP, в UTF-16 кодируется суррогатной парой
SUPPLEMENTARY_MIN = 0x10000

# Неразрывные пробелы и NEL считаются текстом
NON_BREAKING_SPACES = frozenset("\u00a0\u2007\u202f\u0085")


def is_whitespace(ch: str) -> bool:
    """Пробельный символ, неразрывные пробелы таковыми не считаются"""
    return ch.isspace() and ch not in NON_BREAKING_SPACES


def has_text(s: str) -> bool:
    """
    Проверить что строка содержит хотя бы один непробельный символ

    has_text("") = False
    has_text(" ") = False
    has_text(" 123 ") = True
    has_text("\\u00a0") = True
    """
    return any(not is_whitespace(ch) for ch in s)


def trim_whitespace(s: str) -> str:
    """Обрезать пробельные символы по краям, неразрывные пробелы сохраняются"""
    start, end = 0, len(s)
    while start < end and is_whitespace(s[start]):
        start += 1
    while end > start and is_whitespace(s[end - 1]):
        end -= 1
    return s[start:end]


def to_code_points(s: str) -> List[int]:
    """Разложить строку на кодовые точки"""
    return [ord(ch) for ch in s]


def from_code_points(code_points: Iterable[int]) -> str:
    """Собрать строку из кодовых точек"""
    return "".join(map(chr, code_points))


def is_supplementary(code_point: int) -> bool:
    """Требует ли кодовая точка суррогатной пары в UTF-16"""
    return code_point >= SUPPLEMENTARY_MIN


def utf16_length(code_points: Sequence[int], start: int = 0, end: int = None) -> int:
    """
    Посчитать длину отрезка кодовых точек в единицах UTF-16

    Args:
        code_points: Кодовые точки
        start: Начальный индекс (включительно)
        end: Конечный индекс (не включительно), по умолчанию до конца

    Returns:
        Количество кодовых единиц UTF-16
    """
    if end is None:
        end = len(code_points)
    return sum(2 if is_supplementary(cp) else 1 for cp in code_points[start:end])
