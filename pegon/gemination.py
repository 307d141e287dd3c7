"""
Удвоенные согласные (ташдид)

Удвоенная латинская согласная (mm, kk, ll) пишется одной буквой со шаддой,
а не двумя буквами. Правила удвоения строятся из таблицы одиночных
согласных и стоят в списке приоритетов перед ними.
"""

from typing import Mapping, Tuple

from pegon.glyphs import SHADDA, GraphemeRule


def geminate(glyph: str) -> str:
    """Согласная + шадда; у составного глифа шадда встаёт на первую букву (كّس)"""
    return glyph[:1] + SHADDA + glyph[1:]


def gemination_rules(consonants: Mapping[str, str]) -> Tuple[GraphemeRule, ...]:
    """
    Правила удвоения для всех одиночных согласных.

    Args:
        consonants: Таблица одиночных согласных (латиница → глиф)

    Returns:
        Кортеж правил вида "mm" → "مّ"
    """
    return tuple(
        GraphemeRule(latin * 2, geminate(glyph))
        for latin, glyph in consonants.items()
    )


def is_geminated(marks: str) -> bool:
    return SHADDA in marks


def expand_gemination(latin: str) -> str:
    """
    Обратное преобразование: удваивается первая буква графемы.

    m → mm, sy → ssy, ng → nng
    """
    if not latin:
        return latin
    return latin[0] + latin
