"""
Сегментатор: разбиение латинского слова на графемы

Идёт по слову слева направо и на каждой позиции берёт первое
подходящее правило из списка приоритетов таблицы (триграфы, диграфы,
удвоения, одиночные согласные). Поскольку длинные паттерны стоят
раньше коротких, короткое правило никогда не перехватывает длинное.

Гласные здесь только помечаются; как их писать, решает VowelResolver.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from pegon.glyphs import (
    GLOTTAL_STOPS,
    HAMZA,
    LATIN_VOWELS,
    GlyphTable,
    GraphemeRule,
)


class SegmentKind(Enum):
    CONSONANT = "consonant"
    VOWEL = "vowel"
    # Пепет, который ещё не разрешён: либо выпадает, либо становится знаком
    SCHWA = "schwa"
    OTHER = "other"


@dataclass
class Segment:
    """Одна графема слова и её глиф"""
    kind: SegmentKind
    latin: str
    glyph: str = ""
    initial: bool = False           # в начале слова
    after_consonant: bool = False   # сразу после согласной


@dataclass
class ConversionState:
    """Состояние одного прохода по слову"""
    offset: int = 0
    segments: List[Segment] = field(default_factory=list)
    last_is_consonant: bool = False

    def emit(self, segment: Segment) -> None:
        segment.initial = not self.segments or self.segments[-1].kind is SegmentKind.OTHER
        segment.after_consonant = self.last_is_consonant
        self.segments.append(segment)
        self.offset += len(segment.latin)
        self.last_is_consonant = segment.kind is SegmentKind.CONSONANT


class Segmenter:
    """
    Longest-match-first сегментатор.

    Пример:
    ```python
    segmenter = Segmenter(build_table())
    segments = segmenter.segment("tinggi")
    # t, i, ngg, i
    ```
    """

    def __init__(self, table: GlyphTable):
        self.table = table
        self.rules = table.rules()

        # Индекс по первой букве, порядок приоритетов сохраняется
        self._by_first: Dict[str, List[GraphemeRule]] = {}
        for rule in self.rules:
            self._by_first.setdefault(rule.pattern[0], []).append(rule)

    def match(self, word: str, offset: int) -> Optional[GraphemeRule]:
        """Первое правило из списка приоритетов, подходящее на позиции offset"""
        for rule in self._by_first.get(word[offset], ()):
            if rule.matches(word, offset):
                return rule
        return None

    def segment(self, word: str) -> List[Segment]:
        """
        Разбиение слова на сегменты.

        Args:
            word: Слово в нижнем регистре

        Returns:
            Список сегментов; неизвестные символы проходят как есть
        """
        state = ConversionState()

        while state.offset < len(word):
            rule = self.match(word, state.offset)
            if rule is not None:
                state.emit(Segment(SegmentKind.CONSONANT, rule.pattern, rule.glyph))
                continue

            char = word[state.offset]

            if char in LATIN_VOWELS:
                state.emit(Segment(self._vowel_kind(word, state), char))
            elif char in GLOTTAL_STOPS and state.segments and state.offset + 1 < len(word):
                # Апостроф внутри слова ведёт себя как согласная (хамза)
                state.emit(Segment(SegmentKind.CONSONANT, char, HAMZA))
            else:
                state.emit(Segment(SegmentKind.OTHER, char, self.table.convert_symbol(char)))

        return state.segments

    def _vowel_kind(self, word: str, state: ConversionState) -> SegmentKind:
        """e перед согласной в середине слова - пепет"""
        char = word[state.offset]
        initial = not state.segments or state.segments[-1].kind is SegmentKind.OTHER
        if char not in ("e", "ê") or initial:
            return SegmentKind.VOWEL

        if char == "ê":
            return SegmentKind.SCHWA
        if not state.last_is_consonant:
            return SegmentKind.VOWEL

        following = state.offset + 1
        if following < len(word) and word[following].isalpha() and word[following] not in LATIN_VOWELS:
            return SegmentKind.SCHWA
        # Конечное e и e перед гласной - таленг
        return SegmentKind.VOWEL
