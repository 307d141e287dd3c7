"""
Разрешение гласных

Для каждой латинской гласной выбирается одно из написаний:
- в начале слова - носитель с хамзой (أ, إي, أو), так как слово
  не может начинаться с голой гласной буквы;
- в середине и в конце - гласная буква (ا, ي, و);
- пепет - выпадает, а с включённым харакатом становится знаком
  над предыдущей согласной. Полной буквой пепет не пишется никогда.

В режиме хараката носитель получает свою огласовку (أَ, إِي, أُو),
иначе начальное "a" перед "u" (aula) не отличить от носителя "u".
"""

from dataclasses import replace
from typing import List

from pegon.glyphs import DAMMA, FATHA, KASRA, PEPET, GlyphTable
from pegon.segmenter import Segment, SegmentKind


# Огласовка носителя в режиме хараката: أَ (a) отличается от أُو (u)
CARRIER_MARKS = {
    "a": FATHA,
    "i": KASRA,
    "u": DAMMA,
}


class VowelResolver:
    """Расстановка глифов для гласных и пепета"""

    def __init__(self, table: GlyphTable):
        self.table = table

    def resolve(self, segments: List[Segment], harakah: bool = False) -> List[Segment]:
        """
        Args:
            segments: Сегменты слова из Segmenter
            harakah: Включён ли режим хараката

        Returns:
            Новый список сегментов с заполненными глифами
        """
        resolved = []
        for segment in segments:
            if segment.kind is SegmentKind.VOWEL:
                resolved.append(replace(segment, glyph=self._vowel_glyph(segment, harakah)))
            elif segment.kind is SegmentKind.SCHWA:
                resolved.append(replace(segment, glyph=self._schwa_glyph(segment, harakah)))
            else:
                resolved.append(segment)
        return resolved

    def _vowel_glyph(self, segment: Segment, harakah: bool) -> str:
        vowel = segment.latin
        if segment.initial:
            glyph = self.table.carriers.get(vowel, self.table.carriers["a"])
            if harakah and vowel in CARRIER_MARKS:
                glyph = glyph[:1] + CARRIER_MARKS[vowel] + glyph[1:]
            # Начальный пепет: алиф-носитель (+ знак пепета)
            elif harakah and vowel in ("e", "ê"):
                glyph += PEPET
            return glyph
        return self.table.vowels.get(vowel, vowel)

    def _schwa_glyph(self, segment: Segment, harakah: bool) -> str:
        if harakah and segment.after_consonant:
            return PEPET
        return ""


def render(segments: List[Segment]) -> str:
    return "".join(segment.glyph for segment in segments)
