"""
Обратная конвертация: пегон → латиница

Замена букв по обратной таблице, снятие хараката, раскрытие шадды
и обратная замена цифр и пунктуации. Конвертация с потерями:
по букве нельзя восстановить, какой гласной она была (o и u пишутся
одинаково), а выпавший пепет без хараката не восстанавливается.
"""

from typing import Optional

from pegon.glyphs import (
    ALIF,
    ALIF_HAMZA_ABOVE,
    ALIF_HAMZA_BELOW,
    ARABIC_WORD_RE,
    PEPET,
    REVERSE_NUMERALS,
    REVERSE_PUNCTUATION,
    TATWEEL,
    WAW,
    YA,
    GlyphTable,
    build_table,
)
from pegon.gemination import expand_gemination, is_geminated
from pegon.harakah import Letter, LetterRole, classify, split_letters


# Гласные буквы: роль VOWEL
_VOWEL_LATIN = {
    YA: "i",
    WAW: "u",
}
# Те же буквы в роли согласной
_SEMIVOWEL_LATIN = {
    YA: "y",
    WAW: "w",
}


class ReverseConverter:
    """
    Пегон → латиница.

    Пример:
    ```python
    reverse = ReverseConverter()
    reverse.convert("كيتا")  # "kita"
    ```
    """

    def __init__(self, table: Optional[GlyphTable] = None, lexicon=None):
        """
        Args:
            table: Таблица глифов (по умолчанию пегон)
            lexicon: Словарь; слова пегона из него переводятся целиком
        """
        self.table = table or build_table()
        self.lexicon = lexicon
        self.consonants = self.table.reverse_consonants()
        self.consonant_letters = self.table.consonant_letters

    def convert(self, text: str) -> str:
        if not text:
            return ""

        text = text.replace(TATWEEL, "")
        parts = ARABIC_WORD_RE.split(text)
        out = []
        for index, part in enumerate(parts):
            if index % 2:
                out.append(self.convert_word(part))
            else:
                out.append("".join(self._convert_symbol(char) for char in part))
        return "".join(out)

    def convert_word(self, word: str) -> str:
        """Конвертация одного слова пегона"""
        if self.lexicon is not None:
            latin = self.lexicon.lookup_pegon(word)
            if latin is not None:
                return latin

        letters = classify(split_letters(word), self.consonant_letters)
        out = []
        for index, letter in enumerate(letters):
            following = letters[index + 1] if index + 1 < len(letters) else None
            out.append(self._letter_to_latin(letter, following))
        return "".join(out)

    def _letter_to_latin(self, letter: Letter, following: Optional[Letter]) -> str:
        char = letter.char

        if letter.role is LetterRole.CARRIER:
            latin = self._carrier_to_latin(char, following)
        elif letter.role is LetterRole.VOWEL:
            # Алиф с пепетом - начальный пепет
            latin = "" if char == ALIF and PEPET in letter.marks else _VOWEL_LATIN.get(char, "a")
        elif letter.role is LetterRole.CONSONANT:
            latin = _SEMIVOWEL_LATIN.get(char) or self.consonants.get(char, char)
            if is_geminated(letter.marks):
                latin = expand_gemination(latin)
        else:
            latin = self._convert_symbol(char)

        # Пепет восстанавливается, остальной харакат снимается
        if PEPET in letter.marks:
            latin += "e"
        return latin

    def _carrier_to_latin(self, char: str, following: Optional[Letter]) -> str:
        if char == ALIF_HAMZA_ABOVE:
            if following is not None and following.char == WAW and following.role is LetterRole.CARRIER:
                return "u"
            return "a"
        if char == ALIF_HAMZA_BELOW:
            return "i"
        # Хвост носителя (ي после إ, و после أ) уже учтён
        return ""

    def _convert_symbol(self, char: str) -> str:
        if char in REVERSE_NUMERALS:
            return REVERSE_NUMERALS[char]
        return REVERSE_PUNCTUATION.get(char, char)


def convert_to_latin(text: str, table: Optional[GlyphTable] = None) -> str:
    """Удобная функция для быстрой обратной конвертации"""
    return ReverseConverter(table).convert(text)
