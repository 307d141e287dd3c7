"""
Харакат: огласовка уже сконвертированного текста

Для каждой согласной смотрим на следующую букву:
- ا → фатха, ي → касра, و → дамма (буква остаётся);
- согласная → сукун;
- конец слова → ничего.

Роль букв ي и و зависит от контекста (согласная y/w или гласная i/u),
поэтому сначала буквы слова классифицируются слева направо.
Тот же разбор использует ReverseConverter.

По готовому тексту согласную w/y после согласной не отличить от гласной,
поэтому конвертер огласовывает по сегментам (annotate_segments).

Проход идемпотентен: уже огласованная согласная не трогается.
"""

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, List, Optional

from pegon.glyphs import (
    ALIF,
    ALIF_HAMZA_ABOVE,
    ALIF_HAMZA_BELOW,
    ALIF_MADDA,
    ALIF_MAQSURA,
    ARABIC_CONSONANTS,
    ARABIC_WORD_RE,
    DAMMA,
    FATHA,
    KASRA,
    MARKS,
    SUKUN,
    VOWEL_LETTERS,
    VOWEL_MARKS,
    WAW,
    YA,
)
from pegon.segmenter import Segment, SegmentKind


class LetterRole(Enum):
    CONSONANT = "consonant"
    VOWEL = "vowel"
    CARRIER = "carrier"
    OTHER = "other"


@dataclass
class Letter:
    """Буква с идущими за ней диакритиками"""
    char: str
    marks: str = ""
    role: LetterRole = LetterRole.OTHER


HARAKAT = {
    ALIF: FATHA,
    ALIF_MAQSURA: FATHA,
    YA: KASRA,
    WAW: DAMMA,
}

_LONG_A = frozenset({ALIF, ALIF_MADDA, ALIF_MAQSURA})
_CARRIER_TAILS = {ALIF_HAMZA_BELOW: YA, ALIF_HAMZA_ABOVE: WAW}


def split_letters(word: str) -> List[Letter]:
    """Группировка: буква + её диакритики"""
    letters: List[Letter] = []
    for char in word:
        if char in MARKS:
            if not letters:
                letters.append(Letter(""))
            letters[-1].marks += char
        else:
            letters.append(Letter(char))
    return letters


def classify(letters: List[Letter], consonants: Optional[FrozenSet[str]] = None) -> List[Letter]:
    """
    Определение роли каждой буквы слова (на месте).

    ي/و - гласные после согласной, согласные в начале слова и между
    гласными; после إ/أ они входят в носитель (إي = i, أو = u).
    """
    consonants = consonants if consonants is not None else ARABIC_CONSONANTS
    previous: Optional[Letter] = None

    for index, letter in enumerate(letters):
        char = letter.char
        if char in _LONG_A:
            letter.role = LetterRole.VOWEL
        elif char in _CARRIER_TAILS:
            letter.role = LetterRole.CARRIER
        elif char in (YA, WAW):
            letter.role = _semivowel_role(letters, index, previous)
        elif char in consonants:
            letter.role = LetterRole.CONSONANT
        else:
            letter.role = LetterRole.OTHER
        previous = letter

    return letters


def _semivowel_role(letters: List[Letter], index: int, previous: Optional[Letter]) -> LetterRole:
    letter = letters[index]

    if previous is not None and _CARRIER_TAILS.get(previous.char) == letter.char:
        if _agrees(previous, letter.char):
            return LetterRole.CARRIER
    if set(letter.marks) & VOWEL_MARKS:
        # Огласованная ي/و - всегда согласная
        return LetterRole.CONSONANT
    if previous is None or previous.role is LetterRole.OTHER:
        return LetterRole.CONSONANT
    if previous.role is LetterRole.CONSONANT:
        # Согласная уже огласована иначе (сукун, пепет): ي/و согласная
        if not _agrees(previous, letter.char):
            return LetterRole.CONSONANT
        return LetterRole.VOWEL

    # После гласной: согласная, только если за ней снова гласная буква
    following = letters[index + 1].char if index + 1 < len(letters) else ""
    if following in VOWEL_LETTERS:
        return LetterRole.CONSONANT
    return LetterRole.VOWEL


def _agrees(previous: Letter, char: str) -> bool:
    """Огласовка previous не противоречит гласной букве char: كِ + ي, بُ + و"""
    marks = set(previous.marks) & VOWEL_MARKS
    return not marks or marks == {HARAKAT[char]}


def _mark_for(following: Optional[Letter]) -> str:
    if following is None:
        return ""
    if following.role is LetterRole.VOWEL:
        return HARAKAT.get(following.char, "")
    if following.role is LetterRole.CONSONANT:
        return SUKUN
    return ""


def annotate_word(word: str, consonants: Optional[FrozenSet[str]] = None) -> str:
    """Огласовка одного слова пегона"""
    letters = classify(split_letters(word), consonants)
    out = []

    for index, letter in enumerate(letters):
        marks = letter.marks
        if letter.role is LetterRole.CONSONANT and not set(marks) & VOWEL_MARKS:
            following = letters[index + 1] if index + 1 < len(letters) else None
            # Шадда остаётся первой: مّ + َ
            marks += _mark_for(following)
        out.append(letter.char + marks)

    return "".join(out)


def annotate(text: str, consonants: Optional[FrozenSet[str]] = None) -> str:
    """
    Расстановка хараката во всём тексте.

    Args:
        text: Текст пегона (результат конвертации)
        consonants: Набор согласных букв (по умолчанию все известные)

    Returns:
        Текст с харакатом; латиница, цифры и пунктуация не меняются
    """
    if not text:
        return ""

    parts = ARABIC_WORD_RE.split(text)
    # Нечётные элементы - слова пегона
    return "".join(
        annotate_word(part, consonants) if index % 2 else part
        for index, part in enumerate(parts)
    )


def annotate_segments(segments: List[Segment], consonants: Optional[FrozenSet[str]] = None) -> str:
    """Огласовка слова по сегментам: согласная перед согласной w/y получает сукун явно"""
    out = []
    for index, segment in enumerate(segments):
        glyph = segment.glyph
        following = segments[index + 1] if index + 1 < len(segments) else None
        if (
            segment.kind is SegmentKind.CONSONANT
            and following is not None
            and following.kind is SegmentKind.CONSONANT
            and following.glyph[:1] in (YA, WAW)
        ):
            glyph += SUKUN
        out.append(glyph)
    return annotate("".join(out), consonants)
