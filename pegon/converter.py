"""
Конвертер: публичный API движка

Латиница → пегон:
    текст → NFC + нижний регистр → словарь (целое слово) → Segmenter
    → VowelResolver → харакат (опционально) → строка

Пегон → латиница: ReverseConverter.

Таблица и словарь передаются при создании и дальше только читаются,
поэтому один PegonConverter можно использовать из нескольких потоков.
"""

import logging
import re
import unicodedata
from enum import Enum
from typing import Optional, Union

from pegon.glyphs import ARABIC_SCRIPT_RE, GlyphTable, build_table
from pegon.harakah import annotate_segments
from pegon.lexicon import Lexicon
from pegon.reverse import ReverseConverter
from pegon.segmenter import Segmenter
from pegon.vowels import VowelResolver, render


logger = logging.getLogger(__name__)


# Латинское слово: буквы, апостроф допускается только внутри (jum'at)
LATIN_WORD_RE = re.compile("([^\\W\\d_]+(?:['\u2019`][^\\W\\d_]+)*)")

# Пробелы и табы (переводы строк сохраняются)
HORIZONTAL_SPACE_RE = re.compile(r"[ \t]+")


class Direction(str, Enum):
    """Направление конвертации"""
    LATIN_TO_PEGON = "latin-to-pegon"
    PEGON_TO_LATIN = "pegon-to-latin"


class ConversionError(Exception):
    """Внутренняя ошибка конвертации"""


def detect_direction(text: Optional[str]) -> Direction:
    """Пегон → латиница, если в тексте есть хоть один арабский символ"""
    if text and ARABIC_SCRIPT_RE.search(text):
        return Direction.PEGON_TO_LATIN
    return Direction.LATIN_TO_PEGON


class PegonConverter:
    """
    Транслитератор латиница ↔ пегон.

    Пример использования:
    ```python
    converter = PegonConverter(lexicon=Lexicon.bundled())
    converter.to_pegon("apa kabar?")          # "أڤا كابار؟"
    converter.to_pegon("kita", harakah=True)  # "كِيتَا"
    converter.to_latin("كيتا")                # "kita"
    ```
    """

    def __init__(
        self,
        table: Optional[GlyphTable] = None,
        lexicon: Optional[Lexicon] = None,
        harakah: bool = False,
        collapse_whitespace: bool = True,
    ):
        """
        Args:
            table: Таблица глифов (по умолчанию пегон)
            lexicon: Словарь целых слов (по умолчанию пустой)
            harakah: Харакат, если вызывающий не указал явно
            collapse_whitespace: Схлопывать пробелы и табы
        """
        self.table = table or build_table()
        self.table.validate()
        self.lexicon = lexicon if lexicon is not None else Lexicon()
        self.harakah = harakah
        self.collapse_whitespace = collapse_whitespace

        self.segmenter = Segmenter(self.table)
        self.resolver = VowelResolver(self.table)
        self.reverse = ReverseConverter(self.table, self.lexicon)
        self._consonants = self.table.consonant_letters

    @classmethod
    def from_config(cls, config) -> "PegonConverter":
        """
        Создание из EngineConfig.

        Args:
            config: EngineConfig

        Returns:
            PegonConverter
        """
        table = build_table(config.variant)

        if not config.use_lexicon:
            lexicon = Lexicon()
        elif config.lexicon_source:
            lexicon = Lexicon.from_source(config.lexicon_source)
        else:
            lexicon = Lexicon.bundled()

        return cls(
            table=table,
            lexicon=lexicon,
            harakah=config.harakah,
            collapse_whitespace=config.collapse_whitespace,
        )

    def convert(
        self,
        text: Optional[str],
        direction: Union[Direction, str] = Direction.LATIN_TO_PEGON,
        harakah: Optional[bool] = None,
    ) -> str:
        """
        Конвертация текста.

        Args:
            text: Исходный текст
            direction: Направление (Direction или его строковое значение)
            harakah: Расставлять харакат (None - значение по умолчанию)

        Returns:
            Сконвертированный текст; для пустого ввода пустая строка

        Raises:
            ValueError: Неизвестное направление
            ConversionError: Внутренняя ошибка конвертации
        """
        direction = Direction(direction)
        if not text:
            return ""
        if harakah is None:
            harakah = self.harakah

        try:
            text = unicodedata.normalize("NFC", text)
            if self.collapse_whitespace:
                text = HORIZONTAL_SPACE_RE.sub(" ", text)

            if direction is Direction.PEGON_TO_LATIN:
                return self.reverse.convert(text)
            return self._convert_latin(text.lower(), harakah)
        except Exception as e:
            logger.exception("Ошибка конвертации (%s)", direction.value)
            raise ConversionError(f"Conversion failed: {e}") from e

    def to_pegon(self, text: Optional[str], harakah: Optional[bool] = None) -> str:
        return self.convert(text, Direction.LATIN_TO_PEGON, harakah)

    def to_latin(self, text: Optional[str]) -> str:
        return self.convert(text, Direction.PEGON_TO_LATIN)

    def convert_word(self, word: str, harakah: bool = False) -> str:
        """
        Конвертация одного латинского слова (в нижнем регистре).

        Словарь имеет приоритет: найденное слово возвращается как есть,
        без правил и без хараката.
        """
        spelling = self.lexicon.lookup_word(word)
        if spelling is not None:
            return spelling

        segments = self.resolver.resolve(self.segmenter.segment(word), harakah)
        if harakah:
            return annotate_segments(segments, self._consonants)
        return render(segments)

    def _convert_latin(self, text: str, harakah: bool) -> str:
        parts = LATIN_WORD_RE.split(text)
        out = []
        for index, part in enumerate(parts):
            if index % 2:
                out.append(self.convert_word(part, harakah))
            else:
                out.append("".join(self.table.convert_symbol(char) for char in part))
        return "".join(out)

    def summary(self) -> str:
        lines = ["PegonConverter"]
        lines.append(f"  Table:     {self.table.name}")
        lines.append(f"  Lexicon:   {len(self.lexicon):,} words")
        lines.append(f"  Harakah:   {'on' if self.harakah else 'off'}")
        lines.append(f"  Rules:     {len(self.segmenter.rules)}")
        return "\n".join(lines)


_default_converter: Optional[PegonConverter] = None


def get_default_converter() -> PegonConverter:
    """Конвертер по умолчанию: пегон + словарь из пакета (создаётся один раз)"""
    global _default_converter
    if _default_converter is None:
        _default_converter = PegonConverter(lexicon=Lexicon.bundled())
    return _default_converter


def convert(
    text: Optional[str],
    direction: Union[Direction, str] = Direction.LATIN_TO_PEGON,
    harakah: bool = False,
) -> str:
    """Удобная функция для быстрой конвертации"""
    return get_default_converter().convert(text, direction, harakah)
