"""
Таблицы глифов: латинские графемы → буквы пегона

Пегон - арабское письмо для яванского, сунданского, мадурского
и малайского/индонезийского языков. Помимо стандартных арабских букв
использует дополнительные:
- ڠ (nga) - ng
- ڽ (nya) - ny
- ڤ (pa)  - p, v
- چ (ca)  - c
- ݢ (ga)  - g (в джави вместо неё ڬ)

Таблица - это данные, а не лингвистическая истина: разные традиции пишут
одни и те же звуки по-разному, поэтому таблица собирается из варианта
и передаётся в конвертер снаружи.
"""

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, FrozenSet, Mapping, Optional, Tuple


# Диакритика (харакат)
FATHA = "\u064E"             # короткое a
DAMMA = "\u064F"             # короткое u
KASRA = "\u0650"             # короткое i
SHADDA = "\u0651"            # удвоение
SUKUN = "\u0652"             # отсутствие гласной
FATHATAN = "\u064B"
DAMMATAN = "\u064C"
KASRATAN = "\u064D"
PEPET = "\u065C"             # пепет (шва)
SUPERSCRIPT_ALEF = "\u0670"
TATWEEL = "\u0640"

# Гласные буквы и носители гласных
ALIF = "\u0627"              # ا
ALIF_HAMZA_ABOVE = "\u0623"  # أ
ALIF_HAMZA_BELOW = "\u0625"  # إ
ALIF_MADDA = "\u0622"        # آ
ALIF_MAQSURA = "\u0649"      # ى
WAW = "\u0648"               # و
YA = "\u064A"                # ي

# Согласные
HAMZA = "\u0621"             # ء
BA = "\u0628"                # ب
TA = "\u062A"                # ت
THA = "\u062B"               # ث
JIM = "\u062C"               # ج
HHA = "\u062D"               # ح
KHA = "\u062E"               # خ
DAL = "\u062F"               # د
THAL = "\u0630"              # ذ
RA = "\u0631"                # ر
ZAIN = "\u0632"              # ز
SIN = "\u0633"               # س
SHIN = "\u0634"              # ش
SAD = "\u0635"               # ص
DAD = "\u0636"               # ض
TAH = "\u0637"               # ط
ZAH = "\u0638"               # ظ
AIN = "\u0639"               # ع
GHAIN = "\u063A"             # غ
FA = "\u0641"                # ف
QAF = "\u0642"               # ق
KAF = "\u0643"               # ك
LAM = "\u0644"               # ل
MIM = "\u0645"               # م
NUN = "\u0646"               # ن
HA = "\u0647"                # ه
TA_MARBUTA = "\u0629"        # ة
HAMZA_WAW = "\u0624"         # ؤ
HAMZA_YA = "\u0626"          # ئ

# Буквы пегона и джави
CA = "\u0686"                # چ
NGA = "\u06A0"               # ڠ
PA = "\u06A4"                # ڤ
GA = "\u0762"                # ݢ
GAF_JAWI = "\u06AC"          # ڬ
NYA = "\u06BD"               # ڽ
KEHEH = "\u06A9"             # ک
GAF_PEGON = "\u06AE"         # ڮ
NYA_PEGON = "\u06D1"         # ۑ
DAL_PEGON = "\u068E"         # ڎ
TAH_PEGON = "\u069F"         # ڟ

SHORT_VOWEL_MARKS = frozenset({FATHA, KASRA, DAMMA})
TANWIN_MARKS = frozenset({FATHATAN, DAMMATAN, KASRATAN})
# Знаки, после которых согласная считается уже огласованной
VOWEL_MARKS = SHORT_VOWEL_MARKS | TANWIN_MARKS | frozenset({SUKUN, PEPET, SUPERSCRIPT_ALEF})
MARKS = VOWEL_MARKS | frozenset({SHADDA})

VOWEL_LETTERS = frozenset({ALIF, YA, WAW})
CARRIER_LETTERS = frozenset({ALIF_HAMZA_ABOVE, ALIF_HAMZA_BELOW})

# Все согласные буквы, которые встречаются в пегоне, джави и арабских заимствованиях
# (ي и و сюда не входят: их роль определяется контекстом)
ARABIC_CONSONANTS = frozenset({
    HAMZA, BA, TA, THA, JIM, HHA, KHA, DAL, THAL, RA, ZAIN, SIN, SHIN,
    SAD, DAD, TAH, ZAH, AIN, GHAIN, FA, QAF, KAF, LAM, MIM, NUN, HA,
    TA_MARBUTA, HAMZA_WAW, HAMZA_YA,
    CA, NGA, PA, GA, GAF_JAWI, NYA, KEHEH, GAF_PEGON, NYA_PEGON, DAL_PEGON, TAH_PEGON,
})

# Латинские гласные: e - неоднозначная (пепет или таленг),
# ê - явный пепет, é/è - явный таленг
LATIN_VOWELS = frozenset("aiueo\u00E9\u00E8\u00EA")

# Апостроф внутри слова - гортанная смычка (jum'at, qur'an)
GLOTTAL_STOPS = frozenset("'\u2019`")

# Слово пегона: арабские буквы и диакритика, без цифр и пунктуации
ARABIC_WORD_RE = re.compile(
    "([\u0621-\u065F\u066E-\u06D3\u06D5-\u06EF\u06FA-\u06FF"
    "\u0750-\u077F\u08A0-\u08FF\uFB50-\uFDFF\uFE70-\uFEFE]+)"
)
# Любой символ арабских блоков (для определения направления)
ARABIC_SCRIPT_RE = re.compile(
    "[\u0600-\u06FF\u0750-\u077F\u08A0-\u08FF\uFB50-\uFDFF\uFE70-\uFEFE]"
)


# Цифры (восточноарабские)
NUMERALS = {str(d): chr(0x0660 + d) for d in range(10)}

PUNCTUATION = {
    ".": "\u06D4",  # ۔
    ",": "\u060C",  # ،
    "?": "\u061F",  # ؟
    ";": "\u061B",  # ؛
}

# Одиночные согласные
SINGLE_CONSONANTS = {
    "b": BA,
    "c": CA,
    "d": DAL,
    "f": FA,
    "g": GA,
    "h": HA,
    "j": JIM,
    "k": KAF,
    "l": LAM,
    "m": MIM,
    "n": NUN,
    "p": PA,
    "q": QAF,
    "r": RA,
    "s": SIN,
    "t": TA,
    "v": PA,        # v в индонезийском читается как p
    "w": WAW,
    "x": KAF + SIN,
    "y": YA,
    "z": ZAIN,
}

# Диграфы в порядке приоритета: (паттерн, глиф, только перед гласной)
DIGRAPHS = (
    # Носовые
    ("ng", NGA, False),
    ("ny", NYA, False),
    # Шипящие и фрикативные
    ("ch", CA, False),
    ("kh", KHA, False),
    ("sy", SHIN, False),
    ("dz", THAL, False),
    ("zh", ZAIN, False),
    # Арабские звуки: только перед гласной, иначе это две отдельные буквы
    ("th", THA, True),
    ("dh", THAL, True),
    ("gh", GHAIN, True),
    ("ph", FA, True),
)

# Триграфы: носовой + смычный, связываются сильнее любого диграфа.
# Глиф собирается из составляющих, чтобы варианты таблицы менялись согласованно.
TRIGRAPHS = (
    ("ngg", ("ng", "g")),
    ("ngk", ("ng", "k")),
)

# Гласные в середине и в конце слова
VOWELS = {
    "a": ALIF,
    "i": YA,
    "u": WAW,
    "o": WAW,
    "e": YA,        # таленг; пепет сюда не попадает
    "é": YA,
    "è": YA,
}

# Гласные в начале слова: носитель с хамзой
CARRIERS = {
    "a": ALIF_HAMZA_ABOVE,
    "i": ALIF_HAMZA_BELOW + YA,
    "u": ALIF_HAMZA_ABOVE + WAW,
    "o": ALIF + WAW,
    "é": ALIF + YA,
    "è": ALIF + YA,
    "e": ALIF,      # начальный пепет
    "ê": ALIF,
}

# Арабские буквы, которых нет в латинской таблице
EXTRA_REVERSE = {
    HHA: "h",
    SAD: "s",
    DAD: "d",
    TAH: "t",
    ZAH: "z",
    AIN: "'",
    HAMZA: "'",
    HAMZA_WAW: "'",
    HAMZA_YA: "'",
    TA_MARBUTA: "h",
    KEHEH: "k",
    GA: "g",
    GAF_JAWI: "g",
    GAF_PEGON: "g",
    NYA: "ny",
    NYA_PEGON: "ny",
    DAL_PEGON: "dh",
    TAH_PEGON: "th",
}

REVERSE_NUMERALS = {
    **{glyph: digit for digit, glyph in NUMERALS.items()},
    **{chr(0x06F0 + d): str(d) for d in range(10)},
}
REVERSE_PUNCTUATION = {glyph: mark for mark, glyph in PUNCTUATION.items()}

# Региональные варианты: переопределения латинских графем
VARIANTS = {
    "pegon": {},
    "jawi": {"g": GAF_JAWI},
}


@dataclass(frozen=True)
class GraphemeRule:
    """Правило: латинская графема (1-3 символа) → последовательность глифов"""
    pattern: str
    glyph: str

    def matches(self, text: str, offset: int) -> bool:
        return text.startswith(self.pattern, offset)


@dataclass(frozen=True)
class ContextRule(GraphemeRule):
    """Правило, срабатывающее только перед символом из lookahead"""
    lookahead: FrozenSet[str] = LATIN_VOWELS

    def matches(self, text: str, offset: int) -> bool:
        if not text.startswith(self.pattern, offset):
            return False
        following = offset + len(self.pattern)
        return following < len(text) and text[following] in self.lookahead


def _freeze(mapping: Mapping[str, str]) -> Mapping[str, str]:
    if isinstance(mapping, MappingProxyType):
        return mapping
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class GlyphTable:
    """
    Неизменяемый набор правил транслитерации.

    Правила разбиты по длине паттерна (3, 2, 1); rules() отдаёт их
    единым списком приоритетов, длинные паттерны всегда раньше коротких.
    """

    trigraphs: Tuple[GraphemeRule, ...]
    digraphs: Tuple[GraphemeRule, ...]
    consonants: Mapping[str, str]
    vowels: Mapping[str, str] = field(default_factory=lambda: VOWELS)
    carriers: Mapping[str, str] = field(default_factory=lambda: CARRIERS)
    numerals: Mapping[str, str] = field(default_factory=lambda: NUMERALS)
    punctuation: Mapping[str, str] = field(default_factory=lambda: PUNCTUATION)
    name: str = "pegon"

    def __post_init__(self):
        object.__setattr__(self, "trigraphs", tuple(self.trigraphs))
        object.__setattr__(self, "digraphs", tuple(self.digraphs))
        for attr in ("consonants", "vowels", "carriers", "numerals", "punctuation"):
            object.__setattr__(self, attr, _freeze(getattr(self, attr)))

    def rules(self) -> Tuple[GraphemeRule, ...]:
        """Единый список приоритетов: триграфы, диграфы, удвоения, одиночные"""
        from pegon.gemination import gemination_rules

        singles = tuple(GraphemeRule(latin, glyph) for latin, glyph in self.consonants.items())
        return self.trigraphs + self.digraphs + gemination_rules(self.consonants) + singles

    def lookup(self, grapheme: str) -> Optional[str]:
        """
        Поиск глифа для графемы.

        Args:
            grapheme: Латинская графема (1-3 символа)

        Returns:
            Глиф или None, если правила нет
        """
        if len(grapheme) > 1:
            for rule in self.rules():
                if rule.pattern == grapheme:
                    return rule.glyph
            return None

        for table in (self.consonants, self.vowels, self.numerals, self.punctuation):
            if grapheme in table:
                return table[grapheme]
        return None

    def convert_symbol(self, char: str) -> str:
        """Цифры и пунктуация; всё остальное возвращается как есть"""
        if char in self.numerals:
            return self.numerals[char]
        return self.punctuation.get(char, char)

    def validate(self) -> None:
        """Проверка уникальности паттернов внутри каждой длины"""
        partitions = {
            3: self.trigraphs,
            2: self.digraphs,
            1: tuple(GraphemeRule(latin, glyph) for latin, glyph in self.consonants.items()),
        }
        for length, rules in partitions.items():
            seen = set()
            for rule in rules:
                if len(rule.pattern) != length:
                    raise ValueError(
                        f"Pattern '{rule.pattern}' has length {len(rule.pattern)}, expected {length}"
                    )
                if rule.pattern in seen:
                    raise ValueError(f"Duplicate pattern: '{rule.pattern}'")
                seen.add(rule.pattern)

    @property
    def consonant_letters(self) -> FrozenSet[str]:
        """Арабские буквы, которые таблица считает согласными"""
        letters = set(ARABIC_CONSONANTS)
        for rule in self.trigraphs + self.digraphs:
            letters.update(rule.glyph)
        for glyph in self.consonants.values():
            letters.update(glyph)
        return frozenset(letters - VOWEL_LETTERS)

    def reverse_consonants(self) -> Dict[str, str]:
        """
        Обратная таблица согласных: глиф → латиница.

        Одиночные согласные имеют приоритет над диграфами (چ → c, а не ch),
        первое правило в порядке таблицы побеждает (ڤ → p, а не v).
        """
        reverse: Dict[str, str] = {}
        for latin, glyph in self.consonants.items():
            if len(glyph) == 1 and glyph not in VOWEL_LETTERS:
                reverse.setdefault(glyph, latin)
        for rule in self.digraphs:
            if len(rule.glyph) == 1:
                reverse.setdefault(rule.glyph, rule.pattern)
        for glyph, latin in EXTRA_REVERSE.items():
            reverse.setdefault(glyph, latin)
        return reverse

    def summary(self) -> str:
        lines = [f"Glyph table '{self.name}'"]
        lines.append(f"  Trigraphs:   {len(self.trigraphs)}")
        lines.append(f"  Digraphs:    {len(self.digraphs)}")
        lines.append(f"  Consonants:  {len(self.consonants)}")
        lines.append(f"  Vowels:      {len(self.vowels)}")
        return "\n".join(lines)


def build_table(variant: str = "pegon") -> GlyphTable:
    """
    Сборка таблицы для варианта орфографии.

    Args:
        variant: "pegon" (по умолчанию) или "jawi"

    Returns:
        GlyphTable
    """
    if variant not in VARIANTS:
        raise ValueError(f"Unknown variant: {variant}. Available: {list(VARIANTS.keys())}")

    overrides = VARIANTS[variant]
    consonants = dict(SINGLE_CONSONANTS)
    digraph_glyphs = {pattern: glyph for pattern, glyph, _ in DIGRAPHS}
    for latin, glyph in overrides.items():
        if len(latin) == 1:
            consonants[latin] = glyph
        else:
            digraph_glyphs[latin] = glyph

    digraphs = tuple(
        ContextRule(pattern, digraph_glyphs[pattern]) if before_vowel
        else GraphemeRule(pattern, digraph_glyphs[pattern])
        for pattern, _, before_vowel in DIGRAPHS
    )

    parts = {**consonants, **digraph_glyphs}
    trigraphs = tuple(
        GraphemeRule(pattern, "".join(parts[part] for part in components))
        for pattern, components in TRIGRAPHS
    )

    return GlyphTable(
        trigraphs=trigraphs,
        digraphs=digraphs,
        consonants=consonants,
        name=variant,
    )
