"""Tests for the harakah annotator (harakah.py)."""

import pytest
from pegon.glyphs import (
    ALIF,
    ALIF_HAMZA_ABOVE,
    BA,
    DAL,
    DAMMA,
    FATHA,
    KAF,
    KASRA,
    LAM,
    MIM,
    NUN,
    PEPET,
    SHADDA,
    SIN,
    SUKUN,
    TA,
    WAW,
    YA,
)
from pegon.harakah import (
    LetterRole,
    annotate,
    annotate_segments,
    annotate_word,
    classify,
    split_letters,
)


# ── letter roles ──────────────────────────────────────────────────────────────

def _roles(word):
    return [letter.role for letter in classify(split_letters(word))]


def test_split_letters_groups_marks():
    letters = split_letters(MIM + SHADDA + FATHA + ALIF)
    assert [letter.char for letter in letters] == [MIM, ALIF]
    assert letters[0].marks == SHADDA + FATHA


def test_ya_after_consonant_is_vowel():
    assert _roles(KAF + YA + TA + ALIF) == [
        LetterRole.CONSONANT, LetterRole.VOWEL, LetterRole.CONSONANT, LetterRole.VOWEL,
    ]


def test_waw_at_word_start_is_consonant():
    assert _roles(WAW + ALIF)[0] is LetterRole.CONSONANT


def test_ya_between_vowels_is_consonant():
    # kayu
    roles = _roles(KAF + ALIF + YA + WAW)
    assert roles[2] is LetterRole.CONSONANT
    assert roles[3] is LetterRole.VOWEL


def test_waw_after_sukun_is_consonant():
    # swa
    assert _roles(SIN + SUKUN + WAW + FATHA + ALIF) == [
        LetterRole.CONSONANT, LetterRole.CONSONANT, LetterRole.VOWEL,
    ]


def test_waw_after_pepet_is_consonant():
    # sewa
    assert _roles(SIN + PEPET + WAW + ALIF)[1] is LetterRole.CONSONANT


def test_ya_after_other_vowel_mark_is_consonant():
    assert _roles(KAF + FATHA + YA)[1] is LetterRole.CONSONANT
    assert _roles(KAF + KASRA + YA)[1] is LetterRole.VOWEL


def test_carrier_with_fatha_takes_no_tail():
    # aula
    assert _roles(ALIF_HAMZA_ABOVE + FATHA + WAW + LAM + ALIF) == [
        LetterRole.CARRIER, LetterRole.VOWEL, LetterRole.CONSONANT, LetterRole.VOWEL,
    ]


def test_carrier_with_damma_keeps_tail():
    # ula
    assert _roles(ALIF_HAMZA_ABOVE + DAMMA + WAW + LAM + ALIF)[:2] == [
        LetterRole.CARRIER, LetterRole.CARRIER,
    ]


# ── annotate ──────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("word,expected", [
    (KAF + YA + TA + ALIF, KAF + KASRA + YA + TA + FATHA + ALIF),
    (BA + WAW + KAF + WAW, BA + DAMMA + WAW + KAF + DAMMA + WAW),
    (BA + ALIF + NUN + TA + WAW, BA + FATHA + ALIF + NUN + SUKUN + TA + DAMMA + WAW),
])
def test_annotate_word(word, expected):
    assert annotate_word(word) == expected


def test_final_consonant_gets_no_mark():
    assert annotate_word(KAF + ALIF + MIM) == KAF + FATHA + ALIF + MIM


def test_mark_goes_after_shadda():
    assert annotate_word(MIM + SHADDA + ALIF) == MIM + SHADDA + FATHA + ALIF


def test_pepet_consonant_left_alone():
    word = TA + PEPET + MIM + ALIF
    assert annotate_word(word) == TA + PEPET + MIM + FATHA + ALIF


def test_annotate_keeps_non_arabic_text():
    text = KAF + ALIF + " 123, ok"
    assert annotate(text) == KAF + FATHA + ALIF + " 123, ok"


def test_annotate_empty():
    assert annotate("") == ""


# ── annotate by segments ──────────────────────────────────────────────────────

def _annotate_latin(segmenter, resolver, word):
    return annotate_segments(resolver.resolve(segmenter.segment(word), harakah=True))


def test_consonant_before_glide_gets_sukun(segmenter, resolver):
    assert _annotate_latin(segmenter, resolver, "swasta") == (
        SIN + SUKUN + WAW + FATHA + ALIF + SIN + SUKUN + TA + FATHA + ALIF
    )
    assert _annotate_latin(segmenter, resolver, "kyai") == KAF + SUKUN + YA + FATHA + ALIF + YA


def test_vowel_letter_gets_matching_mark(segmenter, resolver):
    # dui: و - гласная, сукуна нет
    assert _annotate_latin(segmenter, resolver, "dui") == DAL + DAMMA + WAW + YA


def test_converter_uses_segments(converter):
    assert converter.to_pegon("dwi", harakah=True) != converter.to_pegon("dui", harakah=True)
    assert SUKUN in converter.to_pegon("dwi", harakah=True)


# ── idempotence ───────────────────────────────────────────────────────────────

@pytest.mark.parametrize("latin", [
    "apa kabar?",
    "terima kasih",
    "kayu",
    "bantu",
    "tinggi",
    "mm",
    "wanita",
    "jum'at",
    "sebentar lagi",
])
def test_annotate_is_idempotent(converter, latin):
    once = annotate(converter.to_pegon(latin))
    assert annotate(once) == once


def test_annotate_is_idempotent_on_harakah_output(converter):
    pegon = converter.to_pegon("selamat pagi", harakah=True)
    assert annotate(pegon) == pegon


IDEMPOTENCE_WORDS = [
    consonant + v1 + middle + v2
    for consonant in ("", "k", "w", "y")
    for v1 in "aiu"
    for middle in "bkmnswy"
    for v2 in "aiu"
] + ["swasta", "kyai", "dwi", "kwitansi", "aula", "aurat", "sewa", "xx", "mau", "kuwu"]


@pytest.mark.parametrize("harakah", [False, True])
def test_annotate_is_idempotent_sweep(converter, harakah):
    for word in IDEMPOTENCE_WORDS:
        pegon = converter.to_pegon(word, harakah=harakah)
        once = pegon if harakah else annotate(pegon)
        assert annotate(once) == once, word
