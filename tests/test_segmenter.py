"""Tests for the segmenter (segmenter.py) and gemination (gemination.py)."""

import pytest
from pegon.gemination import expand_gemination, gemination_rules, geminate, is_geminated
from pegon.glyphs import GA, HAMZA, KAF, MIM, NGA, SHADDA, SIN, ContextRule
from pegon.segmenter import SegmentKind


def _latin(segments):
    return [segment.latin for segment in segments]


# ── longest match ─────────────────────────────────────────────────────────────

def test_every_rule_wins_at_its_own_offset(table, segmenter):
    """No shorter rule pre-empts a longer one starting at the same offset."""
    for rule in table.rules():
        word = rule.pattern + ("a" if isinstance(rule, ContextRule) else "")
        segments = segmenter.segment(word)
        assert segments[0].latin == rule.pattern, rule.pattern
        assert segments[0].glyph == rule.glyph


def test_trigraph_not_split(segmenter):
    segments = segmenter.segment("tinggi")
    assert _latin(segments) == ["t", "i", "ngg", "i"]
    assert segments[2].glyph == NGA + GA


def test_trigraph_ngk(segmenter):
    assert _latin(segmenter.segment("bangku")) == ["b", "a", "ngk", "u"]


def test_digraph_ng_at_word_end(segmenter):
    assert _latin(segmenter.segment("datang")) == ["d", "a", "t", "a", "ng"]


def test_context_digraph_before_consonant_splits(segmenter):
    assert _latin(segmenter.segment("ath")) == ["a", "t", "h"]


def test_context_digraph_before_vowel(segmenter):
    assert _latin(segmenter.segment("thalib")) == ["th", "a", "l", "i", "b"]


# ── vowels and schwa ──────────────────────────────────────────────────────────

def test_vowel_kinds(segmenter):
    kinds = [segment.kind for segment in segmenter.segment("terima")]
    assert kinds == [
        SegmentKind.CONSONANT, SegmentKind.SCHWA, SegmentKind.CONSONANT,
        SegmentKind.VOWEL, SegmentKind.CONSONANT, SegmentKind.VOWEL,
    ]


def test_final_e_is_taling(segmenter):
    assert segmenter.segment("sate")[-1].kind is SegmentKind.VOWEL


def test_e_before_vowel_is_taling(segmenter):
    assert segmenter.segment("bea")[1].kind is SegmentKind.VOWEL


def test_explicit_schwa_and_taling(segmenter):
    assert segmenter.segment("têmpé")[1].kind is SegmentKind.SCHWA
    assert segmenter.segment("têmpé")[-1].kind is SegmentKind.VOWEL


def test_initial_flags(segmenter):
    segments = segmenter.segment("apa")
    assert segments[0].initial
    assert not segments[2].initial
    assert segments[2].after_consonant


# ── pass-through ──────────────────────────────────────────────────────────────

def test_unknown_characters_pass_through(segmenter):
    segments = segmenter.segment("a😀")
    assert segments[1].kind is SegmentKind.OTHER
    assert segments[1].glyph == "😀"


def test_internal_apostrophe_is_hamza(segmenter):
    segments = segmenter.segment("jum'at")
    assert segments[3].glyph == HAMZA
    assert segments[3].kind is SegmentKind.CONSONANT


# ── gemination ────────────────────────────────────────────────────────────────

def test_double_consonant_is_one_segment(segmenter):
    segments = segmenter.segment("mm")
    assert len(segments) == 1
    assert segments[0].glyph == MIM + SHADDA


def test_gemination_of_composite_glyph(table, converter):
    rules = {rule.pattern: rule.glyph for rule in gemination_rules(table.consonants)}
    assert table.consonants["x"] == KAF + SIN
    # Шадда на первой букве, без повтора всего глифа
    assert rules["xx"] == KAF + SHADDA + SIN
    assert converter.convert("xx") == KAF + SHADDA + SIN
    assert converter.convert("xx") != KAF + SIN + KAF + SIN


def test_geminate_and_detect():
    assert geminate(MIM) == MIM + SHADDA
    assert is_geminated(SHADDA)
    assert not is_geminated("")


@pytest.mark.parametrize("latin,expected", [
    ("m", "mm"),
    ("ng", "nng"),
    ("", ""),
])
def test_expand_gemination(latin, expected):
    assert expand_gemination(latin) == expected
