"""pegon: транслитерация латиницы (индонезийский, яванский, сунданский) в пегон и обратно."""

__version__ = "1.0.0"

from pegon.glyphs import GlyphTable, GraphemeRule, ContextRule, build_table
from pegon.lexicon import Lexicon, FileResource, UrlResource
from pegon.segmenter import Segmenter, Segment, SegmentKind
from pegon.vowels import VowelResolver
from pegon.harakah import annotate
from pegon.reverse import ReverseConverter
from pegon.converter import (
    PegonConverter,
    Direction,
    ConversionError,
    convert,
    detect_direction,
)

__all__ = [
    "GlyphTable", "GraphemeRule", "ContextRule", "build_table",
    "Lexicon", "FileResource", "UrlResource",
    "Segmenter", "Segment", "SegmentKind",
    "VowelResolver", "annotate", "ReverseConverter",
    "PegonConverter", "Direction", "ConversionError",
    "convert", "detect_direction",
]
