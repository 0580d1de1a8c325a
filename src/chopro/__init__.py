"""Bounded, error-tolerant ChordPro parser."""

from .chordpro import ChordProFormatter
from .kinds import ArgumentShape, DirectiveKind
from .models import Document, ParseStatus
from .parser import iter_parse, parse, parse_file, parse_lines
from .validator import validate

__version__ = "0.1.0"

__all__ = [
    "ArgumentShape",
    "ChordProFormatter",
    "DirectiveKind",
    "Document",
    "ParseStatus",
    "iter_parse",
    "parse",
    "parse_file",
    "parse_lines",
    "validate",
]
