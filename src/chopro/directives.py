"""Directive classifier.

A directive line has the shape ``{name}`` or ``{name: argument}``. The name is
looked up (case-sensitively) in :data:`ALIASES`, which maps every canonical
spelling and alias to its :class:`~chopro.kinds.DirectiveKind`; the argument
is then checked against the shape that kind takes:

+----------------------+----------------------------------------------------+
| Shape                | Accepted argument                                  |
+======================+====================================================+
| ``NONE``             | none, ``{eoc}``                                    |
+----------------------+----------------------------------------------------+
| ``TEXT``             | 1-200 chars other than braces, ``{t: Song}``       |
+----------------------+----------------------------------------------------+
| ``OPTIONAL_TEXT``    | like TEXT, or none, ``{soc}`` / ``{soc: Chorus}``  |
+----------------------+----------------------------------------------------+
| ``NUMBER``           | 1-200 digits, ``{capo: 2}``                        |
+----------------------+----------------------------------------------------+
| ``TITLES``           | ``left``, ``right`` or ``center``                  |
+----------------------+----------------------------------------------------+
| ``CHORD_DEFINITION`` | ``NAME base-fret N frets SEQ [fingers SEQ]``       |
+----------------------+----------------------------------------------------+
| ``CHORD``            | like CHORD_DEFINITION, or ``NAME`` alone           |
+----------------------+----------------------------------------------------+

Anything else (unknown name, bad argument, missing ``}``) degrades to an
:class:`~chopro.models.IncompleteDirective`. Nothing here raises.
"""

import re
from dataclasses import replace
from types import MappingProxyType
from typing import Callable, Mapping

from .bounds import (
    BASE_FRET_RE,
    CHORD_NAME_RE,
    CLOSE_RE,
    DIRECTIVE_NAME_RE,
    FINGERS_RE,
    FREE_TEXT_RE,
    FRETS_RE,
    NUMBER_RE,
    SPACE_RE,
)
from .kinds import ArgumentShape, DirectiveKind
from .models import (
    Alignment,
    ChordDefinition,
    Directive,
    DirectiveArgument,
    FreeText,
    IncompleteDirective,
    Number,
    TitlesAlignment,
)
from .segmenter import capture_incomplete_directive, iter_segments

_TITLES_RE = re.compile("|".join(alignment.value for alignment in Alignment))


def _build_aliases() -> dict[str, DirectiveKind]:
    table: dict[str, DirectiveKind] = {}
    for kind in DirectiveKind:
        for spelling in kind.spellings:
            if spelling in table:
                raise RuntimeError(f"directive spelling {spelling!r} is ambiguous")
            table[spelling] = kind
    return table


# Spelling -> kind. Built once at import; read-only afterwards.
ALIASES: Mapping[str, DirectiveKind] = MappingProxyType(_build_aliases())


def lookup(name: str) -> DirectiveKind | None:
    """Return the kind spelled *name* (canonical or alias), or None."""
    return ALIASES.get(name)


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


def classify_directive(line: str) -> Directive | IncompleteDirective:
    """Classify a line that starts with ``{``.

    Non-blank text after the directive is segmented into ``trailing``.
    """
    node, end = match_directive(line, 0)
    if SPACE_RE.match(line, end).end() < len(line):
        node = replace(node, trailing=tuple(iter_segments(line, end)))
    return node


def match_directive(line: str, pos: int) -> tuple[Directive | IncompleteDirective, int]:
    """Match the brace construct at ``line[pos] == "{"``.

    Returns the node and the index just past what it consumed.
    """
    matched = _match_complete(line, pos)
    if matched is not None:
        return matched
    return capture_incomplete_directive(line, pos)


def _match_complete(line: str, pos: int) -> tuple[Directive, int] | None:
    m = DIRECTIVE_NAME_RE.match(line, pos + 1)
    kind = ALIASES.get(m.group(1))
    if kind is None:
        return None

    i = m.end()
    if i >= len(line):
        return None

    if line[i] == "}":
        if kind.shape in (ArgumentShape.NONE, ArgumentShape.OPTIONAL_TEXT):
            return Directive(kind), i + 1
        return None

    if line[i] != ":" or kind.shape is ArgumentShape.NONE:
        return None

    parsed = _ARGUMENT_PARSERS[kind.shape](line, SPACE_RE.match(line, i + 1).end())
    if parsed is None:
        return None
    argument, i = parsed

    close = CLOSE_RE.match(line, i)
    if close:
        return Directive(kind, argument), close.end()
    return None


# ---------------------------------------------------------------------------
# Argument grammars
#
# Each parser takes the line and the index of the first non-blank character
# after the colon, and returns (argument, end) or None when the argument does
# not fit the grammar. ``end`` is just past the argument value itself.
# ---------------------------------------------------------------------------


def _free_text(line: str, pos: int) -> tuple[FreeText, int] | None:
    m = FREE_TEXT_RE.match(line, pos)
    text = m.group().rstrip()
    if not text:
        return None
    return FreeText(text), m.end()


def _number(line: str, pos: int) -> tuple[Number, int] | None:
    m = NUMBER_RE.match(line, pos)
    if not m:
        return None
    return Number(int(m.group())), m.end()


def _titles(line: str, pos: int) -> tuple[TitlesAlignment, int] | None:
    m = _TITLES_RE.match(line, pos)
    if not m:
        return None
    return TitlesAlignment(Alignment(m.group())), m.end()


def _sequence(m: re.Match | None) -> tuple[str, int] | None:
    """Return a fret or finger sequence with its trailing blanks dropped."""
    if not m:
        return None
    sequence = m.group(1).rstrip()
    if not sequence:
        return None
    return sequence, m.start(1) + len(sequence)


def _chord_definition(
    line: str, pos: int, allow_short_form: bool = False
) -> tuple[ChordDefinition, int] | None:
    m = CHORD_NAME_RE.match(line, pos)
    if not m:
        return None
    name, end = m.group(), m.end()

    if allow_short_form and CLOSE_RE.match(line, end):
        return ChordDefinition(name), end

    m = BASE_FRET_RE.match(line, end)
    if not m:
        return None
    base_fret = int(m.group(1))

    frets = _sequence(FRETS_RE.match(line, m.end()))
    if frets is None:
        return None
    frets, end = frets

    fingers = None
    m = FINGERS_RE.match(line, end)
    if m:
        fingers = _sequence(m)
        if fingers is None:
            return None
        fingers, end = fingers

    return ChordDefinition(name, base_fret, frets, fingers), end


def _chord(line: str, pos: int) -> tuple[ChordDefinition, int] | None:
    return _chord_definition(line, pos, allow_short_form=True)


_ARGUMENT_PARSERS: dict[
    ArgumentShape, Callable[[str, int], tuple[DirectiveArgument, int] | None]
] = {
    ArgumentShape.TEXT: _free_text,
    ArgumentShape.OPTIONAL_TEXT: _free_text,
    ArgumentShape.NUMBER: _number,
    ArgumentShape.TITLES: _titles,
    ArgumentShape.CHORD_DEFINITION: _chord_definition,
    ArgumentShape.CHORD: _chord,
}
