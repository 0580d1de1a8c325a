"""Canonical ChordPro writer.

Renders a parsed :class:`~chopro.models.Document` back to ChordPro text, one
output line per document line. Directives are written with their canonical
spelling, so aliases are normalised:

+-----------------------------------+------------------------------------+
| Input                             | Output                             |
+===================================+====================================+
| ``{t:Amazing Grace}``             | ``{title: Amazing Grace}``         |
+-----------------------------------+------------------------------------+
| ``{soc}``                         | ``{start_of_chorus}``              |
+-----------------------------------+------------------------------------+
| ``{capo: 02}``                    | ``{capo: 2}``                      |
+-----------------------------------+------------------------------------+
| ``{chordcolor: red}``             | ``{chordcolour: red}``             |
+-----------------------------------+------------------------------------+

Incomplete constructs are written back as they were captured, so a
malformed line survives a round trip for diagnostics.

Usage::

    from chopro.chordpro import ChordProFormatter
    text = ChordProFormatter().render(document)
"""

from .models import (
    Chord,
    ChordDefinition,
    Directive,
    DirectiveArgument,
    Document,
    EmptyLine,
    FreeText,
    IncompleteChord,
    IncompleteDirective,
    Line,
    Lyric,
    Number,
    Segment,
    SongLine,
    TitlesAlignment,
)


class ChordProFormatter:
    """Render a :class:`~chopro.models.Document` to ChordPro text."""

    def render(self, document: Document) -> str:
        """Return ChordPro text for *document*.

        Non-empty output ends with a single newline and uses Unix line
        endings (``\\n``) throughout.
        """
        if not document.lines:
            return ""
        return "\n".join(render_line(line) for line in document) + "\n"


def render_line(line: Line) -> str:
    """Return the text of one document line, without a terminator."""
    if isinstance(line, EmptyLine):
        return ""
    if isinstance(line, SongLine):
        return _render_segments(line.segments)
    if isinstance(line, Directive):
        name = line.kind.value
        if line.argument is None:
            head = f"{{{name}}}"
        else:
            head = f"{{{name}: {render_argument(line.argument)}}}"
        return head + _render_segments(line.trailing)
    if isinstance(line, IncompleteDirective):
        return _render_segment(line) + _render_segments(line.trailing)
    raise TypeError(f"not a document line: {line!r}")


def render_argument(argument: DirectiveArgument) -> str:
    """Return the canonical text of a directive argument."""
    if isinstance(argument, FreeText):
        return argument.text
    if isinstance(argument, Number):
        return str(argument.value)
    if isinstance(argument, TitlesAlignment):
        return argument.alignment.value
    if isinstance(argument, ChordDefinition):
        if argument.is_short_form:
            return argument.chord_name
        text = (
            f"{argument.chord_name} base-fret {argument.base_fret}"
            f" frets {argument.fret_sequence}"
        )
        if argument.finger_sequence is not None:
            text += f" fingers {argument.finger_sequence}"
        return text
    raise TypeError(f"not a directive argument: {argument!r}")


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _render_segments(segments: tuple[Segment, ...]) -> str:
    return "".join(_render_segment(segment) for segment in segments)


def _render_segment(segment: Segment) -> str:
    if isinstance(segment, Chord):
        return f"[{segment.text}]"
    if isinstance(segment, Lyric):
        return segment.text
    if isinstance(segment, IncompleteChord):
        return f"[{segment.text}"
    if isinstance(segment, IncompleteDirective):
        return "{" + segment.text + ("}" if segment.closed else "")
    raise TypeError(f"not a segment: {segment!r}")
