"""Chord / lyric segmentation of content lines.

Scanning is left to right with one rule per leading character:

``[``   a chord of 1-8 characters closed by ``]``, else an IncompleteChord
        holding up to 8 captured characters; scanning resumes right after
        the capture, so the excess is segmented like any other text.
``{``   a brace construct inside a content line is never a directive; it is
        kept as an IncompleteDirective (at most 100 characters).
``}``   an unmatched closing brace becomes a one-character Lyric.
other   the longest run of characters other than ``{``, ``}`` and ``[``.

Example::

    segment_content("[C]Amazing [G]grace")
    # SongLine((Chord("C"), Lyric("Amazing "), Chord("G"), Lyric("grace")))
"""

from typing import Iterator

from .bounds import CHORD_RE, INCOMPLETE_CHORD_RE, INCOMPLETE_DIRECTIVE_RE, LYRIC_RE
from .models import Chord, IncompleteChord, IncompleteDirective, Lyric, Segment, SongLine


def segment_content(line: str) -> SongLine:
    """Split a content line into its chord and lyric segments."""
    return SongLine(tuple(iter_segments(line)))


def iter_segments(line: str, pos: int = 0) -> Iterator[Segment]:
    """Yield the segments of *line* starting at *pos*."""
    length = len(line)
    while pos < length:
        char = line[pos]
        if char == "[":
            segment, pos = match_chord(line, pos)
        elif char == "{":
            segment, pos = capture_incomplete_directive(line, pos)
        elif char == "}":
            segment, pos = Lyric("}"), pos + 1
        else:
            m = LYRIC_RE.match(line, pos)
            segment, pos = Lyric(m.group()), m.end()
        yield segment


def match_chord(line: str, pos: int) -> tuple[Chord | IncompleteChord, int]:
    """Match a chord at ``line[pos] == "["``; return the node and the next index."""
    m = CHORD_RE.match(line, pos)
    if m:
        return Chord(m.group(1)), m.end()
    m = INCOMPLETE_CHORD_RE.match(line, pos)
    return IncompleteChord(m.group(1)), m.end()


def capture_incomplete_directive(line: str, pos: int) -> tuple[IncompleteDirective, int]:
    """Capture raw text after ``line[pos] == "{"`` up to ``}``, line end or the bound.

    A ``}`` that ends the capture is consumed and marks the node as closed.
    """
    m = INCOMPLETE_DIRECTIVE_RE.match(line, pos)
    return IncompleteDirective(m.group(1), closed=m.group(2) is not None), m.end()
