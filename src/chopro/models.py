from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Union

from .kinds import ArgumentShape, DirectiveKind

# ---------------------------------------------------------------------------
# Directive arguments
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FreeText:
    """Free-text argument, e.g. the ``Amazing Grace`` of ``{title: Amazing Grace}``."""

    text: str


@dataclass(frozen=True)
class Number:
    """Unsigned integer argument, e.g. ``{capo: 2}``."""

    value: int


@dataclass(frozen=True)
class ChordDefinition:
    """Body of a ``{define: ...}`` or ``{chord: ...}`` directive.

    Example: ``{define: C base-fret 1 frets 0 3 2 0 1 0 fingers 0 2 1 0 1 0}``
    ``base_fret`` and ``fret_sequence`` are None only for the ``{chord: C}``
    short form, which names a chord without defining it.
    """

    chord_name: str
    base_fret: int | None = None
    fret_sequence: str | None = None  # e.g. "0 3 2 0 1 0", "x x 0 2 3 2", "N 2 2 1 0 0"
    finger_sequence: str | None = None

    @property
    def is_short_form(self) -> bool:
        return self.fret_sequence is None


class Alignment(Enum):
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


@dataclass(frozen=True)
class TitlesAlignment:
    """Argument of ``{titles: left|right|center}``."""

    alignment: Alignment


DirectiveArgument = Union[FreeText, Number, ChordDefinition, TitlesAlignment]

_ARGUMENT_TYPES: dict[ArgumentShape, tuple[type, ...]] = {
    ArgumentShape.NONE: (),
    ArgumentShape.TEXT: (FreeText,),
    ArgumentShape.OPTIONAL_TEXT: (FreeText,),
    ArgumentShape.NUMBER: (Number,),
    ArgumentShape.CHORD_DEFINITION: (ChordDefinition,),
    ArgumentShape.CHORD: (ChordDefinition,),
    ArgumentShape.TITLES: (TitlesAlignment,),
}

# ---------------------------------------------------------------------------
# Segments of a song line
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Chord:
    """An inline chord: ``[Am7]`` -> ``Chord("Am7")``."""

    text: str


@dataclass(frozen=True)
class Lyric:
    text: str


@dataclass(frozen=True)
class IncompleteChord:
    """A ``[`` that found no closing ``]`` within the chord-body bound."""

    text: str


@dataclass(frozen=True)
class IncompleteDirective:
    """An unrecognised or unterminated ``{...`` construct.

    ``text`` is the raw capture after the opening brace; ``closed`` is True
    when the capture ended on a ``}``. As a whole line it may carry
    ``trailing`` segments for text left after the capture.
    """

    text: str
    closed: bool = False
    trailing: tuple["Segment", ...] = ()


Segment = Union[Chord, Lyric, IncompleteChord, IncompleteDirective]

# ---------------------------------------------------------------------------
# Lines
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Directive:
    """A well-formed directive line.

    Construction enforces that *argument* matches the shape of *kind*; a
    ``Directive(DirectiveKind.CAPO, FreeText("2"))`` raises ``ValueError``.
    """

    kind: DirectiveKind
    argument: DirectiveArgument | None = None
    trailing: tuple[Segment, ...] = ()

    def __post_init__(self):
        shape = self.kind.shape
        if self.argument is None:
            if shape not in (ArgumentShape.NONE, ArgumentShape.OPTIONAL_TEXT):
                raise ValueError(f"{{{self.kind.value}}} requires an argument")
            return
        if not isinstance(self.argument, _ARGUMENT_TYPES[shape]):
            raise ValueError(
                f"{{{self.kind.value}}} cannot take a {type(self.argument).__name__} argument"
            )
        if shape is ArgumentShape.CHORD_DEFINITION and self.argument.is_short_form:
            raise ValueError(f"{{{self.kind.value}}} requires base-fret and frets")


@dataclass(frozen=True)
class SongLine:
    """A content line: chords and lyrics in source order."""

    segments: tuple[Segment, ...] = ()

    @property
    def chords(self) -> list[str]:
        return [s.text for s in self.segments if isinstance(s, Chord)]

    @property
    def lyrics(self) -> str:
        return "".join(s.text for s in self.segments if isinstance(s, Lyric))


@dataclass(frozen=True)
class EmptyLine:
    """A blank (or whitespace-only) line."""


Line = Union[Directive, IncompleteDirective, SongLine, EmptyLine]

# ---------------------------------------------------------------------------
# Document
# ---------------------------------------------------------------------------


class ParseStatus(Enum):
    WELL_FORMED = "well_formed"
    INCOMPLETE_DIRECTIVE = "incomplete_directive"
    INCOMPLETE_CHORD = "incomplete_chord"


@dataclass(frozen=True)
class Document:
    """A parsed ChordPro document: one :data:`Line` per input line, in order."""

    lines: tuple[Line, ...] = field(default_factory=tuple)

    def __iter__(self) -> Iterator[Line]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    def __getitem__(self, index):
        return self.lines[index]

    def directives(self, kind: DirectiveKind | None = None) -> list[Directive]:
        """Return the well-formed directives, optionally only those of *kind*."""
        return [
            line
            for line in self.lines
            if isinstance(line, Directive) and (kind is None or line.kind is kind)
        ]

    def incomplete(self) -> Iterator[tuple[int, IncompleteDirective | IncompleteChord]]:
        """Yield ``(line_number, node)`` for every incomplete construct.

        Line numbers are 1-based. Nodes are yielded in source order, including
        those found in the trailing text of directive lines.
        """
        for number, line in enumerate(self.lines, start=1):
            if isinstance(line, IncompleteDirective):
                yield number, line
            if isinstance(line, SongLine):
                segments = line.segments
            elif isinstance(line, (Directive, IncompleteDirective)):
                segments = line.trailing
            else:
                continue
            for segment in segments:
                if isinstance(segment, (IncompleteDirective, IncompleteChord)):
                    yield number, segment

    @property
    def status(self) -> ParseStatus:
        """Kind of the first incomplete construct, or ``WELL_FORMED``."""
        for _, node in self.incomplete():
            if isinstance(node, IncompleteDirective):
                return ParseStatus.INCOMPLETE_DIRECTIVE
            return ParseStatus.INCOMPLETE_CHORD
        return ParseStatus.WELL_FORMED

    @property
    def is_well_formed(self) -> bool:
        return self.status is ParseStatus.WELL_FORMED
