from dataclasses import FrozenInstanceError

import pytest

from chopro.kinds import ArgumentShape, DirectiveKind
from chopro.models import (
    Alignment,
    Chord,
    ChordDefinition,
    Directive,
    Document,
    EmptyLine,
    FreeText,
    IncompleteChord,
    IncompleteDirective,
    Lyric,
    Number,
    ParseStatus,
    SongLine,
    TitlesAlignment,
)

# ---------------------------------------------------------------------------
# DirectiveKind
# ---------------------------------------------------------------------------


def test_kind_value_is_canonical_spelling():
    assert DirectiveKind.TITLE.value == "title"
    assert DirectiveKind("start_of_chorus") is DirectiveKind.START_OF_CHORUS


def test_kind_shapes():
    assert DirectiveKind.TITLE.shape is ArgumentShape.TEXT
    assert DirectiveKind.START_OF_VERSE.shape is ArgumentShape.OPTIONAL_TEXT
    assert DirectiveKind.END_OF_VERSE.shape is ArgumentShape.NONE
    assert DirectiveKind.CAPO.shape is ArgumentShape.NUMBER
    assert DirectiveKind.DEFINE.shape is ArgumentShape.CHORD_DEFINITION
    assert DirectiveKind.CHORD.shape is ArgumentShape.CHORD
    assert DirectiveKind.TITLES.shape is ArgumentShape.TITLES


def test_kind_spellings():
    assert DirectiveKind.TITLE.spellings == ("title", "t")
    assert DirectiveKind.ARTIST.spellings == ("artist",)


def test_aliases_are_not_kinds():
    with pytest.raises(ValueError):
        DirectiveKind("t")


# ---------------------------------------------------------------------------
# Directive shape invariant
# ---------------------------------------------------------------------------


def test_directive_defaults():
    directive = Directive(DirectiveKind.END_OF_CHORUS)
    assert directive.argument is None
    assert directive.trailing == ()


def test_optional_argument_may_be_omitted():
    assert Directive(DirectiveKind.START_OF_CHORUS).argument is None


@pytest.mark.parametrize(
    "kind, argument",
    [
        (DirectiveKind.TITLE, None),
        (DirectiveKind.CAPO, FreeText("2")),
        (DirectiveKind.END_OF_CHORUS, FreeText("x")),
        (DirectiveKind.TITLES, FreeText("center")),
        (DirectiveKind.COMMENT, Number(1)),
        (DirectiveKind.DEFINE, ChordDefinition("C")),
    ],
)
def test_inconsistent_argument_rejected(kind, argument):
    with pytest.raises(ValueError):
        Directive(kind, argument)


def test_chord_accepts_short_form():
    assert Directive(DirectiveKind.CHORD, ChordDefinition("C")).argument.is_short_form


def test_titles_alignment():
    directive = Directive(DirectiveKind.TITLES, TitlesAlignment(Alignment.LEFT))
    assert directive.argument.alignment.value == "left"


# ---------------------------------------------------------------------------
# Immutability
# ---------------------------------------------------------------------------


def test_nodes_are_frozen():
    with pytest.raises(FrozenInstanceError):
        Chord("C").text = "G"
    with pytest.raises(FrozenInstanceError):
        Document(()).lines = (EmptyLine(),)


# ---------------------------------------------------------------------------
# SongLine
# ---------------------------------------------------------------------------


def test_song_line_chords_and_lyrics():
    line = SongLine((Chord("C"), Lyric("Amazing "), Chord("G"), Lyric("grace")))
    assert line.chords == ["C", "G"]
    assert line.lyrics == "Amazing grace"


def test_song_line_default():
    assert SongLine().segments == ()


# ---------------------------------------------------------------------------
# Document
# ---------------------------------------------------------------------------


def _document() -> Document:
    return Document((
        Directive(DirectiveKind.TITLE, FreeText("Song")),
        SongLine((Chord("C"), Lyric("la"), IncompleteChord("G"))),
        EmptyLine(),
        IncompleteDirective("bogus", closed=True),
        Directive(DirectiveKind.START_OF_CHORUS, trailing=(IncompleteDirective("x"),)),
    ))


def test_document_sequence_protocol():
    document = _document()
    assert len(document) == 5
    assert document[2] == EmptyLine()
    assert list(document) == list(document.lines)


def test_document_directives():
    document = _document()
    assert [d.kind for d in document.directives()] == [
        DirectiveKind.TITLE, DirectiveKind.START_OF_CHORUS,
    ]
    assert document.directives(DirectiveKind.TITLE)[0].argument == FreeText("Song")


def test_document_incomplete_with_line_numbers():
    assert list(_document().incomplete()) == [
        (2, IncompleteChord("G")),
        (4, IncompleteDirective("bogus", closed=True)),
        (5, IncompleteDirective("x")),
    ]


def test_document_status_reports_first_incomplete():
    assert _document().status is ParseStatus.INCOMPLETE_CHORD
    assert not _document().is_well_formed


def test_document_well_formed():
    document = Document((Directive(DirectiveKind.END_OF_CHORUS), EmptyLine()))
    assert document.status is ParseStatus.WELL_FORMED
    assert document.is_well_formed
