"""The closed set of directive kinds and the argument shape each one takes.

Every kind is listed once with its canonical spelling, its argument shape
and its alternative spellings. Aliases resolve to the same member; they are
never distinct kinds.
"""

from enum import Enum


class ArgumentShape(Enum):
    NONE = "none"  # {end_of_chorus}
    TEXT = "text"  # {title: Amazing Grace}
    OPTIONAL_TEXT = "optional_text"  # {start_of_verse} or {start_of_verse: Verse 1}
    NUMBER = "number"  # {capo: 2}
    CHORD_DEFINITION = "chord_definition"  # {define: C base-fret 1 frets ...}
    CHORD = "chord"  # {chord: C base-fret 1 frets ...} or {chord: C}
    TITLES = "titles"  # {titles: center}


_S = ArgumentShape


class DirectiveKind(Enum):
    """A canonical directive kind. The value is its canonical spelling."""

    def __new__(cls, canonical: str, shape: ArgumentShape, aliases: tuple[str, ...] = ()):
        obj = object.__new__(cls)
        obj._value_ = canonical
        obj.shape = shape
        obj.aliases = aliases
        return obj

    @property
    def spellings(self) -> tuple[str, ...]:
        return (self.value, *self.aliases)

    # --- Metadata ---
    TITLE = ("title", _S.TEXT, ("t",))
    SUBTITLE = ("subtitle", _S.TEXT, ("st",))
    ARTIST = ("artist", _S.TEXT)
    COMPOSER = ("composer", _S.TEXT)
    LYRICIST = ("lyricist", _S.TEXT)
    COPYRIGHT = ("copyright", _S.TEXT)
    ALBUM = ("album", _S.TEXT)
    YEAR = ("year", _S.NUMBER)
    KEY = ("key", _S.TEXT)
    TIME = ("time", _S.TEXT)
    TEMPO = ("tempo", _S.TEXT)
    DURATION = ("duration", _S.TEXT)
    CAPO = ("capo", _S.NUMBER)
    TAG = ("tag", _S.TEXT)
    META = ("meta", _S.TEXT)

    # --- Formatting ---
    COMMENT = ("comment", _S.TEXT, ("c",))
    HIGHLIGHT = ("highlight", _S.TEXT)
    COMMENT_ITALIC = ("comment_italic", _S.TEXT, ("ci",))
    COMMENT_BOX = ("comment_box", _S.TEXT, ("cb",))
    IMAGE = ("image", _S.TEXT)

    # --- Environments ---
    CHORUS = ("chorus", _S.OPTIONAL_TEXT)
    START_OF_CHORUS = ("start_of_chorus", _S.OPTIONAL_TEXT, ("soc",))
    END_OF_CHORUS = ("end_of_chorus", _S.NONE, ("eoc",))
    START_OF_VERSE = ("start_of_verse", _S.OPTIONAL_TEXT, ("sov",))
    END_OF_VERSE = ("end_of_verse", _S.NONE, ("eov",))
    START_OF_BRIDGE = ("start_of_bridge", _S.OPTIONAL_TEXT, ("sob",))
    END_OF_BRIDGE = ("end_of_bridge", _S.NONE, ("eob",))
    START_OF_TAB = ("start_of_tab", _S.OPTIONAL_TEXT, ("sot",))
    END_OF_TAB = ("end_of_tab", _S.NONE, ("eot",))
    START_OF_GRID = ("start_of_grid", _S.OPTIONAL_TEXT, ("sog",))
    END_OF_GRID = ("end_of_grid", _S.NONE, ("eog",))
    START_OF_ABC = ("start_of_abc", _S.OPTIONAL_TEXT)
    END_OF_ABC = ("end_of_abc", _S.NONE)
    START_OF_LY = ("start_of_ly", _S.OPTIONAL_TEXT)
    END_OF_LY = ("end_of_ly", _S.NONE)
    START_OF_SVG = ("start_of_svg", _S.NONE)
    END_OF_SVG = ("end_of_svg", _S.NONE)
    START_OF_TEXTBLOCK = ("start_of_textblock", _S.NONE)
    END_OF_TEXTBLOCK = ("end_of_textblock", _S.NONE)

    # --- Chord definitions ---
    DEFINE = ("define", _S.CHORD_DEFINITION)
    CHORD = ("chord", _S.CHORD)

    # --- Transposition ---
    TRANSPOSE = ("transpose", _S.TEXT)

    # --- Fonts, sizes and colours ---
    CHORDFONT = ("chordfont", _S.TEXT)
    CHORDSIZE = ("chordsize", _S.NUMBER)
    CHORDCOLOUR = ("chordcolour", _S.TEXT, ("chordcolor",))
    CHORUSFONT = ("chorusfont", _S.TEXT)
    CHORUSSIZE = ("chorussize", _S.NUMBER)
    CHORUSCOLOUR = ("choruscolour", _S.TEXT, ("choruscolor",))
    FOOTERFONT = ("footerfont", _S.TEXT)
    FOOTERSIZE = ("footersize", _S.NUMBER)
    FOOTERCOLOUR = ("footercolour", _S.TEXT, ("footercolor",))
    GRIDFONT = ("gridfont", _S.TEXT)
    GRIDSIZE = ("gridsize", _S.NUMBER)
    GRIDCOLOUR = ("gridcolour", _S.TEXT, ("gridcolor",))
    TABFONT = ("tabfont", _S.TEXT)
    TABSIZE = ("tabsize", _S.NUMBER)
    TABCOLOUR = ("tabcolour", _S.TEXT, ("tabcolor",))
    LABELFONT = ("labelfont", _S.TEXT)
    LABELSIZE = ("labelsize", _S.NUMBER)
    LABELCOLOUR = ("labelcolour", _S.TEXT, ("labelcolor",))
    TOCFONT = ("tocfont", _S.TEXT)
    TOCSIZE = ("tocsize", _S.NUMBER)
    TOCCOLOUR = ("toccolour", _S.TEXT, ("toccolor",))
    TEXTFONT = ("textfont", _S.TEXT)
    TEXTSIZE = ("textsize", _S.NUMBER)
    TEXTCOLOUR = ("textcolour", _S.TEXT, ("textcolor",))
    TITLEFONT = ("titlefont", _S.TEXT)
    TITLESIZE = ("titlesize", _S.NUMBER)
    TITLECOLOUR = ("titlecolour", _S.TEXT, ("titlecolor",))

    # --- Output ---
    NEW_PAGE = ("new_page", _S.NONE, ("np",))
    NEW_PHYSICAL_PAGE = ("new_physical_page", _S.NONE, ("npp",))
    COLUMN_BREAK = ("column_break", _S.NONE, ("colb",))
    PAGETYPE = ("pagetype", _S.TEXT)

    # --- Layout ---
    DIAGRAMS = ("diagrams", _S.TEXT)
    GRID = ("grid", _S.NONE)
    NO_GRID = ("no_grid", _S.NONE)
    TITLES = ("titles", _S.TITLES)
    COLUMNS = ("columns", _S.NUMBER, ("col",))
