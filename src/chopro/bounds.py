"""Resource bounds shared by every token-matching rule.

Every variable-length token the parser captures has a fixed maximum length.
When real content is longer than a bound the excess is left unconsumed and
re-enters matching at the next position, so no input (however hostile) makes
a single construct buffer more than a constant number of characters.

The patterns below are applied with ``pattern.match(line, pos)``. None of
them nests a quantifier, so each match runs in time linear in what it
consumes.
"""

import re

# Argument of a free-text directive, e.g. ``{title: ...}``
MAX_FREE_TEXT = 200

# ``{define: NAME ...}`` / ``{chord: NAME}``
MAX_CHORD_NAME = 10

# ``frets 0 3 2 0 1 0``
MAX_FRET_SEQUENCE = 50

# ``fingers 0 2 1 0 1 0``
MAX_FINGER_SEQUENCE = 20

# Body of an inline chord, ``[Cmaj7]``
MAX_CHORD_BODY = 8

# Raw text kept for an unrecognised or unterminated ``{...``
MAX_INCOMPLETE_DIRECTIVE = 100

# Raw text kept for an unterminated ``[...``
MAX_INCOMPLETE_CHORD = 8

# Longest known directive name is 18 characters (start_of_textblock).
MAX_DIRECTIVE_NAME = 32

# ``base-fret N``
MAX_BASE_FRET_DIGITS = 3


# ---------------------------------------------------------------------------
# Content lines
# ---------------------------------------------------------------------------

# [Cmaj7]
CHORD_RE = re.compile(rf"\[([^\]\n]{{1,{MAX_CHORD_BODY}}})\]")

# [Cmaj7 with no closing bracket in reach
INCOMPLETE_CHORD_RE = re.compile(rf"\[([^\]\n]{{0,{MAX_INCOMPLETE_CHORD}}})")

# {anything up to the closing brace; group 2 is set when the brace is present
INCOMPLETE_DIRECTIVE_RE = re.compile(
    rf"\{{([^}}\n]{{0,{MAX_INCOMPLETE_DIRECTIVE}}})(\}})?"
)

# One lyric character, then everything up to the next brace or bracket
LYRIC_RE = re.compile(r".[^{}\[\n]*", re.DOTALL)


# ---------------------------------------------------------------------------
# Directive lines
# ---------------------------------------------------------------------------

SPACE_RE = re.compile(r"\s*")

# Directive name with the blanks around it: ``{ title :``
DIRECTIVE_NAME_RE = re.compile(rf"\s*([A-Za-z0-9_-]{{0,{MAX_DIRECTIVE_NAME}}})\s*")

# Closing brace, optionally preceded by blanks
CLOSE_RE = re.compile(r"\s*\}")

FREE_TEXT_RE = re.compile(rf"[^{{}}\n]{{0,{MAX_FREE_TEXT}}}")

NUMBER_RE = re.compile(rf"[0-9]{{1,{MAX_FREE_TEXT}}}")

# Any non-blank, non-brace run: C, Am7, G/B, Bb(add9)
CHORD_NAME_RE = re.compile(rf"[^\s{{}}]{{1,{MAX_CHORD_NAME}}}")

BASE_FRET_RE = re.compile(rf"\s+base-fret\s+([0-9]{{1,{MAX_BASE_FRET_DIGITS}}})")

# x and X mark a muted string, N a string not played, - a gap
FRETS_RE = re.compile(rf"\s+frets\s+([0-9xXN \-]{{1,{MAX_FRET_SEQUENCE}}})")

FINGERS_RE = re.compile(rf"\s+fingers\s+([0-9 \-]{{1,{MAX_FINGER_SEQUENCE}}})")
