"""Document assembler: ChordPro text in, :class:`~chopro.models.Document` out.

Every input line becomes exactly one :data:`~chopro.models.Line`, in order:

* empty or whitespace-only  -> :class:`~chopro.models.EmptyLine`
* first character is ``{``  -> :func:`~chopro.directives.classify_directive`
* anything else             -> :func:`~chopro.segmenter.segment_content`

Parsing never fails on malformed syntax; a construct that cannot be matched
is kept as an incomplete node and only affects its own line. The only error
a parse can raise is :class:`~chopro.exceptions.ReadError`, when the input
itself cannot be read.

Usage::

    from chopro.parser import parse
    document = parse("{title: Amazing Grace}\\n[C]Amazing [G]grace\\n")
"""

import logging
from os import PathLike
from typing import Iterable, Iterator

from .directives import classify_directive
from .exceptions import ReadError
from .models import Document, EmptyLine, Line
from .scanner import DEFAULT_ENCODING, Scanner, Source
from .segmenter import segment_content

logger = logging.getLogger(__name__)


def classify_line(line: str) -> Line:
    """Return the :data:`~chopro.models.Line` node for a single raw line."""
    if not line or line.isspace():
        return EmptyLine()
    if line[0] == "{":
        return classify_directive(line)
    return segment_content(line)


def iter_parse(source: Source) -> Iterator[Line]:
    """Lazily yield one line node per line of *source*."""
    return _iter_lines(Scanner(source))


def parse_lines(lines: Iterable[str]) -> Document:
    """Assemble a document from already split lines (terminators removed)."""
    return _assemble(_iter_lines(lines))


def parse(source: Source) -> Document:
    """Parse ChordPro *source* (str, bytes, or a readable stream)."""
    return _assemble(iter_parse(source))


def parse_file(path: str | PathLike, encoding: str = DEFAULT_ENCODING) -> Document:
    """Parse the ChordPro file at *path*.

    The file is read in chunks. A leading byte-order mark is dropped and
    undecodable bytes are replaced rather than rejected.
    """
    try:
        fh = open(path, "rb")
    except OSError as exc:
        raise ReadError(str(path), exc.strerror or str(exc)) from exc
    with fh:
        return _assemble(_iter_lines(Scanner(fh, name=str(path), encoding=encoding)))


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _iter_lines(lines: Iterable[str]) -> Iterator[Line]:
    for line in lines:
        yield classify_line(line)


def _assemble(nodes: Iterable[Line]) -> Document:
    document = Document(tuple(nodes))
    if logger.isEnabledFor(logging.DEBUG):
        for number, node in document.incomplete():
            logger.debug("line %d: %s %r", number, type(node).__name__, node.text)
        logger.debug(
            "parsed %d lines (%d directives), status %s",
            len(document),
            len(document.directives()),
            document.status.value,
        )
    return document
