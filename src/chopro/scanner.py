"""Line scanner: raw text in, raw lines out.

Lines are produced lazily and stripped of their ``\\r?\\n`` terminator. A
final line without a newline is still produced; empty input produces no
lines. The scanner imposes no line-length bound of its own.

Usage::

    from chopro.scanner import Scanner
    for line in Scanner(path.open("rb")):
        ...
"""

import codecs
from typing import IO, Iterator, Union

from .exceptions import ReadError

CHUNK_SIZE = 8192

# Like utf-8, but a leading byte-order mark is dropped.
DEFAULT_ENCODING = "utf-8-sig"

Source = Union[str, bytes, bytearray, IO[str], IO[bytes]]


class Scanner:
    """Iterable over the lines of *source*.

    ``str`` and ``bytes`` sources, and seekable streams, can be iterated any
    number of times; each iteration starts from the beginning. Other streams
    are single-pass. Bytes are decoded with *encoding*, UTF-8 by default; a
    leading byte-order mark is dropped and undecodable bytes become U+FFFD
    rather than failing.
    """

    def __init__(
        self, source: Source, name: str | None = None, encoding: str = DEFAULT_ENCODING
    ):
        if not isinstance(source, (str, bytes, bytearray)) and not hasattr(source, "read"):
            raise TypeError(f"cannot scan {type(source).__name__}")
        self._source = source
        self.encoding = encoding
        self.name = name or getattr(source, "name", None) or "<string>"
        self._start = _tell(source)

    def __iter__(self) -> Iterator[str]:
        return _split_lines(self._chunks())

    def _chunks(self) -> Iterator[str]:
        source = self._source
        if isinstance(source, str):
            yield source
            return
        if isinstance(source, (bytes, bytearray)):
            yield bytes(source).decode(self.encoding, errors="replace")
            return
        try:
            if self._start is not None:
                source.seek(self._start)
            decoder = None
            while True:
                chunk = source.read(CHUNK_SIZE)
                if not chunk:
                    break
                if isinstance(chunk, (bytes, bytearray)):
                    if decoder is None:
                        decoder = codecs.getincrementaldecoder(self.encoding)(errors="replace")
                    chunk = decoder.decode(chunk)
                yield chunk
            if decoder is not None:
                yield decoder.decode(b"", final=True)
        except (OSError, UnicodeDecodeError) as exc:
            raise ReadError(self.name, str(exc)) from exc


def iter_lines(source: Source) -> Iterator[str]:
    """Shortcut for ``iter(Scanner(source))``."""
    return iter(Scanner(source))


def _tell(source) -> int | None:
    """Return the current offset of a seekable stream, else None."""
    if isinstance(source, (str, bytes, bytearray)):
        return None
    try:
        if source.seekable():
            return source.tell()
    except (AttributeError, OSError):
        pass
    return None


def _split_lines(chunks: Iterator[str]) -> Iterator[str]:
    # Pieces of a line spanning several chunks are joined once, when the
    # newline arrives, so a huge line costs linear time.
    parts: list[str] = []
    for chunk in chunks:
        start = 0
        while True:
            end = chunk.find("\n", start)
            if end < 0:
                break
            parts.append(chunk[start:end])
            line = "".join(parts)
            parts.clear()
            yield line[:-1] if line.endswith("\r") else line
            start = end + 1
        if start < len(chunk):
            parts.append(chunk[start:])
    if parts:
        yield "".join(parts)
