"""
Input Sources

Opens the inputs named on the command line and reads them back to back:
- "-" is standard input
- any other value is a file path, read as UTF-8
- a source that cannot be opened is reported and replaced by an empty one
"""

import io
import sys
from enum import Enum
from typing import Callable, Iterable, Iterator, List, Optional, TextIO

from infra.logger import log_source_failed, log_source_opened


STDIN_URI = "-"


# ═══════════════════════════════════════════════════════════════════════════════
# ERRORS
# ═══════════════════════════════════════════════════════════════════════════════

class InputErrorKind(Enum):
    URI_IS_EMPTY = "uri_is_empty"
    CANNOT_OPEN_URI = "cannot_open_uri"


class InputError(Exception):
    """
    An input source that could not be opened.

    Attributes:
        kind: What went wrong
        uri: The requested source
        cause: Underlying OSError, if any
    """

    def __init__(self, kind: InputErrorKind, uri: str, cause: Optional[OSError] = None):
        self.kind = kind
        self.uri = uri
        self.cause = cause
        super().__init__(self._format())

    def _format(self) -> str:
        if self.kind is InputErrorKind.URI_IS_EMPTY:
            return "uri cannot be empty"
        reason = describe_cause(self.cause)
        return f"failed to open '{self.uri}': {reason}"


# ═══════════════════════════════════════════════════════════════════════════════
# SINGLE SOURCE
# ═══════════════════════════════════════════════════════════════════════════════

class InputSource:
    """A readable text stream plus where it came from."""

    def __init__(self, stream: TextIO, uri: str, owned: bool):
        self.stream = stream
        self.uri = uri
        self._owned = owned

    @classmethod
    def open(cls, uri: str, stdin: Optional[TextIO] = None) -> "InputSource":
        """
        Open an input source by uri.

        Raises:
            InputError: URI_IS_EMPTY for "", CANNOT_OPEN_URI when the file
                cannot be opened
        """
        if uri == "":
            raise InputError(InputErrorKind.URI_IS_EMPTY, uri)

        if uri == STDIN_URI:
            log_source_opened(uri, "stdin")
            return cls(stdin if stdin is not None else sys.stdin, uri, owned=False)

        try:
            stream = open(uri, "r", encoding="utf-8", errors="replace")
        except OSError as e:
            raise InputError(InputErrorKind.CANNOT_OPEN_URI, uri, e) from e

        log_source_opened(uri, "file")
        return cls(stream, uri, owned=True)

    @classmethod
    def empty(cls, uri: str = "") -> "InputSource":
        """A source that is immediately at EOF."""
        return cls(io.StringIO(""), uri, owned=True)

    def read(self, size: int = -1) -> str:
        return self.stream.read(size)

    def close(self) -> None:
        if self._owned and not self.stream.closed:
            self.stream.close()


def open_sources(
    uris: Iterable[str],
    on_error: Callable[[InputError], None],
    stdin: Optional[TextIO] = None,
) -> List[InputSource]:
    """
    Open every uri, reporting failures through ``on_error``.

    Failed uris become empty sources so the remaining inputs still print.
    """
    sources = []
    for uri in uris:
        try:
            sources.append(InputSource.open(uri, stdin=stdin))
        except InputError as e:
            log_source_failed(uri, str(e))
            on_error(e)
            sources.append(InputSource.empty(uri))
    return sources


# ═══════════════════════════════════════════════════════════════════════════════
# CHAINED READER
# ═══════════════════════════════════════════════════════════════════════════════

class ChainedReader:
    """
    Reads several sources one after another.

    Each source is closed as soon as it is exhausted. Use as a context
    manager to close whatever is left on early exit.
    """

    def __init__(self, sources: Iterable[InputSource]):
        self._sources = list(sources)

    def __enter__(self) -> "ChainedReader":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        for source in self._sources:
            source.close()

    def chars(self) -> Iterator[str]:
        """Yield one character at a time, streaming."""
        for source in self._sources:
            try:
                while True:
                    ch = source.read(1)
                    if not ch:
                        break
                    yield ch
            finally:
                source.close()

    def lines(self) -> Iterator[str]:
        """Yield lines, each ending with exactly one newline."""
        for source in self._sources:
            try:
                for line in source.stream:
                    yield normalize_line(line)
            finally:
                source.close()


def normalize_line(line: str) -> str:
    """Strip any line terminator and append a single "\\n"."""
    if line.endswith("\r\n"):
        line = line[:-2]
    elif line.endswith(("\n", "\r")):
        line = line[:-1]
    return line + "\n"


def describe_cause(cause: Optional[OSError]) -> str:
    if cause is None:
        return "unknown error"
    return cause.strerror or str(cause)
