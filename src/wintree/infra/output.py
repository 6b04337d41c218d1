from __future__ import annotations

"""
Output Sink Infrastructure.

Line-oriented destinations for rendered trees. The console sink writes to a
text stream; the file sink starts from an empty file and appends one line
at a time. Write failures surface as OSError to the orchestration layer.

Entry names are whatever the filesystem returned, including names that are
not valid in the output encoding (undecodable bytes on POSIX come back from
os.scandir as lone surrogates). Neither sink lets such a name abort a run.
"""

import logging
import os
import sys
from typing import Any, Optional, TextIO

logger = logging.getLogger(__name__)

# POSIX names carry their raw bytes as surrogate escapes; Windows names are
# UTF-16 and may hold unpaired surrogates.
_FILE_ENCODING_ERRORS = "surrogatepass" if os.name == "nt" else "surrogateescape"

# -----------------------------------------------------------------------------
# SINKS
# -----------------------------------------------------------------------------

class ConsoleSink:
    """
    Writes lines to a text stream (standard output by default).

    Characters the stream cannot encode are written as backslash escapes.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream: TextIO = stream if stream is not None else sys.stdout

    @property
    def target(self) -> str:
        return "<stdout>"

    def __enter__(self) -> ConsoleSink:
        return self

    def __exit__(self, *exc: Any) -> None:
        self._stream.flush()

    def write_line(self, text: str) -> None:
        line = text + "\n"
        try:
            self._stream.write(line)
        except UnicodeEncodeError:
            encoding = getattr(self._stream, "encoding", None) or "utf-8"
            self._stream.write(line.encode(encoding, "backslashreplace").decode(encoding))


class FileSink:
    """
    Appends lines to a file, removing any previous file first.

    Parent directories are created on open. The file is opened in append
    mode so each write lands after the previous line. Names that are not
    valid UTF-8 are written back as their original bytes.
    """

    def __init__(self, path: str):
        self.path = os.path.abspath(path)
        self._handle: Optional[TextIO] = None

    @property
    def target(self) -> str:
        return self.path

    def __enter__(self) -> FileSink:
        _ensure_parent_dir(self.path)
        if os.path.exists(self.path):
            logger.debug(f"Removing existing output file: {self.path}")
            os.remove(self.path)
        self._handle = open(
            self.path,
            "a",
            encoding="utf-8",
            errors=_FILE_ENCODING_ERRORS,
            newline="\n",
        )
        return self

    def __exit__(self, *exc: Any) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def write_line(self, text: str) -> None:
        if self._handle is None:
            raise RuntimeError(f"Output file is not open: {self.path}")
        self._handle.write(text + "\n")


def open_sink(output_file: str = "", stream: Optional[TextIO] = None) -> ConsoleSink | FileSink:
    """
    Select the sink for a render: a file when a path is given, else the console.

    Args:
        output_file: Destination file path, empty for console output.
        stream: Console stream override (used when no file is given).
    """
    if output_file:
        return FileSink(output_file)
    return ConsoleSink(stream)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _ensure_parent_dir(path: str) -> None:
    parent = os.path.dirname(path)
    if parent and not os.path.exists(parent):
        os.makedirs(parent, exist_ok=True)
