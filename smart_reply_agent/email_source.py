# smart_reply_agent/email_source.py

from typing import Optional, Protocol, TextIO, runtime_checkable
import sys


@runtime_checkable
class EmailSource(Protocol):
    """Interface for anything that can hand over the raw text of one email."""

    def get_email_text(self) -> str:
        ...


# ============================================================
# File email source
# ============================================================

class FileEmailSource:
    """
    Reads a received email saved as plain text (.txt, .eml).
    Read errors (missing file, bad encoding) are left to the caller.
    """

    def __init__(self, path: str, encoding: str = "utf-8"):
        self.path = path
        self.encoding = encoding

    def get_email_text(self) -> str:
        with open(self.path, "r", encoding=self.encoding) as f:
            return f.read()


# ============================================================
# Stdin email source
# ============================================================

class StdinEmailSource:
    """Reads the email from a text stream, sys.stdin by default."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def get_email_text(self) -> str:
        stream = self.stream if self.stream is not None else sys.stdin
        return stream.read()


def get_default_email_source(path: Optional[str] = None, encoding: str = "utf-8") -> EmailSource:
    """
    A file source for a real path, stdin for None or "-".
    """
    if path is None or path == "-":
        return StdinEmailSource()
    return FileEmailSource(path, encoding=encoding)
