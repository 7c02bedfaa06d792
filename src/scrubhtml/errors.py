from __future__ import annotations

from dataclasses import dataclass


class SanitizeError(Exception):
    """Base class for errors raised by scrubhtml."""


class ParseFailure(SanitizeError):
    """The input could not be turned into a document tree."""


class SerializeFailure(SanitizeError):
    """The sanitized tree could not be serialized back to HTML."""


@dataclass(frozen=True, slots=True)
class ParseError:
    """A non-fatal diagnostic collected while parsing.

    These are informational: the parser is lenient and always recovers, so a
    non-empty error list never means the output is unsafe.
    """

    code: str
    line: int | None = None
    column: int | None = None
    category: str = "parse"
    message: str | None = None

    def __str__(self) -> str:
        where = ""
        if self.line is not None:
            where = f" at {self.line}:{self.column}" if self.column is not None else f" at line {self.line}"
        return f"({self.category}) {self.message or self.code}{where}"
