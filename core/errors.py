"""
Errors Module
Exceptions raised when an input stylesheet cannot be used.
"""

from typing import Optional


class CuratorError(Exception):
    """Base class for fatal curation errors."""


class StylesheetReadError(CuratorError):
    """A stylesheet file is missing, unreadable or not valid text."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read stylesheet {path}: {reason}")


class StylesheetParseError(CuratorError):
    """A stylesheet has a syntax error at rule level."""

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None,
                 source: Optional[str] = None):
        self.message = message
        self.line = line
        self.column = column
        self.source = source
        location = f"{source or '<string>'}:{line}:{column}" if line is not None else (source or '<string>')
        super().__init__(f"{location}: {message}")
