"""Error types raised by the parsers and the layout tree builder."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from stylebox.style.tree import StyledNode


class StyleboxError(Exception):
    """Base class for every error raised by stylebox."""


class ParseError(StyleboxError):
    """Raised when HTML or CSS source cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)


class LayoutError(StyleboxError):
    """Raised when a styled tree cannot produce a layout tree."""

    def __init__(self, message: str, style_node: StyledNode | None = None):
        self.style_node = style_node
        super().__init__(message)
