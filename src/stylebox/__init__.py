"""stylebox: CSS cascade and layout box tree construction."""

__version__ = "0.1.0"

from stylebox.config import StyleboxConfig  # noqa: E402
from stylebox.errors import LayoutError, ParseError, StyleboxError  # noqa: E402
from stylebox.pipeline import RenderTree, render  # noqa: E402

__all__ = [
    "StyleboxConfig",
    "LayoutError",
    "ParseError",
    "StyleboxError",
    "RenderTree",
    "render",
]
