"""Text-shaping combinators applied to rendered content.

Every combinator takes either already rendered text or a zero-argument
renderer. A renderer is also kept as the *original* rendering, which some
combinators fall back to instead of the reshaped text.
"""
from __future__ import annotations

from typing import Callable, Union

Renderer = Callable[[], str]
Content = Union[str, Renderer]

LINE_LIMIT = 100


def _resolve(param: Content) -> tuple[str, Renderer | None]:
    if param is None:
        raise ValueError("Content must not be None.")
    if callable(param):
        return str(param()), param
    return str(param), None


def _indent_width(indent: int | str) -> int:
    if isinstance(indent, str):
        return len(indent)
    return int(indent)


def trim(param: Content) -> str:
    content, _ = _resolve(param)
    return content.strip()


def collapsible(param: Content) -> str:
    """Emit nothing for blank content, otherwise the original rendering."""
    content, original = _resolve(param)
    if not content.strip():
        return ""
    if original is not None:
        return str(original())
    return content


def lines_shortable(param: Content, indent: int | str = 0) -> str:
    """Collapse content onto one line when it fits in the remaining width.

    ``indent`` is the indentation of the current line, as a width or as the
    indentation string itself.
    """
    content, original = _resolve(param)
    collapsed = " ".join(content.split())
    if len(collapsed) < LINE_LIMIT - _indent_width(indent):
        return collapsed
    if original is not None:
        return str(original())
    return content
