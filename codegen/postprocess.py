"""Rewriters applied to generated source text before it is committed."""
from __future__ import annotations

import re
from typing import Callable

Rewriter = Callable[[str], str]

_EXCESS_BLANK_LINES_RE = re.compile(r"\n{4,}")


def identity(text: str) -> str:
    return text


def normalize_source(text: str) -> str:
    """Normalize line endings and whitespace of generated source.

    Trailing whitespace is stripped from every line, runs of more than two
    blank lines are reduced to two, leading blank lines are dropped and the
    text ends with exactly one newline.
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = "\n".join(line.rstrip() for line in text.split("\n"))
    text = _EXCESS_BLANK_LINES_RE.sub("\n\n\n", text)
    text = text.strip("\n")
    return text + "\n" if text else ""
