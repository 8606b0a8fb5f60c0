"""Jinja2 binding of the output operations."""
from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from . import filters
from .output import Output


def build_environment(template_dir: Path, output: Output) -> Environment:
    """Build a Jinja2 environment whose templates write through ``output``.

    Templates reach the operations through the ``output`` global, e.g.::

        {% call output.source("app.models", "user") %}...{% endcall %}
        {% call output.service("app.plugins.Plugin") %}app.models.user{% endcall %}

    The text-shaping combinators are also registered as filters.
    """
    # Generated code, not HTML: nothing to escape.
    env = Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=False,
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )
    env.globals["output"] = output
    env.filters["trim"] = filters.trim
    env.filters["collapsible"] = filters.collapsible
    env.filters["lines_shortable"] = filters.lines_shortable
    return env
