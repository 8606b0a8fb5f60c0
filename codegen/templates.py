from __future__ import annotations

from pathlib import Path

TEMPLATE_SUFFIXES = (".jinja", ".j2")


def discover_templates(template_dir: Path, suffixes: tuple[str, ...] = TEMPLATE_SUFFIXES) -> list[str]:
    """
    Return the templates under a directory, relative to it and sorted.

    Names use forward slashes so they can be passed to a Jinja2 loader.
    Files and directories starting with '_' are partials and are skipped.
    """
    if not template_dir.is_dir():
        raise FileNotFoundError(f"Template directory not found: {template_dir}")
    names: list[str] = []
    for path in template_dir.rglob("*"):
        if not path.is_file() or path.suffix not in suffixes:
            continue
        rel = path.relative_to(template_dir)
        if any(part.startswith("_") for part in rel.parts):
            continue
        names.append(rel.as_posix())
    return sorted(names)
