from __future__ import annotations

import argparse
import json
import logging
import subprocess
import sys
from pathlib import Path

from .base import GenerationOptions
from .engine import run_generation
from .errors import GenerationError
from .templates import discover_templates


_VERSION_COMMANDS = (
    ("git", "describe", "--tags", "--exact-match"),
    ("git", "rev-parse", "--short", "HEAD"),
)


def _resolve_version(template_dir: Path) -> str:
    """Exact tag at HEAD, else short commit of the repository holding the templates, else 'undefined'."""
    cwd = template_dir if template_dir.is_dir() else Path.cwd()
    for command in _VERSION_COMMANDS:
        try:
            completed = subprocess.run(command, cwd=cwd, capture_output=True, text=True, timeout=5)
        except (FileNotFoundError, subprocess.TimeoutExpired):
            break
        version = completed.stdout.strip()
        if completed.returncode == 0 and version:
            return version
    return "undefined"


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="python -m codegen",
        description="Render code generation templates into source files and service manifests.",
    )
    parser.add_argument("--templates", required=True, help="Directory containing .jinja/.j2 templates.")
    parser.add_argument("--out", help="Output directory for generated source files.")
    parser.add_argument(
        "--resources-out",
        help="Output directory for service manifests (defaults to --out).",
    )
    parser.add_argument("--suffix", default=".py", help="File suffix of generated source files.")
    parser.add_argument(
        "--incremental",
        action="store_true",
        help="Treat generated sources left by a previous build as already created.",
    )
    parser.add_argument(
        "--version",
        default=None,
        metavar="VERSION",
        help="Version exposed to templates. If omitted: git tag at HEAD, else short commit, else 'undefined'.",
    )
    parser.add_argument(
        "--report",
        default=None,
        help="Generation report file name (written under --out).",
    )
    parser.add_argument(
        "--list-templates",
        action="store_true",
        help="List the templates that would be rendered and exit.",
    )
    parser.add_argument(
        "--config",
        help="Optional JSON config file providing template context values.",
    )
    parser.add_argument(
        "--option",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Override or add a single template context value (may be repeated).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser.parse_args(argv)


def _option_value(raw: str) -> object:
    """JSON scalars and lists as such ('true', '8', '0.5', '["a"]'); anything else stays a string."""
    try:
        return json.loads(raw)
    except ValueError:
        return raw


def _template_context(config_path: str | None, options: list[str]) -> dict[str, object]:
    """Template context from a JSON object file, overridden by KEY=VALUE options."""
    context: dict[str, object] = {}
    if config_path:
        payload = json.loads(Path(config_path).read_text(encoding="utf-8"))
        if not isinstance(payload, dict):
            raise ValueError(f"Config file {config_path} must contain a JSON object.")
        context.update(payload)

    for item in options:
        key, sep, raw = item.partition("=")
        if not sep or not key.strip():
            raise ValueError(f"Invalid --option value '{item}'. Expected KEY=VALUE.")
        context[key.strip()] = _option_value(raw.strip())
    return context


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv if argv is not None else sys.argv[1:])
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    template_dir = Path(args.templates)

    if args.list_templates:
        try:
            names = discover_templates(template_dir)
        except FileNotFoundError as exc:
            raise SystemExit(f"Error: {exc}") from exc
        if names:
            print("Templates:")
            for name in names:
                print(f"  - {name}")
        else:
            print("No templates found.")
        return 0

    if not args.out:
        raise SystemExit("Error: --out is required for generation.")

    source_dir = Path(args.out)
    version = args.version if args.version is not None else _resolve_version(template_dir)
    try:
        extra = _template_context(args.config, args.option)
    except ValueError as exc:
        raise SystemExit(f"Error: {exc}") from exc

    options = GenerationOptions(
        version=version,
        template_dir=template_dir,
        source_dir=source_dir,
        class_dir=Path(args.resources_out) if args.resources_out else source_dir,
        source_suffix=args.suffix,
        incremental=args.incremental,
        extra=extra,
    )
    try:
        result = run_generation(options=options)
    except GenerationError as exc:
        print(f"Generation failed: {exc}", file=sys.stderr)
        return 1

    if args.report:
        report_path = source_dir / args.report
        report_payload = {
            "version": version,
            "templates": result.templates,
            "artifacts": [
                {
                    "key": str(artifact.key),
                    "type": artifact.artifact_type,
                    "regenerated": artifact.regenerated,
                    "collided": artifact.collided,
                }
                for artifact in result.artifacts
            ],
            "written": [str(path) for path in result.written],
            "diagnostics": [
                {"severity": d.severity, "message": d.message} for d in result.diagnostics
            ],
        }
        report_path.parent.mkdir(parents=True, exist_ok=True)
        report_path.write_text(json.dumps(report_payload, indent=2), encoding="utf-8")
        print(f"Wrote generation report: {report_path}")

    print(f"Generated {len(result.written)} file(s) from {len(result.templates)} template(s)")
    if result.failed:
        print("Generation reported errors.", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
