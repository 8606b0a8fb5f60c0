from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from jinja2 import TemplateError

from .base import GeneratedArtifact, GenerationOptions
from .errors import GenerationError, TemplateRenderError
from .output import Output
from .postprocess import Rewriter, normalize_source
from .registry import TargetRegistry
from .reporting import ERROR, Diagnostic, LoggingReporter
from .sink import FilesystemSink
from .templates import discover_templates
from .templating import build_environment

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RunResult:
    templates: list[str]
    artifacts: list[GeneratedArtifact]
    diagnostics: list[Diagnostic]
    written: list[Path]

    @property
    def failed(self) -> bool:
        return any(d.severity == ERROR for d in self.diagnostics)


def run_generation(
    *,
    options: GenerationOptions,
    reporter: LoggingReporter | None = None,
    rewrite: Rewriter = normalize_source,
) -> RunResult:
    """Run one generation pass over every template in ``options.template_dir``."""
    reporter = reporter if reporter is not None else LoggingReporter()
    try:
        templates = discover_templates(options.template_dir)
    except FileNotFoundError as exc:
        raise GenerationError(str(exc)) from exc
    if not templates:
        raise GenerationError(f"No templates found in {options.template_dir}")

    sink = FilesystemSink(
        options.source_dir,
        options.class_dir,
        incremental=options.incremental,
    )
    registry = TargetRegistry(
        sink=sink,
        reporter=reporter,
        rewrite=rewrite,
        source_suffix=options.source_suffix,
    )
    output = Output(registry)
    env = build_environment(options.template_dir, output)
    context = {"version": options.version, **options.extra}

    for name in templates:
        logger.debug("Rendering template %s", name)
        try:
            leftover = env.get_template(name).render(**context)
        except GenerationError:
            raise
        except TemplateError as exc:
            raise TemplateRenderError(f"Template '{name}' failed to render: {exc}") from exc
        except Exception as exc:  # pragma: no cover
            raise GenerationError(f"Template '{name}' failed while generating output") from exc
        if leftover.strip():
            logger.debug("Template %s produced text outside of any output target", name)

    artifacts = registry.finalize()
    return RunResult(
        templates=templates,
        artifacts=artifacts,
        diagnostics=list(reporter.diagnostics),
        written=list(sink.written),
    )
