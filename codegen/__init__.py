"""Output side of templated code generation.

Source files are committed once, as soon as their template body has rendered.
Service manifests collect contributions over a whole pass and are merged with
previously committed entries when the pass is finalized.
"""
from .base import GeneratedArtifact, GenerationOptions
from .cache import TargetCache
from .engine import RunResult, run_generation
from .errors import (
    DestinationExistsError,
    GenerationError,
    OutputIOError,
    TargetConstructionError,
    TargetKeyError,
    TargetStateError,
    TemplateRenderError,
)
from .keys import TargetKey
from .output import SERVICE_REGISTRY_PREFIX, Output
from .registry import TargetRegistry
from .reporting import ERROR, INFO, WARNING, Diagnostic, LoggingReporter
from .sink import CLASS_OUTPUT, SOURCE_OUTPUT, FilesystemSink
from .writers import ServiceFileTarget, SourceFileTarget

__all__ = [
    "CLASS_OUTPUT",
    "DestinationExistsError",
    "Diagnostic",
    "ERROR",
    "FilesystemSink",
    "GeneratedArtifact",
    "GenerationError",
    "GenerationOptions",
    "INFO",
    "LoggingReporter",
    "Output",
    "OutputIOError",
    "RunResult",
    "SERVICE_REGISTRY_PREFIX",
    "SOURCE_OUTPUT",
    "ServiceFileTarget",
    "SourceFileTarget",
    "TargetCache",
    "TargetConstructionError",
    "TargetKey",
    "TargetKeyError",
    "TargetRegistry",
    "TargetStateError",
    "TemplateRenderError",
    "WARNING",
    "run_generation",
]
