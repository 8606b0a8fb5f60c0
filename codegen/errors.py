from __future__ import annotations


class GenerationError(Exception):
    """Base error for all generation-related failures."""


class TargetKeyError(GenerationError, ValueError):
    """Errors raised for malformed output target identities."""


class DestinationExistsError(GenerationError):
    """Raised by a sink when a write-once destination was already created in this pass."""


class OutputIOError(GenerationError):
    """Errors raised when reading or writing an output destination fails."""


class TargetConstructionError(GenerationError):
    """Errors raised when an output target cannot be constructed."""


class TargetStateError(GenerationError):
    """Errors raised when a target or registry is used outside its lifecycle."""


class TemplateRenderError(GenerationError):
    """Errors raised while rendering a template."""
