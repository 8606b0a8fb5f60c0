from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .keys import TargetKey


@dataclass(slots=True)
class GenerationOptions:
    version: str
    template_dir: Path
    source_dir: Path
    class_dir: Path
    source_suffix: str = ".py"
    incremental: bool = False
    extra: dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class GeneratedArtifact:
    key: TargetKey
    artifact_type: str
    regenerated: bool = False
    collided: bool = False
