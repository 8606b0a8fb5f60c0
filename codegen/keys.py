"""Identity of an output location: namespace plus relative name."""
from __future__ import annotations

from dataclasses import dataclass

from .errors import TargetKeyError


@dataclass(frozen=True, slots=True)
class TargetKey:
    namespace: str
    relative_name: str

    def __post_init__(self) -> None:
        if self.namespace is None:
            raise TargetKeyError("Target namespace must not be None.")
        if self.relative_name is None:
            raise TargetKeyError("Target relative name must not be None.")

    @property
    def package_path(self) -> str:
        """Namespace as a directory prefix ('a.b' -> 'a/b/', '' -> '')."""
        if not self.namespace:
            return ""
        return self.namespace.replace(".", "/") + "/"

    def __str__(self) -> str:
        if not self.namespace:
            return self.relative_name
        return f"{self.namespace}.{self.relative_name}"
