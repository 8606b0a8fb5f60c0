"""Output sinks: where generated targets are committed and read back from."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, TextIO

from .errors import DestinationExistsError

logger = logging.getLogger(__name__)

SOURCE_OUTPUT = "source-output"
CLASS_OUTPUT = "class-output"


class OutputSink(Protocol):
    def open_write_once(self, location: str, namespace: str, name: str) -> TextIO:
        """Create a destination for writing; raises DestinationExistsError if already created this pass."""

    def open_read(self, location: str, namespace: str, name: str) -> TextIO:
        """Open previously committed content; raises FileNotFoundError if there is none."""


class FilesystemSink:
    """Write-once sink backed by two output directories.

    Namespace dots map to directories. A destination may be created once per
    sink instance; a sink instance corresponds to one generation pass. With
    ``incremental=True`` generated sources already present on disk also count
    as created, which is how incremental compilers treat sources left by
    earlier builds. Resources stay overwritable.
    """

    def __init__(
        self,
        source_dir: Path,
        class_dir: Path,
        *,
        incremental: bool = False,
        encoding: str = "utf-8",
    ) -> None:
        self._roots = {
            SOURCE_OUTPUT: Path(source_dir),
            CLASS_OUTPUT: Path(class_dir),
        }
        self.incremental = incremental
        self.encoding = encoding
        self._created: set[Path] = set()
        self.written: list[Path] = []

    def resolve(self, location: str, namespace: str, name: str) -> Path:
        try:
            root = self._roots[location]
        except KeyError:
            supported = ", ".join(sorted(self._roots))
            raise ValueError(f"Unknown output location '{location}'. Supported: {supported}") from None
        path = root
        if namespace:
            path = path.joinpath(*namespace.split("."))
        return path / name

    def open_write_once(self, location: str, namespace: str, name: str) -> TextIO:
        path = self.resolve(location, namespace, name)
        if path in self._created:
            raise DestinationExistsError(f"Attempt to reopen a file for path {path}")
        if self.incremental and location == SOURCE_OUTPUT and path.exists():
            self._created.add(path)
            raise DestinationExistsError(f"File already exists from a previous build: {path}")
        self._created.add(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        stream = path.open("w", encoding=self.encoding, newline="")
        self.written.append(path)
        logger.debug("Opened %s for writing", path)
        return stream

    def open_read(self, location: str, namespace: str, name: str) -> TextIO:
        path = self.resolve(location, namespace, name)
        return path.open("r", encoding=self.encoding, newline="")
