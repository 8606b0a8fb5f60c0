"""Output targets: single-emission source files and accumulating service files."""
from __future__ import annotations

import logging

from .base import GeneratedArtifact
from .errors import DestinationExistsError, OutputIOError, TargetStateError
from .keys import TargetKey
from .postprocess import Rewriter, normalize_source
from .reporting import ERROR, WARNING, Reporter
from .sink import CLASS_OUTPUT, SOURCE_OUTPUT, OutputSink

logger = logging.getLogger(__name__)


class SourceFileTarget:
    """Generated source file, committed exactly once when its body has rendered."""

    def __init__(
        self,
        key: TargetKey,
        *,
        sink: OutputSink,
        reporter: Reporter,
        rewrite: Rewriter = normalize_source,
        suffix: str = ".py",
    ) -> None:
        self.key = key
        self._sink = sink
        self._reporter = reporter
        self._rewrite = rewrite
        self._file_name = key.relative_name + suffix
        self._parts: list[str] = []
        self.artifact: GeneratedArtifact | None = None

    @property
    def committed(self) -> bool:
        return self.artifact is not None

    @property
    def content(self) -> str:
        return "".join(self._parts)

    def append(self, text: str) -> None:
        if self.committed:
            raise TargetStateError(f"Source file {self.key} is already committed.")
        self._parts.append(text)

    def complete(self) -> GeneratedArtifact:
        if self.committed:
            raise TargetStateError(f"Source file {self.key} is already committed.")
        source_code = self._rewrite(self.content)
        regenerated = False
        collided = False
        try:
            with self._sink.open_write_once(SOURCE_OUTPUT, self.key.namespace, self._file_name) as writer:
                writer.write(source_code)
        except DestinationExistsError as exc:
            if self._identical_file_is_already_generated(source_code):
                # Incremental builds re-run generation over unchanged input.
                self._reporter.report(WARNING, f"Regenerated file with the same content: {self.key}")
                regenerated = True
            else:
                self._reporter.report(
                    ERROR,
                    "Generated source file name collision. "
                    f"Attempt to overwrite already generated file: {self.key}, {exc}",
                )
                collided = True
        except OSError as exc:
            raise OutputIOError(f"Failed to write generated source file {self.key}") from exc

        self.artifact = GeneratedArtifact(
            key=self.key,
            artifact_type="source",
            regenerated=regenerated,
            collided=collided,
        )
        logger.debug("Committed source file %s", self.key)
        return self.artifact

    def _identical_file_is_already_generated(self, source_code: str) -> bool:
        try:
            with self._sink.open_read(SOURCE_OUTPUT, "", self.key.package_path + self._file_name) as reader:
                existing = reader.read()
        except Exception as exc:  # noqa: BLE001
            logger.debug("No previously generated content for %s: %s", self.key, exc)
            return False
        return existing == source_code


class ServiceFileTarget:
    """Shared resource collecting lines from many contributions.

    Contributions accumulate over the whole pass and are merged with lines
    committed by earlier builds when the registry finalizes.
    """

    COMMENT_PREFIX = "#"

    def __init__(self, key: TargetKey, *, sink: OutputSink) -> None:
        self.key = key
        self._sink = sink
        self._lines: list[str] = []
        self.artifact: GeneratedArtifact | None = None

    @property
    def completed(self) -> bool:
        return self.artifact is not None

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    def append(self, text: str) -> None:
        if self.completed:
            raise TargetStateError(f"Service file {self.key} is already finalized.")
        self._lines.extend(text.splitlines())

    def complete(self) -> GeneratedArtifact:
        if self.completed:
            raise TargetStateError(f"Service file {self.key} is already finalized.")
        entries: dict[str, None] = {}
        for line in self._read_existing_entries():
            entries.setdefault(line)
        for line in self._lines:
            entries.setdefault(line)
        entries.pop("", None)

        try:
            with self._sink.open_write_once(CLASS_OUTPUT, self.key.namespace, self.key.relative_name) as writer:
                for line in entries:
                    writer.write(line + "\n")
        except (OSError, DestinationExistsError) as exc:
            raise OutputIOError(f"Failed to write service file {self.key}") from exc

        self.artifact = GeneratedArtifact(key=self.key, artifact_type="service")
        logger.debug("Committed service file %s with %d entries", self.key, len(entries))
        return self.artifact

    def _read_existing_entries(self) -> list[str]:
        try:
            with self._sink.open_read(CLASS_OUTPUT, self.key.namespace, self.key.relative_name) as reader:
                existing = reader.read()
        except Exception as exc:  # noqa: BLE001
            logger.debug("No existing entries for %s: %s", self.key, exc)
            return []
        return [line for line in existing.splitlines() if not line.startswith(self.COMMENT_PREFIX)]
