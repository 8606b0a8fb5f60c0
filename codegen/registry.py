from __future__ import annotations

import logging

from .base import GeneratedArtifact
from .cache import TargetCache
from .errors import TargetStateError
from .keys import TargetKey
from .postprocess import Rewriter, normalize_source
from .reporting import Reporter
from .sink import OutputSink
from .writers import ServiceFileTarget, SourceFileTarget

logger = logging.getLogger(__name__)


class TargetRegistry:
    """Table of every output target created during one generation pass.

    Created at the start of a pass and finalized once at its end, which
    commits every pending service file in the order it was first requested.
    """

    def __init__(
        self,
        *,
        sink: OutputSink,
        reporter: Reporter,
        rewrite: Rewriter = normalize_source,
        source_suffix: str = ".py",
    ) -> None:
        self.sink = sink
        self.reporter = reporter
        self.source_files: TargetCache[TargetKey, SourceFileTarget] = TargetCache(
            lambda key: SourceFileTarget(
                key,
                sink=sink,
                reporter=reporter,
                rewrite=rewrite,
                suffix=source_suffix,
            )
        )
        self.service_files: TargetCache[TargetKey, ServiceFileTarget] = TargetCache(
            lambda key: ServiceFileTarget(key, sink=sink)
        )
        self._finalized = False

    @property
    def finalized(self) -> bool:
        return self._finalized

    def source_file(self, namespace: str, name: str) -> SourceFileTarget:
        self._check_open()
        return self.source_files.get(TargetKey(namespace, name))

    def service_file(self, namespace: str, name: str) -> ServiceFileTarget:
        self._check_open()
        return self.service_files.get(TargetKey(namespace, name))

    def artifacts(self) -> list[GeneratedArtifact]:
        """Artifacts committed so far: source files, then service files."""
        committed: list[GeneratedArtifact] = []
        for target in (*self.source_files.values(), *self.service_files.values()):
            if target.artifact is not None:
                committed.append(target.artifact)
        return committed

    def finalize(self) -> list[GeneratedArtifact]:
        self._check_open()
        self._finalized = True
        for service_file in self.service_files.values():
            service_file.complete()
        logger.debug(
            "Finalized pass: %d source file(s), %d service file(s)",
            len(self.source_files),
            len(self.service_files),
        )
        return self.artifacts()

    def _check_open(self) -> None:
        if self._finalized:
            raise TargetStateError("Target registry is already finalized.")
