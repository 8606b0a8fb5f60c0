from __future__ import annotations

from pathlib import Path

import pytest

from codegen.postprocess import identity
from codegen.registry import TargetRegistry
from codegen.reporting import LoggingReporter
from codegen.sink import FilesystemSink


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    return tmp_path / "generated-sources"


@pytest.fixture
def class_dir(tmp_path: Path) -> Path:
    return tmp_path / "classes"


@pytest.fixture
def sink(source_dir: Path, class_dir: Path) -> FilesystemSink:
    return FilesystemSink(source_dir, class_dir)


@pytest.fixture
def reporter() -> LoggingReporter:
    return LoggingReporter()


@pytest.fixture
def registry(sink: FilesystemSink, reporter: LoggingReporter) -> TargetRegistry:
    return TargetRegistry(sink=sink, reporter=reporter, rewrite=identity)
