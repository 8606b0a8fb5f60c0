from __future__ import annotations

import io
from pathlib import Path
from typing import TextIO

import pytest

from codegen.errors import OutputIOError, TargetStateError
from codegen.keys import TargetKey
from codegen.sink import FilesystemSink
from codegen.writers import ServiceFileTarget

KEY = TargetKey("", "META-INF/services/app.plugins.Plugin")


def _manifest(class_dir: Path) -> Path:
    return class_dir / "META-INF" / "services" / "app.plugins.Plugin"


def test_contributions_are_deduplicated_in_order(sink: FilesystemSink, class_dir: Path) -> None:
    target = ServiceFileTarget(KEY, sink=sink)
    target.append("a\nb")
    target.append("b\nc\n")

    assert target.lines == ["a", "b", "b", "c"]
    target.complete()

    assert _manifest(class_dir).read_text(encoding="utf-8").splitlines() == ["a", "b", "c"]


def test_prior_content_is_merged_first(sink: FilesystemSink, class_dir: Path) -> None:
    manifest = _manifest(class_dir)
    manifest.parent.mkdir(parents=True)
    manifest.write_text("x\n#comment\n\ny\n", encoding="utf-8")

    target = ServiceFileTarget(KEY, sink=sink)
    target.append("y\nz")
    target.complete()

    assert manifest.read_text(encoding="utf-8") == "x\ny\nz\n"


def test_new_comment_lines_are_kept(sink: FilesystemSink, class_dir: Path) -> None:
    target = ServiceFileTarget(KEY, sink=sink)
    target.append("# generated\napp.Impl\n\n")
    target.complete()

    assert _manifest(class_dir).read_text(encoding="utf-8") == "# generated\napp.Impl\n"


def test_unreadable_prior_content_is_ignored(sink: FilesystemSink, class_dir: Path) -> None:
    manifest = _manifest(class_dir)
    manifest.parent.mkdir(parents=True)
    manifest.write_bytes(b"\xff\xfe\x00broken")

    target = ServiceFileTarget(KEY, sink=sink)
    target.append("app.Impl")
    target.complete()

    assert manifest.read_text(encoding="utf-8") == "app.Impl\n"


def test_complete_twice_is_rejected(sink: FilesystemSink) -> None:
    target = ServiceFileTarget(KEY, sink=sink)
    target.append("app.Impl")
    target.complete()

    with pytest.raises(TargetStateError):
        target.complete()
    with pytest.raises(TargetStateError):
        target.append("app.Other")


def test_destination_reuse_is_fatal(sink: FilesystemSink) -> None:
    ServiceFileTarget(KEY, sink=sink).complete()

    with pytest.raises(OutputIOError):
        ServiceFileTarget(KEY, sink=sink).complete()


class _ReadOnlySink:
    def open_write_once(self, location: str, namespace: str, name: str) -> TextIO:
        raise OSError("disk full")

    def open_read(self, location: str, namespace: str, name: str) -> TextIO:
        raise FileNotFoundError(name)


def test_write_failures_are_fatal() -> None:
    target = ServiceFileTarget(KEY, sink=_ReadOnlySink())
    target.append("app.Impl")

    with pytest.raises(OutputIOError) as excinfo:
        target.complete()

    assert isinstance(excinfo.value.__cause__, OSError)


class _MissingPriorContent(Exception):
    pass


class _FreshSink:
    """Sink without any committed content, reporting it with its own error type."""

    def __init__(self) -> None:
        self.written: dict[str, io.StringIO] = {}

    def open_write_once(self, location: str, namespace: str, name: str) -> TextIO:
        stream = _KeepOpen()
        self.written[name] = stream
        return stream

    def open_read(self, location: str, namespace: str, name: str) -> TextIO:
        raise _MissingPriorContent(name)


class _KeepOpen(io.StringIO):
    def close(self) -> None:
        pass


def test_any_prior_read_failure_means_no_prior_content() -> None:
    sink = _FreshSink()
    target = ServiceFileTarget(KEY, sink=sink)
    target.append("app.Impl\napp.Impl\n")

    target.complete()

    assert sink.written[KEY.relative_name].getvalue() == "app.Impl\n"
