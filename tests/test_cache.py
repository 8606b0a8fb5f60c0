from __future__ import annotations

import pytest

from codegen.cache import TargetCache
from codegen.errors import GenerationError, TargetConstructionError
from codegen.keys import TargetKey


def test_get_returns_the_same_instance() -> None:
    calls: list[TargetKey] = []

    def factory(key: TargetKey) -> object:
        calls.append(key)
        return object()

    cache: TargetCache[TargetKey, object] = TargetCache(factory)
    key = TargetKey("app", "User")

    first = cache.get(key)
    second = cache.get(TargetKey("app", "User"))

    assert first is second
    assert calls == [key]
    assert len(cache) == 1
    assert key in cache


def test_values_keep_insertion_order() -> None:
    cache: TargetCache[str, str] = TargetCache(str.upper)
    for name in ("b", "a", "c", "a"):
        cache.get(name)
    assert cache.values() == ["B", "A", "C"]
    assert list(cache) == ["b", "a", "c"]


def test_failing_factory_leaves_no_entry() -> None:
    def factory(key: str) -> str:
        raise RuntimeError("boom")

    cache: TargetCache[str, str] = TargetCache(factory)
    with pytest.raises(TargetConstructionError) as excinfo:
        cache.get("broken")

    assert isinstance(excinfo.value.__cause__, RuntimeError)
    assert "broken" not in cache
    assert len(cache) == 0


def test_generation_errors_from_factory_propagate_unchanged() -> None:
    class Custom(GenerationError):
        pass

    def factory(key: str) -> str:
        raise Custom(key)

    cache: TargetCache[str, str] = TargetCache(factory)
    with pytest.raises(Custom):
        cache.get("x")


def test_as_map_is_read_only() -> None:
    cache: TargetCache[str, str] = TargetCache(str.upper)
    cache.get("a")
    view = cache.as_map()
    assert dict(view) == {"a": "A"}
    with pytest.raises(TypeError):
        view["b"] = "B"  # type: ignore[index]
