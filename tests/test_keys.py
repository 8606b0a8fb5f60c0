from __future__ import annotations

import pytest

from codegen.errors import TargetKeyError
from codegen.keys import TargetKey


def test_canonical_form_joins_namespace_and_name() -> None:
    assert str(TargetKey("app.models", "User")) == "app.models.User"


def test_canonical_form_omits_empty_namespace() -> None:
    assert str(TargetKey("", "META-INF/services/app.Plugin")) == "META-INF/services/app.Plugin"


@pytest.mark.parametrize(("namespace", "name"), [(None, "User"), ("app", None)])
def test_missing_fields_are_rejected(namespace: str | None, name: str | None) -> None:
    with pytest.raises(TargetKeyError):
        TargetKey(namespace, name)  # type: ignore[arg-type]


def test_target_key_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        TargetKey(None, "User")  # type: ignore[arg-type]


def test_equality_requires_both_fields() -> None:
    key = TargetKey("app.models", "User")
    assert key == TargetKey("app.models", "User")
    assert hash(key) == hash(TargetKey("app.models", "User"))
    assert key != TargetKey("app.views", "User")
    assert key != TargetKey("app.models", "Group")


def test_package_path() -> None:
    assert TargetKey("app.models", "User").package_path == "app/models/"
    assert TargetKey("", "User").package_path == ""
