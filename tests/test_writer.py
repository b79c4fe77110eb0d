"""Tests for nested writes that create missing levels."""

import logging
from dataclasses import dataclass

import pytest
from pydantic import BaseModel, ConfigDict

from nestpath import get_from, set_on

BLAM = "blam"


@pytest.fixture()
def foo() -> dict[str, object]:
    return {
        "bar": {
            "n": None,
            "bin": {"fuz": 42, "fuzzy": "44"},
        }
    }


class Bag:
    pass


@dataclass(frozen=True)
class FrozenSettings:
    bin_count: int = 0


class Settings(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    bin_count: int = 0


class ValidatedScope(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    settings: Settings | None = None


def test_set_on_builds_nested_dicts() -> None:
    target: dict[str, object] = {}

    assert set_on(target, "name.first", "joe") == "joe"
    assert set_on(target, "name.last", "black") == "black"
    assert target == {"name": {"first": "joe", "last": "black"}}


def test_set_on_accepts_sequence_paths() -> None:
    target: dict[str, object] = {}

    assert set_on(target, ["name", "first"], "joe") == "joe"
    assert set_on(target, ("name", "last"), "black") == "black"
    assert target == {"name": {"first": "joe", "last": "black"}}


def test_set_on_leaves_path_sequence_intact() -> None:
    path = ["a", "b"]

    assert set_on({}, path, 1) == 1
    assert path == ["a", "b"]


def test_set_on_sparse_path_fails_after_partial_mutation() -> None:
    target: dict[str, object] = {}

    assert set_on(target, ["a", None, "b"], BLAM) is None
    # Levels created before the bad step are kept.
    assert target == {"a": {}}


def test_set_on_empty_final_step_fails_after_partial_mutation() -> None:
    target: dict[str, object] = {}

    assert set_on(target, "a.", BLAM) is None
    assert target == {"a": {}}

    assert set_on(target, "", BLAM) is None
    assert set_on(target, [], BLAM) is None
    assert set_on(target, ["a", 3], BLAM) is None
    assert target == {"a": {}}


def test_set_on_from_root_and_nested_contexts(foo) -> None:
    assert set_on(foo, "b.c.d", BLAM) == BLAM
    assert foo["b"]["c"]["d"] == BLAM
    assert set_on(foo, ["e", "f", "g"], BLAM) == BLAM
    assert foo["e"]["f"]["g"] == BLAM

    assert set_on(foo["bar"], "b.c.d", BLAM) == BLAM
    assert foo["bar"]["b"]["c"]["d"] == BLAM


def test_set_on_overwrites_existing_value() -> None:
    some = {"name": "joe black"}

    assert set_on(some, "name", "john doe") == "john doe"
    assert some["name"] == "john doe"


def test_set_on_replaces_none_and_missing_mid_path(foo) -> None:
    assert set_on(foo, "bar.n.b.c.d", BLAM) == BLAM
    assert foo["bar"]["n"] == {"b": {"c": {"d": BLAM}}}

    foo["bar"]["n"] = None
    assert set_on(foo, ["bar", "n", "b", "c", "d"], BLAM) == BLAM
    assert foo["bar"]["n"]["b"]["c"]["d"] == BLAM

    assert set_on(foo, "bar.u.b.c.d", BLAM) == BLAM
    assert foo["bar"]["u"]["b"]["c"]["d"] == BLAM


def test_set_on_rejects_invalid_path_types() -> None:
    foo = {"a": 42}

    assert set_on({}, {}, BLAM) is None
    assert set_on(foo, 42, BLAM) is None
    assert set_on(foo, True, BLAM) is None
    assert set_on(foo, lambda: "boom", BLAM) is None
    assert foo == {"a": 42}


@pytest.mark.parametrize(
    "root",
    [42, "can't touch this", True, None, (1, 2), lambda: BLAM],
)
def test_set_on_rejects_non_container_roots(root) -> None:
    assert set_on(root, "b.c", BLAM) is None


def test_set_on_does_not_overwrite_non_container_sub_paths(foo) -> None:
    def fn_foo() -> str:
        return BLAM

    for value in (42, "can't touch this", True, fn_foo, (1, 2)):
        foo["bar"]["bin"]["fuz"] = value
        assert set_on(foo, "bar.bin.fuz.zip", BLAM) is None
        assert foo["bar"]["bin"]["fuz"] == value


def test_set_on_replaces_none_sub_path_value(foo) -> None:
    foo["bar"]["bin"]["fuz"] = None

    assert set_on(foo, "bar.bin.fuz.zip", BLAM) == BLAM
    assert foo["bar"]["bin"]["fuz"] == {"zip": BLAM}


def test_set_on_writes_into_lists() -> None:
    data: dict[str, object] = {"items": [{"name": "a"}, None]}

    assert set_on(data, "items.0.name", "b") == "b"
    assert set_on(data, "items.1.name", "c") == "c"
    assert data == {"items": [{"name": "b"}, {"name": "c"}]}

    assert set_on(data, "items.5.name", "d") is None
    assert set_on(data, "items.first.name", "d") is None
    assert data == {"items": [{"name": "b"}, {"name": "c"}]}

    values = [1, 2]
    assert set_on(values, "0", 9) == 9
    assert values == [9, 2]


def test_set_on_sets_attributes_on_objects() -> None:
    scope = Bag()

    assert set_on(scope, "model.read_settings.bin_count", 500) == 500
    assert scope.model == {"read_settings": {"bin_count": 500}}  # type: ignore[attr-defined]
    assert get_from(scope, "model.read_settings.bin_count") == 500


def test_set_on_reports_refused_attribute_writes(nestpath_config) -> None:
    frozen = FrozenSettings()

    assert set_on(frozen, "bin_count", 10) is None
    assert frozen.bin_count == 0

    assert set_on(Bag(), "_hidden", 1) is None


def test_set_on_respects_model_validation() -> None:
    scope = ValidatedScope()

    assert set_on(scope, "settings.bin_count", 500) == 500
    assert isinstance(scope.settings, Settings)
    assert scope.settings.bin_count == 500

    assert set_on(scope, "settings.bin_count", "lots") is None
    assert scope.settings.bin_count == 500
    assert set_on(scope, "unknown", 1) is None


def test_set_on_returns_the_stored_value() -> None:
    scope = ValidatedScope()

    stored = set_on(scope, "settings.bin_count", "7")
    assert stored == 7
    assert isinstance(stored, int)
    assert scope.settings is not None
    assert scope.settings.bin_count == 7


def test_set_on_then_get_from_round_trips() -> None:
    target: dict[str, object] = {}
    value = object()

    assert set_on(target, "x.y.z", value) is value
    assert get_from(target, "x.y.z") is value

    assert set_on(target, "a.b.c", 7) == 7
    assert target["a"] == {"b": {"c": 7}}


def test_set_on_traces_failures_when_enabled(nestpath_config, caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="nestpath")
    nestpath_config.trace_fallbacks = True

    assert set_on(42, "a", 1) is None
    assert "root is not a writable container" in caplog.text
