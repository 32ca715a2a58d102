"""Tests for configstore.store.ConfigStore."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from configstore import ConfigParseError, ConfigPersistenceError, ConfigStore, FileOptions
from configstore.core.models import DEFAULT_DIR_NAME
from configstore.infrastructure.paths import FixedEnvironment

SAMPLE = {"a": [{"b": {"c": 3}}], "d": "D"}


def test_default_values(env: FixedEnvironment) -> None:
    conf = ConfigStore(environment=env)
    assert conf.path == env.cwd() / DEFAULT_DIR_NAME / "settings.json"
    assert conf.store == {}
    assert not conf.path.exists()


def test_methods(env: FixedEnvironment) -> None:
    conf = ConfigStore(environment=env)

    assert conf.set(SAMPLE) is None
    assert conf.path.exists()
    assert conf.store == SAMPLE

    assert conf.has("d")
    assert conf.get("d") == "D"
    assert conf.has("a.0.b")
    assert conf.get(["a", 0, "b", "c"]) == 3
    assert conf.get("a.0.b.c") == 3
    assert conf.get() is None

    assert not conf.has("n")
    assert conf.get("n") is None
    assert conf.get("n", "Def Val") == "Def Val"
    assert not conf.has("n")

    conf.set("n", "New Value")
    assert conf.has("n")
    assert conf.get("n") == "New Value"
    assert conf.get("n", "Def Val") == "New Value"

    assert conf.delete("n") is True
    assert not conf.has("n")
    assert conf.delete("n") is False

    assert conf.clear() is None
    assert conf.store == {}
    assert not conf.has("a.0.b.c")


def test_bulk_set_is_a_deep_copy(env: FixedEnvironment) -> None:
    conf = ConfigStore(environment=env)
    source = {"a": [{"b": {"c": 3}}]}
    conf.set(source, "ignored")
    source["a"][0]["b"]["c"] = 99
    assert conf.get("a.0.b.c") == 3
    assert conf.store == {"a": [{"b": {"c": 3}}]}


def test_bulk_set_replaces_rather_than_merges(env: FixedEnvironment) -> None:
    conf = ConfigStore(environment=env)
    conf.set("old", 1)
    conf.set({"new": 2})
    assert conf.store == {"new": 2}


def test_round_trip_through_fresh_store(env: FixedEnvironment) -> None:
    conf = ConfigStore("roundtrip", dir_path="portable", environment=env)
    conf.set(SAMPLE)
    assert json.loads(conf.path.read_text(encoding="utf-8")) == SAMPLE

    again = ConfigStore("roundtrip", dir_path="portable", environment=env)
    assert again.store == SAMPLE


def test_set_path_autovivifies_and_persists(env: FixedEnvironment) -> None:
    conf = ConfigStore(environment=env)
    conf.set("o.p.q", "X")
    assert conf.store == {"o": {"p": {"q": "X"}}}
    assert ConfigStore(environment=env).store == {"o": {"p": {"q": "X"}}}


@pytest.mark.parametrize(
    "key_path, value",
    [
        ("k", 1),
        ("x.y", None),
        (["with.dot", "inner"], [1, 2]),
        ("list.1", {"z": False}),
        ("deep.a.b.c.d", ""),
    ],
)
def test_set_then_get_and_has(env: FixedEnvironment, key_path, value) -> None:
    conf = ConfigStore(environment=env)
    conf.set(key_path, value)
    assert conf.has(key_path)
    assert key_path in conf
    assert conf.get(key_path, "default") == value


def test_delete_and_clear_are_not_persisted(env: FixedEnvironment) -> None:
    conf = ConfigStore(environment=env)
    conf.set(SAMPLE)

    assert conf.delete("d") is True
    assert ConfigStore(environment=env).get("d") == "D"

    conf.clear()
    assert ConfigStore(environment=env).store == SAMPLE

    conf.set("n", 1)
    assert ConfigStore(environment=env).store == {"n": 1}


def test_explicit_save_persists_delete(env: FixedEnvironment) -> None:
    conf = ConfigStore(environment=env)
    conf.set(SAMPLE)
    conf.delete("a")
    conf.save()
    assert ConfigStore(environment=env).store == {"d": "D"}


def test_instances_do_not_share_documents(env: FixedEnvironment) -> None:
    first = ConfigStore(environment=env)
    second = ConfigStore(environment=env)
    first.set("k", 1)
    assert not second.has("k")
    second.set("j", 2)
    assert ConfigStore(environment=env).store == {"j": 2}


def test_user_profile_custom_name(env: FixedEnvironment) -> None:
    conf = ConfigStore("config-store-test", dir_path="userProfile", environment=env)
    assert conf.path == env.home() / DEFAULT_DIR_NAME / "config-store-test.json"
    conf.set(SAMPLE)
    assert json.loads(conf.path.read_text(encoding="utf-8")) == conf.store


def test_absolute_dir_path(env: FixedEnvironment, tmp_path: Path) -> None:
    conf = ConfigStore(dir_path=str(tmp_path / "conf"), environment=env)
    assert conf.path == tmp_path / "conf" / "settings.json"


def test_malformed_file_fails_construction(env: FixedEnvironment) -> None:
    path = env.cwd() / DEFAULT_DIR_NAME / "settings.json"
    path.parent.mkdir()
    path.write_text('{"a": ', encoding="utf-8")
    with pytest.raises(ConfigParseError) as info:
        ConfigStore(environment=env)
    assert str(path) in str(info.value)


def test_file_options_mapping(env: FixedEnvironment) -> None:
    conf = ConfigStore(environment=env, file_options={"indent": 4, "unknown": True})
    assert conf.file_options == FileOptions(indent=4)
    conf.set("k", 1)
    assert conf.path.read_text(encoding="utf-8") == '{\n    "k": 1\n}'


def test_file_options_rejects_other_types(env: FixedEnvironment) -> None:
    with pytest.raises(TypeError):
        ConfigStore(environment=env, file_options=4)  # type: ignore[arg-type]


def test_failed_save_keeps_memory_change(env: FixedEnvironment) -> None:
    conf = ConfigStore(environment=env)
    conf.set("k", 1)
    with pytest.raises(ConfigPersistenceError):
        conf.set("bad", {1, 2})
    assert conf.has("bad")
    assert ConfigStore(environment=env).store == {"k": 1}


def test_replace_all_rejects_non_mapping(env: FixedEnvironment) -> None:
    conf = ConfigStore(environment=env)
    with pytest.raises(TypeError):
        conf.replace_all([("a", 1)])  # type: ignore[arg-type]


def test_repr_shows_path(env: FixedEnvironment) -> None:
    conf = ConfigStore(environment=env)
    assert str(conf.path) in repr(conf)


def test_bulk_set_tuples_behave_like_lists(env: FixedEnvironment) -> None:
    conf = ConfigStore(environment=env)
    conf.set({"t": (1, 2)})
    assert conf.store == {"t": [1, 2]}
    assert conf.has("t.0")
    conf.set("t.0", 9)
    assert conf.get("t.0") == 9
    assert conf.delete("t.0") is True
    assert conf.get("t") == [2]


def test_bulk_set_non_string_keys_match_reloaded_file(env: FixedEnvironment) -> None:
    conf = ConfigStore(environment=env)
    conf.set({1: "a", "nested": {2.5: True, None: 0}})
    assert conf.has("1")
    assert conf.get("1") == "a"
    assert conf.get(["nested", "2.5"]) is True
    assert conf.get("nested.null") == 0
    assert ConfigStore(environment=env).store == conf.store


def test_set_path_value_is_stored_in_json_shape(env: FixedEnvironment) -> None:
    conf = ConfigStore(environment=env)
    value = {"pair": (1, 2), 3: "x"}
    conf.set("v", value)
    assert conf.get("v") == {"pair": [1, 2], "3": "x"}
    assert conf.delete("v.pair.1") is True
    value["pair"] = ()
    assert conf.get("v.pair") == [1]
    assert ConfigStore(environment=env).get("v") == {"pair": [1, 2], "3": "x"}
