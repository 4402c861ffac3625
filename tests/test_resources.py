from dataclasses import dataclass, field

import pytest

from pivk.resources import Resource, ResourceManager


@dataclass
class Buffer(Resource):
    name: str = ""
    size: int = 0
    log: list = field(default_factory=list)

    def _free(self):
        self.log.append(self.name)


def test_numeric_keys_count_from_zero():
    manager = ResourceManager(render="rnd")
    stored = [manager.add(Buffer(name=n)) for n in ("a", "b", "c")]
    assert [s.entry_key for s in stored] == [0, 1, 2]
    assert manager.find(1).name == "b"
    assert len(manager) == 3


def test_add_returns_stored_copy():
    manager = ResourceManager(render=None)
    original = Buffer(name="cam", size=4)
    stored = manager.add(original)
    assert stored == original
    assert stored is not original
    assert original.entry_key is None


def test_named_keys_replace_existing():
    manager = ResourceManager(render=None, keyed_by_name=True)
    manager.add(Buffer(name="cam", size=1))
    manager.add(Buffer(name="cam", size=2))
    assert len(manager) == 1
    assert manager.find("cam").size == 2


def test_find_unknown_returns_none():
    manager = ResourceManager(render=None, keyed_by_name=True)
    assert manager.find("missing") is None


def test_delete_frees_and_removes():
    log = []
    manager = ResourceManager(render=None, keyed_by_name=True)
    entry = manager.add(Buffer(name="prim", log=log))
    manager.add(Buffer(name="sync", log=log))
    assert manager.delete(entry) is manager
    assert log == ["prim"]
    assert manager.find("prim") is None
    assert len(manager) == 1


def test_delete_none_changes_nothing():
    manager = ResourceManager(render=None)
    manager.add(Buffer(name="x"))
    assert manager.delete(None) is manager
    assert len(manager) == 1


def test_clear_frees_all_and_keys_keep_counting():
    log = []
    manager = ResourceManager(render=None)
    manager.add(Buffer(name="a", log=log))
    manager.add(Buffer(name="b", log=log))
    assert manager.clear() is manager
    assert sorted(log) == ["a", "b"]
    assert len(manager) == 0
    assert manager.add(Buffer(name="c")).entry_key == 2


def test_non_resource_rejected():
    manager = ResourceManager(render=None)
    with pytest.raises(TypeError):
        manager.add("not a resource")