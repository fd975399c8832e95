"""Tests for EntityStore storage, queries and hooks."""
from __future__ import annotations

from dataclasses import dataclass

import pytest

from tick_defense.types import DeadEntityError
from tick_defense.world import EntityStore


@dataclass
class Health:
    value: int


@dataclass
class Tag:
    name: str


class TestSpawn:
    def test_ids_are_sequential(self):
        store = EntityStore()
        assert [store.spawn() for _ in range(3)] == [0, 1, 2]

    def test_ids_not_reused_after_despawn(self):
        store = EntityStore()
        a = store.spawn()
        store.despawn(a)
        assert store.spawn() == a + 1

    def test_alive(self):
        store = EntityStore()
        eid = store.spawn()
        assert store.alive(eid)
        store.despawn(eid)
        assert not store.alive(eid)


class TestComponents:
    def test_attach_and_get(self):
        store = EntityStore()
        eid = store.spawn()
        store.attach(eid, Health(5))
        assert store.get(eid, Health).value == 5
        assert store.has(eid, Health)
        assert not store.has(eid, Tag)

    def test_attach_to_dead_raises(self):
        store = EntityStore()
        eid = store.spawn()
        store.despawn(eid)
        with pytest.raises(DeadEntityError):
            store.attach(eid, Health(1))

    def test_get_dead_raises(self):
        store = EntityStore()
        eid = store.spawn()
        store.attach(eid, Health(1))
        store.despawn(eid)
        with pytest.raises(DeadEntityError) as exc:
            store.get(eid, Health)
        assert exc.value.entity_id == eid

    def test_get_missing_component_raises_key_error(self):
        store = EntityStore()
        eid = store.spawn()
        with pytest.raises(KeyError):
            store.get(eid, Health)


class TestQuery:
    def test_query_in_attach_order(self):
        store = EntityStore()
        ids = [store.spawn() for _ in range(4)]
        for eid in reversed(ids):
            store.attach(eid, Health(eid))
        assert [eid for eid, _ in store.query(Health)] == list(reversed(ids))

    def test_query_skips_despawned(self):
        store = EntityStore()
        a, b = store.spawn(), store.spawn()
        store.attach(a, Health(1))
        store.attach(b, Health(2))
        store.despawn(a)
        assert [eid for eid, _ in store.query(Health)] == [b]

    def test_despawn_during_query(self):
        store = EntityStore()
        for i in range(3):
            store.attach(store.spawn(), Health(i))
        seen = []
        for eid, health in store.query(Health):
            seen.append(eid)
            store.despawn(eid)
        assert seen == [0, 1, 2]
        assert store.count(Health) == 0

    def test_query_unknown_type_is_empty(self):
        assert list(EntityStore().query(Tag)) == []

    def test_count(self):
        store = EntityStore()
        for i in range(3):
            store.attach(store.spawn(), Health(i))
        assert store.count(Health) == 3
        assert store.count(Tag) == 0


class TestHooks:
    def test_attach_and_detach_hooks(self):
        store = EntityStore()
        events = []
        store.on_attach(Tag, lambda s, eid, c: events.append(("attach", eid, c.name)))
        store.on_detach(Tag, lambda s, eid, c: events.append(("detach", eid, c.name)))
        eid = store.spawn()
        store.attach(eid, Tag("a"))
        store.despawn(eid)
        assert events == [("attach", eid, "a"), ("detach", eid, "a")]

    def test_clear_fires_detach_hooks(self):
        store = EntityStore()
        detached = []
        store.on_detach(Tag, lambda s, eid, c: detached.append(eid))
        for name in "abc":
            store.attach(store.spawn(), Tag(name))
        store.clear()
        assert detached == [0, 1, 2]
        assert store.entities() == frozenset()
