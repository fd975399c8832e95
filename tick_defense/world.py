"""EntityStore - enemy and tower storage with component queries."""

from __future__ import annotations

from typing import Any, Callable, Generator, TypeVar, cast

from tick_defense.types import DeadEntityError, EntityId

T = TypeVar("T")

# Hook callback signature.
HookCallback = Callable[["EntityStore", EntityId, Any], None]


class EntityStore:
    """Arena of live entities keyed by stable integer ids.

    Component stores are plain dicts, so ``query`` yields entities in the
    order their component was attached. Enemies are attached once at
    spawn, which makes query order equal to spawn order.
    """

    def __init__(self) -> None:
        self._components: dict[type, dict[int, Any]] = {}
        self._next_id: int = 0
        self._alive: set[int] = set()
        self._on_attach: dict[type, list[HookCallback]] = {}
        self._on_detach: dict[type, list[HookCallback]] = {}

    def spawn(self) -> EntityId:
        eid = self._next_id
        self._next_id += 1
        self._alive.add(eid)
        return eid

    def despawn(self, entity_id: EntityId) -> None:
        self._alive.discard(entity_id)
        for ctype, store in self._components.items():
            component = store.pop(entity_id, None)
            if component is not None:
                for cb in self._on_detach.get(ctype, ()):
                    cb(self, entity_id, component)

    def attach(self, entity_id: EntityId, component: Any) -> None:
        ctype = type(component)
        if entity_id not in self._alive:
            raise DeadEntityError(
                entity_id,
                f"Cannot attach {ctype.__name__} to dead entity {entity_id}",
            )
        self._components.setdefault(ctype, {})[entity_id] = component
        for cb in self._on_attach.get(ctype, ()):
            cb(self, entity_id, component)

    def get(self, entity_id: EntityId, component_type: type[T]) -> T:
        if entity_id not in self._alive:
            raise DeadEntityError(
                entity_id, f"Entity {entity_id} is not alive"
            )
        store = self._components.get(component_type)
        if store is None or entity_id not in store:
            raise KeyError(
                f"Entity {entity_id} has no {component_type.__name__} component"
            )
        return cast(T, store[entity_id])

    def has(self, entity_id: EntityId, component_type: type) -> bool:
        if entity_id not in self._alive:
            return False
        store = self._components.get(component_type)
        return store is not None and entity_id in store

    def query(
        self, component_type: type[T]
    ) -> Generator[tuple[EntityId, T], None, None]:
        store = self._components.get(component_type)
        if store is None:
            return
        # Snapshot the ids so systems may despawn while iterating.
        for eid in list(store):
            if eid in self._alive and eid in store:
                yield eid, cast(T, store[eid])

    def count(self, component_type: type) -> int:
        store = self._components.get(component_type)
        if store is None:
            return 0
        return sum(1 for eid in store if eid in self._alive)

    def entities(self) -> frozenset[EntityId]:
        return frozenset(self._alive)

    def alive(self, entity_id: EntityId) -> bool:
        return entity_id in self._alive

    def clear(self) -> None:
        """Despawn every entity, firing detach hooks. Ids keep counting up."""
        for eid in sorted(self._alive):
            self.despawn(eid)

    # -- Change detection hooks --

    def on_attach(self, ctype: type, callback: HookCallback) -> None:
        self._on_attach.setdefault(ctype, []).append(callback)

    def on_detach(self, ctype: type, callback: HookCallback) -> None:
        self._on_detach.setdefault(ctype, []).append(callback)
