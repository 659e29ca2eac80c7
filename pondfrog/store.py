"""EntityStore - id-addressable storage for one entity kind."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, TypeVar

from pondfrog.types import EntityId, UnknownEntityError

T = TypeVar("T")


class EntityStore(Generic[T]):
    """Unordered collection with a stable id per entry.

    Removal during a frame is done by collecting ids and handing them to
    ``compact`` once iteration is over.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: dict[EntityId, T] = {}
        self._next_id: int = 0
        for item in items:
            self.spawn(item)

    def spawn(self, item: T) -> EntityId:
        eid = self._next_id
        self._next_id += 1
        self._items[eid] = item
        return eid

    def despawn(self, entity_id: EntityId) -> None:
        self._items.pop(entity_id, None)

    def compact(self, entity_ids: Iterable[EntityId]) -> int:
        removed = 0
        for eid in set(entity_ids):
            if self._items.pop(eid, None) is not None:
                removed += 1
        return removed

    def get(self, entity_id: EntityId) -> T:
        try:
            return self._items[entity_id]
        except KeyError:
            raise UnknownEntityError(
                entity_id, f"Entity {entity_id} is not alive"
            ) from None

    def alive(self, entity_id: EntityId) -> bool:
        return entity_id in self._items

    def items(self) -> list[tuple[EntityId, T]]:
        return list(self._items.items())

    def values(self) -> list[T]:
        return list(self._items.values())

    def ids(self) -> frozenset[EntityId]:
        return frozenset(self._items)

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.values())

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._items
