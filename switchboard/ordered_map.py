# Switchboard — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `OrderedMap`, the insertion-ordered mapping Switchboard uses to keep
declaration order significant.

Entries live in a growable list of `_Entry` slots with a dict index from key to
slot. Overwriting a key replaces the value in its existing slot, so the key keeps
its position. Deleting a key leaves a tombstone (`None`) in its slot; once
tombstones make up more than half of the list the slots are compacted and the
index is rebuilt. Lookups, inserts, overwrites and deletes are O(1) amortized.

Copies rebuild the entry list from scratch, so mutating a copy never affects the
original.

Example:
    switches = OrderedMap()
    switches["force"] = Option.parse("force", False)
    switches["branch"] = Option.parse("branch", "main")
    switches["force"] = Option.parse("force", True)
    list(switches) == ["force", "branch"]
"""
from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping, MutableMapping
from copy import deepcopy
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")
G = TypeVar("G")

_MISSING = object()


@dataclass
class _Entry(Generic[K, V]):
    key: K
    value: V


class OrderedMap(MutableMapping[K, V], Generic[K, V]):
    """
    An insertion-ordered mapping with in-place overwrite and stable deletion.

    Supports the full `MutableMapping` interface plus `set`, `delete`, `each`,
    `merge` and `group_by`.
    """

    def __init__(self, initial: Mapping[K, V] | Iterable[tuple[K, V]] | None = None):
        self._entries: list[_Entry[K, V] | None] = []
        self._index: dict[K, int] = {}
        self._tombstones: int = 0
        self._version: int = 0
        if initial is not None:
            self.update(initial)

    def __getitem__(self, key: K) -> V:
        return self._entry(key).value

    def __setitem__(self, key: K, value: V) -> None:
        if key not in self._index:
            self._index[key] = len(self._entries)
            self._entries.append(_Entry(key, value))
            self._version += 1
        else:
            self._entry(key).value = value

    def __delitem__(self, key: K) -> None:
        slot = self._index.pop(key)
        self._entries[slot] = None
        self._tombstones += 1
        self._version += 1
        if self._tombstones * 2 > len(self._entries):
            self._compact()

    def __iter__(self) -> Iterator[K]:
        for entry in self._live_entries():
            yield entry.key

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __repr__(self) -> str:
        return f"OrderedMap({self.to_list()!r})"

    def __copy__(self) -> OrderedMap[K, V]:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> OrderedMap[K, V]:
        clone: OrderedMap[K, V] = type(self)()
        memo[id(self)] = clone
        for key, value in self.each():
            clone[deepcopy(key, memo)] = deepcopy(value, memo)
        return clone

    def _entry(self, key: K) -> _Entry[K, V]:
        entry = self._entries[self._index[key]]
        if entry is None:
            raise RuntimeError(f"OrderedMap index for {key!r} points at a deleted slot")
        return entry

    def _live_entries(self) -> Iterator[_Entry[K, V]]:
        version = self._version
        for entry in self._entries:
            if version != self._version:
                raise RuntimeError("OrderedMap changed size during iteration")
            if entry is not None:
                yield entry
        if version != self._version:
            raise RuntimeError("OrderedMap changed size during iteration")

    def _compact(self) -> None:
        self._entries = [entry for entry in self._entries if entry is not None]
        self._index = {entry.key: slot for slot, entry in enumerate(self._entries)}
        self._tombstones = 0

    def get(self, key: K, default: Any = None) -> Any:
        """Return the value for `key`, or `default` if it is absent."""
        if key not in self._index:
            return default
        return self._entry(key).value

    def set(self, key: K, value: V) -> V:
        """Set `key` to `value` and return the value."""
        self[key] = value
        return value

    def delete(self, key: K, default: Any = None) -> Any:
        """Remove `key` and return its value, or `default` if it was absent."""
        if key not in self._index:
            return default
        value = self[key]
        del self[key]
        return value

    def each(self):
        """Return a lazy, restartable view of `(key, value)` pairs in order."""
        return self.items()

    def copy(self) -> OrderedMap[K, V]:
        """Return a shallow copy with its own entry list."""
        return type(self)(self.each())

    def merge(self, other: Mapping[K, V] | Iterable[tuple[K, V]]) -> OrderedMap[K, V]:
        """Return a new map with `other` applied after this one."""
        merged = self.copy()
        merged.update(other)
        return merged

    def group_by(self, key_fn: Callable[[V], G]) -> OrderedMap[G, list[V]]:
        """
        Group values by `key_fn(value)`.

        Groups appear in order of first occurrence and keep the relative order of
        their members.
        """
        groups: OrderedMap[G, list[V]] = OrderedMap()
        for value in self.values():
            group_key = key_fn(value)
            group = groups.get(group_key, _MISSING)
            if group is _MISSING:
                group = groups.set(group_key, [])
            group.append(value)
        return groups

    def to_list(self) -> list[tuple[K, V]]:
        """Return the entries as a list of `(key, value)` tuples."""
        return [(entry.key, entry.value) for entry in self._live_entries()]
