"""Fluent in-memory collection for query results.

A `Collection` holds either a list (plain result sets) or a dict (keyed
result sets). Transformations return new collections and never touch the
database again.
"""

from __future__ import annotations

import functools
from collections.abc import Mapping
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Tuple, Union

KeyInput = Union[str, Callable[[Any], Any]]


def _retrieve(item: Any, key: KeyInput) -> Any:
    if callable(key):
        return key(item)
    if isinstance(item, Mapping):
        return item[key]
    return getattr(item, key)


class Collection:
    """List- or dict-backed result wrapper with chainable transformations."""

    def __init__(self, items: Union[Iterable[Any], Mapping[Any, Any], None] = None):
        if items is None:
            items = []
        if isinstance(items, Collection):
            items = items.all()
        self._items: Union[List[Any], Dict[Any, Any]]
        if isinstance(items, Mapping):
            self._items = dict(items)
        else:
            self._items = list(items)

    @property
    def is_keyed(self) -> bool:
        """Whether items are stored under explicit keys (dict-backed)."""

        return isinstance(self._items, dict)

    def _pairs(self) -> Iterator[Tuple[Any, Any]]:
        if isinstance(self._items, dict):
            return iter(self._items.items())
        return enumerate(self._items)

    def _from_pairs(self, pairs: Iterable[Tuple[Any, Any]]) -> Collection:
        if self.is_keyed:
            return Collection(dict(pairs))
        return Collection(value for _, value in pairs)

    def all(self) -> Union[List[Any], Dict[Any, Any]]:
        """Return a shallow copy of the underlying list or dict."""

        return self._items.copy()

    def to_list(self) -> List[Any]:
        return list(self)

    def keys(self) -> Collection:
        return Collection(key for key, _ in self._pairs())

    def values(self) -> Collection:
        return Collection(self.to_list())

    def count(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def map(self, fn: Callable[[Any], Any]) -> Collection:
        """Apply `fn` to every item, keeping keys."""

        return self._from_pairs((key, fn(value)) for key, value in self._pairs())

    def filter(self, fn: Optional[Callable[[Any], Any]] = None) -> Collection:
        """Keep items for which `fn` (or the item itself) is truthy."""

        check = fn if fn is not None else bool
        return self._from_pairs((key, value) for key, value in self._pairs() if check(value))

    def reject(self, fn: Callable[[Any], Any]) -> Collection:
        """Drop items for which `fn` is truthy."""

        return self.filter(lambda value: not fn(value))

    def reduce(self, fn: Callable[[Any, Any], Any], initial: Any = None) -> Any:
        return functools.reduce(fn, self, initial)

    def each(self, fn: Callable[[Any], Any]) -> Collection:
        """Call `fn` on every item; stop early when it returns `False`."""

        for value in self:
            if fn(value) is False:
                break
        return self

    def first(self, fn: Optional[Callable[[Any], Any]] = None, default: Any = None) -> Any:
        for value in self:
            if fn is None or fn(value):
                return value
        return default

    def last(self, fn: Optional[Callable[[Any], Any]] = None, default: Any = None) -> Any:
        for value in reversed(self.to_list()):
            if fn is None or fn(value):
                return value
        return default

    def pluck(self, value: KeyInput, key: Optional[KeyInput] = None) -> Collection:
        """Extract one field from every item, optionally keyed by another field."""

        if key is None:
            return Collection(_retrieve(item, value) for item in self)
        return Collection({_retrieve(item, key): _retrieve(item, value) for item in self})

    def key_by(self, key: KeyInput) -> Collection:
        """Re-key items by a field; later duplicates overwrite earlier ones."""

        return Collection({_retrieve(item, key): item for item in self})

    def group_by(self, key: KeyInput) -> Collection:
        """Group items into sub-collections by a field, in first-seen order."""

        groups: Dict[Any, List[Any]] = {}
        for item in self:
            groups.setdefault(_retrieve(item, key), []).append(item)
        return Collection({group: Collection(items) for group, items in groups.items()})

    def sort_by(self, key: KeyInput, *, reverse: bool = False) -> Collection:
        """Sort items by a field; keyed collections keep their keys."""

        ordered = sorted(self._pairs(), key=lambda pair: _retrieve(pair[1], key), reverse=reverse)
        return self._from_pairs(ordered)

    def sum(self, key: Optional[KeyInput] = None) -> Any:
        if key is None:
            return sum(self)
        return sum(_retrieve(item, key) for item in self)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items.values() if isinstance(self._items, dict) else self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, key: Any) -> Any:
        return self._items[key]

    def __contains__(self, value: Any) -> bool:
        return any(item == value for item in self)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Collection):
            return self._items == other._items
        return NotImplemented

    def __repr__(self) -> str:
        return f"Collection({self._items!r})"
