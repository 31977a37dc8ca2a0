"""Read-only containers for evaluation contexts.

An Engine owns a single context for its whole lifetime. The context is
built once by `freeze`, which deep-copies the caller's structure into
containers that reject every mutation, so rules can never observe a
context that changes between evaluations and callers can keep mutating
their own objects without affecting the engine.

Cyclic structures are not supported: freezing one recurses until
Python's recursion limit is hit.
"""

import array
import copy
from collections.abc import Mapping, Sequence, Set
from types import MappingProxyType
from typing import Any, Iterator, NoReturn

from verdict_rules.errors import ImmutableContextViolation


def _refuse(*_args: Any, **_kwargs: Any) -> NoReturn:
  raise ImmutableContextViolation("context is frozen and cannot be modified")


class FrozenDict(Mapping):
  """Immutable mapping used for contexts and nested mappings."""

  __slots__ = ("_data",)

  def __init__(self, data: Mapping | None = None):
    object.__setattr__(self, "_data", MappingProxyType(dict(data or {})))

  def __getitem__(self, key: Any) -> Any:
    return self._data[key]

  def __iter__(self) -> Iterator[Any]:
    return iter(self._data)

  def __len__(self) -> int:
    return len(self._data)

  def __hash__(self) -> int:
    return hash(frozenset(self._data.items()))

  def __repr__(self) -> str:
    return f"FrozenDict({dict(self._data)!r})"

  def __setattr__(self, name: str, value: Any) -> NoReturn:
    _refuse()

  def __delattr__(self, name: str) -> NoReturn:
    _refuse()

  def __or__(self, other: Mapping) -> "FrozenDict":
    return freeze({**self._data, **other})

  def thaw(self) -> dict:
    """Return a mutable deep copy as plain dicts and lists."""
    return thaw(self)

  __setitem__ = _refuse
  __delitem__ = _refuse
  __ior__ = _refuse
  clear = _refuse
  pop = _refuse
  popitem = _refuse
  setdefault = _refuse
  update = _refuse


class FrozenList(Sequence):
  """Immutable sequence used for lists and tuples inside a context."""

  __slots__ = ("_items",)

  def __init__(self, items: Sequence | None = None):
    object.__setattr__(self, "_items", tuple(items or ()))

  def __getitem__(self, index: Any) -> Any:
    if isinstance(index, slice):
      return FrozenList(self._items[index])
    return self._items[index]

  def __len__(self) -> int:
    return len(self._items)

  def __eq__(self, other: object) -> bool:
    if isinstance(other, (FrozenList, list, tuple)):
      return list(self._items) == list(other)
    return NotImplemented

  def __hash__(self) -> int:
    return hash(self._items)

  def __repr__(self) -> str:
    return f"FrozenList({list(self._items)!r})"

  def __setattr__(self, name: str, value: Any) -> NoReturn:
    _refuse()

  def __delattr__(self, name: str) -> NoReturn:
    _refuse()

  __setitem__ = _refuse
  __delitem__ = _refuse
  __iadd__ = _refuse
  __imul__ = _refuse
  append = _refuse
  clear = _refuse
  extend = _refuse
  insert = _refuse
  pop = _refuse
  remove = _refuse
  reverse = _refuse
  sort = _refuse


def freeze(value: Any) -> Any:
  """Recursively copy `value` into immutable containers.

  Mappings become FrozenDict, sequences (lists, tuples, deques, arrays)
  become FrozenList, sets become frozenset and bytearrays become bytes.
  Strings, numbers and other immutable scalars are returned as is; any
  other object is deep-copied so the result shares no mutable state with
  the input.
  """
  if isinstance(value, (FrozenDict, FrozenList, str, bytes, int, float, complex, type(None))):
    return value
  if isinstance(value, Mapping):
    return FrozenDict({key: freeze(item) for key, item in value.items()})
  if isinstance(value, bytearray):
    return bytes(value)
  if isinstance(value, (Sequence, array.array)):
    return FrozenList([freeze(item) for item in value])
  if isinstance(value, Set):
    return frozenset(freeze(item) for item in value)
  return copy.deepcopy(value)


def freeze_context(context: Mapping | None) -> FrozenDict:
  """Freeze a caller-supplied context mapping.

  Raises:
    TypeError: If `context` is not a mapping.
  """
  if context is None:
    return FrozenDict()
  if not isinstance(context, Mapping):
    raise TypeError(f"context must be a mapping, got {type(context).__name__}")
  return freeze(context)


def thaw(value: Any) -> Any:
  """Inverse of `freeze`: rebuild plain dicts, lists and sets."""
  if isinstance(value, FrozenDict):
    return {key: thaw(item) for key, item in value.items()}
  if isinstance(value, FrozenList):
    return [thaw(item) for item in value]
  if isinstance(value, frozenset):
    return {thaw(item) for item in value}
  return value
