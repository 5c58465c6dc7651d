"""Fluent construction of JSON values with call-order checking.

Values are plain Python objects: ``None``, ``bool``, ``int``, ``float``,
``str``, ``list`` and ``dict``.  The context objects returned by the builder
only offer the calls that are valid at that point. For example, after
``key()`` a value must follow.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List


@dataclass(frozen=True)
class _PendingKey:
    name: str


class Builder:
    """Builds one JSON value step by step."""

    def __init__(self) -> None:
        self._root: Any = None
        self._stack: List[Any] = []

    def key(self, key: str) -> "KeyContext":
        """Start an entry of the dictionary being built."""
        if not self._stack:
            raise RuntimeError("Can not create key!")
        if not isinstance(self._stack[-1], dict):
            raise RuntimeError("A key can only be given inside a dictionary")
        self._stack.append(_PendingKey(key))
        return KeyContext(self)

    def value(self, value: Any) -> "Builder":
        """Add a complete value at the current position."""
        self._add(value)
        return self

    def start_dict(self) -> "DictContext":
        """Open a dictionary at the current position."""
        self._stack.append({})
        return DictContext(self)

    def end_dict(self) -> "Builder":
        """Close the innermost dictionary."""
        if not self._stack:
            raise RuntimeError("Dict does not exist! Stack is empty!")
        current = self._stack[-1]
        if not isinstance(current, dict):
            raise RuntimeError("Current object is not a dictionary!")
        self._stack.pop()
        self._add(current)
        return self

    def start_array(self) -> "ArrayContext":
        """Open an array at the current position."""
        self._stack.append([])
        return ArrayContext(self)

    def end_array(self) -> "Builder":
        """Close the innermost array."""
        if not self._stack:
            raise RuntimeError("Array does not exist! Stack is empty!")
        current = self._stack[-1]
        if not isinstance(current, list):
            raise RuntimeError("Current object is not array!")
        self._stack.pop()
        self._add(current)
        return self

    def build(self) -> Any:
        """Return the finished value."""
        if self._root is None:
            raise RuntimeError("This root is empty!")
        if self._stack:
            raise RuntimeError("Stack is not empty! Root can't be constructed!")
        return self._root

    def _add(self, node: Any) -> None:
        if not self._stack:
            if self._root is not None:
                raise RuntimeError("Root is not empty!")
            self._root = node
            return
        top = self._stack[-1]
        if isinstance(top, list):
            top.append(node)
        elif isinstance(top, _PendingKey):
            self._stack.pop()
            self._stack[-1].setdefault(top.name, node)
        else:
            raise RuntimeError("unable to create node")


class _Context:
    __slots__ = ("_builder",)

    def __init__(self, builder: Builder) -> None:
        self._builder = builder


class KeyContext(_Context):
    """State right after a key: a value must follow."""

    __slots__ = ()

    def value(self, value: Any) -> "DictContext":
        self._builder.value(value)
        return DictContext(self._builder)

    def start_dict(self) -> "DictContext":
        return self._builder.start_dict()

    def start_array(self) -> "ArrayContext":
        return self._builder.start_array()


class DictContext(_Context):
    """State inside a dictionary: a key or the end of the dictionary."""

    __slots__ = ()

    def key(self, key: str) -> KeyContext:
        return self._builder.key(key)

    def end_dict(self) -> Builder:
        return self._builder.end_dict()


class ArrayContext(_Context):
    """State inside an array: more items or the end of the array."""

    __slots__ = ()

    def value(self, value: Any) -> "ArrayContext":
        self._builder.value(value)
        return ArrayContext(self._builder)

    def start_dict(self) -> DictContext:
        return self._builder.start_dict()

    def start_array(self) -> "ArrayContext":
        return self._builder.start_array()

    def end_array(self) -> Builder:
        return self._builder.end_array()