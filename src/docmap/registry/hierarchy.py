"""Traversal of a class and its ancestors."""

from __future__ import annotations

from collections.abc import Callable, Iterator


def iter_hierarchy(target: type) -> Iterator[type]:
    """Yield ``target`` followed by its ancestors, most-derived first.

    The order is the class's method resolution order, which Python computes
    once per class and which is always acyclic. ``object`` is never yielded.
    """

    if not isinstance(target, type):
        msg = f"Expected a class, got {target!r}"
        raise TypeError(msg)
    for cls in target.__mro__:
        if cls is object:
            break
        yield cls


def walk_hierarchy(target: type, visitor: Callable[[type], None]) -> None:
    for cls in iter_hierarchy(target):
        visitor(cls)


__all__ = ["iter_hierarchy", "walk_hierarchy"]
