"""Classification and text conversion of renderable nodes.

A renderable node is one of:

* a primitive value (``str`` or any :class:`numbers.Number`),
* an ordered or keyed collection of renderable nodes (mappings contribute
  their values; sets are rejected because their order is not stable),
* an object exposing ``render()`` or the ``__html__()`` markup protocol.
"""

from __future__ import annotations

from collections.abc import ItemsView, Iterable, Iterator, KeysView, Mapping, Set
from numbers import Number
from typing import Any, Protocol, Union, runtime_checkable

from .errors import InvalidRenderable

PRIMITIVE_TYPES = (str, Number)


@runtime_checkable
class Renderable(Protocol):
    def render(self) -> str: ...


@runtime_checkable
class HtmlRenderable(Protocol):
    def __html__(self) -> str: ...


RenderableNode = Union[str, Number, Renderable, HtmlRenderable, Iterable[Any]]


def _has_method(value: Any, name: str) -> bool:
    # classes expose their methods unbound
    return not isinstance(value, type) and callable(getattr(value, name, None))


def is_render_capable(value: Any) -> bool:
    return _has_method(value, "render") or _has_method(value, "__html__")


def is_collection(value: Any) -> bool:
    """Return True for values whose items are embedded one by one."""
    if isinstance(value, PRIMITIVE_TYPES) or is_render_capable(value):
        return False
    if isinstance(value, (bytes, bytearray, memoryview)):
        return False
    if isinstance(value, Set) and not isinstance(value, (KeysView, ItemsView)):
        # dict views keep insertion order, other sets do not
        return False
    return isinstance(value, (Mapping, Iterable))


def is_renderable(value: Any) -> bool:
    if isinstance(value, PRIMITIVE_TYPES):
        return True
    return is_render_capable(value) or is_collection(value)


def check_renderable(value: Any) -> Any:
    """Return ``value`` unchanged or raise :class:`InvalidRenderable`."""
    if not is_renderable(value):
        raise InvalidRenderable(value)
    return value


def flatten(items: Iterable[Any]) -> Iterator[Any]:
    """Yield the leaf nodes of ``items`` in order, expanding nested collections.

    Nesting depth is unbounded; an explicit stack of iterators is used
    instead of recursion. Leaves are checked as they are reached, so a bad
    leaf raises only after every earlier leaf has been yielded.
    """
    stack: list[Iterator[Any]] = [iter(items)]
    while stack:
        try:
            item = next(stack[-1])
        except StopIteration:
            stack.pop()
            continue
        if is_collection(item):
            stack.append(iter(item.values() if isinstance(item, Mapping) else item))
        else:
            yield check_renderable(item)


def render_node(node: Any) -> str:
    """Return the text of a single, already checked leaf node."""
    if isinstance(node, str):
        return str(node)
    if _has_method(node, "render"):
        return node.render()
    if _has_method(node, "__html__"):
        return node.__html__()
    return str(node)


__all__ = [
    "HtmlRenderable",
    "Renderable",
    "RenderableNode",
    "check_renderable",
    "flatten",
    "is_collection",
    "is_render_capable",
    "is_renderable",
    "render_node",
]
