"""Generic renderable container."""

from __future__ import annotations

from typing import Iterator, List

from .renderable import RenderableNode, flatten, render_node


class Container:
    """Groups renderable content so it can be passed around as one value.

    Children are stored as embedded and converted to text only when the
    container is rendered, in the order they were embedded.
    """

    def __init__(self) -> None:
        self._children: List[RenderableNode] = []

    @property
    def children(self) -> tuple[RenderableNode, ...]:
        return tuple(self._children)

    def embed(self, *items: RenderableNode) -> "Container":
        """Append each item, flattening nested collections.

        An unrenderable item raises :class:`~oohtml.errors.InvalidRenderable`;
        items embedded before it in the same call are kept.
        """
        for node in flatten(items):
            self._children.append(node)
        return self

    def render(self) -> str:
        if not self._children:
            return ""
        return "".join(render_node(child) for child in self._children)

    def __html__(self) -> str:
        return self.render()

    def __str__(self) -> str:
        return self.render()

    def __len__(self) -> int:
        return len(self._children)

    def __iter__(self) -> Iterator[RenderableNode]:
        return iter(self._children)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(children={len(self._children)})"
