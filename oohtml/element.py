"""HTML element builder.

An element owns a :class:`~oohtml.container.Container` for its content and
adds a tag name, an attribute map and a set of classes. Rendering emits the
opening tag with its attributes, then (unless the element is self-closing)
the content and the closing tag.

Self-closing elements still accept embedded content; it is stored but never
rendered. Nothing is escaped: tag names, attribute values and child text are
emitted verbatim, so untrusted text must be escaped before it is embedded
(see :func:`oohtml.tags.escape`).

All setters return the element so calls can be chained::

    Element("a").set_href("/x").add_class("nav").embed("click me")
"""

from __future__ import annotations

from typing import Dict, Iterator, Optional

from .container import Container
from .errors import expect_string
from .renderable import RenderableNode


class Element:
    def __init__(self, tag_name: str, self_closing: bool = False, *, base_url: str = "") -> None:
        expect_string("tag_name", tag_name)
        if not tag_name:
            raise ValueError("tag_name must not be empty")
        self._tag_name = tag_name
        self._self_closing = bool(self_closing)
        self._base_url = expect_string("base_url", base_url)
        self._attributes: Dict[str, str] = {}
        # dict keys keep first-insertion order
        self._classes: Dict[str, None] = {}
        self._content = Container()

    @property
    def tag_name(self) -> str:
        return self._tag_name

    @property
    def self_closing(self) -> bool:
        return self._self_closing

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def attributes(self) -> Dict[str, str]:
        return dict(self._attributes)

    @property
    def classes(self) -> tuple[str, ...]:
        return tuple(self._classes)

    @property
    def children(self) -> tuple[RenderableNode, ...]:
        return self._content.children

    def embed(self, *items: RenderableNode) -> "Element":
        self._content.embed(*items)
        return self

    def set_attribute(self, name: str, value: Optional[str] = None) -> "Element":
        """Set ``name`` to ``value``; without a value the name doubles as it.

        ``set_attribute("required")`` renders as ``required="required"``.
        """
        expect_string("attribute name", name)
        if value is None:
            value = name
        else:
            expect_string(f"value of attribute {name!r}", value)
        self._attributes[name] = value
        return self

    def get_attribute(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self._attributes.get(name, default)

    def set_id(self, value: str) -> "Element":
        return self.set_attribute("id", expect_string("id", value))

    def set_href(self, value: str) -> "Element":
        return self.set_attribute("href", expect_string("href", value))

    def set_for(self, value: str) -> "Element":
        return self.set_attribute("for", expect_string("for", value))

    def set_action(self, value: str) -> "Element":
        """Set ``action``, prefixed with the element's base URL."""
        return self.set_attribute("action", self._base_url + expect_string("action", value))

    def set_method(self, value: str) -> "Element":
        return self.set_attribute("method", expect_string("method", value))

    def set_name(self, value: str) -> "Element":
        return self.set_attribute("name", expect_string("name", value))

    def set_id_and_name(self, value: str) -> "Element":
        return self.set_id(value).set_name(value)

    def set_type(self, value: str) -> "Element":
        return self.set_attribute("type", expect_string("type", value))

    def set_value(self, value: str) -> "Element":
        return self.set_attribute("value", expect_string("value", value))

    def set_style(self, value: str) -> "Element":
        return self.set_attribute("style", expect_string("style", value))

    def add_class(self, class_string: str) -> "Element":
        """Merge whitespace-separated class tokens into the element's classes."""
        expect_string("class", class_string)
        for token in class_string.split():
            self._classes.setdefault(token, None)
        return self

    def has_class(self, token: str) -> bool:
        return token in self._classes

    def _opening_tag(self) -> Iterator[str]:
        yield "<"
        yield self._tag_name
        for name, value in self._attributes.items():
            yield f' {name}="{value}"'
        if self._classes:
            yield f' class="{" ".join(self._classes)}"'

    def render(self) -> str:
        html = "".join(self._opening_tag())
        if self._self_closing:
            return html + " />"
        return f"{html}>{self._content.render()}</{self._tag_name}>"

    def __html__(self) -> str:
        return self.render()

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Element({self._tag_name!r}, self_closing={self._self_closing!r})"
