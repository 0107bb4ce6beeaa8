"""Tag constructor helpers built on :class:`~oohtml.element.Element`.

Each content helper embeds its positional arguments, so documents read as
nested calls::

    html(head(title("Home")), body(h1("Welcome"), p("Hello")))
"""

from __future__ import annotations

import html as html_lib
from typing import Any

from .container import Container
from .element import Element
from .errors import expect_string


def escape(text: Any) -> str:
    """Return ``text`` as a string with HTML special characters escaped."""
    return html_lib.escape(str(text))


def element(name: str, *content: Any, base_url: str = "") -> Element:
    return Element(name, base_url=base_url).embed(content)


def void_element(name: str, *, base_url: str = "") -> Element:
    """Self-closing element, e.g. ``<br />``."""
    return Element(name, self_closing=True, base_url=base_url)


def html(*content: Any) -> Element:
    return element("html", content)


def head(*content: Any) -> Element:
    return element("head", content)


def body(*content: Any) -> Element:
    return element("body", content)


def div(*content: Any) -> Element:
    return element("div", content)


def h1(*content: Any) -> Element:
    return element("h1", content)


def h2(*content: Any) -> Element:
    return element("h2", content)


def h3(*content: Any) -> Element:
    return element("h3", content)


def ul(*content: Any) -> Element:
    return element("ul", content)


def ol(*content: Any) -> Element:
    return element("ol", content)


def li(*content: Any) -> Element:
    return element("li", content)


def span(*content: Any) -> Element:
    return element("span", content)


def p(*content: Any) -> Element:
    return element("p", content)


def em(*content: Any) -> Element:
    return element("em", content)


def strong(*content: Any) -> Element:
    return element("strong", content)


def sub(*content: Any) -> Element:
    return element("sub", content)


def sup(*content: Any) -> Element:
    return element("sup", content)


def a(*content: Any) -> Element:
    return element("a", content)


def label(*content: Any) -> Element:
    return element("label", content)


def button(*content: Any) -> Element:
    return element("button", content)


def table(*content: Any) -> Element:
    return element("table", content)


def tr(*content: Any) -> Element:
    return element("tr", content)


def th(*content: Any) -> Element:
    return element("th", content)


def td(*content: Any) -> Element:
    return element("td", content)


def form(*content: Any, base_url: str = "") -> Element:
    """``<form>`` whose ``set_action`` values are prefixed with ``base_url``."""
    return element("form", content, base_url=base_url)


def script(*content: Any) -> Element:
    return element("script", content).set_type("text/javascript")


def html5_doctype() -> str:
    return "<!DOCTYPE html>"


def title(content: Any) -> Element:
    """``<title>`` holding the escaped text of ``content``."""
    return element("title", escape(content))


def css_link(url: str, media: str = "all") -> Element:
    expect_string("url", url)
    expect_string("media", media)
    return (
        void_element("link")
        .set_attribute("rel", "stylesheet")
        .set_type("text/css")
        .set_href(url)
        .set_attribute("media", media)
    )


def script_src(url: str) -> Element:
    """Empty ``<script>`` loading ``url``."""
    expect_string("url", url)
    return element("script").set_type("text/javascript").set_attribute("src", url)


def meta_charset(charset: str = "utf-8") -> Element:
    expect_string("charset", charset)
    return (
        void_element("meta")
        .set_attribute("http-equiv", "Content-Type")
        .set_attribute("content", f"text/html; charset={charset}")
    )


def html_if(condition: str, content: Any) -> str:
    """Conditional comment, e.g. ``html_if("lt IE 9", script_src(...))``."""
    expect_string("condition", condition)
    return f"<!--[if {condition}]>{Container().embed(content).render()}<![endif]-->"


def a_link(href: str, content: Any) -> Element:
    expect_string("href", href)
    return element("a").set_href(href).embed(content)


def b_link(href: str, content: Any) -> Element:
    """Link opening in a new window."""
    return a_link(href, content).set_attribute("target", "_blank")


def checkbox() -> Element:
    return void_element("input").set_type("checkbox")


def code(text: str) -> Element:
    expect_string("text", text)
    return element("span", escape(text)).add_class("code")
