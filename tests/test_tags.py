import pytest
from bs4 import BeautifulSoup

from oohtml.errors import InvalidArgumentType
from oohtml.tags import (
    a_link,
    b_link,
    body,
    checkbox,
    code,
    css_link,
    div,
    element,
    escape,
    form,
    h1,
    head,
    html,
    html5_doctype,
    html_if,
    li,
    meta_charset,
    p,
    script,
    script_src,
    title,
    ul,
    void_element,
)


def test_content_helpers_embed_arguments() -> None:
    assert p("a", "b").render() == "<p>ab</p>"
    assert element("section", "x").render() == "<section>x</section>"
    assert void_element("hr").render() == "<hr />"


def test_helpers_flatten_generators() -> None:
    items = ul(li(name) for name in ["a", "b"])
    assert items.render() == "<ul><li>a</li><li>b</li></ul>"


def test_document_structure() -> None:
    document = html(
        head(meta_charset(), title("A & B")),
        body(div(p("one"), p("two")).set_id("main").add_class("wrap"), h1("Done")),
    )
    rendered = html5_doctype() + document.render()
    assert rendered.startswith("<!DOCTYPE html><html><head>")

    soup = BeautifulSoup(rendered, "html.parser")
    assert soup.title.string == "A & B"
    main = soup.find(id="main")
    assert main["class"] == ["wrap"]
    assert [node.get_text() for node in main.find_all("p")] == ["one", "two"]
    assert soup.h1.get_text() == "Done"


def test_title_escapes_content() -> None:
    assert title("<script>").render() == "<title>&lt;script&gt;</title>"


def test_script() -> None:
    assert script("var x = 1;").render() == '<script type="text/javascript">var x = 1;</script>'


def test_css_link() -> None:
    assert css_link("/s.css").render() == (
        '<link rel="stylesheet" type="text/css" href="/s.css" media="all" />'
    )
    assert 'media="print"' in css_link("/p.css", "print").render()


def test_script_src() -> None:
    assert script_src("/a.js").render() == '<script type="text/javascript" src="/a.js"></script>'


def test_meta_charset() -> None:
    assert meta_charset("latin-1").render() == (
        '<meta http-equiv="Content-Type" content="text/html; charset=latin-1" />'
    )


def test_html_if() -> None:
    assert html_if("lt IE 9", script_src("/x.js")) == (
        '<!--[if lt IE 9]><script type="text/javascript" src="/x.js"></script><![endif]-->'
    )


def test_links() -> None:
    assert a_link("/x", "go").render() == '<a href="/x">go</a>'
    assert b_link("/x", "go").render() == '<a href="/x" target="_blank">go</a>'


def test_checkbox() -> None:
    assert checkbox().render() == '<input type="checkbox" />'
    assert checkbox().set_attribute("checked").render() == '<input type="checkbox" checked="checked" />'


def test_code_escapes_text() -> None:
    assert code("a < b").render() == '<span class="code">a &lt; b</span>'


def test_form_uses_base_url() -> None:
    login = form(base_url="https://example.com").set_action("/submit").set_method("post")
    assert login.render() == '<form action="https://example.com/submit" method="post"></form>'


def test_escape() -> None:
    assert escape('<a href="x">') == "&lt;a href=&quot;x&quot;&gt;"
    assert escape(5) == "5"


@pytest.mark.parametrize(
    "call",
    [
        lambda: css_link(1),
        lambda: css_link("/s.css", None),
        lambda: script_src(None),
        lambda: meta_charset(8),
        lambda: html_if(None, "x"),
        lambda: a_link(3, "x"),
        lambda: code(7),
    ],
)
def test_string_parameters_are_checked(call) -> None:
    with pytest.raises(InvalidArgumentType):
        call()
