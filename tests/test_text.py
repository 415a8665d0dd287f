from __future__ import annotations

from soupwalk import html_parse
from soupwalk.text import full_text, shallow_text
from soupwalk.tree import Document, NodeType


def test_shallow_text_skips_nested_elements():
    root = html_parse("<p>Hello <b>world</b>!</p>")
    paragraph = root.find("p")

    assert paragraph.text() == "Hello !"
    assert paragraph.full_text() == "Hello world!"


def test_text_of_text_node_is_its_content():
    root = html_parse("<p>Hello <b>world</b>!</p>")

    first = root.find("p").children()[0]

    assert first.text() == "Hello "
    assert first.full_text() == "Hello "


def test_comments_contribute_no_text():
    root = html_parse("<div><p>a<!-- hidden -->b<span>c<!-- x --></span></p></div>")
    paragraph = root.find("p")

    assert paragraph.text() == "ab"
    assert paragraph.full_text() == "abc"


def test_element_without_text_is_empty():
    document = Document()
    div = document.append(NodeType.ELEMENT, "div")
    document.append(NodeType.ELEMENT, "img", [("src", "a.png")], parent=div)

    assert shallow_text(document, div) == ""
    assert full_text(document, div) == ""
