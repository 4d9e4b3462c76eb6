"""Tests for the cardinality-checked selection wrappers."""

import pytest

from lol_api_doc.domain.exceptions import ShapeError, StructuralError
from lol_api_doc.infrastructure.html.loader import load_html
from lol_api_doc.infrastructure.html.selection import Sel, Sels, dump


@pytest.fixture
def root():
    soup = load_html(
        "<html><body><ul id='list'>"
        "<li class='item a'>one</li> <li class='item b'>two</li><!-- note --><li class='item c'>three</li>"
        "</ul><p></p></body></html>"
    )
    return Sel.wrap(soup.select_one("#list"))


class TestSel:
    def test_wrap_single(self, root):
        assert root.name == "ul"
        assert root.attr("id") == "list"

    def test_wrap_rejects_empty(self):
        with pytest.raises(ShapeError, match="must have single node, but has 0"):
            Sel.wrap([])

    def test_wrap_rejects_many(self, root):
        with pytest.raises(ShapeError, match="but has 3"):
            Sel.wrap(root.tag.select("li"))

    def test_children_skip_text_and_comments(self, root):
        assert [c.tag.get_text() for c in root.children()] == ["one", "two", "three"]

    def test_children_filtered(self, root):
        picked = root.children_filtered(".b")
        assert len(picked) == 1
        assert picked.must_be_single().tag.get_text() == "two"

    def test_is_and_has_class(self, root):
        first = root.children().first()
        assert first.is_("li.item.a")
        assert not first.is_("li.b")
        assert first.has_class("item")
        assert not first.has_class("b")

    def test_attr_joins_multi_valued(self, root):
        assert root.children().first().attr("class") == "item a"
        assert root.attr("missing") is None

    def test_ensure_returns_self(self, root):
        assert root.ensure("ul#list") is root

    def test_ensure_failure_carries_dump(self, root):
        with pytest.raises(StructuralError) as exc_info:
            root.ensure("ol")
        assert "expected selector: 'ol'" in str(exc_info.value)
        assert "DUMP HTML" in exc_info.value.dump
        assert "<ul" in exc_info.value.dump

    def test_remove_detaches(self, root):
        root.children().first().remove()
        assert len(root.children()) == 2

    def test_replace_with_comment(self, root):
        root.children().last().replace_with_comment("gone")
        assert len(root.children()) == 2
        assert "<!-- gone -->" in str(root.tag)

    def test_equality_is_identity_of_node(self, root):
        assert root.children().first() == root.children().first()
        assert root.children().first() != root.children().last()


class TestSels:
    def test_exactly(self, root):
        assert len(root.children().exactly(3)) == 3
        with pytest.raises(ShapeError, match="must have 2 node"):
            root.children().exactly(2)

    def test_must_be_single_on_empty_dumps_scope(self, root):
        with pytest.raises(ShapeError) as exc_info:
            root.children_filtered("span").must_be_single()
        assert "<ul" in exc_info.value.dump

    def test_first_and_last(self, root):
        items = root.children()
        assert items.first().has_class("a")
        assert items.last().has_class("c")

    def test_first_of_empty_fails(self, root):
        with pytest.raises(ShapeError):
            root.find("table").first()
        with pytest.raises(ShapeError):
            root.find("table").last()

    def test_reverse_returns_new_sequence(self, root):
        items = root.children()
        reversed_items = items.reverse()
        assert [s.attr("class") for s in reversed_items] == ["item c", "item b", "item a"]
        assert items.first().has_class("a")

    def test_children_flattens(self, root):
        soup = load_html("<div><ul><li>a</li><li>b</li></ul><ul><li>c</li></ul></div>")
        lists = Sel.wrap(soup.select_one("div")).children()
        assert len(lists.children()) == 3

    def test_slicing_keeps_type(self, root):
        head = root.children()[:2]
        assert isinstance(head, Sels)
        assert len(head) == 2


class TestDump:
    def test_empty_dump(self):
        assert "<!-- EMPTY NODE -->" in dump([])

    def test_lines_are_numbered(self, root):
        lines = root.dump().splitlines()
        assert lines[1] == "DUMP HTML: "
        assert lines[2].lstrip().startswith("1  <ul")
