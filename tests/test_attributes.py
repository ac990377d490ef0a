"""Tests for attribute lists and HTML content buffers."""

from __future__ import annotations

import unittest

from turbotags.attributes import Attribute, AttributeList
from turbotags.content import HtmlContent


class TestAttributeList(unittest.TestCase):
    def test_preserves_source_order(self):
        """Attributes iterate in the order they were added."""
        attrs = AttributeList([("id", "a"), ("class", "b"), ("title", "c")])
        assert attrs.names() == ["id", "class", "title"]
        assert len(attrs) == 3

    def test_names_are_case_insensitive(self):
        """Lookups ignore the case of attribute names."""
        attrs = AttributeList({"Class": "a"})
        assert attrs.contains("class")
        assert "CLASS" in attrs
        assert attrs.get("cLaSs") == "a"

    def test_set_attribute_replaces_in_place(self):
        """Setting an existing name keeps its position."""
        attrs = AttributeList([("id", "x"), ("class", "a"), ("title", "t")])
        attrs.set_attribute("CLASS", "b")
        assert attrs.names() == ["id", "class", "title"]
        assert attrs.get("class") == "b"

    def test_set_attribute_appends_new_names(self):
        """Setting a new name appends it."""
        attrs = AttributeList()
        attrs.set_attribute("loading", "lazy")
        assert attrs.names() == ["loading"]

    def test_add_keeps_duplicates(self):
        """add() keeps duplicate names and get() returns the first."""
        attrs = AttributeList()
        attrs.add("data-x", "1")
        attrs.add("data-x", "2")
        assert len(attrs) == 2
        assert attrs.get("data-x") == "1"

    def test_remove_reports_whether_anything_was_removed(self):
        """remove() returns whether an attribute was there."""
        attrs = AttributeList({"id": "a"})
        assert attrs.remove("ID") is True
        assert attrs.remove("id") is False
        assert len(attrs) == 0

    def test_getitem_returns_attribute(self):
        """Indexing by name returns the Attribute record."""
        attrs = AttributeList({"src": "a.png"})
        assert attrs["src"] == Attribute("src", "a.png")
        with self.assertRaises(KeyError):
            attrs["alt"]

    def test_minimized_attribute(self):
        """Bare attributes are minimized and have no value."""
        attrs = AttributeList([("disabled", None)])
        assert attrs["disabled"].minimized
        assert attrs.get("disabled") is None
        assert attrs.contains("disabled")

    def test_copy_is_independent(self):
        """A copy does not share changes with its source."""
        attrs = AttributeList({"id": "a"})
        clone = attrs.copy()
        clone.set_attribute("id", "b")
        assert attrs.get("id") == "a"

    def test_empty_name_rejected(self):
        """Empty attribute names raise ValueError."""
        with self.assertRaises(ValueError):
            Attribute("")

    def test_iteration_is_a_snapshot(self):
        """Mutating while iterating does not disturb the loop."""
        attrs = AttributeList([("a", "1"), ("b", "2")])
        for attr in attrs:
            attrs.remove(attr.name)
        assert len(attrs) == 0


class TestHtmlContent(unittest.TestCase):
    def test_append_escapes_text(self):
        """append() escapes text."""
        content = HtmlContent()
        content.append("<b>Tom & Jerry</b>")
        assert content.get_content() == "&lt;b&gt;Tom &amp; Jerry&lt;/b&gt;"

    def test_append_html_is_verbatim(self):
        """append_html() writes markup as is."""
        content = HtmlContent()
        content.append_html("<b>x</b>").append("<")
        assert str(content) == "<b>x</b>&lt;"

    def test_append_html_accepts_content(self):
        """append_html() accepts another HtmlContent."""
        inner = HtmlContent("<i>a</i>")
        outer = HtmlContent().append_html(inner)
        assert outer.get_content() == "<i>a</i>"

    def test_set_content_replaces(self):
        """set_content() and set_html_content() replace the buffer."""
        content = HtmlContent("<p>old</p>")
        content.set_content("new")
        assert content.get_content() == "new"
        content.set_html_content("<p>html</p>")
        assert content.get_content() == "<p>html</p>"

    def test_modified_flag(self):
        """Buffers start unmodified and flip on the first write."""
        content = HtmlContent()
        assert not content.is_modified
        content.append("")
        assert content.is_modified
        assert content.get_content() == ""

    def test_clear_counts_as_modification(self):
        """Clearing a buffer marks it modified."""
        content = HtmlContent()
        content.clear()
        assert content.is_modified

    def test_empty_or_whitespace(self):
        """Whitespace-only content counts as empty."""
        assert HtmlContent().is_empty_or_whitespace
        assert HtmlContent(" \n\t ").is_empty_or_whitespace
        assert not HtmlContent(" x ").is_empty_or_whitespace


if __name__ == "__main__":
    unittest.main()
