"""Template markup parser.

Builds an `Element` tree from template source. This is a forgiving,
source-preserving tree builder rather than an HTML5 tree constructor: it keeps
text and entities exactly as written, closes void elements implicitly, and
ignores stray end tags. Directive processing only needs element boundaries and
attributes, never the HTML5 insertion-mode rules.

The body of a `<markdown>` element is kept as source text up to its closing
tag, so Markdown autolinks such as `<https://example.com>` and raw HTML reach
the Markdown converter as written.
"""

from __future__ import annotations

from html.parser import HTMLParser

from .node import Element, TextElement
from .serialize import VOID_ELEMENTS

RAW_SOURCE_ELEMENTS = frozenset({"markdown"})


class TemplateParser(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=False)
        self.root = Element("#document-fragment")
        self._open: list[Element] = [self.root]
        self._raw_source: str | None = None

    @property
    def current(self) -> Element:
        return self._open[-1]

    def _append_text(self, data: str) -> None:
        if not data:
            return
        children = self.current.children
        if children and children[-1].name == "#text":
            children[-1].data += data
            return
        self.current.append_child(TextElement(data))

    def handle_starttag(self, tag, attrs):
        if self._raw_source:
            self._append_text(self.get_starttag_text())
            return
        element = Element(tag)
        for name, value in attrs:
            element.attrs.add(name, value)
        self.current.append_child(element)
        if tag not in VOID_ELEMENTS:
            self._open.append(element)
        if tag in RAW_SOURCE_ELEMENTS:
            self._raw_source = tag

    def handle_startendtag(self, tag, attrs):
        if self._raw_source:
            self._append_text(self.get_starttag_text())
            return
        element = Element(tag, self_closing=True)
        for name, value in attrs:
            element.attrs.add(name, value)
        self.current.append_child(element)

    def handle_endtag(self, tag):
        if self._raw_source:
            if tag != self._raw_source:
                self._append_text(f"</{tag}>")
                return
            self._raw_source = None
        if tag in VOID_ELEMENTS:
            return
        # Close up to the nearest matching open element; stray end tags are dropped.
        for i in range(len(self._open) - 1, 0, -1):
            if self._open[i].name == tag:
                del self._open[i:]
                return

    def handle_data(self, data):
        self._append_text(data)

    def handle_entityref(self, name):
        self._append_text(f"&{name};")

    def handle_charref(self, name):
        self._append_text(f"&#{name};")

    def handle_comment(self, data):
        if self._raw_source:
            self._append_text(f"<!--{data}-->")
            return
        self.current.append_child(Element("#comment", data=data))

    def handle_decl(self, decl):
        self.current.append_child(Element("!doctype", data=decl))

    def unknown_decl(self, data):
        # CDATA sections and friends are passed through as text.
        self._append_text(f"<![{data}]>")

    def handle_pi(self, data):
        self._append_text(f"<?{data}>")


def parse_template(source: str) -> Element:
    """Parse template markup into a `#document-fragment` root element."""
    parser = TemplateParser()
    parser.feed(source or "")
    parser.close()
    return parser.root
