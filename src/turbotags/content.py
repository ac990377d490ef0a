"""Content buffers that remember which fragments are already HTML."""

from __future__ import annotations

from .serialize import escape_text


class HtmlContent:
    """An append-only list of HTML fragments.

    `append()` takes plain text and escapes it; `append_html()` takes markup
    verbatim. `is_modified` tells the renderer whether a directive touched the
    buffer, which matters for the main content buffer: an unmodified buffer
    means "keep the element's own children".
    """

    __slots__ = ("_parts", "is_modified")

    def __init__(self, html: str | None = None) -> None:
        self._parts: list[str] = []
        self.is_modified = False
        if html:
            self.append_html(html)

    def append(self, text: str | None) -> HtmlContent:
        self.is_modified = True
        if text:
            self._parts.append(escape_text(text))
        return self

    def append_html(self, html: str | HtmlContent | None) -> HtmlContent:
        self.is_modified = True
        if isinstance(html, HtmlContent):
            html = html.get_content()
        if html:
            self._parts.append(html)
        return self

    def set_content(self, text: str | None) -> HtmlContent:
        self._parts.clear()
        return self.append(text)

    def set_html_content(self, html: str | HtmlContent | None) -> HtmlContent:
        self._parts.clear()
        return self.append_html(html)

    def clear(self) -> HtmlContent:
        self._parts.clear()
        self.is_modified = True
        return self

    def get_content(self) -> str:
        return "".join(self._parts)

    @property
    def is_empty_or_whitespace(self) -> bool:
        return all(not part.strip() for part in self._parts)

    def __str__(self) -> str:
        return self.get_content()

    def __repr__(self) -> str:
        return f"HtmlContent({self.get_content()!r})"
