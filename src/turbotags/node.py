"""Template tree nodes and the mutable rendering node handed to directives."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from .attributes import AttributeList
from .content import HtmlContent


class Element:
    """A node of a parsed template.

    - name: tag name (lowercased), or '#text', '#comment', '!doctype',
      '#document-fragment'.
    - attrs: AttributeList for elements, empty otherwise.
    - data: source text for text, comment and doctype nodes.
    """

    __slots__ = ("attrs", "children", "data", "name", "parent", "self_closing")

    def __init__(self, name, attrs=None, data=None, self_closing=False):
        if name is None or name == "":
            msg = "Empty name passed to Element constructor"
            raise ValueError(msg)
        self.name = name
        self.attrs = attrs if isinstance(attrs, AttributeList) else AttributeList(attrs)
        self.data = data
        self.self_closing = bool(self_closing)
        self.children = []
        self.parent = None

    @property
    def is_element(self):
        return self.name[0] not in "#!"

    def append_child(self, child):
        if child.parent is not None:
            child.parent.children.remove(child)
        child.parent = self
        self.children.append(child)

    def __repr__(self):
        if self.is_element:
            return f"<Element {self.name} {self.attrs.names()}>"
        return f"<Element {self.name} {self.data!r}>"


class TextElement(Element):
    __slots__ = ()

    def __init__(self, data):
        super().__init__("#text", data=data)


class TagOutput:
    """The rendering node every directive mutates in place.

    Buffers, in render order: pre_element, <tag>, pre_content, content (or the
    element's own children when untouched), post_content, </tag>, post_element.
    """

    __slots__ = (
        "_child_content",
        "_child_content_producer",
        "attributes",
        "content",
        "is_suppressed",
        "post_content",
        "post_element",
        "pre_content",
        "pre_element",
        "self_closing",
        "tag_name",
    )

    def __init__(
        self,
        tag_name: str | None,
        attributes: AttributeList | Mapping[str, Any] | None = None,
        child_content: Callable[[], str | HtmlContent] | str | None = None,
        *,
        self_closing: bool = False,
    ) -> None:
        self.tag_name = tag_name
        if isinstance(attributes, AttributeList):
            self.attributes = attributes
        else:
            self.attributes = AttributeList(attributes)
        if child_content is None or isinstance(child_content, str):
            fixed = child_content or ""
            self._child_content_producer: Callable[[], str | HtmlContent] = lambda: fixed
        else:
            self._child_content_producer = child_content
        self._child_content: HtmlContent | None = None
        self.self_closing = bool(self_closing)
        self.is_suppressed = False
        self.pre_element = HtmlContent()
        self.pre_content = HtmlContent()
        self.content = HtmlContent()
        self.post_content = HtmlContent()
        self.post_element = HtmlContent()

    def get_child_content(self) -> HtmlContent:
        """Render the element's children once and return the cached result."""
        if self._child_content is None:
            produced = self._child_content_producer()
            if isinstance(produced, HtmlContent):
                self._child_content = produced
            else:
                self._child_content = HtmlContent(produced)
        return self._child_content

    def suppress_output(self) -> None:
        self.tag_name = None
        self.is_suppressed = True
        for buf in (self.pre_element, self.pre_content, self.content, self.post_content, self.post_element):
            buf.clear()

    def __repr__(self) -> str:
        return f"TagOutput({self.tag_name!r}, {self.attributes!r})"


# Sentinels stored in RenderContext.items by the suppressing directives.
SUPPRESSED_BY_IF = object()
SUPPRESSED_BY_AUTHZ = object()
_SUPPRESSED = object()


class RenderContext:
    """Per-element state shared by every directive targeting that element."""

    __slots__ = ("all_attributes", "items", "tag_name", "unique_id")

    def __init__(
        self,
        tag_name: str,
        all_attributes: AttributeList | Mapping[str, Any] | None = None,
        items: dict[Any, Any] | None = None,
        unique_id: str = "",
    ) -> None:
        self.tag_name = tag_name
        if isinstance(all_attributes, AttributeList):
            self.all_attributes = all_attributes.copy()
        else:
            self.all_attributes = AttributeList(all_attributes)
        self.items = items if items is not None else {}
        self.unique_id = unique_id

    def suppressed_by_if(self) -> bool:
        return self.items.get(SUPPRESSED_BY_IF) is _SUPPRESSED

    def suppressed_by_authz(self) -> bool:
        return self.items.get(SUPPRESSED_BY_AUTHZ) is _SUPPRESSED

    def mark_suppressed_by_if(self) -> None:
        self.items[SUPPRESSED_BY_IF] = _SUPPRESSED

    def mark_suppressed_by_authz(self) -> None:
        self.items[SUPPRESSED_BY_AUTHZ] = _SUPPRESSED

    def __repr__(self) -> str:
        return f"RenderContext({self.tag_name!r}, {self.unique_id!r})"
