"""Template renderer: runs directives over a parsed template and serializes it."""

from __future__ import annotations

import logging
from uuid import uuid4

from .attributes import AttributeList
from .directives import default_registry
from .errors import RenderError, error_sink
from .node import Element, RenderContext, TagOutput
from .parser import parse_template
from .presets import BOOTSTRAP, StylePreset, get_preset
from .request import RequestContext
from .serialize import is_void, serialize_end_tag, serialize_start_tag, to_html

logger = logging.getLogger(__name__)


class Renderer:
    """Render template markup with a set of directives.

    Elements no directive targets are written back as they were parsed. For
    every other element the matching directives run in ascending `order`
    against one shared `TagOutput`, and the attributes they bind are left out
    of the result.
    """

    __slots__ = ("collect_errors", "errors", "preset", "registry", "strict")

    def __init__(self, registry=None, preset=None, *, collect_errors=False, strict=False):
        if registry is None:
            registry = default_registry()
        if isinstance(preset, str):
            preset = get_preset(preset)
        self.registry = registry
        self.preset: StylePreset = preset or BOOTSTRAP
        self.collect_errors = bool(collect_errors)
        self.strict = bool(strict)
        self.errors: list[RenderError] = []

    def render(self, template: str | Element, request: RequestContext | None = None) -> str:
        root = parse_template(template) if isinstance(template, str) else template
        if request is None:
            request = RequestContext()

        self.errors = []
        sink = self.errors if self.collect_errors else None
        with error_sink(sink, strict=self.strict):
            return self._render_node(root, request)

    def _render_children(self, node: Element, request: RequestContext) -> str:
        return "".join(self._render_node(child, request) for child in node.children)

    def _render_node(self, node: Element, request: RequestContext) -> str:
        if not node.is_element:
            if node.name == "#document-fragment":
                return self._render_children(node, request)
            return to_html(node)

        directives = self.registry.resolve(node.name, node.attrs)
        if not directives:
            return self._render_plain(node, request)
        return self._render_directives(node, directives, request)

    def _render_plain(self, node: Element, request: RequestContext) -> str:
        start = serialize_start_tag(node.name, node.attrs, use_trailing_solidus=node.self_closing)
        if is_void(node.name) or node.self_closing:
            return start
        return f"{start}{self._render_children(node, request)}{serialize_end_tag(node.name)}"

    def _render_directives(self, node, directives, request):
        bound = set()
        for cls in directives:
            bound.update(cls.bindings)
        attributes = AttributeList((a.name, a.value) for a in node.attrs if a.name.lower() not in bound)

        context = RenderContext(node.name, node.attrs, unique_id=uuid4().hex)
        output = TagOutput(
            node.name,
            attributes,
            lambda: self._render_children(node, request),
            self_closing=node.self_closing,
        )

        for cls in directives:
            directive = cls(request, self.preset)
            if not (context.suppressed_by_if() or context.suppressed_by_authz()):
                directive.bind(node.attrs, node.name)
            logger.debug("running %s on <%s>", cls.__name__, node.name)
            directive.render(context, output)

        return self.serialize_output(output)

    @staticmethod
    def serialize_output(output: TagOutput) -> str:
        """Write a `TagOutput` in buffer order. Suppressed output is empty."""
        if output.is_suppressed:
            return ""

        parts = [output.pre_element.get_content()]
        tag = output.tag_name
        if tag:
            parts.append(serialize_start_tag(tag, output.attributes))
        parts.append(output.pre_content.get_content())
        if output.content.is_modified:
            parts.append(output.content.get_content())
        elif not output.self_closing:
            parts.append(output.get_child_content().get_content())
        parts.append(output.post_content.get_content())
        if tag and not is_void(tag):
            parts.append(serialize_end_tag(tag))
        parts.append(output.post_element.get_content())
        return "".join(parts)


def render(template: str | Element, request: RequestContext | None = None, **options) -> str:
    """Render with a throwaway `Renderer` and the built-in directives."""
    return Renderer(**options).render(template, request)
