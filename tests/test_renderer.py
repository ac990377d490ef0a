"""Tests for the renderer and output serialization."""

from __future__ import annotations

import unittest

from turbotags import Renderer, parse_template, render
from turbotags.binding import Bound
from turbotags.directive import Directive, DirectiveRegistry, Target
from turbotags.node import TagOutput
from turbotags.presets import TAILWIND


class Decorate(Directive):
    """Writes into every buffer so the output order is visible."""

    targets = (Target("x-decorate"),)
    tag = Bound("tag", default=None)

    def process(self, context, output):
        output.tag_name = self.tag or "section"
        output.pre_element.append_html("[before]")
        output.pre_content.append_html("(start)")
        output.post_content.append_html("(end)")
        output.post_element.append_html("[after]")


class Twice(Directive):
    targets = (Target("x-twice"),)

    def process(self, context, output):
        first = output.get_child_content().get_content()
        second = output.get_child_content().get_content()
        output.tag_name = None
        output.content.set_html_content(first + second)


class TestRendererPassthrough(unittest.TestCase):
    def test_untouched_markup_round_trips(self):
        """Markup no directive targets is written back unchanged."""
        source = '<!DOCTYPE html><html><body><p class="x">Hi &amp; bye</p><!-- c --><br></body></html>'
        assert Renderer().render(source) == source

    def test_script_text_untouched(self):
        """Script bodies are not escaped."""
        source = "<script>window.x = 1 && 2;</script>"
        assert Renderer().render(source) == source

    def test_accepts_parsed_tree(self):
        """render() accepts an already parsed tree."""
        root = parse_template('<img lazy src="a.png">')
        assert Renderer().render(root) == '<img src="a.png" loading="lazy" decoding="async">'

    def test_module_level_render(self):
        """The module-level render() uses the built-in directives."""
        assert render("<p asp-if=\"false\">x</p><p>y</p>") == "<p>y</p>"

    def test_preset_by_name(self):
        """Presets can be given by name."""
        assert Renderer(preset="tailwind").preset is TAILWIND
        with self.assertRaises(ValueError):
            Renderer(preset="nope")


class TestOutputSerialization(unittest.TestCase):
    def setUp(self):
        self.renderer = Renderer(DirectiveRegistry([Decorate, Twice]))

    def test_buffer_order(self):
        """Buffers are written around the element in order."""
        html = self.renderer.render('<x-decorate id="a">body</x-decorate>')
        assert html == '[before]<section id="a">(start)body(end)</section>[after]'

    def test_void_tag_has_no_end_tag(self):
        """Void tags get no end tag."""
        html = self.renderer.render('<x-decorate tag="hr"></x-decorate>')
        assert html == "[before]<hr>(start)(end)[after]"

    def test_content_only_output(self):
        """Removing the tag name leaves only the content."""
        assert self.renderer.render("<x-twice><b>x</b></x-twice>") == "<b>x</b><b>x</b>"

    def test_child_content_rendered_once(self):
        """Child content is rendered once however often it is read."""
        calls: list[str] = []

        class Count(Directive):
            targets = (Target("*", ("data-count",)),)
            count = Bound("data-count", default=None)

            def process(self, context, output):
                calls.append(context.tag_name)

        renderer = Renderer(DirectiveRegistry([Twice, Count]))
        html = renderer.render("<x-twice><i data-count>x</i></x-twice>")
        assert html == "<i>x</i><i>x</i>"
        assert calls == ["i"]

    def test_nested_directives(self):
        """Directives nest."""
        html = Renderer().render('<alert alert-type="info"><markdown>**hi**</markdown></alert>')
        assert html == '<div role="alert" class="alert alert-info"><p><strong>hi</strong></p>\n</div>'

    def test_serialize_suppressed_output(self):
        """Suppressed output serializes to nothing."""
        output = TagOutput("div", child_content="x")
        output.suppress_output()
        assert Renderer.serialize_output(output) == ""

    def test_serialize_untouched_output(self):
        """Untouched output writes its child content."""
        output = TagOutput("div", {"id": "a"}, child_content="<b>x</b>")
        assert Renderer.serialize_output(output) == '<div id="a"><b>x</b></div>'


if __name__ == "__main__":
    unittest.main()
