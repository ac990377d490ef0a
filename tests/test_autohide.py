"""Tests for the auto-hide directive and its script."""

from __future__ import annotations

import re
import unittest

from turbotags import Renderer
from turbotags.directives import AutoHideDirective
from turbotags.directives.autohide import auto_hide_script, control_name
from turbotags.node import RenderContext, TagOutput
from turbotags.presets import TAILWIND


def run(directive: AutoHideDirective, tag: str = "div", attributes=None) -> TagOutput:
    output = TagOutput(tag, attributes, child_content="Saved")
    directive.render(RenderContext(tag, attributes), output)
    return output


class TestAutoHideDirective(unittest.TestCase):
    def test_adds_id_when_missing(self):
        """A missing id is generated."""
        output = run(AutoHideDirective())
        assert output.attributes.get("id").startswith("auto-hide-")
        script = output.post_content.get_content()
        assert "<script>" in script
        assert "setTimeout" in script

    def test_generated_ids_are_unique(self):
        """Two elements never share a generated id."""
        first = run(AutoHideDirective()).attributes.get("id")
        second = run(AutoHideDirective()).attributes.get("id")
        assert first != second

    def test_preserves_existing_id(self):
        """An existing id is kept."""
        output = run(AutoHideDirective(), attributes={"id": "existing-id"})
        assert output.attributes.get("id") == "existing-id"
        assert "getElementById('existing-id')" in output.post_content.get_content()

    def test_sets_default_tag_and_class(self):
        """<auto-hide> becomes a div with the preset class."""
        output = run(AutoHideDirective(preset=TAILWIND), tag="auto-hide")
        assert output.tag_name == "div"
        assert output.attributes.get("class") == "p-4 rounded-lg border"

    def test_keeps_explicit_class(self):
        """An explicit class replaces the preset default."""
        output = run(AutoHideDirective(), tag="auto-hide", attributes={"class": "toast"})
        assert output.attributes.get("class") == "toast"

    def test_other_tags_keep_their_name(self):
        """Only <auto-hide> is renamed."""
        output = run(AutoHideDirective(), tag="section")
        assert output.tag_name == "section"
        assert not output.attributes.contains("class")

    def test_uses_correct_delay(self):
        """The delay is converted to milliseconds."""
        for seconds in (1, 5, 10):
            script = run(AutoHideDirective(delay_in_seconds=seconds)).post_content.get_content()
            assert f"setTimeout(hideElement, {seconds * 1000})" in script
            assert f"Starting hide timer: {seconds}s" in script

    def test_uses_correct_effect(self):
        """The chosen effect appears in the script."""
        expected = {"fade": "opacity = '0'", "slide-up": "translateY(-100%)", "scale": "scale(0)"}
        for effect, transform in expected.items():
            script = run(AutoHideDirective(effect=effect)).post_content.get_content()
            assert transform in script, effect

    def test_does_nothing_when_disabled(self):
        """auto-hide="false" leaves the element alone."""
        output = run(AutoHideDirective(auto_hide=False))
        assert output.post_content.get_content() == ""
        assert not output.attributes.contains("id")


class TestAutoHideScript(unittest.TestCase):
    def test_hides_by_default(self):
        """Without remove the element is hidden, not removed."""
        script = auto_hide_script("x")
        assert "element.style.display = 'none'" in script
        assert "element.remove()" not in script
        assert "transition = 'all 300ms ease-in-out'" in script

    def test_remove_from_dom(self):
        """auto-hide-remove removes the element."""
        assert "setTimeout(() => element.remove(), 300);" in auto_hide_script("x", remove=True)

    def test_pause_on_selector(self):
        """A pause selector is looked up in the document."""
        script = auto_hide_script("x", pause_on="#panel")
        assert "const hoverTarget = document.querySelector('#panel');" in script

    def test_pause_on_element_by_default(self):
        """Hover on the element itself pauses the timer."""
        assert "const hoverTarget = element;" in auto_hide_script("x")

    def test_debug_logging(self):
        """Debug mode logs to the console."""
        assert "console.log('[AutoHide:x] ' + msg)" in auto_hide_script("x", debug=True)
        assert "console.log" not in auto_hide_script("x")

    def test_manual_start(self):
        """Manual start skips the automatic timer."""
        assert "Auto-starting hide timer" in auto_hide_script("x")
        assert "Auto-starting hide timer" not in auto_hide_script("x", auto_start=False)

    def test_control_object(self):
        """The script exposes a control object on window."""
        assert control_name("flash-1") == "autoHide_flash_1"
        assert "window.autoHide_flash_1 = {" in auto_hide_script("flash-1")

    def test_id_is_escaped(self):
        """Ids are quoted as JavaScript strings."""
        script = auto_hide_script("a'</script>")
        assert "</script>" not in script


class TestAutoHideRendering(unittest.TestCase):
    def test_attribute_form(self):
        """auto-hide on a plain element renders the script inside it."""
        html = Renderer().render('<div auto-hide auto-hide-delay="2" id="flash">Saved</div>')
        assert html.startswith('<div id="flash">Saved<script>(function() {')
        assert "setTimeout(hideElement, 2000)" in html
        assert html.endswith("})();\n</script></div>")
        assert "auto-hide-delay" not in html.split("<script>")[0]

    def test_element_form(self):
        """<auto-hide> renders as a div."""
        html = Renderer().render("<auto-hide>Bye</auto-hide>")
        match = re.match(r'<div id="(auto-hide-[0-9a-f]+)" class="p-3 rounded border">Bye<script>', html)
        assert match is not None
        assert f"getElementById('{match.group(1)}')" in html

    def test_unknown_effect_falls_back_to_fade(self):
        """Unknown effects fall back to fade and report an error."""
        renderer = Renderer(collect_errors=True)
        html = renderer.render('<div auto-hide auto-hide-effect="wobble" id="a">x</div>')
        assert [e.code for e in renderer.errors] == ["unknown-auto-hide-effect"]
        assert "opacity = '0'" in html
        assert "scale(0)" not in html


if __name__ == "__main__":
    unittest.main()
