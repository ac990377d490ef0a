"""Tests for attribute binding, error collection and strict mode."""

from __future__ import annotations

import unittest
from dataclasses import dataclass, field

from turbotags import Renderer
from turbotags.binding import Bound
from turbotags.errors import DirectiveError, RenderError, StrictModeError, emit_error, error_sink
from turbotags.model import ModelExpression
from turbotags.request import RequestContext


@dataclass
class SignupModel:
    email: str = field(default="a@example.com", metadata={"display_name": "Email address", "required": True})


class TestBoundConversion(unittest.TestCase):
    def setUp(self):
        self.request = RequestContext(model=SignupModel(), view_data={"colors": ["red", "green"]})

    def convert(self, binding: Bound, raw):
        return binding.convert(raw, tag="div", request=self.request)

    def test_bare_bool_attribute_is_true(self):
        """A bare boolean attribute means true."""
        assert self.convert(Bound("dismissible", "bool", default=False), None) is True

    def test_bool_spellings(self):
        """Accepted spellings of true and false; empty means false."""
        binding = Bound("flag", "bool", default=None)
        for raw in ("true", "True", "1", "yes", "on"):
            assert self.convert(binding, raw) is True, raw
        for raw in ("", "false", "FALSE", "0", "no", "off"):
            assert self.convert(binding, raw) is False, raw

    def test_int(self):
        """Integers are parsed after stripping whitespace."""
        assert self.convert(Bound("n", "int", default=5), " 42 ") == 42

    def test_optional_int_empty_is_none(self):
        """An empty optional int is None."""
        assert self.convert(Bound("n", "optional_int"), "") is None

    def test_str(self):
        """Strings pass through and a bare attribute is empty."""
        assert self.convert(Bound("title"), "Hi") == "Hi"
        assert self.convert(Bound("title"), None) == ""

    def test_expression_resolves_against_model(self):
        """Expressions resolve to value and metadata."""
        expr = self.convert(Bound("asp-for", "expression"), "email")
        assert isinstance(expr, ModelExpression)
        assert expr.model == "a@example.com"
        assert expr.metadata.display_name == "Email address"
        assert expr.metadata.is_required

    def test_unresolvable_expression_raises(self):
        """Unknown members raise DirectiveError."""
        with self.assertRaises(DirectiveError):
            self.convert(Bound("asp-for", "expression"), "missing")

    def test_object_looks_up_view_data(self):
        """Object bindings look names up in view data."""
        assert self.convert(Bound("asp-list", "object"), "colors") == ["red", "green"]

    def test_object_passes_non_strings_through(self):
        """Non-string values are used as given."""
        values = ["a"]
        assert self.convert(Bound("asp-list", "object"), values) is values

    def test_attribute_name_lowercased(self):
        """Bound attribute names are lowercased."""
        assert Bound("Alert-Type").attribute == "alert-type"


class TestErrorSink(unittest.TestCase):
    def test_bad_bool_falls_back_and_reports(self):
        """A bad bool falls back to the default and reports."""
        binding = Bound("dismissible", "bool", default=False)
        with error_sink() as errors:
            value = binding.convert("maybe", tag="alert", request=RequestContext())
        assert value is False
        assert errors == [RenderError("invalid-bool-attribute", tag="alert", attribute="dismissible")]

    def test_bad_int_falls_back_and_reports(self):
        """A bad int falls back to the default and reports."""
        binding = Bound("auto-hide-delay", "int", default=5)
        with error_sink() as errors:
            value = binding.convert("soon", tag="div", request=RequestContext())
        assert value == 5
        assert [e.code for e in errors] == ["invalid-int-attribute"]

    def test_no_sink_drops_reports(self):
        """Without a sink errors are dropped silently."""
        emit_error("anything", tag="div")

    def test_strict_mode_raises(self):
        """Strict mode raises StrictModeError on the first error."""
        with error_sink(strict=True), self.assertRaises(StrictModeError) as ctx:
            emit_error("invalid-bool-attribute", tag="alert", attribute="dismissible")
        assert ctx.exception.error.code == "invalid-bool-attribute"

    def test_sink_is_reset_after_exit(self):
        """Leaving error_sink() stops collection."""
        with error_sink() as errors:
            pass
        emit_error("late")
        assert errors == []

    def test_error_str(self):
        """RenderError has a readable string form."""
        error = RenderError("invalid-int-attribute", tag="div", attribute="auto-hide-delay", message="bad")
        assert str(error) == "<div>[auto-hide-delay]: invalid-int-attribute - bad"
        assert str(RenderError("plain")) == "plain"


class TestRendererErrors(unittest.TestCase):
    def test_errors_not_collected_by_default(self):
        """By default, errors are not collected."""
        renderer = Renderer()
        renderer.render('<alert dismissible="maybe">x</alert>')
        assert renderer.errors == []

    def test_collect_errors(self):
        """collect_errors=True fills renderer.errors."""
        renderer = Renderer(collect_errors=True)
        html = renderer.render('<alert dismissible="maybe">x</alert>')
        assert [e.code for e in renderer.errors] == ["invalid-bool-attribute"]
        assert "alert-dismissible" not in html

    def test_errors_reset_between_renders(self):
        """Each render starts with an empty error list."""
        renderer = Renderer(collect_errors=True)
        renderer.render('<img lazy="perhaps" src="a.png">')
        assert len(renderer.errors) == 1
        renderer.render('<img lazy src="a.png">')
        assert renderer.errors == []

    def test_strict_renderer_raises(self):
        """strict=True raises from render()."""
        renderer = Renderer(strict=True)
        with self.assertRaises(StrictModeError):
            renderer.render('<div auto-hide auto-hide-effect="wobble">x</div>')


if __name__ == "__main__":
    unittest.main()
