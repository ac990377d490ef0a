"""Alert banners: `<alert>` or any element with `alert-type`."""

from __future__ import annotations

from uuid import uuid4

from ..binding import Bound
from ..directive import Directive, Target
from ..serialize import escape_attr_value, escape_text, js_string


class AlertDirective(Directive):
    targets = (Target("alert"), Target("*", ("alert-type",)))

    alert_type = Bound("alert-type", default="info")
    dismissible = Bound("dismissible", "bool", default=False)
    auto_dismiss = Bound("auto-dismiss", "optional_int", default=None)
    title = Bound("title", default=None)
    icon = Bound("icon", default=None)
    css_class = Bound("css-class", default=None)
    role = Bound("role", default="alert")

    def process(self, context, output):
        preset = self.preset
        child_content = output.get_child_content()

        output.tag_name = "div"
        output.attributes.set_attribute("role", self.role or "alert")

        classes = preset.alert_classes(self.alert_type or "info")
        if self.dismissible:
            classes.append(preset.alert_dismissible)
        if self.css_class:
            classes.append(self.css_class)
        output.attributes.set_attribute("class", " ".join(classes))

        parts: list[str] = []
        if self.icon:
            parts.append(f'<i class="{escape_attr_value(self.icon)} {preset.alert_icon_spacing}"></i>')
        if self.title:
            parts.append(f"<strong>{escape_text(self.title)}</strong>")
            if not child_content.is_empty_or_whitespace:
                parts.append("<br>")
        if not child_content.is_empty_or_whitespace:
            parts.append(child_content.get_content())
        if self.dismissible:
            parts.append(preset.alert_close_button)
        output.content.set_html_content("".join(parts))

        if self.auto_dismiss is not None:
            element_id = output.attributes.get("id")
            if not element_id:
                element_id = f"alert-{uuid4().hex}"
                output.attributes.set_attribute("id", element_id)
            output.post_content.set_html_content(
                "<script>setTimeout(function() { "
                f"var el = document.getElementById({js_string(element_id)}); if (el) {{ el.remove(); }} "
                f"}}, {self.auto_dismiss});</script>"
            )
