"""Form scaffolding: `<form-group>` and `<validation-message>`."""

from __future__ import annotations

from ..binding import Bound
from ..directive import Directive, Target
from ..errors import emit_error
from ..model import editor_html, validation_message_html
from ..serialize import build_tag, escape_text


class FormGroupDirective(Directive):
    """Label + editor + help text + validation message for one model property."""

    targets = (Target("form-group"),)

    for_expression = Bound("asp-for", "expression", default=None)
    label = Bound("label", default=None)
    help_text = Bound("help-text", default=None)
    container_class = Bound("container-class", default=None)
    label_class = Bound("label-class", default=None)
    input_class = Bound("input-class", default=None)
    show_validation = Bound("show-validation", "bool", default=True)
    required = Bound("required", "bool", default=None)
    input_type = Bound("input-type", default=None)
    placeholder = Bound("placeholder", default=None)

    def process(self, context, output):
        expr = self.for_expression
        if expr is None:
            emit_error("missing-asp-for", tag=context.tag_name, attribute="asp-for")
            return
        preset = self.preset
        model_state = self.request.model_state

        output.tag_name = "div"
        output.attributes.set_attribute("class", self.container_class or preset.form_group_container)

        metadata = expr.metadata
        label_text = self.label or metadata.display_name or metadata.name
        is_required = metadata.is_required if self.required is None else bool(self.required)

        label_inner = escape_text(label_text)
        if is_required:
            label_inner += f" {preset.required_marker}"
        output.content.append_html(
            build_tag("label", {"for": expr.id, "class": self.label_class or preset.form_group_label}, label_inner)
        )

        input_attributes = {
            "class": self.input_class or preset.form_group_input,
            "id": expr.id,
            "name": expr.name,
            "placeholder": self.placeholder or None,
            "type": self.input_type or None,
            "required": "required" if is_required else None,
        }
        output.content.append_html(editor_html(expr, input_attributes, model_state))

        if self.help_text:
            output.content.append_html(build_tag("div", {"class": preset.form_group_help}, escape_text(self.help_text)))

        if self.show_validation:
            output.content.append_html(
                validation_message_html(expr.name, model_state, css_class=preset.form_group_validation)
            )


class ValidationMessageDirective(Directive):
    targets = (Target("validation-message"), Target("*", ("asp-validation-for",)))

    for_name = Bound("asp-validation-for", default=None)
    css_class = Bound("css-class", default=None)
    show_as_list = Bound("show-as-list", "bool", default=False)
    custom_message = Bound("custom-message", default=None)

    def process(self, context, output):
        output.tag_name = "div"
        output.attributes.set_attribute("class", self.css_class or self.preset.validation_message)

        # Accept a resolved ModelExpression as well as a bare name.
        name = getattr(self.for_name, "name", self.for_name)
        if name:
            if self.custom_message:
                output.content.append(self.custom_message)
            else:
                output.content.append_html(
                    validation_message_html(name, self.request.model_state, as_list=bool(self.show_as_list))
                )
        elif self.custom_message:
            output.content.append(self.custom_message)
