"""Page-model binding: expressions, metadata, validation state, editor HTML.

`asp-for="email"` names a property of the page model. The model can be a
dataclass instance (metadata comes from `field(metadata=...)`), any object with
attributes, or a plain mapping. Supported field metadata keys:

- ``display_name``: label text
- ``required``: bool
- ``data_type``: input type hint (``email``, ``password``, ``multiline``, ...)
"""

from __future__ import annotations

import dataclasses
import datetime
import decimal
import re
import typing
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .errors import DirectiveError
from .serialize import build_tag, escape_text

_ID_INVALID_CHARS = re.compile(r"[^A-Za-z0-9_:\-]")


def html_id(name: str) -> str:
    """Derive an element id from a model expression name (`a.b[0]` -> `a_b_0_`)."""
    return _ID_INVALID_CHARS.sub("_", name)


@dataclass(frozen=True, slots=True)
class ModelMetadata:
    name: str
    display_name: str | None = None
    is_required: bool = False
    data_type: str | None = None
    python_type: Any = None


@dataclass(frozen=True, slots=True)
class ModelExpression:
    """A resolved `asp-for` expression."""

    name: str
    model: Any
    metadata: ModelMetadata

    @property
    def id(self) -> str:
        return html_id(self.name)


@dataclass(slots=True)
class ModelState:
    """Validation errors keyed by model expression name."""

    errors: dict[str, list[str]] = field(default_factory=dict)

    def add_model_error(self, name: str, message: str) -> None:
        self.errors.setdefault(name, []).append(message)

    def errors_for(self, name: str) -> list[str]:
        return list(self.errors.get(name, ()))

    @property
    def is_valid(self) -> bool:
        return not any(self.errors.values())


_MISSING = object()
_PATH_PART = re.compile(r"([^.\[\]]+)|\[(\d+)\]")


def _get_member(obj: Any, part: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(part, _MISSING)
    if isinstance(obj, (list, tuple)) and part.isdigit():
        index = int(part)
        return obj[index] if index < len(obj) else _MISSING
    return getattr(obj, part, _MISSING)


def _field_metadata(owner: Any, name: str) -> ModelMetadata:
    if owner is None or not dataclasses.is_dataclass(owner):
        return ModelMetadata(name=name)
    owner_type = owner if isinstance(owner, type) else type(owner)
    for f in dataclasses.fields(owner_type):
        if f.name != name:
            continue
        try:
            hints = typing.get_type_hints(owner_type)
        except (NameError, TypeError):
            hints = {}
        meta = f.metadata
        return ModelMetadata(
            name=name,
            display_name=meta.get("display_name"),
            is_required=bool(meta.get("required", False)),
            data_type=meta.get("data_type"),
            python_type=hints.get(f.name, f.type),
        )
    return ModelMetadata(name=name)


def resolve_expression(model: Any, expression: str) -> ModelExpression:
    """Resolve a dotted/indexed property path against the page model."""
    if not expression:
        msg = "Model expression must not be empty"
        raise DirectiveError(msg)

    parts = [m.group(1) or m.group(2) for m in _PATH_PART.finditer(expression)]
    if not parts:
        msg = f"Cannot resolve {expression!r}: no member path"
        raise DirectiveError(msg)
    owner = None
    value = model
    for part in parts:
        if value is None:
            msg = f"Cannot resolve {expression!r}: {part!r} has a null owner"
            raise DirectiveError(msg)
        owner = value
        value = _get_member(value, part)
        if value is _MISSING:
            msg = f"Cannot resolve {expression!r}: no member {part!r} on {type(owner).__name__}"
            raise DirectiveError(msg)

    metadata = _field_metadata(owner, parts[-1])
    return ModelExpression(name=expression, model=value, metadata=metadata)


def lookup_name(model: Any, view_data: Mapping[str, Any], name: str) -> Any:
    """Find a value by name on the model first, then in view data."""
    if model is not None:
        try:
            return resolve_expression(model, name).model
        except DirectiveError:
            pass
    if name in view_data:
        return view_data[name]
    msg = f"{name!r} is neither a model member nor a view data key"
    raise DirectiveError(msg)


# -----------------
# HTML generation
# -----------------


def _unwrap_optional(tp: Any) -> Any:
    args = typing.get_args(tp)
    if args and type(None) in args:
        rest = [a for a in args if a is not type(None)]
        if len(rest) == 1:
            return rest[0]
    return tp


def infer_input_type(metadata: ModelMetadata) -> str:
    if metadata.data_type:
        return metadata.data_type
    tp = _unwrap_optional(metadata.python_type)
    if tp is bool:
        return "checkbox"
    if tp in (int, float, decimal.Decimal):
        return "number"
    if tp is datetime.datetime:
        return "datetime-local"
    if tp is datetime.date:
        return "date"
    if tp is datetime.time:
        return "time"
    return "text"


def format_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, datetime.datetime):
        return value.strftime("%Y-%m-%dT%H:%M")
    if isinstance(value, (datetime.date, datetime.time)):
        return value.isoformat()
    return str(value)


def editor_html(
    expr: ModelExpression,
    html_attributes: Mapping[str, Any],
    model_state: ModelState | None = None,
) -> str:
    """Generate the input (or textarea) for a model expression.

    `html_attributes` may carry an explicit ``type``; otherwise the type comes
    from the metadata. Attributes with a None value are skipped.
    """
    attrs: dict[str, Any] = {k: v for k, v in html_attributes.items() if v is not None}
    input_type = attrs.pop("type", None) or infer_input_type(expr.metadata)

    if model_state is not None and model_state.errors_for(expr.name):
        attrs["class"] = " ".join(c for c in (attrs.get("class"), "input-validation-error") if c)

    if input_type == "multiline":
        return build_tag("textarea", attrs, escape_text(format_value(expr.model)))

    out: dict[str, Any] = {"type": input_type}
    out.update(attrs)
    if input_type == "checkbox":
        out["value"] = "true"
        if expr.model:
            out["checked"] = None
    elif input_type != "password":
        out["value"] = format_value(expr.model)
    return build_tag("input", out)


def validation_message_html(
    name: str,
    model_state: ModelState | None,
    *,
    css_class: str | None = None,
    as_list: bool = False,
    tag: str = "span",
) -> str:
    """Render the validation message placeholder for `name`."""
    errors = model_state.errors_for(name) if model_state is not None else []
    state_class = "field-validation-error" if errors else "field-validation-valid"
    attrs = {
        "class": f"{css_class} {state_class}" if css_class else state_class,
        "data-valmsg-for": name,
        "data-valmsg-replace": "true",
    }
    if not errors:
        inner = ""
    elif as_list and len(errors) > 1:
        inner = "<ul>" + "".join(f"<li>{escape_text(e)}</li>" for e in errors) + "</ul>"
    else:
        inner = escape_text(errors[0])
    return build_tag(tag, attrs, inner)
