"""Attribute → directive property binding.

A directive declares its attributes as class-level `Bound` specs::

    class AlertDirective(Directive):
        alert_type = Bound("alert-type", default="info")
        dismissible = Bound("dismissible", "bool", default=False)

`Directive.__init_subclass__` collects the specs and replaces each with its
default, so an unbound directive simply reads its defaults. Binding converts
raw attribute values by kind. Bound attributes are consumed: they never reach
the rendered element.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Literal

from .errors import emit_error
from .model import ModelExpression, lookup_name, resolve_expression

if TYPE_CHECKING:
    from .request import RequestContext

BindingKind = Literal["str", "bool", "int", "optional_int", "expression", "object"]

_TRUE = frozenset({"true", "1", "yes", "on"})
_FALSE = frozenset({"", "false", "0", "no", "off"})


class Bound:
    __slots__ = ("attribute", "default", "kind", "name")

    def __init__(self, attribute: str, kind: BindingKind = "str", default: Any = None) -> None:
        self.attribute = attribute.lower()
        self.kind = kind
        self.default = default
        self.name = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"Bound({self.attribute!r}, {self.kind!r}, default={self.default!r})"

    def convert(self, raw: Any, *, tag: str, request: RequestContext) -> Any:
        """Convert a raw attribute value; malformed values fall back to the default."""
        kind = self.kind
        if kind == "str":
            return "" if raw is None else str(raw)
        if kind == "bool":
            return _to_bool(raw, self, tag)
        if kind in ("int", "optional_int"):
            return _to_int(raw, self, tag)
        if kind == "expression":
            if raw is None or isinstance(raw, ModelExpression):
                return raw
            return resolve_expression(request.model, str(raw))
        if kind == "object":
            if isinstance(raw, str):
                return lookup_name(request.model, request.view_data, raw)
            return raw
        msg = f"Unsupported binding kind: {kind!r}"
        raise TypeError(msg)


def _to_bool(raw: Any, binding: Bound, tag: str) -> Any:
    if raw is None:
        # Bare attribute: <alert dismissible>
        return True
    if isinstance(raw, bool):
        return raw
    text = str(raw).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    emit_error(
        "invalid-bool-attribute",
        tag=tag,
        attribute=binding.attribute,
        message=f"Expected true or false, got {raw!r}",
    )
    return binding.default


def _to_int(raw: Any, binding: Bound, tag: str) -> Any:
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    text = "" if raw is None else str(raw).strip()
    if not text and binding.kind == "optional_int":
        return None
    try:
        return int(text)
    except ValueError:
        emit_error(
            "invalid-int-attribute",
            tag=tag,
            attribute=binding.attribute,
            message=f"Expected an integer, got {raw!r}",
        )
        return binding.default
