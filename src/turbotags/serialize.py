"""HTML serialization helpers for template elements and rendering nodes."""

# ruff: noqa: PERF401

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

# HTML5 void elements (no closing tag)
VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)


def escape_text(text: str | None) -> str:
    if not text:
        return ""
    return str(text).replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def escape_attr_value(value: Any) -> str:
    if value is None:
        return ""
    return str(value).replace("&", "&amp;").replace('"', "&quot;")


def _attr_pairs(attrs: Any) -> Iterable[tuple[str, Any]]:
    if attrs is None:
        return ()
    if isinstance(attrs, Mapping):
        return attrs.items()
    # AttributeList or any iterable of objects with name/value.
    return ((a.name, a.value) for a in attrs)


def serialize_attrs(attrs: Any) -> str:
    parts: list[str] = []
    for key, value in _attr_pairs(attrs):
        if value is None or value is True:
            parts.extend([" ", key])
            continue
        if value is False:
            continue
        parts.extend([" ", key, '="', escape_attr_value(value), '"'])
    return "".join(parts)


def serialize_start_tag(name: str, attrs: Any = None, *, use_trailing_solidus: bool = False) -> str:
    tail = " />" if use_trailing_solidus else ">"
    return f"<{name}{serialize_attrs(attrs)}{tail}"


def serialize_end_tag(name: str) -> str:
    return f"</{name}>"


def is_void(name: str | None) -> bool:
    return bool(name) and str(name).lower() in VOID_ELEMENTS


def build_tag(name: str, attrs: Any = None, inner_html: str = "") -> str:
    """Serialize one complete element whose inner HTML is already escaped."""
    if is_void(name):
        return serialize_start_tag(name, attrs)
    return f"{serialize_start_tag(name, attrs)}{inner_html}{serialize_end_tag(name)}"


def to_html(node: Any) -> str:
    """Serialize a parsed template tree verbatim (no directives applied)."""
    name: str = node.name

    if name == "#text":
        return node.data or ""

    if name == "#comment":
        return f"<!--{node.data or ''}-->"

    if name == "!doctype":
        return f"<!{node.data or 'DOCTYPE html'}>"

    if name == "#document-fragment":
        return "".join(to_html(child) for child in node.children)

    open_tag = serialize_start_tag(name, node.attrs, use_trailing_solidus=node.self_closing)
    if is_void(name) or node.self_closing:
        return open_tag
    inner = "".join(to_html(child) for child in node.children)
    return f"{open_tag}{inner}{serialize_end_tag(name)}"


_JS_ESCAPES = {
    "\\": "\\\\",
    "'": "\\'",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
    "<": "\\u003C",
    ">": "\\u003E",
    "&": "\\u0026",
}


def js_string(value: Any) -> str:
    """Single-quoted JavaScript string literal, safe inside an inline <script>."""
    text = "" if value is None else str(value)
    return "'" + "".join(_JS_ESCAPES.get(ch, ch) for ch in text) + "'"
