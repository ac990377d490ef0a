"""Populate `<datalist>` options from a string list or value/text items."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from ..binding import Bound
from ..directive import Directive, Target
from ..serialize import serialize_start_tag


_MISSING = object()


@dataclass(frozen=True, slots=True)
class SelectItem:
    value: str
    text: str | None = None


def as_select_item(item: Any) -> SelectItem:
    if isinstance(item, SelectItem):
        return item
    if isinstance(item, Mapping):
        return SelectItem(str(item.get("value", "")), item.get("text"))
    if isinstance(item, tuple) and len(item) == 2:
        value, text = item
        return SelectItem(str(value), None if text is None else str(text))
    value = getattr(item, "value", _MISSING)
    if value is not _MISSING:
        return SelectItem(str(value), getattr(item, "text", None))
    msg = f"Cannot use {item!r} as a datalist item"
    raise TypeError(msg)


def option_tags_from_list(values: Iterable[Any]) -> list[str]:
    return [serialize_start_tag("option", {"value": str(v)}) for v in values]


def option_tags_from_items(items: Iterable[Any]) -> list[str]:
    tags: list[str] = []
    for raw in items:
        item = as_select_item(raw)
        attrs = {"value": item.value}
        if item.text and item.text != item.value:
            attrs["label"] = item.text
        tags.append(serialize_start_tag("option", attrs))
    return tags


def _as_list(value: Any) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return list(value)


class DatalistDirective(Directive):
    order = -1000
    targets = (Target("datalist", ("asp-list",)), Target("datalist", ("asp-items",)))

    values = Bound("asp-list", "object", default=None)
    items = Bound("asp-items", "object", default=None)

    def process(self, context, output):
        items = _as_list(self.items)
        values = _as_list(self.values)

        # Items win over the plain list when both are given.
        if items:
            options = option_tags_from_items(items)
        elif values:
            options = option_tags_from_list(values)
        else:
            return

        output.post_content.append_html("".join(f"{tag}\n" for tag in options))
