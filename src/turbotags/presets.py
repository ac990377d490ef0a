"""CSS class presets.

Directives never hard-code framework class names; they read them from the
active `StylePreset`. Two presets ship: Bootstrap 5 and Tailwind CSS.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class StylePreset:
    name: str

    # alert
    alert_base: str
    # `{type}` is replaced with the alert type when the type has no entry in
    # `alert_variants`.
    alert_type_pattern: str
    alert_variants: Mapping[str, str]
    alert_dismissible: str
    alert_icon_spacing: str
    alert_close_button: str

    # auto-hide
    auto_hide_default: str

    # form-group
    form_group_container: str
    form_group_label: str
    form_group_input: str
    form_group_help: str
    form_group_validation: str
    required_marker: str

    # validation-message
    validation_message: str

    def __post_init__(self) -> None:
        if not isinstance(self.alert_variants, dict):
            object.__setattr__(self, "alert_variants", dict(self.alert_variants))

    def alert_classes(self, alert_type: str) -> list[str]:
        variant = self.alert_variants.get(alert_type)
        if variant is None:
            variant = self.alert_type_pattern.format(type=alert_type)
        return [c for c in (self.alert_base, variant) if c]


BOOTSTRAP: StylePreset = StylePreset(
    name="bootstrap",
    alert_base="alert",
    alert_type_pattern="alert-{type}",
    alert_variants={},
    alert_dismissible="alert-dismissible fade show",
    alert_icon_spacing="me-2",
    alert_close_button='<button type="button" class="btn-close" data-bs-dismiss="alert" aria-label="Close"></button>',
    auto_hide_default="p-3 rounded border",
    form_group_container="mb-3",
    form_group_label="form-label",
    form_group_input="form-control",
    form_group_help="form-text",
    form_group_validation="invalid-feedback",
    required_marker='<span class="text-danger">*</span>',
    validation_message="invalid-feedback d-block",
)


TAILWIND: StylePreset = StylePreset(
    name="tailwind",
    alert_base="p-4 mb-4 rounded-lg border",
    alert_type_pattern="alert-{type}",
    alert_variants={
        "primary": "bg-blue-50 border-blue-300 text-blue-800",
        "secondary": "bg-gray-50 border-gray-300 text-gray-800",
        "success": "bg-green-50 border-green-300 text-green-800",
        "danger": "bg-red-50 border-red-300 text-red-800",
        "warning": "bg-yellow-50 border-yellow-300 text-yellow-800",
        "info": "bg-sky-50 border-sky-300 text-sky-800",
        "light": "bg-white border-gray-200 text-gray-700",
        "dark": "bg-gray-800 border-gray-900 text-white",
    },
    alert_dismissible="relative pr-10 transition-opacity",
    alert_icon_spacing="mr-2",
    alert_close_button=(
        '<button type="button" class="absolute top-2 right-2 text-xl leading-none opacity-60 hover:opacity-100"'
        " onclick=\"this.parentElement.remove()\" aria-label=\"Close\">&times;</button>"
    ),
    auto_hide_default="p-4 rounded-lg border",
    form_group_container="mb-4",
    form_group_label="block text-sm font-medium text-gray-700 mb-1",
    form_group_input=(
        "block w-full rounded-md border border-gray-300 px-3 py-2 shadow-sm"
        " focus:border-blue-500 focus:ring-blue-500"
    ),
    form_group_help="mt-1 text-sm text-gray-500",
    form_group_validation="mt-1 text-sm text-red-600",
    required_marker='<span class="text-red-500">*</span>',
    validation_message="mt-1 text-sm text-red-600",
)


PRESETS: dict[str, StylePreset] = {p.name: p for p in (BOOTSTRAP, TAILWIND)}


def get_preset(name: str) -> StylePreset:
    try:
        return PRESETS[name.lower()]
    except KeyError:
        msg = f"Unknown style preset {name!r} (expected one of: {', '.join(sorted(PRESETS))})"
        raise ValueError(msg) from None
