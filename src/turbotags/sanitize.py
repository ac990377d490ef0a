"""HTML sanitization policy and sanitizer.

The policy is an allow-list: tags not in `allowed_tags` are removed (their
text is kept when `strip_disallowed_tags` is true, escaped otherwise),
attributes not in `allowed_attributes[tag]` or `allowed_attributes["*"]` are
dropped, and URL-valued attributes must use a scheme from `allowed_protocols`
or be relative. The sanitizing itself is done by bleach.
"""

from __future__ import annotations

from collections.abc import Collection, Mapping
from dataclasses import dataclass

import bleach


@dataclass(frozen=True, slots=True)
class SanitizationPolicy:
    """All tag and attribute names are expected to be ASCII-lowercase."""

    allowed_tags: Collection[str]
    allowed_attributes: Mapping[str, Collection[str]]
    allowed_protocols: Collection[str] = frozenset({"http", "https", "mailto"})

    strip_disallowed_tags: bool = True
    drop_comments: bool = True

    def __post_init__(self) -> None:
        # Normalize to frozensets so policies can be shared freely.
        if not isinstance(self.allowed_tags, frozenset):
            object.__setattr__(self, "allowed_tags", frozenset(self.allowed_tags))

        normalized: dict[str, frozenset[str]] = {}
        for tag, attrs in self.allowed_attributes.items():
            normalized[str(tag)] = attrs if isinstance(attrs, frozenset) else frozenset(attrs)
        object.__setattr__(self, "allowed_attributes", normalized)

        if not isinstance(self.allowed_protocols, frozenset):
            object.__setattr__(self, "allowed_protocols", frozenset(self.allowed_protocols))

    def cleaner(self) -> bleach.Cleaner:
        return bleach.Cleaner(
            tags=set(self.allowed_tags),
            attributes={tag: sorted(attrs) for tag, attrs in self.allowed_attributes.items()},
            protocols=set(self.allowed_protocols),
            strip=self.strip_disallowed_tags,
            strip_comments=self.drop_comments,
        )


DEFAULT_POLICY: SanitizationPolicy = SanitizationPolicy(
    allowed_tags=[
        # Structure
        "p",
        "div",
        "span",
        # Headings
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        # Lists
        "ul",
        "ol",
        "li",
        "dl",
        "dt",
        "dd",
        # Text formatting
        "b",
        "strong",
        "i",
        "em",
        "u",
        "s",
        "del",
        "ins",
        "sub",
        "sup",
        "small",
        "mark",
        "abbr",
        # Quotes/code
        "blockquote",
        "code",
        "pre",
        # Line breaks
        "br",
        "hr",
        # Tables
        "table",
        "thead",
        "tbody",
        "tfoot",
        "tr",
        "th",
        "td",
        # Links and images
        "a",
        "img",
    ],
    allowed_attributes={
        "*": [],
        "a": ["href", "title"],
        "abbr": ["title"],
        "code": ["class"],
        "img": ["src", "alt", "title", "width", "height", "loading", "decoding"],
        "th": ["align", "colspan", "rowspan"],
        "td": ["align", "colspan", "rowspan"],
    },
)


def sanitize_html(html: str, *, policy: SanitizationPolicy = DEFAULT_POLICY) -> str:
    """Return `html` with everything outside `policy` removed."""
    if not html:
        return ""
    return policy.cleaner().clean(html)
