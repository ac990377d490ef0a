"""Markdown to HTML conversion.

Raw HTML inside the Markdown source is escaped unless explicitly allowed. When
it is allowed, the converted output goes through the sanitizer, so script
handlers and other active content never survive.
"""

from __future__ import annotations

import textwrap

import markdown
from markdown.extensions import Extension
from markdown.postprocessors import RawHtmlPostprocessor

from .sanitize import DEFAULT_POLICY, SanitizationPolicy, sanitize_html

EXTENSIONS = ("fenced_code", "tables", "sane_lists")


class EscapeHtmlExtension(Extension):
    """Treat raw HTML (block and inline) as literal text."""

    def extendMarkdown(self, md):  # noqa: N802
        md.preprocessors.deregister("html_block")
        md.inlinePatterns.deregister("html")


class StandaloneTagPostprocessor(RawHtmlPostprocessor):
    """Keep a raw tag that fills a whole paragraph as its own block.

    `<img src="a.png">` alone on a line stays `<img src="a.png">` instead of
    being wrapped in `<p>`, whatever the tag.
    """

    def isblocklevel(self, html):
        return self.BLOCK_LEVEL_REGEX.match(html) is not None


class HtmlBlockLineExtension(Extension):
    def extendMarkdown(self, md):  # noqa: N802
        md.postprocessors.register(StandaloneTagPostprocessor(md), "raw_html", 30)


def normalize_indentation(text: str) -> str:
    """Strip the indentation shared by every non-blank line.

    Markdown embedded in an indented template would otherwise turn into one
    big code block.
    """
    return textwrap.dedent(text)


def render_markdown(
    text: str | None,
    *,
    allow_html: bool = False,
    preserve_indentation: bool = False,
    policy: SanitizationPolicy = DEFAULT_POLICY,
) -> str:
    if not text or not text.strip():
        return ""
    if not preserve_indentation:
        text = normalize_indentation(text)

    extensions: list[str | Extension] = list(EXTENSIONS)
    extensions.append(HtmlBlockLineExtension() if allow_html else EscapeHtmlExtension())

    html = markdown.markdown(text, extensions=extensions, output_format="html")
    if allow_html:
        html = sanitize_html(html, policy=policy)
    return f"{html}\n" if html else ""
