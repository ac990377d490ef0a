"""Markdown blocks: `<markdown>` or any element with `asp-markdown`."""

from __future__ import annotations

from ..binding import Bound
from ..directive import Directive, Target
from ..markdown_html import render_markdown


class MarkdownDirective(Directive):
    targets = (Target("markdown"), Target("*", ("asp-markdown",)))

    marker = Bound("asp-markdown", "bool", default=True)
    allow_html = Bound("allow-html", "bool", default=False)
    preserve_indentation = Bound("preserve-indentation", "bool", default=False)

    def process(self, context, output):
        if output.tag_name == "markdown":
            output.tag_name = None
        elif not self.marker:
            return

        source = output.get_child_content().get_content()
        output.content.set_html_content(
            render_markdown(
                source,
                allow_html=bool(self.allow_html),
                preserve_indentation=bool(self.preserve_indentation),
            )
        )
