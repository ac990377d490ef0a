"""Native lazy loading for images and iframes."""

from __future__ import annotations

from ..binding import Bound
from ..directive import Directive, Target


class LazyLoadDirective(Directive):
    targets = (Target("img", ("lazy",)), Target("iframe", ("lazy",)))

    lazy_load = Bound("lazy", "bool", default=True)
    placeholder_src = Bound("lazy-placeholder", default=None)

    def process(self, context, output):
        if not self.lazy_load:
            return

        output.attributes.set_attribute("loading", "lazy")
        if (output.tag_name or context.tag_name) == "img":
            output.attributes.set_attribute("decoding", "async")

        if self.placeholder_src:
            original = output.attributes.get("src")
            if original:
                output.attributes.set_attribute("data-src", original)
            output.attributes.set_attribute("src", self.placeholder_src)
