"""`asp-if` and `asp-enabled`."""

from __future__ import annotations

import logging

from ..binding import Bound
from ..directive import Directive, Target

logger = logging.getLogger(__name__)


class IfDirective(Directive):
    """Removes the element when `asp-if` is false.

    Runs ahead of every other directive, `asp-authz` included, so a hidden
    element never triggers policy evaluation.
    """

    order = -1100
    targets = (Target("*", ("asp-if",)),)

    include = Bound("asp-if", "bool", default=True)

    def process(self, context, output):
        if self.include:
            return
        logger.debug("asp-if suppressed <%s>", context.tag_name)
        output.suppress_output()
        context.mark_suppressed_by_if()


_FORM_CONTROLS = ("button", "fieldset", "input", "optgroup", "option", "select", "textarea")


class EnabledDirective(Directive):
    """Adds `disabled` to form controls when `asp-enabled` is false."""

    targets = tuple(Target(tag, ("asp-enabled",)) for tag in _FORM_CONTROLS)

    is_enabled = Bound("asp-enabled", "bool", default=True)

    def process(self, context, output):
        if not self.is_enabled:
            output.attributes.set_attribute("disabled", None)
