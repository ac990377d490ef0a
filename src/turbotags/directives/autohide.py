"""Auto-hide: hide (or remove) an element after a delay.

The directive emits one self-contained inline script per element. The script
exposes `window.autoHide_<id>` with `start()`, `hide()` and `cancel()`, and
pauses the timer while the pointer is over the element (or over the
`auto-hide-pause-on` target).
"""

from __future__ import annotations

import re
from uuid import uuid4

from ..binding import Bound
from ..directive import Directive, Target
from ..errors import emit_error
from ..serialize import js_string

# Style changes per effect, applied when the timer fires.
EFFECTS: dict[str, tuple[str, ...]] = {
    "fade": ("element.style.opacity = '0';",),
    "slide-up": ("element.style.transform = 'translateY(-100%)';", "element.style.opacity = '0';"),
    "scale": ("element.style.transform = 'scale(0)';", "element.style.opacity = '0';"),
}

_NON_IDENTIFIER = re.compile(r"[^A-Za-z0-9_$]")


def control_name(element_id: str) -> str:
    return "autoHide_" + _NON_IDENTIFIER.sub("_", element_id)


def auto_hide_script(
    element_id: str,
    *,
    delay: int = 5,
    auto_start: bool = True,
    debug: bool = False,
    effect: str = "fade",
    duration: int = 300,
    remove: bool = False,
    pause_on: str | None = None,
) -> str:
    lines: list[str] = ["(function() {"]
    add = lines.append

    add(f"    const element = document.getElementById({js_string(element_id)});")
    add("    if (!element) return;")
    add("")
    if debug:
        prefix = js_string(f"[AutoHide:{element_id}] ")
        add(f"    const log = (msg) => console.log({prefix} + msg);")
    else:
        add("    const log = () => {};")
    add("")
    add("    let hideTimer = null;")
    add("    let isPaused = false;")
    add("")
    add(f"    element.style.transition = 'all {duration}ms ease-in-out';")
    add("")
    add("    const hideElement = () => {")
    add("        log('Hiding element');")
    for statement in EFFECTS.get(effect, EFFECTS["fade"]):
        add(f"        {statement}")
    if remove:
        add(f"        setTimeout(() => element.remove(), {duration});")
    else:
        add(f"        setTimeout(() => element.style.display = 'none', {duration});")
    add("    };")
    add("")
    add("    const startTimer = () => {")
    add("        if (hideTimer) clearTimeout(hideTimer);")
    add(f"        log('Starting hide timer: {delay}s');")
    add(f"        hideTimer = setTimeout(hideElement, {delay * 1000});")
    add("    };")
    add("")

    hover_target = f"document.querySelector({js_string(pause_on)})" if pause_on else "element"
    add(f"    const hoverTarget = {hover_target};")
    add("    if (hoverTarget) {")
    add("        hoverTarget.addEventListener('mouseenter', () => {")
    add("            log('Pausing timer (hover)');")
    add("            if (hideTimer) clearTimeout(hideTimer);")
    add("            isPaused = true;")
    add("        });")
    add("        hoverTarget.addEventListener('mouseleave', () => {")
    add("            log('Resuming timer');")
    add("            isPaused = false;")
    add("            startTimer();")
    add("        });")
    add("    }")
    add("")
    add(f"    window.{control_name(element_id)} = {{")
    add("        start: startTimer,")
    add("        hide: hideElement,")
    add("        cancel: () => {")
    add("            log('Timer cancelled');")
    add("            if (hideTimer) clearTimeout(hideTimer);")
    add("        }")
    add("    };")
    if auto_start:
        add("")
        add("    log('Auto-starting hide timer');")
        add("    startTimer();")
    add("})();")
    return "\n".join(lines) + "\n"


class AutoHideDirective(Directive):
    targets = (Target("auto-hide"), Target("*", ("auto-hide",)))

    auto_hide = Bound("auto-hide", "bool", default=True)
    delay_in_seconds = Bound("auto-hide-delay", "int", default=5)
    auto_start = Bound("auto-hide-start", "bool", default=True)
    debug = Bound("auto-hide-debug", "bool", default=False)
    effect = Bound("auto-hide-effect", default="fade")
    animation_duration = Bound("auto-hide-duration", "int", default=300)
    remove_from_dom = Bound("auto-hide-remove", "bool", default=False)
    pause_on = Bound("auto-hide-pause-on", default=None)

    def process(self, context, output):
        if not self.auto_hide:
            return

        element_id = output.attributes.get("id")
        if not element_id:
            element_id = f"auto-hide-{uuid4().hex}"
            output.attributes.set_attribute("id", element_id)

        if output.tag_name == "auto-hide":
            output.tag_name = "div"
            if not output.attributes.contains("class"):
                output.attributes.set_attribute("class", self.preset.auto_hide_default)

        effect = (self.effect or "fade").lower()
        if effect not in EFFECTS:
            emit_error(
                "unknown-auto-hide-effect",
                tag=context.tag_name,
                attribute="auto-hide-effect",
                message=f"{self.effect!r} is not one of {', '.join(EFFECTS)}; using fade",
            )
            effect = "fade"

        script = auto_hide_script(
            str(element_id),
            delay=self.delay_in_seconds,
            auto_start=self.auto_start,
            debug=self.debug,
            effect=effect,
            duration=self.animation_duration,
            remove=self.remove_from_dom,
            pause_on=self.pause_on,
        )
        output.post_content.append_html(f"<script>{script}</script>")
