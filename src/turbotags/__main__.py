"""Render a template from the command line.

    python -m turbotags page.html --preset tailwind --authenticated --policy Admin
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .errors import DirectiveError, StrictModeError
from .presets import PRESETS
from .renderer import Renderer
from .request import ANONYMOUS, Principal, RequestContext


class GrantedPolicies:
    """Authorization service that passes exactly the policies named on the command line."""

    __slots__ = ("granted",)

    def __init__(self, granted):
        self.granted = frozenset(granted)

    def authorize(self, user, resource, policy):
        return user.is_authenticated and policy in self.granted


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="turbotags", description="Render a template with the built-in directives")
    parser.add_argument("template", help="Template file, or - to read stdin")
    parser.add_argument("--preset", choices=sorted(PRESETS), default="bootstrap", help="Style preset")
    parser.add_argument("--strict", action="store_true", help="Fail on the first render problem")
    parser.add_argument("--errors", action="store_true", help="Print render problems to stderr")
    parser.add_argument("--authenticated", action="store_true", help="Render for a signed-in user")
    parser.add_argument(
        "--policy",
        action="append",
        default=[],
        metavar="NAME",
        help="Authorization policy the user satisfies (repeatable)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def read_template(path):
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format="%(name)s: %(message)s")

    user = Principal(name="cli", is_authenticated=True) if args.authenticated else ANONYMOUS
    request = RequestContext(user=user, authorization=GrantedPolicies(args.policy))
    renderer = Renderer(preset=PRESETS[args.preset], collect_errors=args.errors, strict=args.strict)

    try:
        html = renderer.render(read_template(args.template), request)
    except (StrictModeError, DirectiveError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    sys.stdout.write(html)
    for error in renderer.errors:
        print(error, file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
