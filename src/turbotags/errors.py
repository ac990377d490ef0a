"""Render-time error records and the error sink.

Directives never fail a render because of a malformed attribute. They report
a `RenderError` through `emit_error()` and fall back to a default instead. The
renderer decides what happens to those reports: drop them, collect them, or
raise on the first one in strict mode.
"""

from __future__ import annotations

from contextvars import ContextVar


class RenderError:
    """A problem found while rendering one element."""

    __slots__ = ("attribute", "code", "message", "tag")

    def __init__(self, code, tag=None, attribute=None, message=None):
        self.code = code
        self.tag = tag
        self.attribute = attribute
        self.message = message or code

    def __repr__(self):
        if self.tag is not None:
            return f"RenderError({self.code!r}, tag={self.tag!r}, attribute={self.attribute!r})"
        return f"RenderError({self.code!r})"

    def __str__(self):
        where = ""
        if self.tag is not None:
            where = f"<{self.tag}>"
            if self.attribute is not None:
                where += f"[{self.attribute}]"
            where += ": "
        if self.message != self.code:
            return f"{where}{self.code} - {self.message}"
        return f"{where}{self.code}"

    def __eq__(self, other):
        if not isinstance(other, RenderError):
            return NotImplemented
        return self.code == other.code and self.tag == other.tag and self.attribute == other.attribute

    __hash__ = None  # Unhashable since we define __eq__


class StrictModeError(Exception):
    """Raised by a strict renderer on the first reported problem."""

    def __init__(self, error: RenderError) -> None:
        self.error = error
        super().__init__(str(error))


class DirectiveError(Exception):
    """A directive cannot do its job at all (e.g. `asp-for` names nothing)."""


class UnknownPolicyError(LookupError):
    """An authorization policy name has no registered handler."""


_ERROR_SINK: ContextVar[list[RenderError] | None] = ContextVar("turbotags_error_sink", default=None)
_STRICT: ContextVar[bool] = ContextVar("turbotags_strict", default=False)


def emit_error(
    code: str,
    *,
    tag: str | None = None,
    attribute: str | None = None,
    message: str | None = None,
) -> None:
    """Report a render problem to the active sink.

    If no sink is active (a directive used outside `Renderer.render`), this is
    a no-op unless strict mode is on.
    """

    error = RenderError(str(code), tag=tag, attribute=attribute, message=message)
    if _STRICT.get():
        raise StrictModeError(error)

    sink = _ERROR_SINK.get()
    if sink is None:
        return
    sink.append(error)


class error_sink:
    """Context manager that activates an error sink for one render pass."""

    __slots__ = ("_sink_token", "_strict_token", "errors", "strict")

    def __init__(self, errors: list[RenderError] | None = None, *, strict: bool = False) -> None:
        self.errors = errors if errors is not None else []
        self.strict = bool(strict)
        self._sink_token = None
        self._strict_token = None

    def __enter__(self) -> list[RenderError]:
        self._sink_token = _ERROR_SINK.set(self.errors)
        self._strict_token = _STRICT.set(self.strict)
        return self.errors

    def __exit__(self, exc_type, exc, tb) -> None:
        _STRICT.reset(self._strict_token)
        _ERROR_SINK.reset(self._sink_token)
