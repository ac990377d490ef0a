from ..directive import DirectiveRegistry
from .alert import AlertDirective
from .authz import AuthzDirective
from .autohide import AutoHideDirective
from .conditional import EnabledDirective, IfDirective
from .datalist import DatalistDirective, SelectItem
from .forms import FormGroupDirective, ValidationMessageDirective
from .lazyload import LazyLoadDirective
from .markdown import MarkdownDirective

BUILTIN_DIRECTIVES = (
    IfDirective,
    AuthzDirective,
    DatalistDirective,
    EnabledDirective,
    AlertDirective,
    AutoHideDirective,
    LazyLoadDirective,
    FormGroupDirective,
    ValidationMessageDirective,
    MarkdownDirective,
)


def default_registry() -> DirectiveRegistry:
    """A fresh registry holding every built-in directive."""
    return DirectiveRegistry(BUILTIN_DIRECTIVES)


__all__ = [
    "BUILTIN_DIRECTIVES",
    "AlertDirective",
    "AuthzDirective",
    "AutoHideDirective",
    "DatalistDirective",
    "EnabledDirective",
    "FormGroupDirective",
    "IfDirective",
    "LazyLoadDirective",
    "MarkdownDirective",
    "SelectItem",
    "ValidationMessageDirective",
    "default_registry",
]
