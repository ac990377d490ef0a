from .attributes import Attribute, AttributeList
from .auth import (
    AuthorizationService,
    PolicyAuthorizationService,
    require_authenticated_user,
    require_claim,
    require_role,
)
from .binding import Bound
from .content import HtmlContent
from .directive import Directive, DirectiveRegistry, Target
from .directives import BUILTIN_DIRECTIVES, default_registry
from .errors import DirectiveError, RenderError, StrictModeError, UnknownPolicyError, emit_error
from .markdown_html import render_markdown
from .model import ModelExpression, ModelMetadata, ModelState
from .node import RenderContext, TagOutput
from .parser import parse_template
from .presets import BOOTSTRAP, PRESETS, TAILWIND, StylePreset, get_preset
from .renderer import Renderer, render
from .request import ANONYMOUS, Principal, RequestContext
from .sanitize import DEFAULT_POLICY, SanitizationPolicy, sanitize_html

__all__ = [
    "ANONYMOUS",
    "BOOTSTRAP",
    "BUILTIN_DIRECTIVES",
    "DEFAULT_POLICY",
    "PRESETS",
    "TAILWIND",
    "Attribute",
    "AttributeList",
    "AuthorizationService",
    "Bound",
    "Directive",
    "DirectiveError",
    "DirectiveRegistry",
    "HtmlContent",
    "ModelExpression",
    "ModelMetadata",
    "ModelState",
    "PolicyAuthorizationService",
    "Principal",
    "RenderContext",
    "RenderError",
    "Renderer",
    "RequestContext",
    "SanitizationPolicy",
    "StrictModeError",
    "StylePreset",
    "TagOutput",
    "Target",
    "UnknownPolicyError",
    "default_registry",
    "emit_error",
    "get_preset",
    "parse_template",
    "render",
    "render_markdown",
    "require_authenticated_user",
    "require_claim",
    "require_role",
    "sanitize_html",
]
