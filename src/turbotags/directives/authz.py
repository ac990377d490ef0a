"""Authorization-gated rendering.

    <a asp-authz="true">          shown to signed-in users only
    <a asp-authz="false">         shown to anonymous users only
    <a asp-authz-policy="a,b">    shown when every policy passes
    <a asp-authz-policy-any="a,b"> shown when any policy passes

Policy results are memoized per request in `RequestContext.view_data`, so a
policy named on many elements is evaluated once.
"""

from __future__ import annotations

import logging

from ..binding import Bound
from ..directive import Directive, Target
from ..errors import DirectiveError

logger = logging.getLogger(__name__)

AUTHZ_ATTRIBUTE = "asp-authz"
POLICY_ATTRIBUTE = "asp-authz-policy"
POLICY_ANY_ATTRIBUTE = "asp-authz-policy-any"


def split_policies(value: str | None) -> list[str]:
    if not value:
        return []
    return [p.strip() for p in value.split(",") if p.strip()]


class AuthzDirective(Directive):
    order = -10
    targets = (
        Target("*", (AUTHZ_ATTRIBUTE,)),
        Target("*", (POLICY_ATTRIBUTE,)),
        Target("*", (POLICY_ANY_ATTRIBUTE,)),
    )

    requires_authentication = Bound(AUTHZ_ATTRIBUTE, "bool", default=False)
    required_policy = Bound(POLICY_ATTRIBUTE, default=None)
    required_policy_any = Bound(POLICY_ANY_ATTRIBUTE, default=None)

    def _is_authorized(self, attribute: str, policy: str) -> bool:
        view_data = self.request.view_data
        cache_key = f"{attribute}.{policy}"
        cached = view_data.get(cache_key)
        if cached is not None:
            return bool(cached)

        authz = self.request.authorization
        if authz is None:
            msg = f"{attribute}={policy!r} needs an authorization service on the request"
            raise DirectiveError(msg)
        authorized = bool(authz.authorize(self.request.user, self.request, policy))
        view_data[cache_key] = authorized
        logger.debug("policy %r evaluated: %s", policy, authorized)
        return authorized

    def should_render(self, context) -> bool:
        user = self.request.user
        requires_auth = (
            bool(self.requires_authentication) or bool(self.required_policy) or bool(self.required_policy_any)
        )

        if context.all_attributes.contains(AUTHZ_ATTRIBUTE) and not requires_auth and not user.is_authenticated:
            # asp-authz="false" and the user is anonymous
            return True
        if self.required_policy:
            # AND: stop at the first failure
            return all(self._is_authorized(POLICY_ATTRIBUTE, p) for p in split_policies(self.required_policy))
        if self.required_policy_any:
            # OR: stop at the first success
            return any(self._is_authorized(POLICY_ANY_ATTRIBUTE, p) for p in split_policies(self.required_policy_any))
        return requires_auth and user.is_authenticated

    def process(self, context, output):
        if self.should_render(context):
            return
        logger.debug("asp-authz suppressed <%s>", context.tag_name)
        output.suppress_output()
        context.mark_suppressed_by_authz()
