"""Authorization collaborator used by the `asp-authz` directives."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Protocol

from .errors import UnknownPolicyError
from .request import Principal

PolicyHandler = Callable[[Principal, Any], bool]


class AuthorizationService(Protocol):
    def authorize(self, user: Principal, resource: Any, policy: str) -> bool: ...


class PolicyAuthorizationService:
    """Evaluates named policies from a table of predicates.

    Each handler receives the user and the resource (the request context when
    called from a directive) and returns whether the policy is satisfied.
    """

    __slots__ = ("_policies",)

    def __init__(self, policies: Mapping[str, PolicyHandler] | None = None) -> None:
        self._policies: dict[str, PolicyHandler] = dict(policies or {})

    def add_policy(self, name: str, handler: PolicyHandler) -> None:
        self._policies[name] = handler

    def authorize(self, user: Principal, resource: Any, policy: str) -> bool:
        handler = self._policies.get(policy)
        if handler is None:
            msg = f"No authorization policy named {policy!r} was registered"
            raise UnknownPolicyError(msg)
        return bool(handler(user, resource))


def require_authenticated_user() -> PolicyHandler:
    return lambda user, resource: user.is_authenticated


def require_role(*roles: str) -> PolicyHandler:
    """Satisfied when the user is authenticated and holds any of `roles`."""
    wanted = frozenset(roles)
    return lambda user, resource: user.is_authenticated and bool(wanted & user.roles)


def require_claim(claim_type: str, *allowed_values: str) -> PolicyHandler:
    """Satisfied when the user carries `claim_type`, optionally with one of `allowed_values`."""

    def check(user: Principal, resource: Any) -> bool:
        if not user.is_authenticated or claim_type not in user.claims:
            return False
        return not allowed_values or user.claims[claim_type] in allowed_values

    return check
