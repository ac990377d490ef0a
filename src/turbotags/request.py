"""Request-scoped state shared by all directives during one render."""

from __future__ import annotations

from collections.abc import Collection, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .model import ModelState

if TYPE_CHECKING:
    from .auth import AuthorizationService


@dataclass(frozen=True, slots=True)
class Principal:
    """The current user as far as the authorization directives care."""

    name: str | None = None
    is_authenticated: bool = False
    roles: Collection[str] = field(default_factory=frozenset)
    claims: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.roles, frozenset):
            object.__setattr__(self, "roles", frozenset(self.roles))

    def is_in_role(self, role: str) -> bool:
        return role in self.roles


ANONYMOUS = Principal()


@dataclass(slots=True)
class RequestContext:
    """Everything a directive may need from the current request.

    `view_data` lives for one render pass. The authorization directive uses it
    to memoize policy results; datalist lookups read named collections from it.
    """

    user: Principal = ANONYMOUS
    authorization: AuthorizationService | None = None
    model: Any = None
    model_state: ModelState = field(default_factory=ModelState)
    view_data: dict[str, Any] = field(default_factory=dict)
