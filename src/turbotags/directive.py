"""Directive base class, target selectors and the directive registry."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, ClassVar, TypeVar

from .attributes import AttributeList
from .binding import Bound
from .node import RenderContext, TagOutput
from .presets import BOOTSTRAP, StylePreset
from .request import RequestContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Target:
    """Which elements a directive applies to.

    `tag` is a tag name or "*"; every name in `attributes` must be present.
    """

    tag: str = "*"
    attributes: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "tag", self.tag.lower())
        if isinstance(self.attributes, str):
            object.__setattr__(self, "attributes", (self.attributes,))
        object.__setattr__(self, "attributes", tuple(a.lower() for a in self.attributes))

    def matches(self, tag_name: str, attributes: AttributeList) -> bool:
        if self.tag != "*" and self.tag != tag_name.lower():
            return False
        return all(attributes.contains(a) for a in self.attributes)


class Directive:
    """Base class for element directives.

    Subclasses declare `targets`, an `order` (lower runs first) and their
    attributes as `Bound` class attributes, then implement `process()`.
    """

    order: ClassVar[int] = 0
    targets: ClassVar[tuple[Target, ...]] = ()
    bindings: ClassVar[dict[str, Bound]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        bindings: dict[str, Bound] = {}
        for base in reversed(cls.__mro__[1:]):
            bindings.update(getattr(base, "bindings", {}))
        for name, value in list(vars(cls).items()):
            if isinstance(value, Bound):
                bindings[value.attribute] = value
                setattr(cls, name, value.default)
        cls.bindings = bindings

    def __init__(
        self,
        request: RequestContext | None = None,
        preset: StylePreset | None = None,
        **properties: Any,
    ) -> None:
        self.request = request if request is not None else RequestContext()
        self.preset = preset or BOOTSTRAP
        known = {b.name for b in self.bindings.values()}
        for name, value in properties.items():
            if name not in known:
                msg = f"{type(self).__name__} has no bound property {name!r}"
                raise TypeError(msg)
            setattr(self, name, value)

    @classmethod
    def applies_to(cls, tag_name: str, attributes: AttributeList) -> bool:
        return any(t.matches(tag_name, attributes) for t in cls.targets)

    def bind(self, attributes: AttributeList, tag_name: str) -> None:
        for attr in attributes:
            binding = self.bindings.get(attr.name.lower())
            if binding is not None:
                setattr(self, binding.name, binding.convert(attr.value, tag=tag_name, request=self.request))

    def render(self, context: RenderContext, output: TagOutput) -> None:
        if context is None:
            msg = "context must not be None"
            raise TypeError(msg)
        if output is None:
            msg = "output must not be None"
            raise TypeError(msg)
        if context.suppressed_by_if() or context.suppressed_by_authz():
            logger.debug("%s skipped on <%s>: element suppressed", type(self).__name__, context.tag_name)
            return
        self.process(context, output)

    def process(self, context: RenderContext, output: TagOutput) -> None:
        raise NotImplementedError


D = TypeVar("D", bound=type[Directive])


class DirectiveRegistry:
    """Maps elements to the directives that target them."""

    __slots__ = ("_directives",)

    def __init__(self, directives: Iterable[type[Directive]] = ()) -> None:
        self._directives: list[type[Directive]] = []
        for cls in directives:
            self.register(cls)

    def register(self, cls: D) -> D:
        if not (isinstance(cls, type) and issubclass(cls, Directive)):
            msg = f"Unsupported directive: {cls!r}"
            raise TypeError(msg)
        if not cls.targets:
            msg = f"{cls.__name__} declares no targets"
            raise ValueError(msg)
        if cls not in self._directives:
            self._directives.append(cls)
        return cls

    def unregister(self, cls: type[Directive]) -> None:
        self._directives.remove(cls)

    def resolve(self, tag_name: str, attributes: AttributeList) -> list[type[Directive]]:
        """Directives for one element, lowest order first (stable for ties)."""
        matched = [cls for cls in self._directives if cls.applies_to(tag_name, attributes)]
        matched.sort(key=lambda cls: cls.order)
        return matched

    def copy(self) -> DirectiveRegistry:
        return DirectiveRegistry(self._directives)

    def __contains__(self, cls: object) -> bool:
        return cls in self._directives

    def __iter__(self) -> Iterator[type[Directive]]:
        return iter(list(self._directives))

    def __len__(self) -> int:
        return len(self._directives)
