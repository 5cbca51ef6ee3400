"""Node base classes, attribute groups and payload serialization."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
from typing import Any, Callable, ClassVar, Iterable, Iterator, Mapping, Self, TypeVar

from line_builder.context import Context, ensure_context
from line_builder.errors import RequiredFieldError
from line_builder.validators import Validator

G = TypeVar("G", bound="AttributeGroup")
ConfigureFn = Callable[[Any], None]


# ---------------------------------------------------------------------------
# Attribute groups
# ---------------------------------------------------------------------------

@dataclass
class AttributeGroup:
    """A bundle of optional attributes shared by several node types.

    Every assignment is checked against ``validators`` so an out-of-range
    value fails where it is set, not when the tree is serialized.
    """

    validators: ClassVar[Mapping[str, Validator]] = {}
    aliases: ClassVar[Mapping[str, str]] = {}

    def __setattr__(self, name: str, value: Any) -> None:
        validator = self.validators.get(name)
        if validator is not None:
            owner = self.__dict__.get("_owner")
            validator.validate(value, field=f"{owner}.{name}" if owner else name)
        object.__setattr__(self, name, value)

    def owned_by(self, owner: str) -> Self:
        """Name the node type in validation errors raised by this group."""
        object.__setattr__(self, "_owner", owner)
        return self

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def lookup(cls, name: str) -> str | None:
        name = cls.aliases.get(name, name)
        return name if name in cls.field_names() else None

    def items(self) -> Iterator[tuple[str, Any]]:
        for name in self.field_names():
            yield name, getattr(self, name)


# ---------------------------------------------------------------------------
# Nodes
# ---------------------------------------------------------------------------

class Node(ABC):
    """Base of every element in a message tree.

    ``groups`` lists the attribute groups a node type carries; one instance
    of each is created per node. Keyword options passed to the constructor
    are routed to the group that declares them.
    """

    node_type: ClassVar[str]
    groups: ClassVar[tuple[type[AttributeGroup], ...]] = ()

    def __init__(
        self,
        *,
        context: Context | Any = None,
        configure: ConfigureFn | None = None,
        **options: Any,
    ) -> None:
        self.context = ensure_context(context)
        self._groups: dict[type[AttributeGroup], AttributeGroup] = {
            group: group().owned_by(self.node_type) for group in self.groups
        }
        self.update(**options)
        if configure is not None:
            configure(self)

    # -- attributes ----------------------------------------------------------

    def group(self, group: type[G]) -> G:
        return self._groups[group]  # type: ignore[return-value]

    def set(self, name: str, value: Any) -> Self:
        group, field = self._locate(name)
        setattr(group, field, value)
        return self

    def update(self, **options: Any) -> Self:
        for name, value in options.items():
            self.set(name, value)
        return self

    def get(self, name: str) -> Any:
        group, field = self._locate(name)
        return getattr(group, field)

    def attribute_items(self) -> Iterator[tuple[str, Any]]:
        for group in self._groups.values():
            yield from group.items()

    def _locate(self, name: str) -> tuple[AttributeGroup, str]:
        for group in self._groups.values():
            field = group.lookup(name)
            if field is not None:
                return group, field
        raise TypeError(f"{type(self).__name__} got an unexpected attribute {name!r}")

    # -- tree ----------------------------------------------------------------

    def children(self) -> Iterator[Node]:
        return iter(())

    def bind(self, context: Context) -> Self:
        """Move this node and its whole subtree under ``context``."""
        self.context = context
        for child in self.children():
            child.bind(context)
        return self

    # -- serialization -------------------------------------------------------

    @abstractmethod
    def serialize(self) -> dict[str, Any]: ...

    def _payload(self, pairs: Iterable[tuple[str, Any]]) -> dict[str, Any]:
        """Build the wire mapping: drop ``None`` values, apply the mode's key names."""
        key = self.context.key
        return {key(name): value for name, value in pairs if value is not None}

    def _require(self, name: str, value: Any) -> None:
        if value is None:
            raise RequiredFieldError(f"{self.node_type}.{name} is required")

    def __repr__(self) -> str:
        return f"<{type(self).__name__} mode={self.context.mode.value}>"
