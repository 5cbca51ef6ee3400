"""Bubble: one self-contained flex unit with header/hero/body/footer slots."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Iterator

from line_builder.base import AttributeGroup, ConfigureFn, Node
from line_builder.flex.box import Box
from line_builder.flex.image import Image
from line_builder.validators import EnumValidator


@dataclass
class BubbleStyle(AttributeGroup):
    size: str | None = None
    direction: str | None = None
    styles: dict[str, Any] | None = None

    validators = {
        "size": EnumValidator("nano", "micro", "deca", "hecto", "kilo", "mega", "giga"),
        "direction": EnumValidator("ltr", "rtl"),
    }


class Bubble(Node):
    """Each slot holds at most one node; assigning a slot again replaces it."""

    node_type = "bubble"
    groups = (BubbleStyle,)
    SLOTS = ("header", "hero", "body", "footer")

    def __init__(self, **kwargs: Any) -> None:
        self.slots: dict[str, Box | Image | None] = dict.fromkeys(self.SLOTS)
        super().__init__(**kwargs)

    def children(self) -> Iterator[Node]:
        return (node for node in self.slots.values() if node is not None)

    def _fill(self, slot: str, node: Box | Image) -> Any:
        self.slots[slot] = node
        return node

    def header(self, *, configure: ConfigureFn | None = None, **options: Any) -> Box:
        return self._fill("header", Box(context=self.context, configure=configure, **options))

    def hero(self, *, configure: ConfigureFn | None = None, **options: Any) -> Box:
        return self._fill("hero", Box(context=self.context, configure=configure, **options))

    def hero_image(
        self,
        url: str,
        *,
        configure: ConfigureFn | None = None,
        **options: Any,
    ) -> Image:
        return self._fill("hero", Image(url, context=self.context, configure=configure, **options))

    def body(self, *, configure: ConfigureFn | None = None, **options: Any) -> Box:
        return self._fill("body", Box(context=self.context, configure=configure, **options))

    def footer(self, *, configure: ConfigureFn | None = None, **options: Any) -> Box:
        return self._fill("footer", Box(context=self.context, configure=configure, **options))

    def serialize(self) -> dict[str, Any]:
        return self._payload([
            ("type", self.node_type),
            *((name, copy.deepcopy(value)) for name, value in self.attribute_items()),
            *(
                (slot, node.serialize() if node is not None else None)
                for slot, node in self.slots.items()
            ),
        ])
