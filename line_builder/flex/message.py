"""Flex message: a top-level message wrapping a bubble or carousel."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

from line_builder.base import AttributeGroup, ConfigureFn, Node
from line_builder.errors import StructuralError
from line_builder.flex.bubble import Bubble
from line_builder.flex.carousel import Carousel
from line_builder.messages import Message


@dataclass
class AltText(AttributeGroup):
    alt_text: str | None = None


class FlexMessage(Message):
    """``bubble()`` and ``carousel()`` are mutually exclusive; the last call wins."""

    node_type = "flex"
    groups = (AltText,)

    def __init__(self, **kwargs: Any) -> None:
        self.contents: Bubble | Carousel | None = None
        super().__init__(**kwargs)

    def children(self) -> Iterator[Node]:
        yield from super().children()
        if self.contents is not None:
            yield self.contents

    def bubble(self, *, configure: ConfigureFn | None = None, **options: Any) -> Bubble:
        self.contents = Bubble(context=self.context, configure=configure, **options)
        return self.contents

    def carousel(self, *, configure: ConfigureFn | None = None) -> Carousel:
        self.contents = Carousel(context=self.context, configure=configure)
        return self.contents

    def serialize(self) -> dict[str, Any]:
        if self.contents is None:
            raise StructuralError("flex message contents (bubble or carousel) must be defined")
        self._require("alt_text", self.get("alt_text"))
        return self._payload([
            ("type", self.node_type),
            ("alt_text", self.get("alt_text")),
            ("contents", self.contents.serialize()),
            ("quick_reply", self._quick_reply_payload()),
        ])
