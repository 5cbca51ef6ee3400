"""Text component and its inline spans."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

from line_builder.actions import Actionable
from line_builder.base import AttributeGroup, ConfigureFn, Node
from line_builder.context import Context
from line_builder.errors import RequiredFieldError
from line_builder.flex.attributes import PIXEL, SPACING_SIZE, Alignment, Flexible, Margin
from line_builder.validators import EnumValidator, SizeValidator

WEIGHT = EnumValidator("regular", "bold")
DECORATION = EnumValidator("none", "underline", "line-through")


@dataclass
class SpanStyle(AttributeGroup):
    color: str | None = None
    size: str | None = None
    weight: str | None = None
    decoration: str | None = None

    validators = {
        "size": SPACING_SIZE,
        "weight": WEIGHT,
        "decoration": DECORATION,
    }


@dataclass
class TextStyle(AttributeGroup):
    wrap: bool | None = None
    line_spacing: str | None = None
    color: str | None = None
    size: str | None = None
    weight: str | None = None
    decoration: str | None = None
    adjust_mode: str | None = None
    max_lines: int | None = None

    validators = {
        "line_spacing": SizeValidator(PIXEL),
        "size": SPACING_SIZE,
        "weight": WEIGHT,
        "decoration": DECORATION,
        "adjust_mode": EnumValidator("shrink-to-fit"),
    }


class Span(Node):
    """An inline styled run of text inside a Text component. Spans are inert."""

    node_type = "span"
    groups = (SpanStyle,)

    def __init__(
        self,
        text: str | None,
        *,
        context: Context | Any = None,
        configure: ConfigureFn | None = None,
        **options: Any,
    ) -> None:
        self.text = text
        super().__init__(context=context, configure=configure, **options)

    def bold(self) -> Span:
        return self.set("weight", "bold")

    def underline(self) -> Span:
        return self.set("decoration", "underline")

    def line_through(self) -> Span:
        return self.set("decoration", "line-through")

    def serialize(self) -> dict[str, Any]:
        self._require("text", self.text)
        return self._payload([
            ("type", self.node_type),
            ("text", self.text),
            *self.attribute_items(),
        ])


class Text(Actionable):
    """A text component. Needs its own text, child spans, or both."""

    node_type = "text"
    groups = (TextStyle, Alignment, Margin, Flexible)

    def __init__(
        self,
        text: str | None = None,
        *,
        context: Context | Any = None,
        configure: ConfigureFn | None = None,
        **options: Any,
    ) -> None:
        self.text = text
        self.contents: list[Span] = []
        super().__init__(context=context, configure=configure, **options)

    def children(self) -> Iterator[Node]:
        yield from super().children()
        yield from self.contents

    def add_span(
        self,
        text: str,
        *,
        configure: ConfigureFn | None = None,
        **options: Any,
    ) -> Span:
        span = Span(text, context=self.context, configure=configure, **options)
        self.contents.append(span)
        return span

    def wrap_text(self) -> Text:
        return self.set("wrap", True)

    @property
    def has_content(self) -> bool:
        return self.text is not None or bool(self.contents)

    def serialize(self) -> dict[str, Any]:
        if not self.has_content:
            raise RequiredFieldError("text.text is required unless the text has spans")
        return self._payload([
            ("type", self.node_type),
            ("text", self.text),
            ("contents", [span.serialize() for span in self.contents] or None),
            *self.attribute_items(),
            ("action", self._action_payload()),
        ])
