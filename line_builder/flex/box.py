"""Box: a layout container arranging child components in one direction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Union

from line_builder.actions import Actionable
from line_builder.base import AttributeGroup, ConfigureFn, Node
from line_builder.context import Context
from line_builder.errors import RequiredFieldError
from line_builder.flex.attributes import (
    DIMENSION,
    SPACING_SIZE,
    Background,
    Flexible,
    Margin,
    Offset,
    Padding,
)
from line_builder.flex.button import Button
from line_builder.flex.image import Image
from line_builder.flex.separator import Separator
from line_builder.flex.text import Text
from line_builder.validators import EnumValidator

LAYOUTS = ("horizontal", "vertical", "baseline")


@dataclass
class BoxLayout(AttributeGroup):
    layout: str | None = "horizontal"
    justify_content: str | None = None
    align_items: str | None = None
    spacing: str | None = None

    validators = {
        "layout": EnumValidator(*LAYOUTS),
        "justify_content": EnumValidator(
            "flex-start", "center", "flex-end", "space-between", "space-around", "space-evenly"
        ),
        "align_items": EnumValidator("flex-start", "center", "flex-end"),
        "spacing": SPACING_SIZE,
    }


@dataclass
class Dimensions(AttributeGroup):
    width: str | None = None
    max_width: str | None = None
    height: str | None = None
    max_height: str | None = None

    validators = {
        "width": DIMENSION,
        "max_width": DIMENSION,
        "height": DIMENSION,
        "max_height": DIMENSION,
    }


Component = Union["Box", Text, Button, Image, Separator]


class Box(Actionable):
    node_type = "box"
    groups = (BoxLayout, Padding, Margin, Offset, Dimensions, Flexible, Background)

    def __init__(
        self,
        *,
        context: Context | Any = None,
        configure: ConfigureFn | None = None,
        **options: Any,
    ) -> None:
        self.contents: list[Component] = []
        super().__init__(context=context, configure=configure, **options)

    def children(self) -> Iterator[Node]:
        yield from super().children()
        yield from self.contents

    def _append(self, child: Component) -> Any:
        self.contents.append(child)
        return child

    def add_box(self, *, configure: ConfigureFn | None = None, **options: Any) -> Box:
        return self._append(Box(context=self.context, configure=configure, **options))

    def add_text(
        self,
        text: str | None = None,
        *,
        configure: ConfigureFn | None = None,
        **options: Any,
    ) -> Text:
        return self._append(Text(text, context=self.context, configure=configure, **options))

    def add_button(self, *, configure: ConfigureFn | None = None, **options: Any) -> Button:
        return self._append(Button(context=self.context, configure=configure, **options))

    def add_image(
        self,
        url: str,
        *,
        configure: ConfigureFn | None = None,
        **options: Any,
    ) -> Image:
        return self._append(Image(url, context=self.context, configure=configure, **options))

    def add_separator(self, *, configure: ConfigureFn | None = None) -> Separator:
        return self._append(Separator(context=self.context, configure=configure))

    def serialize(self) -> dict[str, Any]:
        self._require("layout", self.get("layout"))
        if not self.contents and self.context.settings.strict_box_contents:
            raise RequiredFieldError("box.contents should have at least 1 component")
        return self._payload([
            ("type", self.node_type),
            *self.attribute_items(),
            ("contents", [child.serialize() for child in self.contents]),
            ("action", self._action_payload()),
        ])
