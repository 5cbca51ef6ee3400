"""Image component."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from line_builder.actions import Actionable
from line_builder.base import AttributeGroup, ConfigureFn
from line_builder.context import Context
from line_builder.flex.attributes import (
    PERCENTAGE,
    PIXEL,
    Alignment,
    Background,
    Flexible,
    Margin,
    Offset,
)
from line_builder.validators import EnumValidator, SizeValidator, SizeVariant


@dataclass
class ImageStyle(AttributeGroup):
    size: str | None = None
    aspect_ratio: str | None = None
    aspect_mode: str | None = None

    validators = {
        "size": SizeValidator(PIXEL, SizeVariant.IMAGE, PERCENTAGE),
        "aspect_mode": EnumValidator("cover", "fit"),
    }


class Image(Actionable):
    node_type = "image"
    groups = (ImageStyle, Alignment, Margin, Offset, Flexible, Background)

    def __init__(
        self,
        url: str | None,
        *,
        context: Context | Any = None,
        configure: ConfigureFn | None = None,
        **options: Any,
    ) -> None:
        self.url = url
        super().__init__(context=context, configure=configure, **options)

    def serialize(self) -> dict[str, Any]:
        self._require("url", self.url)
        return self._payload([
            ("type", self.node_type),
            ("url", self.url),
            *self.attribute_items(),
            ("action", self._action_payload()),
        ])
