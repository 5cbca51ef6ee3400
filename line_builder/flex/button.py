"""Button component. Unlike other components its action is mandatory."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from line_builder.actions import Actionable
from line_builder.base import AttributeGroup
from line_builder.flex.attributes import Flexible, Margin, Offset
from line_builder.validators import EnumValidator


@dataclass
class ButtonStyle(AttributeGroup):
    style: str | None = "link"
    height: str | None = "md"
    color: str | None = None
    gravity: str | None = None
    adjust_mode: str | None = None

    validators = {
        "style": EnumValidator("primary", "secondary", "link"),
        "height": EnumValidator("sm", "md"),
        "gravity": EnumValidator("top", "center", "bottom"),
        "adjust_mode": EnumValidator("shrink-to-fit"),
    }


class Button(Actionable):
    node_type = "button"
    groups = (ButtonStyle, Margin, Offset, Flexible)

    def serialize(self) -> dict[str, Any]:
        self._require("action", self.action)
        return self._payload([
            ("type", self.node_type),
            ("action", self._action_payload()),
            *self.attribute_items(),
        ])
