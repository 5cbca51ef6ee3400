"""Separator component."""

from __future__ import annotations

from typing import Any

from line_builder.base import Node


class Separator(Node):
    node_type = "separator"

    def serialize(self) -> dict[str, Any]:
        return {"type": self.node_type}
