"""Quick reply: suggested-action buttons attached to a top-level message."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

from line_builder.actions import Action, MessageAction, PostbackAction
from line_builder.base import Node
from line_builder.errors import ValidationError


@dataclass
class QuickReplyItem:
    action: Action
    image_url: str | None = None


class QuickReply(Node):
    node_type = "quick_reply"

    def __init__(self, **kwargs: Any) -> None:
        self.items: list[QuickReplyItem] = []
        super().__init__(**kwargs)

    def children(self) -> Iterator[Node]:
        return (item.action for item in self.items)

    def add(self, action: Action, image_url: str | None = None) -> Action:
        action.bind(self.context)
        self.items.append(QuickReplyItem(action, image_url))
        return action

    def message(
        self,
        text: str,
        *,
        image_url: str | None = None,
        **options: Any,
    ) -> MessageAction:
        return self.add(MessageAction(text, context=self.context, **options), image_url)

    def postback(
        self,
        data: str,
        *,
        image_url: str | None = None,
        **options: Any,
    ) -> PostbackAction:
        return self.add(PostbackAction(data, context=self.context, **options), image_url)

    def serialize(self) -> dict[str, Any]:
        limit = self.context.settings.limits.quick_reply_items
        if len(self.items) > limit:
            raise ValidationError(
                f"quick_reply.items: {len(self.items)} items exceed the limit of {limit}"
            )
        return {
            "items": [
                self._payload([
                    ("type", "action"),
                    ("image_url", item.image_url),
                    ("action", item.action.serialize()),
                ])
                for item in self.items
            ]
        }
