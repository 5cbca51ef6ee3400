"""Top-level messages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

from line_builder.base import AttributeGroup, ConfigureFn, Node
from line_builder.context import Context
from line_builder.quick_reply import QuickReply


class Message(Node):
    """A message that can be sent on its own and carry a quick reply."""

    def __init__(self, **kwargs: Any) -> None:
        self._quick_reply: QuickReply | None = None
        super().__init__(**kwargs)

    def children(self) -> Iterator[Node]:
        if self._quick_reply is not None:
            yield self._quick_reply

    def quick_reply(self, configure: ConfigureFn | None = None) -> QuickReply:
        self._quick_reply = QuickReply(context=self.context, configure=configure)
        return self._quick_reply

    def _quick_reply_payload(self) -> dict[str, Any] | None:
        return self._quick_reply.serialize() if self._quick_reply is not None else None


@dataclass
class Quote(AttributeGroup):
    quote_token: str | None = None


class TextMessage(Message):
    node_type = "text"
    groups = (Quote,)

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

    def serialize(self) -> dict[str, Any]:
        self._require("text", self.text)
        return self._payload([
            ("type", self.node_type),
            ("text", self.text),
            ("quote_token", self.get("quote_token")),
            ("quick_reply", self._quick_reply_payload()),
        ])
