"""Message collection: the root of a build and its wire-format output."""

from __future__ import annotations

import json
from typing import Any, Callable

from line_builder.base import ConfigureFn
from line_builder.config import BuilderSettings, get_settings
from line_builder.context import Context, Mode
from line_builder.flex.message import FlexMessage
from line_builder.messages import Message, TextMessage
from line_builder.utils.logging import get_logger

log = get_logger(__name__)


class MessageCollection:
    """An ordered batch of top-level messages sent in one API call.

    The output mode is fixed here and shared with every node built under
    this collection.
    """

    def __init__(
        self,
        context: Any = None,
        *,
        mode: Mode | str | None = None,
        settings: BuilderSettings | None = None,
        configure: Callable[[MessageCollection], None] | None = None,
    ) -> None:
        if settings is None:
            settings = get_settings()
        self._source = context
        self._context = Context(context, mode=mode or settings.mode, settings=settings)
        self.messages: list[Message] = []
        if configure is not None:
            configure(self)

    @property
    def context(self) -> Any:
        """The caller's context object, as passed in."""
        return self._source

    @property
    def mode(self) -> Mode:
        return self._context.mode

    def resolve(self, name: str) -> Any:
        return self._context.resolve(name)

    def add(self, message: Message) -> Message:
        """Append a message built elsewhere; it takes this collection's mode."""
        message.bind(self._context)
        self.messages.append(message)
        return message

    def add_text(
        self,
        text: str,
        *,
        configure: ConfigureFn | None = None,
        **options: Any,
    ) -> TextMessage:
        message = TextMessage(text, context=self._context, configure=configure, **options)
        self.messages.append(message)
        return message

    def add_flex(self, *, configure: ConfigureFn | None = None, **options: Any) -> FlexMessage:
        message = FlexMessage(context=self._context, configure=configure, **options)
        self.messages.append(message)
        return message

    def build(self) -> list[dict[str, Any]]:
        payload = [message.serialize() for message in self.messages]
        log.debug("messages_built", count=len(payload), mode=self.mode.value)
        return payload

    def to_json(self, **kwargs: Any) -> str:
        return json.dumps(self.build(), **kwargs)


def compose(
    configure: Callable[[MessageCollection], None] | None = None,
    *,
    context: Any = None,
    mode: Mode | str | None = None,
    settings: BuilderSettings | None = None,
) -> MessageCollection:
    """Create a collection and run ``configure`` against it."""
    return MessageCollection(context, mode=mode, settings=settings, configure=configure)
