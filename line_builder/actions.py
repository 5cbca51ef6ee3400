"""Actions: what happens when a user taps an interactive element."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

from line_builder.base import AttributeGroup, ConfigureFn, Node
from line_builder.context import Context


@dataclass
class ActionLabel(AttributeGroup):
    label: str | None = None


@dataclass
class PostbackDisplay(AttributeGroup):
    display_text: str | None = None


class Action(Node):
    """Base for action nodes. Labels are omitted when unset, never defaulted."""

    groups = (ActionLabel,)


class MessageAction(Action):
    """Sends ``text`` as a message from the user when tapped."""

    node_type = "message"

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
            *self.attribute_items(),
            ("text", self.text),
        ])


class PostbackAction(Action):
    """Returns ``data`` to the bot through a postback webhook event."""

    node_type = "postback"
    groups = (ActionLabel, PostbackDisplay)

    def __init__(
        self,
        data: str | None,
        *,
        context: Context | Any = None,
        configure: ConfigureFn | None = None,
        **options: Any,
    ) -> None:
        self.data = data
        super().__init__(context=context, configure=configure, **options)

    def serialize(self) -> dict[str, Any]:
        self._require("data", self.data)
        return self._payload([
            ("type", self.node_type),
            ("label", self.get("label")),
            ("data", self.data),
            ("display_text", self.get("display_text")),
        ])


class Actionable(Node):
    """A node that may carry an optional action."""

    def __init__(
        self,
        *,
        action: Action | None = None,
        context: Context | Any = None,
        configure: ConfigureFn | None = None,
        **options: Any,
    ) -> None:
        self._action: Action | None = None
        super().__init__(context=context, **options)
        self.action = action
        if configure is not None:
            configure(self)

    @property
    def action(self) -> Action | None:
        return self._action

    @action.setter
    def action(self, action: Action | None) -> None:
        if action is not None:
            action.bind(self.context)
        self._action = action

    def children(self) -> Iterator[Node]:
        if self._action is not None:
            yield self._action

    def message(self, text: str, **options: Any) -> MessageAction:
        action = MessageAction(text, context=self.context, **options)
        self.action = action
        return action

    def postback(self, data: str, **options: Any) -> PostbackAction:
        action = PostbackAction(data, context=self.context, **options)
        self.action = action
        return action

    def _action_payload(self) -> dict[str, Any] | None:
        return self._action.serialize() if self._action is not None else None
