"""Carousel: a horizontally swipeable sequence of bubbles."""

from __future__ import annotations

from typing import Any, Iterator

from line_builder.base import ConfigureFn, Node
from line_builder.context import Context
from line_builder.errors import RequiredFieldError, ValidationError
from line_builder.flex.bubble import Bubble
from line_builder.utils.logging import get_logger

log = get_logger(__name__)


class Carousel(Node):
    node_type = "carousel"

    def __init__(
        self,
        *,
        context: Context | Any = None,
        configure: ConfigureFn | None = None,
    ) -> None:
        self.contents: list[Bubble] = []
        super().__init__(context=context, configure=configure)

    def children(self) -> Iterator[Node]:
        return iter(self.contents)

    def add_bubble(self, *, configure: ConfigureFn | None = None, **options: Any) -> Bubble:
        bubble = Bubble(context=self.context, configure=configure, **options)
        self.contents.append(bubble)
        return bubble

    def serialize(self) -> dict[str, Any]:
        if not self.contents:
            raise RequiredFieldError("carousel.contents should have at least 1 bubble")
        limit = self.context.settings.limits.carousel_bubbles
        if len(self.contents) > limit:
            log.debug("carousel_over_limit", bubbles=len(self.contents), limit=limit)
            raise ValidationError(
                f"carousel.contents: {len(self.contents)} bubbles exceed the limit of {limit}"
            )
        return self._payload([
            ("type", self.node_type),
            ("contents", [bubble.serialize() for bubble in self.contents]),
        ])
