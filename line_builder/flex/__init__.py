"""Flex message components."""

from line_builder.flex.box import Box
from line_builder.flex.bubble import Bubble
from line_builder.flex.button import Button
from line_builder.flex.carousel import Carousel
from line_builder.flex.image import Image
from line_builder.flex.message import FlexMessage
from line_builder.flex.separator import Separator
from line_builder.flex.text import Span, Text

__all__ = [
    "Box",
    "Bubble",
    "Button",
    "Carousel",
    "FlexMessage",
    "Image",
    "Separator",
    "Span",
    "Text",
]
