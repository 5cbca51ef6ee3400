"""Declarative builder for LINE Messaging API message payloads."""

from line_builder.actions import MessageAction, PostbackAction
from line_builder.collection import MessageCollection, compose
from line_builder.context import Context, Mode
from line_builder.errors import BuilderError, RequiredFieldError, StructuralError, ValidationError
from line_builder.flex import (
    Box,
    Bubble,
    Button,
    Carousel,
    FlexMessage,
    Image,
    Separator,
    Span,
    Text,
)
from line_builder.messages import TextMessage
from line_builder.quick_reply import QuickReply
from line_builder.validators import EnumValidator, SizeValidator, SizeVariant

__version__ = "0.1.0"

__all__ = [
    "Box",
    "Bubble",
    "BuilderError",
    "Button",
    "Carousel",
    "Context",
    "EnumValidator",
    "FlexMessage",
    "Image",
    "MessageAction",
    "MessageCollection",
    "Mode",
    "PostbackAction",
    "QuickReply",
    "RequiredFieldError",
    "Separator",
    "SizeValidator",
    "SizeVariant",
    "Span",
    "StructuralError",
    "Text",
    "TextMessage",
    "ValidationError",
    "compose",
]
