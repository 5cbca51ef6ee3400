"""Attribute groups shared by flex components."""

from __future__ import annotations

from dataclasses import dataclass

from line_builder.base import AttributeGroup
from line_builder.validators import EnumValidator, SizeValidator, SizeVariant

PIXEL = SizeVariant.PIXEL
KEYWORD = SizeVariant.KEYWORD
PERCENTAGE = SizeVariant.PERCENTAGE

SPACING_SIZE = SizeValidator(PIXEL, KEYWORD)
SPACING_OR_PERCENT = SizeValidator(PIXEL, KEYWORD, PERCENTAGE)
DIMENSION = SizeValidator(PIXEL, PERCENTAGE)


@dataclass
class Padding(AttributeGroup):
    padding_all: str | None = None
    padding_top: str | None = None
    padding_bottom: str | None = None
    padding_start: str | None = None
    padding_end: str | None = None

    validators = {
        "padding_all": SPACING_OR_PERCENT,
        "padding_top": SPACING_OR_PERCENT,
        "padding_bottom": SPACING_OR_PERCENT,
        "padding_start": SPACING_OR_PERCENT,
        "padding_end": SPACING_OR_PERCENT,
    }
    aliases = {"padding": "padding_all"}


@dataclass
class Margin(AttributeGroup):
    # percentages are not accepted for margin
    margin: str | None = None

    validators = {"margin": SPACING_SIZE}


@dataclass
class Offset(AttributeGroup):
    position: str | None = None
    offset_top: str | None = None
    offset_bottom: str | None = None
    offset_start: str | None = None
    offset_end: str | None = None

    validators = {
        "position": EnumValidator("absolute", "relative"),
        "offset_top": SPACING_OR_PERCENT,
        "offset_bottom": SPACING_OR_PERCENT,
        "offset_start": SPACING_OR_PERCENT,
        "offset_end": SPACING_OR_PERCENT,
    }


@dataclass
class Flexible(AttributeGroup):
    flex: int | None = None


@dataclass
class Alignment(AttributeGroup):
    align: str | None = None
    gravity: str | None = None

    validators = {
        "align": EnumValidator("start", "center", "end"),
        "gravity": EnumValidator("top", "center", "bottom"),
    }


@dataclass
class Background(AttributeGroup):
    background_color: str | None = None
