"""Tests for Box, Bubble and Carousel containers."""

import pytest

from line_builder.actions import PostbackAction
from line_builder.config import BuilderSettings, LimitsConfig
from line_builder.context import Context
from line_builder.errors import RequiredFieldError, ValidationError
from line_builder.flex import Box, Bubble, Button, Carousel, Image, Separator, Text
from line_builder.flex.attributes import Padding


class TestBox:
    def test_default_layout(self, ctx):
        box = Box(context=ctx)
        box.add_text("a")
        assert box.serialize() == {
            "type": "box",
            "layout": "horizontal",
            "contents": [{"type": "text", "text": "a"}],
        }

    def test_layout_vertical(self, ctx):
        assert Box(layout="vertical", context=ctx).get("layout") == "vertical"

    def test_layout_invalid(self, ctx):
        with pytest.raises(ValidationError, match=r"^box\.layout: invalid value 'grid'"):
            Box(layout="grid", context=ctx)

    def test_layout_required(self, ctx):
        box = Box(context=ctx)
        box.set("layout", None)
        with pytest.raises(RequiredFieldError, match="box.layout"):
            box.serialize()

    def test_typed_appends_keep_order(self, ctx):
        box = Box(context=ctx)
        inner = box.add_box(layout="vertical")
        text = box.add_text("t")
        button = box.add_button()
        image = box.add_image("https://example.com/i.png")
        separator = box.add_separator()

        assert isinstance(inner, Box)
        assert isinstance(text, Text)
        assert isinstance(button, Button)
        assert isinstance(image, Image)
        assert isinstance(separator, Separator)
        assert box.contents == [inner, text, button, image, separator]
        assert all(child.context is ctx for child in box.contents)

    def test_nested_boxes(self, ctx):
        box = Box(layout="vertical", context=ctx)
        box.add_box(configure=lambda inner: inner.add_text("deep"))
        assert box.serialize()["contents"][0]["contents"] == [{"type": "text", "text": "deep"}]

    def test_attributes_standard_keys(self, ctx):
        box = Box(
            context=ctx,
            justify_content="space-between",
            align_items="center",
            spacing="md",
            padding_all="10px",
            padding_top="5%",
            margin="xl",
            position="absolute",
            offset_top="4px",
            width="100px",
            max_width="80%",
            height="50px",
            max_height="90%",
            flex=1,
            background_color="#FFFFFF",
        )
        box.add_separator()
        payload = box.serialize()
        for key in (
            "justifyContent",
            "alignItems",
            "paddingAll",
            "paddingTop",
            "offsetTop",
            "maxWidth",
            "maxHeight",
            "backgroundColor",
        ):
            assert key in payload
        assert payload["spacing"] == "md"
        assert payload["position"] == "absolute"
        assert "paddingBottom" not in payload

    def test_padding_alias(self, ctx):
        box = Box(padding="8px", context=ctx)
        assert box.get("padding_all") == "8px"
        assert box.serialize()["paddingAll"] == "8px"

    def test_group_assignment_validates(self, ctx):
        box = Box(context=ctx)
        padding = box.group(Padding)
        padding.padding_top = "4px"
        assert box.get("padding_top") == "4px"
        with pytest.raises(ValidationError):
            padding.padding_end = "wide"

    def test_group_assignment_names_node(self, ctx):
        box = Box(context=ctx)
        with pytest.raises(ValidationError, match=r"^box\.padding_end: "):
            box.group(Padding).padding_end = "wide"

    def test_action_keyword_is_rebound(self, sdk_ctx):
        box = Box(action=PostbackAction("d", display_text="Open"), context=sdk_ctx)
        box.add_separator()
        assert box.action.context is sdk_ctx
        assert box.serialize()["action"]["display_text"] == "Open"

    def test_invalid_width(self, ctx):
        with pytest.raises(ValidationError):
            Box(width="md", context=ctx)

    def test_invalid_position(self, ctx):
        with pytest.raises(ValidationError):
            Box(position="fixed", context=ctx)

    def test_action(self, ctx):
        box = Box(context=ctx)
        box.add_text("a")
        box.postback("box=1", label="Open")
        assert box.serialize()["action"] == {"type": "postback", "label": "Open", "data": "box=1"}

    def test_empty_box_serializes_by_default(self, ctx):
        assert Box(context=ctx).serialize()["contents"] == []

    def test_empty_box_raises_when_strict(self):
        context = Context(settings=BuilderSettings(strict_box_contents=True))
        with pytest.raises(RequiredFieldError, match="box.contents"):
            Box(context=context).serialize()

    def test_strict_box_with_children(self):
        context = Context(settings=BuilderSettings(strict_box_contents=True))
        box = Box(context=context)
        box.add_text("a")
        assert len(box.serialize()["contents"]) == 1


class TestBubble:
    def test_empty(self, ctx):
        assert Bubble(context=ctx).serialize() == {"type": "bubble"}

    def test_slots(self, ctx):
        bubble = Bubble(context=ctx, size="mega")
        bubble.header().add_text("Header")
        bubble.hero_image("https://example.com/hero.png", size="full")
        bubble.body(layout="vertical").add_text("Body")
        bubble.footer().add_separator()
        payload = bubble.serialize()
        assert payload["size"] == "mega"
        assert payload["header"]["contents"] == [{"type": "text", "text": "Header"}]
        assert payload["hero"] == {"type": "image", "url": "https://example.com/hero.png", "size": "full"}
        assert payload["body"]["layout"] == "vertical"
        assert payload["footer"]["contents"] == [{"type": "separator"}]

    def test_last_write_wins(self, ctx):
        bubble = Bubble(context=ctx)
        bubble.body().add_text("first")
        bubble.body().add_text("second")
        assert bubble.serialize()["body"]["contents"] == [{"type": "text", "text": "second"}]

    def test_hero_box_replaces_image(self, ctx):
        bubble = Bubble(context=ctx)
        bubble.hero_image("u")
        bubble.hero().add_text("boxed")
        assert bubble.serialize()["hero"]["type"] == "box"

    def test_styles_passthrough(self, ctx):
        styles = {"body": {"backgroundColor": "#000000"}}
        assert Bubble(styles=styles, context=ctx).serialize()["styles"] == styles

    def test_invalid_size(self, ctx):
        with pytest.raises(ValidationError):
            Bubble(size="huge", context=ctx)

    def test_styles_output_is_a_copy(self, ctx):
        styles = {"body": {"backgroundColor": "#000000"}}
        bubble = Bubble(styles=styles, context=ctx)
        first = bubble.serialize()
        first["styles"]["body"]["backgroundColor"] = "#FFFFFF"
        assert bubble.serialize()["styles"] == {"body": {"backgroundColor": "#000000"}}
        assert styles["body"]["backgroundColor"] == "#000000"


class TestCarousel:
    def _carousel(self, context, count):
        carousel = Carousel(context=context)
        for i in range(count):
            carousel.add_bubble().body().add_text(f"bubble {i}")
        return carousel

    def test_empty_raises_required(self, ctx):
        with pytest.raises(RequiredFieldError):
            Carousel(context=ctx).serialize()

    def test_twelve_bubbles(self, ctx):
        payload = self._carousel(ctx, 12).serialize()
        assert payload["type"] == "carousel"
        assert len(payload["contents"]) == 12

    def test_thirteen_bubbles_raise_validation(self, ctx):
        with pytest.raises(ValidationError, match="limit of 12"):
            self._carousel(ctx, 13).serialize()

    def test_bubble_order(self, ctx):
        payload = self._carousel(ctx, 3).serialize()
        texts = [b["body"]["contents"][0]["text"] for b in payload["contents"]]
        assert texts == ["bubble 0", "bubble 1", "bubble 2"]

    def test_configured_limit(self):
        settings = BuilderSettings(limits=LimitsConfig(carousel_bubbles=2))
        with pytest.raises(ValidationError):
            self._carousel(Context(settings=settings), 3).serialize()
