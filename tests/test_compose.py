"""End-to-end composition behaviour."""

from __future__ import annotations

import pytest

from pyattributed import (
    AttributesBuilder,
    AttributesComposite,
    Background,
    ComposeConfig,
    Foreground,
    Indent,
    Kern,
    LineBreakMode,
    LineHeight,
    MergePolicy,
    Paragraph,
    StyleKey,
    compose,
    compose_all,
)
from pyattributed.keys import Attributes
from pyattributed.models import Color, LineBreak, ParagraphStyle

RED = Color.from_hex("#ff0000")
BLUE = Color.from_hex("#0000ff")

DEFAULT_COMPARE = ComposeConfig(merge_policy=MergePolicy.DIFFERS_FROM_DEFAULT)


class _Shadow:
    """Third-party attribute that is not an Attribute subclass."""

    def __init__(self, blur: float) -> None:
        self.blur = blur

    def to_mapping(self) -> Attributes:
        return {"x-shadow": self.blur}


class _OpaqueParagraph:
    def to_mapping(self) -> Attributes:
        return {StyleKey.PARAGRAPH_STYLE: "native-style-handle"}


def test_empty_composition_is_empty() -> None:
    assert compose() == {}


def test_disjoint_keys_are_order_independent() -> None:
    segments = [Foreground(RED), Background(BLUE), Kern(0.5)]

    forward = compose(*segments)
    backward = compose(*reversed(segments))

    assert forward == backward == {
        StyleKey.FOREGROUND_COLOR: RED,
        StyleKey.BACKGROUND_COLOR: BLUE,
        StyleKey.KERN: 0.5,
    }


def test_same_key_last_write_wins() -> None:
    assert compose(Foreground(RED), Foreground(BLUE)) == {StyleKey.FOREGROUND_COLOR: BLUE}


def test_disjoint_paragraph_properties_are_combined() -> None:
    result = compose(LineHeight(20), LineBreakMode(LineBreak.TRUNCATING_TAIL))

    style = result[StyleKey.PARAGRAPH_STYLE]
    assert style.minimum_line_height == 20
    assert style.maximum_line_height == 20
    assert style.line_break_mode == LineBreak.TRUNCATING_TAIL
    assert style.explicit_properties() == {"minimum_line_height", "maximum_line_height", "line_break_mode"}
    assert list(result) == [StyleKey.PARAGRAPH_STYLE]


def test_overlapping_paragraph_property_later_wins() -> None:
    result = compose(LineHeight(10, 30), LineHeight(15))

    style = result[StyleKey.PARAGRAPH_STYLE]
    assert style.minimum_line_height == 15
    assert style.maximum_line_height == 15


def test_earlier_paragraph_properties_survive_override() -> None:
    result = compose(LineHeight(10, 30), LineBreakMode(LineBreak.CLIPPING), LineHeight(15))

    assert result[StyleKey.PARAGRAPH_STYLE] == ParagraphStyle(
        minimum_line_height=15,
        maximum_line_height=15,
        line_break_mode=LineBreak.CLIPPING,
    )


@pytest.mark.parametrize("config", [None, DEFAULT_COMPARE])
@pytest.mark.parametrize(
    "segment",
    [Foreground(RED), LineHeight(12, 18), Indent(first_line=10, tail=-5)],
)
def test_composing_a_segment_twice_is_idempotent(segment: object, config: ComposeConfig | None) -> None:
    assert compose(segment, segment, config=config) == compose(segment, config=config)


def test_mixed_keys_and_paragraph_styles() -> None:
    result = compose(Foreground(RED), LineHeight(20), Foreground(BLUE), LineBreakMode(LineBreak.TRUNCATING_MIDDLE))

    assert result[StyleKey.FOREGROUND_COLOR] == BLUE
    assert result[StyleKey.PARAGRAPH_STYLE] == ParagraphStyle(
        minimum_line_height=20,
        maximum_line_height=20,
        line_break_mode=LineBreak.TRUNCATING_MIDDLE,
    )


# ------------------------------------------------------------------
# Default-valued properties
# ------------------------------------------------------------------


class TestDefaultValuedProperties:
    def test_default_valued_segment_does_not_drop_earlier_properties(self) -> None:
        for config in (None, DEFAULT_COMPARE):
            result = compose(Indent(tail=-10), LineBreakMode(LineBreak.WORD_WRAPPING), config=config)
            assert result[StyleKey.PARAGRAPH_STYLE].tail_indent == -10

    def test_reset_to_default_is_lost_when_comparing_with_defaults(self) -> None:
        result = compose(LineHeight(20), LineHeight(0), config=DEFAULT_COMPARE)

        style = result[StyleKey.PARAGRAPH_STYLE]
        assert style.minimum_line_height == 20
        assert style.maximum_line_height == 20

    def test_default_valued_line_break_is_not_recorded_when_comparing_with_defaults(self) -> None:
        result = compose(Indent(tail=-10), LineBreakMode(LineBreak.WORD_WRAPPING), config=DEFAULT_COMPARE)
        assert result[StyleKey.PARAGRAPH_STYLE] == ParagraphStyle(tail_indent=-10)

    def test_reset_to_default_is_kept_by_default(self) -> None:
        result = compose(LineHeight(20), LineHeight(0))

        style = result[StyleKey.PARAGRAPH_STYLE]
        assert style.minimum_line_height == 0
        assert style.maximum_line_height == 0

    def test_config_from_env_selects_policy(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PYATTRIBUTED_MERGE_POLICY", "differs_from_default")
        result = compose(LineHeight(20), LineHeight(0), config=ComposeConfig.from_env())
        assert result[StyleKey.PARAGRAPH_STYLE].minimum_line_height == 20

    def test_policy_given_by_name_selects_policy(self) -> None:
        config = ComposeConfig(merge_policy="differs-from-default")  # type: ignore[arg-type]
        result = compose(LineHeight(20), LineHeight(0), config=config)
        assert result[StyleKey.PARAGRAPH_STYLE].minimum_line_height == 20


# ------------------------------------------------------------------
# Extensibility
# ------------------------------------------------------------------


def test_third_party_segments_take_part() -> None:
    result = compose(Foreground(RED), _Shadow(2.0), _Shadow(3.0))
    assert result == {StyleKey.FOREGROUND_COLOR: RED, "x-shadow": 3.0}


def test_opaque_paragraph_value_after_style_is_skipped() -> None:
    result = compose(LineHeight(20), _OpaqueParagraph(), LineBreakMode(LineBreak.TRUNCATING_HEAD))

    assert result[StyleKey.PARAGRAPH_STYLE] == ParagraphStyle(
        minimum_line_height=20,
        maximum_line_height=20,
        line_break_mode=LineBreak.TRUNCATING_HEAD,
    )


def test_opaque_paragraph_value_first_is_replaced_by_style() -> None:
    result = compose(_OpaqueParagraph(), LineHeight(20))
    assert result[StyleKey.PARAGRAPH_STYLE] == ParagraphStyle(minimum_line_height=20, maximum_line_height=20)


def test_nested_composite_matches_flattened_segments() -> None:
    inner = AttributesComposite()
    inner.update(LineHeight(20).to_mapping())
    inner.update(Foreground(RED).to_mapping())

    nested = compose(Paragraph(ParagraphStyle(head_indent=4)), inner, LineBreakMode(LineBreak.CLIPPING))
    flat = compose(
        Paragraph(ParagraphStyle(head_indent=4)),
        LineHeight(20),
        Foreground(RED),
        LineBreakMode(LineBreak.CLIPPING),
    )

    assert nested == flat


# ------------------------------------------------------------------
# Builder
# ------------------------------------------------------------------


def test_builder_chains_and_builds() -> None:
    builder = AttributesBuilder(Foreground(RED)).add(LineHeight(20)).add(Foreground(BLUE), Kern(1))

    assert len(builder) == 4
    assert builder.build() == compose(Foreground(RED), LineHeight(20), Foreground(BLUE), Kern(1))


def test_builder_uses_config() -> None:
    builder = AttributesBuilder(LineHeight(20), LineHeight(0), config=DEFAULT_COMPARE)
    assert builder.build()[StyleKey.PARAGRAPH_STYLE].minimum_line_height == 20


def test_each_build_starts_fresh() -> None:
    builder = AttributesBuilder(LineHeight(20))
    first = builder.build()
    second = builder.build()

    assert first == second
    assert first is not second


def test_compose_all_accepts_generators() -> None:
    result = compose_all(Foreground(color) for color in (RED, BLUE))
    assert result == {StyleKey.FOREGROUND_COLOR: BLUE}
