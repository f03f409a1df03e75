"""Test suite for `styleruns.styles` module."""

from __future__ import annotations

import pytest

from styleruns.styles import StyleState, StyleVerdict, resolve_style_declaration

# -- resolve_style_declaration() -----------------


@pytest.mark.parametrize(
    ("style_declaration", "expected_value"),
    [
        ("", StyleVerdict(is_bold=False, is_italic=False)),
        ("color: red", StyleVerdict(is_bold=False, is_italic=False)),
        ("font-style: italic", StyleVerdict(is_bold=False, is_italic=True)),
        ("font-weight: 600", StyleVerdict(is_bold=True, is_italic=False)),
        ("font-weight:600", StyleVerdict(is_bold=True, is_italic=False)),
        ("font-weight: 600; font-style: italic", StyleVerdict(is_bold=True, is_italic=True)),
        ("font-style: italic; font-weight: bold;", StyleVerdict(is_bold=True, is_italic=True)),
    ],
)
def test_resolve_style_declaration_decides_each_axis(
    style_declaration: str, expected_value: StyleVerdict
):
    assert resolve_style_declaration(style_declaration) == expected_value


@pytest.mark.parametrize(
    ("style_declaration", "expected_value"),
    [
        # -- numeric weights are bold only when strictly greater than 400 --
        ("font-weight: 450", True),
        ("font-weight: 401", True),
        ("font-weight: 400", False),
        ("font-weight: 300", False),
        ("font-weight: 900", True),
        ("font-weight:  +700  ", True),
        # -- keywords, in any case --
        ("font-weight: bold", True),
        ("font-weight: BOLD", True),
        ("font-weight: bolder", True),
        ("font-weight: normal", False),
        ("font-weight: lighter", False),
        # -- a value that is neither a number nor a keyword is not bold --
        ("font-weight: 600px", False),
        ("font-weight: 700 !important", False),
        ("font-weight: ", False),
        ("font-weight", False),
        # -- only the first font-weight declaration counts --
        ("font-weight: 300; font-weight: 700", False),
        ("font-weight: bold; font-weight: 100", True),
        # -- property names are matched case-sensitively --
        ("FONT-WEIGHT: 700", False),
        # -- other properties mentioning "bold" do not make text bold --
        ("font-family: Bold Sans", False),
    ],
)
def test_resolve_style_declaration_detects_bold_from_font_weight(
    style_declaration: str, expected_value: bool
):
    assert resolve_style_declaration(style_declaration).is_bold is expected_value


@pytest.mark.parametrize(
    ("style_declaration", "expected_value"),
    [
        ("font-style: italic", True),
        ("font-style:italic", True),
        ("font-style: normal", False),
        ("font-style: oblique", False),
        # -- matched case-sensitively --
        ("font-style: ITALIC", False),
        # -- matched anywhere, even where it has nothing to do with font-style --
        ("font-family: 'source-serif-italic'", True),
        ("background: url(italic.png)", True),
    ],
)
def test_resolve_style_declaration_detects_italic_anywhere_in_the_declaration(
    style_declaration: str, expected_value: bool
):
    assert resolve_style_declaration(style_declaration).is_italic is expected_value


def test_resolve_style_declaration_is_a_pure_function():
    style_declaration = "font-weight: 700; font-style: italic"

    assert resolve_style_declaration(style_declaration) == resolve_style_declaration(
        style_declaration
    )


# -- StyleVerdict ---------------------------------


class DescribeStyleVerdict:
    """Unit-test suite for `styleruns.styles.StyleVerdict` objects."""

    @pytest.mark.parametrize(
        ("is_bold", "is_italic", "expected_value"),
        [
            (False, False, StyleState.NORMAL),
            (True, False, StyleState.BOLD),
            (False, True, StyleState.ITALIC),
            (True, True, StyleState.BOLD_ITALIC),
        ],
    )
    def it_converts_to_the_style_state_having_its_axes(
        self, is_bold: bool, is_italic: bool, expected_value: StyleState
    ):
        assert StyleVerdict(is_bold, is_italic).style is expected_value


# -- StyleState -----------------------------------


class DescribeStyleState:
    """Unit-test suite for `styleruns.styles.StyleState`."""

    @pytest.mark.parametrize(
        ("style", "value"),
        [
            (StyleState.NORMAL, "normal"),
            (StyleState.BOLD, "bold"),
            (StyleState.ITALIC, "italic"),
            (StyleState.BOLD_ITALIC, "bold-italic"),
        ],
    )
    def it_uses_the_serialized_style_name_as_its_value(self, style: StyleState, value: str):
        assert style.value == value
        assert StyleState(value) is style

    @pytest.mark.parametrize(
        ("style", "is_bold", "is_italic"),
        [
            (StyleState.NORMAL, False, False),
            (StyleState.BOLD, True, False),
            (StyleState.ITALIC, False, True),
            (StyleState.BOLD_ITALIC, True, True),
        ],
    )
    def it_knows_which_axes_it_has(self, style: StyleState, is_bold: bool, is_italic: bool):
        assert style.is_bold is is_bold
        assert style.is_italic is is_italic
        assert StyleState.from_axes(is_bold, is_italic) is style

    @pytest.mark.parametrize(
        ("style", "other", "expected_value"),
        [
            (StyleState.NORMAL, StyleState.NORMAL, StyleState.NORMAL),
            (StyleState.NORMAL, StyleState.BOLD, StyleState.BOLD),
            (StyleState.ITALIC, StyleState.BOLD, StyleState.BOLD_ITALIC),
            (StyleState.BOLD, StyleState.ITALIC, StyleState.BOLD_ITALIC),
            (StyleState.BOLD, StyleState.BOLD, StyleState.BOLD),
            # -- combining never clears an axis --
            (StyleState.BOLD_ITALIC, StyleState.NORMAL, StyleState.BOLD_ITALIC),
            (StyleState.BOLD_ITALIC, StyleState.ITALIC, StyleState.BOLD_ITALIC),
        ],
    )
    def it_can_combine_with_another_style_axis_by_axis(
        self, style: StyleState, other: StyleState, expected_value: StyleState
    ):
        assert style.combine(other) is expected_value
        assert other.combine(style) is expected_value
