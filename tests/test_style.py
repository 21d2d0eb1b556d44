import pytest

from render_engine.css import Style, parse_color, parse_spacing_value, parse_spacing_value_with_viewport


class TestColor:

    def test_short_hex_duplicates_nibbles(self):
        assert parse_color("#abc") == (0xaa, 0xbb, 0xcc)

    def test_long_hex(self):
        assert parse_color("#112233") == (0x11, 0x22, 0x33)
        assert parse_color("  #112233ff ") == (0x11, 0x22, 0x33)

    @pytest.mark.parametrize("value", ["notacolor", "red", "rgb(1, 2, 3)", "#12", "#1234", ""])
    def test_unsupported_values_are_black(self, value):
        assert parse_color(value) == (0, 0, 0)

    def test_bad_digit_zeroes_its_channel(self):
        assert parse_color("#zz2233") == (0, 0x22, 0x33)

    def test_color_accessor(self):
        assert Style().color == (0, 0, 0)
        assert Style({"color": "#0000ff"}).color == (0, 0, 255)

    def test_background_prefers_shorthand(self):
        assert Style().background_color is None
        assert Style({"background-color": "#fff"}).background_color == (255, 255, 255)
        style = Style({"background": "#000", "background-color": "#fff"})
        assert style.background_color == (0, 0, 0)


class TestFont:

    @pytest.mark.parametrize("value, expected", [
        ("2em", 32.0),
        ("1.5rem", 24.0),
        ("20px", 20.0),
        ("18", 18.0),
        ("big", 16.0),
        ("px", 16.0),
    ])
    def test_font_size_units(self, value, expected):
        assert Style({"font-size": value}).font_size == expected

    def test_font_defaults(self):
        style = Style()
        assert style.font_size == 16.0
        assert style.font_family == "Times New Roman"
        assert style.font_weight == "normal"
        assert style.font_style == "normal"
        assert not style.is_bold
        assert not style.is_italic

    @pytest.mark.parametrize("weight, bold", [
        ("bold", True), ("700", True), ("800", True), ("900", True),
        ("600", False), ("bolder", False), ("normal", False),
    ])
    def test_is_bold(self, weight, bold):
        assert Style({"font-weight": weight}).is_bold is bold

    def test_is_italic(self):
        assert Style({"font-style": "italic"}).is_italic
        assert not Style({"font-style": "oblique"}).is_italic


class TestScalars:

    def test_opacity(self):
        assert Style().opacity == 1.0
        assert Style({"opacity": " 0.25 "}).opacity == 0.25
        assert Style({"opacity": "half"}).opacity == 1.0

    def test_text_decoration_substring(self):
        style = Style({"text-decoration": "underline overline"})
        assert style.text_decoration == "underline overline"
        assert style.has_text_decoration("underline")
        assert style.has_text_decoration("over")
        assert not style.has_text_decoration("line-through")
        assert Style().text_decoration is None
        assert not Style().has_text_decoration("underline")

    def test_width_percentage(self):
        assert Style({"width": "50%"}).width_percentage == 0.5
        assert Style({"width": "25vw"}).width_percentage == 0.25
        assert Style({"width": "300px"}).width_percentage is None
        assert Style({"width": "abc%"}).width_percentage is None
        assert Style().width_percentage is None

    @pytest.mark.parametrize("value, expected", [
        ("50%", 400.0),
        ("25vw", 200.0),
        ("300px", 300.0),
        ("120", 120.0),
        ("10em", None),
        ("auto", None),
    ])
    def test_width_px(self, value, expected):
        assert Style({"width": value}).width_px(800) == expected

    def test_max_width_px(self):
        assert Style({"max-width": "100%"}).max_width_px(640) == 640.0
        assert Style({"width": "100%"}).max_width_px(640) is None


class TestSpacing:

    @pytest.mark.parametrize("value, expected", [
        ("10px", 10.0),
        ("2em", 32.0),
        ("1rem", 0.0),
        ("5vh", 5.0),
        ("7", 7.0),
        ("auto", 0.0),
        ("wide", 0.0),
    ])
    def test_parse_spacing_value(self, value, expected):
        assert parse_spacing_value(value) == expected

    def test_rem_applies_to_font_size_only(self):
        style = Style({"margin": "1rem", "padding": "2rem 4px", "font-size": "1rem"})
        assert style.margin() == (0.0, 0.0, 0.0, 0.0)
        assert style.padding() == (0.0, 4.0, 0.0, 4.0)
        assert parse_spacing_value_with_viewport("1rem", 800) == 0.0
        assert style.font_size == 16.0

    def test_viewport_aware_spacing(self):
        assert parse_spacing_value_with_viewport("10vh", 800) == 80.0
        assert parse_spacing_value_with_viewport("10vw", 800) == 10.0
        assert parse_spacing_value_with_viewport("1em", 800) == 16.0

    def test_padding_shorthand(self):
        assert Style().padding() == (0.0, 0.0, 0.0, 0.0)
        assert Style({"padding": "4px"}).padding() == (4.0, 4.0, 4.0, 4.0)
        assert Style({"padding": "1px 2px 3px 4px 5px"}).padding() == (1.0, 2.0, 3.0, 4.0)
        assert Style({"padding": "10vh"}).padding_with_viewport(500) == (50.0, 50.0, 50.0, 50.0)

    def test_margin_shorthand_forms(self):
        assert Style({"margin": "10px 20px"}).margin() == (10.0, 20.0, 10.0, 20.0)
        assert Style({"margin": "1px 2px 3px"}).margin() == (1.0, 2.0, 3.0, 2.0)
        assert Style({"margin": "1px 2px 3px 4px"}).margin() == (1.0, 2.0, 3.0, 4.0)

    def test_margin_longhand_overrides_shorthand(self):
        style = Style({"margin": "10px 20px", "margin-left": "5px"})
        assert style.margin() == (10.0, 20.0, 10.0, 5.0)

    def test_margin_longhands_without_shorthand(self):
        assert Style({"margin-top": "1em"}).margin() == (16.0, 0.0, 0.0, 0.0)

    def test_margin_with_viewport(self):
        style = Style({"margin": "5vh auto", "margin-bottom": "10vh"})
        assert style.margin_with_viewport(600) == (30.0, 0.0, 60.0, 0.0)
        assert style.margin() == (5.0, 0.0, 10.0, 0.0)

    def test_auto_horizontal_margin(self):
        assert Style({"margin": "0 auto"}).has_auto_horizontal_margin()
        assert Style({"margin": "0 auto 0 auto"}).has_auto_horizontal_margin()
        assert not Style({"margin": "0 auto 0 1px"}).has_auto_horizontal_margin()
        assert not Style({"margin": "auto"}).has_auto_horizontal_margin()
        assert Style({"margin-left": "auto", "margin-right": "auto"}).has_auto_horizontal_margin()
        assert not Style({"margin-left": "auto"}).has_auto_horizontal_margin()


def test_copy_is_independent():
    original = Style({"color": "#000"})
    clone = original.copy()
    clone["color"] = "#fff"
    assert original["color"] == "#000"
    assert clone == {"color": "#fff"}
