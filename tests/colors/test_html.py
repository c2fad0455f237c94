import pytest

from nicecolors import Color, color_by_name, name_by_color
from nicecolors.colors import html


def test_table_size():
    assert len(html.NAME_TO_COLOR) == 148


def test_lookup_is_case_insensitive():
    assert color_by_name("cornflowerblue") == Color(100, 149, 237)
    assert color_by_name("CornflowerBlue") == Color(100, 149, 237)
    assert color_by_name("RED") == Color(255, 0, 0)


@pytest.mark.parametrize("name", ["cornflower blue", "", "notacolor", "réd", " red", "red "])
def test_unknown_names(name):
    assert color_by_name(name) is None


def test_non_string_names():
    assert color_by_name(None) is None
    assert color_by_name(0xFF0000) is None


def test_constants_match_table():
    assert html.CORNFLOWER_BLUE == color_by_name("cornflowerblue")
    assert html.DARK_SEA_GREEN == Color(143, 188, 143)
    assert color_by_name("darkseagreen") == html.DARK_SEA_GREEN
    assert html.GRAY == html.GREY


def test_shared_colors_use_first_name():
    assert name_by_color(Color(0, 255, 255)) == "aqua"
    assert name_by_color(Color(255, 0, 255)) == "fuchsia"
    assert name_by_color(Color(169, 169, 169)) == "darkgray"
    assert name_by_color(Color(128, 128, 128)) == "gray"


def test_unnamed_color():
    assert name_by_color(Color(1, 2, 3)) is None


def test_every_name_round_trips():
    for name, color in html.NAME_TO_COLOR.items():
        assert name == name.lower()
        assert color_by_name(name) == color
        assert color_by_name(name_by_color(color)) == color
        assert Color.from_name(name.upper()) == color
