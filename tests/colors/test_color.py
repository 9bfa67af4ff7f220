import pytest
from chromalab import Color, chroma, ColorMode, KN
from chromalab.errors import (
    ChromaError,
    HexFormatError,
    UnknownChannelError,
    UnknownFormatError,
    UnsupportedValueError,
)
from ..samples import samples_hex


# ---- construction ----

def test_construct_from_hex():
    color = Color("#3498db")
    assert color.rgba() == (52.0, 152.0, 219.0, 1.0)
    assert color.hex() == "#3498db"


def test_short_hex_equals_long_hex():
    assert Color("#f0f").rgba() == Color("#ff00ff").rgba() == (255, 0, 255, 1)


def test_construct_with_trailing_mode():
    assert Color(200, 0, 0, "rgb").rgb() == (200.0, 0.0, 0.0)
    assert Color([200, 0, 0], "rgb").rgb() == (200.0, 0.0, 0.0)
    assert Color([200, 0, 0], "RGB").rgb() == (200.0, 0.0, 0.0)
    assert Color("ff00ff", "hex").hex() == "#ff00ff"


def test_construct_with_mode_keyword():
    red = Color([0, 1.0, 0.5], mode=ColorMode.HSL)
    assert red.rgb() == pytest.approx((255.0, 0.0, 0.0))
    assert Color(0, 1.0, 0.5, mode="hsl") == red


def test_numbers_autodetect_as_hsl():
    assert Color(0, 1.0, 0.5).hex() == "#ff0000"
    assert Color([120, 1.0, 0.5]).rgba() == pytest.approx((0.0, 255.0, 0.0, 1.0))
    assert chroma(0, 1, 0.5) == Color("#f00")


def test_color_input_is_returned_unchanged():
    color = Color("#3498db")
    assert Color(color) is color
    assert chroma(color) is color


def test_missing_alpha_defaults_to_one():
    assert Color(1, 2, 3, "rgb").alpha() == 1.0
    assert Color("#123").alpha() == 1.0


def test_clamping_is_recorded():
    color = Color(300, -20, 128, "rgb")
    assert color.rgb() == (255.0, 0.0, 128.0)
    assert color.clipped
    assert color.unclipped[:3] == (300.0, -20.0, 128.0)
    assert not Color(255, 0, 128, "rgb").clipped


def test_alpha_clamping_is_silent():
    color = Color([10, 20, 30, 1.5], "rgb")
    assert color.alpha() == 1.0
    assert not color.clipped
    assert color.unclipped[3] == 1.5


def test_unknown_format():
    with pytest.raises(UnknownFormatError, match="unknown format"):
        Color("notacolor")
    with pytest.raises(UnknownFormatError):
        Color("#12345")
    with pytest.raises(UnknownFormatError):
        Color(1, 2, 3, "cmyk")
    with pytest.raises(UnknownFormatError):
        Color()


def test_malformed_hex_with_explicit_mode():
    with pytest.raises(HexFormatError):
        Color("#12345", "hex")


def test_errors_share_a_base():
    with pytest.raises(ChromaError):
        Color("notacolor")


def test_instances_are_frozen():
    color = Color("#3498db")
    with pytest.raises(AttributeError, match="immutable"):
        color._rgba = (0, 0, 0, 1)
    with pytest.raises(AttributeError):
        color.anything = 1


def test_lab_and_lch_modes_round_trip():
    for text in samples_hex:
        color = Color(text)
        assert Color(*color.lab(), "lab").hex() == text
        assert Color(*color.lch(), mode="lch").hex() == text
        assert Color(color.hsl(), "hsl").hex() == text


# ---- representations ----

def test_hex_modes():
    red = Color([200, 0, 0], "rgb")
    assert red.hex("rgba") == "#c80000ff"
    assert red.hex("argb") == "#ffc80000"
    assert red.hex() == "#c80000"
    assert red.with_alpha(0.5).hex() == "#c8000080"


def test_black_hsl_has_no_hue():
    assert Color("#000000").hsl() == (None, 0.0, 0.0)
    L, c, h = Color("#000000").lch()
    assert L == pytest.approx(0.0, abs=1e-9)
    assert c == pytest.approx(0.0, abs=1e-9)
    assert h is None


def test_representations_follow_mutation():
    color = Color("#3498db")
    before = color.hsl()
    color.update("hsl.l", 0.2)
    assert color.hsl() != before
    assert color.get("hsl.l") == pytest.approx(0.2, abs=1e-9)


def test_to_dispatches_by_mode():
    color = Color("#3498db")
    assert color.to("hex") == color.hex()
    assert color.to(ColorMode.LCH) == color.lch()
    assert color.to("rgb") == (52.0, 152.0, 219.0)


def test_str_and_repr():
    color = Color("#3498db")
    assert str(color) == "#3498db"
    assert repr(color).startswith("Color(rgba=(52.0, 152.0, 219.0, 1.0)")


def test_equality():
    assert Color("#fff") == Color(255, 255, 255, "rgb")
    assert Color("#fff") != Color("#ffe")
    assert Color("#fff") != "#fff"


# ---- alpha ----

def test_alpha_copy_leaves_original():
    color = Color("#3498db")
    faded = color.alpha(0.5)
    assert faded is not color
    assert faded.alpha() == 0.5
    assert color.alpha() == 1.0
    assert faded.rgb() == color.rgb()


def test_alpha_in_place():
    color = Color("#3498db")
    same = color.alpha(0.25, mutate=True)
    assert same is color
    assert color.alpha() == 0.25


def test_update_alpha_clamps_and_keeps_clip_flag():
    color = Color(300, 0, 0, "rgb")
    color.update_alpha(2.0)
    assert color.alpha() == 1.0
    assert color.clipped
    assert color.unclipped == (300.0, 0.0, 0.0, 2.0)


def test_alpha_rejects_non_numbers():
    with pytest.raises(UnsupportedValueError):
        Color("#fff").with_alpha("0.5")
    with pytest.raises(UnsupportedValueError):
        Color("#fff").update_alpha(True)


def test_chroma_factory():
    import chromalab
    assert chroma("#3498db") == Color("#3498db")
    assert chroma(0, 1.0, 0.5, mode="hsl").hex() == "#ff0000"
    assert chromalab.__version__ == "1.0.0"


def test_wrong_component_count():
    with pytest.raises(UnknownFormatError, match="expects 3 or 4 components"):
        Color(Color("#3498db"), "rgb")
    with pytest.raises(UnknownFormatError):
        Color([1, 2], "hsl")


def test_nan_components_are_rejected():
    with pytest.raises(UnsupportedValueError):
        Color(float("nan"), 0, 0, "rgb")
    with pytest.raises(UnsupportedValueError):
        Color("#fff").with_alpha(float("nan"))
    color = Color("#fff")
    with pytest.raises(UnsupportedValueError):
        color.update_alpha(float("nan"))
    assert color.alpha() == 1.0


def test_infinite_rgb_clamps():
    color = Color(float("inf"), 0, 0, "rgb")
    assert color.rgb() == (255.0, 0.0, 0.0)
    assert color.clipped
