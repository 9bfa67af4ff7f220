import pytest
from chromalab.conversions import hex_to_rgb, rgb_to_hex, is_hex
from chromalab.errors import HexFormatError, UnknownFormatError
from ..samples import samples_hex


def test_short_and_long_forms_agree():
    assert hex_to_rgb("#f0f") == hex_to_rgb("#ff00ff") == (255, 0, 255, 1.0)
    assert hex_to_rgb("f0f") == (255, 0, 255, 1.0)
    assert hex_to_rgb("#ABCDEF") == hex_to_rgb("abcdef")


def test_alpha_forms():
    assert hex_to_rgb("#ff000080") == (255, 0, 0, 0.5)
    assert hex_to_rgb("ff000080") == (255, 0, 0, 0.5)
    # 0x88 / 255 = 0.5333 -> 0.53
    assert hex_to_rgb("#f008") == (255, 0, 0, 0.53)
    assert hex_to_rgb("#000000ff")[3] == 1.0
    assert hex_to_rgb("#00000000")[3] == 0.0


@pytest.mark.parametrize("text", ["", "#", "#ff", "#12345", "#1234567", "#gggggg", "ff00ff ", "#ff00ff\n", "red"])
def test_malformed_hex(text):
    assert not is_hex(text)
    with pytest.raises(HexFormatError, match="unknown hex color"):
        hex_to_rgb(text)


def test_non_string_hex():
    assert not is_hex(0xff00ff)
    with pytest.raises(HexFormatError):
        hex_to_rgb(0xff00ff)


def test_hex_is_a_value_error():
    with pytest.raises(ValueError):
        hex_to_rgb("nope")


def test_encode():
    assert rgb_to_hex(255, 0, 255) == "#ff00ff"
    assert rgb_to_hex(0, 0, 0) == "#000000"
    assert rgb_to_hex(1, 2, 3) == "#010203"
    # halves round up
    assert rgb_to_hex(0.5, 1.5, 2.5) == "#010203"
    assert rgb_to_hex(0.49, 0, 0) == "#000000"


def test_encode_alpha_modes():
    assert rgb_to_hex(200, 0, 0, 1.0, "rgba") == "#c80000ff"
    assert rgb_to_hex(200, 0, 0, 1.0, "argb") == "#ffc80000"
    assert rgb_to_hex(255, 0, 0, 0.5) == "#ff000080"
    assert rgb_to_hex(255, 0, 0, 0.5, "argb") == "#80ff0000"
    assert rgb_to_hex(255, 0, 0, 0.5, "rgb") == "#ff0000"
    assert rgb_to_hex(255, 0, 0, 0.0) == "#ff000000"


def test_auto_mode_drops_opaque_alpha():
    assert rgb_to_hex(255, 0, 0, 1.0, "auto") == "#ff0000"
    assert rgb_to_hex(255, 0, 0, 0.999, "auto") == "#ff0000ff"


def test_unknown_hex_mode():
    with pytest.raises(UnknownFormatError):
        rgb_to_hex(0, 0, 0, 1.0, "bgr")


def test_round_trip():
    for text in samples_hex:
        r, g, b, a = hex_to_rgb(text)
        assert rgb_to_hex(r, g, b, a) == text
