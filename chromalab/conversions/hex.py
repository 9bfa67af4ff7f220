import re

from ..errors import HexFormatError, UnknownFormatError
from ..types.color_types import RGBATuple
from ..utils import round_half_up

RE_HEX = re.compile(r"^#?([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})$")
RE_HEXA = re.compile(r"^#?([A-Fa-f0-9]{8}|[A-Fa-f0-9]{4})$")

HEX_MODES = ("auto", "rgb", "rgba", "argb")


def is_hex(text: object) -> bool:
    """True if ``text`` is a string in one of the accepted hex forms."""
    return isinstance(text, str) and bool(RE_HEX.fullmatch(text) or RE_HEXA.fullmatch(text))


def hex_to_rgb(text: str) -> RGBATuple:
    """
    Parse ``#RGB``, ``#RRGGBB``, ``#RGBA`` or ``#RRGGBBAA`` (``#`` optional).

    Returns:
        Tuple[int, int, int, float]: (r, g, b, a), alpha rounded to 2 decimals

    Raises:
        HexFormatError: the string matches none of the four forms
    """
    if not isinstance(text, str):
        raise HexFormatError(f"hex color must be a string, got {type(text).__name__}")
    match = RE_HEX.fullmatch(text)
    if match:
        digits = match.group(1)
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        u = int(digits, 16)
        return u >> 16, (u >> 8) & 0xFF, u & 0xFF, 1.0

    match = RE_HEXA.fullmatch(text)
    if match:
        digits = match.group(1)
        if len(digits) == 4:
            digits = "".join(ch * 2 for ch in digits)
        u = int(digits, 16)
        alpha = round_half_up((u & 0xFF) / 0xFF * 100) / 100
        return (u >> 24) & 0xFF, (u >> 16) & 0xFF, (u >> 8) & 0xFF, alpha

    raise HexFormatError(f"unknown hex color: {text!r}")


def rgb_to_hex(r: float, g: float, b: float, a: float = 1.0, mode: str = "auto") -> str:
    """
    Serialize RGBA to lowercase hex text.

    Args:
        r, g, b: channels in [0, 255], rounded to the nearest integer
        a: alpha in [0, 1]
        mode: "auto" (alpha byte only when a < 1), "rgb", "rgba" or "argb"

    Returns:
        str: "#rrggbb", "#rrggbbaa" or "#aarrggbb"
    """
    mode = mode.lower()
    if mode not in HEX_MODES:
        raise UnknownFormatError(f"unknown hex mode: {mode!r}, expected one of {HEX_MODES}")
    if mode == "auto":
        mode = "rgba" if a < 1 else "rgb"

    u = (round_half_up(r) << 16) | (round_half_up(g) << 8) | round_half_up(b)
    rgb_part = f"{u:06x}"
    alpha_part = f"{round_half_up(a * 255):02x}"

    if mode == "rgba":
        return f"#{rgb_part}{alpha_part}"
    if mode == "argb":
        return f"#{alpha_part}{rgb_part}"
    return f"#{rgb_part}"
