from __future__ import annotations
from enum import Enum
from typing import Optional, Tuple

Hue = Optional[float]
RGBTuple = Tuple[float, float, float]
RGBATuple = Tuple[float, float, float, float]
LabTuple = Tuple[float, float, float]
XYZTuple = Tuple[float, float, float]
LCHTuple = Tuple[float, float, Hue]
HSLTuple = Tuple[Hue, float, float]


class ColorMode(str, Enum):
    RGB = "rgb"
    HSL = "hsl"
    LCH = "lch"
    LAB = "lab"
    HEX = "hex"

    @property
    def channels(self) -> Tuple[str, ...]:
        """Ordered channel letters addressable with ``"<mode>.<channel>"``."""
        return _CHANNELS[self]

    def channel_index(self, channel: str) -> int:
        """Index of ``channel`` in this mode, or -1 if the mode has no such channel."""
        try:
            return self.channels.index(channel.lower())
        except ValueError:
            return -1


# hex is an encoding, not a channel space
_CHANNELS = {
    ColorMode.RGB: ("r", "g", "b"),
    ColorMode.HSL: ("h", "s", "l"),
    ColorMode.LCH: ("l", "c", "h"),
    ColorMode.LAB: ("l", "a", "b"),
    ColorMode.HEX: (),
}


def is_missing_hue(h: Hue) -> bool:
    """True for ``None`` and for NaN, both of which mean "hue undefined"."""
    return h is None or (isinstance(h, float) and h != h)
