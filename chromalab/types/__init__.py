from .color_types import (
    ColorMode,
    Hue,
    RGBTuple,
    RGBATuple,
    LabTuple,
    XYZTuple,
    LCHTuple,
    HSLTuple,
    is_missing_hue,
)

__all__ = [
    "ColorMode",
    "Hue",
    "RGBTuple",
    "RGBATuple",
    "LabTuple",
    "XYZTuple",
    "LCHTuple",
    "HSLTuple",
    "is_missing_hue",
]
