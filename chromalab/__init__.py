"""Chromalab: colorimetric conversions and a channel-addressable color value."""

from .colors import (
    Color,
    chroma,
    FormatRegistry,
    default_registry,
)
from .conversions import (
    gamma_decode,
    gamma_encode,
    rgb_to_xyz,
    xyz_to_rgb,
    xyz_to_lab,
    lab_to_xyz,
    rgb_to_lab,
    lab_to_rgb,
    lab_to_lch,
    lch_to_lab,
    rgb_to_lch,
    lch_to_rgb,
    rgb_to_hsl,
    hsl_to_rgb,
    hex_to_rgb,
    rgb_to_hex,
    np_rgb_to_xyz,
    np_xyz_to_rgb,
    np_xyz_to_lab,
    np_lab_to_xyz,
    np_lab_to_lch,
    np_lch_to_lab,
    np_rgb_to_hsl,
    np_hsl_to_rgb,
)
from .conversions.constants import KN
from .errors import (
    ChromaError,
    HexFormatError,
    UnknownFormatError,
    UnknownChannelError,
    UnsupportedValueError,
)
from .types import ColorMode

__version__ = "1.0.0"

__all__ = [
    # color value
    "Color",
    "chroma",
    "ColorMode",
    "FormatRegistry",
    "default_registry",
    "KN",
    # conversions
    "gamma_decode",
    "gamma_encode",
    "rgb_to_xyz",
    "xyz_to_rgb",
    "xyz_to_lab",
    "lab_to_xyz",
    "rgb_to_lab",
    "lab_to_rgb",
    "lab_to_lch",
    "lch_to_lab",
    "rgb_to_lch",
    "lch_to_rgb",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "hex_to_rgb",
    "rgb_to_hex",
    "np_rgb_to_xyz",
    "np_xyz_to_rgb",
    "np_xyz_to_lab",
    "np_lab_to_xyz",
    "np_lab_to_lch",
    "np_lch_to_lab",
    "np_rgb_to_hsl",
    "np_hsl_to_rgb",
    # errors
    "ChromaError",
    "HexFormatError",
    "UnknownFormatError",
    "UnknownChannelError",
    "UnsupportedValueError",
    # version
    "__version__",
]
