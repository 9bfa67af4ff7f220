"""
Chromalab Color Space Conversions
=================================

Scalar and vectorized (numpy) conversions between sRGB, CIE XYZ, CIE Lab,
LCH, HSL and hex text.

Pipeline
--------
    rgb --gamma_decode--> linear --RGB_TO_XYZ--> xyz --Bradford--> xyz(D65)
        --xyz_to_lab--> lab --lab_to_lch--> lch

Every step has an exact inverse reusing the same constants.

Conversion Functions
-------------------

sRGB transfer:
    gamma_decode(c), gamma_encode(v)
    np_gamma_decode(arr), np_gamma_encode(arr)

RGB ↔ XYZ:
    rgb_to_xyz(r, g, b), xyz_to_rgb(x, y, z)
    np_rgb_to_xyz(arr), np_xyz_to_rgb(arr)

XYZ ↔ Lab:
    xyz_to_lab(x, y, z), lab_to_xyz(L, a, b)
    np_xyz_to_lab(arr), np_lab_to_xyz(arr)
    rgb_to_lab(r, g, b), lab_to_rgb(L, a, b, alpha=None)

Lab ↔ LCH:
    lab_to_lch(L, a, b), lch_to_lab(L, c, h)
    np_lab_to_lch(arr), np_lch_to_lab(arr)
    rgb_to_lch(r, g, b), lch_to_rgb(L, c, h, alpha=None)

RGB ↔ HSL:
    rgb_to_hsl(r, g, b), hsl_to_rgb(h, s, l, alpha=None)
    np_rgb_to_hsl(arr), np_hsl_to_rgb(arr)

Hex:
    hex_to_rgb(text), rgb_to_hex(r, g, b, a=1.0, mode="auto")

Undefined hues are ``None`` in scalar results and NaN in arrays.

Examples
--------
>>> from chromalab.conversions import rgb_to_lch, lch_to_rgb
>>> L, c, h = rgb_to_lch(52, 152, 219)
>>> r, g, b, a = lch_to_rgb(L, c, h)
"""

from .xyz import (
    gamma_decode,
    gamma_encode,
    np_gamma_decode,
    np_gamma_encode,
    rgb_to_xyz,
    xyz_to_rgb,
    np_rgb_to_xyz,
    np_xyz_to_rgb,
)
from .lab import (
    xyz_to_lab,
    lab_to_xyz,
    np_xyz_to_lab,
    np_lab_to_xyz,
    rgb_to_lab,
    lab_to_rgb,
)
from .lch import (
    lab_to_lch,
    lch_to_lab,
    np_lab_to_lch,
    np_lch_to_lab,
    rgb_to_lch,
    lch_to_rgb,
)
from .hsl import rgb_to_hsl, hsl_to_rgb, np_rgb_to_hsl, np_hsl_to_rgb
from .hex import hex_to_rgb, rgb_to_hex, is_hex, RE_HEX, RE_HEXA

__all__ = [
    # sRGB transfer
    'gamma_decode',
    'gamma_encode',
    'np_gamma_decode',
    'np_gamma_encode',

    # RGB ↔ XYZ
    'rgb_to_xyz',
    'xyz_to_rgb',
    'np_rgb_to_xyz',
    'np_xyz_to_rgb',

    # XYZ ↔ Lab
    'xyz_to_lab',
    'lab_to_xyz',
    'np_xyz_to_lab',
    'np_lab_to_xyz',
    'rgb_to_lab',
    'lab_to_rgb',

    # Lab ↔ LCH
    'lab_to_lch',
    'lch_to_lab',
    'np_lab_to_lch',
    'np_lch_to_lab',
    'rgb_to_lch',
    'lch_to_rgb',

    # RGB ↔ HSL
    'rgb_to_hsl',
    'hsl_to_rgb',
    'np_rgb_to_hsl',
    'np_hsl_to_rgb',

    # Hex
    'hex_to_rgb',
    'rgb_to_hex',
    'is_hex',
    'RE_HEX',
    'RE_HEXA',
]
