import math
import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import XYZTuple, RGBTuple
from .constants import (
    RGB_TO_XYZ,
    XYZ_TO_RGB,
    BRADFORD,
    BRADFORD_INV,
    ADAPT_FORWARD,
    ADAPT_INVERSE,
    SRGB_DECODE_THRESHOLD,
    SRGB_ENCODE_THRESHOLD,
    SRGB_GAMMA,
)

## sRGB transfer function

def gamma_decode(companded: float) -> float:
    """
    sRGB companded channel in [0, 1] -> linear light.

    The curve is applied to the magnitude and the sign put back afterwards,
    so negative inputs mirror the positive branch.
    """
    sign = math.copysign(1.0, companded) if companded != 0 else 0.0
    magnitude = abs(companded)
    if magnitude <= SRGB_DECODE_THRESHOLD:
        linear = magnitude / 12.92
    else:
        linear = ((magnitude + 0.055) / 1.055) ** SRGB_GAMMA
    return linear * sign


def gamma_encode(linear: float) -> float:
    """Linear light -> sRGB companded channel. Inverse of :func:`gamma_decode`."""
    sign = math.copysign(1.0, linear) if linear != 0 else 0.0
    magnitude = abs(linear)
    if magnitude <= SRGB_ENCODE_THRESHOLD:
        companded = magnitude * 12.92
    else:
        companded = 1.055 * magnitude ** (1 / SRGB_GAMMA) - 0.055
    return companded * sign


def np_gamma_decode(companded: NDArray) -> NDArray:
    """Vectorized :func:`gamma_decode`."""
    companded = np.asarray(companded, dtype=float)
    sign = np.sign(companded)
    magnitude = np.abs(companded)
    linear = np.where(
        magnitude <= SRGB_DECODE_THRESHOLD,
        magnitude / 12.92,
        ((magnitude + 0.055) / 1.055) ** SRGB_GAMMA,
    )
    return linear * sign


def np_gamma_encode(linear: NDArray) -> NDArray:
    """Vectorized :func:`gamma_encode`."""
    linear = np.asarray(linear, dtype=float)
    sign = np.sign(linear)
    magnitude = np.abs(linear)
    companded = np.where(
        magnitude <= SRGB_ENCODE_THRESHOLD,
        magnitude * 12.92,
        1.055 * magnitude ** (1 / SRGB_GAMMA) - 0.055,
    )
    return companded * sign

## RGB <-> XYZ

def _adapt(xyz: NDArray, scale: NDArray) -> NDArray:
    # Bradford: into cone space, scale per cone, back out
    cone = xyz @ BRADFORD
    cone = cone * scale
    return cone @ BRADFORD_INV


def np_rgb_to_xyz(rgb: NDArray) -> NDArray:
    """
    Vectorized: sRGB in [0, 255] -> D65-adapted XYZ.

    Args:
        rgb: array of shape (..., 3)

    Returns:
        xyz: array of shape (..., 3)
    """
    rgb = np.asarray(rgb, dtype=float)
    linear = np_gamma_decode(rgb / 255.0)
    return _adapt(linear @ RGB_TO_XYZ, ADAPT_FORWARD)


def np_xyz_to_rgb(xyz: NDArray) -> NDArray:
    """
    Vectorized: D65-adapted XYZ -> sRGB in [0, 255] (unclamped).

    Args:
        xyz: array of shape (..., 3)

    Returns:
        rgb: array of shape (..., 3)
    """
    xyz = np.asarray(xyz, dtype=float)
    linear = _adapt(xyz, ADAPT_INVERSE) @ XYZ_TO_RGB
    return np_gamma_encode(linear) * 255.0


def rgb_to_xyz(r: float, g: float, b: float) -> XYZTuple:
    """
    Convert sRGB channels in [0, 255] to XYZ adapted to the D65 white.

    Args:
        r, g, b: sRGB channels in [0, 255]

    Returns:
        Tuple[float, float, float]: (x, y, z)
    """
    linear = np.array([gamma_decode(r / 255), gamma_decode(g / 255), gamma_decode(b / 255)])
    x, y, z = _adapt(linear @ RGB_TO_XYZ, ADAPT_FORWARD)
    return float(x), float(y), float(z)


def xyz_to_rgb(x: float, y: float, z: float) -> RGBTuple:
    """
    Convert D65-adapted XYZ to sRGB channels in [0, 255].

    The result is not clamped; out-of-gamut colors fall outside [0, 255].
    """
    lr, lg, lb = _adapt(np.array([x, y, z], dtype=float), ADAPT_INVERSE) @ XYZ_TO_RGB
    return (
        gamma_encode(float(lr)) * 255,
        gamma_encode(float(lg)) * 255,
        gamma_encode(float(lb)) * 255,
    )
