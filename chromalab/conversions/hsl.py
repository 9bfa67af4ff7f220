import numpy as np
from numpy import ndarray as NDArray
from typing import Optional

from ..types.color_types import Hue, HSLTuple, RGBATuple, is_missing_hue
from .constants import HUE_360

## RGB to HSL conversions

def rgb_to_hsl(r: float, g: float, b: float) -> HSLTuple:
    """
    Convert RGB to HSL using the min/max chroma formulas.

    Args:
        r, g, b: channels in [0, 255]

    Returns:
        Tuple[Optional[float], float, float]: (h, s, l) with h in degrees
        [0, 360) or ``None`` for achromatic colors, s and l in [0, 1].
    """
    r, g, b = r / 255, g / 255, b / 255
    min_rgb = min(r, g, b)
    max_rgb = max(r, g, b)
    lightness = (max_rgb + min_rgb) / 2

    if max_rgb == min_rgb:
        return None, 0.0, lightness

    delta = max_rgb - min_rgb
    if lightness < 0.5:
        saturation = delta / (max_rgb + min_rgb)
    else:
        saturation = delta / (2 - max_rgb - min_rgb)

    if r == max_rgb:
        hue = (g - b) / delta
    elif g == max_rgb:
        hue = 2 + (b - r) / delta
    else:
        hue = 4 + (r - g) / delta

    hue *= 60
    if hue < 0:
        hue += HUE_360
    return hue, saturation, lightness


def np_rgb_to_hsl(rgb: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to HSL.

    Args:
        rgb: array of shape (..., 3), channels in [0, 255]

    Returns:
        hsl: array of shape (..., 3); hue is NaN where the color is achromatic
    """
    rgb = np.asarray(rgb, dtype=float) / 255
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]
    max_rgb = rgb.max(axis=-1)
    min_rgb = rgb.min(axis=-1)
    delta = max_rgb - min_rgb
    lightness = (max_rgb + min_rgb) / 2

    chromatic = delta != 0
    safe_delta = np.where(chromatic, delta, 1.0)

    denom = np.where(lightness < 0.5, max_rgb + min_rgb, 2 - max_rgb - min_rgb)
    saturation = np.where(chromatic, delta / np.where(chromatic, denom, 1.0), 0.0)

    hue = np.where(
        r == max_rgb,
        (g - b) / safe_delta,
        np.where(g == max_rgb, 2 + (b - r) / safe_delta, 4 + (r - g) / safe_delta),
    )
    hue = (hue * 60) % HUE_360
    hue = np.where(chromatic, hue, np.nan)
    return np.stack([hue, saturation, lightness], axis=-1)

## HSL to RGB conversions

def _hue_channel(t1: float, t2: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if 6 * t < 1:
        return t1 + (t2 - t1) * 6 * t
    if 2 * t < 1:
        return t2
    if 3 * t < 2:
        return t1 + (t2 - t1) * (2 / 3 - t) * 6
    return t1


def hsl_to_rgb(h: Hue, s: float, l: float, alpha: Optional[float] = None) -> RGBATuple:
    """
    Convert HSL to RGB.

    Args:
        h: Hue in degrees; ``None`` is read as 0
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]
        alpha: passed through, defaults to 1

    Returns:
        Tuple[float, float, float, float]: (r, g, b, alpha), r/g/b in [0, 255]
    """
    alpha = 1.0 if alpha is None else alpha
    if s == 0:
        v = l * 255
        return v, v, v, alpha

    if is_missing_hue(h):
        h = 0.0
    t2 = l * (1 + s) if l < 0.5 else l + s - l * s
    t1 = 2 * l - t2
    hue = h / HUE_360
    r = _hue_channel(t1, t2, hue + 1 / 3)
    g = _hue_channel(t1, t2, hue)
    b = _hue_channel(t1, t2, hue - 1 / 3)
    return r * 255, g * 255, b * 255, alpha


def np_hsl_to_rgb(hsl: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to RGB.

    Args:
        hsl: array of shape (..., 3); NaN hues are read as 0

    Returns:
        rgb: array of shape (..., 3), channels in [0, 255]
    """
    hsl = np.asarray(hsl, dtype=float)
    h = np.nan_to_num(hsl[..., 0], nan=0.0) / HUE_360
    s, l = hsl[..., 1], hsl[..., 2]

    t2 = np.where(l < 0.5, l * (1 + s), l + s - l * s)
    t1 = 2 * l - t2

    channels = []
    for offset in (1 / 3, 0.0, -1 / 3):
        t = h + offset
        t = np.where(t < 0, t + 1, t)
        t = np.where(t > 1, t - 1, t)
        c = np.select(
            [6 * t < 1, 2 * t < 1, 3 * t < 2],
            [t1 + (t2 - t1) * 6 * t, t2, t1 + (t2 - t1) * (2 / 3 - t) * 6],
            default=t1,
        )
        channels.append(np.where(s == 0, l, c))
    return np.stack(channels, axis=-1) * 255
