import math
import numpy as np
from numpy import ndarray as NDArray
from typing import Optional

from ..types.color_types import Hue, LabTuple, LCHTuple, RGBATuple, is_missing_hue
from ..utils import round_half_up
from .constants import HUE_360
from .lab import rgb_to_lab, lab_to_rgb


def lab_to_lch(L: float, a: float, b: float) -> LCHTuple:
    """
    Convert Lab to its cylindrical form.

    Args:
        L, a, b: CIE Lab components

    Returns:
        Tuple[float, float, Optional[float]]: (L, C, H). H is in [0, 360) and
        is ``None`` when the chroma rounds to zero at four decimals.
    """
    c = math.hypot(a, b)
    if round_half_up(c * 10000) == 0:
        return L, c, None
    h = (math.degrees(math.atan2(b, a)) + HUE_360) % HUE_360
    return L, c, h


def lch_to_lab(L: float, c: float, h: Hue) -> LabTuple:
    """Convert LCH to Lab. An undefined hue is read as 0."""
    if is_missing_hue(h):
        h = 0.0
    rad = math.radians(h)
    return L, c * math.cos(rad), c * math.sin(rad)


def np_lab_to_lch(lab: NDArray) -> NDArray:
    """
    Vectorized :func:`lab_to_lch`.

    Undefined hues are NaN, since an array cannot hold ``None``.
    """
    lab = np.asarray(lab, dtype=float)
    L, a, b = lab[..., 0], lab[..., 1], lab[..., 2]
    c = np.hypot(a, b)
    h = (np.degrees(np.arctan2(b, a)) + HUE_360) % HUE_360
    h = np.where(np.floor(c * 10000 + 0.5) == 0, np.nan, h)
    return np.stack([L, c, h], axis=-1)


def np_lch_to_lab(lch: NDArray) -> NDArray:
    """Vectorized :func:`lch_to_lab`; NaN hues are read as 0."""
    lch = np.asarray(lch, dtype=float)
    L, c, h = lch[..., 0], lch[..., 1], np.nan_to_num(lch[..., 2], nan=0.0)
    rad = np.radians(h)
    return np.stack([L, c * np.cos(rad), c * np.sin(rad)], axis=-1)


def rgb_to_lch(r: float, g: float, b: float) -> LCHTuple:
    """sRGB in [0, 255] -> LCH."""
    return lab_to_lch(*rgb_to_lab(r, g, b))


def lch_to_rgb(L: float, c: float, h: Hue, alpha: Optional[float] = None) -> RGBATuple:
    """LCH -> (r, g, b, alpha); alpha defaults to 1."""
    return lab_to_rgb(*lch_to_lab(L, c, h), alpha)
