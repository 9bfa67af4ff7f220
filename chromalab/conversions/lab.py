import numpy as np
from numpy import ndarray as NDArray
from typing import Optional

from ..types.color_types import LabTuple, XYZTuple, RGBATuple
from .constants import XN, YN, ZN, REF_WHITE, K_E, K_K, K_KE
from .xyz import rgb_to_xyz, xyz_to_rgb


def _f(t: float) -> float:
    return t ** (1 / 3) if t > K_E else (K_K * t + 16) / 116


def xyz_to_lab(x: float, y: float, z: float) -> LabTuple:
    """
    Convert D65 XYZ to CIE Lab.

    Args:
        x, y, z: tristimulus values relative to Yn = 1

    Returns:
        Tuple[float, float, float]: (L, a, b)
    """
    fx = _f(x / XN)
    fy = _f(y / YN)
    fz = _f(z / ZN)
    return 116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)


def lab_to_xyz(L: float, a: float, b: float) -> XYZTuple:
    """Convert CIE Lab to D65 XYZ. Inverse of :func:`xyz_to_lab`."""
    fy = (L + 16.0) / 116.0
    fx = 0.002 * a + fy
    fz = fy - 0.005 * b

    fx3 = fx * fx * fx
    fz3 = fz * fz * fz

    xr = fx3 if fx3 > K_E else (116.0 * fx - 16.0) / K_K
    yr = ((L + 16.0) / 116.0) ** 3 if L > K_KE else L / K_K
    zr = fz3 if fz3 > K_E else (116.0 * fz - 16.0) / K_K

    return xr * XN, yr * YN, zr * ZN


def np_xyz_to_lab(xyz: NDArray) -> NDArray:
    """
    Vectorized: D65 XYZ -> CIE Lab.

    Args:
        xyz: array of shape (..., 3)

    Returns:
        lab: array of shape (..., 3)
    """
    t = np.asarray(xyz, dtype=float) / REF_WHITE
    # cbrt keeps the discarded branch NaN-free for negative inputs
    f = np.where(t > K_E, np.cbrt(t), (K_K * t + 16) / 116)
    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]
    return np.stack([116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)], axis=-1)


def np_lab_to_xyz(lab: NDArray) -> NDArray:
    """Vectorized :func:`lab_to_xyz`."""
    lab = np.asarray(lab, dtype=float)
    L, a, b = lab[..., 0], lab[..., 1], lab[..., 2]
    fy = (L + 16.0) / 116.0
    fx = 0.002 * a + fy
    fz = fy - 0.005 * b

    fx3 = fx ** 3
    fz3 = fz ** 3

    xr = np.where(fx3 > K_E, fx3, (116.0 * fx - 16.0) / K_K)
    yr = np.where(L > K_KE, fy ** 3, L / K_K)
    zr = np.where(fz3 > K_E, fz3, (116.0 * fz - 16.0) / K_K)

    return np.stack([xr, yr, zr], axis=-1) * REF_WHITE


def rgb_to_lab(r: float, g: float, b: float) -> LabTuple:
    """sRGB in [0, 255] -> CIE Lab."""
    return xyz_to_lab(*rgb_to_xyz(r, g, b))


def lab_to_rgb(L: float, a: float, b: float, alpha: Optional[float] = None) -> RGBATuple:
    """CIE Lab -> (r, g, b, alpha); alpha defaults to 1."""
    r, g, b_ = xyz_to_rgb(*lab_to_xyz(L, a, b))
    return r, g, b_, 1.0 if alpha is None else alpha
