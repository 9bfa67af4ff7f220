# No dependencies besides numpy
import numpy as np


def _frozen(rows) -> np.ndarray:
    arr = np.array(rows, dtype=np.float64)
    arr.setflags(write=False)
    return arr


# Chroma step used by saturate/desaturate
KN = 18

# D65 reference white
XN = 0.95047
YN = 1.0
ZN = 1.08883
REF_WHITE = _frozen([XN, YN, ZN])

# CIE Lab breakpoints
K_E = 216.0 / 24389.0       # (6/29)**3
K_K = 24389.0 / 27.0        # (29/3)**3
K_KE = 8.0                  # K_K * K_E

# sRGB transfer function thresholds
SRGB_DECODE_THRESHOLD = 0.04045
SRGB_ENCODE_THRESHOLD = 0.0031308
SRGB_GAMMA = 2.4

# Matrices are laid out for row vectors: xyz = rgb @ RGB_TO_XYZ
RGB_TO_XYZ = _frozen([
    [0.4124564390896922, 0.21267285140562253, 0.0193338955823293],
    [0.357576077643909, 0.715152155287818, 0.11919202588130297],
    [0.18043748326639894, 0.07217499330655958, 0.9503040785363679],
])

XYZ_TO_RGB = _frozen([
    [3.2404541621141045, -0.9692660305051868, 0.055643430959114726],
    [-1.5371385127977166, 1.8760108454466942, -0.2040259135167538],
    [-0.498531409556016, 0.041556017530349834, 1.0572251882231791],
])

# Bradford cone response matrix and its inverse
BRADFORD = _frozen([
    [0.8951, -0.7502, 0.0389],
    [0.2664, 1.7135, -0.0685],
    [-0.1614, 0.0367, 1.0296],
])

BRADFORD_INV = _frozen([
    [0.9869929054667123, 0.43230526972339456, -0.008528664575177328],
    [-0.14705425642099013, 0.5183602715367776, 0.04004282165408487],
    [0.15996265166373125, 0.0492912282128556, 0.9684866957875502],
])

# Cone response of the sRGB source white
SOURCE_CONE = _frozen([0.9414285350000001, 1.040417467, 1.089532651])

# Cone response of the destination white, derived once at import
DEST_CONE = _frozen(REF_WHITE @ BRADFORD)

# Per-cone scale factors for the forward (rgb -> xyz) and inverse adaptation
ADAPT_FORWARD = _frozen(DEST_CONE / SOURCE_CONE)
ADAPT_INVERSE = _frozen(SOURCE_CONE / DEST_CONE)

HUE_360 = 360
