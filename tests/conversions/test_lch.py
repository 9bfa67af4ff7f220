import math
import numpy as np
import pytest
from chromalab.conversions import (
    lab_to_lch,
    lch_to_lab,
    np_lab_to_lch,
    np_lch_to_lab,
    rgb_to_lch,
    lch_to_rgb,
)
from chromalab.utils import round_half_up
from ..samples import samples_lab, samples_gray


def test_lab_to_lch_polar():
    L, c, h = lab_to_lch(50.0, 0.0, 10.0)
    assert L == 50.0
    assert c == pytest.approx(10.0)
    assert h == pytest.approx(90.0)


def test_hue_wraps_into_positive_range():
    _, _, h = lab_to_lch(50.0, 0.0, -10.0)
    assert h == pytest.approx(270.0)
    _, _, h = lab_to_lch(50.0, -10.0, -1e-9)
    assert 0 <= h < 360


def test_zero_chroma_has_no_hue():
    assert lab_to_lch(50.0, 0.0, 0.0)[2] is None
    # rounds to zero at four decimals
    assert lab_to_lch(50.0, 0.00004, 0.0)[2] is None
    assert lab_to_lch(50.0, 0.0001, 0.0)[2] is not None


def test_missing_hue_reads_as_zero():
    assert lch_to_lab(50.0, 10.0, None) == pytest.approx((50.0, 10.0, 0.0))
    assert lch_to_lab(50.0, 10.0, float("nan")) == pytest.approx((50.0, 10.0, 0.0))
    assert lch_to_lab(50.0, 0.0, None) == (50.0, 0.0, 0.0)


def test_lab_lch_round_trip():
    for lab in samples_lab:
        L, a, b = lch_to_lab(*lab_to_lch(*lab))
        assert L == pytest.approx(lab[0], abs=1e-6)
        chroma = math.hypot(lab[1], lab[2])
        if round_half_up(chroma * 10000) == 0:
            # hue is gone: the chroma comes back on the a axis
            assert abs(a) <= chroma + 1e-12
            assert b == 0.0
        else:
            assert a == pytest.approx(lab[1], abs=1e-6)
            assert b == pytest.approx(lab[2], abs=1e-6)


def test_half_chroma_step_keeps_hue():
    # c * 10000 == 0.5 rounds up, so the hue survives
    assert lab_to_lch(50.0, 0.00005, 0.0)[2] == 0.0
    assert np_lab_to_lch(np.array([[50.0, 0.00005, 0.0]]))[0, 2] == 0.0


def test_grays_are_achromatic():
    for rgb in samples_gray:
        _, c, h = rgb_to_lch(*rgb)
        assert c == pytest.approx(0.0, abs=1e-4)
        assert h is None


def test_red_lch():
    L, c, h = rgb_to_lch(255, 0, 0)
    assert L == pytest.approx(53.24, abs=0.05)
    assert c == pytest.approx(104.55, abs=0.1)
    assert h == pytest.approx(40.0, abs=0.1)


def test_lch_to_rgb_round_trip():
    for rgb in [(52, 152, 219), (200, 0, 0), (12, 200, 90), (128, 128, 128)]:
        r, g, b, a = lch_to_rgb(*rgb_to_lch(*rgb))
        assert (r, g, b) == pytest.approx(rgb, abs=1e-6)
        assert a == 1.0


def test_lch_numpy():
    lab = np.array(samples_lab)
    lch = np_lab_to_lch(lab)
    for row, (L, c, h) in zip(lch, (lab_to_lch(*v) for v in samples_lab)):
        assert row[0] == pytest.approx(L)
        assert row[1] == pytest.approx(c)
        if h is None:
            assert np.isnan(row[2])
        else:
            assert row[2] == pytest.approx(h)

    back = np_lch_to_lab(lch)
    expected = np.array([lch_to_lab(*lab_to_lch(*v)) for v in samples_lab])
    assert np.allclose(back, expected)
