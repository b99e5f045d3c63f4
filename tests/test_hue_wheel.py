import pytest

import hue_wheel
from hue_wheel import CMY_TO_RGB, cmy_hue_to_rgb_hue, normalize_hue, remap, rgb_hue_to_cmy_hue


def test_remap():
    assert remap(5, 0, 10, 100, 200) == pytest.approx(150)
    assert remap(80, 1, 100, 20, 100) == pytest.approx(20 + 79 / 99 * 80)


@pytest.mark.parametrize("h, expected", [(0, 0), (-30, 330), (360, 0), (725, 5), (-400, 320)])
def test_normalize_hue(h, expected):
    assert normalize_hue(h) == pytest.approx(expected)


@pytest.mark.parametrize("cmy, rgb", CMY_TO_RGB[:-1])
def test_table_points_map_exactly(cmy, rgb):
    assert rgb_hue_to_cmy_hue(rgb) == cmy
    assert cmy_hue_to_rgb_hue(cmy) == rgb


def test_full_turn_wraps_to_zero():
    assert rgb_hue_to_cmy_hue(360) == 0
    assert cmy_hue_to_rgb_hue(360) == 0


def test_interpolates_between_points():
    assert rgb_hue_to_cmy_hue(17.5) == pytest.approx(30)
    assert cmy_hue_to_rgb_hue(30) == pytest.approx(17.5)
    assert cmy_hue_to_rgb_hue(345) == pytest.approx(330)


def test_negative_hues_wrap():
    assert cmy_hue_to_rgb_hue(-30) == pytest.approx(300)
    assert rgb_hue_to_cmy_hue(-60) == pytest.approx(330)


def test_complement_of_red_is_not_rgb_cyan():
    # 180 on the CMY wheel sits between (165, 120) and (218, 180)
    hue = cmy_hue_to_rgb_hue(rgb_hue_to_cmy_hue(0) + 180)
    assert hue == pytest.approx(120 + 15 / 53 * 60)
    assert hue == pytest.approx(136.98, abs=0.01)


@pytest.mark.parametrize("x", [0, 60, 122, 165, 218, 275, 330, 360])
def test_round_trip_at_calibration_points(x):
    assert cmy_hue_to_rgb_hue(rgb_hue_to_cmy_hue(x)) == pytest.approx(x % 360)
    assert rgb_hue_to_cmy_hue(cmy_hue_to_rgb_hue(x)) == pytest.approx(x % 360)


def test_round_trip_between_points():
    for x in (3.3, 47.0, 100.5, 199.9, 281.25, 359.0):
        assert cmy_hue_to_rgb_hue(rgb_hue_to_cmy_hue(x)) == pytest.approx(x)


@pytest.mark.parametrize("convert", [rgb_hue_to_cmy_hue, cmy_hue_to_rgb_hue])
def test_monotonic_over_the_wheel(convert):
    values = [convert(i / 4) for i in range(360 * 4)]
    assert all(b >= a for a, b in zip(values, values[1:]))
    assert all(0 <= v < 360 for v in values)


def test_exhausted_table_falls_back_to_zero(monkeypatch):
    monkeypatch.setattr(hue_wheel, "CMY_TO_RGB", ((0.0, 0.0), (60.0, 35.0)))
    assert hue_wheel.rgb_hue_to_cmy_hue(200) == 0
    assert hue_wheel.cmy_hue_to_rgb_hue(200) == 0
