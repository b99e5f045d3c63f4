"""Conversion between the RGB hue wheel and the CMY (artist's) hue wheel.

Hues are in degrees. The two wheels are related by a small calibration
table and linear interpolation between neighbouring entries.
"""

# (CMY hue, RGB hue) pairs, both columns increasing from 0 to 360
CMY_TO_RGB = (
    (0.0, 0.0),
    (60.0, 35.0),
    (122.0, 60.0),
    (165.0, 120.0),
    (218.0, 180.0),
    (275.0, 240.0),
    (330.0, 300.0),
    (360.0, 360.0),
)

CMY = 0
RGB = 1


def remap(value, from1, to1, from2, to2):
    """Linearly map value from the range [from1, to1] onto [from2, to2]."""
    return (value - from1) / (to1 - from1) * (to2 - from2) + from2


def normalize_hue(h):
    if h < 0:
        h += 360.0
    return h % 360.0


def _convert(h, src, dst):
    h = normalize_hue(h)
    for i, point in enumerate(CMY_TO_RGB):
        if point[src] == h:
            return point[dst]
        if point[src] > h:
            prev = CMY_TO_RGB[i - 1] if i > 0 else (0.0, 0.0)
            return remap(h, prev[src], point[src], prev[dst], point[dst])
    # unreachable while the table spans the whole wheel
    return 0.0


def rgb_hue_to_cmy_hue(h):
    return _convert(h, RGB, CMY)


def cmy_hue_to_rgb_hue(h):
    return _convert(h, CMY, RGB)
