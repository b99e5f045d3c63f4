"""Colour harmony engine.

Derives a four colour accent palette from one base colour and a harmony
rule. Hue offsets are applied on the CMY (artist's) colour wheel, which
gives more pleasing results than rotating the RGB hue directly; see
:mod:`hue_wheel`.
"""
import colorsys
import logging
import random
from collections import namedtuple
from enum import Enum

import numpy as np

from hue_wheel import cmy_hue_to_rgb_hue, normalize_hue, remap, rgb_hue_to_cmy_hue

logger = logging.getLogger(__name__)

# below this saturation or value the hue of a colour is meaningless
MIN_SV = 0.01

# HSV of white, the starting colour of a new palette
DEFAULT_HSV = (0.0, 0.0, 1.0)


class HarmonyRule(Enum):
    ANALOGOUS = "Analogous"
    MONOCHROMATIC = "Monochromatic"
    TRIAD = "Triad"
    COMPLEMENTARY = "Complementary"
    SPLIT_COMPLEMENTARY = "SplitComplementary"
    DOUBLE_SPLIT_COMPLEMENTARY = "DoubleSplitComplementary"
    SQUARE = "Square"
    COMPOUND = "Compound"
    SHADES = "Shades"
    CUSTOM = "Custom"


Palette = namedtuple("Palette", ["base_rgb", "base_hsv", "colours"])


def hex_to_rgb(hex_color):
    hex_color = hex_color.strip().lstrip('#')
    if len(hex_color) != 6:
        raise ValueError(f"Invalid hex color: {hex_color!r}")
    try:
        return tuple(int(hex_color[i:i+2], 16)/255.0 for i in (0, 2, 4))
    except ValueError:
        raise ValueError(f"Invalid hex color: {hex_color!r}") from None


def rgb_to_hex(rgb):
    return '#' + ''.join(f'{round(max(0.0, min(1.0, c)) * 255):02x}' for c in rgb)


def as_rule(rule):
    if isinstance(rule, HarmonyRule):
        return rule
    try:
        return HarmonyRule(rule)
    except ValueError:
        raise ValueError(f"Unknown harmony rule: {rule!r}") from None


def as_triple(values, name="color"):
    """Three floats in [0, 1], from an RGB colour or a normalized HSV."""
    if isinstance(values, (str, bytes)):
        raise ValueError(f"Invalid {name}: {values!r}")
    try:
        triple = tuple(float(c) for c in values)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid {name}: {values!r}") from None
    if len(triple) != 3:
        raise ValueError(f"{name} must have 3 components, got {len(triple)}")
    if not all(0.0 <= c <= 1.0 for c in triple):
        raise ValueError(f"{name} components must be in [0, 1], got {triple}")
    return triple


def clamp(value, lo, hi):
    return max(lo, min(hi, value))


def random_base_color(rng=random):
    """Random starting colour, weighted towards bright saturated colours."""
    h = rng.uniform(0.0, 360.0) % 360.0
    s = rng.uniform(75.0, 100.0)
    v = rng.uniform(75.0, 100.0)
    return colorsys.hsv_to_rgb(h / 360.0, s / 100.0, v / 100.0)


# Saturation/value steps shared between rules. Thresholds are in percent.

def _step_5_or_floor(x):
    if x > 95:
        return x - 5
    if x < 5:
        return 10.0
    return x + 5


def _up_10_unless_high(x):
    return x + 10 if x < 91 else x - 10


def _down_10_unless_low(x):
    return x - 10 if x > 19 else x + 10


def _down_5_unless_mid_low(x):
    return x - 5 if x > 14 or x < 5 else x + 5


def _flip_30_at_50(x):
    return x + 30 if x < 50 else x - 30


def _cmy_offsets(h, offsets):
    """RGB hues obtained by shifting h by each offset on the CMY wheel."""
    cmy = rgb_hue_to_cmy_hue(h)
    return [cmy_hue_to_rgb_hue(cmy + offset) for offset in offsets]


# Each rule fills the H, S and V slot lists in place.

def _analogous(H, S, V, h, s, v):
    H[:] = _cmy_offsets(h, (30, 15, -15, -30))
    S[:] = [_step_5_or_floor(s)] * 4

    v_outer = clamp(v + 5, 20.0, 100.0)
    if v > 90:
        v_inner = v - 10
    elif v < 10:
        v_inner = 20.0
    else:
        v_inner = v + 10
    V[:] = [v_outer, v_inner, v_inner, v_outer]


def _monochromatic(H, S, V, h, s, v):
    S[1] = S[2] = s + 30 if s < 40 else s - 30

    V[0] = V[2] = v - 50 if v > 70 else v + 30
    V[1] = 20.0 if v < 10 else remap(v, 1, 100, 20, 100)
    V[3] = v + 60 if v < 41 else v - 20


def _triad(H, S, V, h, s, v):
    cmy = rgb_hue_to_cmy_hue(h)
    H[1] = cmy_hue_to_rgb_hue(cmy + 120)
    H[2] = H[3] = cmy_hue_to_rgb_hue(cmy - 120)

    S[0] = S[2] = _up_10_unless_high(s)
    S[1] = _down_10_unless_low(s)
    S[3] = _step_5_or_floor(s)

    V[0] = V[3] = _flip_30_at_50(v)


def _complementary(H, S, V, h, s, v):
    H[2] = H[3] = cmy_hue_to_rgb_hue(rgb_hue_to_cmy_hue(h) + 180)

    S[0] = s + 10 if s < 81 else remap(s, 80, 100, 90, 100)
    S[1] = clamp(s - 10, 0.0, 90.0)
    S[2] = clamp(s + 20, 20.0, 100.0)

    # gated on saturation, not value
    V[0] = V[2] = v + 30 if s < 50 else v - 30
    V[1] = clamp(v + 30, 30.0, 100.0)


def _split_complementary(H, S, V, h, s, v):
    H[:] = _cmy_offsets(h, (150, 150, -150, -150))

    S[0] = _down_10_unless_low(s)
    S[1] = _down_5_unless_mid_low(s)
    S[2] = _up_10_unless_high(s)
    S[3] = _step_5_or_floor(s)

    V[0] = V[2] = _flip_30_at_50(v)


def _double_split_complementary(H, S, V, h, s, v):
    H[:] = _cmy_offsets(h, (30, 150, -150, -30))

    S[0] = _down_5_unless_mid_low(s)
    S[1] = _down_10_unless_low(s)
    S[2] = _up_10_unless_high(s)
    S[3] = _step_5_or_floor(s)


def _square(H, S, V, h, s, v):
    H[1:] = _cmy_offsets(h, (90, 180, -90))

    S[0] = S[2] = _up_10_unless_high(s)
    S[1] = _down_10_unless_low(s)
    S[3] = _down_5_unless_mid_low(s)


def _compound(H, S, V, h, s, v):
    H[:] = _cmy_offsets(h, (30, 30, 165, 150))

    S[0] = S[3] = _up_10_unless_high(s)
    S[1] = s - 40 if s > 50 else s + 40
    S[2] = s + 25 if s < 36 else s - 25

    V[0] = V[3] = v + 20 if v < 81 else v - 20
    V[1] = v - 40 if v > 60 else v + 40
    if v < 16:
        V[2] = 20.0
    elif v < 65:
        V[2] = v + 5
    else:
        V[2] = remap(v, 65, 100, 69, 100)


def _shades(H, S, V, h, s, v):
    V[0] = v + 55 if v < 45 else v - 25
    V[1] = v + 30 if v < 71 else v - 50
    if v < 15:
        V[2] = 20.0
    elif v < 96:
        V[2] = v + 5
    else:
        V[2] = v - 75
    V[3] = clamp(v - 10, 20.0, 90.0)


_RULES = {
    HarmonyRule.ANALOGOUS: _analogous,
    HarmonyRule.MONOCHROMATIC: _monochromatic,
    HarmonyRule.TRIAD: _triad,
    HarmonyRule.COMPLEMENTARY: _complementary,
    HarmonyRule.SPLIT_COMPLEMENTARY: _split_complementary,
    HarmonyRule.DOUBLE_SPLIT_COMPLEMENTARY: _double_split_complementary,
    HarmonyRule.SQUARE: _square,
    HarmonyRule.COMPOUND: _compound,
    HarmonyRule.SHADES: _shades,
}


def harmony_hsv(h, s, v, rule):
    """Per-slot hue, saturation and value lists for a base colour.

    Works in degrees and percent. Values are returned exactly as the rule
    formulas produce them, so saturation and value may fall outside
    [0, 100] for some inputs. Custom leaves all four slots equal to the
    base colour.
    """
    H, S, V = [h] * 4, [s] * 4, [v] * 4
    formula = _RULES.get(as_rule(rule))
    if formula is not None:
        formula(H, S, V, h, s, v)
    H = [normalize_hue(x) for x in H]
    return H, S, V


def recalculate(base_rgb, previous_hsv, rule, colours=None):
    """Compute the four palette colours for base_rgb.

    previous_hsv is the normalized HSV returned as ``base_hsv`` by the
    previous call. It replaces the base colour when that is too close to
    grey or black to have a stable hue.

    With the Custom rule the caller's current ``colours`` are passed
    through untouched.
    """
    rule = as_rule(rule)
    base_rgb = as_triple(base_rgb)
    previous_hsv = as_triple(previous_hsv, "previous_hsv")

    h, s, v = colorsys.rgb_to_hsv(*base_rgb)
    if s < MIN_SV or v < MIN_SV:
        logger.debug("degenerate base colour %s, keeping hsv %s", base_rgb, previous_hsv)
        h, s, v = previous_hsv
    base_hsv = (h, s, v)
    base_rgb = colorsys.hsv_to_rgb(h, s, v)

    if rule is HarmonyRule.CUSTOM:
        if colours is None:
            colours = [base_rgb] * 4
        colours = tuple(as_triple(c) for c in colours)
        if len(colours) != 4:
            raise ValueError(f"expected 4 colours, got {len(colours)}")
        return Palette(base_rgb, base_hsv, colours)

    H, S, V = harmony_hsv(h * 360.0, s * 100.0, v * 100.0, rule)
    H = np.asarray(H) / 360.0
    S = np.clip(S, 0.0, 100.0) / 100.0
    V = np.clip(V, 0.0, 100.0) / 100.0

    colours = tuple(
        colorsys.hsv_to_rgb(float(hh), float(ss), float(vv))
        for hh, ss, vv in zip(H, S, V)
    )
    return Palette(base_rgb, base_hsv, colours)


def get_harmony(color, rule=None, previous_hsv=None):
    """Hex palettes for a hex or RGB colour, for one rule or for all of them."""
    rgb = hex_to_rgb(color) if isinstance(color, str) else as_triple(color)
    if previous_hsv is None:
        previous_hsv = DEFAULT_HSV

    if rule is not None:
        palette = recalculate(rgb, previous_hsv, rule)
        return [rgb_to_hex(c) for c in palette.colours]

    return {
        r.value: [rgb_to_hex(c) for c in recalculate(rgb, previous_hsv, r).colours]
        for r in HarmonyRule
        if r is not HarmonyRule.CUSTOM
    }
