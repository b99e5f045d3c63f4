"""Mutable palette state for an interactive caller.

Holds the base colour, the harmony rule, the last valid base HSV and the
four palette colours, and recalculates whenever the base colour or the
rule actually change. Palette colours can be edited in between; edits
survive until the next recalculation, or indefinitely under Custom.
"""
import random

from color_harmony import (
    DEFAULT_HSV,
    HarmonyRule,
    as_rule,
    as_triple,
    random_base_color,
    recalculate,
    rgb_to_hex,
)


class PaletteSession:
    def __init__(self, base_color=(1.0, 1.0, 1.0), rule=HarmonyRule.ANALOGOUS):
        self.base_color = as_triple(base_color)
        self.rule = as_rule(rule)
        self.previous_hsv = DEFAULT_HSV
        self.colours = [self.base_color] * 4
        self.recalculate()

    def recalculate(self):
        palette = recalculate(self.base_color, self.previous_hsv, self.rule, self.colours)
        self.base_color = palette.base_rgb
        self.previous_hsv = palette.base_hsv
        self.colours = list(palette.colours)
        return palette

    def set_base_color(self, rgb):
        rgb = as_triple(rgb)
        if rgb != self.base_color:
            self.base_color = rgb
            self.recalculate()
        return self.colours

    def set_rule(self, rule):
        rule = as_rule(rule)
        if rule is not self.rule:
            self.rule = rule
            self.recalculate()
        return self.colours

    def set_colour(self, index, rgb):
        if not 0 <= index < 4:
            raise IndexError(f"palette colour index out of range: {index}")
        self.colours[index] = as_triple(rgb)

    def randomize(self, rng=random):
        return self.set_base_color(random_base_color(rng))

    def snapshot(self):
        return {
            "rule": self.rule.value,
            "base": {
                "rgb": list(self.base_color),
                "hex": rgb_to_hex(self.base_color),
                "hsv": list(self.previous_hsv),
            },
            "colors": [
                {"rgb": list(c), "hex": rgb_to_hex(c)} for c in self.colours
            ],
        }

    def __repr__(self):
        return f"PaletteSession(rule={self.rule.value}, base={rgb_to_hex(self.base_color)})"
