import random

from flask import Flask, jsonify, request

from color_harmony import (
    DEFAULT_HSV,
    HarmonyRule,
    as_rule,
    as_triple,
    get_harmony,
    hex_to_rgb,
    random_base_color,
    recalculate,
    rgb_to_hex,
)

app = Flask(__name__)
app.config["DEFAULT_RULE"] = HarmonyRule.ANALOGOUS.value
# e.g. HARMONY_DEFAULT_RULE=Triad
app.config.from_prefixed_env("HARMONY")
app.json.sort_keys = False

############################################
# ============== HELPERS ===================
############################################

def parse_color(value):
    if value is None:
        raise ValueError("No color provided")
    if isinstance(value, str):
        return hex_to_rgb(value)
    return as_triple(value)

def color_json(rgb):
    return {"rgb": list(rgb), "hex": rgb_to_hex(rgb)}

def palette_json(palette, rule):
    base = color_json(palette.base_rgb)
    base["hsv"] = list(palette.base_hsv)
    return {
        "rule": rule.value,
        "base": base,
        "colors": [color_json(c) for c in palette.colours]
    }

############################################
# ============== HARMONY API ===============
############################################

@app.route("/harmony/rules")
def harmony_rules():
    return jsonify({
        "rules": [r.value for r in HarmonyRule],
        "default": app.config["DEFAULT_RULE"]
    })

@app.route("/harmony/random")
def harmony_random():
    # New palettes start from a random bright colour and the default rule
    seed = request.args.get("seed", type=int)
    rng = random.Random(seed) if seed is not None else random
    try:
        rule = as_rule(app.config["DEFAULT_RULE"])
    except ValueError as e:
        app.logger.error("Bad DEFAULT_RULE config: %s", e)
        return jsonify({"error": str(e)}), 500

    palette = recalculate(random_base_color(rng), DEFAULT_HSV, rule)
    return jsonify(palette_json(palette, rule))

@app.route("/get_color_harmony", methods=["POST"])
def api_color_harmony():
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return jsonify({"error": "Request body must be a JSON object"}), 400

    try:
        base = parse_color(data.get("color"))
        previous_hsv = as_triple(data.get("previous_hsv") or DEFAULT_HSV, "previous_hsv")
        rule = data.get("rule")
        if rule is not None:
            rule = as_rule(rule)
        colors = data.get("colors")
        if colors is not None:
            if not isinstance(colors, (list, tuple)):
                raise ValueError("colors must be a list")
            colors = [parse_color(c) for c in colors]
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    try:
        if rule is None:
            return jsonify(get_harmony(base, previous_hsv=previous_hsv))
        palette = recalculate(base, previous_hsv, rule, colors)
    except ValueError as e:
        return jsonify({"error": str(e)}), 400
    except Exception as e:
        app.logger.exception("Harmony failed for %r", data.get("color"))
        return jsonify({"error": f"Harmony failed: {e}"}), 500

    return jsonify(palette_json(palette, rule))

############################################
# ============== MAIN RUN ==================
############################################
if __name__ == "__main__":
    app.run(host="127.0.0.1", port=5000, debug=True)
