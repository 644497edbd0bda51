"""Wheel configuration: JSON files and the built-in presets.

A config file looks like::

    {
      "layer_gap": 0.1,
      "wheels": [
        {"variant": "stripe", "primary": [0.5, 0.5, 0.5], "secondary": "#000000",
         "ratio": 0.5, "divisions": 4, "speed": 120, "jitter": 30},
        {"variant": "pie_chart", "primary": "#ff0000", "ratio": 0.25,
         "min_speed": 50, "max_speed": 200}
      ]
    }

Missing keys fall back to ``WHEEL_DEFAULTS``. A wheel may give either
``speed``/``jitter`` or ``min_speed``/``max_speed``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

from wheelstack.engine import DEFAULT_LAYER_GAP
from wheelstack.errors import ConfigError
from wheelstack.palette import BLACK, BLUE, GRAY, GREEN, RED, WHITE, hue_color, parse_color
from wheelstack.tables import WheelVariant
from wheelstack.wheel import WheelSpec

WHEEL_DEFAULTS: Dict[str, Any] = {
    "variant": "stripe",
    "primary": [1.0, 1.0, 1.0, 1.0],
    "secondary": [0.0, 0.0, 0.0, 1.0],
    "ratio": 0.5,
    "divisions": 1,
    "speed": 100.0,
    "jitter": 0.0,
}


class WheelConfig:
    def __init__(self, wheels: List[WheelSpec], layer_gap: float = DEFAULT_LAYER_GAP):
        self.wheels = list(wheels)
        self.layer_gap = float(layer_gap)

    def __len__(self):
        return len(self.wheels)

    def __repr__(self):
        return f"WheelConfig({len(self.wheels)} wheels, layer_gap={self.layer_gap})"


def _number(entry: dict, key: str, idx: int) -> float:
    try:
        return float(entry[key])
    except (TypeError, ValueError):
        raise ConfigError(f"wheels[{idx}].{key} must be a number, got {entry[key]!r}") from None


def spec_from_dict(entry: dict, idx: int = 0) -> WheelSpec:
    if not isinstance(entry, dict):
        raise ConfigError(f"wheels[{idx}] must be an object, got {type(entry).__name__}")
    data = dict(WHEEL_DEFAULTS)
    data.update(entry)
    try:
        variant = WheelVariant.parse(data["variant"])
    except ValueError:
        names = ", ".join(v.value for v in WheelVariant)
        raise ConfigError(f"wheels[{idx}].variant {data['variant']!r} is not one of: {names}") from None

    kwargs = dict(
        variant=variant,
        primary=parse_color(data["primary"]),
        secondary=parse_color(data["secondary"]),
        ratio=_number(data, "ratio", idx),
        division_count=int(_number(data, "divisions", idx)),
    )
    if "min_speed" in entry or "max_speed" in entry:
        lo = _number(data, "min_speed", idx) if "min_speed" in entry else _number(data, "max_speed", idx)
        hi = _number(data, "max_speed", idx) if "max_speed" in entry else lo
        return WheelSpec.speed_range(lo, hi, **kwargs)
    return WheelSpec(speed=_number(data, "speed", idx), jitter=_number(data, "jitter", idx), **kwargs)


def config_from_dict(payload: Any) -> WheelConfig:
    if isinstance(payload, list):
        payload = {"wheels": payload}
    if not isinstance(payload, dict):
        raise ConfigError("Config must be an object with a 'wheels' list")
    wheels = payload.get("wheels", [])
    if not isinstance(wheels, list):
        raise ConfigError("'wheels' must be a list")
    gap = payload.get("layer_gap", DEFAULT_LAYER_GAP)
    try:
        gap = float(gap)
    except (TypeError, ValueError):
        raise ConfigError(f"layer_gap must be a number, got {gap!r}") from None
    return WheelConfig([spec_from_dict(w, i) for i, w in enumerate(wheels)], gap)


def load_wheel_specs(path) -> WheelConfig:
    path = Path(path)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigError(f"{path}: invalid JSON ({exc})") from exc
    return config_from_dict(payload)


# ---------------- Presets ----------------
def classic_specs(wheel_count=5, min_speed=50.0, max_speed=200.0):
    """Gray/black stripes, wheel ``i`` cut into ``i + 2`` bands."""
    return [WheelSpec.speed_range(min_speed, max_speed, variant=WheelVariant.STRIPE,
                                  primary=GRAY, secondary=BLACK, division_count=i + 2)
            for i in range(max(0, int(wheel_count)))]


def rgb_specs():
    """Red, green and blue pies; white only where all three overlap."""
    return [
        WheelSpec(WheelVariant.PIE_CHART, RED, BLACK, ratio=0.5, speed=60.0, jitter=20.0),
        WheelSpec(WheelVariant.PIE_CHART, GREEN, BLACK, ratio=0.5, speed=-90.0, jitter=20.0),
        WheelSpec(WheelVariant.PIE_CHART, BLUE, BLACK, ratio=0.5, speed=130.0, jitter=20.0),
    ]


def gradient_specs(wheel_count=4):
    return [WheelSpec(WheelVariant.GRADIENT_STRIPE, hue_color(0.18 * i), BLACK,
                      division_count=i + 1, speed=40.0 + 35.0 * i, jitter=15.0)
            for i in range(wheel_count)]


def random_specs(wheel_count=5):
    return [WheelSpec(WheelVariant.RANDOM, WHITE, BLACK, speed=120.0, jitter=80.0)
            for _ in range(wheel_count)]


PRESETS = {
    "classic": classic_specs,
    "rgb": rgb_specs,
    "gradient": gradient_specs,
    "random": random_specs,
}


def preset_config(name: str, layer_gap: float = DEFAULT_LAYER_GAP) -> WheelConfig:
    try:
        factory = PRESETS[name]
    except KeyError:
        raise ConfigError(f"Unknown preset {name!r}; choose from {sorted(PRESETS)}") from None
    return WheelConfig(factory(), layer_gap)
