import json
import pathlib
import sys

import pytest

sys.path.append(str(pathlib.Path(__file__).resolve().parents[1]))

from wheelstack.config import (
    PRESETS,
    classic_specs,
    config_from_dict,
    load_wheel_specs,
    preset_config,
)
from wheelstack.errors import ConfigError
from wheelstack.palette import BLACK, GRAY, Color, parse_color
from wheelstack.tables import WheelVariant

REPO_ROOT = pathlib.Path(__file__).resolve().parents[1]


def test_load_full_file(tmp_path):
    path = tmp_path / "wheels.json"
    path.write_text(json.dumps({
        "layer_gap": 0.2,
        "wheels": [
            {"variant": "stripe", "primary": [0.5, 0.5, 0.5], "secondary": "#000000",
             "ratio": 0.25, "divisions": 6, "speed": 120, "jitter": 30},
            {"variant": "PieChart", "primary": "#ff000080", "ratio": 0.75,
             "min_speed": 50, "max_speed": 200},
        ],
    }))
    config = load_wheel_specs(path)
    assert len(config) == 2
    assert config.layer_gap == 0.2

    stripe, pie = config.wheels
    assert stripe.variant is WheelVariant.STRIPE
    assert stripe.primary == Color(0.5, 0.5, 0.5, 1.0)
    assert stripe.secondary == BLACK
    assert stripe.division_count == 6
    assert (stripe.speed, stripe.jitter) == (120.0, 30.0)

    assert pie.variant is WheelVariant.PIE_CHART
    assert pie.primary.r == 1.0 and pie.primary.a == pytest.approx(128 / 255)
    assert (pie.speed, pie.jitter) == (125.0, 75.0)


def test_defaults_fill_missing_keys():
    config = config_from_dict({"wheels": [{}]})
    spec = config.wheels[0]
    assert spec.variant is WheelVariant.STRIPE
    assert spec.division_count == 1
    assert spec.ratio == 0.5
    assert spec.speed == 100.0


def test_bare_list_and_empty_configs():
    assert len(config_from_dict([{"variant": "random"}])) == 1
    assert len(config_from_dict({"wheels": []})) == 0
    assert len(config_from_dict({})) == 0


@pytest.mark.parametrize("payload", [
    {"wheels": [{"variant": "spiral"}]},
    {"wheels": [{"speed": "fast"}]},
    {"wheels": [{"primary": [1, 2]}]},
    {"wheels": ["stripe"]},
    {"wheels": {"variant": "stripe"}},
    {"layer_gap": "far"},
    "wheels",
])
def test_bad_payloads(payload):
    with pytest.raises(ConfigError):
        config_from_dict(payload)


def test_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{wheels: ")
    with pytest.raises(ConfigError):
        load_wheel_specs(path)


def test_shipped_preset_file_loads():
    config = load_wheel_specs(REPO_ROOT / "presets" / "overlap.json")
    assert [w.variant for w in config.wheels] == [
        WheelVariant.PIE_CHART, WheelVariant.STRIPE, WheelVariant.GRADIENT_STRIPE,
    ]


def test_classic_specs():
    specs = classic_specs(4, 50.0, 200.0)
    assert [s.division_count for s in specs] == [2, 3, 4, 5]
    assert all(s.primary == GRAY and s.secondary == BLACK for s in specs)
    assert classic_specs(0) == []


@pytest.mark.parametrize("name", sorted(PRESETS))
def test_presets_build(name):
    assert len(preset_config(name)) > 0


def test_unknown_preset():
    with pytest.raises(ConfigError):
        preset_config("disco")


def test_parse_color_forms():
    assert parse_color("#ffffff") == Color(1.0, 1.0, 1.0, 1.0)
    assert parse_color([0, 0, 1]) == Color(0.0, 0.0, 1.0, 1.0)
    assert parse_color((0.1, 0.2, 0.3, 0.4)) == Color(0.1, 0.2, 0.3, 0.4)
    for bad in ("#fff", "#gggggg", 7, [1, "x", 0]):
        with pytest.raises(ConfigError):
            parse_color(bad)
