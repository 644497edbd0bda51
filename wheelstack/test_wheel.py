import pathlib
import random
import sys

import pytest

sys.path.append(str(pathlib.Path(__file__).resolve().parents[1]))

from wheelstack.errors import ContractViolation
from wheelstack.palette import BLACK, WHITE
from wheelstack.tables import WheelVariant, pie_chart_table
from wheelstack.wheel import WheelLayer, WheelSpec, advance_layers, build_layers, wrap_degrees


def test_wrap_degrees():
    assert wrap_degrees(0.0) == 0.0
    assert wrap_degrees(360.0) == 0.0
    assert wrap_degrees(720.5) == pytest.approx(0.5)
    assert wrap_degrees(-90.0) == 270.0
    assert wrap_degrees(-1e-20) < 360.0
    assert 0.0 <= wrap_degrees(-123456.789) < 360.0


def test_many_small_steps_match_one_big_step():
    a = WheelLayer([WHITE] * 360, speed=137.3)
    b = WheelLayer([WHITE] * 360, speed=137.3)
    for _ in range(250):
        advance_layers([a], 0.004, True)
    advance_layers([b], 1.0, True)
    assert abs(a.angle - b.angle) < 1e-6
    assert abs(a.angle - 137.3) < 1e-6


def test_angle_is_not_wrapped_when_stored():
    layer = WheelLayer([WHITE] * 360, speed=200.0)
    advance_layers([layer], 5.0, True)
    assert layer.angle == pytest.approx(1000.0)
    assert layer.wrapped_angle == pytest.approx(280.0)


def test_stopped_layers_do_not_move():
    layers = [WheelLayer([WHITE] * 360, speed=s, angle=10.0) for s in (50.0, -80.0)]
    advance_layers(layers, 3.0, False)
    assert [l.angle for l in layers] == [10.0, 10.0]


def test_negative_speed_turns_backwards():
    layer = WheelLayer([WHITE] * 360, speed=-30.0)
    advance_layers([layer], 2.0, True)
    assert layer.angle == pytest.approx(-60.0)
    assert layer.wrapped_angle == pytest.approx(300.0)


def test_layer_rejects_short_table():
    with pytest.raises(ContractViolation):
        WheelLayer([WHITE] * 359, speed=1.0)


def test_color_at_follows_rotation():
    layer = WheelLayer(pie_chart_table(WHITE, BLACK, 0.25), speed=0.0)
    assert layer.color_at(45) == WHITE
    assert layer.color_at(135) == BLACK
    layer.angle = 90.0
    assert layer.color_at(135) == WHITE
    assert layer.color_at(45) == BLACK


def test_speed_drawn_inside_jitter_range():
    spec = WheelSpec(WheelVariant.STRIPE, WHITE, BLACK, division_count=3, speed=100.0, jitter=25.0)
    rng = random.Random(5)
    for _ in range(50):
        assert 75.0 <= spec.draw_speed(rng) <= 125.0


def test_speed_range_form():
    spec = WheelSpec.speed_range(200.0, 50.0, variant="pie_chart")
    assert spec.speed == 125.0
    assert spec.jitter == 75.0
    assert spec.variant is WheelVariant.PIE_CHART


def test_zero_jitter_is_exact():
    spec = WheelSpec(speed=42.0)
    assert WheelLayer.from_spec(spec, random.Random(0)).speed == 42.0


def test_build_layers_keeps_order_and_is_seeded():
    specs = [WheelSpec(WheelVariant.RANDOM, speed=100.0, jitter=50.0) for _ in range(3)]
    first = build_layers(specs, random.Random(11))
    second = build_layers(specs, random.Random(11))
    assert [l.table for l in first] == [l.table for l in second]
    assert [l.speed for l in first] == [l.speed for l in second]
    assert len({l.table for l in first}) == 3
