"""Layered additive color wheels: pattern generation, rotation and scoring."""

from wheelstack.engine import LayeredWheelEngine, LayerView
from wheelstack.palette import Color
from wheelstack.tables import WheelVariant, generate_table
from wheelstack.wheel import WheelLayer, WheelSpec

__all__ = [
    "Color",
    "LayerView",
    "LayeredWheelEngine",
    "WheelLayer",
    "WheelSpec",
    "WheelVariant",
    "generate_table",
]

__version__ = "0.3.0"
