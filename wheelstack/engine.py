"""The layered wheel engine the front-end talks to.

One instance owns the ordered stack of wheels and a single spinning flag.
It is driven once per frame with :meth:`LayeredWheelEngine.advance` and read
with the two scorers and :meth:`LayeredWheelEngine.render_views`. Not thread
safe; callers serialize mutation against reads.
"""

import logging
import random
from typing import NamedTuple, Tuple

from wheelstack import scoring
from wheelstack.errors import ConfigError
from wheelstack.wheel import advance_layers, build_layers

logger = logging.getLogger(__name__)

DEFAULT_LAYER_GAP = 0.1
SCORING_MODES = ("top", "overlap")


class LayerView(NamedTuple):
    """What a renderer needs for one wheel, front to back by ``depth_index``."""
    table: Tuple
    angle: float
    depth_index: int
    z_offset: float


class LayeredWheelEngine:
    def __init__(self, specs=(), rng=None, layer_gap=DEFAULT_LAYER_GAP, spinning=True):
        self.rng = rng or random.Random()
        self.layer_gap = float(layer_gap)
        self._spinning = bool(spinning)
        self._layers = tuple(build_layers(list(specs), self.rng))
        if not self._layers:
            logger.info("No wheels configured; engine is empty")
        else:
            logger.info("Engine ready with %d wheel(s)", len(self._layers))

    @classmethod
    def from_config(cls, config, rng=None, spinning=True):
        return cls(config.wheels, rng=rng, layer_gap=config.layer_gap, spinning=spinning)

    # --------- State ---------
    @property
    def layers(self):
        return self._layers

    @property
    def is_spinning(self):
        return self._spinning

    def spin(self):
        if not self._spinning:
            logger.debug("Spin resumed")
        self._spinning = True

    def stop(self):
        if self._spinning:
            logger.debug("Stopped at %s", [round(l.wrapped_angle, 2) for l in self._layers])
        self._spinning = False

    def advance(self, dt):
        if dt < 0:
            logger.warning("Negative time step %.4f ignored", dt)
            dt = 0.0
        advance_layers(self._layers, dt, self._spinning)

    # --------- Scoring ---------
    def score_at_top_mark(self):
        return scoring.score_at_top_mark(self._layers)

    def score_full_overlap(self):
        return scoring.score_full_overlap(self._layers)

    def score(self, mode="top"):
        if mode == "top":
            value = self.score_at_top_mark()
        elif mode == "overlap":
            value = self.score_full_overlap()
        else:
            raise ConfigError(f"Unknown scoring mode {mode!r}; expected one of {SCORING_MODES}")
        logger.info("Score (%s): %s", mode, value)
        return value

    # --------- Rendering ---------
    def render_views(self):
        return [LayerView(layer.table, layer.angle, i, i * self.layer_gap)
                for i, layer in enumerate(self._layers)]
