import argparse
import logging
import random
import time

import pygame

from wheelstack.config import PRESETS, load_wheel_specs, preset_config
from wheelstack.engine import SCORING_MODES, LayeredWheelEngine
from wheelstack.flow import RoundFlow
from wheelstack.geometry import wedge_points
from wheelstack.logging_config import LEVEL_NAMES, setup_logging
from wheelstack.palette import to_rgb255

logger = logging.getLogger(__name__)

# ========================
# Drawing settings
# ========================
BG = (0, 0, 0)                 # additive blending needs a black base
MARKER_COLOR = (255, 220, 60)
TEXT_COLOR = (235, 235, 245)
HELP_COLOR = (150, 150, 165)
WHEEL_FILL = 0.42              # wheel radius as a fraction of min(width, height)


class WheelStackDesktop:
    """pygame front-end: additive wheels, a 12 o'clock marker and the score."""

    def __init__(self, engine, flow, width=800, height=800):
        pygame.init()
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption("Wheel Stack")
        self.clock = pygame.time.Clock()
        self.font_big = pygame.font.SysFont(None, 72)
        self.font_small = pygame.font.SysFont(None, 20)

        self.engine = engine
        self.flow = flow
        self.wheel_surfaces = []
        self.resize(width, height)

    def resize(self, width, height):
        self.width = max(320, width)
        self.height = max(320, height)
        self.cx = self.width * 0.5
        self.cy = self.height * 0.5
        self.radius = max(40, int(min(self.width, self.height) * WHEEL_FILL))
        self._build_wheel_surfaces()

    def _build_wheel_surfaces(self):
        # Paint each unrotated wheel once; frames only rotate the bitmap.
        size = self.radius * 2 + 2
        center = (size * 0.5, size * 0.5)
        self.wheel_surfaces = []
        for view in self.engine.render_views():
            surf = pygame.Surface((size, size))
            surf.fill(BG)
            for i, color in enumerate(view.table):
                pts = wedge_points(i, self.radius, center=center, flip_y=True)
                pygame.draw.polygon(surf, to_rgb255(color), pts)
            self.wheel_surfaces.append(surf)
        logger.debug("Built %d wheel surface(s) at radius %d", len(self.wheel_surfaces), self.radius)

    # --------- Drawing ---------
    def draw(self):
        self.screen.fill(BG)
        for view, surf in zip(self.engine.render_views(), self.wheel_surfaces):
            # pygame rotates counter-clockwise for positive angles, like the wheel frame
            rotated = pygame.transform.rotate(surf, view.angle % 360.0)
            rect = rotated.get_rect(center=(int(self.cx), int(self.cy)))
            self.screen.blit(rotated, rect, special_flags=pygame.BLEND_RGB_ADD)

        if self.flow.marker_visible:
            self._draw_marker()
        else:
            self._draw_score()
        self._draw_help()
        pygame.display.flip()

    def _draw_marker(self):
        tip_y = self.cy - self.radius - 4
        pts = [(self.cx, tip_y), (self.cx - 12, tip_y - 22), (self.cx + 12, tip_y - 22)]
        pygame.draw.polygon(self.screen, MARKER_COLOR, pts)

    def _draw_score(self):
        text = self.font_big.render(self.flow.score_text(), True, TEXT_COLOR)
        rect = text.get_rect()
        rect.midtop = (int(self.cx), 12)
        self.screen.blit(text, rect)

    def _draw_help(self):
        help_lines = [
            f"Click / Space: stop & score, again to respin  ({self.flow.scoring})",
            "Esc: quit",
        ]
        for i, line in enumerate(help_lines):
            text = self.font_small.render(line, True, HELP_COLOR)
            self.screen.blit(text, (12, self.height - 44 + i * 18))

    # --------- Event handling ---------
    def handle_event(self, event):
        if event.type == pygame.VIDEORESIZE:
            self.screen = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
            self.resize(event.w, event.h)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.flow.click()
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_SPACE:
                self.flow.click()
            elif event.key == pygame.K_ESCAPE:
                return False
        return True

    def run(self, duration=None):
        running = True
        start_time = time.time()
        while running:
            dt = self.clock.tick(60) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif not self.handle_event(event):
                    running = False
            self.engine.advance(dt)
            self.draw()
            if duration and (time.time() - start_time) >= duration:
                running = False
        pygame.quit()


def build_parser():
    parser = argparse.ArgumentParser(description="Stacked additive color wheels (pygame)")
    parser.add_argument('--width', type=int, default=800)
    parser.add_argument('--height', type=int, default=800)
    parser.add_argument('--duration', type=float, default=None,
                        help='Seconds to run before exiting (useful for headless testing).')
    parser.add_argument('--preset', default='classic', choices=sorted(PRESETS),
                        help='Built-in wheel set (default: classic)')
    parser.add_argument('--config', default=None,
                        help='JSON wheel config; overrides --preset')
    parser.add_argument('--scoring', default='top', choices=SCORING_MODES,
                        help='top: brightness under the marker; overlap: degrees that add up to white')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for patterns and speeds')
    parser.add_argument('--log-level', default='INFO',
                        choices=LEVEL_NAMES, type=str.upper)
    parser.add_argument('--log-file', default=None)
    return parser


def build_engine(args):
    config = load_wheel_specs(args.config) if args.config else preset_config(args.preset)
    logger.info("Loaded %r from %s", config, args.config or f"preset '{args.preset}'")
    return LayeredWheelEngine.from_config(config, rng=random.Random(args.seed))


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, log_file=args.log_file)

    engine = build_engine(args)
    flow = RoundFlow(engine, scoring=args.scoring)
    app = WheelStackDesktop(engine, flow, args.width, args.height)
    app.run(duration=args.duration)


if __name__ == '__main__':
    main()
