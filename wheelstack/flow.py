"""Round flow: click to stop the wheels and see the score, click again to respin."""

import enum
import logging

logger = logging.getLogger(__name__)


class RoundState(enum.Enum):
    SPINNING = "spinning"
    SCORE_VIEW = "score_view"


class RoundFlow:
    def __init__(self, engine, scoring="top"):
        self.engine = engine
        self.scoring = scoring
        self.state = RoundState.SPINNING if engine.is_spinning else RoundState.SCORE_VIEW
        self.last_score = None
        self.rounds = 0

    @property
    def marker_visible(self):
        return self.state is RoundState.SPINNING

    def click(self):
        if self.state is RoundState.SPINNING:
            self.engine.stop()
            self.last_score = self.engine.score(self.scoring)
            self.rounds += 1
            self.state = RoundState.SCORE_VIEW
        else:
            self.last_score = None
            self.engine.spin()
            self.state = RoundState.SPINNING
        logger.debug("Round %d -> %s", self.rounds, self.state.value)
        return self.state

    def score_text(self):
        if self.last_score is None:
            return ""
        return f"SCORE: {self.last_score:.0f}"
