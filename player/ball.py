"""
Basketball Ball Entity

The ball is either held (glued to its holder's hand) or free-flying under
gravity with floor and side-wall bounces. It never owns the agents: holder,
last touch and dunk ownership are Side handles.

Velocities are in units per reference tick; update() rescales real dt
against the reference tick before integrating.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from common.side import Side
from config.game_config import GameConfig
from game.events import GameEventType


@dataclass
class DunkInfo:
    """Marks the ball as dunked by `owner` for the next `timer` seconds."""
    owner: Side
    timer: float


@dataclass(frozen=True)
class ShotOrigin:
    """Where the shooter stood when the ball left the hand."""
    side: Side
    feet: Tuple[float, float]
    y: float


class Ball:
    def __init__(self, x: float, y: float, config: GameConfig) -> None:
        self.config = config
        self.x = x
        self.y = y
        self.prev_x = x
        self.prev_y = y
        self.vx = 0.0
        self.vy = 0.0
        self.radius = config.physics.BALL_RADIUS
        self.holder: Optional[Side] = None
        self.scored = False
        self.last_touched_by: Optional[Side] = None
        self.dunk_info: Optional[DunkInfo] = None
        self.shot_origin: Optional[ShotOrigin] = None

    @property
    def is_free(self) -> bool:
        return self.holder is None

    def update(self, dt: float, holder_agent=None) -> List[GameEventType]:
        """
        Advance the ball by dt seconds.

        Args:
            dt: Elapsed seconds for this tick
            holder_agent: The Agent matching self.holder (None when free)

        Returns:
            Event types produced by contacts this tick
        """
        events = []
        physics = self.config.physics
        self._tick_dunk_tag(dt)
        self.prev_x, self.prev_y = self.x, self.y

        if self.holder is not None and holder_agent is not None:
            offset = physics.HAND_OFFSET_X if holder_agent.facing_right else -physics.HAND_OFFSET_X
            self.x = holder_agent.x + offset
            self.y = holder_agent.y - physics.HAND_OFFSET_Y
            self.prev_x, self.prev_y = self.x, self.y
            self.vx = self.vy = 0.0
            return events

        step = dt / physics.REFERENCE_DT
        self.vy += physics.GRAVITY * physics.BALL_GRAVITY_SCALE * step
        self.x += self.vx * step
        self.y += self.vy * step
        self.vx *= physics.BALL_AIR_DAMPING ** step

        court = self.config.court
        if self.y + self.radius > court.FLOOR_Y:
            self.y = court.FLOOR_Y - self.radius
            self.vy *= -physics.BALL_FLOOR_RESTITUTION
            self.vx *= physics.BALL_FLOOR_FRICTION
            if abs(self.vy) < physics.BALL_REST_THRESHOLD:
                self.vy = 0.0
            else:
                events.append(GameEventType.BALL_BOUNCED)

        if self.x - self.radius < 0:
            self.x = self.radius
            self.vx *= -physics.BALL_WALL_RESTITUTION
            events.append(GameEventType.BALL_OUT_OF_BOUNDS)
        elif self.x + self.radius > court.WIDTH:
            self.x = court.WIDTH - self.radius
            self.vx *= -physics.BALL_WALL_RESTITUTION
            events.append(GameEventType.BALL_OUT_OF_BOUNDS)

        return events

    def _tick_dunk_tag(self, dt: float) -> None:
        if self.dunk_info is None:
            return
        self.dunk_info.timer -= dt
        if self.dunk_info.timer <= 0:
            self.dunk_info = None
