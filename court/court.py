"""
Basketball Court Layout

This module turns the court configuration into the fixed geometry the
simulation reads every tick: floor line, side bounds, the two hoops and the
canonical start spots for agents and ball.

**Court Layout** (default configuration):
- 960x540 units, floor line 70 units above the bottom edge
- Hoops 120 units in from each side edge, 200 units above the floor
- The player attacks the right hoop, the opponent the left hoop
- Agents start 180 units in from their own side edge, ball at centre court
"""

from typing import Dict

from common.geometry import Vector
from common.side import Side
from config.game_config import GameConfig
from court.hoop import Hoop


class Court:
    """
    Immutable court geometry built from a GameConfig.

    **Responsibilities**:
    1. **Hoops**: Left and right Hoop objects with their attacking sides
    2. **Bounds**: Floor line and horizontal limits for ball and agents
    3. **Start Spots**: Canonical agent and ball positions for match start
       and post-score resets
    """

    def __init__(self, config: GameConfig):
        court = config.court
        self.width = court.WIDTH
        self.height = court.HEIGHT
        self.floor_y = court.FLOOR_Y
        self.hoop_y = court.HOOP_Y
        self.three_point_radius = court.THREE_POINT_RADIUS
        self.side_margin = court.SIDE_MARGIN

        self.hoop_left = Hoop(x=court.HOOP_INSET, y=court.HOOP_Y, rim_radius=court.RIM_RADIUS,
                              orientation="right", attacking_side=Side.OPPONENT)
        self.hoop_right = Hoop(x=court.WIDTH - court.HOOP_INSET, y=court.HOOP_Y,
                               rim_radius=court.RIM_RADIUS, orientation="left",
                               attacking_side=Side.PLAYER)

        self._agent_height = config.agent.HEIGHT
        self._start_x: Dict[Side, float] = {
            Side.PLAYER: court.AGENT_START_INSET,
            Side.OPPONENT: court.WIDTH - court.AGENT_START_INSET,
        }
        self._ball_drop_height = court.BALL_DROP_HEIGHT

    def hoops(self):
        return (self.hoop_left, self.hoop_right)

    def target_hoop(self, side: Side) -> Hoop:
        """Hoop the given side shoots at."""
        return self.hoop_right if side is Side.PLAYER else self.hoop_left

    def start_position(self, side: Side) -> Vector:
        """Agent start spot, standing on the floor line."""
        return Vector(self._start_x[side], self.floor_y - self._agent_height / 2)

    def ball_start_position(self) -> Vector:
        return Vector(self.width / 2, self.floor_y - self._ball_drop_height)

    def get_court_bounds(self) -> dict:
        """
        Get the court boundaries.

        Returns:
            dict: 'left', 'right', 'floor' and 'hoop' coordinates
        """
        return {
            'left': 0,
            'right': self.width,
            'floor': self.floor_y,
            'hoop': self.hoop_y,
        }
