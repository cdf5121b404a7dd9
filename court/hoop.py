"""
Basketball Hoop and Made-Basket Detection

Each hoop is a rim centre on the hoop line plus a capture radius. A basket is
made when the ball's centre passes through the rim line moving downward
while horizontally inside the rim.

**Key Features**:
1. **Orientation**: A hoop on the left side of the court opens to the right
   and vice versa; the attacking side is the agent shooting at it
2. **Swept Crossing Test**: The crossing x is interpolated between the
   previous and current ball positions, so a fast ball that moves far in a
   single tick still registers when its path goes through the rim
3. **Three-Point Geometry**: Distance from arbitrary points to the hoop centre
"""

from dataclasses import dataclass

from common.geometry import distance
from common.side import Side


@dataclass(frozen=True)
class Hoop:
    """
    A rim at (x, y) shot at by `attacking_side`.

    **Usage**: Created by Court, queried by the interaction engine for
    scoring and shot classification.
    """
    x: float
    y: float
    rim_radius: float
    orientation: str
    attacking_side: Side

    def __post_init__(self):
        if self.orientation not in ("left", "right"):
            raise ValueError("Orientation must be 'left' or 'right'")

    def distance_from(self, x: float, y: float) -> float:
        return distance(x, y, self.x, self.y)

    def is_crossed_downward(self, prev_x: float, prev_y: float, x: float, y: float) -> bool:
        """
        Check whether the segment prev -> current passes down through the rim.

        The ball must start above the rim line (prev_y < hoop y) and end on or
        below it (y >= hoop y); the x coordinate where the segment meets the
        rim line must lie within the rim radius.
        """
        if not (prev_y < self.y <= y):
            return False
        t = (self.y - prev_y) / (y - prev_y)
        crossing_x = prev_x + (x - prev_x) * t
        return abs(crossing_x - self.x) < self.rim_radius
