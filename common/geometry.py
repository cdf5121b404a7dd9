"""
2D Geometry Utilities

This module provides the small set of math helpers the basketball simulation
is built on. Everything here is a leaf: no game objects, no configuration.

**Key Operations**:
- Scalar clamping for positions, speeds and shot power
- Euclidean distance between two points
- Uniform random range drawn from an injected generator
- A minimal 2D point for start spots

**Usage**: Used by the ball, agents, interaction engine and opponent AI.
"""

import math
from dataclasses import dataclass


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into [low, high]."""
    return max(low, min(high, value))


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between (x1, y1) and (x2, y2)."""
    return math.hypot(x1 - x2, y1 - y2)


def random_range(rng, low: float, high: float) -> float:
    """
    Uniform sample in [low, high) using the generator's random() draw.

    Args:
        rng: Anything with a random() method returning [0, 1)
             (numpy Generator or a test stub)
    """
    return low + rng.random() * (high - low)


@dataclass
class Vector:
    """2D point on the court (start spots, ball drop spot)."""
    x: float
    y: float
