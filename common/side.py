"""Handles for the two agents sharing the court."""

from enum import Enum


class Side(Enum):
    """
    Identifies one of the two agents.

    The ball and the match state refer to agents through a Side rather than
    holding the agent objects, so clearing a reference never touches the
    agent itself.
    """
    PLAYER = "player"
    OPPONENT = "opponent"

    @property
    def other(self) -> "Side":
        return Side.OPPONENT if self is Side.PLAYER else Side.PLAYER
