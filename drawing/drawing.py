import math

import pygame

from common.side import Side
from config.game_config import GameConfig
from court.court import Court
from game.match import AgentView, MatchSnapshot
from game.match_state import MatchStatus


class Renderer:
    """Plain-shape view of a MatchSnapshot: court, hoops, agents, ball and HUD."""

    def __init__(self, config: GameConfig):
        self.config = config
        self.visual = config.visual
        self.court = Court(config)
        pygame.font.init()
        self._font = pygame.font.Font(None, self.visual.FONT_SIZE)
        self._big_font = pygame.font.Font(None, self.visual.FONT_SIZE * 2)

    def draw(self, surface, snapshot: MatchSnapshot) -> None:
        surface.fill(self.visual.BACKGROUND_COLOR)
        self.draw_court(surface)
        self.draw_agent(surface, snapshot.player, self.visual.PLAYER_COLOR)
        self.draw_agent(surface, snapshot.opponent, self.visual.OPPONENT_COLOR)
        ball = snapshot.ball
        pygame.draw.circle(surface, self.visual.BALL_COLOR, (int(ball.x), int(ball.y)), int(ball.radius))
        self.draw_hud(surface, snapshot)

    def draw_court(self, surface) -> None:
        court = self.court
        floor = pygame.Rect(0, int(court.floor_y), court.width, court.height - int(court.floor_y))
        pygame.draw.rect(surface, self.visual.FLOOR_COLOR, floor)
        pygame.draw.line(surface, self.visual.LINE_COLOR, (0, int(court.floor_y)),
                         (court.width, int(court.floor_y)), 3)

        for hoop in court.hoops():
            # Three-point arc where it meets the court above the floor
            radius = court.three_point_radius
            arc_rect = pygame.Rect(int(hoop.x - radius), int(hoop.y - radius), int(radius * 2), int(radius * 2))
            start, end = (-math.pi / 2, 0) if hoop.orientation == "right" else (math.pi, 3 * math.pi / 2)
            pygame.draw.arc(surface, self.visual.LINE_COLOR, arc_rect, start, end, 1)

            backboard_x = hoop.x - hoop.rim_radius - 6 if hoop.orientation == "right" else hoop.x + hoop.rim_radius + 6
            pygame.draw.line(surface, self.visual.LINE_COLOR, (int(backboard_x), int(hoop.y - 60)),
                             (int(backboard_x), int(hoop.y + 10)), 5)
            pygame.draw.line(surface, self.visual.RIM_COLOR, (int(hoop.x - hoop.rim_radius), int(hoop.y)),
                             (int(hoop.x + hoop.rim_radius), int(hoop.y)), 4)

    def draw_agent(self, surface, agent: AgentView, color) -> None:
        width, height = self.config.agent.WIDTH, self.config.agent.HEIGHT
        body = pygame.Rect(int(agent.x - width / 2), int(agent.y - height / 2), int(width), int(height))
        pygame.draw.rect(surface, color, body, border_radius=10)
        head_y = int(agent.y - height / 2 - 10)
        pygame.draw.circle(surface, (255, 217, 182), (int(agent.x), head_y), 14)
        eye_dx = 5 if agent.facing_right else -5
        pygame.draw.circle(surface, (0, 0, 0), (int(agent.x + eye_dx), head_y - 3), 2)

        if agent.faking:
            self._blit_center(surface, self._font, "FAKE", (agent.x, agent.y - height / 2 - 36))
        if agent.dodge_cooldown > 0:
            self._blit_center(surface, self._font, f"DODGE:{agent.dodge_cooldown:.1f}",
                              (agent.x, agent.y + height / 2 + 18))

    def draw_hud(self, surface, snapshot: MatchSnapshot) -> None:
        display_str = (f"{snapshot.time_str}   {snapshot.scores[Side.PLAYER]} : "
                       f"{snapshot.scores[Side.OPPONENT]}")
        self._blit_center(surface, self._font, display_str, (self.court.width / 2, 20))

        if snapshot.status is MatchStatus.NOT_STARTED:
            self._blit_center(surface, self._big_font, "Press ENTER to start",
                              (self.court.width / 2, self.court.height / 2))
        elif snapshot.status is MatchStatus.ENDED and snapshot.outcome is not None:
            message = {"win": "YOU WIN", "lose": "YOU LOSE", "draw": "DRAW"}[snapshot.outcome.value]
            self._blit_center(surface, self._big_font, f"{message}  (R to restart)",
                              (self.court.width / 2, self.court.height / 2))

    def _blit_center(self, surface, font, text: str, center) -> None:
        text_surface = font.render(text, True, self.visual.TEXT_COLOR)
        text_rect = text_surface.get_rect(center=(int(center[0]), int(center[1])))
        surface.blit(text_surface, text_rect)
