"""
renderer.py: Draws a simulation snapshot with pygame primitives.
"""

import pygame

from .constants import BACKGROUND_SPEED, WINDOW_TITLE
from .data_models import GameState, Snapshot
from .input import ButtonLayout

SKY = (112, 197, 206)
HILLS = (94, 170, 96)
PILLAR = (192, 57, 43)
PILLAR_EDGE = (120, 30, 20)
PIGGY = (255, 160, 190)
PIGGY_SNOUT = (230, 110, 150)
WHITE = (255, 255, 255)
TITLE = (46, 204, 113)
OVERLAY = (0, 0, 0, 128)
PANEL = (0, 0, 0, 153)

BUTTON_COLORS = {
    "start": (76, 175, 80),
    "restart": (255, 152, 0),
    "home": (0, 150, 136),
    "music": (33, 150, 243),
    "sound": (255, 87, 34),
}


class Renderer:
    """Owns fonts and the scrolling background offset; everything else comes from the snapshot."""

    def __init__(self, screen: pygame.Surface):
        if not pygame.font.get_init():
            pygame.font.init()
        self.screen = screen
        self.bg_x = 0.0
        self.title_font = pygame.font.Font(None, 72)
        self.large_font = pygame.font.Font(None, 40)
        self.font = pygame.font.Font(None, 26)

    def draw(self, snap: Snapshot):
        self._draw_background(snap)

        if snap.state == GameState.HOME:
            self._draw_centered(self.title_font, WINDOW_TITLE, TITLE, snap.viewport.height / 3, snap)
        else:
            self._draw_pillars(snap)
            self._draw_player(snap)
            self._draw_score(snap)
            if snap.state == GameState.GAME_OVER:
                overlay = pygame.Surface(self.screen.get_size(), pygame.SRCALPHA)
                overlay.fill(OVERLAY)
                self.screen.blit(overlay, (0, 0))
                self._draw_centered(self.title_font, "Game Over", WHITE, snap.viewport.height / 3, snap)

        self._draw_buttons(snap)

    def _draw_background(self, snap: Snapshot):
        width, height = int(snap.viewport.width), int(snap.viewport.height)
        self.bg_x -= BACKGROUND_SPEED
        if self.bg_x <= -width:
            self.bg_x = 0.0

        self.screen.fill(SKY)
        for offset in (self.bg_x, self.bg_x + width):
            pygame.draw.ellipse(self.screen, HILLS,
                                (int(offset), height - height // 5, width, height // 2))

    def _draw_pillars(self, snap: Snapshot):
        height = int(snap.viewport.height)
        for pillar in snap.obstacles:
            x, w = int(pillar.x), int(pillar.width)
            top_rect = pygame.Rect(x, 0, w, int(pillar.top))
            bottom_rect = pygame.Rect(x, int(pillar.bottom), w, height - int(pillar.bottom))
            for rect in (top_rect, bottom_rect):
                pygame.draw.rect(self.screen, PILLAR, rect)
                pygame.draw.rect(self.screen, PILLAR_EDGE, rect, 3)

    def _draw_player(self, snap: Snapshot):
        player = snap.player
        radius = int(player.size / 2)
        center = (int(player.x + radius), int(player.y + radius))
        pygame.draw.circle(self.screen, PIGGY, center, radius)
        pygame.draw.ellipse(self.screen, PIGGY_SNOUT,
                            (center[0] + radius // 3, center[1] - radius // 4, radius // 2, radius // 2))

    def _draw_score(self, snap: Snapshot):
        panel = pygame.Surface((170, 50), pygame.SRCALPHA)
        panel.fill(PANEL)
        self.screen.blit(panel, (20, 20))
        text = self.large_font.render(f"Score: {snap.score}", True, WHITE)
        self.screen.blit(text, (35, 45 - text.get_height() // 2))

    def _draw_buttons(self, snap: Snapshot):
        labels = {
            "start": "START",
            "restart": "Restart",
            "home": "Home",
            "music": "Music: ON" if snap.audio.music_on else "Music: OFF",
            "sound": "Sound: ON" if snap.audio.sound_on else "Sound: OFF",
        }
        layout = ButtonLayout.for_state(snap.state, snap.viewport)
        for name, rect in layout.buttons.items():
            pygame.draw.rect(self.screen, BUTTON_COLORS[name], rect)
            text = self.font.render(labels[name], True, WHITE)
            self.screen.blit(text, text.get_rect(center=rect.center))

    def _draw_centered(self, font, message: str, color, y: float, snap: Snapshot):
        text = font.render(message, True, color)
        self.screen.blit(text, text.get_rect(center=(int(snap.viewport.width / 2), int(y))))
