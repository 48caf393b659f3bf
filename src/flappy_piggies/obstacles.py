"""
obstacles.py: Spawning, scrolling and retiring of pillars.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import List

from .data_models import GameConfig, Obstacle, Viewport

log = logging.getLogger(__name__)


@dataclass
class ObstacleManager:
    """
    Owns every active pillar. The list is kept in spawn order, which is
    also left-to-right on screen.
    """
    config: GameConfig = field(default_factory=GameConfig)
    rng: random.Random = field(default_factory=random.Random)
    obstacles: List[Obstacle] = field(default_factory=list)

    def gap_height(self, viewport: Viewport) -> float:
        return min(self.config.pillar_gap,
                   viewport.height * self.config.pillar_max_gap_ratio)

    def should_spawn(self, viewport: Viewport) -> bool:
        if not self.obstacles:
            return True
        return self.obstacles[-1].x < viewport.width - self.config.pillar_spacing

    def spawn(self, viewport: Viewport) -> Obstacle:
        """Adds a pillar at the right edge with a random, fully visible gap."""
        gap = self.gap_height(viewport)
        margin = min(self.config.pillar_margin, (viewport.height - gap) / 2)
        top = self.rng.uniform(margin, viewport.height - gap - margin)

        obstacle = Obstacle(
            x=float(viewport.width),
            top=top,
            bottom=top + gap,
            width=self.config.pillar_width,
        )
        self.obstacles.append(obstacle)
        log.debug("Spawned pillar at x=%.1f gap=[%.1f, %.1f]",
                  obstacle.x, obstacle.top, obstacle.bottom)
        return obstacle

    def spawn_if_due(self, viewport: Viewport) -> bool:
        if self.should_spawn(viewport):
            self.spawn(viewport)
            return True
        return False

    def advance(self):
        for obstacle in self.obstacles:
            obstacle.x -= self.config.pillar_speed
            obstacle.x = round(obstacle.x, self.config.precision)

    def mark_passed(self, player_x: float) -> int:
        """Flags pillars whose trailing edge is behind the player. Returns the new count."""
        newly_passed = 0
        for obstacle in self.obstacles:
            if not obstacle.passed and obstacle.right < player_x:
                obstacle.passed = True
                newly_passed += 1
        return newly_passed

    def retire(self) -> int:
        before = len(self.obstacles)
        self.obstacles = [o for o in self.obstacles if o.right >= 0]
        retired = before - len(self.obstacles)
        if retired:
            log.debug("Retired %d pillar(s), %d active", retired, len(self.obstacles))
        return retired

    def clear(self):
        self.obstacles = []
