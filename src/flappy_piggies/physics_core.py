"""
physics_core.py: The deterministic kinematic functions and collision logic.
"""

from typing import Iterable, Optional

from .data_models import GameConfig, Obstacle, Player, Viewport


class PhysicsCore:
    """
    Player kinematics, playfield bounds and pillar collision.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()

    def apply_gravity_and_movement(self, y: float, velocity: float) -> tuple[float, float]:
        """
        Calculates new position and velocity after one tick.
        """
        velocity += self.config.gravity
        velocity = min(velocity, self.config.max_fall_velocity)
        y += velocity

        y = round(y, self.config.precision)
        velocity = round(velocity, self.config.precision)

        return y, velocity

    def step_player(self, player: Player):
        """Mutates the player by one tick of gravity."""
        player.y, player.velocity = self.apply_gravity_and_movement(
            player.y, player.velocity)

    def flap(self) -> float:
        """Returns the instantaneous velocity after a flap."""
        return self.config.flap_impulse

    def out_of_bounds(self, player: Player, viewport: Viewport) -> bool:
        """True once the player's box leaves [0, height - size] vertically."""
        return player.y < 0 or player.y > viewport.height - player.size

    def collides(self, player: Player, obstacle: Obstacle) -> bool:
        left, top, right, bottom = player.hitbox(self.config.hitbox)

        in_column = right > obstacle.x and left < obstacle.right
        if not in_column:
            return False

        return top < obstacle.top or bottom > obstacle.bottom

    def check_collision(self, player: Player, obstacles: Iterable[Obstacle],
                        viewport: Viewport) -> bool:
        """Checks for collisions with floor, ceiling, or pillars."""
        if self.out_of_bounds(player, viewport):
            return True

        return any(self.collides(player, obstacle) for obstacle in obstacles)

    def respawn(self, player: Player, viewport: Viewport):
        player.x = self.config.player_x
        player.size = self.config.player_size
        player.y = viewport.height / 2
        player.velocity = 0.0
