"""
Unit tests for player kinematics, bounds and pillar collision.
"""

import pytest

from flappy_piggies.data_models import GameConfig, HitboxMargins, Obstacle, Player, Viewport
from flappy_piggies.physics_core import PhysicsCore


@pytest.fixture
def core():
    return PhysicsCore(GameConfig())


class TestGravity:
    def test_single_tick_from_rest(self, core):
        player = Player(y=300, velocity=0)
        core.step_player(player)
        assert player.velocity == pytest.approx(0.2)
        assert player.y == pytest.approx(300.2)

    def test_velocity_is_clamped(self):
        core = PhysicsCore(GameConfig(max_fall_velocity=3.0))
        y, v = 0.0, 2.9
        for _ in range(20):
            y, v = core.apply_gravity_and_movement(y, v)
            assert v <= 3.0
        assert v == 3.0

    def test_flap_returns_impulse(self, core):
        assert core.flap() == pytest.approx(-4.3)

    def test_results_are_rounded(self, core):
        y, v = core.apply_gravity_and_movement(1.0 / 3, 0.0)
        assert y == round(y, 4)
        assert v == round(v, 4)


class TestBounds:
    def test_inside_playfield(self, core):
        assert not core.out_of_bounds(Player(y=0), Viewport(960, 640))
        assert not core.out_of_bounds(Player(y=640 - 52), Viewport(960, 640))

    def test_above_ceiling(self, core):
        assert core.out_of_bounds(Player(y=-0.1), Viewport(960, 640))

    def test_below_floor(self, core):
        assert core.out_of_bounds(Player(y=640 - 52 + 0.1), Viewport(960, 640))

    def test_bounds_follow_viewport(self, core):
        player = Player(y=500)
        assert not core.out_of_bounds(player, Viewport(960, 640))
        assert core.out_of_bounds(player, Viewport(960, 480))


class TestCollision:
    # Default hitbox: x 128..164, y+6..y+46
    @pytest.fixture
    def pillar(self):
        return Obstacle(x=130, top=200, bottom=390, width=60)

    def test_box_inside_gap(self, core, pillar):
        assert not core.collides(Player(y=250), pillar)

    def test_box_touching_gap_edges(self, core, pillar):
        assert not core.collides(Player(y=194), pillar)
        assert not core.collides(Player(y=344), pillar)

    def test_overlapping_top_by_one(self, core, pillar):
        assert core.collides(Player(y=193), pillar)

    def test_overlapping_bottom_by_one(self, core, pillar):
        assert core.collides(Player(y=345), pillar)

    def test_no_horizontal_overlap(self, core):
        ahead = Obstacle(x=164, top=200, bottom=390, width=60)
        behind = Obstacle(x=68, top=200, bottom=390, width=60)
        assert not core.collides(Player(y=0), ahead)
        assert not core.collides(Player(y=0), behind)

    def test_margins_make_hitbox_forgiving(self, pillar):
        strict = PhysicsCore(GameConfig(hitbox=HitboxMargins(0, 0, 0, 0)))
        assert strict.collides(Player(y=199), pillar)
        assert not PhysicsCore(GameConfig()).collides(Player(y=199), pillar)

    def test_check_collision_combines_bounds_and_pillars(self, core, pillar):
        viewport = Viewport(960, 640)
        assert not core.check_collision(Player(y=250), [pillar], viewport)
        assert core.check_collision(Player(y=100), [pillar], viewport)
        assert core.check_collision(Player(y=-1), [], viewport)


def test_respawn_centres_player(core):
    player = Player(y=12, velocity=7.5)
    core.respawn(player, Viewport(800, 500))
    assert player.y == 250
    assert player.velocity == 0.0
