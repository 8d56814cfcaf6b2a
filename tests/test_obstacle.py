"""Tests for scrolling and recycling the obstacle pair."""

import pytest

from fakes import FakeRenderer, ScriptedRandom
from pyflap.domain.actor import ActorState
from pyflap.domain.game_state import ACTOR, OBSTACLE, PLAYFIELD
from pyflap.domain.geometry import track_entity
from pyflap.domain.obstacle import ObstacleState, draw_gap, update_obstacle
from pyflap.domain.playfield import Playfield


@pytest.fixture
def renderer():
    return FakeRenderer(400.0, 600.0)


@pytest.fixture
def playfield(renderer):
    return track_entity(PLAYFIELD, renderer, Playfield)


@pytest.fixture
def obstacle(renderer):
    obstacle = track_entity(OBSTACLE, renderer, ObstacleState)
    obstacle.speed = 200.0
    obstacle.gap_height = 200.0
    return obstacle


@pytest.fixture
def actor():
    return ActorState(ACTOR, scored_current_obstacle=True)


class TestDrawGap:
    def test_middle_draw_on_600px_playfield(self, obstacle, playfield, renderer):
        draw_gap(obstacle, playfield, ScriptedRandom(0.5), renderer)

        assert obstacle.gap_top == pytest.approx(200.0)
        assert obstacle.gap_bottom == pytest.approx(400.0)
        assert renderer.bands[OBSTACLE] == (pytest.approx(200.0), pytest.approx(200.0))

    @pytest.mark.parametrize("draw", [0.0, 0.25, 0.5, 0.75, 0.999999])
    def test_gap_stays_inside_playfield(self, obstacle, playfield, renderer, draw):
        draw_gap(obstacle, playfield, ScriptedRandom(draw), renderer)

        assert obstacle.gap_bottom - obstacle.gap_top == pytest.approx(obstacle.gap_height)
        assert 0.0 <= obstacle.gap_top <= playfield.height - obstacle.gap_height

    def test_oversized_gap_is_still_inside(self, obstacle, playfield, renderer):
        obstacle.gap_height = 700.0

        draw_gap(obstacle, playfield, ScriptedRandom(0.9), renderer)

        assert obstacle.gap_top >= playfield.top
        assert renderer.bands[OBSTACLE][0] >= 0.0
        assert renderer.bands[OBSTACLE][1] >= 0.0


class TestUpdateObstacle:
    def test_moves_left_by_speed_times_dt(self, obstacle, actor, playfield, renderer):
        recycled = update_obstacle(obstacle, actor, playfield, 0.125, ScriptedRandom(), renderer)

        assert recycled is False
        assert obstacle.left == 375.0
        assert obstacle.right == 435.0
        assert actor.scored_current_obstacle is True
        assert renderer.transforms[-1] == (OBSTACLE, -25.0, 0.0)

    def test_recycles_when_leaving_playfield(self, obstacle, actor, playfield, renderer):
        obstacle.left, obstacle.right = -40.0, 20.0

        recycled = update_obstacle(obstacle, actor, playfield, 0.125, ScriptedRandom(0.5), renderer)

        assert recycled is True
        assert obstacle.left == playfield.right
        assert obstacle.right == playfield.right + obstacle.width
        assert actor.scored_current_obstacle is False
        assert obstacle.gap_top == pytest.approx(200.0)
        assert renderer.transforms[-1] == (OBSTACLE, 0.0, 0.0)

    def test_right_edge_exactly_on_left_wall_recycles(self, obstacle, actor, playfield, renderer):
        obstacle.left, obstacle.right = -35.0, 25.0

        assert update_obstacle(obstacle, actor, playfield, 0.125, ScriptedRandom(), renderer) is True

    def test_recycled_gap_is_redrawn_each_cycle(self, obstacle, actor, playfield, renderer):
        rng = ScriptedRandom(0.0, 1.0 - 1e-9)
        obstacle.left, obstacle.right = -60.0, 0.0
        update_obstacle(obstacle, actor, playfield, 0.1, rng, renderer)
        first = obstacle.gap_top

        obstacle.left, obstacle.right = -60.0, 0.0
        update_obstacle(obstacle, actor, playfield, 0.1, rng, renderer)

        assert first == pytest.approx(50.0)
        assert obstacle.gap_top == pytest.approx(350.0)
