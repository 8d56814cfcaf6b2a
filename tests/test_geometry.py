"""Tests for bounding box tracking."""

from fakes import FakeRenderer
from pyflap.domain.game_state import ACTOR, OBSTACLE, PLAYFIELD
from pyflap.domain.geometry import BoundingBox, TrackedEntity, refresh_bounding_box, track_entity
from pyflap.domain.obstacle import ObstacleState


class TestBoundingBox:
    def test_from_rect_fills_edges(self):
        box = BoundingBox.from_rect(10.0, 20.0, 30.0, 40.0)
        assert (box.left, box.top, box.right, box.bottom) == (10.0, 20.0, 40.0, 60.0)
        assert (box.width, box.height) == (30.0, 40.0)


class TestTracking:
    def test_track_entity_captures_current_box(self):
        renderer = FakeRenderer(400, 600, top=5.0, left=7.0)
        playfield = track_entity(PLAYFIELD, renderer)

        assert isinstance(playfield, TrackedEntity)
        assert (playfield.top, playfield.left) == (5.0, 7.0)
        assert (playfield.bottom, playfield.right) == (605.0, 407.0)

    def test_track_entity_builds_requested_type(self):
        obstacle = track_entity(OBSTACLE, FakeRenderer(), ObstacleState)

        assert isinstance(obstacle, ObstacleState)
        assert obstacle.left == 400.0
        assert obstacle.height == 600.0

    def test_box_is_stale_until_refreshed(self):
        """The tracker caches; moving the visual does nothing until refresh."""
        renderer = FakeRenderer()
        actor = track_entity(ACTOR, renderer)
        renderer.set_transform(ACTOR, 0.0, 100.0)

        assert actor.top == 0.0

        refresh_bounding_box(actor, renderer)
        assert actor.top == 100.0
        assert actor.bottom == 120.0
        assert actor.left == 80.0
        assert actor.right == 100.0
