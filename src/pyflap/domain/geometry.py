from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from pyflap.domain.ports import Renderer


@dataclass(frozen=True)
class BoundingBox:
    top: float
    bottom: float
    left: float
    right: float
    width: float
    height: float

    @classmethod
    def from_rect(cls, left: float, top: float, width: float, height: float) -> BoundingBox:
        return cls(
            top=top,
            bottom=top + height,
            left=left,
            right=left + width,
            width=width,
            height=height,
        )


@dataclass
class TrackedEntity:
    """
    A visual the game reasons about through its axis-aligned box.
    The box is a cache: whoever repositions the visual non-analytically must refresh it.
    """
    handle: str
    top: float = 0.0
    bottom: float = 0.0
    left: float = 0.0
    right: float = 0.0
    width: float = 0.0
    height: float = 0.0


E = TypeVar("E", bound=TrackedEntity)


def track_entity(handle: str, renderer: Renderer, factory: type[E] = TrackedEntity) -> E:
    entity = factory(handle=handle)
    refresh_bounding_box(entity, renderer)
    return entity


def refresh_bounding_box(entity: TrackedEntity, renderer: Renderer) -> None:
    box = renderer.get_bounding_box(entity.handle)
    entity.width = box.width
    entity.height = box.height
    entity.top = box.top
    entity.right = box.right
    entity.bottom = box.bottom
    entity.left = box.left
