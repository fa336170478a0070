"""The object world: sprites, the renderer interface and the frame loop."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from starvolley.geometry import Rect
from starvolley.keyboard import Keyboard


@dataclass(frozen=True)
class Sprite:
    """An image file, optionally cut into a grid of equally sized frames."""

    path: str
    columns: int = 1
    rows: int = 1

    @property
    def frame_count(self) -> int:
        return self.columns * self.rows


@runtime_checkable
class Renderer(Protocol):
    """Something that can draw sprites on the screen."""

    def draw_image(
        self, image: Sprite, rect: Rect, frame: int = 0, alpha: int = 255
    ) -> None:
        """Draw one frame of ``image`` stretched over ``rect`` with the given opacity."""
        ...


class GameObject(ABC):
    """An object living in a world; it registers itself on creation."""

    def __init__(self, world: World) -> None:
        self.world = world
        self.alive = True
        self.removed = False
        world.add(self)

    @property
    def dt(self) -> float:
        """Seconds elapsed since the previous frame."""
        return self.world.dt

    @abstractmethod
    def update(self) -> None:
        """Advance the object by one frame."""

    @abstractmethod
    def draw(self, renderer: Renderer) -> None:
        """Draw the object."""

    def on_removed(self) -> None:
        """Run once after the world has dropped this dead object."""
        self.removed = True


class World:
    """Holds game objects and runs the update, draw and cleanup cycle."""

    def __init__(self, keyboard: Keyboard | None = None) -> None:
        self.keyboard = keyboard if keyboard is not None else Keyboard()
        self.dt = 0.0
        self._objects: list[GameObject] = []
        self._pending: list[GameObject] = []

    @property
    def objects(self) -> tuple[GameObject, ...]:
        """The objects taking part in the frame loop."""
        return tuple(self._objects)

    @property
    def pending(self) -> tuple[GameObject, ...]:
        """Objects that join the loop at the start of the next step."""
        return tuple(self._pending)

    def add(self, obj: GameObject) -> None:
        """Queue an object; it joins the loop at the start of the next step."""
        self._pending.append(obj)

    def step(self, dt: float, renderer: Renderer | None = None) -> None:
        """Run one frame: admit new objects, update, draw and drop the dead."""
        self.dt = dt
        self._objects.extend(self._pending)
        self._pending.clear()

        for obj in self._objects:
            obj.update()
        if renderer is not None:
            for obj in self._objects:
                obj.draw(renderer)

        removed = [obj for obj in self._objects if not obj.alive]
        self._objects = [obj for obj in self._objects if obj.alive]
        for obj in removed:
            obj.on_removed()