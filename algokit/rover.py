"""A rover on a grid driven by turn-and-move command strings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Orientation(Enum):
    """Compass headings, declared in clockwise order."""

    NORTH = "N"
    EAST = "E"
    SOUTH = "S"
    WEST = "W"

    def _turn(self, step: int) -> "Orientation":
        order = list(Orientation)
        return order[(order.index(self) + step) % len(order)]


_STEPS = {
    Orientation.NORTH: (0, 1),
    Orientation.SOUTH: (0, -1),
    Orientation.EAST: (1, 0),
    Orientation.WEST: (-1, 0),
}


@dataclass
class Rover:
    """A rover at grid position (x, y) facing ``orientation``."""

    x: int
    y: int
    orientation: Union[Orientation, str] = Orientation.NORTH

    def __post_init__(self) -> None:
        self.orientation = Orientation(self.orientation)

    def rotate_left(self) -> None:
        """Turn 90 degrees anticlockwise."""
        self.orientation = self.orientation._turn(-1)

    def rotate_right(self) -> None:
        """Turn 90 degrees clockwise."""
        self.orientation = self.orientation._turn(1)

    def move_forward(self) -> None:
        """Move one cell in the direction faced."""
        dx, dy = _STEPS[self.orientation]
        self.x += dx
        self.y += dy

    def process(self, message: str) -> None:
        """Run commands: L turns left, R turns right, anything else moves forward."""
        for command in message:
            if command == "L":
                self.rotate_left()
            elif command == "R":
                self.rotate_right()
            else:
                self.move_forward()

    def __str__(self) -> str:
        return f"{self.x} {self.y} {self.orientation.value}"