"""Brick kinds and what each does when the ball hits it."""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class Point:
    """A position in window coordinates."""

    x: int
    y: int


class BrickType(enum.IntEnum):
    """The kinds of brick."""

    BRK_NRM = 0
    BRK_BMB = 1
    BRK_RCK = 2
    BRK_PUD = 3
    BRK_HRD = 4
    BRK_DB = 5


class BallType(enum.Enum):
    """The kinds of ball."""

    NORMAL_BALL = 0
    FIRE_BALL = 1


class _Grid(Protocol):
    def delete_brick(self, point: Point) -> None: ...


class _Ball(Protocol):
    type: BallType


class _Game(Protocol):
    score: int
    grid: _Grid
    ball: _Ball

    def update_score(self, amount: int) -> None: ...

    def add_collectible(self, point: Point) -> None: ...


class Brick(abc.ABC):
    """A brick occupying a rectangle of the grid."""

    brick_type: BrickType
    image_name: str

    def __init__(self, upper_left: Point, width: int, height: int, game: _Game) -> None:
        self.upper_left = upper_left
        self.width = width
        self.height = height
        self.game = game

    def _delete_at(self, point: Point) -> None:
        self.game.grid.delete_brick(point)

    def _ball_is_fire(self) -> bool:
        return self.game.ball.type is BallType.FIRE_BALL

    @abc.abstractmethod
    def collision_action(self) -> None:
        """React to being hit by the ball."""


class NormalBrick(Brick):
    """Scores one point and disappears."""

    brick_type = BrickType.BRK_NRM
    image_name = "images/bricks/NormalBrick.jpg"

    def collision_action(self) -> None:
        self.game.update_score(1)
        self._delete_at(self.upper_left)


class BombBrick(Brick):
    """Scores five points and destroys itself and its neighbours.

    The neighbour directly to the right is left standing.
    """

    brick_type = BrickType.BRK_BMB
    image_name = "images/bricks/BombBrick.jpg"

    def collision_action(self) -> None:
        self.game.update_score(5)
        x, y, w, h = self.upper_left.x, self.upper_left.y, self.width, self.height
        for dx, dy in ((-w, 0), (0, h), (0, -h), (w, h), (-w, -h), (w, -h), (-w, h)):
            self._delete_at(Point(x + dx, y + dy))
        self._delete_at(self.upper_left)


class RockBrick(Brick):
    """Only a fire ball breaks it."""

    brick_type = BrickType.BRK_RCK
    image_name = "images/bricks/RockBrick.jpg"

    def collision_action(self) -> None:
        if self._ball_is_fire():
            self.game.update_score(5)
            self._delete_at(self.upper_left)
        else:
            self.game.update_score(1)


class PowerupDownBrick(Brick):
    """Scores four points and drops a collectible where it stood."""

    brick_type = BrickType.BRK_PUD
    image_name = "images/bricks/Powerup_downBrick.jpg"

    def collision_action(self) -> None:
        self.game.update_score(4)
        self.game.add_collectible(self.upper_left)
        self._delete_at(self.upper_left)


class HardBrick(Brick):
    """Takes three hits, or one from a fire ball."""

    brick_type = BrickType.BRK_HRD
    image_name = "images/bricks/HardBrick.jpg"

    def __init__(self, upper_left: Point, width: int, height: int, game: _Game) -> None:
        super().__init__(upper_left, width, height, game)
        self.strength = 3

    def collision_action(self) -> None:
        if self._ball_is_fire():
            self.game.update_score(self.strength)
            self._delete_at(self.upper_left)
            return
        self.strength -= 1
        self.game.update_score(1)
        if self.strength <= 0:
            self._delete_at(self.upper_left)


class DoubleBrick(Brick):
    """Doubles the score and disappears."""

    brick_type = BrickType.BRK_DB
    image_name = "images/bricks/doublebrick.jpeg"

    def collision_action(self) -> None:
        self.game.update_score(self.game.score)
        self._delete_at(self.upper_left)