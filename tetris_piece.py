"""Piece catalog, pose value, kick table"""
from dataclasses import dataclass
from typing import Dict, List, Tuple

COLS, ROWS = 10, 20
SPAWN_X, SPAWN_Y = 3, 0

Offset = Tuple[int, int]

# (x, y) offsets inside a 4x4 box, one tuple per rotation state 0..3
ROTATIONS: Dict[str, Tuple[Tuple[Offset, ...], ...]] = {
    "I": (((0,1),(1,1),(2,1),(3,1)),
          ((2,0),(2,1),(2,2),(2,3)),
          ((0,2),(1,2),(2,2),(3,2)),
          ((1,0),(1,1),(1,2),(1,3))),
    "O": (((1,0),(2,0),(1,1),(2,1)),) * 4,
    "T": (((1,0),(0,1),(1,1),(2,1)),
          ((1,0),(1,1),(2,1),(1,2)),
          ((0,1),(1,1),(2,1),(1,2)),
          ((1,0),(0,1),(1,1),(1,2))),
    "S": (((1,0),(2,0),(0,1),(1,1)),
          ((1,0),(1,1),(2,1),(2,2)),
          ((1,1),(2,1),(0,2),(1,2)),
          ((0,0),(0,1),(1,1),(1,2))),
    "Z": (((0,0),(1,0),(1,1),(2,1)),
          ((2,0),(1,1),(2,1),(1,2)),
          ((0,1),(1,1),(1,2),(2,2)),
          ((1,0),(0,1),(1,1),(0,2))),
    "J": (((0,0),(0,1),(1,1),(2,1)),
          ((1,0),(2,0),(1,1),(1,2)),
          ((0,1),(1,1),(2,1),(2,2)),
          ((1,0),(1,1),(0,2),(1,2))),
    "L": (((2,0),(0,1),(1,1),(2,1)),
          ((1,0),(1,1),(1,2),(2,2)),
          ((0,1),(1,1),(2,1),(0,2)),
          ((0,0),(1,0),(1,1),(1,2))),
}

COLOR_TAGS: Dict[str, str] = {
    "I": "cyan",
    "O": "yellow",
    "T": "purple",
    "S": "green",
    "Z": "red",
    "J": "blue",
    "L": "orange",
}

# Tried in order at the current y; no vertical kicks.
KICKS: Tuple[Offset, ...] = ((0,0), (-1,0), (1,0), (-2,0), (2,0))


def offsets(kind: str, rotation: int) -> Tuple[Offset, ...]:
    return ROTATIONS[kind][rotation % 4]


@dataclass(frozen=True)
class Piece:
    kind: str
    rotation: int
    x: int
    y: int

    @staticmethod
    def spawn(kind: str) -> "Piece":
        return Piece(kind, 0, SPAWN_X, SPAWN_Y)

    @property
    def color(self) -> str:
        return COLOR_TAGS[self.kind]

    def cells(self) -> List[Offset]:
        return [(self.x + dx, self.y + dy) for dx, dy in offsets(self.kind, self.rotation)]

    def shifted(self, dx: int, dy: int) -> "Piece":
        return Piece(self.kind, self.rotation, self.x + dx, self.y + dy)

    def turned(self, direction: int) -> "Piece":
        return Piece(self.kind, (self.rotation + direction + 4) % 4, self.x, self.y)
