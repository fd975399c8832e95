"""Board - fixed 7x5 layout, enemy road, and tower occupancy index."""
from __future__ import annotations

from typing import Iterator

from tick_defense.types import Position

ROWS = 7
COLUMNS = 5

# L-shaped road from the left edge, up and around, then down to the bottom.
PATH: tuple[Position, ...] = (
    Position(3, 0),
    Position(3, 1),
    Position(3, 2),
    Position(2, 2),
    Position(1, 2),
    Position(1, 3),
    Position(1, 4),
    Position(2, 4),
    Position(3, 4),
    Position(4, 4),
    Position(5, 4),
    Position(6, 4),
)


def manhattan(a: Position, b: Position) -> int:
    return abs(a.row - b.row) + abs(a.col - b.col)


class Board:
    def __init__(
        self,
        rows: int = ROWS,
        columns: int = COLUMNS,
        path: tuple[Position, ...] = PATH,
    ) -> None:
        self._rows = rows
        self._columns = columns
        self._path = path
        self._path_set = frozenset(path)
        self._cells: dict[Position, set[int]] = {}
        self._entities: dict[int, Position] = {}

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def path(self) -> tuple[Position, ...]:
        return self._path

    def in_bounds(self, pos: Position) -> bool:
        return 0 <= pos.row < self._rows and 0 <= pos.col < self._columns

    def cells(self) -> Iterator[Position]:
        for row in range(self._rows):
            for col in range(self._columns):
                yield Position(row, col)

    # -- Road --

    def is_path(self, pos: Position) -> bool:
        return pos in self._path_set

    def path_position(self, index: int) -> Position | None:
        """Road tile for a path index, or None before entry / after escape."""
        if 0 <= index < len(self._path):
            return self._path[index]
        return None

    # -- Tower occupancy --

    def _check_bounds(self, pos: Position) -> None:
        if not self.in_bounds(pos):
            raise ValueError(
                f"({pos.row}, {pos.col}) out of bounds for "
                f"{self._rows}x{self._columns} board"
            )

    def place(self, eid: int, pos: Position) -> None:
        self._check_bounds(pos)
        self.remove(eid)
        self._entities[eid] = pos
        self._cells.setdefault(pos, set()).add(eid)

    def remove(self, eid: int) -> None:
        pos = self._entities.pop(eid, None)
        if pos is not None:
            cell = self._cells.get(pos)
            if cell is not None:
                cell.discard(eid)
                if not cell:
                    del self._cells[pos]

    def at(self, pos: Position) -> frozenset[int]:
        return frozenset(self._cells.get(pos, ()))

    def is_occupied(self, pos: Position) -> bool:
        return pos in self._cells

    def can_place(self, pos: Position) -> bool:
        return self.in_bounds(pos) and not self.is_path(pos) and not self.is_occupied(pos)
