"""Move legality and the push algorithm."""

from __future__ import annotations

from dataclasses import dataclass

from backend.models.board import Direction, Grid, Player, Tile


@dataclass(frozen=True)
class MoveEffect:
    """Result of a committed move."""

    grid: Grid
    player: Player
    pending_targets_delta: int = 0
    pushed: bool = False


class MoveResolver:
    """Stateless move rules — all methods are static."""

    @staticmethod
    def can_move(grid: Grid, player: Player, direction: Direction) -> bool:
        """Return True if the player may step one cell in *direction*.

        A box in the way can be pushed only into an in-bounds cell that
        holds neither a wall nor another box.
        """
        dx, dy = direction.delta
        nx, ny = player.x + dx, player.y + dy

        if not grid.in_bounds(nx, ny) or grid.is_wall(nx, ny):
            return False

        if grid.is_box(nx, ny):
            bx, by = nx + dx, ny + dy
            if not grid.in_bounds(bx, by):
                return False
            if grid.is_wall(bx, by) or grid.is_box(bx, by):
                return False

        return True

    @staticmethod
    def apply_move(grid: Grid, player: Player, direction: Direction) -> MoveEffect:
        """Step the player (pushing a box if present) and mutate *grid* in place.

        The caller must have checked ``can_move`` first; nothing is
        re-validated here.
        """
        dx, dy = direction.delta
        nx, ny = player.x + dx, player.y + dy
        delta = 0
        pushed = False

        if grid.is_box(nx, ny):
            bx, by = nx + dx, ny + dy
            source = grid.tile_at(nx, ny)
            dest = grid.tile_at(bx, by)

            if source is Tile.BOX_ON_TARGET:
                delta += 1
            grid.set_tile(nx, ny, source.without_box())

            if dest is Tile.TARGET:
                delta -= 1
            grid.set_tile(bx, by, dest.with_box())
            pushed = True

        moved = Player(x=nx, y=ny, direction=direction)
        return MoveEffect(
            grid=grid, player=moved, pending_targets_delta=delta, pushed=pushed
        )
