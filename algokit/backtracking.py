"""Backtracking searches: sudoku, n queens, rat in a maze, towers of Hanoi."""

from __future__ import annotations

from typing import Any, Iterator, Optional, Sequence

_SIZE = 9
_BOX = 3


def _normalise_board(board: Sequence[Sequence[Any]]) -> list[list[int]]:
    if len(board) != _SIZE or any(len(row) != _SIZE for row in board):
        raise ValueError("a sudoku board must be 9 rows of 9 cells")
    grid = [[int(cell) for cell in row] for row in board]
    if any(not 0 <= cell <= 9 for row in grid for cell in row):
        raise ValueError("sudoku cells must hold 0 (empty) or a digit from 1 to 9")
    return grid


def is_safe(board: Sequence[Sequence[int]], row: int, col: int, num: int) -> bool:
    """Tell whether ``num`` is absent from the row, column and box of a cell."""
    if num in board[row]:
        return False
    if any(line[col] == num for line in board):
        return False
    top = row - row % _BOX
    left = col - col % _BOX
    return all(
        board[r][c] != num
        for r in range(top, top + _BOX)
        for c in range(left, left + _BOX)
    )


def solve_sudoku(board: Sequence[Sequence[Any]]) -> Optional[list[list[int]]]:
    """Return a solved copy of a 9x9 board, or None when no solution exists.

    Empty cells hold 0 (or the character "0"); the input is left unchanged.
    """
    grid = _normalise_board(board)
    empties = [(r, c) for r in range(_SIZE) for c in range(_SIZE) if grid[r][c] == 0]

    def fill(position: int) -> bool:
        if position == len(empties):
            return True
        row, col = empties[position]
        for num in range(1, 10):
            if is_safe(grid, row, col, num):
                grid[row][col] = num
                if fill(position + 1):
                    return True
                grid[row][col] = 0
        return False

    return grid if fill(0) else None


def place_queens(n: int) -> Optional[list[list[int]]]:
    """Place ``n`` non-attacking queens, one per row.

    Returns the board with 1 where a queen stands, or None when impossible.
    """
    if n < 0:
        raise ValueError("board size must not be negative")
    board = [[0] * n for _ in range(n)]
    columns: set[int] = set()
    falling: set[int] = set()
    rising: set[int] = set()

    def place(row: int) -> bool:
        if row >= n:
            return True
        for col in range(n):
            if col in columns or row - col in falling or row + col in rising:
                continue
            board[row][col] = 1
            columns.add(col)
            falling.add(row - col)
            rising.add(row + col)
            if place(row + 1):
                return True
            board[row][col] = 0
            columns.discard(col)
            falling.discard(row - col)
            rising.discard(row + col)
        return False

    return board if place(0) else None


def rat_in_maze(maze: Sequence[Sequence[int]]) -> Optional[list[list[int]]]:
    """Find a path from the top-left to the bottom-right corner of a square maze.

    Open cells hold 1; the rat moves down before it tries right. Reaching the
    bottom-right corner ends the search whatever that cell holds. Returns the
    path as a matrix of 1s, or None when there is none.
    """
    n = len(maze)
    if any(len(row) != n for row in maze):
        raise ValueError("the maze must be square")
    path = [[0] * n for _ in range(n)]

    def walk(x: int, y: int) -> bool:
        if x == n - 1 and y == n - 1:
            path[x][y] = 1
            return True
        if x < n and y < n and maze[x][y] == 1:
            path[x][y] = 1
            if walk(x + 1, y) or walk(x, y + 1):
                return True
            path[x][y] = 0
        return False

    return path if walk(0, 0) else None


def tower_of_hanoi(
    n: int, source: str = "A", auxiliary: str = "B", target: str = "C"
) -> Iterator[tuple[int, str, str]]:
    """Yield the moves (disk, from peg, to peg) that carry ``n`` disks to ``target``."""
    if n < 0:
        raise ValueError("the number of disks must not be negative")
    if n == 0:
        return
    if n == 1:
        yield 1, source, target
        return
    yield from tower_of_hanoi(n - 1, source, target, auxiliary)
    yield n, source, target
    yield from tower_of_hanoi(n - 1, auxiliary, source, target)