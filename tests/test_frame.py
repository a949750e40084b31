"""
Tests for render snapshots.
"""

from dataclasses import FrozenInstanceError

import numpy as np
import pytest

from termsnake.config import Config
from termsnake.frame import Frame, EMPTY, WALL, BODY, HEAD, FOOD, snapshot
from termsnake.game import advance


class TestSnapshot:
    """snapshot() copies the state a frontend needs."""

    def test_copies_state(self, make_state):
        state = make_state([(3, 1), (2, 1), (1, 1)], food=(6, 6))
        state.score = 200
        frame = snapshot(state)
        assert frame.snake == ((3, 1), (2, 1), (1, 1))
        assert frame.food == (6, 6)
        assert frame.score == 200
        assert (frame.width, frame.height) == (20, 20)
        assert frame.bordered is False

    def test_frame_does_not_follow_later_moves(self, make_state):
        state = make_state([(3, 1), (2, 1), (1, 1)])
        frame = snapshot(state)
        advance(state, 1)
        assert frame.snake == ((3, 1), (2, 1), (1, 1))
        assert frame.head == (3, 1)

    def test_frame_is_frozen(self, make_state):
        frame = snapshot(make_state([(3, 1)]))
        with pytest.raises(FrozenInstanceError):
            frame.score = 5


class TestGrid:
    """Frame.grid() board layout."""

    def test_cells_are_indexed_y_then_x(self):
        frame = Frame(snake=((3, 1), (2, 1)), food=(0, 4), score=0, tick=0, width=6, height=5)
        board = frame.grid()
        assert board.shape == (5, 6)
        assert board.dtype == np.int8
        assert board[1, 3] == HEAD
        assert board[1, 2] == BODY
        assert board[4, 0] == FOOD
        assert np.count_nonzero(board) == 3

    def test_border_ring_is_wall(self):
        frame = Frame(snake=((2, 2),), food=None, score=0, tick=0, width=5, height=5, bordered=True)
        board = frame.grid()
        assert (board[0, :] == WALL).all()
        assert (board[:, -1] == WALL).all()
        assert board[2, 2] == HEAD
        assert board[1, 1] == EMPTY

    def test_grid_from_bordered_state(self, make_state):
        state = make_state([(5, 5), (4, 5)], food=(9, 9), config=Config(width=12, height=12, bordered=True))
        board = snapshot(state).grid()
        assert board[5, 5] == HEAD
        assert board[9, 9] == FOOD
        assert board[0, 0] == WALL
