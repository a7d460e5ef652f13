"""
Shared pytest fixtures for gomoku_engine tests.

Boards are built from explicit stone lists so each test shows the exact
position it relies on.
"""

import os
import sys

import numpy as np
import pytest

ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from gomoku_engine.constants import BOARD_SIZE
from gomoku_engine.game_engine import create_empty_board


def make_board(black=(), white=()):
    """Board with the given (row, col) stones for black (1) and white (2)."""
    board = create_empty_board()
    for row, col in black:
        board[row, col] = 1
    for row, col in white:
        board[row, col] = 2
    return board


def make_draw_board():
    """
    Full board with no run longer than two on any axis.

    Colors alternate along each row and the pattern shifts every second
    row, so vertical and diagonal runs stop at two.
    """
    board = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            board[row, col] = 1 + (col + row // 2) % 2
    return board


class ScriptedRng:
    """Random source returning pre-set values, in order."""

    def __init__(self, randoms=(), indices=()):
        self._randoms = list(randoms)
        self._indices = list(indices)

    def random(self):
        return self._randoms.pop(0)

    def randrange(self, n):
        index = self._indices.pop(0)
        assert 0 <= index < n
        return index


@pytest.fixture
def empty_board():
    return create_empty_board()


@pytest.fixture
def draw_board():
    return make_draw_board()


@pytest.fixture
def scripted_rng():
    return ScriptedRng
