"""
Game Engine - Gomoku rules
Numba @njit optimized scanning kernels wrapped by pure functions.

Boards are numpy int8 arrays (0 empty, 1 black, 2 white). No function here
mutates the board it is given: placements return a new array so earlier
snapshots stay valid.

Range and occupancy are caller preconditions. Passing an off-board position
is undefined behaviour (numpy may wrap a negative index or raise IndexError);
GomokuGame.make_move is the checked entry point.
"""

import numpy as np
from numba import njit

from .constants import (
    BOARD_SIZE, CENTER, EMPTY, BLACK, WHITE, WIN_LENGTH, FOUR_DIRECTIONS,
    AI_MEDIUM_HARD_SEARCH_RANGE,
    SCORE_FIVE, SCORE_OPEN_FOUR, SCORE_FOUR, SCORE_OPEN_THREE, SCORE_THREE,
    SCORE_TWO,
)
from .models import GameOverResult, Pattern, PatternType, PieceCount


# ---------------------------------------------------------------------------
# Kernels
# ---------------------------------------------------------------------------

@njit(cache=True)
def count_direction(board, row, col, dr, dc, player):
    """
    Counts player's stones after (row, col) going one way along (dr, dc).
    The reference cell itself is not counted.

    Returns:
        int: number of contiguous stones
    """
    board_size = board.shape[0]
    count = 0
    r, c = row + dr, col + dc
    while 0 <= r < board_size and 0 <= c < board_size and board[r, c] == player:
        count += 1
        r += dr
        c += dc
    return count


@njit(cache=True)
def check_line_length(board, row, col, dr, dc, player):
    """
    Counts line length through (row, col) in both senses of an axis.
    The reference cell counts as one stone.

    Returns:
        int: line length
    """
    return (1 + count_direction(board, row, col, dr, dc, player)
            + count_direction(board, row, col, -dr, -dc, player))


@njit(cache=True)
def scan_run(board, row, col, dr, dc, player):
    """
    Scans the run through (row, col) for pattern detection.

    Forward starts at the reference cell itself, backward at the cell
    before it. An end is open when the cell past it is on-board and empty.

    Returns:
        (forward, backward, open_ends)
    """
    board_size = board.shape[0]
    open_ends = 0

    forward = 0
    r, c = row, col
    while 0 <= r < board_size and 0 <= c < board_size and board[r, c] == player:
        forward += 1
        r += dr
        c += dc
    if 0 <= r < board_size and 0 <= c < board_size and board[r, c] == 0:
        open_ends += 1

    backward = 0
    r, c = row - dr, col - dc
    while 0 <= r < board_size and 0 <= c < board_size and board[r, c] == player:
        backward += 1
        r -= dr
        c -= dc
    if 0 <= r < board_size and 0 <= c < board_size and board[r, c] == 0:
        open_ends += 1

    return forward, backward, open_ends


@njit(cache=True)
def relevant_mask(board, distance):
    """
    Marks empty cells within Chebyshev distance of any stone.

    Returns:
        bool array (board_size, board_size)
    """
    board_size = board.shape[0]
    mask = np.zeros((board_size, board_size), dtype=np.bool_)

    for row in range(board_size):
        for col in range(board_size):
            if board[row, col] != 0:
                for dr in range(-distance, distance + 1):
                    for dc in range(-distance, distance + 1):
                        nr, nc = row + dr, col + dc
                        if (0 <= nr < board_size and 0 <= nc < board_size and
                                board[nr, nc] == 0):
                            mask[nr, nc] = True
    return mask


@njit(cache=True)
def count_stones(board, player):
    """
    Counts how many stones a player has on the board.

    Returns:
        int
    """
    return np.sum(board == player)


@njit(cache=True)
def has_empty_cell(board):
    return np.sum(board == 0) > 0


# ---------------------------------------------------------------------------
# Board
# ---------------------------------------------------------------------------

def create_empty_board():
    """Creates an empty 15x15 board."""
    return np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)


def as_board(board):
    """Converts a nested list (or any array-like) to an engine board."""
    return np.asarray(board, dtype=np.int8)


def opponent(player):
    return WHITE if player == BLACK else BLACK


def is_valid_position(row, col):
    """Checks if (row, col) is on the board."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def is_empty(board, position):
    row, col = position
    return board[row, col] == EMPTY


def place_stone(board, position, player):
    """
    Places a stone on a copy of the board.

    Args:
        board: current board (left untouched)
        position: (row, col), caller guarantees it is on-board and empty
        player: 1 or 2

    Returns:
        new board
    """
    row, col = position
    new_board = board.copy()
    new_board[row, col] = player
    return new_board


def is_board_full(board):
    """Checks if the board is full (draw)."""
    return not has_empty_cell(board)


def count_pieces(board):
    """
    Counts the stones of each player.

    Returns:
        PieceCount(black_count, white_count)
    """
    return PieceCount(int(count_stones(board, BLACK)), int(count_stones(board, WHITE)))


# ---------------------------------------------------------------------------
# Win and patterns
# ---------------------------------------------------------------------------

def check_win(board, position, player):
    """
    Checks if the stone at position completes five or more in a row.

    Axes are examined horizontal, vertical, diagonal \\, diagonal /; the
    first one holding a run of WIN_LENGTH or more wins.

    Returns:
        (is_win, winning_line): winning_line is the first WIN_LENGTH
        positions of the run counted from its backward end, or None
    """
    row, col = position
    for dr, dc in FOUR_DIRECTIONS:
        if check_line_length(board, row, col, dr, dc, player) >= WIN_LENGTH:
            backward = count_direction(board, row, col, -dr, -dc, player)
            start_r = row - backward * dr
            start_c = col - backward * dc
            line = [(start_r + k * dr, start_c + k * dc) for k in range(WIN_LENGTH)]
            return True, line

    return False, None


def _classify(consecutive, open_ends):
    if consecutive >= WIN_LENGTH:
        return PatternType.FIVE, SCORE_FIVE
    if consecutive == 4:
        if open_ends == 2:
            return PatternType.OPEN_FOUR, SCORE_OPEN_FOUR
        if open_ends == 1:
            return PatternType.FOUR, SCORE_FOUR
    elif consecutive == 3:
        if open_ends == 2:
            return PatternType.OPEN_THREE, SCORE_OPEN_THREE
        if open_ends == 1:
            return PatternType.THREE, SCORE_THREE
    elif consecutive == 2 and open_ends > 0:
        return PatternType.TWO, SCORE_TWO
    return None, 0


def detect_pattern(board, position, direction, player):
    """
    Classifies the run of player's stones through position along one axis.

    Args:
        board: game board
        position: (row, col) reference cell
        direction: (dr, dc) axis
        player: 1 or 2

    Returns:
        Pattern or None when the run matches no category
    """
    row, col = position
    dr, dc = direction
    forward, backward, open_ends = scan_run(board, row, col, dr, dc, player)

    pattern_type, score = _classify(forward + backward, open_ends)
    if pattern_type is None:
        return None

    positions = tuple(
        [(row - k * dr, col - k * dc) for k in range(backward, 0, -1)]
        + [(row + k * dr, col + k * dc) for k in range(forward)]
    )
    return Pattern(type=pattern_type, direction=(dr, dc), positions=positions, score=score)


def evaluate_position(board, position, player):
    """
    Patterns player would own at position if a stone were placed there.
    The board passed in is not modified.

    Returns:
        list of Pattern, in axis order
    """
    test_board = place_stone(board, position, player)

    patterns = []
    for direction in FOUR_DIRECTIONS:
        pattern = detect_pattern(test_board, position, direction, player)
        if pattern is not None:
            patterns.append(pattern)
    return patterns


def check_game_over(board, last_move=None):
    """
    Checks if the game is over after last_move.

    A win is checked before the full-board draw, so a move that fills the
    last cell and completes five is a win.

    Args:
        board: board after last_move was applied
        last_move: Move or None

    Returns:
        GameOverResult
    """
    if last_move is not None:
        is_win, winning_line = check_win(board, last_move.position, last_move.player)
        if is_win:
            return GameOverResult(
                is_over=True,
                winner=last_move.player,
                is_draw=False,
                winning_line=winning_line,
            )

    if is_board_full(board):
        return GameOverResult(is_over=True, winner=None, is_draw=True)

    return GameOverResult(is_over=False)


def get_relevant_positions(board, search_range=AI_MEDIUM_HARD_SEARCH_RANGE):
    """
    Returns empty positions near existing stones (AI candidate moves).

    Args:
        board: game board
        search_range: maximum Chebyshev distance from existing stones

    Returns:
        list of (row, col) in row-major order; [(7, 7)] on an empty board
    """
    if not board.any():
        return [(CENTER, CENTER)]

    rows, cols = np.nonzero(relevant_mask(board, search_range))
    return [(int(r), int(c)) for r, c in zip(rows, cols)]
