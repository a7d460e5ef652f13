"""
Gomoku game state - owns the authoritative board and the move history.
"""
import logging

from .ai_strategies import get_ai_move
from .constants import BLACK, WHITE, BOARD_SIZE, GAME_MODES
from .errors import ConfigurationError, GameOverError, InvalidMoveError
from .game_engine import (
    check_game_over, count_pieces, create_empty_board, is_empty,
    is_valid_position, opponent, place_stone,
)
from .models import Move

logger = logging.getLogger(__name__)

HUMAN_PLAYER = BLACK
AI_PLAYER = WHITE


class GomokuGame:
    """
    Single game of Gomoku, the only writer of its board.

    In 'pvc' mode black is the human and white the AI; in 'pvp' mode both
    sides are human. Every human move saves an undo snapshot; boards are
    never mutated in place so the snapshot is just the previous array.
    """

    def __init__(self, mode='pvc', difficulty='medium'):
        if mode not in GAME_MODES:
            raise ConfigurationError(f"unknown game mode {mode!r}", value=mode)
        self.board_size = BOARD_SIZE
        self.mode = mode
        self.difficulty = difficulty
        self.reset()

    def reset(self):
        """Resets the game, keeping mode and difficulty."""
        self.board = create_empty_board()
        self.current_player = BLACK
        self.status = 'playing'
        self.winner = None
        self.winning_line = None
        self.move_history = []
        self.last_move = None
        self.black_count = 0
        self.white_count = 0
        self._undo_state = None

    @property
    def ai_player(self):
        return AI_PLAYER if self.mode == 'pvc' else None

    def is_ai_turn(self):
        return self.status == 'playing' and self.current_player == self.ai_player

    def is_valid_move(self, row, col):
        """Checks if a move is valid."""
        if not is_valid_position(row, col):
            return False
        return is_empty(self.board, (row, col))

    def make_move(self, row, col):
        """
        Plays the current player's stone at (row, col).

        Raises:
            GameOverError: the game already ended
            InvalidMoveError: off the board or occupied

        Returns:
            GameOverResult for the move
        """
        if self.status != 'playing':
            raise GameOverError("game is over", status=self.status)
        if not is_valid_position(row, col):
            raise InvalidMoveError(row, col, "off the board")
        if not is_empty(self.board, (row, col)):
            raise InvalidMoveError(row, col, "cell is occupied")

        player = self.current_player
        if player != self.ai_player:
            self._undo_state = self._snapshot()

        move = Move((row, col), player)
        self.board = place_stone(self.board, move.position, player)
        self.move_history.append(move)
        self.last_move = move
        self.black_count, self.white_count = count_pieces(self.board)

        result = check_game_over(self.board, move)
        if result.is_over:
            self.status = 'draw' if result.is_draw else 'won'
            self.winner = result.winner
            self.winning_line = result.winning_line
            self._undo_state = None
            logger.info("Game over after %d moves: %s (winner=%s)",
                        len(self.move_history), self.status, self.winner)

        self.current_player = opponent(player)
        logger.debug("Player %d played (%d, %d)", player, row, col)
        return result

    def request_ai_move(self, rng=None):
        """Asks the AI for a move for the current player without playing it."""
        return get_ai_move(self.board, self.current_player, self.difficulty, rng)

    def play_ai_turn(self, rng=None):
        """
        Lets the AI play for the current player.

        Returns:
            (row, col) played, or None when the AI has no move
        """
        position = self.request_ai_move(rng)
        if position is None:
            logger.warning("AI found no move for player %d", self.current_player)
            return None
        self.make_move(*position)
        return position

    def can_undo(self):
        if self._undo_state is None or self.status != 'playing':
            return False
        if self.mode == 'pvc':
            return self.current_player == HUMAN_PLAYER
        return True

    def undo(self):
        """
        Takes back the last human move (and the AI reply in 'pvc' mode).

        Returns:
            True if the state changed
        """
        if not self.can_undo():
            return False

        state = self._undo_state
        self.board = state['board']
        self.current_player = state['current_player']
        self.last_move = state['last_move']
        self.black_count = state['black_count']
        self.white_count = state['white_count']
        del self.move_history[state['history_length']:]
        self._undo_state = None
        logger.debug("Undo: back to %d moves", len(self.move_history))
        return True

    def set_difficulty(self, difficulty):
        self.difficulty = difficulty

    def is_game_over(self):
        return self.status != 'playing'

    def get_winner(self):
        """1 or 2 for a win, 0 for a draw, None while playing."""
        if self.status == 'won':
            return self.winner
        if self.status == 'draw':
            return 0
        return None

    def get_board_copy(self):
        return self.board.copy()

    def _snapshot(self):
        return {
            'board': self.board,
            'current_player': self.current_player,
            'last_move': self.last_move,
            'black_count': self.black_count,
            'white_count': self.white_count,
            'history_length': len(self.move_history),
        }

    def display(self):
        symbols = {0: '·', 1: '●', 2: '○'}
        winning = set(self.winning_line or ())
        print('   ', end='')
        for c in range(self.board_size):
            print(f'{c:2}', end=' ')
        print()
        for r in range(self.board_size):
            print(f'{r:2} ', end='')
            for c in range(self.board_size):
                symbol = symbols[int(self.board[r, c])]
                if (r, c) in winning:
                    print(f'[{symbol}]', end='')
                else:
                    print(f' {symbol} ', end='')
            print()
        print()


def create_initial_game_state(mode='pvc', difficulty='medium'):
    """Creates a new game: black to move on an empty board."""
    return GomokuGame(mode, difficulty)
