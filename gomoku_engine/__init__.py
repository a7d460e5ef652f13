# Rules engine (Numba kernels + pure wrappers)
from .game_engine import (
    create_empty_board,
    as_board,
    opponent,
    is_valid_position,
    is_empty,
    place_stone,
    check_win,
    check_line_length,
    is_board_full,
    detect_pattern,
    evaluate_position,
    count_pieces,
    check_game_over,
    get_relevant_positions,
)

# AI
from .ai_strategies import (
    get_ai_move,
    get_easy_move,
    get_medium_move,
    get_hard_move,
    evaluate_candidates,
    evaluate_move,
    is_winning_move,
)

# Value types
from .models import (
    Move,
    Pattern,
    PatternType,
    PieceCount,
    GameOverResult,
    ThreatEvaluation,
)

# Errors
from .errors import (
    GomokuError,
    InvalidMoveError,
    GameOverError,
    ConfigurationError,
)

# Game state
from .game_gomoku import GomokuGame, create_initial_game_state


__all__ = [
    # Game Engine
    'create_empty_board',
    'as_board',
    'opponent',
    'is_valid_position',
    'is_empty',
    'place_stone',
    'check_win',
    'check_line_length',
    'is_board_full',
    'detect_pattern',
    'evaluate_position',
    'count_pieces',
    'check_game_over',
    'get_relevant_positions',

    # AI
    'get_ai_move',
    'get_easy_move',
    'get_medium_move',
    'get_hard_move',
    'evaluate_candidates',
    'evaluate_move',
    'is_winning_move',

    # Models
    'Move',
    'Pattern',
    'PatternType',
    'PieceCount',
    'GameOverResult',
    'ThreatEvaluation',

    # Errors
    'GomokuError',
    'InvalidMoveError',
    'GameOverError',
    'ConfigurationError',

    # Game
    'GomokuGame',
    'create_initial_game_state',
]

__version__ = '1.0.0'
