"""
Game constants - board geometry, pattern scores and AI weights.
"""

BOARD_SIZE = 15
WIN_LENGTH = 5
CENTER = BOARD_SIZE // 2

EMPTY = 0
BLACK = 1
WHITE = 2

# Four axes (horizontal, vertical, diagonal \, diagonal /).
# Order matters: check_win reports the first axis that wins.
FOUR_DIRECTIONS = ((0, 1), (1, 0), (1, 1), (1, -1))

# Pattern scores
SCORE_FIVE       = 1000000
SCORE_OPEN_FOUR  = 10000
SCORE_FOUR       = 1000
SCORE_OPEN_THREE = 500
SCORE_THREE      = 100
SCORE_TWO        = 10

# Hard tier bonuses
BONUS_WINNING_MOVE          = 10000000
BONUS_BLOCK_WIN             = 5000000
BONUS_OPEN_FOUR_MULTIPLIER  = 50000
BONUS_FOUR_MULTIPLIER       = 10000
BONUS_OPEN_THREE_MULTIPLIER = 5000
BONUS_BLOCK_OPEN_FOUR       = 100000
BONUS_BLOCK_FOUR            = 20000

MEDIUM_AI_OWN_PATTERN_MULTIPLIER      = 1.0
MEDIUM_AI_OPPONENT_PATTERN_MULTIPLIER = 1.2
HARD_AI_OWN_PATTERN_MULTIPLIER        = 1.5
HARD_AI_OPPONENT_PATTERN_MULTIPLIER   = 1.3
MOVE_EVAL_OPPONENT_MULTIPLIER         = 0.9

AI_EASY_SEARCH_RANGE        = 3
AI_MEDIUM_HARD_SEARCH_RANGE = 2

AI_HARD_TOP_MOVES_COUNT = 3
AI_HARD_MOVE_WEIGHTS    = (0.7, 0.2, 0.1)

DIFFICULTIES = ('easy', 'medium', 'hard')
GAME_MODES = ('pvp', 'pvc')
