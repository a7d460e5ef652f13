"""
AI move selection - three difficulty tiers over the rules engine.

easy   : uniform random pick near existing stones
medium : win, else block, else best one-ply pattern score
hard   : weighted pattern score with threat bonuses, sampled from the top 3

Randomness comes from an injectable ``rng`` (anything with ``random()`` and
``randrange(n)``, a ``random.Random`` by default) so callers can make the
easy and hard tiers deterministic.
"""

import logging
import random

from .constants import (
    AI_EASY_SEARCH_RANGE, AI_MEDIUM_HARD_SEARCH_RANGE,
    AI_HARD_TOP_MOVES_COUNT, AI_HARD_MOVE_WEIGHTS,
    BONUS_WINNING_MOVE, BONUS_BLOCK_WIN,
    BONUS_OPEN_FOUR_MULTIPLIER, BONUS_FOUR_MULTIPLIER, BONUS_OPEN_THREE_MULTIPLIER,
    BONUS_BLOCK_OPEN_FOUR, BONUS_BLOCK_FOUR,
    MEDIUM_AI_OWN_PATTERN_MULTIPLIER, MEDIUM_AI_OPPONENT_PATTERN_MULTIPLIER,
    HARD_AI_OWN_PATTERN_MULTIPLIER, HARD_AI_OPPONENT_PATTERN_MULTIPLIER,
    MOVE_EVAL_OPPONENT_MULTIPLIER, SCORE_FIVE,
)
from .game_engine import (
    check_win, evaluate_position, get_relevant_positions, opponent, place_stone,
)
from .models import PatternType, ThreatEvaluation

logger = logging.getLogger(__name__)

_default_rng = random.Random()


def _pattern_sum(patterns):
    return sum(p.score for p in patterns)


def _count_type(patterns, pattern_type):
    return sum(1 for p in patterns if p.type == pattern_type)


def is_winning_move(board, position, player):
    """Checks if playing position wins immediately for player."""
    test_board = place_stone(board, position, player)
    return check_win(test_board, position, player)[0]


def get_easy_move(board, rng=None):
    """
    Easy AI: random move among positions near existing stones.

    Returns:
        (row, col) or None
    """
    if rng is None:
        rng = _default_rng
    candidates = get_relevant_positions(board, AI_EASY_SEARCH_RANGE)
    if not candidates:
        return None

    return candidates[rng.randrange(len(candidates))]


def get_medium_move(board, player):
    """
    Medium AI: immediate win, then forced block, then best pattern score.

    Ties in the scoring step go to the first candidate in scan order.

    Returns:
        (row, col) or None
    """
    opp = opponent(player)
    candidates = get_relevant_positions(board, AI_MEDIUM_HARD_SEARCH_RANGE)
    if not candidates:
        return None

    for pos in candidates:
        if is_winning_move(board, pos, player):
            logger.debug("medium: winning move at %s", pos)
            return pos

    for pos in candidates:
        if is_winning_move(board, pos, opp):
            logger.debug("medium: blocking at %s", pos)
            return pos

    best_score = float('-inf')
    best_position = None
    for pos in candidates:
        my_score = _pattern_sum(evaluate_position(board, pos, player))
        opp_score = _pattern_sum(evaluate_position(board, pos, opp))
        total = (my_score * MEDIUM_AI_OWN_PATTERN_MULTIPLIER
                 + opp_score * MEDIUM_AI_OPPONENT_PATTERN_MULTIPLIER)

        if total > best_score:
            best_score = total
            best_position = pos

    logger.debug("medium: best %s score=%.1f over %d candidates",
                 best_position, best_score, len(candidates))
    return best_position


def evaluate_candidates(board, player):
    """
    Scores every candidate move the way the hard AI does.

    Args:
        board: game board
        player: player to move

    Returns:
        list of ThreatEvaluation, best first (stable for equal scores)
    """
    opp = opponent(player)
    evaluations = []

    for pos in get_relevant_positions(board, AI_MEDIUM_HARD_SEARCH_RANGE):
        my_patterns = evaluate_position(board, pos, player)
        opp_patterns = evaluate_position(board, pos, opp)

        wins = is_winning_move(board, pos, player)
        blocks = is_winning_move(board, pos, opp)

        score = (_pattern_sum(my_patterns) * HARD_AI_OWN_PATTERN_MULTIPLIER
                 + _pattern_sum(opp_patterns) * HARD_AI_OPPONENT_PATTERN_MULTIPLIER)

        if wins:
            score += BONUS_WINNING_MOVE
        if blocks:
            score += BONUS_BLOCK_WIN

        score += _count_type(my_patterns, PatternType.OPEN_FOUR) * BONUS_OPEN_FOUR_MULTIPLIER
        score += _count_type(my_patterns, PatternType.FOUR) * BONUS_FOUR_MULTIPLIER
        score += _count_type(my_patterns, PatternType.OPEN_THREE) * BONUS_OPEN_THREE_MULTIPLIER

        score += _count_type(opp_patterns, PatternType.OPEN_FOUR) * BONUS_BLOCK_OPEN_FOUR
        score += _count_type(opp_patterns, PatternType.FOUR) * BONUS_BLOCK_FOUR

        evaluations.append(ThreatEvaluation(
            position=pos,
            total_score=score,
            is_winning_move=wins,
            blocks_winning_move=blocks,
            threats=my_patterns + opp_patterns,
        ))

    evaluations.sort(key=lambda e: e.total_score, reverse=True)
    return evaluations


def get_hard_move(board, player, rng=None):
    """
    Hard AI: ranks candidates with evaluate_candidates and samples one of
    the top three with weights 0.7 / 0.2 / 0.1.

    A single draw u in [0, 1) is compared against the cumulative weights;
    if it passes them all, the best candidate is played.

    Returns:
        (row, col) or None
    """
    if rng is None:
        rng = _default_rng
    evaluations = evaluate_candidates(board, player)
    if not evaluations:
        return None

    top_moves = evaluations[:AI_HARD_TOP_MOVES_COUNT]
    draw = rng.random()
    cumulative = 0.0

    for rank, (evaluation, weight) in enumerate(zip(top_moves, AI_HARD_MOVE_WEIGHTS)):
        cumulative += weight
        if draw <= cumulative:
            logger.debug("hard: rank %d %s score=%.1f (draw=%.3f)",
                         rank + 1, evaluation.position, evaluation.total_score, draw)
            return evaluation.position

    return evaluations[0].position


def get_ai_move(board, player, difficulty, rng=None):
    """
    Gets the next AI move for the given difficulty.

    Args:
        board: game board (not modified)
        player: AI's player id (1 or 2)
        difficulty: 'easy', 'medium' or 'hard'; anything else plays medium
        rng: optional random source for the easy and hard tiers

    Returns:
        (row, col), or None when no candidate exists
    """
    if difficulty == 'easy':
        return get_easy_move(board, rng)
    if difficulty == 'hard':
        return get_hard_move(board, player, rng)
    if difficulty != 'medium':
        logger.warning("Unknown difficulty %r, using medium", difficulty)
    return get_medium_move(board, player)


def evaluate_move(board, position, player):
    """
    One-ply value of a move for player: SCORE_FIVE for an immediate win,
    otherwise own pattern score minus 0.9 x the opponent's.
    """
    if is_winning_move(board, position, player):
        return SCORE_FIVE

    my_score = _pattern_sum(evaluate_position(board, position, player))
    opp_score = _pattern_sum(evaluate_position(board, position, opponent(player)))
    return my_score - opp_score * MOVE_EVAL_OPPONENT_MULTIPLIER
