"""
Console game runner - human vs AI, human vs human, or AI vs AI.
"""
import sys
import os
import argparse
import logging
import random

ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from gomoku_engine.constants import DIFFICULTIES, BLACK
from gomoku_engine.errors import InvalidMoveError
from gomoku_engine.game_gomoku import GomokuGame

logger = logging.getLogger("play")


def read_human_move(game, name):
    """
    Prompts until the user types a legal 'row col'.

    Returns:
        (row, col), or None if input ended
    """
    while True:
        try:
            line = input(f"{name} move (row col): ")
        except EOFError:
            return None

        parts = line.replace(',', ' ').split()
        if len(parts) != 2:
            print("   Enter two numbers, e.g. 7 7")
            continue
        try:
            row, col = int(parts[0]), int(parts[1])
        except ValueError:
            print("   Enter two numbers, e.g. 7 7")
            continue

        try:
            game.make_move(row, col)
        except InvalidMoveError as e:
            print(f"❌ {e.message}")
            continue
        return row, col


def play_game(mode='pvc', black_difficulty='medium', white_difficulty=None,
              display=True, rng=None):
    """
    Runs a single game in the terminal.

    Args:
        mode: 'pvc' (human black vs AI), 'pvp' or 'cvc' (AI vs AI)
        black_difficulty: AI tier for black in 'cvc' mode, AI tier in 'pvc' mode
        white_difficulty: AI tier for white in 'cvc' mode
        display: whether to show the board after every move
        rng: random source shared by both AIs

    Returns:
        winner: 1 or 2, 0 for a draw, -1 if the game was abandoned
    """
    white_difficulty = white_difficulty or black_difficulty
    game = GomokuGame('pvp' if mode in ('pvp', 'cvc') else 'pvc', black_difficulty)

    print(f"\n{'='*60}")
    print(f"Mode: {mode.upper()}")
    if mode == 'pvc':
        print(f"Black (●): Human   White (○): AI [{black_difficulty}]")
    elif mode == 'cvc':
        print(f"Black (●): AI [{black_difficulty}]   White (○): AI [{white_difficulty}]")
    print(f"{'='*60}\n")

    if display:
        game.display()

    while not game.is_game_over():
        player = game.current_player
        name = 'Black (●)' if player == BLACK else 'White (○)'

        if mode == 'cvc' or game.is_ai_turn():
            if mode == 'cvc':
                game.set_difficulty(black_difficulty if player == BLACK else white_difficulty)
            move = game.play_ai_turn(rng)
            if move is None:
                print("No valid moves available!")
                return -1
        else:
            move = read_human_move(game, name)
            if move is None:
                print("\nGame abandoned.")
                return -1

        print(f"Turn {len(game.move_history)}: {name} → {move}")
        if display:
            game.display()

    winner = game.get_winner()

    print(f"\n{'='*60}")
    if winner == 0:
        print("🤝 Game Over: DRAW!")
    else:
        print(f"🏆 Game Over: {'Black (●)' if winner == BLACK else 'White (○)'} WINS!")
        print(f"Winning line: {game.winning_line}")
    print(f"Stones - Black: {game.black_count}, White: {game.white_count}")
    print(f"Total turns: {len(game.move_history)}")
    print(f"{'='*60}\n")

    return winner


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Play Gomoku in the terminal")
    parser.add_argument('--mode', choices=['pvc', 'pvp', 'cvc'], default='pvc',
                        help="pvc: human vs AI, pvp: two humans, cvc: AI vs AI")
    parser.add_argument('--difficulty', choices=DIFFICULTIES, default='medium',
                        help="AI tier (black's tier in cvc mode)")
    parser.add_argument('--white-difficulty', choices=DIFFICULTIES, default=None,
                        help="white's tier in cvc mode")
    parser.add_argument('--seed', type=int, default=None,
                        help="seed for the AI random source")
    parser.add_argument('--nodisplay', action='store_true',
                        help="do not print the board after each move")
    parser.add_argument('--log-level', default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    rng = random.Random(args.seed)
    logger.debug("Starting %s game (seed=%s)", args.mode, args.seed)

    winner = play_game(
        mode=args.mode,
        black_difficulty=args.difficulty,
        white_difficulty=args.white_difficulty,
        display=not args.nodisplay,
        rng=rng,
    )
    sys.exit(0 if winner in [0, 1, 2] else 1)


if __name__ == "__main__":
    main()
