"""Tests for the GomokuGame state manager."""

import random

import numpy as np
import pytest

from conftest import ScriptedRng
from gomoku_engine.errors import ConfigurationError, GameOverError, InvalidMoveError
from gomoku_engine.game_gomoku import GomokuGame, create_initial_game_state
from gomoku_engine.models import Move


def play_sequence(game, moves):
    for row, col in moves:
        game.make_move(row, col)


class TestSetup:
    def test_initial_state(self):
        game = create_initial_game_state('pvc', 'hard')

        assert game.mode == 'pvc'
        assert game.difficulty == 'hard'
        assert game.current_player == 1
        assert game.status == 'playing'
        assert game.move_history == []
        assert np.count_nonzero(game.board) == 0
        assert game.get_winner() is None

    def test_defaults(self):
        game = create_initial_game_state()
        assert (game.mode, game.difficulty) == ('pvc', 'medium')

    def test_unknown_mode(self):
        with pytest.raises(ConfigurationError):
            GomokuGame(mode='online')


class TestMakeMove:
    def test_alternates_players(self):
        game = GomokuGame('pvp')
        play_sequence(game, [(7, 7), (7, 8)])

        assert game.board[7, 7] == 1
        assert game.board[7, 8] == 2
        assert game.current_player == 1
        assert game.move_history == [Move((7, 7), 1), Move((7, 8), 2)]
        assert game.last_move == Move((7, 8), 2)
        assert (game.black_count, game.white_count) == (1, 1)

    def test_previous_board_untouched(self):
        game = GomokuGame('pvp')
        before = game.board
        game.make_move(7, 7)
        assert np.count_nonzero(before) == 0

    @pytest.mark.parametrize("row,col", [(-1, 0), (0, 15), (15, 15)])
    def test_off_board(self, row, col):
        game = GomokuGame('pvp')
        assert not game.is_valid_move(row, col)
        with pytest.raises(InvalidMoveError) as excinfo:
            game.make_move(row, col)
        assert (excinfo.value.row, excinfo.value.col) == (row, col)
        assert game.move_history == []

    def test_occupied(self):
        game = GomokuGame('pvp')
        game.make_move(7, 7)
        assert not game.is_valid_move(7, 7)
        with pytest.raises(InvalidMoveError, match="occupied"):
            game.make_move(7, 7)
        assert game.current_player == 2

    def test_win(self):
        game = GomokuGame('pvp')
        play_sequence(game, [(7, 0), (8, 0), (7, 1), (8, 1), (7, 2), (8, 2), (7, 3), (8, 3)])
        result = game.make_move(7, 4)

        assert result.is_over
        assert game.status == 'won'
        assert game.winner == 1
        assert game.get_winner() == 1
        assert game.winning_line == [(7, c) for c in range(5)]
        assert game.is_game_over()

    def test_no_moves_after_game_over(self):
        game = GomokuGame('pvp')
        play_sequence(game, [(7, 0), (8, 0), (7, 1), (8, 1), (7, 2), (8, 2), (7, 3), (8, 3), (7, 4)])
        with pytest.raises(GameOverError):
            game.make_move(10, 10)

    def test_draw(self, draw_board):
        game = GomokuGame('pvp')
        hole_player = int(draw_board[14, 14])
        board = draw_board.copy()
        board[14, 14] = 0
        game.board = board
        game.current_player = hole_player

        result = game.make_move(14, 14)
        assert result.is_draw
        assert game.status == 'draw'
        assert game.get_winner() == 0


class TestAITurns:
    def test_ai_plays_white(self):
        game = GomokuGame('pvc', 'medium')
        game.make_move(7, 7)
        assert game.is_ai_turn()

        position = game.play_ai_turn()
        assert position is not None
        assert game.board[position] == 2
        assert game.current_player == 1
        assert not game.is_ai_turn()

    def test_request_does_not_play(self):
        game = GomokuGame('pvc', 'easy')
        game.make_move(7, 7)
        position = game.request_ai_move(ScriptedRng(indices=[0]))

        assert game.board[position] == 0
        assert len(game.move_history) == 1

    def test_ai_blocks_four(self):
        game = GomokuGame('pvc', 'medium')
        game.board[7, 5:9] = 1
        game.board[7, 4] = 2
        game.current_player = 2
        assert game.play_ai_turn() == (7, 9)

    def test_ai_without_moves(self, draw_board):
        game = GomokuGame('pvc', 'hard')
        game.board = draw_board
        game.current_player = 2
        assert game.play_ai_turn(random.Random(0)) is None

    def test_ai_vs_ai_game_finishes(self):
        game = GomokuGame('pvp', 'hard')
        rng = random.Random(42)
        while not game.is_game_over():
            assert game.play_ai_turn(rng) is not None
        assert game.get_winner() in (0, 1, 2)

    def test_set_difficulty(self):
        game = GomokuGame('pvc', 'easy')
        game.set_difficulty('hard')
        assert game.difficulty == 'hard'


class TestUndo:
    def test_pvc_undo_removes_player_and_ai_moves(self):
        game = GomokuGame('pvc', 'medium')
        game.make_move(7, 7)
        game.play_ai_turn()

        assert game.can_undo()
        assert game.undo()
        assert game.move_history == []
        assert np.count_nonzero(game.board) == 0
        assert game.current_player == 1
        assert game.last_move is None
        assert (game.black_count, game.white_count) == (0, 0)

    def test_pvc_undo_keeps_earlier_moves(self):
        game = GomokuGame('pvc', 'medium')
        game.make_move(7, 7)
        first_ai = game.play_ai_turn()
        game.make_move(3, 3)
        game.play_ai_turn()

        assert game.undo()
        assert game.move_history == [Move((7, 7), 1), Move(first_ai, 2)]
        assert game.last_move == Move(first_ai, 2)
        assert game.board[3, 3] == 0

    def test_pvc_no_undo_while_ai_to_move(self):
        game = GomokuGame('pvc', 'medium')
        game.make_move(7, 7)
        assert not game.can_undo()
        assert not game.undo()

    def test_only_one_undo_per_snapshot(self):
        game = GomokuGame('pvc', 'medium')
        game.make_move(7, 7)
        game.play_ai_turn()
        assert game.undo()
        assert not game.undo()

    def test_pvp_undo_single_move(self):
        game = GomokuGame('pvp')
        play_sequence(game, [(7, 7), (7, 8)])

        assert game.undo()
        assert game.move_history == [Move((7, 7), 1)]
        assert game.current_player == 2
        assert game.board[7, 8] == 0

    def test_no_undo_after_game_over(self):
        game = GomokuGame('pvp')
        play_sequence(game, [(7, 0), (8, 0), (7, 1), (8, 1), (7, 2), (8, 2), (7, 3), (8, 3), (7, 4)])
        assert not game.undo()

    def test_reset(self):
        game = GomokuGame('pvc', 'hard')
        game.make_move(7, 7)
        game.reset()

        assert game.move_history == []
        assert game.current_player == 1
        assert game.difficulty == 'hard'
        assert not game.can_undo()
