import itertools
import unittest

from tictactoe.game_logic import (
    WINNING_LINES, Cell, Draw, GameState, IllegalMove, InProgress, InvalidState,
    Mode, Player, Won, evaluate,
)


def board(text):
    """'XO X ...' -> tuple of Cells, space is empty"""
    assert len(text) == 9, text
    return tuple(Cell.EMPTY if ch == ' ' else Cell(ch) for ch in text)


def play(state, *moves):
    for index in moves:
        state.apply_move(index)
    return state


class EvaluateTests(unittest.TestCase):
    def test_empty_board_in_progress(self):
        self.assertEqual(evaluate(board("         ")), InProgress())

    def test_near_terminal_board_in_progress(self):
        self.assertEqual(evaluate(board("XXOOO   X")), InProgress())

    def test_row_win_reports_line(self):
        self.assertEqual(evaluate(board("XXOOOO  X")), Won(Player.O, (3, 4, 5)))

    def test_column_win(self):
        self.assertEqual(evaluate(board("XO XO  O ")), Won(Player.O, (1, 4, 7)))

    def test_anti_diagonal_win(self):
        self.assertEqual(evaluate(board("XXO O O X")), Won(Player.O, (2, 4, 6)))

    def test_full_board_with_win_is_won_not_draw(self):
        self.assertEqual(evaluate(board("XOXOXOOXX")), Won(Player.X, (0, 4, 8)))

    def test_draw(self):
        self.assertEqual(evaluate(board("XOXXOOOXX")), Draw())

    def test_multiple_lines_earliest_wins(self):
        # row 0 and main diagonal both complete
        self.assertEqual(evaluate(board("XXXOXO OX")), Won(Player.X, (0, 1, 2)))
        # both players "win": impossible in play, still deterministic
        self.assertEqual(evaluate(board("   OOOXXX")), Won(Player.O, (3, 4, 5)))

    def test_malformed_board(self):
        with self.assertRaises(InvalidState):
            evaluate(board("XO       ")[:8])
        with self.assertRaises(InvalidState):
            evaluate(('X',) * 9)

    def test_every_board_classified_consistently(self):
        for cells in itertools.product(list(Cell), repeat=9):
            status = evaluate(cells)
            uniform = [line for line in WINNING_LINES
                       if cells[line[0]] is not Cell.EMPTY
                       and cells[line[0]] is cells[line[1]] is cells[line[2]]]
            if uniform:
                self.assertEqual(status, Won(Player(cells[uniform[0][0]].value), uniform[0]))
            elif Cell.EMPTY in cells:
                self.assertEqual(status, InProgress())
            else:
                self.assertEqual(status, Draw())


class GameStateTests(unittest.TestCase):
    def test_new_game(self):
        state = GameState.new(Mode.HUMAN_VS_HUMAN)
        self.assertEqual(state.board, board("         "))
        self.assertIs(state.current_player, Player.X)
        self.assertEqual(state.status, InProgress())
        self.assertIs(state.mode, Mode.HUMAN_VS_HUMAN)
        self.assertFalse(state.game_over)
        self.assertEqual(state.empty_cells(), list(range(9)))

    def test_moves_alternate(self):
        state = GameState()
        self.assertEqual(state.apply_move(4), InProgress())
        self.assertIs(state.current_player, Player.O)
        state.apply_move(0)
        self.assertIs(state.current_player, Player.X)
        self.assertEqual(state.board, board("O   X    "))
        self.assertEqual(state.move_count, 2)

    def test_board_is_a_snapshot(self):
        state = GameState()
        snapshot = state.board
        state.apply_move(4)
        self.assertEqual(snapshot, board("         "))
        self.assertIsInstance(state.board, tuple)

    def test_out_of_range_rejected(self):
        state = play(GameState(), 4)
        before = state.board
        for index in (9, -1, 100):
            with self.assertRaises(IllegalMove):
                state.apply_move(index)
        self.assertEqual(state.board, before)
        self.assertIs(state.current_player, Player.O)

    def test_non_int_rejected(self):
        state = GameState()
        for index in ("4", 4.0, None, True):
            with self.assertRaises(IllegalMove):
                state.apply_move(index)
        self.assertEqual(state.board, board("         "))

    def test_occupied_rejected(self):
        state = play(GameState(), 4)
        with self.assertRaises(IllegalMove):
            state.apply_move(4)
        self.assertEqual(state.board, board("    X    "))
        self.assertIs(state.current_player, Player.O)
        self.assertFalse(state.is_cell_empty(4))
        self.assertTrue(state.is_cell_empty(0))
        self.assertFalse(state.is_cell_empty(9))

    def test_win_freezes_game(self):
        state = play(GameState(Mode.HUMAN_VS_HUMAN), 0, 3, 1, 4)
        status = state.apply_move(2)
        self.assertEqual(status, Won(Player.X, (0, 1, 2)))
        self.assertTrue(state.game_over)
        self.assertIs(state.winner, Player.X)
        self.assertEqual(state.winning_line, (0, 1, 2))
        # winner keeps the turn marker
        self.assertIs(state.current_player, Player.X)
        before = state.board
        with self.assertRaises(IllegalMove):
            state.apply_move(8)
        self.assertEqual(state.board, before)

    def test_draw_freezes_game(self):
        # X O X / X O O / O X X
        state = play(GameState(), 0, 1, 2, 4, 3, 5, 7, 6)
        self.assertEqual(state.apply_move(8), Draw())
        self.assertTrue(state.game_over)
        self.assertIsNone(state.winner)
        self.assertIsNone(state.winning_line)
        with self.assertRaises(IllegalMove):
            state.apply_move(0)

    def test_reset(self):
        state = play(GameState(Mode.HUMAN_VS_COMPUTER), 0, 3, 1, 4, 2)
        state.reset()
        self.assertEqual(state.board, board("         "))
        self.assertEqual(state.status, InProgress())
        self.assertIs(state.current_player, Player.X)
        self.assertIs(state.mode, Mode.HUMAN_VS_COMPUTER)
        state.reset(Mode.HUMAN_VS_HUMAN)
        self.assertIs(state.mode, Mode.HUMAN_VS_HUMAN)

    def test_is_computer_turn(self):
        state = GameState(Mode.HUMAN_VS_COMPUTER)
        self.assertFalse(state.is_computer_turn)
        state.apply_move(4)
        self.assertTrue(state.is_computer_turn)
        hvh = play(GameState(Mode.HUMAN_VS_HUMAN), 4)
        self.assertFalse(hvh.is_computer_turn)


if __name__ == "__main__":
    unittest.main()
