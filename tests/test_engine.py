import pytest

from connectfour.game import (ColumnFull, GameAlreadyOver, GameEngine, InvalidColumn,
                              InvalidConfiguration, Player, games_created)
from connectfour.utils import GameStatus, Outcome

from tests.helpers import TIE_SEQUENCE, play

# Alice is always the first player in these sequences
HORIZONTAL_WIN = [0, 0, 1, 1, 2, 2, 3]
VERTICAL_WIN = [0, 1, 0, 1, 0, 1, 0]
DIAGONAL_UP_RIGHT_WIN = [0, 1, 1, 2, 3, 2, 2, 3, 4, 3, 3]
DIAGONAL_DOWN_RIGHT_WIN = [4, 3, 3, 2, 1, 2, 2, 1, 0, 1, 1]


class TestInitialize:
    @pytest.mark.parametrize("height,width", [(4, 4), (6, 7), (5, 9), (10, 4)])
    def test_fresh_game(self, alice, bob, height, width):
        engine = GameEngine(height, width, alice, bob)
        assert engine.status == GameStatus.IN_PROGRESS
        assert engine.current_player == alice
        assert engine.winner is None
        cells = engine.cells()
        assert len(cells) == height
        assert all(len(row) == width for row in cells)
        assert all(cell is None for row in cells for cell in row)

    @pytest.mark.parametrize("height,width", [(3, 7), (6, 3), (0, 0), (-6, 7)])
    def test_grid_too_small(self, alice, bob, height, width):
        with pytest.raises(InvalidConfiguration):
            GameEngine(height, width, alice, bob)

    @pytest.mark.parametrize("height,width", [(6.0, 7), (6, "7"), (True, 7)])
    def test_non_integer_dimensions(self, alice, bob, height, width):
        with pytest.raises(InvalidConfiguration):
            GameEngine(height, width, alice, bob)

    def test_players_must_be_distinct(self, alice):
        with pytest.raises(InvalidConfiguration):
            GameEngine(6, 7, alice, alice)
        with pytest.raises(InvalidConfiguration):
            GameEngine(6, 7, alice, Player("Alice", "red"))

    def test_same_name_different_color_allowed(self):
        engine = GameEngine(6, 7, Player("Sam", "red"), Player("Sam", "blue"))
        assert engine.players[0] != engine.players[1]

    def test_missing_player(self, alice):
        with pytest.raises(InvalidConfiguration):
            GameEngine(6, 7, alice, None)

    def test_default_players(self):
        engine = GameEngine()
        assert [p.name for p in engine.players] == ["Player1", "Player2"]
        assert (engine.height, engine.width) == (6, 7)

    def test_game_counter_increments(self, alice, bob):
        before = games_created()
        first = GameEngine(6, 7, alice, bob)
        second = GameEngine(6, 7, alice, bob)
        assert games_created() == before + 2
        assert second.game_number == first.game_number + 1 == games_created()


class TestDrop:
    def test_gravity(self, engine):
        rows = [engine.drop(3).row for _ in range(6)]
        assert rows == [5, 4, 3, 2, 1, 0]

    def test_pieces_belong_to_the_mover(self, engine, alice, bob):
        first = engine.drop(2)
        second = engine.drop(2)
        assert (first.player, second.player) == (alice, bob)
        assert engine.cell(5, 2) == alice
        assert engine.cell(4, 2) == bob

    def test_turn_alternates_on_continue(self, engine, alice, bob):
        assert engine.current_player == alice
        result = engine.drop(0)
        assert result.outcome == Outcome.CONTINUE
        assert engine.current_player == bob
        engine.drop(6)
        assert engine.current_player == alice

    def test_result_reports_landing_cell(self, engine):
        engine.drop(1)
        result = engine.drop(1)
        assert (result.row, result.column) == (4, 1)
        assert result.winning_line == ()

    @pytest.mark.parametrize("column", [-1, 7, 42, "2", 1.5, None])
    def test_invalid_column_leaves_state_unchanged(self, engine, column):
        engine.drop(3)
        before = engine.state()
        with pytest.raises(InvalidColumn):
            engine.drop(column)
        assert engine.state() == before

    def test_full_column_leaves_state_unchanged(self, engine):
        play(engine, [0] * 6)
        before = engine.state()
        with pytest.raises(ColumnFull) as excinfo:
            engine.drop(0)
        assert excinfo.value.column == 0
        assert engine.state() == before
        assert 0 not in engine.valid_columns()

    def test_game_over_checked_before_column(self, engine):
        play(engine, VERTICAL_WIN)
        with pytest.raises(GameAlreadyOver):
            engine.drop(99)


class TestWin:
    @pytest.mark.parametrize("moves", [HORIZONTAL_WIN, VERTICAL_WIN,
                                       DIAGONAL_UP_RIGHT_WIN, DIAGONAL_DOWN_RIGHT_WIN],
                             ids=["horizontal", "vertical", "up-right", "down-right"])
    def test_four_in_a_row_wins(self, engine, alice, moves):
        for column in moves[:-1]:
            assert engine.drop(column).outcome == Outcome.CONTINUE

        result = engine.drop(moves[-1])

        assert result.outcome == Outcome.WIN
        assert result.player == alice
        assert len(result.winning_line) == 4
        assert all(engine.cell(r, c) == alice for r, c in result.winning_line)
        assert engine.status == GameStatus.WON
        assert engine.winner == alice
        assert engine.has_won(alice)

    def test_horizontal_completed_in_column_three(self, engine, alice):
        play(engine, HORIZONTAL_WIN[:-1])
        assert [engine.cell(5, c) for c in range(3)] == [alice] * 3
        result = engine.drop(3)
        assert result.outcome == Outcome.WIN
        assert set(result.winning_line) == {(5, 0), (5, 1), (5, 2), (5, 3)}

    def test_second_player_can_win(self, engine, bob):
        result = play(engine, [6] + VERTICAL_WIN)
        assert result.outcome == Outcome.WIN
        assert engine.winner == bob

    def test_current_player_frozen_after_win(self, engine, alice):
        play(engine, VERTICAL_WIN)
        assert engine.current_player == alice

    def test_no_moves_after_win(self, engine):
        play(engine, VERTICAL_WIN)
        before = engine.state()
        with pytest.raises(GameAlreadyOver) as excinfo:
            engine.drop(5)
        assert excinfo.value.status == GameStatus.WON
        assert engine.state() == before
        assert engine.valid_columns() == []

    def test_three_aligned_is_not_a_win(self, engine, alice, bob):
        play(engine, [0, 0, 1, 1, 2, 2])
        assert not engine.has_won(alice)
        assert not engine.has_won(bob)
        assert engine.status == GameStatus.IN_PROGRESS

    def test_mixed_ownership_is_not_a_win(self, engine):
        # bottom row ends up A A A B, nobody has four
        result = play(engine, [0, 3, 1, 6, 2])
        assert result.outcome == Outcome.CONTINUE
        assert not engine.has_won(engine.players[0])

    def test_has_won_rejects_strangers(self, engine):
        with pytest.raises(ValueError):
            engine.has_won(Player("Carol", "blue"))


class TestTie:
    def test_full_board_without_line_is_a_tie(self, engine, bob):
        for column in TIE_SEQUENCE[:-1]:
            assert engine.drop(column).outcome == Outcome.CONTINUE

        result = engine.drop(TIE_SEQUENCE[-1])

        assert result.outcome == Outcome.TIE
        assert result.player == bob
        assert engine.status == GameStatus.TIED
        assert engine.winner is None
        assert engine.is_tied()
        assert engine.current_player == bob

    def test_no_moves_after_tie(self, engine):
        play(engine, TIE_SEQUENCE)
        with pytest.raises(GameAlreadyOver) as excinfo:
            engine.drop(0)
        assert excinfo.value.status == GameStatus.TIED

    def test_not_tied_while_cells_remain(self, engine):
        play(engine, TIE_SEQUENCE[:-1])
        assert not engine.is_tied()

    def test_line_on_the_last_cell_is_a_win(self, alice, bob):
        # 4x4 board whose final drop completes bob's down-left diagonal
        engine = GameEngine(4, 4, alice, bob)
        moves = [1, 0, 0, 1, 1, 3, 1, 3, 3, 2, 2, 2, 2, 0, 0, 3]
        for column in moves[:-1]:
            assert engine.drop(column).outcome == Outcome.CONTINUE

        result = engine.drop(moves[-1])

        assert result.outcome == Outcome.WIN
        assert engine.winner == bob
        assert set(result.winning_line) == {(0, 3), (1, 2), (2, 1), (3, 0)}
        assert not engine.is_tied()


class TestQueries:
    def test_state_snapshot(self, engine, alice, bob):
        engine.drop(0)
        state = engine.state()
        assert state.grid[5][0] == alice
        assert state.current_player == bob
        assert state.status == GameStatus.IN_PROGRESS
        assert state.game_number == engine.game_number

    def test_board_property_is_a_copy(self, engine):
        engine.board.place(0, 1)
        assert engine.cell(5, 0) is None

    def test_render_plain(self, engine):
        engine.drop(0)
        assert "|X            |" in str(engine)

    def test_render_uses_player_colors(self, engine):
        engine.drop(0)
        assert "\033[31mX" in engine.render()
        assert "\033[" not in engine.render(color=False)

    def test_engines_are_independent(self, alice, bob):
        first = GameEngine(6, 7, alice, bob)
        second = GameEngine(6, 7, alice, bob)
        first.drop(0)
        assert second.cell(5, 0) is None
        assert second.current_player == alice
