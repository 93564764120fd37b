import pytest

from conftest import scripted
from logic.ai_player import AIPlayer
from logic.game import Game, GameMode, GameStatus, InvalidOperationError
from logic.game_state import Board, GameOutcome, Mark, Position
from logic.human_player import HumanPlayer
from logic.player import BasePlayer, PlayerKind


O = Mark.PLAYER_ONE
X = Mark.PLAYER_TWO


class ScriptedPlayer(BasePlayer):
    """Plays a fixed list of results, one per turn."""

    kind = PlayerKind.HUMAN

    def __init__(self, mark, results):
        super().__init__(mark)
        self.results = list(results)
        self.calls = 0

    def produce_move(self, board):
        self.calls += 1
        return self.results.pop(0)


def human_pair(one_lines, two_lines):
    return (
        HumanPlayer(O, scripted(*one_lines)),
        HumanPlayer(X, scripted(*two_lines)),
    )


# ==================== MODE SELECTION ====================

def test_starts_awaiting_mode():
    game = Game()
    assert game.status == GameStatus.AWAITING_MODE
    assert game.current_player is None


@pytest.mark.parametrize("choice", ["", "0", "3", "human", None, "12"])
def test_invalid_mode_keeps_waiting(choice):
    game = Game()
    assert not game.select_mode(choice)
    assert game.status == GameStatus.AWAITING_MODE
    assert game.mode is None


def test_human_vs_human_mode(recording_display):
    game = Game(display=recording_display)
    assert game.select_mode("1")
    assert game.mode == GameMode.HUMAN_VS_HUMAN
    assert game.status == GameStatus.IN_PROGRESS
    assert game.player_one.kind == PlayerKind.HUMAN
    assert game.player_two.kind == PlayerKind.HUMAN
    assert game.player_one.mark == O
    assert game.player_two.mark == X
    assert game.current_player is game.player_one
    assert ("message", "Human vs Human mode selected!") in recording_display.calls


def test_human_vs_ai_mode(fast_config):
    game = Game(config=fast_config)
    assert game.select_mode(" 2 ")
    assert game.mode == GameMode.HUMAN_VS_AI
    assert game.player_one.kind == PlayerKind.HUMAN
    assert game.player_two.is_automated
    assert game.player_two.mark == X


def test_mode_cannot_be_selected_twice():
    game = Game()
    game.select_mode("1")
    with pytest.raises(InvalidOperationError):
        game.select_mode("2")


def test_play_before_mode_is_an_error():
    with pytest.raises(InvalidOperationError):
        Game().play()


def test_players_must_differ():
    with pytest.raises(ValueError):
        Game(players=(HumanPlayer(O, scripted()), HumanPlayer(O, scripted())))


# ==================== TURN LOOP ====================

def test_player_one_wins(recording_display):
    p1, p2 = human_pair(["1 1", "1 2", "1 3"], ["2 1", "2 2"])
    game = Game(display=recording_display, players=(p1, p2))

    assert game.play() == GameOutcome.PLAYER_ONE_WINS
    assert game.status == GameStatus.WON
    assert game.winner is p1
    assert str(game.board) == "O O O / X X _ / _ _ _"
    assert recording_display.of_kind("outcome") == [("outcome", GameOutcome.PLAYER_ONE_WINS, p1)]


def test_player_two_wins_attributed_to_mover():
    p1, p2 = human_pair(["1 1", "1 2", "3 3"], ["2 1", "2 2", "2 3"])
    game = Game(players=(p1, p2))

    assert game.play() == GameOutcome.PLAYER_TWO_WINS
    assert game.winner is p2
    assert game.outcome == GameOutcome.PLAYER_TWO_WINS


def test_draw_on_full_board():
    # Ends as O X O / X O O / X O X
    p1, p2 = human_pair(
        ["1 1", "1 3", "2 2", "2 3", "3 2"],
        ["1 2", "2 1", "3 1", "3 3"],
    )
    game = Game(players=(p1, p2))

    assert game.play() == GameOutcome.DRAW
    assert game.status == GameStatus.DRAW
    assert game.winner is None
    assert game.board.is_full()
    assert len(game.moves) == 9


def test_quit_stops_without_touching_board():
    p1, p2 = human_pair(["2 2", "q"], ["1 1"])
    game = Game(players=(p1, p2))

    assert game.play() == GameOutcome.QUIT
    assert game.status == GameStatus.QUIT
    assert str(game.board) == "X _ _ / _ O _ / _ _ _"
    assert [move.position for move in game.moves] == [Position(2, 2), Position(1, 1)]


def test_quit_on_first_turn():
    p1, p2 = human_pair(["Q"], [])
    game = Game(players=(p1, p2))
    assert game.play() == GameOutcome.QUIT
    assert game.board == Board()


def test_players_alternate_and_reprompt_inside_turn(recording_display):
    p1, p2 = human_pair(["1 1", "1 2", "1 3"], ["1 1", "oops", "2 1", "2 2"])
    game = Game(display=recording_display, players=(p1, p2))

    assert game.play() == GameOutcome.PLAYER_ONE_WINS

    turns = [call[1] for call in recording_display.of_kind("turn")]
    # X is re-prompted twice inside its first turn
    assert turns[:2] == [O, X]
    assert turns.count(O) == 3


def test_failed_placement_keeps_same_player(recording_display):
    # Player one hands back a taken cell once; it must move again
    p1 = ScriptedPlayer(O, [Position(1, 1), Position(1, 1), Position(1, 2), Position(1, 3)])
    p2 = ScriptedPlayer(X, [Position(2, 1), Position(2, 2)])
    game = Game(display=recording_display, players=(p1, p2))

    assert game.play() == GameOutcome.PLAYER_ONE_WINS
    assert p1.calls == 4
    assert p2.calls == 2
    assert ("invalid", "Invalid move. Try again.") in recording_display.calls


def test_no_move_from_player_ends_game():
    game = Game(players=(ScriptedPlayer(O, [None]), ScriptedPlayer(X, [])))
    assert game.play() == GameOutcome.QUIT


def test_finished_game_cannot_be_replayed():
    game = Game(players=human_pair(["q"], []))
    game.play()
    with pytest.raises(InvalidOperationError):
        game.play()


def test_board_already_won_is_resolved_without_turns():
    board = Board.from_rows(["X X X", "O O _", "O _ _"])
    p1 = ScriptedPlayer(O, [])
    p2 = ScriptedPlayer(X, [])
    game = Game(board=board, players=(p1, p2))

    assert game.play() == GameOutcome.PLAYER_TWO_WINS
    assert game.winner is p2
    assert p1.calls == 0


def test_board_already_full_is_a_draw():
    board = Board.from_rows(["O X O", "X O X", "X O X"])
    game = Game(board=board, players=(ScriptedPlayer(O, []), ScriptedPlayer(X, [])))
    assert game.play() == GameOutcome.DRAW


# ==================== HUMAN VS AI ====================

def test_ai_takes_center_blocks_then_wins(fast_config, recording_display):
    lines = ["1 1", "1 2", "2 1"]
    game = Game(display=recording_display, read_input=scripted(*lines), config=fast_config)
    assert game.select_mode("2")

    outcome = game.play()

    assert outcome == GameOutcome.PLAYER_TWO_WINS
    moves = [(move.mark, move.position) for move in game.moves]
    assert moves[:4] == [
        (O, Position(1, 1)),
        (X, Position(2, 2)),    # center
        (O, Position(1, 2)),
        (X, Position(1, 3)),    # block
    ]
    assert moves[4] == (O, Position(2, 1))
    # X holds (1,3) and (2,2), so (3,1) wins before any block
    assert moves[5] == (X, Position(3, 1))


def test_ai_win_is_reported_as_automated(fast_config, recording_display):
    ai = AIPlayer(X, display=recording_display, config=fast_config)
    human = HumanPlayer(O, scripted("1 1", "3 2"))
    board = Board.from_rows(["_ _ _", "_ X _", "_ _ _"])
    game = Game(board=board, display=recording_display, players=(human, ai))

    # O (1,1); AI (1,3) corner; O (3,2); AI (3,1) wins the anti-diagonal
    assert game.play() == GameOutcome.PLAYER_TWO_WINS
    outcome_call = recording_display.of_kind("outcome")[0]
    assert outcome_call[2] is ai
    assert outcome_call[2].is_automated
