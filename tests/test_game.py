import io
import random

import pytest

from handcricket.game import Game, Outcome, main, toss


class _FixedRng:
    def __init__(self, value):
        self.value = value

    def randrange(self, stop):
        return self.value


def _game(text, value=0):
    out = io.StringIO()
    return Game(io.StringIO(text), out, _FixedRng(value)), out


def test_toss_bounds():
    assert toss(_FixedRng(0)) == 1
    assert toss(_FixedRng(3455)) == 6


def test_toss_covers_the_die():
    rng = random.Random(3)
    assert {toss(rng) for _ in range(1000)} == {1, 2, 3, 4, 5, 6}


def test_read_choice_retries_on_bad_input():
    game, out = _game("x 9\n2\n")
    assert game.read_choice((1, 2), "Pick", "Again") == 2
    assert out.getvalue().splitlines() == ["Pick", "Again", "Again"]


def test_read_choice_raises_at_end_of_input():
    game, _ = _game("7\n")
    with pytest.raises(EOFError):
        game.read_choice((1, 2), None, "Again")


def test_take_move_rejects_out_of_range():
    game, out = _game("0 7 4")
    assert game.take_move() == 4
    assert out.getvalue().count("Please enter a number from 1 to 6") == 2


def test_player_bats_first_sums_moves():
    moves = [4, 5]
    game, out = _game(" ".join(map(str, moves)) + " 1")
    assert game.player_bats_first() == sum(moves)
    assert f"Your final score is {sum(moves)}" in out.getvalue()


def test_computer_bats_first_counts_its_own_runs():
    game, out = _game("3 3 3 1")
    score = game.computer_bats_first()
    assert score == out.getvalue().count("The computer's current score")
    assert "You have got the computer out!" in out.getvalue()


def test_player_chases_and_wins():
    target = 2
    game, out = _game("2 2")
    assert game.player_chases(target) is Outcome.WON
    assert "Congratulations! You have won the game" in out.getvalue()


def test_player_out_for_nothing_loses():
    target = 3
    game, out = _game("1")
    assert game.player_chases(target) is Outcome.LOST
    assert f"You lost by {target} runs" in out.getvalue()


def test_player_out_level_is_draw():
    game, out = _game("1")
    assert game.player_chases(0) is Outcome.DRAW
    assert "This legendary game has ended in a draw" in out.getvalue()


def test_computer_chase_passes_target():
    game, out = _game("2")
    assert game.computer_chases(0) is Outcome.LOST
    assert "Uh ohh, you have lost." in out.getvalue()


def test_computer_chase_ends_level():
    game, out = _game("2 1")
    assert game.computer_chases(1) is Outcome.DRAW
    assert "This legendary game has ended in a draw" in out.getvalue()


def test_full_game_after_losing_toss():
    game, out = _game("1\n1\n4\n5\n1\n2\n2\n1\n")
    assert game.play() is Outcome.WON
    text = out.getvalue()
    assert "You lost the toss, the computer chooses to bowl first, you will bat" in text
    assert "You have won by" in text


def test_full_game_after_winning_toss_and_bowling():
    game, out = _game("2\n1\n2\n3\n3\n1\n2\n2\n")
    assert game.play() is Outcome.WON
    text = out.getvalue()
    assert "You won the toss" in text
    assert "Congratulations! You have won the game" in text


def test_toss_prompt_repeats_after_bad_number():
    game, out = _game("1\n8\n1\n4\n1\n1\n")
    game.play()
    assert out.getvalue().count("Enter a number from 1 to 6 for the toss") == 2


def test_main_returns_failure_on_empty_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    monkeypatch.setattr("sys.stdout", io.StringIO())
    assert main() == 1