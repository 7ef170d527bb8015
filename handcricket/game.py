"""Interactive hand-cricket match between a player and the computer."""

from __future__ import annotations

import random
import sys
from collections.abc import Container, Iterator
from enum import Enum
from typing import TextIO

from .players import FACES, Batsman, Bowler, pick_from_distribution

_MOVE_PROMPT = "Enter a number from 1 to 6 for your move"
_MOVE_RETRY = "Please enter a number from 1 to 6"


class Outcome(Enum):
    """Result of a match, seen from the player's side."""

    WON = "won"
    LOST = "lost"
    DRAW = "draw"


def toss(rng: random.Random | None = None) -> int:
    """The computer's number for the toss, uniform over the die."""
    return pick_from_distribution({face: 1 / 6 for face in FACES}, rng)


def _words(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


class Game:
    """One match, reading whitespace-separated numbers and writing commentary."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None,
                 rng: random.Random | None = None):
        self._tokens = _words(sys.stdin if stdin is None else stdin)
        self._out = sys.stdout if stdout is None else stdout
        self._rng = rng if rng is not None else random.Random()

    def _say(self, *lines: str) -> None:
        for line in lines:
            print(line, file=self._out)

    def _next_int(self) -> int | None:
        token = next(self._tokens, None)
        if token is None:
            raise EOFError("input ended")
        try:
            return int(token)
        except ValueError:
            return None

    def read_choice(self, valid: Container[int], prompt: str | None, retry: str) -> int:
        """Show ``prompt`` and read numbers until one is in ``valid``."""
        if prompt:
            self._say(prompt)
        while True:
            value = self._next_int()
            if value is not None and value in valid:
                return value
            self._say(retry)

    def take_move(self) -> int:
        return self.read_choice(FACES, _MOVE_PROMPT, _MOVE_RETRY)

    def player_bats_first(self) -> int:
        """The player bats until out; returns the player's score."""
        self._say("Your goal is to score as many runs as possible, "
                  "you are out if the computer and you play the same number")
        bowler = Bowler(rng=self._rng)
        score = 0
        while True:
            move = self.take_move()
            computer = bowler.next_move()
            self._say(f"The computer has played {computer}")
            if computer == move:
                self._say("Oh no! You are out", f"Your final score is {score}")
                return score
            score += move
            self._say(f"Your current score is {score}")

    def computer_bats_first(self) -> int:
        """The computer bats until out; returns the computer's score."""
        self._say("Your goal is to minimize the computer's runs, "
                  "the computer is out if you and the computer play the same number")
        batsman = Batsman(rng=self._rng)
        score = 0
        while True:
            move = self.take_move()
            computer = batsman.next_move()
            self._say(f"The computer has played {computer}")
            if computer == move:
                self._say("You have got the computer out!",
                          f"The computer's final score is {score}")
                return score
            score += computer
            self._say(f"The computer's current score is {score}")

    def player_chases(self, score: int) -> Outcome:
        """The player bats to pass the computer's ``score``."""
        self._say(f"You need {score + 1} runs to win",
                  "You are now batting, try to reach your goal before the computer gets you out!")
        bowler = Bowler(rng=self._rng)
        player_score = 0
        while True:
            move = self.take_move()
            computer = bowler.next_move()
            self._say(f"The computer has played {computer}")
            if computer == move:
                self._say("Uh oh, the computer has got you out!")
                if score == player_score:
                    self._say("This legendary game has ended in a draw")
                    return Outcome.DRAW
                self._say(f"You lost by {score - player_score} runs")
                return Outcome.LOST
            player_score += move
            if player_score > score:
                self._say("Congratulations! You have won the game",
                          f"Computer's score = {score}",
                          f"Your score = {player_score}")
                return Outcome.WON
            self._say(f"You need {score - player_score} runs to win(your score = {player_score})")

    def computer_chases(self, score: int) -> Outcome:
        """The computer bats to pass the player's ``score``."""
        self._say(f"The computer needs {score + 1} runs to win",
                  "You are now bowling, try to get the computer out before it reaches its goal!")
        batsman = Batsman(rng=self._rng)
        computer_score = 0
        while True:
            move = self.take_move()
            computer = batsman.next_move()
            self._say(f"The computer has played {computer}")
            if computer == move:
                self._say("Congratulations, you have got the computer out")
                if score == computer_score:
                    self._say("This legendary game has ended in a draw")
                    return Outcome.DRAW
                self._say(f"You have won by {score - computer_score} runs")
                return Outcome.WON
            computer_score += computer
            if computer_score > score:
                self._say("Uh ohh, you have lost.",
                          f"Computer's score = {computer_score}",
                          f"Your score = {score}")
                return Outcome.LOST
            self._say(f"The computer needs {score - computer_score} runs to win"
                      f"(computer's score = {computer_score})")

    def play(self) -> Outcome:
        """Run the toss and both innings."""
        self._say("TOSS!", "Odd(1) or even(2)?")
        call = self.read_choice((1, 2), None, "Please enter either 1 for odd or 2 for even")
        toss_prompt = "Enter a number from 1 to 6 for the toss"
        player_number = self.read_choice(FACES, toss_prompt, f"{_MOVE_RETRY}\n{toss_prompt}")
        computer_number = toss(self._rng)
        self._say(f"The computer played {computer_number}")

        computer_bowls_first = True
        if (computer_number + player_number) % 2 == call % 2:
            self._say("You won the toss, please choose if you want to bat(1) or bowl(2) first")
            computer_bowls_first = self._next_int() == 1
        else:
            self._say("You lost the toss, the computer chooses to bowl first, you will bat")

        if computer_bowls_first:
            return self.computer_chases(self.player_bats_first())
        return self.player_chases(self.computer_bats_first())


def main(argv: list[str] | None = None) -> int:
    """Play one match on the terminal."""
    try:
        Game().play()
    except (EOFError, KeyboardInterrupt):
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())