# handcricket

Hand cricket, the schoolyard odd-or-even game, played in your terminal
against the computer.

## How the game works

1. **Toss.** Call odd (`1`) or even (`2`), then throw a number from 1 to 6.
   The computer throws one too. If the parity of the sum matches your call
   you win the toss and choose: `1` to bat first, any other answer to bowl
   first. If you lose the toss, the computer bowls first and you bat.
2. **First innings.** Each ball, both sides throw a number from 1 to 6. If
   the numbers match, the batting side is out. Otherwise the batter's number
   is added to the score.
3. **Chase.** The other side then bats to pass that score. Passing it wins
   the match; getting out on exactly the same score is a draw; getting out
   short of it loses, and the margin in runs is shown.

Invalid numbers are rejected with a prompt to try again.

## Installing

```
pip install .
```

## Playing

```
handcricket
```

The command reads whitespace-separated numbers from standard input and
prints the commentary to standard output. It exits with status 0 when the
match finishes, and with status 1 if input runs out or the game is
interrupted.

## The computer's play

During a match the computer draws every throw from a fixed mixed strategy
over 1–6: `BATSMAN_EQUILIBRIUM` when it bats and `BOWLER_EQUILIBRIUM` when
it bowls (both in `handcricket.players`). These are chosen so that its
expected outcome stays steady whatever you throw. The computer does not
learn from your throws during a match.

The `Batsman` and `Bowler` classes can also be reweighted by hand from a
count of the opponent's throws with `update_distribution`. The six faces are
ranked by the expected score they lead to, and the weights
`0.6, 0.3, 0.04, 0.03, 0.01, 0.01` are handed out along that ranking: the
batsman favours the faces that score most against the bowler's habits, the
bowler the faces that keep the batsman's score lowest. A history that holds
no throws raises `ValueError`.

## Using it from Python

```python
import random

from handcricket.players import Batsman, Bowler, pick_from_distribution
from handcricket.game import toss

rng = random.Random(7)

bowler = Bowler(rng=rng)
bowler.update_distribution({1: 4, 2: 1, 3: 0, 4: 2, 5: 0, 6: 3})
print(bowler.distribution)
print(bowler.next_move())

# A custom distribution is normalised; it must have exactly six weights.
batsman = Batsman(distribution=[1, 1, 1, 1, 1, 1], rng=rng)
print(batsman.next_move())

print(pick_from_distribution({1: 0.5, 6: 0.5}, rng))
print(toss(rng))
```

`Game` takes the input and output streams and a random generator, so a whole
match can be run against scripted input. `Game.play()` returns an `Outcome`
(`WON`, `LOST` or `DRAW`, from the player's side); if the input ends before
the match does, `EOFError` is raised.

```python
import io
import random

from handcricket.game import Game

moves = "1\n3\n1\n" + "4\n" * 200
out = io.StringIO()
game = Game(stdin=io.StringIO(moves), stdout=out, rng=random.Random(1))
outcome = game.play()
print(outcome)
print(out.getvalue())
```

The innings can also be played on their own with
`Game.player_bats_first()`, `Game.computer_bats_first()`,
`Game.player_chases(score)` and `Game.computer_chases(score)`.

## Running the tests

```
pip install .[test]
pytest
```