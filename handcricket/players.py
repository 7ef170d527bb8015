"""Computer opponents: a batsman and a bowler that pick moves from weighted faces."""

from __future__ import annotations

import random
from collections.abc import Iterable, Mapping

FACES = range(1, 7)

# Weights handed out to the faces once they are ranked from best to worst.
RANDOMIFIER = (0.6, 0.3, 0.04, 0.03, 0.01, 0.01)

# Mixed strategies at which the expected score is the same whatever the other side does.
BATSMAN_EQUILIBRIUM = {1: 0.1887, 2: 0.1787, 3: 0.1696, 4: 0.1615, 5: 0.1542, 6: 0.1473}
BOWLER_EQUILIBRIUM = {1: 0.0562, 2: 0.1065, 3: 0.152, 4: 0.1925, 5: 0.23, 6: 0.2628}

_INF = 1_000_000_000
_RESOLUTION = 3456


def pick_from_distribution(distribution: Mapping[int, float], rng: random.Random | None = None) -> int:
    """Draw a face from ``distribution`` by walking its cumulative weights in face order."""
    if not distribution:
        raise ValueError("distribution is empty")
    rng = rng if rng is not None else random.Random()
    target = rng.randrange(_RESOLUTION) / _RESOLUTION
    faces = sorted(distribution)
    total = 0.0
    for face in faces:
        total += distribution[face]
        if total >= target:
            return face
    return faces[-1]


def _proportions(history: Mapping[int, int]) -> dict[int, float]:
    counts = {face: history.get(face, 0) for face in FACES}
    total = sum(counts.values())
    if total <= 0:
        raise ValueError("history holds no moves")
    return {face: count / total for face, count in counts.items()}


def _ranked(expected: Mapping[int, float]) -> list[int]:
    """Faces ordered by ascending expected score (whole runs), ties broken by face."""
    return sorted(FACES, key=lambda face: (int(expected[face]), face))


def _assign(ranked: Iterable[int], weights: Iterable[float]) -> dict[int, float]:
    return dict(sorted(zip(ranked, weights)))


class Batsman:
    """Computer batsman: wants to play faces the bowler rarely plays."""

    def __init__(self, distribution: Iterable[float] | None = None, rng: random.Random | None = None):
        self._rng = rng if rng is not None else random.Random()
        if distribution is None:
            self.distribution = dict(BATSMAN_EQUILIBRIUM)
            return
        weights = list(distribution)
        if len(weights) != len(FACES):
            raise ValueError("The distribution vector should be of size 6")
        total = sum(weights)
        self.distribution = {face: weight / total for face, weight in zip(FACES, weights)}

    def update_distribution(self, bowlers_history: Mapping[int, int]) -> None:
        """Favour the faces that score most against the bowler's observed habits."""
        share = _proportions(bowlers_history)
        expected = {
            face: _INF if share[face] == 0 else (1 - share[face]) * face / share[face]
            for face in FACES
        }
        self.distribution = _assign(_ranked(expected), reversed(RANDOMIFIER))

    def next_move(self) -> int:
        return pick_from_distribution(self.distribution, self._rng)


class Bowler:
    """Computer bowler: wants to play faces the batsman plays often."""

    def __init__(self, rng: random.Random | None = None):
        self._rng = rng if rng is not None else random.Random()
        self.distribution = dict(BOWLER_EQUILIBRIUM)

    def update_distribution(self, batsmans_history: Mapping[int, int]) -> None:
        """Favour the faces that hold the batsman's expected score lowest."""
        share = _proportions(batsmans_history)
        mean_run = sum(share[face] * face for face in FACES)
        expected = {
            face: _INF if share[face] == 0 else (mean_run - share[face] * face) / share[face]
            for face in FACES
        }
        self.distribution = _assign(_ranked(expected), RANDOMIFIER)

    def next_move(self) -> int:
        return pick_from_distribution(self.distribution, self._rng)