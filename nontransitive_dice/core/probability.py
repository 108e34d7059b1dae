"""
probability.py
Brute-force win probabilities between dice, used by the help table and by agents.
Related modules:
- dice.py: Die model.
- channels/console.py: Renders probability_table() for the '?' help option.
"""

from dataclasses import dataclass
from typing import List, Sequence

from .dice import Die


@dataclass(frozen=True)
class ProbabilityRow:
    """
    Win/draw chances for one unordered pair of dice.
    Fields:
        first, second (int): Die indices, first < second.
        first_wins, second_wins, draw (float): Probabilities in [0, 1], summing to 1.
    """
    first: int
    second: int
    first_wins: float
    second_wins: float
    draw: float


def win_probability(a: Die, b: Die) -> float:
    """
    Probability that a throw of `a` is strictly higher than a throw of `b`.
    Counts every pair of faces, so repeated faces weigh in naturally.
    """
    wins = sum(1 for fa in a.faces for fb in b.faces if fa > fb)
    return wins / (len(a) * len(b))


def probability_table(dice: Sequence[Die]) -> List[ProbabilityRow]:
    """
    One row per unordered pair of dice, in index order.
    """
    rows = []
    for i in range(len(dice)):
        for j in range(i + 1, len(dice)):
            w1 = win_probability(dice[i], dice[j])
            w2 = win_probability(dice[j], dice[i])
            rows.append(ProbabilityRow(i, j, w1, w2, 1.0 - w1 - w2))
    return rows
