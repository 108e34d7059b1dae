import random

from .base import Agent
from ..core.probability import win_probability
from . import register_agent


@register_agent("counter")
class CounterPickAgent(Agent):
    """
    Exploits non-transitivity:
    - When the opponent already holds a die, takes the available die most likely to beat it.
    - When picking first, takes the die whose worst matchup against the others is the best.
    Numbers for the fairness protocol are uniform, since no choice can shift a fair result.
    """
    def __init__(self, rng=None):
        self.rng = rng or random.Random()

    def choose_die(self, dice, available, opponent=None):
        if opponent is not None:
            return max(available, key=lambda i: win_probability(dice[i], dice[opponent]))

        def worst_case(i):
            others = [j for j in range(len(dice)) if j != i]
            return min(win_probability(dice[i], dice[j]) for j in others)

        return max(available, key=worst_case)

    def choose_number(self, range_):
        return self.rng.randrange(range_)
