import random

from .base import Agent
from . import register_agent


@register_agent("random")
class RandomAgent(Agent):
    """
    Picks dice and numbers uniformly at random. This is the house's default die picker.
    The rng is passed in explicitly and is separate from the secure source behind commitments,
    so tests can seed it without touching the fairness protocol.
    """
    def __init__(self, rng=None):
        """
        Args:
            rng: Optional random.Random instance.
        """
        self.rng = rng or random.Random()

    def choose_die(self, dice, available, opponent=None):
        return self.rng.choice(list(available))

    def choose_number(self, range_):
        return self.rng.randrange(range_)
