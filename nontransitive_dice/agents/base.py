from abc import ABC, abstractmethod
from typing import Optional, Sequence

from ..core.dice import Die


class Agent(ABC):
    """
    Abstract base class for all agents.
    An agent picks a die from the ones still available and, when it plays the counterpart in a
    simulation, answers the fairness protocol with its own number.
    """

    @abstractmethod
    def choose_die(self, dice: Sequence[Die], available: Sequence[int], opponent: Optional[int] = None) -> int:
        """
        Pick one index out of `available`.
        Args:
            dice (list[Die]): The whole die collection.
            available (list[int]): Indices nobody holds yet.
            opponent (int|None): Index of the die the other participant already holds, if any.
        Returns:
            int: The chosen die index.
        """
        raise NotImplementedError

    @abstractmethod
    def choose_number(self, range_: int) -> int:
        """
        Return a number in [0, range_) as the counterpart's half of a protocol run.
        """
        raise NotImplementedError
