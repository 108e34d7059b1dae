"""
base.py
Defines the InteractionChannel interface through which the engine talks to the counterpart.
The engine never reads input or prints; everything goes through a channel.
Related modules:
- console.py: Interactive terminal channel.
- agent_channel.py: Counterpart played by an agent, for simulations.
- core/engine.py: The only caller.
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional, Sequence, Union

from ..core.dice import Die
from ..core.protocol import Cancelled


class InteractionChannel(ABC):
    """
    The counterpart's side of the game. Request methods return CANCELLED when the counterpart exits.
    """

    @abstractmethod
    def notify_commitment(self, digest_hex: str, range_description: str) -> None:
        """Show the house's digest before the counterpart picks a number."""
        raise NotImplementedError

    @abstractmethod
    def request_choice(self, range_: int) -> Union[int, Cancelled]:
        """Return the counterpart's number in [0, range_) or CANCELLED."""
        raise NotImplementedError

    @abstractmethod
    def reveal_secret(self, secret_value: int, key_hex: str) -> None:
        """Show the house's number and key once the result is fixed."""
        raise NotImplementedError

    @abstractmethod
    def request_die(self, dice: Sequence[Die], available: Sequence[int],
                    opponent: Optional[int] = None) -> Union[int, Cancelled]:
        """Return one of the `available` die indices or CANCELLED."""
        raise NotImplementedError

    def notify(self, event: Dict) -> None:
        """Receive an engine event (dict with a 'type' key). Ignored by default."""
        pass
