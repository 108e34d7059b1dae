"""
state.py
Defines the game state and outcome dataclasses for the non-transitive dice game.
Related modules:
- engine.py: Mutates GameState while moving through the game phases and returns a GameOutcome.
"""

from dataclasses import dataclass
from typing import Optional

COMPUTER = "computer"
COUNTERPART = "counterpart"
TIE = "tie"

INIT = "INIT"
DECIDING_TURN_ORDER = "DECIDING_TURN_ORDER"
SELECTING_DICE = "SELECTING_DICE"
ROLLING_COMPUTER = "ROLLING_COMPUTER"
ROLLING_COUNTERPART = "ROLLING_COUNTERPART"
RESOLVED = "RESOLVED"
ABORTED = "ABORTED"


def other(participant: str) -> str:
    return COUNTERPART if participant == COMPUTER else COMPUTER


@dataclass
class GameState:
    """
    Mutable state of one game. Only ever moves forward.
    Fields:
        status (str): Current phase (INIT, DECIDING_TURN_ORDER, SELECTING_DICE, ROLLING_COMPUTER,
            ROLLING_COUNTERPART, RESOLVED or ABORTED).
        first_mover (str|None): Participant who picks a die first, once decided.
        computer_die (int|None): Index of the computer's die.
        counterpart_die (int|None): Index of the counterpart's die.
        computer_roll (int|None): Face value thrown by the computer.
        counterpart_roll (int|None): Face value thrown by the counterpart.
        winner (str|None): COMPUTER, COUNTERPART or TIE once resolved.
    """
    status: str = INIT
    first_mover: Optional[str] = None
    computer_die: Optional[int] = None
    counterpart_die: Optional[int] = None
    computer_roll: Optional[int] = None
    counterpart_roll: Optional[int] = None
    winner: Optional[str] = None

    def die_of(self, participant: str) -> Optional[int]:
        return self.computer_die if participant == COMPUTER else self.counterpart_die

    def taken(self):
        return {i for i in (self.computer_die, self.counterpart_die) if i is not None}


@dataclass(frozen=True)
class GameOutcome:
    """
    What the caller of a whole session gets back.
    Fields:
        status (str): RESOLVED or ABORTED.
        winner (str|None): COMPUTER, COUNTERPART or TIE; None when aborted.
        computer_die, counterpart_die (int|None): Die indices, when selection finished.
        computer_roll, counterpart_roll (int|None): Throws, when rolling finished.
    """
    status: str
    winner: Optional[str] = None
    computer_die: Optional[int] = None
    counterpart_die: Optional[int] = None
    computer_roll: Optional[int] = None
    counterpart_roll: Optional[int] = None

    @property
    def is_aborted(self) -> bool:
        return self.status == ABORTED
