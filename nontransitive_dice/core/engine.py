"""
engine.py
Implements the GameEngine class, the state machine that sequences three fairness-protocol runs
(turn order, then one throw per participant) and derives the game result from them.
Related modules:
- config.py: GameConfig is used to configure the engine.
- state.py: GameState holds the evolving game data; GameOutcome is returned to the caller.
- protocol.py: FairnessProtocol produces every random number.
- agents/: The house agent picks the computer's die.
- channels/: The InteractionChannel talks to the counterpart.
"""

import logging
import random
from typing import Dict, List, Sequence

from .config import GameConfig
from .dice import Die
from .protocol import CANCELLED, FairnessProtocol, audit
from .state import (
    ABORTED, COMPUTER, COUNTERPART, DECIDING_TURN_ORDER, INIT, RESOLVED, ROLLING_COMPUTER,
    ROLLING_COUNTERPART, SELECTING_DICE, TIE, GameOutcome, GameState, other,
)
from ..agents import create_agent

# Turn-order result that lets the counterpart pick a die first; the other value favours the computer.
COUNTERPART_FIRST = 0

# Rolls happen in this order whoever picked first.
ROLL_ORDER = (COMPUTER, COUNTERPART)


class IllegalTransitionError(Exception):
    """
    Raised when an engine step is called outside its phase (wrong order, or a finished game).
    """
    pass


class GameEngine:
    """
    Plays exactly one game between the computer (house) and a counterpart.
    Use play() for a full game, or the step methods in order:
    decide_turn_order() -> select_dice() -> roll(COMPUTER) -> roll(COUNTERPART) -> resolve().
    Every step returns False when the counterpart exits, after which the game is ABORTED.
    """
    def __init__(self, dice: Sequence[Die], channel, config: GameConfig = None, house=None,
                 protocol: FairnessProtocol = None):
        """
        Args:
            dice (list[Die]): The die collection (already validated).
            channel (InteractionChannel): The counterpart's side.
            config (GameConfig, optional): Rule options; defaults to GameConfig().
            house (Agent, optional): Picks the computer's die; defaults to config.house_agent.
            protocol (FairnessProtocol, optional): Source of fair numbers.
        """
        self.config = config or GameConfig()
        self.dice = tuple(dice)
        self.channel = channel
        self.house = house or create_agent(self.config.house_agent, rng=random.Random(self.config.rng_seed))
        self.protocol = protocol or FairnessProtocol()
        self.state = GameState()
        self._events: List[Dict] = []
        # turn_log contains a state snapshot after every transition
        self.turn_log: List[Dict] = []

    def _emit(self, event: Dict):
        """
        Internal: Record an event and forward it to the channel.
        """
        self._events.append(event)
        self.channel.notify(event)

    def pop_events(self):
        """
        Return and clear all emitted events since last call.
        """
        ev = list(self._events)
        self._events.clear()
        return ev

    def get_events(self):
        """
        Return all events emitted so far (does not clear).
        """
        return list(self._events)

    def _snapshot(self):
        snap = {
            "status": self.state.status,
            "first_mover": self.state.first_mover,
            "computer_die": self.state.computer_die,
            "counterpart_die": self.state.counterpart_die,
            "computer_roll": self.state.computer_roll,
            "counterpart_roll": self.state.counterpart_roll,
            "winner": self.state.winner,
        }
        self.turn_log.append(snap)
        return snap

    def _transition(self, expected: str, new_status: str) -> None:
        if self.state.status != expected:
            raise IllegalTransitionError(f"Expected state {expected}, game is in {self.state.status}")
        logging.debug(f"game state {self.state.status} -> {new_status}")
        self.state.status = new_status
        self._snapshot()

    def _abort(self) -> bool:
        phase = self.state.status
        logging.debug(f"game aborted during {phase}")
        self.state.status = ABORTED
        self._emit({"type": "GameAborted", "phase": phase})
        self._snapshot()
        return False

    def _fair_number(self, range_: int, stage: str):
        """
        Internal: Run the fairness protocol once and audit the result.
        Returns:
            ProtocolResult, or CANCELLED.
        """
        result = self.protocol.run(
            range_,
            self.channel.notify_commitment,
            lambda: self.channel.request_choice(range_),
            self.channel.reveal_secret,
        )
        if result is CANCELLED:
            return CANCELLED
        if self.config.audit_commitments:
            audit(result)
        self._emit({
            "type": "ProtocolResolved",
            "stage": stage,
            "range": range_,
            "choice": result.counterparty_choice,
            "secret": result.commitment.secret_value,
            "result": result.combined_value,
            "digest": result.commitment.digest_hex,
            "key": result.commitment.key_hex,
        })
        return result

    def decide_turn_order(self) -> bool:
        """
        Decide who picks a die first with a fair coin (range 2).
        Returns:
            bool: False if the counterpart exited.
        """
        self._transition(INIT, DECIDING_TURN_ORDER)
        self._emit({"type": "TurnOrderStarted"})
        result = self._fair_number(2, "turn_order")
        if result is CANCELLED:
            return self._abort()
        self.state.first_mover = COUNTERPART if result.combined_value == COUNTERPART_FIRST else COMPUTER
        self._emit({"type": "FirstMoverDecided", "first_mover": self.state.first_mover, "result": result.combined_value})
        self._transition(DECIDING_TURN_ORDER, SELECTING_DICE)
        return True

    def _pick(self, participant: str):
        available = [i for i in range(len(self.dice)) if i not in self.state.taken()]
        opponent = self.state.die_of(other(participant))
        if participant == COMPUTER:
            index = self.house.choose_die(self.dice, available, opponent)
        else:
            index = self.channel.request_die(self.dice, available, opponent)
            if index is CANCELLED:
                return CANCELLED
        if index not in available:
            raise IllegalTransitionError(f"Die {index} is not available to the {participant}")
        if participant == COMPUTER:
            self.state.computer_die = index
        else:
            self.state.counterpart_die = index
        self._emit({"type": "DieSelected", "participant": participant, "die": index, "faces": str(self.dice[index])})
        return index

    def select_dice(self) -> bool:
        """
        First mover picks any die, second mover one of the rest; the two indices end up distinct.
        Returns:
            bool: False if the counterpart exited.
        """
        if self.state.status != SELECTING_DICE:
            raise IllegalTransitionError(f"Expected state {SELECTING_DICE}, game is in {self.state.status}")
        first = self.state.first_mover
        for participant in (first, other(first)):
            if self._pick(participant) is CANCELLED:
                return self._abort()
        self._transition(SELECTING_DICE, ROLLING_COMPUTER)
        return True

    def roll(self, participant: str) -> bool:
        """
        Throw the participant's die: the fair number in [0, faces) indexes its face list.
        Returns:
            bool: False if the counterpart exited.
        """
        phase = ROLLING_COMPUTER if participant == COMPUTER else ROLLING_COUNTERPART
        if self.state.status != phase:
            raise IllegalTransitionError(f"Expected state {phase}, game is in {self.state.status}")
        if participant == COUNTERPART and self.state.counterpart_roll is not None:
            raise IllegalTransitionError("The counterpart already threw")
        die = self.dice[self.state.die_of(participant)]
        self._emit({"type": "RollStarted", "participant": participant, "range": len(die)})
        result = self._fair_number(len(die), "roll")
        if result is CANCELLED:
            return self._abort()
        value = die.faces[result.combined_value]
        if participant == COMPUTER:
            self.state.computer_roll = value
            self._transition(ROLLING_COMPUTER, ROLLING_COUNTERPART)
        else:
            self.state.counterpart_roll = value
            # resolve() is the only way out of ROLLING_COUNTERPART once both throws are known
        self._emit({"type": "RollResolved", "participant": participant, "value": value})
        return True

    def resolve(self) -> GameOutcome:
        """
        Compare the throws; strictly higher wins, equal throws are a tie.
        """
        if self.state.status != ROLLING_COUNTERPART or self.state.counterpart_roll is None:
            raise IllegalTransitionError(f"Cannot resolve a game in state {self.state.status}")
        mine, yours = self.state.computer_roll, self.state.counterpart_roll
        if mine > yours:
            self.state.winner = COMPUTER
        elif yours > mine:
            self.state.winner = COUNTERPART
        else:
            self.state.winner = TIE
        self._transition(ROLLING_COUNTERPART, RESOLVED)
        self._emit({"type": "GameResolved", "winner": self.state.winner, "computer_roll": mine, "counterpart_roll": yours})
        return self.outcome()

    def outcome(self) -> GameOutcome:
        s = self.state
        if s.status not in (RESOLVED, ABORTED):
            raise IllegalTransitionError(f"Game is still in state {s.status}")
        return GameOutcome(
            status=s.status,
            winner=s.winner,
            computer_die=s.computer_die,
            counterpart_die=s.counterpart_die,
            computer_roll=s.computer_roll,
            counterpart_roll=s.counterpart_roll,
        )

    def play(self) -> GameOutcome:
        """
        Play the whole game.
        Returns:
            GameOutcome: RESOLVED with a winner (or TIE), or ABORTED if the counterpart exited.
        Raises:
            IllegalTransitionError: If this engine already played.
        """
        if self.state.status != INIT:
            raise IllegalTransitionError("A game instance is played exactly once")
        self._emit({"type": "GameStarted", "dice": [str(d) for d in self.dice]})
        if not self.decide_turn_order():
            return self.outcome()
        if not self.select_dice():
            return self.outcome()
        for participant in ROLL_ORDER:
            if not self.roll(participant):
                return self.outcome()
        return self.resolve()

    def is_terminal(self) -> bool:
        """
        Returns True once the game is resolved or aborted.
        """
        return self.state.status in (RESOLVED, ABORTED)
