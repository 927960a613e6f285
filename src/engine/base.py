"""
Pig Engine - Base Classes

This module defines the foundational data structures and enums used by the
two-dice Pig engine. Rolls, outcomes and game states are frozen dataclasses;
the engine passes them in and returns new ones, it never mutates them.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Sequence


NUM_DICE = 2


class Competitor(Enum):
    """The two sides of a Pig game. The value is the display name only."""
    PLAYER = "Player"
    COMPUTER = "Computer"

    @property
    def opponent(self) -> "Competitor":
        """The competitor who moves after this one."""
        if self is Competitor.PLAYER:
            return Competitor.COMPUTER
        return Competitor.PLAYER


class RollCategory(Enum):
    """How a two-dice roll is resolved."""
    DOUBLE_ONES = auto()   # +25, must roll again
    DOUBLES = auto()       # +2 x sum, must roll again
    SINGLE_ONE = auto()    # turn over, turn sum forfeited
    PLAIN = auto()         # +sum, competitor chooses

    @property
    def forces_reroll(self) -> bool:
        """Doubles of any kind take the decision away from the competitor."""
        return self in (RollCategory.DOUBLE_ONES, RollCategory.DOUBLES)

    @property
    def ends_turn(self) -> bool:
        return self is RollCategory.SINGLE_ONE


class GamePhase(Enum):
    """States of the game loop."""
    PLAYER_TURN = auto()
    COMPUTER_TURN = auto()
    GAME_OVER = auto()


_PHASE_FOR: dict[Competitor, GamePhase] = {
    Competitor.PLAYER: GamePhase.PLAYER_TURN,
    Competitor.COMPUTER: GamePhase.COMPUTER_TURN,
}


def phase_for(competitor: Competitor) -> GamePhase:
    """The turn phase in which ``competitor`` moves."""
    return _PHASE_FOR[competitor]


@dataclass(frozen=True)
class DiceRoll:
    """
    Immutable representation of a two-dice roll.

    Attributes:
        values: Tuple of dice face values
        sides: Number of faces on each die
    """
    values: tuple[int, ...]
    sides: int = 6

    def __post_init__(self) -> None:
        """Validate dice count and that values are within range."""
        if len(self.values) != NUM_DICE:
            raise ValueError(
                f"A Pig roll uses exactly {NUM_DICE} dice, got {len(self.values)}."
            )
        for value in self.values:
            if not (1 <= value <= self.sides):
                raise ValueError(
                    f"Invalid die value {value} for a {self.sides}-sided die. "
                    f"Must be between 1 and {self.sides}."
                )

    @property
    def total(self) -> int:
        """Sum of the pips showing."""
        return sum(self.values)

    @property
    def is_doubles(self) -> bool:
        return self.values[0] == self.values[1]

    @classmethod
    def from_sequence(cls, values: Sequence[int], sides: int = 6) -> "DiceRoll":
        """Create a DiceRoll from any sequence type."""
        return cls(values=tuple(values), sides=sides)


@dataclass(frozen=True)
class RollOutcome:
    """
    Result of resolving one roll inside a turn.

    Attributes:
        competitor: Who rolled
        roll: The dice that were rolled
        category: How the roll was classified
        points: Points the roll added to the turn sum (0 on a single one)
        turn_sum: Turn sum after this roll
        game_sum: The competitor's game sum at the start of the turn
    """
    competitor: Competitor
    roll: DiceRoll
    category: RollCategory
    points: int
    turn_sum: int
    game_sum: int

    @property
    def potential_game_sum(self) -> int:
        """Game sum the competitor would have if the turn ended now."""
        return self.game_sum + self.turn_sum


@dataclass(frozen=True)
class TurnResult:
    """
    Complete record of a finished turn.

    Attributes:
        competitor: Who took the turn
        outcomes: Every roll made during the turn, in order
        turn_sum: Points banked by the turn (0 when it ended on a single one)
    """
    competitor: Competitor
    outcomes: tuple[RollOutcome, ...]
    turn_sum: int

    @property
    def is_bust(self) -> bool:
        """True if the turn ended by rolling a single one."""
        return bool(self.outcomes) and self.outcomes[-1].category.ends_turn

    @property
    def roll_count(self) -> int:
        return len(self.outcomes)


@dataclass(frozen=True)
class PigConfig:
    """
    Configuration for a game of Pig.

    Attributes:
        target_score: Game sum needed to win
        computer_turn_cap: Turn sum at which the computer always holds
        dice_sides: Faces on each die
    """
    target_score: int = 100
    computer_turn_cap: int = 40
    dice_sides: int = 6

    def __post_init__(self) -> None:
        """Validate configuration."""
        if self.target_score <= 0:
            raise ValueError(
                f"Target score must be positive, got {self.target_score}."
            )
        if self.computer_turn_cap <= 0:
            raise ValueError(
                f"Computer turn cap must be positive, got {self.computer_turn_cap}."
            )
        if self.dice_sides < 2:
            raise ValueError(
                f"Dice need at least 2 sides, got {self.dice_sides}."
            )


@dataclass(frozen=True)
class GameState:
    """
    Snapshot of a game between turns.

    Attributes:
        player_sum: The human's game sum
        computer_sum: The computer's game sum
        phase: Whose turn is next, or GAME_OVER
        turn_number: 1-based number of the next turn
    """
    player_sum: int = 0
    computer_sum: int = 0
    phase: GamePhase = GamePhase.PLAYER_TURN
    turn_number: int = 1

    @property
    def round_number(self) -> int:
        """A round is one player turn followed by one computer turn."""
        return (self.turn_number + 1) // 2

    @property
    def is_over(self) -> bool:
        return self.phase is GamePhase.GAME_OVER

    @property
    def current(self) -> Competitor | None:
        """Competitor due to move, or None once the game is over."""
        for competitor, phase in _PHASE_FOR.items():
            if phase is self.phase:
                return competitor
        return None

    def sum_of(self, competitor: Competitor) -> int:
        if competitor is Competitor.PLAYER:
            return self.player_sum
        return self.computer_sum
