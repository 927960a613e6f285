"""
Pig Engine - Turn Resolver

Two-dice push-your-luck game. Each roll is classified:

* both dice 1: add 25 to the turn sum and roll again
* doubles: add twice the dice sum and roll again
* a single 1: the turn is over and the turn sum is lost
* anything else: add the dice sum, then the competitor may hold or roll

All methods are stateless class methods operating on immutable data.
Randomness is supplied by the caller.
"""

import logging
from typing import Callable, Protocol, Sequence

from src.engine.base import (
    NUM_DICE,
    Competitor,
    DiceRoll,
    PigConfig,
    RollCategory,
    RollOutcome,
    TurnResult,
)
from src.engine.policies import ContinuationPolicy
from src.engine.validators import validate_dice_values, validate_score

logger = logging.getLogger(__name__)


DOUBLE_ONES_BONUS = 25


class RandomSource(Protocol):
    """Anything with ``random.Random.randint`` semantics."""

    def randint(self, a: int, b: int) -> int: ...


RollObserver = Callable[[RollOutcome], None]


class PigEngine:
    """
    Stateless engine for two-dice Pig.

    All methods are class methods operating on immutable data.
    State is passed in and returned, never stored.
    """

    NUM_DICE = NUM_DICE

    @classmethod
    def roll_dice(cls, rng: RandomSource, sides: int = 6) -> DiceRoll:
        """Roll two dice.

        Args:
            rng: Source of uniformly distributed integers
            sides: Faces on each die

        Returns:
            DiceRoll with two values in [1, sides]
        """
        values = tuple(rng.randint(1, sides) for _ in range(cls.NUM_DICE))
        return DiceRoll(values=values, sides=sides)

    @classmethod
    def _as_roll(cls, dice: DiceRoll | Sequence[int]) -> DiceRoll:
        if isinstance(dice, DiceRoll):
            return dice
        return DiceRoll.from_sequence(validate_dice_values(dice))

    @classmethod
    def classify(cls, dice: DiceRoll | Sequence[int]) -> RollCategory:
        """Classify a roll according to the Pig rule table."""
        roll = cls._as_roll(dice)
        if roll.is_doubles:
            return RollCategory.DOUBLE_ONES if roll.values[0] == 1 else RollCategory.DOUBLES
        if 1 in roll.values:
            return RollCategory.SINGLE_ONE
        return RollCategory.PLAIN

    @classmethod
    def _score(cls, roll: DiceRoll, category: RollCategory) -> int:
        if category is RollCategory.DOUBLE_ONES:
            return DOUBLE_ONES_BONUS
        if category is RollCategory.DOUBLES:
            return 2 * roll.total
        if category is RollCategory.SINGLE_ONE:
            return 0
        return roll.total

    @classmethod
    def calculate_score(cls, dice: DiceRoll | Sequence[int]) -> int:
        """Points a roll adds to the turn sum.

        A single 1 scores nothing; the caller is responsible for
        discarding the turn sum in that case.
        """
        roll = cls._as_roll(dice)
        return cls._score(roll, cls.classify(roll))

    @classmethod
    def process_roll(
        cls,
        turn_sum: int,
        roll: DiceRoll,
    ) -> tuple[int, RollCategory, int]:
        """Apply one roll to the running turn sum.

        Args:
            turn_sum: Current accumulated turn sum
            roll: The dice just rolled

        Returns:
            Tuple of (new_turn_sum, category, points)
        """
        category = cls.classify(roll)
        points = cls._score(roll, category)
        if category.ends_turn:
            return (0, category, points)
        return (turn_sum + points, category, points)

    @classmethod
    def play_turn(
        cls,
        competitor: Competitor,
        game_sum: int,
        policy: ContinuationPolicy,
        rng: RandomSource,
        config: PigConfig | None = None,
        on_roll: RollObserver | None = None,
    ) -> TurnResult:
        """Roll until the turn ends by choice or by a single 1.

        The policy is consulted only after a plain roll; doubles force
        another roll whatever the policy would say.

        Args:
            competitor: Who is taking the turn
            game_sum: The competitor's game sum before the turn
            policy: Decides whether to keep rolling after a plain roll
            rng: Source of dice values
            config: Game configuration (defaults to standard Pig)
            on_roll: Called with every RollOutcome as it happens

        Returns:
            TurnResult whose turn_sum is the amount to add to game_sum
        """
        config = config or PigConfig()
        validate_score(game_sum)
        turn_sum = 0
        outcomes: list[RollOutcome] = []

        while True:
            roll = cls.roll_dice(rng, config.dice_sides)
            new_sum, category, points = cls.process_roll(turn_sum, roll)
            outcome = RollOutcome(
                competitor=competitor,
                roll=roll,
                category=category,
                points=points,
                turn_sum=new_sum,
                game_sum=game_sum,
            )
            outcomes.append(outcome)
            turn_sum = new_sum
            logger.debug(
                "%s rolled %s (%s), turn sum %d",
                competitor.value, roll.values, category.name, turn_sum,
            )
            if on_roll is not None:
                on_roll(outcome)

            if category.ends_turn:
                break
            if category.forces_reroll:
                continue
            if not policy.should_roll_again(game_sum, turn_sum):
                break

        return TurnResult(
            competitor=competitor,
            outcomes=tuple(outcomes),
            turn_sum=turn_sum,
        )
