"""
Pig - Console Entrypoint

A human plays against the heuristic computer.
"""

from __future__ import annotations

import logging
import random
import sys
from functools import partial

from src.config import configure_logging, get_settings
from src.engine.base import (
    Competitor,
    GameState,
    PigConfig,
    RollCategory,
    RollOutcome,
    TurnResult,
)
from src.engine.game import GameObserver, PigGame
from src.engine.pig import DOUBLE_ONES_BONUS, RandomSource
from src.engine.policies import default_policies
from src.ui.prompts import LineSource, Writer, ask_yes_no, wait_for_enter

logger = logging.getLogger(__name__)


_NUMBER_NAMES = ("one", "two", "three", "four", "five", "six")

_CATEGORY_BANNERS: dict[RollCategory, str] = {
    RollCategory.DOUBLE_ONES: "DOUBLE ONES!",
    RollCategory.DOUBLES: "DOUBLES!",
    RollCategory.SINGLE_ONE: "TURN OVER! Turn sum is zero!",
}


def number_name(value: int) -> str:
    """``4`` -> ``four``; values past six are written as digits."""
    if 1 <= value <= len(_NUMBER_NAMES):
        return _NUMBER_NAMES[value - 1]
    return str(value)


def rules_text(config: PigConfig) -> str:
    return (
        f"\nHello player, and welcome to the 2 {number_name(config.dice_sides)}"
        "-sided dice version of the game of Pig!\n"
        "You will be competing against the computer.\n\n"
        "Here are the rules:\n\n"
        f"\t- The first player to accumulate a score of {config.target_score} or more wins.\n"
        "\t- The human goes first.\n"
        "\t- After one roll, a player has the choice to \"hold\" or to roll again.\n"
        "\t- Two dice are rolled. Certain conditions apply:\n"
        f"\t\t- If both dice are ones, then you add {DOUBLE_ONES_BONUS} to your turn score, and you must roll again.\n"
        "\t\t- If one dice is one, then your turn is over and your turn score is set to zero.\n"
        "\t\t- If both dice match (\"doubles\"), other than ones, then you gain twice the sum of"
        " the dice, and you must roll again.\n"
        "\t\t  For example if you rolled 2 fours, you would gain 16 and then have to roll again.\n"
        "\t\t- For any other dice combination, you just add the dice total to your turn score and"
        " you have the choice of rolling again.\n"
        "\t- When your turn is over, either through your choice or you rolled a one, then your"
        " turn sum is added to your accumulated score.\n\n"
        "Good luck!"
    )


def winner_banner(winner: Competitor) -> str:
    return f"\n*****The {winner.value} wins!*****\n"


class ConsoleObserver(GameObserver):
    """Narrates the game on the console."""

    def __init__(self, read_line: LineSource = input, write: Writer = print) -> None:
        self.read_line = read_line
        self.write = write

    def turn_started(self, state: GameState) -> None:
        competitor = state.current
        wait_for_enter(
            f"\nPress <enter> to start round {state.round_number}, "
            f"turn {state.turn_number} ({competitor.value}'s turn).",
            self.read_line,
        )
        if competitor is Competitor.PLAYER:
            self.write(f"{competitor.value}'s turn:\n")
        else:
            self.write(f"\n{competitor.value}'s turn:\n")

    def roll_resolved(self, outcome: RollOutcome) -> None:
        name = outcome.competitor.value
        first, second = outcome.roll.values
        self.write(f"{name} rolled {number_name(first)} + {number_name(second)}")
        banner = _CATEGORY_BANNERS.get(outcome.category)
        if banner:
            self.write(banner)
        if outcome.category.ends_turn:
            return
        self.write(
            f"{name}'s turn sum is: {outcome.turn_sum} and game sum would be: "
            f"{outcome.potential_game_sum}."
        )
        if outcome.category.forces_reroll:
            self.write(f"{name} must roll again!")

    def turn_ended(self, state: GameState, result: TurnResult) -> None:
        if not result.is_bust:
            self.write(f"The {result.competitor.value} has decided to end their turn.")
        self.write(
            f"\nPlayer's sum is: {state.player_sum}, "
            f"Computer's sum is: {state.computer_sum}."
        )


def play_session(
    config: PigConfig,
    rng: RandomSource,
    read_line: LineSource = input,
    write: Writer = print,
) -> int:
    """Play games until the player declines another.

    Returns:
        Number of games played
    """
    decide = partial(ask_yes_no, "Roll", read_line, write)
    policies = default_policies(config, decide)
    observer = ConsoleObserver(read_line, write)

    write(rules_text(config))
    games = 0
    while True:
        state = PigGame.play_game(policies, rng, config, observer)
        games += 1
        write(winner_banner(PigGame.winner(state, config)))
        if not ask_yes_no("Play", read_line, write):
            break
    write("\nThanks for playing! Have a wonderful day!")
    return games


def main(
    read_line: LineSource = input,
    write: Writer = print,
    rng: RandomSource | None = None,
) -> int:
    """Console script entrypoint."""
    settings = get_settings()
    configure_logging(settings.log_level, settings.debug)
    config = settings.pig_config()
    if rng is None:
        rng = random.Random(settings.pig_seed)

    try:
        games = play_session(config, rng, read_line, write)
    except (EOFError, KeyboardInterrupt):
        write("\nThanks for playing! Have a wonderful day!")
        return 0
    logger.info("Session finished after %d game(s)", games)
    return 0


if __name__ == "__main__":
    sys.exit(main())
