"""
Pig Engine - Continuation Policies

A policy answers one question after a plain roll: keep rolling or hold?
Each Competitor variant is paired with one policy.
"""

from typing import Callable, Mapping, Protocol

from src.engine.base import Competitor, PigConfig


class ContinuationPolicy(Protocol):
    """Decides whether a competitor rolls again."""

    def should_roll_again(self, game_sum: int, turn_sum: int) -> bool: ...


class HeuristicPolicy:
    """
    Computer strategy: keep rolling while the turn is still small and
    holding would not already win the game.
    """

    def __init__(self, target_score: int = 100, turn_cap: int = 40) -> None:
        self.target_score = target_score
        self.turn_cap = turn_cap

    def should_roll_again(self, game_sum: int, turn_sum: int) -> bool:
        return (game_sum + turn_sum) < self.target_score and turn_sum < self.turn_cap


class HumanPolicy:
    """Delegates the decision to a person through ``decide``."""

    def __init__(self, decide: Callable[[], bool]) -> None:
        self._decide = decide

    def should_roll_again(self, game_sum: int, turn_sum: int) -> bool:
        return self._decide()


def default_policies(
    config: PigConfig,
    decide: Callable[[], bool],
) -> Mapping[Competitor, ContinuationPolicy]:
    """Human player against the heuristic computer."""
    return {
        Competitor.PLAYER: HumanPolicy(decide),
        Competitor.COMPUTER: HeuristicPolicy(
            target_score=config.target_score,
            turn_cap=config.computer_turn_cap,
        ),
    }
