"""
Pig Engine - Game Loop

Alternates PLAYER_TURN and COMPUTER_TURN, starting with the player,
and moves to GAME_OVER as soon as a game sum reaches the target.
"""

import logging
from dataclasses import replace
from typing import Mapping

from src.engine.base import (
    Competitor,
    GamePhase,
    GameState,
    PigConfig,
    RollOutcome,
    TurnResult,
    phase_for,
)
from src.engine.pig import PigEngine, RandomSource
from src.engine.policies import ContinuationPolicy

logger = logging.getLogger(__name__)


class GameObserver:
    """Receives game progress. Override the hooks you care about."""

    def turn_started(self, state: GameState) -> None:
        pass

    def roll_resolved(self, outcome: RollOutcome) -> None:
        pass

    def turn_ended(self, state: GameState, result: TurnResult) -> None:
        pass


class PigGame:
    """
    Stateless driver for a full game.

    State is passed in and returned, never stored.
    """

    @classmethod
    def new_game(cls) -> GameState:
        """Both sums at zero, player to move."""
        return GameState()

    @classmethod
    def apply_turn(
        cls,
        state: GameState,
        result: TurnResult,
        config: PigConfig,
    ) -> GameState:
        """Bank a finished turn and advance the phase."""
        if state.is_over:
            raise ValueError("Cannot apply a turn to a finished game.")
        if state.current is not result.competitor:
            raise ValueError(
                f"It is not {result.competitor.value}'s turn."
            )

        if result.competitor is Competitor.PLAYER:
            state = replace(state, player_sum=state.player_sum + result.turn_sum)
        else:
            state = replace(state, computer_sum=state.computer_sum + result.turn_sum)

        if state.sum_of(result.competitor) >= config.target_score:
            phase = GamePhase.GAME_OVER
        else:
            phase = phase_for(result.competitor.opponent)
        return replace(state, phase=phase, turn_number=state.turn_number + 1)

    @classmethod
    def winner(cls, state: GameState, config: PigConfig) -> Competitor | None:
        """The competitor whose game sum reached the target, if any."""
        for competitor in Competitor:
            if state.sum_of(competitor) >= config.target_score:
                return competitor
        return None

    @classmethod
    def play_next_turn(
        cls,
        state: GameState,
        policies: Mapping[Competitor, ContinuationPolicy],
        rng: RandomSource,
        config: PigConfig,
        observer: GameObserver | None = None,
    ) -> tuple[GameState, TurnResult]:
        """Play the turn of whoever is due to move.

        Returns:
            Tuple of (new_state, turn_result)
        """
        competitor = state.current
        if competitor is None:
            raise ValueError("The game is already over.")

        observer = observer or GameObserver()
        observer.turn_started(state)
        result = PigEngine.play_turn(
            competitor,
            state.sum_of(competitor),
            policies[competitor],
            rng,
            config,
            on_roll=observer.roll_resolved,
        )
        new_state = cls.apply_turn(state, result, config)
        logger.info(
            "Turn %d: %s banked %d in %d roll(s) (player %d, computer %d)",
            state.turn_number, competitor.value, result.turn_sum, result.roll_count,
            new_state.player_sum, new_state.computer_sum,
        )
        observer.turn_ended(new_state, result)
        return new_state, result

    @classmethod
    def play_game(
        cls,
        policies: Mapping[Competitor, ContinuationPolicy],
        rng: RandomSource,
        config: PigConfig | None = None,
        observer: GameObserver | None = None,
    ) -> GameState:
        """Play turns until someone reaches the target.

        Returns:
            The final GAME_OVER state
        """
        config = config or PigConfig()
        state = cls.new_game()
        while not state.is_over:
            state, _ = cls.play_next_turn(state, policies, rng, config, observer)
        logger.info("Game over after %d turns", state.turn_number - 1)
        return state
