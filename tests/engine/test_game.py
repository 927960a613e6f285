"""
Pig Engine - Game Loop Tests

Tests for PigGame: phase transitions, banking and termination.
"""

import logging
import random

import pytest
from src.engine.base import (
    Competitor,
    DiceRoll,
    GamePhase,
    GameState,
    PigConfig,
    RollCategory,
    RollOutcome,
    TurnResult,
)
from src.engine.game import GameObserver, PigGame
from src.engine.policies import HeuristicPolicy


def _turn(competitor, turn_sum):
    outcome = RollOutcome(
        competitor=competitor,
        roll=DiceRoll(values=(2, 3)),
        category=RollCategory.PLAIN,
        points=turn_sum,
        turn_sum=turn_sum,
        game_sum=0,
    )
    return TurnResult(competitor=competitor, outcomes=(outcome,), turn_sum=turn_sum)


def _heuristic_both():
    return {
        Competitor.PLAYER: HeuristicPolicy(),
        Competitor.COMPUTER: HeuristicPolicy(),
    }


class RecordingObserver(GameObserver):
    def __init__(self):
        self.events = []

    def turn_started(self, state):
        self.events.append(("start", state.current, state.turn_number))

    def roll_resolved(self, outcome):
        self.events.append(("roll", outcome.competitor, outcome.roll.values))

    def turn_ended(self, state, result):
        self.events.append(("end", result.competitor, result.turn_sum))


class TestApplyTurn:
    """Tests for PigGame.apply_turn()."""

    def test_player_moves_first(self):
        assert PigGame.new_game().phase is GamePhase.PLAYER_TURN

    def test_banks_player_turn(self):
        state = PigGame.apply_turn(GameState(), _turn(Competitor.PLAYER, 12), PigConfig())
        assert state.player_sum == 12
        assert state.computer_sum == 0
        assert state.phase is GamePhase.COMPUTER_TURN
        assert state.turn_number == 2

    def test_banks_computer_turn(self):
        start = GameState(player_sum=12, phase=GamePhase.COMPUTER_TURN, turn_number=2)
        state = PigGame.apply_turn(start, _turn(Competitor.COMPUTER, 20), PigConfig())
        assert state.computer_sum == 20
        assert state.player_sum == 12
        assert state.phase is GamePhase.PLAYER_TURN

    def test_reaching_target_ends_game(self):
        start = GameState(player_sum=90)
        state = PigGame.apply_turn(start, _turn(Competitor.PLAYER, 10), PigConfig())
        assert state.phase is GamePhase.GAME_OVER
        assert state.player_sum == 100
        assert PigGame.winner(state, PigConfig()) is Competitor.PLAYER

    def test_exceeding_target_ends_game(self):
        start = GameState(computer_sum=80, phase=GamePhase.COMPUTER_TURN)
        state = PigGame.apply_turn(start, _turn(Competitor.COMPUTER, 45), PigConfig())
        assert state.is_over
        assert state.computer_sum == 125

    def test_zero_turn_does_not_change_sum(self):
        start = GameState(player_sum=40)
        state = PigGame.apply_turn(start, _turn(Competitor.PLAYER, 0), PigConfig())
        assert state.player_sum == 40
        assert state.phase is GamePhase.COMPUTER_TURN

    def test_wrong_competitor_raises(self):
        with pytest.raises(ValueError, match="not Computer's turn"):
            PigGame.apply_turn(GameState(), _turn(Competitor.COMPUTER, 5), PigConfig())

    def test_finished_game_raises(self):
        with pytest.raises(ValueError, match="finished game"):
            PigGame.apply_turn(
                GameState(phase=GamePhase.GAME_OVER),
                _turn(Competitor.PLAYER, 5),
                PigConfig(),
            )

    def test_no_winner_mid_game(self):
        assert PigGame.winner(GameState(player_sum=99, computer_sum=99), PigConfig()) is None


class TestPlayNextTurn:
    """Tests for PigGame.play_next_turn()."""

    def test_player_turn_with_scripted_dice(self, scripted_dice):
        state, result = PigGame.play_next_turn(
            GameState(), _heuristic_both(), scripted_dice(1, 4), PigConfig()
        )
        assert result.is_bust
        assert state.player_sum == 0
        assert state.phase is GamePhase.COMPUTER_TURN

    def test_observer_sees_turn(self, scripted_dice):
        observer = RecordingObserver()
        PigGame.play_next_turn(
            GameState(), _heuristic_both(), scripted_dice(3, 3, 1, 5), PigConfig(), observer
        )
        assert observer.events == [
            ("start", Competitor.PLAYER, 1),
            ("roll", Competitor.PLAYER, (3, 3)),
            ("roll", Competitor.PLAYER, (1, 5)),
            ("end", Competitor.PLAYER, 0),
        ]

    def test_logs_roll_count(self, scripted_dice, caplog):
        with caplog.at_level(logging.INFO, logger="src.engine.game"):
            PigGame.play_next_turn(
                GameState(), _heuristic_both(), scripted_dice(3, 3, 1, 5), PigConfig()
            )
        assert "Player banked 0 in 2 roll(s)" in caplog.text

    def test_game_over_raises(self, scripted_dice):
        with pytest.raises(ValueError, match="already over"):
            PigGame.play_next_turn(
                GameState(phase=GamePhase.GAME_OVER),
                _heuristic_both(),
                scripted_dice(),
                PigConfig(),
            )


class TestPlayGame:
    """Tests for PigGame.play_game()."""

    def test_scripted_game_player_wins(self, scripted_dice):
        # heuristic holds once the turn sum reaches 40
        dice = scripted_dice(
            6, 6, 5, 6, 5, 6,   # player turn 1: 24 + 11 + 11 = 46
            1, 2,               # computer turn 1: bust
            6, 6, 5, 6, 5, 6,   # player turn 2: 46 -> 92
            1, 3,               # computer turn 2: bust
            2, 3, 4, 5,         # player turn 3: 5, 9 -> 14; 92 + 14 >= 100
        )
        state = PigGame.play_game(_heuristic_both(), dice, PigConfig())
        assert state.is_over
        assert state.player_sum == 106
        assert state.computer_sum == 0
        assert PigGame.winner(state, PigConfig()) is Competitor.PLAYER

    def test_turns_alternate_player_first(self, scripted_dice):
        observer = RecordingObserver()
        dice = scripted_dice(1, 2, 1, 2, 6, 6, 6, 6, 5, 6)
        config = PigConfig(target_score=50)
        PigGame.play_game(_heuristic_both(), dice, config, observer)
        starts = [e[1] for e in observer.events if e[0] == "start"]
        assert starts == [Competitor.PLAYER, Competitor.COMPUTER, Competitor.PLAYER]

    @pytest.mark.parametrize("seed", range(25))
    def test_random_games_terminate_with_one_winner(self, seed):
        config = PigConfig()
        state = PigGame.play_game(_heuristic_both(), random.Random(seed), config)
        winner = PigGame.winner(state, config)
        assert winner is not None
        assert state.sum_of(winner) >= 100
        assert state.sum_of(winner.opponent) < 100
