"""
Pig Game Engine.

Pure Python game logic with zero console dependencies.
Handles dice rolling, roll classification, continuation policies and the
alternating-turn game loop.
"""

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
from src.engine.pig import PigEngine
from src.engine.policies import HeuristicPolicy, HumanPolicy, default_policies

__all__ = [
    # Data Classes
    "DiceRoll",
    "RollOutcome",
    "TurnResult",
    "GameState",
    "PigConfig",
    # Enums
    "Competitor",
    "GamePhase",
    "RollCategory",
    # Policies
    "HeuristicPolicy",
    "HumanPolicy",
    "default_policies",
    # Engines
    "PigEngine",
    "PigGame",
    "GameObserver",
]
