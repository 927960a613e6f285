"""
Pig & Motor Pulse - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

from typing import Callable, Iterable

import pytest

from src.config.settings import get_settings


class ScriptedDice:
    """Stand-in for random.Random that replays fixed dice values."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = iter(values)
        self.calls = 0

    def randint(self, a: int, b: int) -> int:
        self.calls += 1
        value = next(self._values)
        assert a <= value <= b
        return value


class CannedInput:
    """Stand-in for input() that replays fixed answers and records prompts."""

    def __init__(self, answers: Iterable[str]) -> None:
        self._answers = iter(answers)
        self.prompts: list[str] = []

    def __call__(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        try:
            return next(self._answers)
        except StopIteration:
            raise EOFError from None


@pytest.fixture
def scripted_dice() -> Callable[..., ScriptedDice]:
    """Factory: scripted_dice(3, 4, 1, 2) rolls (3, 4) then (1, 2)."""
    return lambda *values: ScriptedDice(values)


@pytest.fixture
def canned_input() -> Callable[..., CannedInput]:
    """Factory: canned_input("y", "n") answers two prompts."""
    return lambda *answers: CannedInput(answers)


@pytest.fixture
def output_lines() -> list[str]:
    """Collects everything written through a ``write`` callable."""
    return []


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# PIG ROLL TEST DATA
# =============================================================================

@pytest.fixture
def pig_rolls() -> dict[str, tuple[tuple[int, int], int, str]]:
    """
    Roll patterns with the points each adds to the turn sum.

    Returns:
        Dict mapping name to (dice_values, expected_points, category_name)
    """
    return {
        "double_ones": ((1, 1), 25, "DOUBLE_ONES"),
        "double_twos": ((2, 2), 8, "DOUBLES"),
        "double_fours": ((4, 4), 16, "DOUBLES"),
        "double_sixes": ((6, 6), 24, "DOUBLES"),
        "one_and_four": ((1, 4), 0, "SINGLE_ONE"),
        "six_and_one": ((6, 1), 0, "SINGLE_ONE"),
        "two_and_three": ((2, 3), 5, "PLAIN"),
        "six_and_five": ((6, 5), 11, "PLAIN"),
    }


# =============================================================================
# MOTOR LOG TEST DATA
# =============================================================================

def _build_log_lines(series_by_motor: list[list[float]], length: int) -> list[str]:
    padded = [series + [0.0] * (length - len(series)) for series in series_by_motor]
    lines = []
    for time in range(length):
        fields = [str(time)] + [str(series[time]) for series in padded]
        lines.append(",".join(fields) + "\n")
    return lines


@pytest.fixture
def make_log_lines() -> Callable[[list[list[float]], int], list[str]]:
    """Factory: build logger rows from per-motor series, padding each with zeros."""
    return _build_log_lines


@pytest.fixture
def single_pulse_series() -> list[float]:
    """One pulse over [2, 5] averaging 4.0 that exceeds 8 A."""
    return [0, 0, 2, 3, 9, 2, 0, 0, 0, 0]


@pytest.fixture
def two_pulse_series() -> list[float]:
    """Pulses over [1, 2] (avg 2.5) and [5, 7] (avg 4.0)."""
    return [0, 2, 3, 0, 0.5, 4, 4, 4, 0, 0]
