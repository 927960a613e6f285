"""
Pig Engine - Input Validation Utilities

Provides validation functions for engine inputs. All validators
either return validated data or raise descriptive ValueError exceptions.
"""

from typing import Sequence

from src.engine.base import NUM_DICE


def validate_dice_values(
    values: Sequence[int],
    sides: int = 6,
    count: int = NUM_DICE,
) -> tuple[int, ...]:
    """
    Validate and normalize dice values.

    Args:
        values: Sequence of dice values to validate
        sides: Faces on each die (determines valid range)
        count: Exact number of dice required

    Returns:
        Validated values as a tuple

    Raises:
        ValueError: If validation fails
    """
    values_tuple = tuple(values)
    if len(values_tuple) != count:
        raise ValueError(f"Exactly {count} dice required, got {len(values_tuple)}.")

    for i, value in enumerate(values_tuple):
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError(f"Die value at index {i} must be an integer, got {type(value).__name__}.")
        if not (1 <= value <= sides):
            raise ValueError(
                f"Die value at index {i} is {value}, must be between 1 and {sides}."
            )

    return values_tuple


def validate_score(score: int, allow_negative: bool = False) -> int:
    """
    Validate a score value.

    Args:
        score: Score to validate
        allow_negative: Whether negative scores are allowed

    Returns:
        Validated score

    Raises:
        ValueError: If score is invalid
    """
    if not isinstance(score, int):
        raise ValueError(f"Score must be an integer, got {type(score).__name__}.")

    if not allow_negative and score < 0:
        raise ValueError(f"Score cannot be negative, got {score}.")

    return score


def validate_yes_no(answer: str) -> bool:
    """
    Interpret a console answer.

    Only the literal strings "y" and "n" are accepted; no trimming or
    case folding is applied.

    Raises:
        ValueError: If the answer is anything else
    """
    if answer == "y":
        return True
    if answer == "n":
        return False
    raise ValueError(f"{answer} is not 'y' nor 'n'. Please try again.")
