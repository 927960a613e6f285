"""Console prompting: yes/no questions over an injectable line source."""

from __future__ import annotations

from typing import Callable

from src.engine.validators import validate_yes_no

LineSource = Callable[[str], str]
Writer = Callable[[str], None]


def yes_no_prompt(action: str) -> str:
    """``Roll`` -> ``Roll again? (Enter 'y' or 'n'): ``"""
    return f"{action} again? (Enter 'y' or 'n'): "


def ask_yes_no(
    action: str,
    read_line: LineSource = input,
    write: Writer = print,
) -> bool:
    """Ask until the answer is exactly ``y`` or ``n``.

    Invalid answers are echoed back with an error and the question is
    repeated; nothing else happens.

    Raises:
        EOFError: If the line source is exhausted
    """
    while True:
        answer = read_line(yes_no_prompt(action))
        try:
            return validate_yes_no(answer)
        except ValueError as err:
            write(str(err))


def wait_for_enter(message: str, read_line: LineSource = input) -> None:
    """Show ``message`` and block until a line is entered."""
    read_line(message + "\n")
