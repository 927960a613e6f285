"""
Motor Pulse Analyzer - Logger Reader

Parses the logger table: one row per sample, each row a time value
followed by one current reading per motor, comma separated. Rows are
trimmed before splitting. Any malformed row aborts the whole read.
"""

import logging
import math
from pathlib import Path
from typing import Iterable

from src.analysis.base import AnalyzerConfig, MotorLog, Sample

logger = logging.getLogger(__name__)


class LogFormatError(ValueError):
    """A logger row could not be parsed."""

    def __init__(self, message: str, line_number: int | None = None) -> None:
        self.line_number = line_number
        if line_number is not None:
            message = f"Line {line_number}: {message}"
        super().__init__(message)


def parse_field(text: str, line_number: int | None = None) -> float:
    """Parse one numeric field. Non-finite values are rejected."""
    try:
        value = float(text)
    except ValueError:
        raise LogFormatError(f"'{text}' is not a number.", line_number) from None
    if not math.isfinite(value):
        raise LogFormatError(f"'{text}' is not a finite number.", line_number)
    return value


def parse_line(
    line: str,
    line_number: int | None = None,
    field_count: int = 8,
) -> Sample:
    """
    Parse one logger row into a Sample.

    Args:
        line: Raw row text
        line_number: 1-based row number, used in error messages
        field_count: Expected number of fields including the time column

    Raises:
        LogFormatError: If the row has the wrong field count or a bad number
    """
    fields = line.strip().split(",")
    if len(fields) != field_count:
        raise LogFormatError(
            f"Expected {field_count} fields, got {len(fields)}.", line_number
        )
    values = [parse_field(field, line_number) for field in fields]
    return Sample(time=values[0], currents=tuple(values[1:]))


def read_samples(
    lines: Iterable[str],
    config: AnalyzerConfig | None = None,
) -> MotorLog:
    """
    Read exactly ``config.sample_count`` rows from a line source.

    Rows beyond the configured count are ignored.

    Raises:
        LogFormatError: On a malformed row or if the source runs out early
    """
    config = config or AnalyzerConfig()
    samples: list[Sample] = []
    for line_number, line in enumerate(lines, start=1):
        if line_number > config.sample_count:
            break
        samples.append(parse_line(line, line_number, config.field_count))

    if len(samples) < config.sample_count:
        raise LogFormatError(
            f"Expected {config.sample_count} rows, found only {len(samples)}."
        )
    return MotorLog(samples=tuple(samples))


def load_log(path: str | Path, config: AnalyzerConfig | None = None) -> MotorLog:
    """
    Read the logger file at ``path``.

    Raises:
        LogFormatError: If the content is malformed or not UTF-8
        OSError: If the file cannot be opened or read
    """
    path = Path(path)
    logger.info("Reading logger data from %s", path)
    with path.open("r", encoding="utf-8") as handle:
        try:
            return read_samples(handle, config)
        except UnicodeDecodeError as err:
            raise LogFormatError(f"{path} is not UTF-8 text: {err.reason}.") from err
