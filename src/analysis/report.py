"""
Motor Pulse Analyzer - Report Serializer

Each motor gets one CSV-style text report with CRLF line endings:

    Start (s), Finish (s), Current (A)
    12, 40, 4.125
    300, 310, 9.001, ***Current Exceeded***

A motor without pulses gets the single line ``Not used.``.

Averages are written with exactly three decimals, rounding half away from
zero on the shortest decimal representation of the value.
"""

import logging
from decimal import ROUND_HALF_UP, Decimal, localcontext
from pathlib import Path
from typing import Iterable, Mapping, Protocol

from src.analysis.base import Pulse

logger = logging.getLogger(__name__)


LINE_END = "\r\n"
HEADER = "Start (s), Finish (s), Current (A)"
NOT_USED = "Not used."
EXCEEDED_MARKER = ", ***Current Exceeded***"

_THREE_PLACES = Decimal("0.001")


def format_average(value: float) -> str:
    """Format a current with exactly three decimals."""
    exact = Decimal(repr(value))
    with localcontext() as ctx:
        # every integer digit plus the three decimals must fit
        ctx.prec = max(ctx.prec, exact.adjusted() + 5)
        return str(exact.quantize(_THREE_PLACES, rounding=ROUND_HALF_UP))


def format_pulse(pulse: Pulse) -> str:
    """One report line, without the line ending."""
    line = f"{pulse.start}, {pulse.end}, {format_average(pulse.average_current)}"
    if pulse.exceeded:
        line += EXCEEDED_MARKER
    return line


def render_report(pulses: Iterable[Pulse]) -> str:
    """Full report text for one motor."""
    lines = [format_pulse(pulse) for pulse in pulses]
    if not lines:
        return NOT_USED + LINE_END
    return LINE_END.join([HEADER, *lines]) + LINE_END


class ReportSink(Protocol):
    """Accepts and persists one report per motor."""

    def write(self, motor: int, text: str) -> None: ...


class FileReportSink:
    """Writes each report to ``directory / template.format(number=motor)``."""

    def __init__(
        self,
        directory: str | Path = ".",
        template: str = "Motor{number}.csv",
    ) -> None:
        self.directory = Path(directory)
        self.template = template

    def path_for(self, motor: int) -> Path:
        return self.directory / self.template.format(number=motor)

    def write(self, motor: int, text: str) -> None:
        path = self.path_for(motor)
        # newline="" keeps the CRLF endings exactly as rendered
        with path.open("w", encoding="utf-8", newline="") as handle:
            handle.write(text)
        logger.debug("Wrote report for motor %d to %s", motor, path)


def write_reports(
    results: Mapping[int, Iterable[Pulse]],
    sink: ReportSink,
) -> dict[int, str]:
    """Render every motor's report and hand it to ``sink``.

    Returns:
        The rendered text keyed by motor number
    """
    reports = {motor: render_report(pulses) for motor, pulses in results.items()}
    for motor in sorted(reports):
        sink.write(motor, reports[motor])
    return reports
