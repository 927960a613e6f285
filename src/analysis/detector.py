"""
Motor Pulse Analyzer - Pulse Detector

One forward pass per motor. A pulse opens on the first sample strictly
above the on threshold and closes on the first sample strictly below it;
a sample exactly at the threshold keeps an open pulse open.
"""

import logging
from statistics import fmean
from typing import Sequence

from src.analysis.base import AnalyzerConfig, MotorLog, Pulse

logger = logging.getLogger(__name__)


def average_current(currents: Sequence[float], start: int, end: int) -> float:
    """Arithmetic mean over the closed index interval [start, end]."""
    if end < start:
        raise ValueError(f"Empty interval [{start}, {end}].")
    return fmean(currents[start:end + 1])


def detect_pulses(
    currents: Sequence[float],
    motor: int = 1,
    config: AnalyzerConfig | None = None,
) -> list[Pulse]:
    """
    Find every pulse in one motor's current series.

    Args:
        currents: Readings in time order
        motor: 1-based motor number recorded on each Pulse
        config: Thresholds (defaults to 1.0 A on, 8.0 A exceed)

    Returns:
        Pulses in increasing start order
    """
    config = config or AnalyzerConfig()
    pulses: list[Pulse] = []
    motor_on = False
    current_exceeded = False
    start = 0

    for time, current in enumerate(currents):
        if not motor_on and current > config.on_threshold:
            motor_on = True
            start = time
        if motor_on and current > config.exceed_threshold:
            current_exceeded = True
        if motor_on and current < config.on_threshold:
            pulses.append(Pulse(
                motor=motor,
                start=start,
                end=time - 1,
                average_current=average_current(currents, start, time - 1),
                exceeded=current_exceeded,
            ))
            motor_on = False
            current_exceeded = False

    if motor_on:
        last = len(currents) - 1
        if config.close_open_pulse:
            logger.info("Motor %d still on at sample %d; closing pulse there", motor, last)
            pulses.append(Pulse(
                motor=motor,
                start=start,
                end=last,
                average_current=average_current(currents, start, last),
                exceeded=current_exceeded,
            ))
        else:
            logger.warning(
                "Motor %d still on at sample %d; dropping unfinished pulse from %d",
                motor, last, start,
            )

    return pulses


def analyze_log(
    log: MotorLog,
    config: AnalyzerConfig | None = None,
) -> dict[int, list[Pulse]]:
    """Detect pulses for every motor. Keys are 1-based motor numbers."""
    config = config or AnalyzerConfig()
    results: dict[int, list[Pulse]] = {}
    for motor in range(1, config.motor_count + 1):
        results[motor] = detect_pulses(log.currents(motor), motor, config)
        logger.debug("Motor %d: %d pulse(s)", motor, len(results[motor]))
    return results
