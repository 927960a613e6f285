"""
Motor Pulse Analyzer - Base Classes

Immutable data structures for logged samples, detected pulses and the
shape of the logged table.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class AnalyzerConfig:
    """
    Shape of the logged table and the detection thresholds.

    Attributes:
        motor_count: Number of motor-current columns after the time column
        sample_count: Number of rows read from the log
        on_threshold: A motor is on while its current is above this (A)
        exceed_threshold: Safety limit flagged in the report (A)
        close_open_pulse: Whether a pulse still on at the last sample is
            closed there (True) or dropped (False)
    """
    motor_count: int = 7
    sample_count: int = 1000
    on_threshold: float = 1.0
    exceed_threshold: float = 8.0
    close_open_pulse: bool = False

    def __post_init__(self) -> None:
        """Validate configuration."""
        if self.motor_count < 1:
            raise ValueError(f"At least one motor required, got {self.motor_count}.")
        if self.sample_count < 1:
            raise ValueError(f"At least one sample required, got {self.sample_count}.")
        if self.exceed_threshold < self.on_threshold:
            raise ValueError(
                f"Exceed threshold {self.exceed_threshold} is below "
                f"on threshold {self.on_threshold}."
            )

    @property
    def field_count(self) -> int:
        """Fields per row: the time column plus one per motor."""
        return 1 + self.motor_count


@dataclass(frozen=True)
class Sample:
    """
    One logged row.

    Attributes:
        time: Value of the time column
        currents: One reading per motor, motor 1 first
    """
    time: float
    currents: tuple[float, ...]


@dataclass(frozen=True)
class Pulse:
    """
    A maximal run of samples during which a motor drew current.

    Attributes:
        motor: 1-based motor number
        start: Index of the first sample above the on threshold
        end: Index of the last sample in the pulse (inclusive)
        average_current: Mean current over [start, end]
        exceeded: Whether any sample in the pulse was above the safety limit
    """
    motor: int
    start: int
    end: int
    average_current: float
    exceeded: bool = False

    @property
    def sample_count(self) -> int:
        return self.end - self.start + 1


@dataclass(frozen=True)
class MotorLog:
    """All samples read from the logger, in time order."""
    samples: tuple[Sample, ...]

    def __len__(self) -> int:
        return len(self.samples)

    @property
    def motor_count(self) -> int:
        return len(self.samples[0].currents) if self.samples else 0

    def currents(self, motor: int) -> tuple[float, ...]:
        """Current series for a 1-based motor number."""
        if not 1 <= motor <= self.motor_count:
            raise ValueError(
                f"Motor {motor} is out of range. Must be between 1 and {self.motor_count}."
            )
        return tuple(sample.currents[motor - 1] for sample in self.samples)
