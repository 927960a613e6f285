"""
Motor Pulse Analyzer.

Reads a logged table of motor currents, detects current pulses per motor
and renders one text report per motor. No console dependencies.
"""

from src.analysis.base import AnalyzerConfig, MotorLog, Pulse, Sample
from src.analysis.detector import analyze_log, detect_pulses
from src.analysis.reader import LogFormatError, load_log, read_samples
from src.analysis.report import FileReportSink, render_report, write_reports

__all__ = [
    # Data Classes
    "AnalyzerConfig",
    "MotorLog",
    "Pulse",
    "Sample",
    # Errors
    "LogFormatError",
    # Operations
    "analyze_log",
    "detect_pulses",
    "load_log",
    "read_samples",
    "render_report",
    "write_reports",
    "FileReportSink",
]
