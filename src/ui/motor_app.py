"""
Motor Pulse Analyzer - Batch Entrypoint

Reads Logger.csv and writes one MotorN.csv report per motor.
"""

from __future__ import annotations

import logging
import sys

from src.analysis.detector import analyze_log
from src.analysis.reader import load_log
from src.analysis.report import FileReportSink, ReportSink, write_reports
from src.config import Settings, configure_logging, get_settings
from src.ui.prompts import Writer

logger = logging.getLogger(__name__)


def run_analysis(
    settings: Settings,
    sink: ReportSink | None = None,
    write: Writer = print,
) -> dict[int, str]:
    """Read the logger file, detect pulses and write every report.

    Nothing is written unless the whole log was read successfully.

    Raises:
        ValueError: If the analyzer settings are inconsistent, or
            LogFormatError if the logger file is malformed
        OSError: If reading or writing fails
    """
    config = settings.analyzer_config()
    sink = sink or FileReportSink(settings.report_dir, settings.report_name_template)

    write("Analyzing the logged motor data.")
    log = load_log(settings.logger_file, config)
    results = analyze_log(log, config)
    reports = write_reports(results, sink)
    write(
        "The analysis of the motor data has successfully completed.\n"
        "The results have been written to the Motor(num).csv files"
    )
    return reports


def main(settings: Settings | None = None, write: Writer = print) -> int:
    """Console script entrypoint. Returns the process exit code."""
    settings = settings or get_settings()
    configure_logging(settings.log_level, settings.debug)
    try:
        run_analysis(settings, write=write)
    except (ValueError, OSError) as err:
        logger.error("Motor analysis failed: %s", err)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
