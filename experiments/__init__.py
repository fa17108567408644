"""Demonstration runs and report rendering built on the wordentropy core."""

from .demo import DemoCase, run_demo
from .report import format_validation_report, results_frame

__all__ = ["DemoCase", "format_validation_report", "results_frame", "run_demo"]
