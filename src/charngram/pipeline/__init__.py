"""
Counting pipeline: input -> decode -> accumulate -> report.

Main entry point:
    run() - Full pipeline for one configuration

Key components:
    - runner: Orchestration, progress display, error surface
    - report: Ranking, text/JSON formatting, run summary
    - logger: Logging setup
"""

from charngram.pipeline.runner import run

__all__ = ["run"]
