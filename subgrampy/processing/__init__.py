"""Processing pipeline for SubgramPy."""

from subgrampy.processing.pipeline import run_pipeline, solve

__all__ = ["run_pipeline", "solve"]
