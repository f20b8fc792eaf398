"""SubgramPy - find the words hidden in a handful of letters.

Enumerate every subset and ordering of a short letter sequence and match
them against a word list in parallel.
"""

from subgrampy.core import Config, load_config
from subgrampy.processing import run_pipeline, solve
from subgrampy.utils.logging import setup_logger

__version__ = "0.1.0"
__all__ = [
    "Config",
    "load_config",
    "run_pipeline",
    "setup_logger",
    "solve",
]
