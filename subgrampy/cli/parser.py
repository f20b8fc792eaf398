"""Command-line interface for the SubgramPy project."""

import argparse
from multiprocessing import cpu_count

from subgrampy.utils import Constants


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        description="Find every dictionary word that can be built from a subset of some letters",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Prompt for the letters, search the built-in English word list
  %(prog)s -v

  # Search a custom word list (one word per line, any case)
  %(prog)s --letters retains --dictionary ~/words/it.dic

  # Single worker, wider output grid
  %(prog)s -l stare -j 1 --columns 12

  # Using JSON config
  %(prog)s --config config.json

Example config.json:
{
  "letters": "parsley",
  "dictionary": "it.dic",
  "jobs": 4,
  "chunk_size": 10000,
  "columns": 10,
  "min_display_length": 3,
  "verbose": true
}
        """,
    )

    # Configuration
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON configuration file (CLI args override JSON values)",
    )

    # Query
    parser.add_argument(
        "-l",
        "--letters",
        type=str,
        help=f"Letters to search ({Constants.MIN_LETTERS}-{Constants.MAX_LETTERS} "
        "alphabetic characters); prompted for when omitted",
    )
    parser.add_argument(
        "--dictionary",
        type=str,
        help="Word list file, one word per line (default: built-in English word list)",
    )

    # Parameters
    parser.add_argument(
        "--chunk-size",
        type=int,
        help="Largest number of candidates handed to a worker per task",
        default=Constants.DEFAULT_CHUNK_SIZE,
    )
    parser.add_argument(
        "--columns",
        type=int,
        help="Words per output row",
        default=Constants.DEFAULT_COLUMNS,
    )
    parser.add_argument(
        "--min-display-length",
        type=int,
        help="Hide shorter words from the output grid (they are still counted)",
        default=Constants.DEFAULT_MIN_DISPLAY_LENGTH,
    )
    parser.add_argument("--log-file", type=str, help="Also write log messages to this file")

    # Flags
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "-j",
        "--jobs",
        type=int,
        help=f"Number of parallel workers (default: {cpu_count()})",
    )

    return parser
