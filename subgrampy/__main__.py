"""Main entry point for subgrampy package."""

from loguru import logger

from subgrampy.cli import create_parser
from subgrampy.core import load_config
from subgrampy.processing import run_pipeline
from subgrampy.utils import add_log_file_handler, setup_logger


def main():
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()

    try:
        config = load_config(args.config, args, parser)
    except ValueError as e:
        parser.error(str(e))

    # Setup logging
    setup_logger(verbose=config.verbose, debug=config.debug)
    if config.log_file:
        add_log_file_handler(config.log_file, verbose=config.verbose, debug=config.debug)

    if config.verbose:
        logger.info("=" * 60)
        logger.info("SubgramPy - Sub-anagram Solver")
        logger.info("=" * 60)
        logger.info("")
        logger.info("Configuration:")
        logger.info(f"  Dictionary: {config.dictionary or 'built-in'}")
        logger.info(f"  Workers: {config.jobs}")
        logger.info("")

    try:
        run_pipeline(config)
    except KeyboardInterrupt:
        logger.warning("")
        logger.warning("⚠️  Interrupted by user")
        raise
    except Exception:
        if config.verbose:
            logger.error("")
            logger.error("=" * 60)
            logger.error("✗ Search failed")
            logger.error("=" * 60)
        raise


if __name__ == "__main__":
    main()
