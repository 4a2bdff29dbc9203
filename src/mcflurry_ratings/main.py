"""Main entry point for the McFlurry ratings command."""

import asyncio
import logging
import sys

from mcflurry_ratings import cli
from mcflurry_ratings.adapters.config import AppConfig

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Send log messages to stderr so command output stays clean."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def main() -> None:
    """Load configuration, set up logging and run the CLI."""
    try:
        config = AppConfig()
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)

    configure_logging(config.log_level)
    logger.debug(f"Remote backend configured: {config.uses_remote_backend}")
    asyncio.run(cli.main(config=config))


if __name__ == "__main__":
    main()
