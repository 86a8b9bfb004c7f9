import logging
import sys

LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(name)s] - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "WARNING") -> None:
    """
    Configure the root logger for the CLI.

    Logs go to stderr so stdout only ever carries the draw output.
    Unknown level names fall back to WARNING.
    """
    level_str = (level or "WARNING").upper()
    resolved = getattr(logging, level_str, None)
    invalid = not isinstance(resolved, int)
    if invalid:
        resolved = logging.WARNING

    logging.basicConfig(
        level=resolved,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        stream=sys.stderr,
        force=True,
    )

    if invalid:
        logging.warning(f"Invalid log level '{level}', using WARNING.")
