import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def init_logging(level: str = "WARNING") -> None:
    """
    Configure the root logger with a single stderr handler.

    Interactive output goes to stdout, so diagnostics are kept on stderr.
    Calling this twice replaces the previous handler instead of stacking.
    """
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
