"""CLI Helper Functions for Sonar Gate.

Logging setup for the ``--verbose`` flag.
"""

import logging
import sys

from sonar_gate.core.constants import LOG_FORMAT


def configure_logging(verbose: bool = False) -> None:
    """Configure logging for a CLI run.

    Args:
        verbose: Log debug output to stderr when True, warnings only otherwise
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)
