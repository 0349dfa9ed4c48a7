"""
Logging setup.

Modules log through `logging.getLogger(__name__)`; this installs the one
handler the API process writes to.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Configure the root logger once for the process.

    Args:
        level: Level name such as "DEBUG" or "INFO"
    """
    root = logging.getLogger()
    root.setLevel(level.upper())

    if any(getattr(h, "_prosocial", False) for h in root.handlers):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._prosocial = True  # type: ignore[attr-defined]
    root.addHandler(handler)

    # Supabase's HTTP client logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
