"""Logger hierarchy for flowparam.

Every module logs through ``get_logger(__name__)``, so all records land
under the ``flowparam`` logger. The table logs length mismatches at DEBUG
when validation fails; the loader logs at WARNING when it accepts uneven
lists and at DEBUG for each section it loads.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "flowparam"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach one handler to the ``flowparam`` logger.

    Only the first call has an effect; call `reset_logging` to reconfigure.

    Args:
        level: Level for the ``flowparam`` logger.
        format_string: Record format. Defaults to `DEFAULT_FORMAT`.
        handler: Destination. Defaults to a stdout StreamHandler.
    """
    global _configured
    if _configured:
        return

    handler = handler or logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers[:] = [handler]
    root_logger.setLevel(level)
    # Records still reach the process root logger (and pytest's caplog)
    root_logger.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a flowparam module.

    Args:
        name: Dotted module name, normally ``__name__``.
    """
    setup_root_logger()
    return logging.getLogger(name)


def reset_logging() -> None:
    """Drop the ``flowparam`` handler and level so setup can run again."""
    global _configured
    _configured = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
