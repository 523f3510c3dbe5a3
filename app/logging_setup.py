import logging
import sys
from typing import Union

_LOGGING_CONFIGURED = False


def configure_logging(level: Union[int, str] = logging.INFO) -> None:
    """
    Attach a single stdout handler to the root logger.

    Safe to call multiple times; subsequent calls are no-ops.
    """
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
    )

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(handler)

    _LOGGING_CONFIGURED = True
