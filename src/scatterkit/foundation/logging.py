from __future__ import annotations

import logging


def configure_scatterkit_logging(*, level: int = logging.INFO) -> None:
    """
    Configure a minimal console logger for scatterkit.

    Notes:
        - This is intentionally opt-in (library code must not call logging.basicConfig()).
        - The handler is only attached if neither the root logger nor the "scatterkit" logger has handlers.
    """
    root = logging.getLogger()
    pkg_logger = logging.getLogger("scatterkit")

    # If the user already configured logging, don't interfere.
    if root.handlers or pkg_logger.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(level)
    pkg_logger.propagate = False


__all__ = ["configure_scatterkit_logging"]
