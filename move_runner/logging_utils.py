from __future__ import annotations

import logging

from .constants import LOGGER_NAME


def get_logger() -> logging.Logger:
    """Return the shared console logger for compile/publish runs."""

    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter(
                "[%(asctime)s] %(levelname)s %(message)s", "%Y-%m-%d %H:%M:%S"
            )
        )
        logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    logger.propagate = False
    return logger


def log_section(log_handle, header: str, content: str | None = None) -> None:
    log_handle.write(f"{header}\n")
    if content:
        log_handle.write(f"{content}\n")
    log_handle.flush()

    # Mirror to stdout so the captured CLI output is visible without opening the log
    print(header)
    if content:
        print(content)
