"""
Opt-in logging for the library.

Usage in library code:
    from softbreaks._logging import resolve_logger

    def insert_soft_breaks(..., logger=None, log: bool = False):
        log = resolve_logger(logger=logger, enabled=log, name=__name__)
        log.debug("splitting line %d", index)  # no-op unless enabled or logger passed

Library code never prints; consumers opt in by passing a logger or enabled flag.
"""
from __future__ import annotations

import logging


class NoopLogger:
    def debug(self, *args, **kwargs):  # type: ignore[no-untyped-def]
        pass

    info = warning = error = exception = critical = debug


def resolve_logger(
    logger: logging.Logger | None = None,
    *,
    enabled: bool = False,
    name: str | None = None,
    level: int = logging.INFO,
) -> logging.Logger | NoopLogger:
    """
    Return a usable logger according to opt-in policy.

    - If `logger` is provided, use it.
    - Else if `enabled` is True, create/get a named logger.
    - Else return a NoopLogger that ignores calls.
    """
    if logger is not None:
        return logger
    if enabled:
        lg = logging.getLogger(name or "softbreaks")
        lg.setLevel(level)
        # Bubble up to the root so pytest's caplog can capture records.
        lg.propagate = True
        return lg
    return NoopLogger()
