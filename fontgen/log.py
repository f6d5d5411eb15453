"""
fontgen.log - progress and diagnostics for the atlas pipeline.

Usage:
    from fontgen import log

    log.info("[Atlas] 1024x1024 atlas")

    try:
        rasterizer.render(code_point)
    except RasterizationError as e:
        log.debug(e, "Sampling failed")  # includes traceback
"""

import logging
import sys
import traceback

_logger = logging.getLogger("fontgen")
_handler = None


def debug(msg_or_exc, context: str = ""):
    """Log debug message or exception with context."""
    if isinstance(msg_or_exc, BaseException):
        _log_exception(_logger.debug, msg_or_exc, context)
    else:
        _logger.debug(str(msg_or_exc))


def info(msg: str):
    _logger.info(msg)


def _log_exception(log_func, exc: BaseException, context: str):
    """Format and log exception with traceback."""
    tb = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    prefix = f"{context}: " if context else ""
    log_func(f"{prefix}{type(exc).__name__}: {exc}\n{tb}")


class _StderrHandler(logging.StreamHandler):
    """Writes to whatever sys.stderr is at emit time."""

    def __init__(self):
        logging.Handler.__init__(self)

    @property
    def stream(self):
        return sys.stderr


def configure(verbose: bool = False) -> None:
    """Attach a stderr handler; used by the command-line entry point."""
    global _handler
    if _handler is None:
        _handler = _StderrHandler()
        _handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        _logger.addHandler(_handler)
    _logger.setLevel(logging.DEBUG if verbose else logging.INFO)
