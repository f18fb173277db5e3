"""
Configuration
=============
Central registry for the global constants of the package.

Both values can be overridden through environment variables that are read once,
at import time:

    CYLPROX_APPROX_EPS  tolerance used by every approximate comparison (float)
    CYLPROX_LOG_LEVEL   level name passed to ``setup_logging`` by the scripts

Exports:
    APPROX_EQ_EPS (float): default tolerance for approximate equality.
    LOG_LEVEL (int): default logging level.
"""
import logging
import os

DEFAULT_APPROX_EQ_EPS: float = 1e-5


def _read_eps(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def _read_level(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if not raw:
        return default
    level = logging.getLevelName(raw.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"{name} is not a logging level: {raw!r}")
    return level


# Global Constants
APPROX_EQ_EPS: float = _read_eps("CYLPROX_APPROX_EPS", DEFAULT_APPROX_EQ_EPS)
LOG_LEVEL: int = _read_level("CYLPROX_LOG_LEVEL", logging.WARNING)
