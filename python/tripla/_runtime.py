import logging
import os

_default_value_format = ".2f"
_current_value_format = _default_value_format
_current_log_level = logging.WARNING


def _check_format(fmt):
    try:
        format(1.5, fmt)
    except (TypeError, ValueError):
        return False
    return True


def _as_level(level):
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).upper())
    if not isinstance(value, int):
        raise ValueError(f"unknown log level: {level!r}")
    return value


def set_value_format(fmt: str) -> None:
    """Set the format spec used for non-integer values in triplet tables."""
    global _current_value_format
    if not _check_format(fmt):
        raise ValueError(f"invalid value format: {fmt!r}")
    _current_value_format = str(fmt)
    os.environ["TRIPLA_VALUE_FORMAT"] = _current_value_format


def get_value_format() -> str:
    # If user set env externally, honor it
    env = os.environ.get("TRIPLA_VALUE_FORMAT")
    if env and _check_format(env):
        return env
    return _current_value_format


def set_log_level(level) -> None:
    """Set the level the demo configures logging with (int or level name)."""
    global _current_log_level
    _current_log_level = _as_level(level)
    os.environ["TRIPLA_LOG_LEVEL"] = logging.getLevelName(_current_log_level)


def get_log_level() -> int:
    env = os.environ.get("TRIPLA_LOG_LEVEL")
    if env:
        try:
            return _as_level(env)
        except ValueError:
            return _current_log_level
    return _current_log_level
