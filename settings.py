"""Runtime settings for the dipole adjuster, overridable from the environment."""
import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from calculator import parse_number

ENV_PREFIX = "DIPOLE_"
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class SettingsError(Exception):
    """Custom exception for invalid settings values."""
    pass


@dataclass(frozen=True)
class Settings:
    """Display and logging configuration."""
    default_velocity_factor: float = 0.95
    length_decimals: int = 3        # meters
    difference_decimals: int = 4    # meters, adjuster difference
    log_file: str = "dipole_adjuster.log"
    log_level: str = "INFO"
    console_log_level: str = "WARNING"
    chart_points: int = 11


def _env_float(environ: Mapping[str, str], name: str, default: float) -> float:
    raw = environ.get(ENV_PREFIX + name)
    if raw is None:
        return default
    value = parse_number(raw)
    if value is None:
        raise SettingsError(f"{ENV_PREFIX}{name} must be a number, got {raw!r}")
    return value


def _env_int(environ: Mapping[str, str], name: str, default: int, minimum: int = 0) -> int:
    raw = environ.get(ENV_PREFIX + name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise SettingsError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from e
    if value < minimum:
        raise SettingsError(f"{ENV_PREFIX}{name} must be >= {minimum}, got {value}")
    return value


def _env_level(environ: Mapping[str, str], name: str, default: str) -> str:
    level = environ.get(ENV_PREFIX + name, default).upper()
    if level not in LOG_LEVELS:
        raise SettingsError(f"{ENV_PREFIX}{name} must be one of {', '.join(LOG_LEVELS)}, got {level!r}")
    return level


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build settings from defaults and DIPOLE_* environment variables.

    Recognised variables: DIPOLE_VELOCITY_FACTOR, DIPOLE_LENGTH_DECIMALS,
    DIPOLE_DIFFERENCE_DECIMALS, DIPOLE_LOG_FILE, DIPOLE_LOG_LEVEL,
    DIPOLE_CONSOLE_LOG_LEVEL, DIPOLE_CHART_POINTS.

    Raises:
        SettingsError: If a variable holds an unusable value
    """
    if environ is None:
        environ = os.environ
    defaults = Settings()

    velocity_factor = _env_float(environ, "VELOCITY_FACTOR", defaults.default_velocity_factor)
    if not 0 < velocity_factor <= 1:
        raise SettingsError(f"{ENV_PREFIX}VELOCITY_FACTOR must be in (0, 1], got {velocity_factor}")

    return replace(
        defaults,
        default_velocity_factor=velocity_factor,
        length_decimals=_env_int(environ, "LENGTH_DECIMALS", defaults.length_decimals),
        difference_decimals=_env_int(environ, "DIFFERENCE_DECIMALS", defaults.difference_decimals),
        log_file=environ.get(ENV_PREFIX + "LOG_FILE", defaults.log_file),
        log_level=_env_level(environ, "LOG_LEVEL", defaults.log_level),
        console_log_level=_env_level(environ, "CONSOLE_LOG_LEVEL", defaults.console_log_level),
        chart_points=_env_int(environ, "CHART_POINTS", defaults.chart_points, minimum=2),
    )
