"""Common runtime devkit for service infrastructure concerns."""

from safety_devkit.config import ServiceSettings, load_settings
from safety_devkit.observability import (
    configure_logging,
    configure_otel,
    configure_probe_access_log_filter,
)
from safety_devkit.timezone import DEFAULT_TIMEZONE, now_local

__all__ = [
    "DEFAULT_TIMEZONE",
    "ServiceSettings",
    "configure_logging",
    "configure_otel",
    "configure_probe_access_log_filter",
    "load_settings",
    "now_local",
]
