"""Configuration utilities for xstime.

This module centralizes small helpers and constants related to runtime
configuration. Values are read from the environment on every call; nothing
is cached.
"""

import os

ZONE_ENV_VAR = "XSTIME_TZ"  # pragma: no mutate
LOGGER_LEVELS_ENV_VAR = "XSTIME_LOGGER_LEVELS"  # pragma: no mutate


def get_zone_name() -> str | None:
    """Get the configured time-zone name, if any.

    Returns:
        The stripped value of the `XSTIME_TZ` environment variable (an IANA
        zone name such as ``"Europe/Copenhagen"``), or ``None`` when unset or
        blank, meaning the process's local zone rules apply.
    """
    if not (name := os.environ.get(ZONE_ENV_VAR, "").strip()):
        return None
    return name
