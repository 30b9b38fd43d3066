"""
Process-wide settings.

The only setting is the zone used for "local time": naive datetimes are read
as wall time in this zone, and functions that report local components convert
aware values into it.
"""

import logging
import os
from datetime import tzinfo
from typing import Optional, Union

from dateutil import tz

from datecalc.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

TZ_ENV_VAR = "DATECALC_TZ"

_LOCAL_TIMEZONE: Optional[tzinfo] = None  # Resolved on first use


def _resolve(name: str) -> tzinfo:
    zone = tz.gettz(name)
    if zone is None:
        raise InvalidArgumentError(f"Unknown time zone: {name!r}")
    return zone


def _default_timezone() -> tzinfo:
    name = os.getenv(TZ_ENV_VAR)
    if name:
        logger.debug("Local time zone taken from %s=%s", TZ_ENV_VAR, name)
        return _resolve(name)
    return tz.tzlocal()


def get_local_timezone() -> tzinfo:
    """Get the local time zone, initializing it if needed."""
    global _LOCAL_TIMEZONE
    if _LOCAL_TIMEZONE is None:
        _LOCAL_TIMEZONE = _default_timezone()
    return _LOCAL_TIMEZONE


def set_local_timezone(zone: Union[str, tzinfo, None]) -> None:
    """Set the local time zone by IANA name or tzinfo; None restores the default."""
    global _LOCAL_TIMEZONE
    if zone is None:
        _LOCAL_TIMEZONE = None
    elif isinstance(zone, tzinfo):
        _LOCAL_TIMEZONE = zone
    elif isinstance(zone, str):
        _LOCAL_TIMEZONE = _resolve(zone)
    else:
        raise TypeError(f"Unsupported type for time zone: {type(zone)}")
    logger.debug("Local time zone set to %s", _LOCAL_TIMEZONE)
