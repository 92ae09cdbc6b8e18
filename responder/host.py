"""Host services consumed by the response engines.

The engines never query the operating system directly: wall-clock time is
obtained through a ``Clock`` callable and system facts are captured once in a
:class:`HostInfo` snapshot, so both can be replaced in tests.
"""
from __future__ import annotations

import logging
import os
import platform
import time
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

_LOGGER = logging.getLogger(__name__)

Clock = Callable[[], datetime]

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def system_clock() -> datetime:
    """Return the current local wall-clock time."""

    return datetime.now()


def format_time(moment: datetime) -> str:
    """Format *moment* as ``H:MM``."""

    return f"{moment.hour}:{moment.minute:02d}"


def format_date(moment: datetime) -> str:
    """Format *moment* as ``Month D, YYYY``."""

    return f"{MONTH_NAMES[moment.month - 1]} {moment.day}, {moment.year}"


@dataclass(frozen=True, slots=True)
class HostInfo:
    """System facts read once when the template catalog is loaded."""

    memory_bytes: Optional[int]
    free_memory_bytes: Optional[int]
    uptime_seconds: Optional[float]
    platform_version: str
    processor: str


def _sysconf_bytes(pages_name: str) -> Optional[int]:
    try:
        page_size = os.sysconf("SC_PAGE_SIZE")
        pages = os.sysconf(pages_name)
    except (AttributeError, ValueError, OSError):
        return None
    if page_size <= 0 or pages <= 0:
        return None
    return page_size * pages


def _read_uptime() -> Optional[float]:
    try:
        with open("/proc/uptime", "r", encoding="ascii") as handle:
            return float(handle.read().split()[0])
    except (OSError, ValueError, IndexError):
        _LOGGER.debug("/proc/uptime unavailable, using the monotonic clock")
    try:
        return time.monotonic()
    except OSError:
        return None


def read_host_info() -> HostInfo:
    """Probe the running host for the facts used by dynamic templates."""

    system = platform.system() or "an unknown system"
    release = platform.release()
    platform_version = f"{system} {release}".strip()
    processor = platform.processor() or platform.machine()
    info = HostInfo(
        memory_bytes=_sysconf_bytes("SC_PHYS_PAGES"),
        free_memory_bytes=_sysconf_bytes("SC_AVPHYS_PAGES"),
        uptime_seconds=_read_uptime(),
        platform_version=platform_version,
        processor=processor,
    )
    _LOGGER.debug("Read host info: %s", info)
    return info
