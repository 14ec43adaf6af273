"""Formatting helpers turning raw system metrics into display values.

Every function here is pure: it takes a scalar metric and returns a string,
a presentation record or a severity tag. Nothing is collected or rendered.
"""

import logging
from types import MappingProxyType

import psutil

from procview.models import ProcessStatus, Severity, StatusBadge

logger = logging.getLogger(__name__)

BYTE_UNITS = ("B", "KB", "MB", "GB", "TB")

# (lower bound, severity), checked from the top down
SEVERITY_THRESHOLDS: tuple[tuple[float, Severity], ...] = (
    (90.0, Severity.CRITICAL),
    (60.0, Severity.HIGH),
    (30.0, Severity.MEDIUM),
)

UNKNOWN_STATUS = "Unknown"

STATUS_TABLE: MappingProxyType[str, ProcessStatus] = MappingProxyType(
    {
        "Running": ProcessStatus(label="Running", emoji="\U0001f3c3", color="green"),
        "Sleeping": ProcessStatus(label="Sleeping", emoji="\U0001f634", color="blue"),
        "Idle": ProcessStatus(label="Idle", emoji="⌛", color="overlay0"),
        UNKNOWN_STATUS: ProcessStatus(label="Unknown", emoji="❓", color="overlay0"),
    }
)

# psutil status constants and ps(1) state letters -> status table keys
_RAW_STATUS_KEYS: MappingProxyType[str, str] = MappingProxyType(
    {
        psutil.STATUS_RUNNING: "Running",
        psutil.STATUS_SLEEPING: "Sleeping",
        psutil.STATUS_IDLE: "Idle",
        "R": "Running",
        "S": "Sleeping",
        "I": "Idle",
    }
)


def format_bytes(size: float) -> str:
    """
    Format a byte count with the largest unit that keeps it under 1024.

    Scaling stops at TB, so very large values keep growing in TB.

    Args:
        size: Number of bytes.

    Returns:
        Formatted string (e.g., "1.50 KB").
    """
    value = size
    unit_index = 0
    while value >= 1024 and unit_index < len(BYTE_UNITS) - 1:
        value /= 1024
        unit_index += 1
    return f"{value:.2f} {BYTE_UNITS[unit_index]}"


def format_memory_size(size: float) -> str:
    """Format a byte count in GB with one decimal (e.g., "1.0 GB")."""
    return f"{size / 1024**3:.1f} GB"


def format_percentage(value: float) -> str:
    """Format a percentage with one decimal. Out-of-range values are kept."""
    return f"{value:.1f}%"


def format_uptime(seconds: float) -> str:
    """
    Format an uptime as days, hours and minutes.

    Leftover seconds are dropped. The parts come from floor division, so
    negative input gives floor-based values rather than truncated ones.

    Args:
        seconds: Uptime in seconds.

    Returns:
        Formatted string (e.g., "1d 1h 1m").
    """
    days = seconds // 86400
    hours = (seconds % 86400) // 3600
    minutes = (seconds % 3600) // 60
    # floored parts are whole; :.0f also accepts nan and inf
    return f"{days:.0f}d {hours:.0f}h {minutes:.0f}m"


def usage_class(percentage: float) -> Severity:
    """Classify a usage percentage into a severity tag."""
    for lower_bound, severity in SEVERITY_THRESHOLDS:
        if percentage >= lower_bound:
            return severity
    return Severity.LOW


def status_presentation(status: str) -> ProcessStatus:
    """
    Look up the presentation for a process status key.

    Keys missing from the table resolve to the "Unknown" entry.
    """
    presentation = STATUS_TABLE.get(status)
    if presentation is None:
        logger.debug("Unrecognized process status %r, using %s", status, UNKNOWN_STATUS)
        return STATUS_TABLE[UNKNOWN_STATUS]
    return presentation


def format_status(status: str) -> StatusBadge:
    """Build the status badge (color token and label) for a process status key."""
    presentation = status_presentation(status)
    return StatusBadge(
        label=presentation.label,
        emoji=presentation.emoji,
        color=presentation.color,
    )


def status_key(raw_status: str) -> str:
    """
    Map a raw process status to a status table key.

    Accepts psutil status constants (e.g. psutil.STATUS_RUNNING), single
    letter ps(1) states and keys that are already in the table. Anything
    else maps to "Unknown".
    """
    if raw_status in STATUS_TABLE:
        return raw_status
    return _RAW_STATUS_KEYS.get(raw_status, UNKNOWN_STATUS)
