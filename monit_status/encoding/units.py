"""
Unit conversions applied while rendering.

Consumers of the status document predate the collectors' switch to bytes
and milliseconds, so memory is reported in kilobytes and response times in
seconds.
"""

from monit_status.models.enums import ConnectionState

# Response time reported for a check whose last probe did not succeed.
RESPONSE_TIME_UNAVAILABLE = -1.0

_MEGABYTE = 1048576.0


def bytes_to_kilobytes(value: int) -> int:
    """
    Convert bytes to kilobytes, rounding half up (512 -> 1, 511 -> 0).

    Negative input is clamped to 0.
    """
    value = int(value)
    if value <= 0:
        return 0
    return (value + 512) // 1024


def response_time_seconds(response_ms: float, available: bool = True) -> float:
    """Milliseconds to seconds, or the -1.0 sentinel when unavailable."""
    if not available:
        return RESPONSE_TIME_UNAVAILABLE
    return response_ms / 1000.0


def check_response_time(check) -> float:
    """Response time of an ICMP, port or unix socket check in seconds."""
    return response_time_seconds(
        check.response_ms, check.is_available == ConnectionState.OK
    )


def blocks_to_megabytes(blocks: int, block_size: int) -> float:
    """Size of ``blocks`` filesystem blocks in megabytes; 0.0 if block size is unknown."""
    if block_size <= 0:
        return 0.0
    return blocks / _MEGABYTE * block_size


def non_negative(value: float) -> float:
    return value if value > 0.0 else 0.0
