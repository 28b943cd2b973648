"""
Log sanitization utilities to prevent log injection attacks.

Service names, hostnames and paths come from operator configuration and
probe results; they are cleaned before being written to logs.
"""

import re
from typing import Any


def sanitize_for_log(value: Any, max_length: int = 100) -> str:
    """
    Sanitize a value for safe logging.

    Removes control characters, newlines, and other potentially dangerous characters
    that could be used for log injection attacks.

    Args:
        value: The value to sanitize
        max_length: Maximum length of the output (default 100)

    Returns:
        Sanitized string safe for logging
    """
    str_value = str(value)

    # Remove control characters, newlines, carriage returns
    sanitized = re.sub(r"[\x00-\x1f\x7f-\x9f]", "", str_value)

    # Limit length to prevent log flooding
    if len(sanitized) > max_length:
        sanitized = sanitized[:max_length] + "..."

    return sanitized


def sanitize_client_ip(client_ip: Any) -> str:
    """
    Sanitize a client address for logging.

    Keeps only characters that appear in IPv4/IPv6 literals.

    Args:
        client_ip: The address to sanitize

    Returns:
        Sanitized address, or "-" when absent
    """
    if not client_ip:
        return "-"
    sanitized = re.sub(r"[^0-9a-fA-F:.%]", "", str(client_ip))
    return sanitized[:64] or "-"
