"""
Configuration for monit_status.
"""

from monit_status.config.settings import ApiConfig, LoggingConfig, StatusConfig

__all__ = ["ApiConfig", "LoggingConfig", "StatusConfig"]
