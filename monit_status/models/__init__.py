"""
Pydantic models for the status document renderer.

These are read-only views of a monitoring instance at one moment: the
runtime (server identity, platform, system metrics), its services and
service groups, and an optional state change event.
"""

from monit_status.models.enums import (
    Action,
    ChecksumType,
    ConnectionState,
    EventId,
    EventState,
    EveryType,
    FormatVersion,
    MonitorMode,
    MonitorState,
    OnReboot,
    ServiceType,
    SocketType,
)
from monit_status.models.checks import Checksum, IcmpCheck, PortCheck, UnixSocketCheck
from monit_status.models.service import (
    DirectoryInfo,
    Every,
    FifoInfo,
    FileInfo,
    FilesystemInfo,
    LinkCounter,
    LinkDirection,
    NetInfo,
    ProcessInfo,
    ProgramRun,
    Service,
    ServiceGroup,
)
from monit_status.models.event import Event
from monit_status.models.runtime import (
    Credentials,
    HttpdListener,
    PlatformInfo,
    RuntimeInfo,
    ServerInfo,
    SystemStats,
)
from monit_status.models.snapshot import StatusSnapshot

__all__ = [
    # Codes
    "Action",
    "ChecksumType",
    "ConnectionState",
    "EventId",
    "EventState",
    "EveryType",
    "FormatVersion",
    "MonitorMode",
    "MonitorState",
    "OnReboot",
    "ServiceType",
    "SocketType",
    # Checks
    "Checksum",
    "IcmpCheck",
    "PortCheck",
    "UnixSocketCheck",
    # Services
    "DirectoryInfo",
    "Every",
    "FifoInfo",
    "FileInfo",
    "FilesystemInfo",
    "LinkCounter",
    "LinkDirection",
    "NetInfo",
    "ProcessInfo",
    "ProgramRun",
    "Service",
    "ServiceGroup",
    # Event
    "Event",
    # Runtime
    "Credentials",
    "HttpdListener",
    "PlatformInfo",
    "RuntimeInfo",
    "ServerInfo",
    "SystemStats",
    "StatusSnapshot",
]
