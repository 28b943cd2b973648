"""
monit_status - versioned JSON status documents for a service monitor.

Turns a snapshot of monitored services, service groups and an optional
state change event into the JSON document served to dashboards and sent
to a central collector. Two schema versions are supported: the legacy
flat layout (1) and the namespaced layout (2).

Usage:
    from monit_status import DocumentAssembler, RuntimeInfo, ServerInfo

    assembler = DocumentAssembler(RuntimeInfo(server=ServerInfo(id="...", version="5.34.0")))
    document = assembler.assemble(services, groups, version=2)
"""

from monit_status.encoding import DocumentAssembler, render_event, render_status
from monit_status.exceptions import (
    ConfigError,
    SnapshotError,
    StatusDocumentError,
    UnsupportedFormat,
    UnsupportedFormatVersion,
)
from monit_status.models import (
    Event,
    FormatVersion,
    RuntimeInfo,
    ServerInfo,
    Service,
    ServiceGroup,
    ServiceType,
    StatusSnapshot,
)

__all__ = [
    "DocumentAssembler",
    "render_status",
    "render_event",
    "ConfigError",
    "SnapshotError",
    "StatusDocumentError",
    "UnsupportedFormat",
    "UnsupportedFormatVersion",
    "Event",
    "FormatVersion",
    "RuntimeInfo",
    "ServerInfo",
    "Service",
    "ServiceGroup",
    "ServiceType",
    "StatusSnapshot",
]

__version__ = "1.0.0"
