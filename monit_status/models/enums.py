"""
Integer codes shared with status document consumers.

The numeric values are part of the wire format: ingestion backends and
dashboards switch on them, so they must never be renumbered.
"""

from enum import Enum, IntEnum, IntFlag

from monit_status.exceptions import UnsupportedFormatVersion


class ServiceType(IntEnum):
    """Service kind discriminant."""

    FILESYSTEM = 0
    DIRECTORY = 1
    FILE = 2
    PROCESS = 3
    HOST = 4
    SYSTEM = 5
    FIFO = 6
    PROGRAM = 7
    NET = 8


class EveryType(IntEnum):
    """How often a service is checked."""

    CYCLE = 0
    SKIP_CYCLES = 1
    CRON = 2
    NOT_IN_CRON = 3


class MonitorState(IntEnum):
    NOT = 0
    YES = 1
    INIT = 2
    WAITING = 4


class MonitorMode(IntEnum):
    ACTIVE = 0
    PASSIVE = 1


class OnReboot(IntEnum):
    START = 0
    NOSTART = 1
    LASTSTATE = 2


class Action(IntEnum):
    """Pending or resulting action."""

    IGNORED = 0
    ALERT = 1
    RESTART = 2
    STOP = 3
    EXEC = 4
    UNMONITOR = 5
    START = 6
    MONITOR = 7


class EventState(IntEnum):
    SUCCEEDED = 0
    FAILED = 1
    CHANGED = 2
    CHANGED_NOT = 3
    INIT = 4


class EventId(IntFlag):
    """Event identifiers (bit flags, one per check family)."""

    NULL = 0x0
    CHECKSUM = 0x1
    RESOURCE = 0x2
    TIMEOUT = 0x4
    TIMESTAMP = 0x8
    SIZE = 0x10
    CONNECTION = 0x20
    PERMISSION = 0x40
    UID = 0x80
    GID = 0x100
    NONEXIST = 0x200
    INVALID = 0x400
    DATA = 0x800
    EXEC = 0x1000
    FSFLAG = 0x2000
    ICMP = 0x4000
    CONTENT = 0x8000
    INSTANCE = 0x10000
    ACTION = 0x20000
    PID = 0x40000
    PPID = 0x80000
    HEARTBEAT = 0x100000
    STATUS = 0x200000
    UPTIME = 0x400000
    LINK = 0x800000


class ConnectionState(IntEnum):
    """Result of the last probe of a check."""

    FAILED = 0
    OK = 1
    INIT = 2


class SocketType(IntEnum):
    TCP = 0
    UDP = 1
    UNIX = 2


class ChecksumType(str, Enum):
    MD5 = "md5"
    SHA1 = "sha1"


class FormatVersion(IntEnum):
    """Status document schema version."""

    V1 = 1  # legacy flat layout
    V2 = 2  # namespaced layout

    @classmethod
    def negotiate(cls, value, default: "FormatVersion" = None) -> "FormatVersion":
        """
        Resolve a caller supplied version (query parameter, config value).

        ``None`` or an empty string selects ``default`` (V2 when not given).
        Integers and their string forms are accepted; anything else raises
        UnsupportedFormatVersion.
        """
        if value is None or (isinstance(value, str) and not value.strip()):
            return default if default is not None else cls.V2
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise UnsupportedFormatVersion(value)
        try:
            return cls(int(str(value).strip()))
        except ValueError:
            raise UnsupportedFormatVersion(value) from None
