"""
Pydantic models for monitored services and service groups.

A Service carries the fields common to every kind plus an optional
``info`` block. ``info`` is a discriminated union on ``kind``; each
variant holds only the fields collected for that kind of service.
"""

from typing import Annotated, List, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field

from monit_status.models.checks import Checksum, IcmpCheck, PortCheck, UnixSocketCheck
from monit_status.models.enums import (
    Action,
    EveryType,
    MonitorMode,
    MonitorState,
    OnReboot,
)


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# ============================================================================
# RECURRENCE
# ============================================================================


class Every(_Frozen):
    """
    Recurrence descriptor.

    ``counter``/``number`` are used by SKIP_CYCLES, ``cron`` by CRON and
    NOT_IN_CRON. CYCLE (check every poll cycle) is the default and is not
    rendered.
    """

    type: EveryType = Field(default=EveryType.CYCLE, description="Recurrence policy")
    counter: int = Field(default=0, description="Cycles elapsed since the last check")
    number: int = Field(default=0, description="Check every N cycles")
    cron: Optional[str] = Field(default=None, description="Cron expression")


# ============================================================================
# PER-KIND INFO
# ============================================================================


class FileInfo(_Frozen):
    kind: Literal["file"] = "file"
    mode: int = Field(default=0, description="st_mode bits")
    uid: int = 0
    gid: int = 0
    timestamp: int = Field(default=0, description="Modification time (epoch seconds)")
    size: int = Field(default=0, ge=0, description="Size in bytes")
    checksum: Optional[str] = Field(default=None, description="Last computed digest")


class DirectoryInfo(_Frozen):
    kind: Literal["directory"] = "directory"
    mode: int = 0
    uid: int = 0
    gid: int = 0
    timestamp: int = 0


class FifoInfo(_Frozen):
    kind: Literal["fifo"] = "fifo"
    mode: int = 0
    uid: int = 0
    gid: int = 0
    timestamp: int = 0


class FilesystemInfo(_Frozen):
    """Mounted filesystem statistics, in blocks of ``block_size`` bytes."""

    kind: Literal["filesystem"] = "filesystem"
    mode: int = 0
    uid: int = 0
    gid: int = 0
    flags: int = Field(default=0, description="Mount flags")
    block_size: int = Field(default=0, description="f_bsize; non-positive means unknown")
    blocks_total: int = Field(default=0, description="f_blocks")
    blocks_used: int = Field(default=0, description="Blocks in use")
    space_percent: float = 0.0
    inodes_total: int = Field(default=0, description="f_files; 0 when not reported")
    inodes_used: int = 0
    inode_percent: float = 0.0


class LinkCounter(_Frozen):
    now: int = Field(default=0, description="Per second rate")
    total: int = Field(default=0, description="Counter total")


class LinkDirection(_Frozen):
    packets: LinkCounter = Field(default_factory=LinkCounter)
    bytes: LinkCounter = Field(default_factory=LinkCounter)
    errors: LinkCounter = Field(default_factory=LinkCounter)


class NetInfo(_Frozen):
    """Network interface link statistics."""

    kind: Literal["net"] = "net"
    state: int = Field(default=-1, description="1 up, 0 down, -1 unknown")
    speed: int = Field(default=-1, description="Link speed in bits per second")
    duplex: int = Field(default=-1, description="1 full, 0 half, -1 unknown")
    download: LinkDirection = Field(default_factory=LinkDirection)
    upload: LinkDirection = Field(default_factory=LinkDirection)


class ProcessInfo(_Frozen):
    """Process identity and, when the process engine runs, resource usage."""

    kind: Literal["process"] = "process"
    pid: int = -1
    ppid: int = -1
    uid: int = -1
    euid: int = -1
    gid: int = -1
    uptime: int = 0
    threads: int = 0
    children: int = 0
    mem_percent: float = 0.0
    total_mem_percent: float = 0.0
    mem_bytes: int = Field(default=0, ge=0, description="Resident memory in bytes")
    total_mem_bytes: int = Field(default=0, ge=0, description="Including children, in bytes")
    cpu_percent: float = 0.0
    total_cpu_percent: float = 0.0


ServiceInfo = Annotated[
    Union[FileInfo, DirectoryInfo, FifoInfo, FilesystemInfo, NetInfo, ProcessInfo],
    Field(discriminator="kind"),
]


class ProgramRun(_Frozen):
    """Metadata of the last run of a program check."""

    started: int = Field(default=0, description="Start time (epoch seconds), 0 if never run")
    exit_status: int = 0
    output: str = Field(default="", description="Captured output")


# ============================================================================
# SERVICE
# ============================================================================


class Service(_Frozen):
    """
    Read-only view of one monitored service.

    ``type`` is a plain integer so that kinds unknown to this renderer pass
    through unchanged. ``has_status`` is the caller's verdict on whether
    the service holds collected data worth reporting.
    """

    name: str = Field(description="Service name")
    type: int = Field(description="ServiceType code")
    collected_sec: int = Field(default=0, description="Collection time, seconds part")
    collected_usec: int = Field(default=0, description="Collection time, microseconds part")
    status: int = Field(default=0, description="Error bitmask (0 = ok)")
    status_hint: int = Field(default=0, description="Error hint bitmask")
    monitor: int = Field(default=MonitorState.YES, description="Monitoring state")
    monitor_mode: int = Field(default=MonitorMode.ACTIVE, description="Monitor mode")
    on_reboot: int = Field(default=OnReboot.START, description="Behaviour across reboot")
    pending_action: int = Field(default=Action.IGNORED, description="Action waiting to run")
    depends_on: List[str] = Field(default_factory=list, description="Dependency names, in order")
    every: Every = Field(default_factory=Every)
    has_status: bool = Field(default=False, description="Whether collected data is available")
    info: Optional[ServiceInfo] = Field(default=None, description="Kind specific data")
    checksum: Optional[Checksum] = Field(default=None, description="Active checksum test")
    icmp: List[IcmpCheck] = Field(default_factory=list)
    ports: List[PortCheck] = Field(default_factory=list)
    sockets: List[UnixSocketCheck] = Field(default_factory=list)
    program: Optional[ProgramRun] = Field(default=None, description="Program kind only")


class ServiceGroup(_Frozen):
    """Named group of services, referenced by member name."""

    name: str
    members: List[str] = Field(default_factory=list)
