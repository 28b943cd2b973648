"""
Service encoder.

Writes one service entry of the status document. Common fields are always
written; the kind specific block and the check arrays only when the
service has status. Kinds this encoder does not know are written with the
common fields only.
"""

import logging
from typing import Callable, Dict, Optional, Tuple, Type

from pydantic import BaseModel

from monit_status.encoding.buffer import StatusBuffer
from monit_status.encoding.units import (
    blocks_to_megabytes,
    bytes_to_kilobytes,
    check_response_time,
    non_negative,
)
from monit_status.models.checks import PortCheck
from monit_status.models.enums import (
    ChecksumType,
    EveryType,
    FormatVersion,
    ServiceType,
    SocketType,
)
from monit_status.models.runtime import RuntimeInfo
from monit_status.models.service import (
    DirectoryInfo,
    FifoInfo,
    FileInfo,
    FilesystemInfo,
    LinkDirection,
    NetInfo,
    ProcessInfo,
    Service,
)
from monit_status.utils.log_sanitizer import sanitize_for_log

logger = logging.getLogger(__name__)

CHECKSUM_NAMES = {ChecksumType.MD5: "MD5", ChecksumType.SHA1: "SHA1"}

ICMP_TYPE_NAMES = {
    0: "Reply",
    3: "Destination Unreachable",
    4: "Source Quench",
    5: "Redirect",
    8: "Ping",
    11: "Time Exceeded",
    12: "Parameter Problem",
    13: "Timestamp Request",
    14: "Timestamp Reply",
    15: "Information Request",
    16: "Information Reply",
    17: "Address Mask Request",
    18: "Address Mask Reply",
    128: "Ping",
    129: "Reply",
}

_MODE_MASK = 0o7777


def port_type_description(port: PortCheck) -> str:
    if port.socket_type == SocketType.TCP:
        return "TCPSSL" if port.ssl else "TCP"
    if port.socket_type == SocketType.UDP:
        return "UDP"
    if port.socket_type == SocketType.UNIX:
        return "UNIX"
    return "UNKNOWN"


# ============================================================================
# KIND SPECIFIC BLOCKS
# ============================================================================


def _write_owner(buf: StatusBuffer, info) -> None:
    buf.octal("mode", info.mode & _MODE_MASK)
    buf.field("uid", info.uid)
    buf.field("gid", info.gid)


def _write_file(buf: StatusBuffer, service: Service, info: FileInfo, runtime: RuntimeInfo) -> None:
    _write_owner(buf, info)
    buf.field("timestamp", info.timestamp)
    buf.field("size", info.size)
    if service.checksum is not None:
        buf.begin_object("checksum")
        buf.field("@type", CHECKSUM_NAMES.get(service.checksum.type, "UNKNOWN"))
        buf.field("#text", info.checksum)
        buf.end_object()


def _write_directory(buf: StatusBuffer, service: Service, info, runtime: RuntimeInfo) -> None:
    _write_owner(buf, info)
    buf.field("timestamp", info.timestamp)


def _write_filesystem(
    buf: StatusBuffer, service: Service, info: FilesystemInfo, runtime: RuntimeInfo
) -> None:
    _write_owner(buf, info)
    buf.field("flags", info.flags)
    buf.begin_object("block")
    buf.fixed("percent", info.space_percent, 1)
    buf.fixed("usage", blocks_to_megabytes(info.blocks_used, info.block_size), 1)
    buf.fixed("total", blocks_to_megabytes(info.blocks_total, info.block_size), 1)
    buf.end_object()
    if info.inodes_total > 0:
        buf.begin_object("inode")
        buf.fixed("percent", info.inode_percent, 1)
        buf.field("usage", info.inodes_used)
        buf.field("total", info.inodes_total)
        buf.end_object()


def _write_direction(buf: StatusBuffer, key: str, direction: LinkDirection) -> None:
    buf.begin_object(key)
    for name in ("packets", "bytes", "errors"):
        counter = getattr(direction, name)
        buf.begin_object(name)
        buf.field("now", counter.now)
        buf.field("total", counter.total)
        buf.end_object()
    buf.end_object()


def _write_net(buf: StatusBuffer, service: Service, info: NetInfo, runtime: RuntimeInfo) -> None:
    buf.begin_object("link")
    buf.field("state", info.state)
    buf.field("speed", info.speed)
    buf.field("duplex", info.duplex)
    _write_direction(buf, "download", info.download)
    _write_direction(buf, "upload", info.upload)
    buf.end_object()


def _write_process(
    buf: StatusBuffer, service: Service, info: ProcessInfo, runtime: RuntimeInfo
) -> None:
    buf.field("pid", info.pid)
    buf.field("ppid", info.ppid)
    buf.field("uid", info.uid)
    buf.field("euid", info.euid)
    buf.field("gid", info.gid)
    buf.field("uptime", info.uptime)
    if not runtime.process_engine:
        return
    buf.field("threads", info.threads)
    buf.field("children", info.children)
    buf.begin_object("memory")
    buf.fixed("percent", info.mem_percent, 1)
    buf.fixed("percenttotal", info.total_mem_percent, 1)
    buf.field("kilobyte", bytes_to_kilobytes(info.mem_bytes))
    buf.field("kilobytetotal", bytes_to_kilobytes(info.total_mem_bytes))
    buf.end_object()
    buf.begin_object("cpu")
    buf.fixed("percent", info.cpu_percent, 1)
    buf.fixed("percenttotal", info.total_cpu_percent, 1)
    buf.end_object()


_InfoWriter = Callable[[StatusBuffer, Service, BaseModel, RuntimeInfo], None]

# Blocks written before the check arrays, keyed by kind
_INFO_WRITERS: Dict[int, Tuple[Type[BaseModel], _InfoWriter]] = {
    ServiceType.FILE: (FileInfo, _write_file),
    ServiceType.DIRECTORY: (DirectoryInfo, _write_directory),
    ServiceType.FIFO: (FifoInfo, _write_directory),
    ServiceType.FILESYSTEM: (FilesystemInfo, _write_filesystem),
    ServiceType.NET: (NetInfo, _write_net),
    ServiceType.PROCESS: (ProcessInfo, _write_process),
}


def _write_system(buf: StatusBuffer, service: Service, runtime: RuntimeInfo) -> None:
    if not runtime.process_engine:
        return
    stats = runtime.system
    buf.begin_object("system")
    buf.begin_object("load")
    buf.fixed("avg01", stats.load_avg_1, 2)
    buf.fixed("avg05", stats.load_avg_5, 2)
    buf.fixed("avg15", stats.load_avg_15, 2)
    buf.end_object()
    buf.begin_object("cpu")
    buf.fixed("user", non_negative(stats.cpu_user), 1)
    buf.fixed("system", non_negative(stats.cpu_system), 1)
    if stats.cpu_wait is not None:
        buf.fixed("wait", non_negative(stats.cpu_wait), 1)
    buf.end_object()
    buf.begin_object("memory")
    buf.fixed("percent", stats.mem_percent, 1)
    buf.field("kilobyte", bytes_to_kilobytes(stats.mem_bytes))
    buf.end_object()
    buf.begin_object("swap")
    buf.fixed("percent", stats.swap_percent, 1)
    buf.field("kilobyte", bytes_to_kilobytes(stats.swap_bytes))
    buf.end_object()
    buf.end_object()


def _write_program(buf: StatusBuffer, service: Service, runtime: RuntimeInfo) -> None:
    program = service.program
    if program is None or not program.started:
        return
    buf.begin_object("program")
    buf.field("started", program.started)
    buf.field("status", program.exit_status)
    buf.field("output", program.output)
    buf.end_object()


# Blocks written after the check arrays
_TRAILER_WRITERS: Dict[int, Callable[[StatusBuffer, Service, RuntimeInfo], None]] = {
    ServiceType.SYSTEM: _write_system,
    ServiceType.PROGRAM: _write_program,
}


# ============================================================================
# COMMON PARTS
# ============================================================================


def _write_every(buf: StatusBuffer, service: Service) -> None:
    every = service.every
    buf.begin_object("every")
    buf.field("type", every.type)
    if every.type == EveryType.SKIP_CYCLES:
        buf.field("counter", every.counter)
        buf.field("number", every.number)
    else:
        buf.field("cron", every.cron)
    buf.end_object()


def _write_checks(buf: StatusBuffer, service: Service) -> None:
    buf.begin_array("icmp")
    for icmp in service.icmp:
        buf.begin_object()
        buf.field("type", ICMP_TYPE_NAMES.get(icmp.type, ""))
        buf.fixed("responsetime", check_response_time(icmp), 6)
        buf.end_object()
    buf.end_array()

    buf.begin_array("port")
    for port in service.ports:
        buf.begin_object()
        buf.field("hostname", port.hostname)
        buf.field("portnumber", port.port)
        buf.field("request", port.request)
        buf.field("protocol", port.protocol)
        buf.field("type", port_type_description(port))
        buf.fixed("responsetime", check_response_time(port), 6)
        buf.end_object()
    buf.end_array()

    buf.begin_array("unix")
    for socket in service.sockets:
        buf.begin_object()
        buf.field("path", socket.path)
        buf.field("protocol", socket.protocol)
        buf.fixed("responsetime", check_response_time(socket), 6)
        buf.end_object()
    buf.end_array()


def _kind_info(service: Service, expected: Type[BaseModel]) -> Optional[BaseModel]:
    info = service.info
    if info is None:
        return None
    if not isinstance(info, expected):
        logger.debug(
            f"Service {sanitize_for_log(service.name)} of type {service.type} carries "
            f"{info.kind} info, skipping kind block"
        )
        return None
    return info


def write_service(
    buf: StatusBuffer, service: Service, version: FormatVersion, runtime: RuntimeInfo
) -> None:
    """Append one service object (as an array element) to ``buf``."""
    buf.begin_object()
    if version == FormatVersion.V2:
        buf.field("@name", service.name)
        buf.field("type", service.type)
    else:
        buf.field("@type", service.type)
        buf.field("name", service.name)
    buf.field("collected_sec", service.collected_sec)
    buf.field("collected_usec", service.collected_usec)
    buf.field("status", service.status)
    buf.field("status_hint", service.status_hint)
    buf.field("monitor", service.monitor)
    buf.field("monitormode", service.monitor_mode)
    buf.field("onreboot", service.on_reboot)
    buf.field("pendingaction", service.pending_action)
    buf.begin_array("depends_on")
    for dependency in service.depends_on:
        buf.item(dependency)
    buf.end_array()

    if service.every.type != EveryType.CYCLE:
        _write_every(buf, service)

    if service.has_status:
        entry = _INFO_WRITERS.get(service.type)
        if entry is not None:
            expected, writer = entry
            info = _kind_info(service, expected)
            if info is not None:
                writer(buf, service, info, runtime)
        _write_checks(buf, service)
        trailer = _TRAILER_WRITERS.get(service.type)
        if trailer is not None:
            trailer(buf, service, runtime)

    buf.end_object()


def encode_service(service: Service, version: FormatVersion, runtime: RuntimeInfo) -> str:
    """Render a single service as a standalone JSON object."""
    with StatusBuffer() as buf:
        write_service(buf, service, FormatVersion.negotiate(version), runtime)
        return buf.to_string()
