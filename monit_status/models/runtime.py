"""
Pydantic models for the monitoring instance and the host it runs on.

These describe the server identity and platform blocks at the head of
every status document, plus the system wide metrics consumed by the
system service.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class HttpdListener(_Frozen):
    """
    Embedded HTTP listener.

    Exactly one of the network (``port``) or local socket
    (``unix_socket``) forms is active.
    """

    address: Optional[str] = Field(default=None, description="Bind address")
    port: Optional[int] = Field(default=None, description="TCP port")
    ssl: bool = Field(default=False, description="TLS enabled")
    unix_socket: Optional[str] = Field(default=None, description="Unix socket path")

    @model_validator(mode="after")
    def _one_listener(self) -> "HttpdListener":
        if self.port is not None and self.unix_socket is not None:
            raise ValueError("httpd listener is either network or unix socket, not both")
        if self.port is None and self.unix_socket is None:
            raise ValueError("httpd listener needs a port or a unix socket path")
        return self

    @property
    def is_network(self) -> bool:
        return self.port is not None


class Credentials(_Frozen):
    """Credentials for the central collector."""

    username: str
    password: str


class ServerInfo(_Frozen):
    """Identity and runtime settings of the monitoring instance."""

    id: str = Field(description="Unique instance id")
    incarnation: int = Field(default=0, description="Restart counter (start time)")
    version: str = Field(description="Software version")
    uptime: int = Field(default=0, description="Process uptime in seconds")
    poll: int = Field(default=30, description="Poll interval in seconds")
    start_delay: int = Field(default=0, description="Start delay in seconds")
    localhostname: Optional[str] = None
    controlfile: Optional[str] = None
    httpd: Optional[HttpdListener] = None
    credentials: Optional[Credentials] = None


class PlatformInfo(_Frozen):
    """Operating system descriptor (uname) and capacity, sizes in bytes."""

    name: str = ""
    release: str = ""
    version: str = ""
    machine: str = ""
    cpu: int = 0
    memory_bytes: int = Field(default=0, ge=0)
    swap_bytes: int = Field(default=0, ge=0)


class SystemStats(_Frozen):
    """System wide aggregated metrics, sizes in bytes."""

    load_avg_1: float = 0.0
    load_avg_5: float = 0.0
    load_avg_15: float = 0.0
    cpu_user: float = 0.0
    cpu_system: float = 0.0
    cpu_wait: Optional[float] = Field(
        default=None, description="IO wait percent; None where the platform does not report it"
    )
    mem_percent: float = 0.0
    mem_bytes: int = Field(default=0, ge=0)
    swap_percent: float = 0.0
    swap_bytes: int = Field(default=0, ge=0)


class RuntimeInfo(_Frozen):
    """
    Immutable view of the instance passed to the document assembler.

    ``process_engine`` mirrors whether process and system resource
    collection is enabled; without it the resource blocks are omitted.
    """

    server: ServerInfo
    platform: PlatformInfo = Field(default_factory=PlatformInfo)
    system: SystemStats = Field(default_factory=SystemStats)
    process_engine: bool = True
