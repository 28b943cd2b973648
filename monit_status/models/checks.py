"""
Pydantic models for the probes attached to a service.

Check results are computed upstream; these models only carry the last
outcome and timing of each configured ICMP, network port and unix socket
check.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from monit_status.models.enums import ChecksumType, ConnectionState, SocketType


class IcmpCheck(BaseModel):
    """ICMP echo check."""

    model_config = ConfigDict(frozen=True)

    type: int = Field(default=8, description="ICMP message type (8 = echo request)")
    is_available: ConnectionState = Field(
        default=ConnectionState.INIT, description="Result of the last probe"
    )
    response_ms: float = Field(default=0.0, description="Last round trip time in milliseconds")


class PortCheck(BaseModel):
    """
    Network port check.

    ``request`` is the human readable request description (for example the
    HTTP method and path) and may contain arbitrary operator input.
    """

    model_config = ConfigDict(frozen=True)

    hostname: Optional[str] = Field(default=None, description="Target host")
    port: int = Field(description="Target port number")
    request: Optional[str] = Field(default=None, description="Request description")
    protocol: Optional[str] = Field(default=None, description="Protocol test name, e.g. HTTP")
    socket_type: SocketType = Field(default=SocketType.TCP, description="Transport")
    ssl: bool = Field(default=False, description="Whether the connection uses TLS")
    is_available: ConnectionState = Field(
        default=ConnectionState.INIT, description="Result of the last probe"
    )
    response_ms: float = Field(default=0.0, description="Last response time in milliseconds")


class UnixSocketCheck(BaseModel):
    """Local (unix domain) socket check."""

    model_config = ConfigDict(frozen=True)

    path: Optional[str] = Field(default=None, description="Socket path")
    protocol: Optional[str] = Field(default=None, description="Protocol test name")
    is_available: ConnectionState = Field(
        default=ConnectionState.INIT, description="Result of the last probe"
    )
    response_ms: float = Field(default=0.0, description="Last response time in milliseconds")


class Checksum(BaseModel):
    """Checksum test configured on a file service."""

    model_config = ConfigDict(frozen=True)

    type: ChecksumType = Field(default=ChecksumType.MD5, description="Hash algorithm")
    expected: Optional[str] = Field(default=None, description="Expected digest, if pinned")
