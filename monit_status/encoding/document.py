"""
Status document assembler.

Produces the complete JSON document (head, services, service groups,
optional event) in one of two schema versions:

- V1, legacy flat layout::

    {"monit": {"server": {"id": ..., "incarnation": ..., "version": ...},
               "platform": {...}, "service": [...], "event": {...}}}

- V2, namespaced layout::

    {"monit": {"@id": ..., "@incarnation": ..., "@version": ...,
               "server": {...}, "platform": {...},
               "services": {"service": [...]},
               "servicegroups": {"servicegroup": [...]}, "event": {...}}}
"""

import logging
import time
from typing import Iterable, Optional, Union

from monit_status.encoding.buffer import StatusBuffer
from monit_status.encoding.event import write_event
from monit_status.encoding.service import write_service
from monit_status.encoding.servicegroup import write_servicegroup
from monit_status.encoding.units import bytes_to_kilobytes
from monit_status.logging_config import log_render_operation
from monit_status.models.enums import FormatVersion
from monit_status.models.event import Event
from monit_status.models.runtime import RuntimeInfo
from monit_status.models.service import Service, ServiceGroup
from monit_status.models.snapshot import StatusSnapshot

logger = logging.getLogger(__name__)


class DocumentAssembler:
    """
    Renders status documents for one runtime snapshot.

    The assembler holds no mutable state; concurrent ``assemble`` calls are
    safe as long as callers do not mutate the services they pass in.
    """

    def __init__(self, runtime: RuntimeInfo):
        self.runtime = runtime

    def assemble(
        self,
        services: Iterable[Service],
        groups: Iterable[ServiceGroup] = (),
        event: Optional[Event] = None,
        version: Union[FormatVersion, int, str, None] = FormatVersion.V2,
        client_ip: Optional[str] = None,
    ) -> str:
        """
        Render the status document.

        Args:
            services: Services in configuration order
            groups: Service groups (rendered in V2 only)
            event: Event to append, if this document is a notification
            version: Schema version, see FormatVersion.negotiate
            client_ip: Address the request came in on, used as httpd address
                when the listener is not bound to a specific one

        Returns:
            The document text

        Raises:
            UnsupportedFormatVersion: if ``version`` is not 1 or 2
        """
        version = FormatVersion.negotiate(version)
        start = time.monotonic()
        service_count = 0
        group_count = 0

        with StatusBuffer() as buf:
            buf.begin_object()
            buf.begin_object("monit")
            self._write_head(buf, version, client_ip)

            if version == FormatVersion.V2:
                buf.begin_object("services")
            buf.begin_array("service")
            for service in services:
                write_service(buf, service, version, self.runtime)
                service_count += 1
            buf.end_array()
            if version == FormatVersion.V2:
                buf.end_object()
                buf.begin_object("servicegroups")
                buf.begin_array("servicegroup")
                for group in groups:
                    write_servicegroup(buf, group)
                    group_count += 1
                buf.end_array()
                buf.end_object()

            if event is not None:
                write_event(buf, event)

            self._write_foot(buf)
            document = buf.to_string()

        log_render_operation(
            version=int(version),
            services=service_count,
            groups=group_count,
            event=event is not None,
            size=len(document),
            duration_ms=(time.monotonic() - start) * 1000.0,
        )
        return document

    def _write_head(self, buf: StatusBuffer, version: FormatVersion, client_ip: Optional[str]) -> None:
        server = self.runtime.server
        if version == FormatVersion.V2:
            buf.field("@id", server.id)
            buf.field("@incarnation", server.incarnation)
            buf.field("@version", server.version)
            buf.begin_object("server")
        else:
            buf.begin_object("server")
            buf.field("id", server.id)
            buf.field("incarnation", server.incarnation)
            buf.field("version", server.version)
        buf.field("uptime", server.uptime)
        buf.field("poll", server.poll)
        buf.field("startdelay", server.start_delay)
        buf.field("localhostname", server.localhostname)
        buf.field("controlfile", server.controlfile)

        httpd = server.httpd
        if httpd is not None:
            buf.begin_object("httpd")
            if httpd.is_network:
                buf.field("address", httpd.address or client_ip)
                buf.field("port", httpd.port)
                buf.field("ssl", httpd.ssl)
            else:
                buf.field("unixsocket", httpd.unix_socket)
            buf.end_object()

        if server.credentials is not None:
            buf.begin_object("credentials")
            buf.field("username", server.credentials.username)
            buf.field("password", server.credentials.password)
            buf.end_object()
        buf.end_object()

        platform = self.runtime.platform
        buf.begin_object("platform")
        buf.field("name", platform.name)
        buf.field("release", platform.release)
        buf.field("version", platform.version)
        buf.field("machine", platform.machine)
        buf.field("cpu", platform.cpu)
        buf.field("memory", bytes_to_kilobytes(platform.memory_bytes))
        buf.field("swap", bytes_to_kilobytes(platform.swap_bytes))
        buf.end_object()

    @staticmethod
    def _write_foot(buf: StatusBuffer) -> None:
        buf.end_object()
        buf.end_object()


def render_status(
    snapshot: StatusSnapshot,
    version: Union[FormatVersion, int, str, None] = FormatVersion.V2,
    client_ip: Optional[str] = None,
) -> str:
    """Render a general status document (including the snapshot's event, if any)."""
    return DocumentAssembler(snapshot.runtime).assemble(
        snapshot.services, snapshot.groups, snapshot.event, version, client_ip
    )


def render_event(
    snapshot: StatusSnapshot,
    event: Event,
    version: Union[FormatVersion, int, str, None] = FormatVersion.V2,
) -> str:
    """Render an event notification: the full status plus ``event``."""
    return DocumentAssembler(snapshot.runtime).assemble(
        snapshot.services, snapshot.groups, event, version
    )
