"""
Service group encoder.

Groups list their members by name only; the full service entries are
already part of the service list.
"""

from monit_status.encoding.buffer import StatusBuffer
from monit_status.models.service import ServiceGroup


def write_servicegroup(buf: StatusBuffer, group: ServiceGroup) -> None:
    buf.begin_object()
    buf.field("@name", group.name)
    buf.begin_array("service")
    for member in group.members:
        buf.item(member)
    buf.end_array()
    buf.end_object()


def encode_servicegroup(group: ServiceGroup) -> str:
    """Render a single service group as a standalone JSON object."""
    with StatusBuffer() as buf:
        write_servicegroup(buf, group)
        return buf.to_string()
