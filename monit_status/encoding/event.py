"""
Event encoder.
"""

from typing import Optional

from monit_status.encoding.buffer import StatusBuffer
from monit_status.models.event import Event

# Source label for events not tied to a service
SYSTEM_SOURCE_NAME = "Monit"


def event_source_name(event: Event) -> str:
    if event.is_instance_event or not event.source:
        return SYSTEM_SOURCE_NAME
    return event.source


def write_event(buf: StatusBuffer, event: Event, key: Optional[str] = "event") -> None:
    """
    Append the event object.

    The ``token`` member is written only when the source carries a
    non-empty deduplication token.
    """
    buf.begin_object(key)
    buf.field("collected_sec", event.collected_sec)
    buf.field("collected_usec", event.collected_usec)
    buf.field("service", event_source_name(event))
    buf.field("type", event.type)
    buf.field("id", event.id)
    buf.field("state", event.state)
    buf.field("action", event.action)
    buf.field("message", event.message)
    if event.token:
        buf.field("token", event.token)
    buf.end_object()


def encode_event(event: Event) -> str:
    """Render a single event as a standalone JSON object."""
    with StatusBuffer() as buf:
        write_event(buf, event, key=None)
        return buf.to_string()
