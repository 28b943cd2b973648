"""
JSON encoding of status documents.
"""

from monit_status.encoding.buffer import StatusBuffer
from monit_status.encoding.document import DocumentAssembler, render_event, render_status
from monit_status.encoding.escape import escape_json
from monit_status.encoding.event import encode_event, write_event
from monit_status.encoding.service import encode_service, write_service
from monit_status.encoding.servicegroup import encode_servicegroup, write_servicegroup
from monit_status.encoding.units import (
    RESPONSE_TIME_UNAVAILABLE,
    blocks_to_megabytes,
    bytes_to_kilobytes,
    response_time_seconds,
)

__all__ = [
    "StatusBuffer",
    "DocumentAssembler",
    "render_status",
    "render_event",
    "escape_json",
    "encode_event",
    "write_event",
    "encode_service",
    "write_service",
    "encode_servicegroup",
    "write_servicegroup",
    "RESPONSE_TIME_UNAVAILABLE",
    "blocks_to_megabytes",
    "bytes_to_kilobytes",
    "response_time_seconds",
]
