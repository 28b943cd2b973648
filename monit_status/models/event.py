"""
Pydantic model for a state change event.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from monit_status.models.enums import Action, EventId, EventState


class Event(BaseModel):
    """
    A single state change event delivered alongside the status document.

    ``source`` is the name of the service the event belongs to; it is
    ``None`` for events that are not tied to a service. ``token`` is the
    deduplication token of the source, if the receiving side uses one.
    """

    model_config = ConfigDict(frozen=True)

    collected_sec: int = Field(default=0, description="Collection time, seconds part")
    collected_usec: int = Field(default=0, description="Collection time, microseconds part")
    source: Optional[str] = Field(default=None, description="Source service name")
    type: int = Field(default=0, description="ServiceType code of the source")
    id: int = Field(default=EventId.NULL, description="EventId flag")
    state: int = Field(default=EventState.INIT, description="EventState code")
    action: int = Field(default=Action.IGNORED, description="Resulting action")
    message: str = Field(default="", description="Free text description")
    token: Optional[str] = Field(default=None, description="Delivery deduplication token")

    @property
    def is_instance_event(self) -> bool:
        """True for the synthetic event describing the monitoring instance itself."""
        return self.id == EventId.INSTANCE
