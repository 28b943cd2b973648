"""
Protocols defining what the renderer expects from its collaborators.
"""

from typing import Protocol, runtime_checkable

from monit_status.models.snapshot import StatusSnapshot


@runtime_checkable
class SnapshotProvider(Protocol):
    """Source of consistent status snapshots (collector / state machine side)."""

    def get_snapshot(self) -> StatusSnapshot:
        """
        Return a snapshot frozen for the duration of one render.

        Promises:
        - The returned services are not mutated while being rendered
        - Services are in configuration order
        """
        ...


class StaticSnapshotProvider:
    """Serves one fixed snapshot, e.g. loaded from a file."""

    def __init__(self, snapshot: StatusSnapshot):
        self.snapshot = snapshot

    def get_snapshot(self) -> StatusSnapshot:
        return self.snapshot
