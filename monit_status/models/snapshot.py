"""
Snapshot of everything a status document is rendered from.
"""

import json
import logging
from pathlib import Path
from typing import List, Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError

from monit_status.exceptions import SnapshotError
from monit_status.models.event import Event
from monit_status.models.runtime import RuntimeInfo
from monit_status.models.service import Service, ServiceGroup

logger = logging.getLogger(__name__)


class StatusSnapshot(BaseModel):
    """Runtime info plus services and groups, frozen for one render call."""

    runtime: RuntimeInfo
    services: List[Service] = Field(default_factory=list)
    groups: List[ServiceGroup] = Field(default_factory=list)
    event: Optional[Event] = None

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "StatusSnapshot":
        """
        Load a snapshot from a YAML or JSON file.

        Raises:
            SnapshotError: if the file is missing, unparsable or invalid
        """
        path = Path(path)
        try:
            with open(path) as f:
                if path.suffix == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise SnapshotError(f"Cannot read snapshot {path}: {e}") from e

        if not isinstance(data, dict):
            raise SnapshotError(f"Snapshot {path} must contain a mapping")

        try:
            snapshot = cls.model_validate(data)
        except ValidationError as e:
            raise SnapshotError(f"Invalid snapshot {path}: {e}") from e

        logger.debug(
            f"Loaded snapshot from {path}: {len(snapshot.services)} services, "
            f"{len(snapshot.groups)} groups"
        )
        return snapshot
