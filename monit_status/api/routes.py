"""
Status document API routes.

Serves the JSON status document rendered from the provider's current
snapshot. Authentication and listener setup belong to the embedding
application.
"""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, Request, Response

from monit_status.config.settings import StatusConfig
from monit_status.encoding.document import DocumentAssembler
from monit_status.exceptions import UnsupportedFormat, UnsupportedFormatVersion
from monit_status.models.enums import FormatVersion
from monit_status.protocols import SnapshotProvider
from monit_status.utils.log_sanitizer import sanitize_client_ip, sanitize_for_log

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"


def create_status_routes(
    provider: SnapshotProvider, config: Optional[StatusConfig] = None
) -> APIRouter:
    """
    Create status API routes.

    Args:
        provider: Source of status snapshots
        config: Settings (route path, default format version)

    Returns:
        APIRouter with the status endpoint
    """
    config = config or StatusConfig()
    router = APIRouter(tags=["status"])

    @router.get(config.api.status_path)
    async def get_status(
        request: Request,
        format: str = Query(default="json", description="Document format"),
        version: Optional[str] = Query(default=None, description="Schema version (1 or 2)"),
    ) -> Response:
        """
        Current status of all services.
        """
        try:
            if format.lower() != "json":
                raise UnsupportedFormat(format)
            format_version = FormatVersion.negotiate(version, default=config.format_version)
        except (UnsupportedFormat, UnsupportedFormatVersion) as e:
            logger.warning(f"Rejected status request: {sanitize_for_log(e)}")
            raise HTTPException(status_code=400, detail=str(e))

        client_ip = request.client.host if request.client else None
        snapshot = provider.get_snapshot()
        document = DocumentAssembler(config.apply_to(snapshot.runtime)).assemble(
            snapshot.services,
            snapshot.groups,
            None,
            format_version,
            client_ip,
        )
        peer = sanitize_client_ip(client_ip)
        logger.debug(
            f"Served status v{int(format_version)} to {peer}", extra={"client_ip": peer}
        )
        return Response(content=document, media_type=JSON_MEDIA_TYPE)

    return router
