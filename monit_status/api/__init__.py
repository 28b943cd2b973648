"""
HTTP adapter serving status documents.
"""

from monit_status.api.routes import create_status_routes

__all__ = ["create_status_routes"]
