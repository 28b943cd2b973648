"""
Exception hierarchy for the status document renderer.

Rendering itself has no recoverable errors: missing optional data is
normalised to empty strings or omitted blocks. The exceptions here cover
the edges around rendering (version negotiation, configuration and
snapshot loading).
"""


class StatusDocumentError(Exception):
    """Base class for all monit_status errors."""


class UnsupportedFormatVersion(StatusDocumentError, ValueError):
    """Raised when a caller asks for a document version we cannot produce."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Unsupported status format version: {value!r}")


class UnsupportedFormat(StatusDocumentError, ValueError):
    """Raised when a caller asks for a document format other than JSON."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Unsupported status format: {value!r}")


class ConfigError(StatusDocumentError):
    """Configuration file could not be read or failed validation."""


class SnapshotError(StatusDocumentError):
    """Snapshot file could not be read or failed validation."""
