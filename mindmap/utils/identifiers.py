"""ID generation and timestamp utilities."""

import uuid
from datetime import datetime, timezone


def generate_document_id() -> str:
    """Generate a unique document ID (UUID4)."""
    return str(uuid.uuid4())


def generate_source_id() -> str:
    """Generate a short source ID (12-char hex string)."""
    return uuid.uuid4().hex[:12]


def utc_timestamp() -> str:
    """Generate an ISO8601 UTC timestamp."""
    return datetime.now(timezone.utc).isoformat()
