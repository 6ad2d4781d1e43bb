"""Utility functions for the mind map core."""

from mindmap.utils.identifiers import (
    generate_document_id,
    generate_source_id,
    utc_timestamp,
)

__all__ = [
    "generate_document_id",
    "generate_source_id",
    "utc_timestamp",
]
