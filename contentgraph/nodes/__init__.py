"""Transform content JSON files into linked graph nodes."""

from .builder import ContentGraphBuilder
from .helpers import RESERVED_FIELDS, camel_case_to_dash, omit, parse_timestamp
from .host import (
    DEFAULT_NAMESPACE,
    LocalFileSystem,
    MemoryFileSystem,
    NodeActions,
    create_content_digest,
    create_node_id,
    id_synthesizer,
)
from .models import VIDEO_CATEGORIES, ContentNode, NodeInternal, NodeType, SourceRecord

__all__ = [
    "ContentGraphBuilder",
    "ContentNode",
    "DEFAULT_NAMESPACE",
    "LocalFileSystem",
    "MemoryFileSystem",
    "NodeActions",
    "NodeInternal",
    "NodeType",
    "RESERVED_FIELDS",
    "SourceRecord",
    "VIDEO_CATEGORIES",
    "camel_case_to_dash",
    "create_content_digest",
    "create_node_id",
    "id_synthesizer",
    "omit",
    "parse_timestamp",
]
