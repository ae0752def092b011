"""Map challenge, lesson and guest tutorial JSON files into nodes."""

from __future__ import annotations

import logging
from typing import Any

from .helpers import camel_case_to_dash, parse_timestamp, strip_reserved
from .host import NodeActions
from .models import ContentNode, NodeType, SourceRecord

logger = logging.getLogger(__name__)

CONTRIBUTIONS_DIR = "contributions"


def build_video_related_node(actions: NodeActions, record: SourceRecord, category: NodeType) -> ContentNode:
    """Register the node for a video-like JSON file or one of its contributions.

    Files living below a ``contributions/`` folder become ``Contribution``
    nodes linked back to their video. Every other file becomes a node of the
    given category whose ``contributions`` list is resolved up front from
    the sibling folder listing.
    """
    prefix = f"{camel_case_to_dash(category.value)}s"
    if f"/{CONTRIBUTIONS_DIR}/" in record.relative_path:
        node = _contribution_node(actions, record, prefix)
    else:
        node = _video_node(actions, record, prefix, category)
    actions.register(node)
    return node


def _contribution_node(actions: NodeActions, record: SourceRecord, prefix: str) -> ContentNode:
    data = strip_reserved(record.data)
    video_directory = _owner_directory(record.relative_directory)
    payload: dict[str, Any] = {
        **data,
        "id": actions.create_node_id(f"{prefix}/{record.relative_path}"),
        "parent": record.id,
        "name": record.name,
        "video": actions.create_node_id(f"{prefix}/{video_directory}"),
        "internal": {
            "type": NodeType.CONTRIBUTION.value,
            "contentDigest": actions.create_content_digest(data),
        },
    }
    logger.debug("Contribution %s linked to %s/%s", record.relative_path, prefix, video_directory)
    return ContentNode.model_validate(payload)


def _video_node(actions: NodeActions, record: SourceRecord, prefix: str, category: NodeType) -> ContentNode:
    data = strip_reserved(record.data)
    slug = record.relative_directory
    contribution_keys = [
        f"{prefix}/{slug}/{CONTRIBUTIONS_DIR}/{filename}"
        for filename in _contribution_files(actions, record.dir)
    ]
    timestamps = [
        {**timestamp, "seconds": parse_timestamp(timestamp["time"])}
        for timestamp in data.get("timestamps") or []
    ]

    can_contribute = data.get("canContribute")
    if can_contribute is None:
        can_contribute = category is NodeType.CHALLENGE

    payload: dict[str, Any] = {
        **data,
        "id": actions.create_node_id(f"{prefix}/{slug}"),
        "parent": record.id,
        "slug": slug,
        "contributionsPath": f"{slug}/{CONTRIBUTIONS_DIR}",
        "timestamps": timestamps,
        "codeExamples": _or_empty(data.get("codeExamples")),
        "groupLinks": _or_empty(data.get("groupLinks")),
        "canContribute": can_contribute,
        "contributions": [actions.create_node_id(key) for key in contribution_keys],
        "internal": {
            "type": category.value,
            "contentDigest": actions.create_content_digest(data),
        },
    }
    return ContentNode.model_validate(payload)


def _contribution_files(actions: NodeActions, directory: str) -> list[str]:
    folder = f"{directory}/{CONTRIBUTIONS_DIR}"
    if not actions.filesystem.exists(folder):
        return []
    return [name for name in actions.filesystem.listdir(folder) if ".json" in name]


def _owner_directory(relative_directory: str) -> str:
    suffix = f"/{CONTRIBUTIONS_DIR}"
    if relative_directory.endswith(suffix):
        return relative_directory[: -len(suffix)]
    return relative_directory.replace(suffix, "", 1)


def _or_empty(value: Any) -> Any:
    return [] if value is None else value
