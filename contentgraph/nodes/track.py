"""Map track JSON files into Track and Chapter nodes."""

from __future__ import annotations

import logging
from typing import Any

from .helpers import omit, strip_reserved
from .host import NodeActions
from .models import ContentNode, NodeType, SourceRecord

logger = logging.getLogger(__name__)

MAIN_TRACK = "main"
SIDE_TRACK = "side"


def build_track_node(actions: NodeActions, record: SourceRecord) -> list[ContentNode]:
    """Register a track and, for main tracks, its chapters.

    Returns the registered nodes in registration order. A track whose
    ``type`` is neither ``main`` nor ``side`` registers nothing.
    """
    slug = record.name
    track_id = actions.create_node_id(f"tracks/{slug}")
    data = strip_reserved(record.data)
    track_type = data.get("type")

    if track_type == MAIN_TRACK:
        chapters = [
            _chapter_node(actions, chapter, slug, track_id)
            for chapter in record.data.get("chapters") or []
        ]
        num_videos = sum(len(chapter.get("lessons")) for chapter in chapters)
        track = _track_node(
            actions,
            data,
            track_id=track_id,
            record=record,
            slug=slug,
            chapters=[chapter.id for chapter in chapters],
            numVideos=num_videos,
        )
        nodes = [track, *chapters]
    elif track_type == SIDE_TRACK:
        videos = list(data.get("videos") or [])
        track = _track_node(
            actions,
            data,
            track_id=track_id,
            record=record,
            slug=slug,
            videos=[actions.create_node_id(video_slug) for video_slug in videos],
            numVideos=len(videos),
        )
        nodes = [track]
    else:
        logger.warning("Track '%s' has unknown type %r; no node created.", slug, track_type)
        return []

    for node in nodes:
        actions.register(node)
    return nodes


def _chapter_node(
    actions: NodeActions,
    chapter: dict[str, Any],
    slug: str,
    track_id: str,
) -> ContentNode:
    data = omit(chapter, ("lessons",))
    lessons = chapter.get("lessons") or []
    payload: dict[str, Any] = {
        **data,
        "id": actions.create_node_id(f"{slug}/{data.get('title')}"),
        "parent": track_id,
        "track": track_id,
        "lessons": [actions.create_node_id(f"lessons/{lesson_slug}") for lesson_slug in lessons],
        "internal": {
            "type": NodeType.CHAPTER.value,
            "contentDigest": actions.create_content_digest(data),
        },
    }
    return ContentNode.model_validate(payload)


def _track_node(
    actions: NodeActions,
    data: dict[str, Any],
    *,
    track_id: str,
    record: SourceRecord,
    slug: str,
    **derived: Any,
) -> ContentNode:
    payload: dict[str, Any] = {
        **data,
        "id": track_id,
        "parent": record.id,
        "slug": slug,
        **derived,
        "internal": {
            "type": NodeType.TRACK.value,
            "contentDigest": actions.create_content_digest(data),
        },
    }
    return ContentNode.model_validate(payload)
