"""Entry points that turn loaded JSON files into graph nodes."""

from __future__ import annotations

from .host import (
    ContentDigester,
    FileSystem,
    IdSynthesizer,
    LocalFileSystem,
    NodeActions,
    NodeSink,
    create_content_digest,
)
from .models import VIDEO_CATEGORIES, ContentNode, NodeType, SourceRecord
from .track import build_track_node
from .video import build_video_related_node


class ContentGraphBuilder:
    """Build content nodes from JSON source records using host callbacks."""

    def __init__(
        self,
        *,
        register: NodeSink,
        create_node_id: IdSynthesizer,
        create_content_digest: ContentDigester = create_content_digest,
        filesystem: FileSystem | None = None,
    ) -> None:
        self.actions = NodeActions(
            register=register,
            create_node_id=create_node_id,
            create_content_digest=create_content_digest,
            filesystem=filesystem or LocalFileSystem(),
        )

    def build_challenge_node(self, record: SourceRecord) -> ContentNode:
        return build_video_related_node(self.actions, record, NodeType.CHALLENGE)

    def build_lesson_node(self, record: SourceRecord) -> ContentNode:
        return build_video_related_node(self.actions, record, NodeType.LESSON)

    def build_guest_tutorial_node(self, record: SourceRecord) -> ContentNode:
        return build_video_related_node(self.actions, record, NodeType.GUEST_TUTORIAL)

    def build_track_node(self, record: SourceRecord) -> list[ContentNode]:
        return build_track_node(self.actions, record)

    def build(self, category: NodeType, record: SourceRecord) -> list[ContentNode]:
        """Dispatch ``record`` to the entry point for ``category``."""
        if category is NodeType.TRACK:
            return self.build_track_node(record)
        if category not in VIDEO_CATEGORIES:
            raise ValueError(f"No builder for category '{category.value}'")
        return [build_video_related_node(self.actions, record, category)]
