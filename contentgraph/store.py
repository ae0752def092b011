"""In-process node sink and JSON persistence for the built graph."""

from __future__ import annotations

import json
import logging
import math
from pathlib import Path
from typing import Any, Iterator

from .nodes.models import ContentNode

logger = logging.getLogger(__name__)


class GraphStore:
    """Collect registered nodes keyed by id, preserving registration order."""

    def __init__(self) -> None:
        self._nodes: dict[str, ContentNode] = {}

    def register(self, node: ContentNode) -> None:
        # Re-registering an id replaces the node but keeps its position.
        previous = self._nodes.get(node.id)
        if previous is not None and previous != node:
            logger.warning(
                "%s node %s registered again with different content; replacing it.",
                node.node_type,
                node.id,
            )
        self._nodes[node.id] = node

    def __call__(self, node: ContentNode) -> None:
        self.register(node)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[ContentNode]:
        return iter(list(self._nodes.values()))

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def get(self, node_id: str) -> ContentNode | None:
        return self._nodes.get(node_id)

    def by_type(self) -> dict[str, list[ContentNode]]:
        grouped: dict[str, list[ContentNode]] = {}
        for node in self._nodes.values():
            grouped.setdefault(node.node_type, []).append(node)
        return grouped

    def counts(self) -> dict[str, int]:
        return {node_type: len(nodes) for node_type, nodes in sorted(self.by_type().items())}


def write_graph(store: GraphStore, destination: Path) -> list[Path]:
    """Serialize nodes to one JSON file per node type within ``destination``."""
    destination.mkdir(parents=True, exist_ok=True)
    existing_files = {path for path in destination.glob("*.json")}
    written: list[Path] = []

    for node_type, nodes in sorted(store.by_type().items()):
        path = destination / f"{node_type}.json"
        with path.open("w", encoding="utf-8") as handle:
            records = [_json_safe(node.to_record()) for node in nodes]
            json.dump(records, handle, ensure_ascii=False, indent=2, allow_nan=False)
        written.append(path)
        existing_files.discard(path)

    for leftover in existing_files:
        leftover.unlink(missing_ok=True)

    return written


def _json_safe(value: Any) -> Any:
    """Replace NaN and infinities with ``None`` so the output stays strict JSON."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: _json_safe(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_json_safe(item) for item in value]
    return value
