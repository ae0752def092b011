import json
from pathlib import Path

import pytest

from contentgraph.nodes import ContentGraphBuilder, ContentNode, MemoryFileSystem, SourceRecord
from contentgraph.store import GraphStore, write_graph


def _node(node_id: str, node_type: str, **extra: object) -> ContentNode:
    return ContentNode.model_validate(
        {"id": node_id, "parent": None, "internal": {"type": node_type, "contentDigest": "d"}, **extra}
    )


def test_register_is_idempotent_and_keeps_order() -> None:
    store = GraphStore()
    store.register(_node("a", "Lesson", title="First"))
    store.register(_node("b", "Lesson"))
    store.register(_node("a", "Lesson", title="Replaced"))

    assert len(store) == 2
    assert [node.id for node in store] == ["a", "b"]
    assert store.get("a").get("title") == "Replaced"
    assert "b" in store
    assert store.counts() == {"Lesson": 2}


def test_write_graph_writes_one_file_per_type(tmp_path: Path) -> None:
    store = GraphStore()
    store.register(_node("t", "Track", chapters=["c"]))
    store.register(_node("c", "Chapter", track="t"))
    destination = tmp_path / "nodes"
    destination.mkdir()
    stale = destination / "Obsolete.json"
    stale.write_text("[]", encoding="utf-8")

    written = write_graph(store, destination)

    assert sorted(path.name for path in written) == ["Chapter.json", "Track.json"]
    assert not stale.exists()
    tracks = json.loads((destination / "Track.json").read_text(encoding="utf-8"))
    assert tracks == [
        {
            "id": "t",
            "parent": None,
            "internal": {"type": "Track", "contentDigest": "d"},
            "chapters": ["c"],
        }
    ]


def test_register_warns_when_an_id_is_replaced_with_different_content(
    caplog: pytest.LogCaptureFixture,
) -> None:
    store = GraphStore()
    store.register(_node("a", "Challenge", title="First"))
    store.register(_node("a", "Challenge", title="First"))
    assert caplog.text == ""

    store.register(_node("a", "Challenge", title="Second"))

    assert "Challenge node a registered again" in caplog.text
    assert store.get("a").get("title") == "Second"


def test_write_graph_writes_nan_seconds_as_null(tmp_path: Path) -> None:
    store = GraphStore()
    builder = ContentGraphBuilder(
        register=store.register,
        create_node_id=lambda key: f"id:{key}",
        filesystem=MemoryFileSystem(),
    )
    builder.build_challenge_node(
        SourceRecord(
            id="file",
            data={"timestamps": [{"time": "ab:30", "title": "Broken"}]},
            relative_path="001-a/index.json",
            relative_directory="001-a",
            dir="/content/001-a",
            name="index",
        )
    )

    write_graph(store, tmp_path)

    def _reject(token: str) -> None:
        raise ValueError(token)

    text = (tmp_path / "Challenge.json").read_text(encoding="utf-8")
    challenges = json.loads(text, parse_constant=_reject)
    assert challenges[0]["timestamps"] == [{"time": "ab:30", "title": "Broken", "seconds": None}]
