import json
from pathlib import Path

from contentgraph.nodes import ContentNode
from contentgraph.reporting import assemble_report, write_report
from contentgraph.store import GraphStore
from contentgraph.verify import verify_graph


def _store() -> GraphStore:
    store = GraphStore()
    for node_id, node_type, extra in [
        ("a", "Lesson", {}),
        ("b", "Lesson", {}),
        ("t", "Track", {"videos": ["x"]}),
    ]:
        store.register(
            ContentNode.model_validate(
                {"id": node_id, "internal": {"type": node_type, "contentDigest": "d"}, **extra}
            )
        )
    return store


def test_assemble_report_counts_nodes_and_dangling_references() -> None:
    store = _store()
    report = assemble_report(
        project="Graph",
        duration_seconds=0.25,
        store=store,
        verification=verify_graph(store),
    )

    assert report.nodes == {"Lesson": 2, "Track": 1}
    assert report.total_nodes == 3
    assert report.dangling_references == 1
    assert len(report.warnings) == 1


def test_write_report_writes_json(tmp_path: Path) -> None:
    store = _store()
    report = assemble_report(
        project="Graph",
        duration_seconds=0.5,
        store=store,
        verification=verify_graph(store),
    )

    path = write_report(report, tmp_path)
    assert path.name == "build-report.json"
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["project"] == "Graph"
    assert data["total_nodes"] == 3
    assert data["nodes"]["Lesson"] == 2
