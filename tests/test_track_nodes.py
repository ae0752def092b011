from __future__ import annotations

from typing import Any

import pytest

from contentgraph.nodes import ContentGraphBuilder, ContentNode, MemoryFileSystem, SourceRecord


def _fake_id(key: str) -> str:
    return f"id:{key}"


def _track_record(name: str, data: dict[str, Any]) -> SourceRecord:
    return SourceRecord(
        id=f"file:{name}.json",
        data=data,
        relative_path=f"{name}.json",
        relative_directory="",
        dir="/site/content/tracks",
        name=name,
    )


def _build(data: dict[str, Any], name: str = "code-programming") -> tuple[list[ContentNode], list[ContentNode]]:
    registered: list[ContentNode] = []
    builder = ContentGraphBuilder(
        register=registered.append,
        create_node_id=_fake_id,
        filesystem=MemoryFileSystem(),
    )
    returned = builder.build_track_node(_track_record(name, data))
    return registered, returned


def test_main_track_registers_track_before_chapters() -> None:
    registered, returned = _build(
        {
            "type": "main",
            "title": "Code! Programming with p5.js",
            "chapters": [
                {"title": "Basics", "lessons": ["intro/01", "intro/02"]},
                {"title": "Loops", "lessons": ["loops/01"]},
            ],
        }
    )

    assert registered == returned
    track, basics, loops = registered
    assert track.internal.type == "Track"
    assert track.id == "id:tracks/code-programming"
    assert track.parent == "file:code-programming.json"
    assert track.get("slug") == "code-programming"
    assert track.get("numVideos") == 3
    assert track.get("chapters") == ["id:code-programming/Basics", "id:code-programming/Loops"]

    assert basics.internal.type == "Chapter"
    assert basics.parent == track.id
    assert basics.get("track") == track.id
    assert basics.get("title") == "Basics"
    assert basics.get("lessons") == ["id:lessons/intro/01", "id:lessons/intro/02"]
    assert loops.get("lessons") == ["id:lessons/loops/01"]


def test_chapter_digest_excludes_lessons() -> None:
    digests: list[dict[str, Any]] = []

    def digest(data: dict[str, Any]) -> str:
        digests.append(dict(data))
        return f"digest-{len(digests)}"

    registered: list[ContentNode] = []
    builder = ContentGraphBuilder(
        register=registered.append,
        create_node_id=_fake_id,
        create_content_digest=digest,
        filesystem=MemoryFileSystem(),
    )
    builder.build_track_node(
        _track_record("t", {"type": "main", "chapters": [{"title": "One", "lessons": ["a"]}]})
    )

    assert {"title": "One"} in digests


def test_main_track_without_chapters_has_no_videos() -> None:
    registered, _ = _build({"type": "main", "title": "Empty"})

    assert len(registered) == 1
    assert registered[0].get("chapters") == []
    assert registered[0].get("numVideos") == 0


def test_side_track_links_videos_by_raw_slug() -> None:
    registered, _ = _build({"type": "side", "videos": ["a", "b"]}, name="extras")

    assert len(registered) == 1
    track = registered[0]
    assert track.get("numVideos") == 2
    assert track.get("videos") == [_fake_id("a"), _fake_id("b")]
    assert track.get("chapters") is None
    assert track.get("type") == "side"


@pytest.mark.parametrize("track_type", ["bogus", None])
def test_unknown_track_type_registers_nothing(track_type: str | None, caplog: pytest.LogCaptureFixture) -> None:
    data: dict[str, Any] = {"title": "Mystery"}
    if track_type is not None:
        data["type"] = track_type

    registered, returned = _build(data)

    assert registered == []
    assert returned == []
    assert "unknown type" in caplog.text


def test_chapter_without_lessons_counts_no_videos() -> None:
    registered, _ = _build(
        {
            "type": "main",
            "chapters": [{"title": "Soon"}, {"title": "Now", "lessons": ["a"]}],
        }
    )

    track, soon, now = registered
    assert soon.get("lessons") == []
    assert now.get("lessons") == ["id:lessons/a"]
    assert track.get("numVideos") == 1


def test_side_track_without_videos_is_empty() -> None:
    registered, _ = _build({"type": "side", "title": "Placeholder"})

    assert len(registered) == 1
    assert registered[0].get("numVideos") == 0
    assert registered[0].get("videos") == []
