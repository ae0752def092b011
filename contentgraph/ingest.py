"""Walk the content tree and feed every JSON file to the graph builder."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable

from .config import Config
from .nodes import ContentGraphBuilder, NodeType, SourceRecord, id_synthesizer
from .nodes.host import IdSynthesizer
from .store import GraphStore

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = {".json"}


class ContentLoadError(ValueError):
    """Raised when a content file cannot be parsed as JSON."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


def load_graph(config: Config, store: GraphStore | None = None) -> GraphStore:
    """Build every configured content category into ``store``."""
    store = store if store is not None else GraphStore()
    create_node_id = id_synthesizer(config.id_namespace)
    builder = ContentGraphBuilder(register=store.register, create_node_id=create_node_id)

    for category, root in config.source_dirs():
        if not root.exists():
            logger.debug("No %s directory at %s; skipping.", category.value, root)
            continue
        for record in iter_source_records(root, category, create_node_id):
            logger.debug("Building %s node from %s", category.value, record.relative_path)
            builder.build(category, record)

    return store


def iter_source_records(
    root: Path,
    category: NodeType,
    create_node_id: IdSynthesizer | None = None,
) -> Iterable[SourceRecord]:
    """Yield a source record for every JSON object file below ``root``."""
    create_node_id = create_node_id or id_synthesizer()
    for path in _iter_content_files(root):
        data = _read_json(path)
        if not isinstance(data, dict):
            logger.warning("Content file %s should contain a JSON object; ignoring.", path)
            continue
        relative = path.relative_to(root)
        relative_directory = relative.parent.as_posix()
        yield SourceRecord(
            id=create_node_id(f"file/{category.value}/{relative.as_posix()}"),
            data=data,
            relative_path=relative.as_posix(),
            relative_directory="" if relative_directory == "." else relative_directory,
            dir=path.parent.resolve().as_posix(),
            name=path.stem,
        )


def _read_json(path: Path) -> object:
    try:
        with path.open("r", encoding="utf-8") as handle:
            return json.load(handle)
    except json.JSONDecodeError as exc:
        raise ContentLoadError(f"Invalid JSON in {path}: {exc}", path=path) from exc
    except UnicodeDecodeError as exc:
        raise ContentLoadError(f"{path} is not valid UTF-8: {exc}", path=path) from exc


def _iter_content_files(root: Path) -> Iterable[Path]:
    directories = sorted(p for p in root.rglob("*") if p.is_dir())
    directories.insert(0, root)

    for directory in directories:
        for path in sorted(directory.iterdir()):
            if path.is_file() and path.suffix.lower() in SUPPORTED_SUFFIXES:
                yield path
