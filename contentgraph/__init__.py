"""Content graph package exposing the node builder and the ingestion pipeline."""

from __future__ import annotations

from importlib import metadata
from pathlib import Path
import tomllib

from .ingest import load_graph
from .nodes import ContentGraphBuilder, ContentNode, SourceRecord

__all__ = ["ContentGraphBuilder", "ContentNode", "SourceRecord", "__version__", "load_graph"]

DISTRIBUTION = "contentgraph"


def _discover_version() -> str:
    """Installed distribution version, else the checkout's pyproject version."""
    try:
        return metadata.version(DISTRIBUTION)
    except metadata.PackageNotFoundError:
        pass
    pyproject = Path(__file__).resolve().parents[1] / "pyproject.toml"
    if not pyproject.is_file():
        return "0.0.0"
    project = tomllib.loads(pyproject.read_text(encoding="utf-8")).get("project", {})
    return str(project.get("version", "0.0.0"))


__version__ = _discover_version()
