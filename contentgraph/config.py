from pathlib import Path
from typing import Any
from uuid import UUID

import yaml
from pydantic import BaseModel, Field, field_validator

from .nodes.host import DEFAULT_NAMESPACE
from .nodes.models import NodeType

CONFIG_FILENAME = "contentgraph.yml"


class SourcesConfig(BaseModel):
    """Subdirectories of ``content_dir`` holding each content category."""

    challenges: Path = Field(default=Path("videos/challenges"))
    lessons: Path = Field(default=Path("videos/lessons"))
    guest_tutorials: Path = Field(default=Path("videos/guest-tutorials"))
    tracks: Path = Field(default=Path("tracks"))

    @field_validator("challenges", "lessons", "guest_tutorials", "tracks", mode="before")
    def _ensure_path(cls, value: Any) -> Path:
        return Path(value)

    def directories(self) -> list[tuple[NodeType, Path]]:
        """Category directories in the order they should be ingested."""
        return [
            (NodeType.CHALLENGE, self.challenges),
            (NodeType.LESSON, self.lessons),
            (NodeType.GUEST_TUTORIAL, self.guest_tutorials),
            (NodeType.TRACK, self.tracks),
        ]


class Config(BaseModel):
    project_name: str = Field(default="Content Graph")
    content_dir: Path = Field(default=Path("content"))
    output_dir: Path = Field(default=Path("public/graph"))
    sources: SourcesConfig = Field(default_factory=SourcesConfig)
    id_namespace: UUID = Field(
        default=DEFAULT_NAMESPACE,
        description="UUID namespace used when synthesizing node identifiers.",
    )

    @field_validator("content_dir", "output_dir", mode="before")
    def _ensure_path(cls, value: Any) -> Path:
        return Path(value)

    def source_dirs(self) -> list[tuple[NodeType, Path]]:
        return [(category, self.content_dir / path) for category, path in self.sources.directories()]


def load_config(path: str | Path) -> Config:
    """Load configuration and resolve relative paths based on the config location.

    ``path`` may point to a file (e.g. ``/site/contentgraph.yml``) or a
    directory containing that file. Relative ``content_dir`` and
    ``output_dir`` values are interpreted relative to the directory holding
    the config file; category directories stay relative to ``content_dir``.
    """
    candidate = Path(path)
    data: dict[str, Any] = {}
    base_dir: Path
    if candidate.is_dir():
        # A project directory without a config file uses defaults.
        config_file = candidate / CONFIG_FILENAME
        if config_file.exists():
            with config_file.open("r", encoding="utf-8") as handle:
                data = yaml.safe_load(handle) or {}
        base_dir = candidate.resolve()
    else:
        if not candidate.exists():
            raise FileNotFoundError(candidate)
        with candidate.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
        base_dir = candidate.parent.resolve()

    cfg = Config(**data)

    def _abs_required(value: Path) -> Path:
        return value if value.is_absolute() else (base_dir / value).resolve()

    cfg.content_dir = _abs_required(cfg.content_dir)
    cfg.output_dir = _abs_required(cfg.output_dir)
    return cfg
