"""Typed representations of source files and the nodes built from them."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class NodeType(str, Enum):
    """Discriminant written to ``internal.type``."""

    CHALLENGE = "Challenge"
    LESSON = "Lesson"
    GUEST_TUTORIAL = "GuestTutorial"
    CONTRIBUTION = "Contribution"
    TRACK = "Track"
    CHAPTER = "Chapter"


VIDEO_CATEGORIES = (NodeType.CHALLENGE, NodeType.LESSON, NodeType.GUEST_TUTORIAL)

REFERENCE_FIELDS = ("video", "contributions", "lessons", "videos", "chapters", "track")


class SourceRecord(BaseModel):
    """A parsed JSON file together with its location inside a content root."""

    id: str = Field(description="Host identifier of the JSON file node.")
    data: dict[str, Any] = Field(default_factory=dict, description="Parsed JSON object.")
    relative_path: str = Field(description="File path relative to the content root.")
    relative_directory: str = Field(default="", description="Directory of the file relative to the root.")
    dir: str = Field(description="Absolute directory containing the file.")
    name: str = Field(description="File name without its extension.")

    @field_validator("relative_path", "relative_directory", "dir", mode="before")
    def _posix_separators(cls, value: Any) -> str:
        return str(value).replace("\\", "/")


class NodeInternal(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    type: str
    content_digest: str = Field(alias="contentDigest")


class ContentNode(BaseModel):
    """Output record handed to the node sink.

    Passthrough JSON fields and derived fields are kept as extra fields so the
    dumped record mirrors the source object.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str
    parent: str | None = None
    internal: NodeInternal

    @property
    def node_type(self) -> str:
        return self.internal.type

    def get(self, key: str, default: Any = None) -> Any:
        if key in type(self).model_fields:
            return getattr(self, key)
        return (self.model_extra or {}).get(key, default)

    def references(self) -> dict[str, list[str]]:
        """Return the cross-reference fields present on this node as id lists."""
        found: dict[str, list[str]] = {}
        for key in REFERENCE_FIELDS:
            value = self.get(key)
            if value is None:
                continue
            found[key] = [value] if isinstance(value, str) else list(value)
        return found

    def to_record(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
