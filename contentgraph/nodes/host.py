"""Collaborators supplied by the host that owns the node graph."""

from __future__ import annotations

import hashlib
import json
import uuid
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Mapping, Protocol

from .models import ContentNode

DEFAULT_NAMESPACE = uuid.UUID("8f1c2d0e-5b7a-5c3e-9d41-2a6f0b3c7e19")


class NodeSink(Protocol):
    def __call__(self, node: ContentNode) -> None:
        ...


class IdSynthesizer(Protocol):
    def __call__(self, key: str) -> str:
        ...


class ContentDigester(Protocol):
    def __call__(self, data: Mapping[str, Any]) -> str:
        ...


class FileSystem(Protocol):
    """Directory access needed to discover contribution files."""

    def exists(self, path: str) -> bool:
        ...

    def listdir(self, path: str) -> list[str]:
        ...


def create_node_id(key: str, namespace: uuid.UUID = DEFAULT_NAMESPACE) -> str:
    """Derive a stable opaque identifier from a namespaced key."""
    return str(uuid.uuid5(namespace, key))


def id_synthesizer(namespace: uuid.UUID = DEFAULT_NAMESPACE) -> IdSynthesizer:
    def synthesize(key: str) -> str:
        return create_node_id(key, namespace)

    return synthesize


def create_content_digest(data: Mapping[str, Any]) -> str:
    """Hash canonical JSON of ``data`` for change detection."""
    payload = json.dumps(data, sort_keys=True, separators=(",", ":"), ensure_ascii=False, default=str)
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


class LocalFileSystem:
    """File system access backed by the real disk."""

    def exists(self, path: str) -> bool:
        return Path(path).exists()

    def listdir(self, path: str) -> list[str]:
        return sorted(entry.name for entry in Path(path).iterdir())


class MemoryFileSystem:
    """Dictionary-backed directory listing for tests and dry runs."""

    def __init__(self, directories: Mapping[str, Iterable[str]] | None = None) -> None:
        self._directories: dict[str, list[str]] = {}
        for path, entries in (directories or {}).items():
            self.add(path, entries)

    def add(self, path: str, entries: Iterable[str]) -> None:
        self._directories[_normalize(path)] = list(entries)

    def exists(self, path: str) -> bool:
        return _normalize(path) in self._directories

    def listdir(self, path: str) -> list[str]:
        key = _normalize(path)
        if key not in self._directories:
            raise FileNotFoundError(path)
        return sorted(self._directories[key])


def _normalize(path: str) -> str:
    return path.replace("\\", "/").rstrip("/")


@dataclass(slots=True)
class NodeActions:
    """Bundle of host callbacks passed to the mappers."""

    register: NodeSink
    create_node_id: IdSynthesizer
    create_content_digest: ContentDigester = create_content_digest
    filesystem: FileSystem = field(default_factory=LocalFileSystem)
