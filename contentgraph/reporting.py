"""Build reporting helpers for the content graph."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

from pydantic import BaseModel, Field

from .store import GraphStore
from .verify import VerificationReport


class GraphReport(BaseModel):
    project: str
    generated_at: datetime
    duration_seconds: float
    nodes: dict[str, int] = Field(default_factory=dict)
    total_nodes: int = 0
    dangling_references: int = 0
    warnings: list[str] = Field(default_factory=list)


def assemble_report(
    *,
    project: str,
    duration_seconds: float,
    store: GraphStore,
    verification: VerificationReport,
) -> GraphReport:
    warnings = [issue.message for issue in verification.issues]
    return GraphReport(
        project=project,
        generated_at=datetime.now(timezone.utc),
        duration_seconds=duration_seconds,
        nodes=store.counts(),
        total_nodes=len(store),
        dangling_references=len(verification.issues),
        warnings=warnings,
    )


def write_report(report: GraphReport, output_dir: Path) -> Path:
    output_dir.mkdir(parents=True, exist_ok=True)
    target = output_dir / "build-report.json"
    with target.open("w", encoding="utf-8") as handle:
        json.dump(report.model_dump(mode="json"), handle, ensure_ascii=False, indent=2)
    return target
