"""Referential integrity checks for a built content graph."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from .nodes.models import ContentNode


@dataclass(slots=True)
class VerificationIssue:
    """A cross-reference that does not resolve to a registered node."""

    kind: str
    node_id: str
    node_type: str
    field: str
    target: str

    @property
    def message(self) -> str:
        return f"{self.node_type} {self.node_id} :: {self.field} -> missing node {self.target}"


@dataclass(slots=True)
class VerificationReport:
    """Aggregate verification results."""

    checked_nodes: int
    checked_references: int = 0
    issues: list[VerificationIssue] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.issues


def verify_graph(nodes: Iterable[ContentNode]) -> VerificationReport:
    """Report every reference id that no node in ``nodes`` carries."""
    node_list = list(nodes)
    known = {node.id for node in node_list}
    report = VerificationReport(checked_nodes=len(node_list))

    for node in node_list:
        for field_name, targets in node.references().items():
            for target in targets:
                report.checked_references += 1
                if target in known:
                    continue
                report.issues.append(
                    VerificationIssue(
                        kind="dangling-reference",
                        node_id=node.id,
                        node_type=node.node_type,
                        field=field_name,
                        target=target,
                    )
                )

    return report
