from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List

from ..constants import XREF_THRESHOLD


class EdgeKind(str, Enum):
    XREF = "xref"
    CALL = "call"
    JUMP = "jump"


@dataclass(frozen=True, slots=True)
class Edge:
    kind: EdgeKind
    text: str
    mnemonic: str
    source: int
    target: int


@dataclass
class FlowRecorder:
    """
    Collects the cross-references, calls and jumps produced while resolving
    one instruction. Every map is keyed by target address.

    Cross-references at or below `XREF_THRESHOLD` (the zero and ones
    registers) are dropped, and a target lists a given source at most once.
    Calls and jumps are always appended.
    """

    source: int
    xrefs: Dict[int, List[Edge]] = field(default_factory=dict)
    calls: Dict[int, List[Edge]] = field(default_factory=dict)
    jumps: Dict[int, List[Edge]] = field(default_factory=dict)

    def _edge(self, kind: EdgeKind, template: str, target: int, mnemonic: str) -> Edge:
        return Edge(
            kind=kind,
            text=template % target,
            mnemonic=mnemonic,
            source=self.source,
            target=target,
        )

    def xref(self, template: str, target: int, mnemonic: str) -> bool:
        if target <= XREF_THRESHOLD:
            return False
        bucket = self.xrefs.setdefault(target, [])
        if any(edge.source == self.source for edge in bucket):
            return False
        bucket.append(self._edge(EdgeKind.XREF, template, target, mnemonic))
        return True

    def call(self, template: str, target: int, mnemonic: str) -> None:
        self.calls.setdefault(target, []).append(
            self._edge(EdgeKind.CALL, template, target, mnemonic)
        )

    def jump(self, template: str, target: int, mnemonic: str) -> None:
        self.jumps.setdefault(target, []).append(
            self._edge(EdgeKind.JUMP, template, target, mnemonic)
        )

    def merge(self, other: FlowRecorder) -> None:
        """
        Fold another recorder's edges into this one, e.g. to build a
        program-wide map. Cross-references keep one edge per source under each
        target; calls and jumps are appended.
        """
        for target, bucket in other.xrefs.items():
            merged = self.xrefs.setdefault(target, [])
            seen = {edge.source for edge in merged}
            for edge in bucket:
                if edge.source not in seen:
                    merged.append(edge)
                    seen.add(edge.source)
        for mine, theirs in ((self.calls, other.calls), (self.jumps, other.jumps)):
            for target, bucket in theirs.items():
                mine.setdefault(target, []).extend(bucket)

    def edges(self) -> List[Edge]:
        out: List[Edge] = []
        for table in (self.xrefs, self.calls, self.jumps):
            for bucket in table.values():
                out.extend(bucket)
        return out


__all__ = ["Edge", "EdgeKind", "FlowRecorder"]
