from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List

Manifest = Dict[str, Any]


@dataclass
class CullResult:
    manifest: Manifest
    removed: List[str] = field(default_factory=list)
    scripts_pruned: List[str] = field(default_factory=list)

    def removed_sorted(self) -> List[str]:
        return sorted(self.removed)
