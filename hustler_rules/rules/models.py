"""Rule document data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class RuleMetadata:
    dependencies: list[str] = field(default_factory=list)
    examples: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class RuleDocument:
    relative_path: str
    source_path: Path
    text: str
    frontmatter: Optional[str] = None
    metadata: Optional[RuleMetadata] = None

    @property
    def has_frontmatter(self) -> bool:
        return self.frontmatter is not None
