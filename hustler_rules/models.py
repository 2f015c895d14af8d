from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional


class RuleOutcome(str, Enum):
    COPIED = "copied"
    MISSING_DEPENDENCIES = "missing_dependencies"
    PARSE_ERROR = "parse_error"


@dataclass
class RuleResult:
    relative_path: str
    outcome: RuleOutcome
    missing: list[str] = field(default_factory=list)
    examples: list[str] = field(default_factory=list)
    error: Optional[str] = None
    preview: list[str] = field(default_factory=list)

    @property
    def skipped(self) -> bool:
        return self.outcome != RuleOutcome.COPIED


@dataclass
class ProvisionResult:
    destination: Path
    results: list[RuleResult] = field(default_factory=list)

    @property
    def copied(self) -> int:
        return sum(1 for item in self.results if not item.skipped)

    @property
    def skipped(self) -> int:
        return sum(1 for item in self.results if item.skipped)

    def by_outcome(self, outcome: RuleOutcome) -> list[RuleResult]:
        return [item for item in self.results if item.outcome == outcome]
