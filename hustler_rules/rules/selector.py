from dataclasses import dataclass

from hustler_rules.detection.models import DependencySet
from hustler_rules.rules.models import RuleDocument


@dataclass(frozen=True)
class RuleSelection:
    missing: list[str]

    @property
    def qualifies(self) -> bool:
        return not self.missing


class RuleSelector:
    """Match a rule's required dependencies against the detected set (logical AND)."""

    def __init__(self, dependencies: DependencySet) -> None:
        self._dependencies = dependencies

    def select(self, document: RuleDocument) -> RuleSelection:
        required = document.metadata.dependencies if document.metadata else []
        return RuleSelection(missing=self._dependencies.missing(required))
