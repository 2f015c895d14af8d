"""Read-only access to the rules library."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from hustler_rules.constants import README_FILENAME, RULE_SUFFIX
from hustler_rules.rules.models import RuleDocument
from hustler_rules.rules.parser import parse_rule_document


class RulesRepository:
    def __init__(self, rules_dir: Path, examples_dir: Path) -> None:
        self._rules_dir = rules_dir
        self._examples_dir = examples_dir

    @property
    def examples_dir(self) -> Path:
        return self._examples_dir.resolve()

    def list_rule_paths(self) -> list[Path]:
        if not self._rules_dir.is_dir():
            return []
        return sorted(
            path
            for path in self._rules_dir.rglob(f"*{RULE_SUFFIX}")
            if path.is_file() and path.name != README_FILENAME
        )

    def relative_path(self, path: Path) -> str:
        return path.relative_to(self._rules_dir).as_posix()

    def load_rule(self, path: Path) -> RuleDocument:
        return parse_rule_document(path, self._rules_dir)

    def find_example(self, name: str) -> Optional[Path]:
        """Resolve an example name under the examples root, or None.

        Names that resolve outside the root (absolute paths, `..`) are treated
        as missing.
        """
        root = self.examples_dir
        path = (root / name).resolve()
        if path == root or not path.is_relative_to(root):
            return None
        if not path.exists():
            return None
        return path
