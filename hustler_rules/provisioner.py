from pathlib import Path
from typing import Callable, Optional

from hustler_rules.detection.models import DependencySet
from hustler_rules.errors import FrontmatterParseError
from hustler_rules.layout import ProjectLayout
from hustler_rules.models import ProvisionResult, RuleOutcome, RuleResult
from hustler_rules.rules.models import RuleDocument
from hustler_rules.rules.repository import RulesRepository
from hustler_rules.rules.selector import RuleSelector
from hustler_rules.utils import copy_path


ResultCallback = Callable[[RuleResult], None]


class RulesProvisioner:
    """Copy qualifying rule documents and their examples into the destination tree.

    Front-matter errors are recorded per document and never stop the run.
    Filesystem errors while copying propagate to the caller.
    """

    def __init__(
        self, layout: ProjectLayout, repository: Optional[RulesRepository] = None
    ) -> None:
        self._layout = layout
        self._repository = repository or RulesRepository(
            rules_dir=layout.rules_source, examples_dir=layout.examples_source
        )

    @property
    def destination(self) -> Path:
        return self._layout.rules_dest

    def provision(
        self, dependencies: DependencySet, on_result: Optional[ResultCallback] = None
    ) -> ProvisionResult:
        selector = RuleSelector(dependencies)
        result = ProvisionResult(destination=self.destination)

        for path in self._repository.list_rule_paths():
            item = self._process(path, selector)
            if item is None:
                continue
            result.results.append(item)
            if on_result is not None:
                on_result(item)

        return result

    def _process(self, path: Path, selector: RuleSelector) -> Optional[RuleResult]:
        try:
            document = self._repository.load_rule(path)
        except FrontmatterParseError as exc:
            return RuleResult(
                relative_path=self._repository.relative_path(path),
                outcome=RuleOutcome.PARSE_ERROR,
                error=exc.detail,
                preview=exc.preview,
            )

        if not document.has_frontmatter:
            return None

        selection = selector.select(document)
        if not selection.qualifies:
            return RuleResult(
                relative_path=document.relative_path,
                outcome=RuleOutcome.MISSING_DEPENDENCIES,
                missing=selection.missing,
            )

        copy_path(document.source_path, self.destination / document.relative_path)
        return RuleResult(
            relative_path=document.relative_path,
            outcome=RuleOutcome.COPIED,
            examples=self._copy_examples(document),
        )

    def _copy_examples(self, document: RuleDocument) -> list[str]:
        copied: list[str] = []
        names = document.metadata.examples if document.metadata else []
        for name in names:
            source = self._repository.find_example(name)
            if source is None:
                continue
            relative = source.relative_to(self._repository.examples_dir)
            copy_path(source, self._layout.examples_dest / relative)
            copied.append(name)
        return copied
