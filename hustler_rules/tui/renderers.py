from rich.console import Console
from rich.markup import escape

from hustler_rules.detection.models import DetectionReport
from hustler_rules.models import ProvisionResult, RuleOutcome, RuleResult
from hustler_rules.tui.enums import OUTCOME_STYLE, UIMarker, UIStyle
from hustler_rules.tui.sections import UISection
from hustler_rules.tui.tables import DetectionTable, ResultsTable


class ProvisionConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_detection_start(self) -> None:
        self.console.print("Detecting dependencies...")

    def render_detection(self, report: DetectionReport) -> None:
        dependencies = report.dependencies
        self.console.print(
            UISection.wrap(
                "dependency sources",
                DetectionTable.sources_table(report),
                style=UIStyle.BLUE.value,
            )
        )
        self.console.print(f"Found {len(dependencies)} dependencies")

    def render_processing_start(self) -> None:
        self.console.print()
        self.console.print("Processing rule files...")

    def render_rule_result(self, item: RuleResult) -> None:
        style = OUTCOME_STYLE[item.outcome]
        path = escape(item.relative_path)

        if item.outcome == RuleOutcome.COPIED:
            self.console.print(f"[{style}]{UIMarker.COPIED.value} {path}[/{style}]")
            for name in item.examples:
                self.console.print(f"  {UIMarker.EXAMPLE.value} example: {escape(name)}")
            return

        if item.outcome == RuleOutcome.MISSING_DEPENDENCIES:
            missing = escape(", ".join(item.missing))
            self.console.print(
                f"[{style}]{UIMarker.REJECTED.value} {path}[/{style}] (missing: {missing})"
            )
            return

        self.console.print(
            f"[{style}]{UIMarker.WARNING.value} Front matter parsing error in {path}:[/{style}]"
        )
        self.console.print(f"  {escape(item.error or '')}")
        self.console.print("  Front matter preview:")
        for line in item.preview:
            self.console.print(f"    {escape(line)}")

    def render_summary(self, result: ProvisionResult, destination: str) -> None:
        style = UIStyle.GREEN.value
        if result.by_outcome(RuleOutcome.PARSE_ERROR):
            style = UIStyle.YELLOW.value
        self.console.print()
        self.console.print(
            UISection.wrap(
                "Done!",
                ResultsTable.summary_block(result, destination=escape(destination)),
                style=style,
            )
        )
