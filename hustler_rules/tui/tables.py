from rich.table import Table

from hustler_rules.detection.models import DependencySource, DetectionReport
from hustler_rules.models import ProvisionResult, RuleOutcome


SOURCE_LABELS = {
    DependencySource.GEMFILE_LOCK: "Gemfile.lock",
    DependencySource.DATABASE: "database adapter",
    DependencySource.IMPORTMAP: "importmap pins",
    DependencySource.CDN: "CDN assets in views",
}


class DetectionTable:
    @staticmethod
    def sources_table(report: DetectionReport) -> Table:
        table = Table(show_header=True, header_style="bold", expand=False)
        table.add_column("Source")
        table.add_column("Names", justify="right")
        counts = report.counts()
        for source in DependencySource:
            table.add_row(SOURCE_LABELS[source], str(counts.get(source, 0)))
        return table


class ResultsTable:
    @staticmethod
    def summary_block(result: ProvisionResult, destination: str) -> Table:
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Results", f"{result.copied} copied, {result.skipped} skipped")
        missing = len(result.by_outcome(RuleOutcome.MISSING_DEPENDENCIES))
        errors = len(result.by_outcome(RuleOutcome.PARSE_ERROR))
        if result.skipped:
            table.add_row("Skipped", f"missing_dependencies={missing}  parse_error={errors}")
        table.add_row("Destination", destination)
        return table
