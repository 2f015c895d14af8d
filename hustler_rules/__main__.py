from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from hustler_rules.detection.service import DependencyDetector
from hustler_rules.layout import ProjectLayout, default_base_dir
from hustler_rules.provisioner import RulesProvisioner
from hustler_rules.tui import ProvisionConsoleUI
from hustler_rules.utils import display_path


def _layout_for(base_dir: Optional[Path]) -> ProjectLayout:
    base = base_dir.expanduser() if base_dir is not None else default_base_dir()
    return ProjectLayout(project_root=Path.cwd(), base_dir=base)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument(
    "base_dir",
    required=False,
    type=click.Path(file_okay=False, path_type=Path),
)
def cli(base_dir: Optional[Path]) -> None:
    """Copy hustler-rails rules that match this project's dependencies.

    BASE_DIR is the directory holding assets/rules; it defaults to the
    rules library bundled with this package. The project is the current
    directory.
    """
    ui = ProvisionConsoleUI(Console())
    layout = _layout_for(base_dir)

    ui.render_detection_start()
    try:
        report = DependencyDetector().detect(layout)
    except OSError as exc:
        raise click.ClickException(f"Fatal: {exc}")
    ui.render_detection(report)

    ui.render_processing_start()
    provisioner = RulesProvisioner(layout)
    try:
        result = provisioner.provision(
            report.dependencies, on_result=ui.render_rule_result
        )
    except (OSError, UnicodeDecodeError) as exc:
        raise click.ClickException(f"Fatal: {exc}")

    destination = display_path(result.destination, layout.project_root)
    ui.render_summary(result, destination=f"{destination}/")


def main() -> int:
    try:
        cli(standalone_mode=False)
    except click.exceptions.Exit as exc:
        code = exc.exit_code
        return code if isinstance(code, int) else 1
    except click.ClickException as exc:
        exc.show()
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
