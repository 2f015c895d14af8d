"""End-to-end tests for the hustler-rules command."""

from pathlib import Path

import hustler_rules
from hustler_rules.__main__ import cli, main
from hustler_rules.layout import ProjectLayout, default_base_dir


def _dest(project_root: Path) -> Path:
    return project_root / ".claude" / "rules" / "hustler-rails"


def _rails_project(project_root: Path, write_file) -> None:
    write_file(project_root / "Gemfile.lock", "GEM\n  specs:\n    turbo-rails (2.0.5)\n")
    write_file(project_root / "config" / "database.yml", "default:\n  adapter: postgresql\n")


def test_full_run(
    project_root: Path, base_dir: Path, rules_source: Path, write_rule, write_file, cli_runner
) -> None:
    _rails_project(project_root, write_file)
    write_file(rules_source / "views" / "examples" / "modal" / "_modal.html.erb", "<dialog>")
    write_rule("general.md", "description: Always\n")
    write_rule("modal.md", "dependencies: [turbo-rails]\nexamples: [modal]\n")
    write_rule("sqlite.md", "dependencies: [sqlite3]\n")
    write_rule("notes.md", None)

    result = cli_runner.invoke(cli, [str(base_dir)])

    assert result.exit_code == 0, result.output
    assert "Detecting dependencies..." in result.output
    assert "Found 2 dependencies" in result.output
    assert "✓ general.md" in result.output
    assert "✓ modal.md" in result.output
    assert "+ example: modal" in result.output
    assert "✗ sqlite.md (missing: sqlite3)" in result.output
    assert "notes.md" not in result.output
    assert "2 copied, 1 skipped" in result.output
    assert ".claude/rules/hustler-rails/" in result.output
    assert (_dest(project_root) / "modal.md").exists()
    assert (_dest(project_root) / "views" / "examples" / "modal" / "_modal.html.erb").exists()
    assert not (_dest(project_root) / "sqlite.md").exists()


def test_parse_error_is_reported(
    project_root: Path, base_dir: Path, write_rule, cli_runner
) -> None:
    write_rule("broken.md", "dependencies: [sqlite3\nexamples: []\n")
    write_rule("ok.md", "dependencies: []\n")

    result = cli_runner.invoke(cli, [str(base_dir)])

    assert result.exit_code == 0, result.output
    assert "⚠" in result.output
    assert "broken.md" in result.output
    assert "Front matter preview:" in result.output
    assert "    dependencies: [sqlite3" in result.output
    assert "1 copied, 1 skipped" in result.output


def test_missing_base_dir_copies_nothing(project_root: Path, tmp_path: Path, cli_runner) -> None:
    result = cli_runner.invoke(cli, [str(tmp_path / "nowhere")])

    assert result.exit_code == 0, result.output
    assert "0 copied, 0 skipped" in result.output
    assert not _dest(project_root).exists()


def test_default_base_dir_uses_bundled_rules(project_root: Path, cli_runner) -> None:
    layout = ProjectLayout(project_root=project_root, base_dir=default_base_dir())
    assert layout.rules_source.is_dir()
    assert layout.rules_source == Path(hustler_rules.__file__).resolve().parent / "assets" / "rules"
    assert (layout.rules_source / "README.md").is_file()

    result = cli_runner.invoke(cli, [])

    assert result.exit_code == 0, result.output
    assert "README.md" not in result.output


def test_copy_failure_is_fatal(
    project_root: Path, base_dir: Path, write_rule, write_file, cli_runner
) -> None:
    write_rule("general.md", "description: ok\n")
    write_file(project_root / ".claude" / "rules", "not a directory")

    result = cli_runner.invoke(cli, [str(base_dir)])

    assert result.exit_code != 0
    assert "Fatal:" in result.output
    assert "copied," not in result.output


def test_main_returns_exit_codes(
    project_root: Path, base_dir: Path, write_rule, write_file, monkeypatch
) -> None:
    monkeypatch.setattr("sys.argv", ["hustler-rules", str(base_dir)])
    assert main() == 0

    write_rule("general.md", "description: ok\n")
    write_file(project_root / ".claude" / "rules", "not a directory")
    assert main() == 2


def test_help(cli_runner) -> None:
    result = cli_runner.invoke(cli, ["-h"])

    assert result.exit_code == 0
    assert "BASE_DIR" in result.output


def test_undecodable_rule_is_fatal(
    project_root: Path, base_dir: Path, rules_source: Path, monkeypatch
) -> None:
    (rules_source / "latin1.md").write_bytes(b"---\ndependencies: []\n---\n\ncaf\xe9\n")
    monkeypatch.setattr("sys.argv", ["hustler-rules", str(base_dir)])

    assert main() == 2


def test_undecodable_rule_reports_fatal_error(
    project_root: Path, base_dir: Path, rules_source: Path, cli_runner
) -> None:
    (rules_source / "latin1.md").write_bytes(b"---\ndependencies: []\n---\n\ncaf\xe9\n")

    result = cli_runner.invoke(cli, [str(base_dir)])

    assert result.exit_code != 0
    assert "Fatal:" in result.output
    assert "copied," not in result.output
