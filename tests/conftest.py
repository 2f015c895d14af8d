import sys
from pathlib import Path

from click.testing import CliRunner
import pytest


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()

from hustler_rules.layout import ProjectLayout  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setattr(Path, "home", lambda: tmp_path)


@pytest.fixture
def project_root(tmp_path: Path, monkeypatch) -> Path:
    root = tmp_path / "project"
    root.mkdir()
    monkeypatch.chdir(root)
    return root


@pytest.fixture
def base_dir(tmp_path: Path) -> Path:
    root = tmp_path / "kit"
    (root / "assets" / "rules").mkdir(parents=True)
    return root


@pytest.fixture
def rules_source(base_dir: Path) -> Path:
    return base_dir / "assets" / "rules"


@pytest.fixture
def layout(project_root: Path, base_dir: Path) -> ProjectLayout:
    return ProjectLayout(project_root=project_root, base_dir=base_dir)


@pytest.fixture
def write_file():
    def _write(path: Path, text: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_rule(rules_source: Path, write_file):
    def _write(relative: str, frontmatter: str | None, body: str = "Rule body.\n") -> Path:
        text = body if frontmatter is None else f"---\n{frontmatter}---\n\n{body}"
        return write_file(rules_source / relative, text)

    return _write


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()
