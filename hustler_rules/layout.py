from dataclasses import dataclass
from pathlib import Path

from hustler_rules.constants import (
    DATABASE_CONFIG,
    EXAMPLES_DIRNAME,
    GEMFILE_LOCK,
    IMPORTMAP_CONFIG,
    RULES_DEST_DIRNAME,
    RULES_SOURCE_DIRNAME,
    VIEWS_DIRNAME,
)


def default_base_dir() -> Path:
    """The package directory, which ships the bundled `assets/rules` library."""
    return Path(__file__).resolve().parent


@dataclass(frozen=True)
class ProjectLayout:
    """Fixed input and output locations, resolved against two roots.

    ``project_root`` is the Rails project being scanned (normally the cwd);
    ``base_dir`` is where the ``assets/rules`` library lives.
    """

    project_root: Path
    base_dir: Path

    @property
    def gemfile_lock(self) -> Path:
        return self.project_root / GEMFILE_LOCK

    @property
    def database_config(self) -> Path:
        return self.project_root / DATABASE_CONFIG

    @property
    def importmap_config(self) -> Path:
        return self.project_root / IMPORTMAP_CONFIG

    @property
    def views_dir(self) -> Path:
        return self.project_root / VIEWS_DIRNAME

    @property
    def rules_source(self) -> Path:
        return self.base_dir / RULES_SOURCE_DIRNAME

    @property
    def examples_source(self) -> Path:
        return self.rules_source / EXAMPLES_DIRNAME

    @property
    def rules_dest(self) -> Path:
        return self.project_root / RULES_DEST_DIRNAME

    @property
    def examples_dest(self) -> Path:
        return self.rules_dest / EXAMPLES_DIRNAME
