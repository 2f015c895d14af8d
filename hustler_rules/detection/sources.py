"""Heuristic dependency extractors, one per project input."""

from __future__ import annotations

from abc import ABC, abstractmethod

from hustler_rules.constants import (
    ADAPTER_ALIASES,
    ADAPTER_RE,
    CDN_LIBRARY_RE,
    IMPORTMAP_PIN_RE,
    LOCK_INDENT,
    VIEW_PATTERNS,
)
from hustler_rules.detection.models import DependencySource
from hustler_rules.layout import ProjectLayout
from hustler_rules.utils import read_lines_safe, read_text_safe


class IDependencySource(ABC):
    kind: DependencySource

    @abstractmethod
    def extract(self, layout: ProjectLayout) -> list[str]:
        """Return raw dependency names found in the project, or []."""


class GemfileLockSource(IDependencySource):
    """Indented ``Gemfile.lock`` entries, e.g. ``    rails (7.1.3)``."""

    kind = DependencySource.GEMFILE_LOCK

    def extract(self, layout: ProjectLayout) -> list[str]:
        names: list[str] = []
        for line in read_lines_safe(layout.gemfile_lock):
            if not line.startswith(LOCK_INDENT):
                continue
            tokens = line.split()
            if tokens:
                names.append(tokens[0])
        return names


class DatabaseAdapterSource(IDependencySource):
    """First ``adapter:`` in ``config/database.yml`` plus canonical gem aliases."""

    kind = DependencySource.DATABASE

    def extract(self, layout: ProjectLayout) -> list[str]:
        text = read_text_safe(layout.database_config)
        if text is None:
            return []
        match = ADAPTER_RE.search(text)
        if match is None:
            return []

        adapter = match.group(1)
        names = [adapter]
        # substring test, not equality
        for needle, alias in ADAPTER_ALIASES:
            if needle in adapter:
                names.append(alias)
        return names


class ImportmapSource(IDependencySource):
    kind = DependencySource.IMPORTMAP

    def extract(self, layout: ProjectLayout) -> list[str]:
        names: list[str] = []
        for line in read_lines_safe(layout.importmap_config):
            match = IMPORTMAP_PIN_RE.search(line)
            if match:
                names.append(match.group(1))
        return names


class CdnViewSource(IDependencySource):
    """Library names from unpkg, jsdelivr and cdnjs URLs in view templates."""

    kind = DependencySource.CDN

    def extract(self, layout: ProjectLayout) -> list[str]:
        views_dir = layout.views_dir
        if not views_dir.is_dir():
            return []

        names: list[str] = []
        for pattern in VIEW_PATTERNS:
            for view_file in sorted(views_dir.rglob(pattern)):
                content = read_text_safe(view_file)
                if content is None:
                    continue
                names.extend(CDN_LIBRARY_RE.findall(content))
        return names


DEFAULT_SOURCES: tuple[type[IDependencySource], ...] = (
    GemfileLockSource,
    DatabaseAdapterSource,
    ImportmapSource,
    CdnViewSource,
)
