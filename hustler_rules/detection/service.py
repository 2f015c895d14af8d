from typing import Optional

from hustler_rules.detection.models import DetectionReport
from hustler_rules.detection.sources import DEFAULT_SOURCES, IDependencySource
from hustler_rules.layout import ProjectLayout


class DependencyDetector:
    def __init__(self, sources: Optional[list[IDependencySource]] = None) -> None:
        if sources is None:
            sources = [source_cls() for source_cls in DEFAULT_SOURCES]
        self._sources = sources

    def detect(self, layout: ProjectLayout) -> DetectionReport:
        contributions = {}
        for source in self._sources:
            names = source.extract(layout)
            if names:
                contributions.setdefault(source.kind, []).extend(names)
        return DetectionReport(contributions=contributions)
