from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Optional, Sequence

from .model import Project
from .repository import ProjectRepository


class InMemoryProjectRepository(ProjectRepository):
    def __init__(self, projects: Iterable[Project] = ()):
        self._by_code: dict[str, Project] = {}
        for p in reversed(list(projects)):
            self.add(p)

    def get(self, code: str) -> Optional[Project]:
        return self._by_code.get(code)

    def list_all(self) -> Sequence[Project]:
        return list(reversed(list(self._by_code.values())))

    def add(self, project: Project) -> Project:
        self._by_code[project.code] = project
        return project

    def add_hours(self, code: str, hours: float) -> Optional[Project]:
        p = self._by_code.get(code)
        if not p:
            return None
        p = replace(p, hours=round(p.hours + hours, 2))
        self._by_code[code] = p
        return p
