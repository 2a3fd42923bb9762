from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Project


class ProjectRepository(Protocol):
    def get(self, code: str) -> Optional[Project]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Project]:
        """Most recently added first."""

        raise NotImplementedError

    def add(self, project: Project) -> Project:
        raise NotImplementedError

    def add_hours(self, code: str, hours: float) -> Optional[Project]:
        raise NotImplementedError
