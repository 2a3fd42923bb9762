from __future__ import annotations

from ..common.validators import require_non_empty
from ..core.enums import ViewerRole
from ..core.exceptions import AuthorizationError, ValidationError
from .model import Project
from .repository import ProjectRepository


class ProjectService:
    def __init__(self, projects: ProjectRepository):
        self._projects = projects

    def list_projects(self) -> list[Project]:
        return list(self._projects.list_all())

    def add(self, *, current_role: ViewerRole, code: str, name: str = "", client: str = "") -> Project:
        if current_role != ViewerRole.ADMIN:
            raise AuthorizationError("Only admins can add projects")

        code = require_non_empty(code, "Project code")
        if self._projects.get(code):
            raise ValidationError(f"Project {code} already exists")

        return self._projects.add(Project(code=code, name=(name or "").strip(), client=(client or "").strip(), hours=0.0))

    def effort_split(self) -> list[dict]:
        """Hours per client, largest first."""
        totals: dict[str, float] = {}
        for p in self._projects.list_all():
            key = p.client or p.code
            totals[key] = totals.get(key, 0.0) + p.hours
        return [{"label": k, "hours": round(v, 2)} for k, v in sorted(totals.items(), key=lambda kv: kv[1], reverse=True)]
