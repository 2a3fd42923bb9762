from __future__ import annotations

from ..core.enums import ViewerRole
from ..core.exceptions import AuthorizationError, NotFoundError
from .model import Employee
from .repository import EmployeeRepository


class EmployeeService:
    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def get(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(f"Employee {employee_id} does not exist")
        return employee

    def list_admin_view(self, *, current_role: ViewerRole) -> list[dict]:
        if current_role != ViewerRole.ADMIN:
            raise AuthorizationError("Only admins can view the roster")

        return [
            {
                "id": e.employee_id,
                "name": e.name,
                "role": e.role.value,
                "rate": e.hourly_rate,
                "country": e.country,
                "manager": e.manager or "-",
                "timezone": e.timezone,
                "shift": f"{e.shift_start}-{e.shift_end}",
            }
            for e in self._employees.list_all()
        ]
