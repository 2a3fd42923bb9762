"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the business rules live in the services.
"""

import importlib
from datetime import datetime, timezone

from time_leave.config import get_settings_module
from time_leave.container import build_container
from time_leave.core.exceptions import DomainError


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(config=vars(settings) | {"SEED_DEMO_DATA": True})
    now = datetime(2025, 8, 4, 3, 6, tzinfo=timezone.utc)

    for employee in container.employees_repo.list_all():
        check = container.evaluator.evaluate(employee, now)
        print(f"{employee.name:8} {employee.timezone:20} {check.local_clock} late={check.late}")

    try:
        container.leave_service.submit(employee_id="E1001", leave_type="Annual", start="2025-09-01", end="2025-09-30")
    except DomainError as e:
        print(f"rejected: {e}")

    req = container.leave_service.submit(
        employee_id="E1001", leave_type="Annual", start="2025-09-01", end="2025-09-30", cashout=True
    )
    print(f"submitted {req.request_id}: {req.days} days (cash-out)")


if __name__ == "__main__":
    main()
