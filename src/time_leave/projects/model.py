from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Project:
    code: str
    name: str
    client: str
    hours: float = 0.0
