from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Role:
    """Job role with its monthly gross salary."""

    role_id: int
    name: str
    salary: float
