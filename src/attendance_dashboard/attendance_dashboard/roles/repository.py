from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Role


class RoleRepository(Protocol):
    def list_all(self) -> Sequence[Role]:
        raise NotImplementedError

    def get_by_id(self, role_id: int) -> Optional[Role]:
        raise NotImplementedError

    def create(self, *, name: str, salary: float) -> int:
        raise NotImplementedError

    def delete_by_id(self, role_id: int) -> bool:
        raise NotImplementedError
