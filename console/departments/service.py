"""Department service — organization structure, members, roles."""

from __future__ import annotations

from typing import Dict, List

from console.common.transport import BackendClient
from console.departments.schemas import (
    BackendDepartment,
    BackendRole,
    Department,
    DepartmentCreate,
    DepartmentUpdate,
    Role,
)
from console.users.schemas import BackendUserInfo, User
from console.users.service import map_user_info


def map_department(dto: BackendDepartment) -> Department:
    return Department(id=dto.id, name=dto.name, parent_id=dto.parent_id or None)


def build_department_tree(departments: List[Department]) -> List[Department]:
    """Nest departments under their parents; returns the roots.

    A department whose parent is unknown is treated as a root, so a flat
    list (every ``parentId`` null) comes back unchanged.
    """
    by_id: Dict[str, Department] = {
        d.id: d.model_copy(update={"children": []}) for d in departments
    }
    roots: List[Department] = []
    for dept in by_id.values():
        parent = by_id.get(dept.parent_id) if dept.parent_id else None
        if parent is None or parent is dept:
            roots.append(dept)
        else:
            parent.children.append(dept)
    return roots


class DepartmentService:
    """Async department and role operations."""

    @staticmethod
    async def get_departments(client: BackendClient) -> List[Department]:
        data = await client.get("/api/dept/list")
        return [map_department(BackendDepartment.model_validate(d)) for d in data or []]

    @staticmethod
    async def get_department_tree(client: BackendClient) -> List[Department]:
        return build_department_tree(await DepartmentService.get_departments(client))

    @staticmethod
    async def get_department_members(client: BackendClient, department_id: str) -> List[User]:
        data = await client.get(f"/api/dept/{department_id}/members")
        return [map_user_info(BackendUserInfo.model_validate(u)) for u in data or []]

    @staticmethod
    async def create_department(client: BackendClient, payload: DepartmentCreate) -> Department:
        data = await client.post("/api/dept/add", json=payload.model_dump(by_alias=True))
        return map_department(BackendDepartment.model_validate(data))

    @staticmethod
    async def update_department(
        client: BackendClient,
        department_id: str,
        payload: DepartmentUpdate,
    ) -> Department:
        data = await client.put(
            f"/api/dept/{department_id}",
            json=payload.model_dump(by_alias=True, exclude_none=True),
        )
        return map_department(BackendDepartment.model_validate(data))

    @staticmethod
    async def delete_department(client: BackendClient, department_id: str) -> None:
        await client.delete(f"/api/dept/{department_id}")

    @staticmethod
    async def get_roles(client: BackendClient) -> List[Role]:
        data = await client.get("/api/role/list")
        return [
            Role(id=r.id, name=r.name, description=r.description)
            for r in (BackendRole.model_validate(item) for item in data or [])
        ]
