"""Organization structure endpoints — departments, members, roles."""

from typing import List

from fastapi import APIRouter, Depends, Query

from console.auth.dependencies import get_backend, require_permission, require_user
from console.common.transport import BackendClient
from console.departments.schemas import Department, DepartmentCreate, DepartmentUpdate, Role
from console.departments.service import DepartmentService
from console.users.schemas import User

departments_router = APIRouter(prefix="", tags=["departments"])
roles_router = APIRouter(prefix="", tags=["roles"])


# ═════════════════════════════════════════════════════════════════════
# DEPARTMENTS
# ═════════════════════════════════════════════════════════════════════


@departments_router.get("", response_model=List[Department])
async def list_departments(
    tree: bool = Query(default=False, description="Nest departments under their parents"),
    backend: BackendClient = Depends(get_backend),
    user: User = Depends(require_user),
):
    if tree:
        return await DepartmentService.get_department_tree(backend)
    return await DepartmentService.get_departments(backend)


@departments_router.get("/{department_id}/members", response_model=List[User])
async def department_members(
    department_id: str,
    backend: BackendClient = Depends(get_backend),
    user: User = Depends(require_user),
):
    return await DepartmentService.get_department_members(backend, department_id)


@departments_router.post("", status_code=201)
async def create_department(
    body: DepartmentCreate,
    backend: BackendClient = Depends(get_backend),
    user: User = Depends(require_permission("dept:add")),
):
    department = await DepartmentService.create_department(backend, body)
    return {"message": "Department created", "data": department}


@departments_router.put("/{department_id}")
async def update_department(
    department_id: str,
    body: DepartmentUpdate,
    backend: BackendClient = Depends(get_backend),
    user: User = Depends(require_permission("dept:edit")),
):
    department = await DepartmentService.update_department(backend, department_id, body)
    return {"message": "Department updated", "data": department}


@departments_router.delete("/{department_id}")
async def delete_department(
    department_id: str,
    backend: BackendClient = Depends(get_backend),
    user: User = Depends(require_permission("dept:delete")),
):
    await DepartmentService.delete_department(backend, department_id)
    return {"message": "Department deleted"}


# ═════════════════════════════════════════════════════════════════════
# ROLES
# ═════════════════════════════════════════════════════════════════════


@roles_router.get("", response_model=List[Role])
async def list_roles(
    backend: BackendClient = Depends(get_backend),
    user: User = Depends(require_user),
):
    return await DepartmentService.get_roles(backend)
