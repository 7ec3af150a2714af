"""Workflow approval endpoints — lists, submit, approve/reject, definitions.

All endpoints require authentication; whether a transition is allowed is
decided by the backend.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from console.auth.dependencies import get_backend, require_permission, require_user
from console.common.constants import MAX_PAGE_SIZE, WorkflowStatus, WorkflowType
from console.common.pagination import PaginationParams
from console.common.transport import BackendClient
from console.users.schemas import User
from console.workflows.schemas import (
    ProcessDefinitionsPage,
    WorkflowApprove,
    WorkflowCreate,
    WorkflowListQuery,
    WorkflowReject,
    WorkflowsPage,
)
from console.workflows.service import WorkflowService

router = APIRouter(prefix="", tags=["workflows"])


def _list_query(
    type: Optional[WorkflowType] = Query(default=None),
    search: Optional[str] = Query(default=None, description="Matches title, applicant, description"),
    pagination: PaginationParams = Depends(),
) -> WorkflowListQuery:
    return WorkflowListQuery(type=type, search=search, page=pagination.page, limit=pagination.limit)


# ── GET / — all workflows ───────────────────────────────────────────

@router.get("", response_model=WorkflowsPage)
async def list_workflows(
    status: Optional[WorkflowStatus] = Query(default=None),
    query: WorkflowListQuery = Depends(_list_query),
    backend: BackendClient = Depends(get_backend),
    user: User = Depends(require_user),
):
    query.status = status
    return await WorkflowService.get_workflows(backend, query)


# ── GET /my — workflows I started ───────────────────────────────────

@router.get("/my", response_model=WorkflowsPage)
async def my_workflows(
    query: WorkflowListQuery = Depends(_list_query),
    backend: BackendClient = Depends(get_backend),
    user: User = Depends(require_user),
):
    return await WorkflowService.get_my_workflows(backend, query)


# ── GET /pending — tasks waiting for me ─────────────────────────────

@router.get("/pending", response_model=WorkflowsPage)
async def pending_workflows(
    query: WorkflowListQuery = Depends(_list_query),
    backend: BackendClient = Depends(get_backend),
    user: User = Depends(require_user),
):
    return await WorkflowService.get_pending_workflows(backend, query)


# ── GET /definitions — process types that can be started ────────────

@router.get("/definitions", response_model=ProcessDefinitionsPage)
async def process_definitions(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=MAX_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    backend: BackendClient = Depends(get_backend),
    user: User = Depends(require_user),
):
    return await WorkflowService.get_process_definitions(backend, page, limit)


# ── POST / — submit a request ───────────────────────────────────────

@router.post("", status_code=201)
async def create_workflow(
    body: WorkflowCreate,
    backend: BackendClient = Depends(get_backend),
    user: User = Depends(require_user),
):
    workflow = await WorkflowService.create_workflow(backend, body)
    return {"message": "Request submitted", "data": workflow}


# ── PUT /{id}/approve, /{id}/reject ─────────────────────────────────

@router.put("/{workflow_id}/approve")
async def approve_workflow(
    workflow_id: str,
    body: WorkflowApprove,
    backend: BackendClient = Depends(get_backend),
    user: User = Depends(require_permission("workflow:approve")),
):
    await WorkflowService.approve_workflow(backend, workflow_id, body)
    return {"message": "Workflow approved"}


@router.put("/{workflow_id}/reject")
async def reject_workflow(
    workflow_id: str,
    body: WorkflowReject,
    backend: BackendClient = Depends(get_backend),
    user: User = Depends(require_permission("workflow:approve")),
):
    await WorkflowService.reject_workflow(backend, workflow_id, body)
    return {"message": "Workflow rejected"}
