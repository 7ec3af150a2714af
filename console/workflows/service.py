"""Workflow service — list, submit, approve/reject.

Approval transitions are decided by the backend; nothing here checks
whether a workflow may move from one status to another.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from console.common.constants import DEFAULT_WORKFLOW_TITLE
from console.common.models import PageDTO
from console.common.transport import BackendClient
from console.workflows.schemas import (
    BackendProcessDefinition,
    BackendProcessInstance,
    BackendTask,
    ProcessDefinition,
    ProcessDefinitionsPage,
    Workflow,
    WorkflowApprove,
    WorkflowCreate,
    WorkflowListQuery,
    WorkflowReject,
    WorkflowsPage,
)


# ── Mapping ─────────────────────────────────────────────────────────


def map_process_instance(dto: BackendProcessInstance) -> Workflow:
    # Applicant name and department need a user lookup the backend does not embed
    return Workflow(
        id=dto.id,
        title=dto.name or dto.process_definition_name or DEFAULT_WORKFLOW_TITLE,
        applicant_id=dto.start_user_id or "",
        created_at=dto.start_date or "",
        description=dto.description or "",
    )


def map_task(dto: BackendTask) -> Workflow:
    return Workflow(
        id=dto.process_instance_id or dto.id,
        title=dto.name or DEFAULT_WORKFLOW_TITLE,
        applicant_id=dto.assignee or "",
        created_at=dto.create_time or "",
        description=dto.description or "",
    )


def map_process_definition(dto: BackendProcessDefinition) -> ProcessDefinition:
    return ProcessDefinition(
        id=dto.id,
        key=dto.key or "",
        name=dto.name or dto.key or "",
        version=dto.version,
        description=dto.description or "",
    )


def search_workflows(workflows: Iterable[Workflow], query: Optional[str]) -> List[Workflow]:
    """Case-insensitive match on title, applicant and description."""
    if not query:
        return list(workflows)
    needle = query.lower()
    return [
        w for w in workflows
        if needle in w.title.lower()
        or needle in w.applicant.lower()
        or needle in w.description.lower()
    ]


def _page_params(query: WorkflowListQuery, *, with_status: bool) -> dict:
    params = {
        "type": query.type.value if query.type else None,
        "page": query.page,
        "limit": query.limit,
    }
    if with_status:
        params["status"] = query.status.value if query.status else None
    return params


# ── Service ─────────────────────────────────────────────────────────


class WorkflowService:
    """Async workflow operations."""

    @staticmethod
    async def get_workflows(client: BackendClient, query: WorkflowListQuery) -> WorkflowsPage:
        data = await client.get("/api/workflows", params=_page_params(query, with_status=True))
        page = PageDTO[BackendProcessInstance].model_validate(data or {})
        return WorkflowsPage(
            workflows=search_workflows((map_process_instance(p) for p in page.records), query.search),
            total=page.total,
        )

    @staticmethod
    async def get_my_workflows(client: BackendClient, query: WorkflowListQuery) -> WorkflowsPage:
        data = await client.get("/api/workflows/my", params=_page_params(query, with_status=False))
        page = PageDTO[BackendProcessInstance].model_validate(data or {})
        return WorkflowsPage(
            workflows=search_workflows((map_process_instance(p) for p in page.records), query.search),
            total=page.total,
        )

    @staticmethod
    async def get_pending_workflows(client: BackendClient, query: WorkflowListQuery) -> WorkflowsPage:
        data = await client.get("/api/workflows/pending", params=_page_params(query, with_status=False))
        page = PageDTO[BackendTask].model_validate(data or {})
        return WorkflowsPage(
            workflows=search_workflows((map_task(t) for t in page.records), query.search),
            total=page.total,
        )

    @staticmethod
    async def get_process_definitions(
        client: BackendClient,
        page: int = 1,
        limit: int = 100,
    ) -> ProcessDefinitionsPage:
        data = await client.get("/api/workflows/definitions", params={"page": page, "limit": limit})
        dto_page = PageDTO[BackendProcessDefinition].model_validate(data or {})
        return ProcessDefinitionsPage(
            definitions=[map_process_definition(d) for d in dto_page.records],
            total=dto_page.total,
        )

    @staticmethod
    async def create_workflow(client: BackendClient, payload: WorkflowCreate) -> Workflow:
        data = await client.post(
            "/api/workflows",
            json=payload.model_dump(by_alias=True, exclude_none=True, mode="json"),
        )
        created = map_process_instance(BackendProcessInstance.model_validate(data))
        # Fields the instance DTO does not echo back
        return created.model_copy(update={
            "type": payload.type,
            "amount": payload.amount,
            "start_date": payload.start_date,
            "end_date": payload.end_date,
        })

    @staticmethod
    async def approve_workflow(client: BackendClient, workflow_id: str, payload: WorkflowApprove) -> None:
        await client.put(
            f"/api/workflows/{workflow_id}/approve",
            json=payload.model_dump(by_alias=True, exclude_none=True),
        )

    @staticmethod
    async def reject_workflow(client: BackendClient, workflow_id: str, payload: WorkflowReject) -> None:
        await client.put(
            f"/api/workflows/{workflow_id}/reject",
            json=payload.model_dump(by_alias=True),
        )
