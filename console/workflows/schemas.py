"""Workflow schemas — process instances, tasks, definitions, approval payloads.

The backend is BPMN-flavoured: submitted requests are *process instances*,
items awaiting the current user are *tasks*. Both are shown as Workflow.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from console.common.constants import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    ApproverStatus,
    WorkflowStatus,
    WorkflowType,
)
from console.common.models import BackendDTO, CamelModel


# ═════════════════════════════════════════════════════════════════════
# Backend DTOs
# ═════════════════════════════════════════════════════════════════════


class BackendProcessInstance(BackendDTO):
    id: str
    process_definition_id: Optional[str] = None
    process_definition_key: Optional[str] = None
    process_definition_name: Optional[str] = None
    business_key: Optional[str] = None
    start_date: Optional[str] = None
    start_user_id: Optional[str] = None
    suspended: Optional[bool] = None
    name: Optional[str] = None
    description: Optional[str] = None


class BackendTask(BackendDTO):
    id: str
    name: Optional[str] = None
    description: Optional[str] = None
    assignee: Optional[str] = None
    owner: Optional[str] = None
    process_instance_id: Optional[str] = None
    process_definition_id: Optional[str] = None
    task_definition_key: Optional[str] = None
    create_time: Optional[str] = None
    due_date: Optional[str] = None
    priority: Optional[int] = None
    category: Optional[str] = None


class BackendProcessDefinition(BackendDTO):
    id: str
    key: Optional[str] = None
    name: Optional[str] = None
    version: Optional[int] = None
    description: Optional[str] = None


# ═════════════════════════════════════════════════════════════════════
# View-models
# ═════════════════════════════════════════════════════════════════════


class Approver(CamelModel):
    user_id: str
    name: str = ""
    status: ApproverStatus = ApproverStatus.pending
    comment: Optional[str] = None
    approved_at: Optional[str] = None


class Workflow(CamelModel):
    id: str
    title: str
    type: WorkflowType = WorkflowType.leave
    applicant: str = ""
    applicant_id: str = ""
    department: str = ""
    status: WorkflowStatus = WorkflowStatus.pending
    created_at: str = ""
    description: str = ""
    amount: Optional[float] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    approvers: List[Approver] = []


class WorkflowsPage(CamelModel):
    workflows: List[Workflow]
    total: int


class ProcessDefinition(CamelModel):
    id: str
    key: str = ""
    name: str = ""
    version: Optional[int] = None
    description: str = ""


class ProcessDefinitionsPage(CamelModel):
    definitions: List[ProcessDefinition]
    total: int


# ═════════════════════════════════════════════════════════════════════
# Queries / payloads
# ═════════════════════════════════════════════════════════════════════


class WorkflowListQuery(CamelModel):
    type: Optional[WorkflowType] = None
    status: Optional[WorkflowStatus] = None
    search: Optional[str] = None
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)


class WorkflowCreate(CamelModel):
    type: WorkflowType
    title: str = Field(..., min_length=1)
    description: str = ""
    amount: Optional[float] = Field(default=None, ge=0)
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    process_definition_key: Optional[str] = None


class WorkflowApprove(CamelModel):
    comment: Optional[str] = None


class WorkflowReject(CamelModel):
    comment: str = Field(..., min_length=1)
