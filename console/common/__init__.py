"""Common module — shared utilities for the OA console."""

from console.common.constants import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    SESSION_KEYS,
    SUCCESS_CODES,
    ApproverStatus,
    MeetingStatus,
    NotificationType,
    UserRole,
    UserStatus,
    WorkflowStatus,
    WorkflowType,
)
from console.common.exceptions import (
    ApiResultError,
    AppException,
    AuthenticationRequired,
    BackendHTTPError,
    BackendUnavailable,
    ChatConfigurationError,
    ChatUpstreamError,
    ForbiddenException,
    register_exception_handlers,
)
from console.common.models import BackendDTO, CamelModel, PageDTO
from console.common.pagination import PaginationParams
from console.common.storage import FileStorage, MemoryStorage

__all__ = [
    # Constants / Enums
    "ApproverStatus",
    "MeetingStatus",
    "NotificationType",
    "UserRole",
    "UserStatus",
    "WorkflowStatus",
    "WorkflowType",
    "SESSION_KEYS",
    "SUCCESS_CODES",
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE_SIZE",
    # Exceptions
    "ApiResultError",
    "AppException",
    "AuthenticationRequired",
    "BackendHTTPError",
    "BackendUnavailable",
    "ChatConfigurationError",
    "ChatUpstreamError",
    "ForbiddenException",
    "register_exception_handlers",
    # Models
    "BackendDTO",
    "CamelModel",
    "PageDTO",
    # Pagination
    "PaginationParams",
    # Storage
    "FileStorage",
    "MemoryStorage",
]
