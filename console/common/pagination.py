"""Pagination query parameters shared by list endpoints."""

from fastapi import Query

from console.common.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE


class PaginationParams:
    """Inject via ``Depends(PaginationParams)`` on any list endpoint.

    The backend pages with ``page`` (1-indexed) and ``limit``.
    """

    def __init__(
        self,
        page: int = Query(default=1, ge=1, description="Page number (1-indexed)"),
        limit: int = Query(
            default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE,
            description=f"Items per page (max {MAX_PAGE_SIZE})",
        ),
    ) -> None:
        self.page = page
        self.limit = limit
