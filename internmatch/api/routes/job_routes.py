"""
Job Routes

GET /jobs - List job board postings with search, type filter and pagination
"""

from typing import Optional

from fastapi import APIRouter, Query

from internmatch.services.job_board import list_jobs
from internmatch.schemas.schemas import JobListResponse

router = APIRouter(prefix="/jobs", tags=["Jobs"])


@router.get("", response_model=JobListResponse)
async def get_jobs(
    search: Optional[str] = Query(None, description="Search in title, company and skills"),
    job_type: str = Query("all", alias="type", description="paid, unpaid, both or all"),
    limit: int = Query(50, ge=1),
    page: int = Query(1, ge=1)
):
    """List job board postings. Public."""
    result = list_jobs(search=search, job_type=job_type, page=page, limit=limit)
    return JobListResponse(**result)
