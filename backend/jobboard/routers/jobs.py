from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from jobboard.config import settings
from jobboard.dependencies import get_query_engine
from jobboard.schemas.job import ErrorResponse, JobDetail, JobListResponse
from jobboard.services.query_service import InvalidQueryError, JobNotFoundError, QueryEngine

router = APIRouter(
    prefix="/jobs",
    tags=["jobs"],
    responses={404: {"model": ErrorResponse}},
)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


@router.get("", response_model=JobListResponse)
async def search_and_list_jobs(
    q: str | None = None,
    location: str | None = None,
    page: int = Query(1, ge=1),
    limit: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    engine: QueryEngine = Depends(get_query_engine),
):
    try:
        result = engine.search(q=q, location=location, page=page, limit=limit)
    except JobNotFoundError as exc:
        return _error(404, exc.message)
    except InvalidQueryError as exc:
        return _error(400, str(exc))

    return JobListResponse(jobs=list(result.items), pagination=result.pagination)


@router.get("/{job_id}", response_model=JobDetail)
async def get_job_details(job_id: str, engine: QueryEngine = Depends(get_query_engine)):
    try:
        return engine.get_detail(job_id)
    except JobNotFoundError as exc:
        return _error(404, exc.message)
