from dataclasses import dataclass

from jobboard.schemas.job import JobDetail, JobSummary, Pagination
from jobboard.services.record_store import RecordStore

NO_JOBS_FOUND = "No jobs found"
PAGE_OUT_OF_RANGE = "Page number exceeds available pages"
JOB_NOT_FOUND = "Job not found"


class JobNotFoundError(LookupError):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidQueryError(ValueError):
    pass


@dataclass(frozen=True)
class SearchResult:
    items: tuple[JobSummary, ...]
    pagination: Pagination


def _matches_query(job: JobSummary, needle: str) -> bool:
    return (
        needle in job.title.lower()
        or needle in job.company.name.lower()
        or needle in job.location.lower()
    )


class QueryEngine:
    """Search, filter and paginate job summaries held in a RecordStore."""

    def __init__(self, store: RecordStore):
        self._store = store

    def search(
        self,
        q: str | None = None,
        location: str | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> SearchResult:
        if page < 1:
            raise InvalidQueryError("page must be a positive integer")
        if limit < 1:
            raise InvalidQueryError("limit must be a positive integer")

        jobs = self._store.all_summaries()
        if q:
            needle = q.lower()
            jobs = [job for job in jobs if _matches_query(job, needle)]
        if location:
            place = location.lower()
            jobs = [job for job in jobs if place in job.location.lower()]

        total = len(jobs)
        if total == 0:
            raise JobNotFoundError(NO_JOBS_FOUND)
        total_pages = -(-total // limit)
        if page > total_pages:
            raise JobNotFoundError(PAGE_OUT_OF_RANGE)

        start = (page - 1) * limit
        return SearchResult(
            items=tuple(jobs[start:start + limit]),
            pagination=Pagination(total=total, page=page, limit=limit, total_pages=total_pages),
        )

    def get_detail(self, job_id: str) -> JobDetail:
        detail = self._store.detail_by_id(job_id)
        if detail is None:
            raise JobNotFoundError(JOB_NOT_FOUND)
        return detail
