from typing import Literal

from jobboard.schemas.job import ApiModel


class HealthResponse(ApiModel):
    status: Literal["ok", "degraded"]
    version: str
    jobs: int
    job_details: int
    diagnostics: list[str] = []
