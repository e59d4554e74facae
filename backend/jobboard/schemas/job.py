from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

JobType = Literal["full-time", "part-time", "contract", "internship"]
RemoteOption = Literal["on-site", "hybrid", "remote"]
ExperienceLevel = Literal["entry", "mid", "senior"]


class ApiModel(BaseModel):
    """camelCase on the wire, snake_case in Python; instances are immutable."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class Company(ApiModel):
    id: str
    name: str
    logo: str | None = None
    verified: bool = False


class Salary(ApiModel):
    min: int | float
    max: int | float
    currency: str
    period: str

    @model_validator(mode="after")
    def _check_range(self):
        if self.min > self.max:
            raise ValueError("salary min must not exceed max")
        return self


class JobSummary(ApiModel):
    id: str
    title: str
    company: Company
    location: str
    type: JobType
    remote_option: RemoteOption
    posted_at: datetime


class JobDetail(JobSummary):
    experience_level: ExperienceLevel
    salary: Salary | None = None
    description: str
    requirements: tuple[str, ...] = ()
    responsibilities: tuple[str, ...] = ()
    benefits: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()
    application_deadline: datetime | None = None
    applicants: int = Field(0, ge=0)
    featured: bool = False
    active: bool = True

    @model_validator(mode="after")
    def _check_deadline(self):
        deadline = self.application_deadline
        if deadline is not None and _as_utc(deadline) <= _as_utc(self.posted_at):
            raise ValueError("applicationDeadline must be after postedAt")
        return self


class Pagination(ApiModel):
    total: int
    page: int
    limit: int
    total_pages: int


class JobListResponse(ApiModel):
    jobs: list[JobSummary]
    pagination: Pagination


class ErrorResponse(BaseModel):
    message: str
