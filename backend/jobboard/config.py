from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    data_dir: Path = Path(__file__).resolve().parents[1] / "data"
    jobs_file: str = "jobs.json"
    job_details_file: str = "job-details.json"
    companies_file: str = "companies.json"
    # "database" reads the jobs/companies tables through SQLAlchemy instead
    data_source: Literal["json", "database"] = "json"
    database_url: str | None = None
    api_prefix: str = "/api/v1"
    default_page_size: int = 10
    max_page_size: int = 100
    log_level: str = "INFO"

    @property
    def jobs_path(self) -> Path:
        return self.data_dir / self.jobs_file

    @property
    def job_details_path(self) -> Path:
        return self.data_dir / self.job_details_file

    @property
    def companies_path(self) -> Path:
        return self.data_dir / self.companies_file

    model_config = {"env_prefix": "JOBBOARD_"}


settings = Settings()
