from jobboard.models.company import Company
from jobboard.models.job import Job

__all__ = ["Company", "Job"]
