import json

import pytest
from fastapi.testclient import TestClient

from jobboard.dependencies import get_record_store
from jobboard.main import app
from jobboard.services.loader_service import build_store, load_store_from_json

COMPANIES = [
    {"id": "comp-001", "name": "TechCorp Solutions", "logo": "https://example.com/techcorp.png", "verified": True},
    {"id": "comp-002", "name": "StartupHub", "logo": None, "verified": True},
    {"id": "comp-003", "name": "Global Health Systems", "verified": False},
]

# (id, title, company, location, type, remoteOption)
JOBS = [
    ("job-001", "Senior Software Engineer", COMPANIES[0], "San Francisco, CA", "full-time", "hybrid"),
    ("job-002", "Frontend Developer", COMPANIES[1], "New York, NY", "full-time", "remote"),
    ("job-003", "Data Analyst", COMPANIES[2], "Boston, MA", "part-time", "on-site"),
    ("job-004", "DevOps Engineer", COMPANIES[0], "Remote", "contract", "remote"),
    ("job-005", "Marketing Intern", COMPANIES[1], "New York, NY", "internship", "on-site"),
    # Legacy shape: company name as a string plus companyId
    ("job-006", "Backend Engineer", "Global Health Systems", "Austin, TX", "full-time", "hybrid"),
]


def _summary(job_id, title, company, location, job_type, remote_option, day=1):
    record = {
        "id": job_id,
        "title": title,
        "company": company,
        "location": location,
        "type": job_type,
        "remoteOption": remote_option,
        "postedAt": f"2025-01-{day:02d}T09:00:00Z",
    }
    if isinstance(company, str):
        record["companyId"] = "comp-003"
    return record


def _detail(summary):
    return {
        **summary,
        "experienceLevel": "mid",
        "salary": {"min": 90000, "max": 120000, "currency": "USD", "period": "yearly"},
        "description": f"{summary['title']} role.",
        "requirements": ["Python", "SQL"],
        "responsibilities": ["Build things"],
        "benefits": ["Health insurance"],
        "tags": ["backend"],
        "applicationDeadline": "2025-03-01T00:00:00Z",
        "applicants": 3,
        "featured": False,
        "active": True,
    }


@pytest.fixture
def sample_jobs():
    return [_summary(*job, day=i + 1) for i, job in enumerate(JOBS)]


@pytest.fixture
def sample_details(sample_jobs):
    return [_detail(job) for job in sample_jobs]


@pytest.fixture
def sample_companies():
    return [dict(c) for c in COMPANIES]


@pytest.fixture
def write_data(tmp_path):
    """Write a data directory; pass None to leave a file out."""
    def _write(jobs=None, details=None, companies=None, data_dir=None):
        data_dir = data_dir or tmp_path / "data"
        data_dir.mkdir(exist_ok=True)
        if jobs is not None:
            (data_dir / "jobs.json").write_text(json.dumps({"jobs": jobs}), encoding="utf-8")
        if details is not None:
            (data_dir / "job-details.json").write_text(json.dumps({"jobDetails": details}), encoding="utf-8")
        if companies is not None:
            (data_dir / "companies.json").write_text(json.dumps({"companies": companies}), encoding="utf-8")
        return data_dir
    return _write


@pytest.fixture
def data_dir(write_data, sample_jobs, sample_details, sample_companies):
    return write_data(sample_jobs, sample_details, sample_companies)


@pytest.fixture
def store(data_dir):
    return load_store_from_json(
        data_dir / "jobs.json",
        data_dir / "job-details.json",
        data_dir / "companies.json",
    )


@pytest.fixture
def numbered_store():
    """Store of ``count`` jobs titled "Job 0".."Job N-1" in that order."""
    def _make(count):
        jobs = [
            _summary(f"id-{i}", f"Job {i}", COMPANIES[i % 3], "Berlin", "full-time", "remote")
            for i in range(count)
        ]
        return build_store(jobs, [_detail(job) for job in jobs], COMPANIES)
    return _make


@pytest.fixture
def client(store):
    app.dependency_overrides[get_record_store] = lambda: store
    c = TestClient(app)
    yield c
    app.dependency_overrides.clear()
