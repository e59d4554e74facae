"""
Builds a RecordStore from the relational ``jobs`` and ``companies`` tables.

Rows go through the same validation and company normalisation as the JSON
files, so both sources satisfy one read contract.
"""
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jobboard.database import get_engine, get_session_factory
from jobboard.models import Company, Job
from jobboard.services.loader_service import build_store
from jobboard.services.record_store import RecordStore

logger = logging.getLogger(__name__)


def company_to_record(row: Company) -> dict:
    return {"id": row.id, "name": row.name, "logo": row.logo, "verified": bool(row.verified)}


def job_to_summary_record(row: Job) -> dict:
    return {
        "id": row.id,
        "title": row.title,
        "company": row.company,
        "companyId": row.company_id,
        "companyLogo": row.company_logo_url,
        "location": row.location,
        "type": row.type,
        "remoteOption": row.remote_option,
        "postedAt": row.posted_at,
    }


def job_to_detail_record(row: Job) -> dict:
    record = job_to_summary_record(row)
    record.update(
        experienceLevel=row.experience_level,
        salary=row.salary,
        description=row.description,
        requirements=row.requirements or [],
        responsibilities=row.responsibilities or [],
        benefits=row.benefits or [],
        tags=row.tags or [],
        applicationDeadline=row.application_deadline,
        applicants=row.applicants or 0,
        featured=bool(row.featured),
        active=True if row.active is None else bool(row.active),
    )
    return record


def read_store(db: Session) -> RecordStore:
    companies = [company_to_record(c) for c in db.query(Company).order_by(Company.id).all()]
    rows = db.query(Job).order_by(Job.created_at, Job.id).all()
    return build_store(
        [job_to_summary_record(row) for row in rows],
        [job_to_detail_record(row) for row in rows],
        companies,
    )


def load_store_from_database(database_url: str | None) -> RecordStore:
    if not database_url:
        logger.error("Database data source selected but no database_url is configured")
        return RecordStore(diagnostics=("database_url is not configured",))

    engine = None
    try:
        engine = get_engine(database_url)
        SessionLocal = get_session_factory(engine)
        with SessionLocal() as db:
            store = read_store(db)
    except (SQLAlchemyError, ImportError) as exc:
        # Bad URL, missing driver, unreachable server or missing tables
        logger.error("Error loading jobs from database: %s", exc)
        return RecordStore(diagnostics=(f"database: {exc.__class__.__name__}",))
    finally:
        if engine is not None:
            engine.dispose()

    logger.info("Loaded %d jobs and %d job details from database", len(store.summaries), len(store.details))
    return store
