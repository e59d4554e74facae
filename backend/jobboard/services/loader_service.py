"""
Builds a RecordStore from the static JSON data files.

Loading is fail-soft: a missing or malformed file yields an empty collection
and a diagnostic, and a record that does not validate is skipped. Either case
marks the resulting store as degraded.
"""
import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path

from jobboard.config import Settings, settings
from jobboard.schemas.job import Company, JobDetail, JobSummary
from jobboard.services.record_store import RecordStore

logger = logging.getLogger(__name__)


def normalize_company(record: dict, companies: Mapping[str, Company]) -> dict:
    """Return the record with its company in object form.

    Older records carry the company as a plain name plus a ``companyId``;
    those are resolved against the companies collection, or built from the
    name when the id is unknown. A plain name without an id is rejected.
    """
    company = record.get("company")
    if isinstance(company, str):
        company_id = record.get("companyId")
        if not isinstance(company_id, str) or not company_id:
            raise ValueError(f"company {company!r} has no usable companyId")
        known = companies.get(company_id)
        if known is None:
            known = Company(id=company_id, name=company, logo=record.get("companyLogo"))
        return {**record, "company": known}
    if isinstance(company, dict) and "name" not in company:
        company_id = company.get("id")
        known = companies.get(company_id) if isinstance(company_id, str) else None
        if known is not None:
            return {**record, "company": known}
    return record


def _validate_records(raw_records: Iterable, model, companies, diagnostics: list[str]) -> list:
    records = []
    for position, raw in enumerate(raw_records):
        try:
            if not isinstance(raw, dict):
                raise ValueError(f"expected an object, got {type(raw).__name__}")
            records.append(model.model_validate(normalize_company(raw, companies)))
        except ValueError as exc:
            ident = raw.get("id") if isinstance(raw, dict) else None
            logger.warning("Skipping invalid %s #%d (%s): %s", model.__name__, position, ident, exc)
            diagnostics.append(f"invalid {model.__name__} #{position} ({ident})")
    return records


def build_store(
    raw_summaries: Iterable,
    raw_details: Iterable,
    raw_companies: Iterable = (),
    diagnostics: Iterable[str] = (),
) -> RecordStore:
    problems = list(diagnostics)

    companies: dict[str, Company] = {}
    for company in _validate_records(raw_companies, Company, {}, problems):
        companies.setdefault(company.id, company)

    summaries = _validate_records(raw_summaries, JobSummary, companies, problems)
    details = _validate_records(raw_details, JobDetail, companies, problems)
    return RecordStore.build(summaries, details, problems)


def read_collection(path: Path, key: str, diagnostics: list[str]) -> list:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.error("Error loading %s: %s", path, exc)
        diagnostics.append(f"{path.name}: {exc}")
        return []

    records = data.get(key) if isinstance(data, dict) else None
    if not isinstance(records, list):
        logger.error("Error loading %s: no %r list at the top level", path, key)
        diagnostics.append(f"{path.name}: missing {key!r} list")
        return []
    return records


def load_store_from_json(
    jobs_path: Path,
    job_details_path: Path,
    companies_path: Path | None = None,
) -> RecordStore:
    diagnostics: list[str] = []
    raw_summaries = read_collection(jobs_path, "jobs", diagnostics)
    raw_details = read_collection(job_details_path, "jobDetails", diagnostics)
    raw_companies = read_collection(companies_path, "companies", diagnostics) if companies_path else []

    store = build_store(raw_summaries, raw_details, raw_companies, diagnostics)
    logger.info(
        "Loaded %d jobs and %d job details from %s",
        len(store.summaries), len(store.details), jobs_path.parent,
    )
    return store


def load_record_store(config: Settings = settings) -> RecordStore:
    if config.data_source == "database":
        from jobboard.services.database_loader import load_store_from_database
        return load_store_from_database(config.database_url)
    return load_store_from_json(config.jobs_path, config.job_details_path, config.companies_path)
