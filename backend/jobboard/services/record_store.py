"""
Immutable in-memory job collections.

A RecordStore is built once by a loader and then only read. StoreHolder owns
the reference the HTTP layer reads from; replacing the data means swapping in
a whole new store, never mutating the current one.
"""
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from jobboard.schemas.job import JobDetail, JobSummary

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecordStore:
    summaries: tuple[JobSummary, ...] = ()
    details: Mapping[str, JobDetail] = field(default_factory=lambda: MappingProxyType({}))
    diagnostics: tuple[str, ...] = ()

    @classmethod
    def build(
        cls,
        summaries: Iterable[JobSummary],
        details: Iterable[JobDetail],
        diagnostics: Iterable[str] = (),
    ) -> "RecordStore":
        """Build a store, keeping the first record for each duplicated id."""
        problems = list(diagnostics)

        unique_summaries: list[JobSummary] = []
        seen: set[str] = set()
        for summary in summaries:
            if summary.id in seen:
                logger.warning("Skipping duplicate job summary %s", summary.id)
                problems.append(f"duplicate job summary id {summary.id}")
                continue
            seen.add(summary.id)
            unique_summaries.append(summary)

        details_by_id: dict[str, JobDetail] = {}
        for detail in details:
            if detail.id in details_by_id:
                logger.warning("Skipping duplicate job detail %s", detail.id)
                problems.append(f"duplicate job detail id {detail.id}")
                continue
            details_by_id[detail.id] = detail

        return cls(
            summaries=tuple(unique_summaries),
            details=MappingProxyType(details_by_id),
            diagnostics=tuple(problems),
        )

    @property
    def degraded(self) -> bool:
        return bool(self.diagnostics)

    def all_summaries(self) -> tuple[JobSummary, ...]:
        return self.summaries

    def detail_by_id(self, job_id: str) -> JobDetail | None:
        return self.details.get(job_id)


class StoreHolder:
    def __init__(self, store: RecordStore | None = None):
        self._store = store if store is not None else RecordStore()

    @property
    def store(self) -> RecordStore:
        return self._store

    def swap(self, store: RecordStore) -> RecordStore:
        """Replace the current store and return the previous one."""
        previous = self._store
        self._store = store
        logger.info(
            "Record store replaced: %d jobs, %d details (degraded=%s)",
            len(store.summaries), len(store.details), store.degraded,
        )
        return previous
