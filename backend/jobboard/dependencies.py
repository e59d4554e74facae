from fastapi import Depends, Request

from jobboard.services.query_service import QueryEngine
from jobboard.services.record_store import RecordStore


def get_record_store(request: Request) -> RecordStore:
    return request.app.state.store_holder.store


def get_query_engine(store: RecordStore = Depends(get_record_store)) -> QueryEngine:
    return QueryEngine(store)
