# Store package init
"""
Memos Backend — Persistence Package
====================================

What:  The Store interface, its SQL implementation and the FastAPI
       dependency that hands a Store to route handlers.

Why a dependency (not a module-level singleton):
    The SQL store is bound to the request's AsyncSession, so it has to be
    built per request. Tests replace it wholesale with
    `app.dependency_overrides[get_store] = lambda: fake_store`.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.store.base import Store
from app.store.sql_store import SQLStore


async def get_store(db: AsyncSession = Depends(get_db_session)) -> Store:
    """Per-request Store bound to the request's database session."""
    return SQLStore(db)


__all__ = ["Store", "SQLStore", "get_store"]
