from typing import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from audit.recorder import AuditRecorder, InMemoryAuditRecorder, get_audit_recorder
from .auth import AdminActor, get_current_actor, require_admin, require_audit_reader
from .config import get_settings
from .database import get_database_manager


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency yielding an AsyncSession from the DatabaseManager."""
    manager = get_database_manager()
    async with manager.session() as session:
        yield session


def get_recorder() -> AuditRecorder:
    """FastAPI dependency: process-wide audit recorder, or a throwaway one when auditing is off."""
    if not get_settings().audit_enabled:
        return InMemoryAuditRecorder()
    return get_audit_recorder()


def get_admin_actor(actor: AdminActor = Depends(get_current_actor)) -> AdminActor:
    return require_admin(actor)


def get_audit_reader(actor: AdminActor = Depends(get_current_actor)) -> AdminActor:
    return require_audit_reader(actor)
