"""
Audit recorders: where accepted status changes go after the store write.

Recording is best-effort. submit() never raises to the caller; failures are
logged as ops events and the status change stands without its audit record.
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, List, Optional, Set

from audit.model import AuditLogEntry, StatusChange, audit_entry_from_change
from ops.ops_events import log_audit_write_failed

logger = logging.getLogger(__name__)

AuditWriter = Callable[[AuditLogEntry], Awaitable[Any]]


class AuditRecorder(ABC):
    """Consumer of audit facts. Implementations must not raise from submit()."""

    def submit(self, change: StatusChange) -> None:
        """Hand an accepted StatusChange to the audit trail (fire and forget)."""
        try:
            entry = audit_entry_from_change(change)
        except Exception as e:  # noqa: BLE001
            log_audit_write_failed(change.obstacle_id, "status_change", str(e))
            return
        self.submit_entry(entry)

    @abstractmethod
    def submit_entry(self, entry: AuditLogEntry) -> None:
        """Hand a ready audit entry to the trail (fire and forget)."""


class InMemoryAuditRecorder(AuditRecorder):
    """Keeps entries in a list. Used by the CLI and by tests."""

    def __init__(self) -> None:
        self.changes: List[StatusChange] = []
        self.entries: List[AuditLogEntry] = []

    def submit(self, change: StatusChange) -> None:
        self.changes.append(change)
        super().submit(change)

    def submit_entry(self, entry: AuditLogEntry) -> None:
        self.entries.append(entry.model_copy(update={"id": len(self.entries) + 1}))


class BackgroundAuditRecorder(AuditRecorder):
    """
    Schedules each write as a detached asyncio task on the running loop.
    Pending tasks are tracked so shutdown can drain them.
    """

    def __init__(self, writer: AuditWriter) -> None:
        self._writer = writer
        self._pending: Set["asyncio.Task[None]"] = set()

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def submit_entry(self, entry: AuditLogEntry) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            log_audit_write_failed(entry.target_id, entry.action, "no running event loop")
            return
        task = loop.create_task(self._write(entry))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _write(self, entry: AuditLogEntry) -> None:
        try:
            await self._writer(entry)
            logger.info("Audit log: %s by %s on %s", entry.action, entry.admin_email or entry.admin_id, entry.target_id)
        except Exception as e:  # noqa: BLE001
            log_audit_write_failed(entry.target_id, entry.action, str(e))

    async def drain(self) -> None:
        """Wait for every scheduled write to finish."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)


_recorder: Optional[AuditRecorder] = None


def set_audit_recorder(recorder: Optional[AuditRecorder]) -> None:
    """Install the process-wide recorder (None resets to the default)."""
    global _recorder
    _recorder = recorder


def get_audit_recorder() -> AuditRecorder:
    """Return the process-wide recorder; defaults to a background DB writer."""
    global _recorder
    if _recorder is None:
        from audit.writer import persist_audit_entry

        _recorder = BackgroundAuditRecorder(persist_audit_entry)
    return _recorder
