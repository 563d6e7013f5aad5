"""
Authenticated admin actor as supplied by the upstream auth gateway.

The engine does not verify tokens. The gateway forwards the verified identity
in X-Admin-* headers; this module only reads them and answers permission
questions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Optional

from fastapi import Header, HTTPException

ADMIN_ROLES = frozenset({"super_admin", "lgu_admin", "field_admin"})
AUDIT_READ_ROLES = frozenset({"super_admin", "lgu_admin"})
AUDIT_READ_PERMISSION = "audit:read"


@dataclass(frozen=True)
class AdminActor:
    id: str
    email: Optional[str] = None
    role: Optional[str] = None
    permissions: FrozenSet[str] = field(default_factory=frozenset)

    @property
    def is_admin(self) -> bool:
        return self.role in ADMIN_ROLES

    @property
    def can_read_audit(self) -> bool:
        return AUDIT_READ_PERMISSION in self.permissions or self.role in AUDIT_READ_ROLES


def _parse_permissions(raw: Optional[str]) -> FrozenSet[str]:
    if not raw:
        return frozenset()
    return frozenset(p.strip() for p in raw.split(",") if p.strip())


def get_current_actor(
    x_admin_id: Optional[str] = Header(None, alias="X-Admin-Id"),
    x_admin_email: Optional[str] = Header(None, alias="X-Admin-Email"),
    x_admin_role: Optional[str] = Header(None, alias="X-Admin-Role"),
    x_admin_permissions: Optional[str] = Header(None, alias="X-Admin-Permissions"),
) -> AdminActor:
    """Dependency: actor from gateway headers; 401 when no identity was forwarded."""
    if not x_admin_id or not x_admin_id.strip():
        raise HTTPException(status_code=401, detail="Authorization required")
    return AdminActor(
        id=x_admin_id.strip(),
        email=(x_admin_email or "").strip() or None,
        role=(x_admin_role or "").strip() or None,
        permissions=_parse_permissions(x_admin_permissions),
    )


def require_admin(actor: AdminActor) -> AdminActor:
    if not actor.is_admin:
        raise HTTPException(status_code=403, detail="Admin privileges required")
    return actor


def require_audit_reader(actor: AdminActor) -> AdminActor:
    if not actor.can_read_audit:
        raise HTTPException(status_code=403, detail="You don't have permission to view audit logs")
    return actor
