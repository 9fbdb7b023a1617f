from __future__ import annotations

from dataclasses import dataclass

from fastapi import Header


@dataclass(frozen=True)
class IdentityContext:
    user_id: str | None
    org_key: str | None


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    cleaned = value.strip()
    return cleaned[:200] or None


def get_identity(
    x_user_id: str | None = Header(default=None, alias="X-User-Id"),
    x_org_key: str | None = Header(default=None, alias="X-Org-Key"),
) -> IdentityContext:
    # Session resolution happens upstream; the gateway forwards the acting user and tenant.
    return IdentityContext(user_id=_clean(x_user_id), org_key=_clean(x_org_key))
