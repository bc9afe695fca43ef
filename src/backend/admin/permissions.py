"""
Capability checks for admin pages and the admin API.

Authentication happens upstream; it forwards the caller's capabilities
in a request header (see settings.ADMIN_CAPABILITIES_HEADER).
"""

from typing import FrozenSet

from fastapi import HTTPException, Request

from config import settings


def parse_capabilities(raw: str) -> FrozenSet[str]:
    """Split a comma-separated capability header."""
    return frozenset(part.strip() for part in raw.split(",") if part.strip())


async def get_request_capabilities(request: Request) -> FrozenSet[str]:
    """FastAPI dependency: capabilities granted to the current caller."""
    return parse_capabilities(request.headers.get(settings.ADMIN_CAPABILITIES_HEADER, ""))


def require_capability(capability: str, capabilities: FrozenSet[str]):
    """Raise 403 unless the caller holds the capability."""
    if capability not in capabilities:
        raise HTTPException(
            status_code=403,
            detail=f"Sorry, you are not allowed to access this page. Requires '{capability}'.",
        )
