"""
Host admin UI facilities: page registry, deferred notices, capability checks.
"""

from admin.pages import AdminPage, AdminPageRegistry, page_registry
from admin.notices import AdminNoticeQueue, notice_queue

__all__ = [
    "AdminPage",
    "AdminPageRegistry",
    "page_registry",
    "AdminNoticeQueue",
    "notice_queue",
]
