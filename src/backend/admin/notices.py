"""
Deferred admin notices.

Callbacks are queued during startup and only invoked when the admin
shell renders, so notices never appear before the surrounding UI.
"""

from typing import List

from services.contracts import NoticeCallback


class AdminNoticeQueue:
    """Notice callbacks rendered at the top of every admin page."""

    def __init__(self):
        self._callbacks: List[NoticeCallback] = []

    def register_deferred_notice(self, callback: NoticeCallback) -> None:
        self._callbacks.append(callback)

    def render(self) -> str:
        """Run every queued callback and join their markup."""
        return "".join(callback() for callback in self._callbacks)

    def __len__(self) -> int:
        return len(self._callbacks)

    def clear(self):
        self._callbacks.clear()


# Global notice queue instance
notice_queue = AdminNoticeQueue()
