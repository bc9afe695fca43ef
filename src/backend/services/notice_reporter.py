"""
Admin notice for categories dropped during validation.
"""

import logging
from typing import Iterable, Optional

from admin.templates import CATEGORY_NOTICE_TEMPLATE
from services.category_config import CategoryDefinition, CategoryRegistry
from services.category_validator import ValidationResult
from services.contracts import NoticeCallback, NoticeScheduler

logger = logging.getLogger(__name__)


def render_category_notice(removed: Iterable[CategoryDefinition]) -> str:
    """Error notice listing each removed category's name and slug."""
    return CATEGORY_NOTICE_TEMPLATE.render(categories=list(removed))


class AdminNoticeReporter:
    """Schedules the invalid-category notice for the next admin render."""

    def __init__(self, notices: NoticeScheduler):
        self.notices = notices

    def report(self, validation_result: ValidationResult, registry: CategoryRegistry) -> Optional[NoticeCallback]:
        """
        Register a deferred notice when validation removed anything.

        Names come from the validation result, not the registry, which
        no longer holds the removed categories.

        Returns:
            The registered callback, or None when nothing was removed
        """
        if not validation_result.any_invalid:
            return None

        removed = tuple(validation_result.removed_definitions)

        def render_notice() -> str:
            return render_category_notice(removed)

        self.notices.register_deferred_notice(render_notice)
        logger.info(
            f"Scheduled admin notice for {len(removed)} invalid categories "
            f"({len(registry)} still active)"
        )
        return render_notice
