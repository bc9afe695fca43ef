"""
Category listing admin extension.

Wires the three startup stages together:
1. Build the category registry from static configuration
2. Validate it against the taxonomy store (dropping invalid categories)
3. Register one admin page per remaining category, and schedule a
   notice if anything was dropped
"""

import logging
from functools import partial
from typing import Any, Dict, Iterable, List, Optional

from services.category_config import DEFAULT_CATEGORIES, CategoryRegistry
from services.category_content import CategoryContentHandler
from services.category_validator import CategoryValidator, ValidationResult
from services.contracts import AdminPageRegistrar, NoticeScheduler, TermLookup
from services.notice_reporter import AdminNoticeReporter
from services.route_registrar import RouteRegistrar, build_path_key

logger = logging.getLogger(__name__)


class CategoryListing:
    """Startup orchestration for the category admin pages."""

    def __init__(
        self,
        term_lookup: TermLookup,
        pages: AdminPageRegistrar,
        notices: NoticeScheduler,
        namespace: str,
        capability: str,
        taxonomy_kind: str = "category",
        categories: Iterable[Dict[str, Any]] = DEFAULT_CATEGORIES,
    ):
        self.namespace = namespace
        self.capability = capability
        self.registry = CategoryRegistry.from_config(categories)
        self.validator = CategoryValidator(term_lookup, taxonomy_kind)
        self.reporter = AdminNoticeReporter(notices)
        self.registrar = RouteRegistrar(
            pages,
            namespace,
            partial(CategoryContentHandler.for_session, taxonomy_kind=taxonomy_kind),
        )
        self.validation_result: Optional[ValidationResult] = None

    async def run(self) -> ValidationResult:
        """
        Validate, freeze, report and register. Call once per process.

        Returns:
            The validation result
        """
        if self.validation_result is not None:
            return self.validation_result

        result = await self.validator.validate(self.registry)
        self.registry.freeze()
        self.reporter.report(result, self.registry)
        self.registrar.register_routes(self.registry, self.capability)

        self.validation_result = result
        return result

    def describe(self) -> Dict[str, List[Any]]:
        """Active and removed categories, for the admin API."""
        removed = self.validation_result.removed_definitions if self.validation_result else []
        return {
            "categories": [
                {
                    "identifier": definition.identifier,
                    "display_name": definition.display_name,
                    "item_limit": definition.item_limit,
                    "path_key": build_path_key(self.namespace, definition.identifier),
                }
                for definition in self.registry.snapshot()
            ],
            "removed": [definition.identifier for definition in removed],
        }
