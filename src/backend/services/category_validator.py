"""
Category validation against the taxonomy store.

A configured category is valid only when a term with its slug exists in
the taxonomy AND the term's name equals the configured display name
exactly. Invalid categories are dropped from the registry so the rest
of the extension works with what is left.
"""

import logging
from typing import Dict, FrozenSet, List, Optional

from services.category_config import CategoryDefinition, CategoryRegistry
from services.contracts import TermLookup

logger = logging.getLogger(__name__)


class ValidationResult:
    """
    Outcome of one validation run.

    Keeps the removed definitions themselves (not just their
    identifiers), since the registry no longer has them once the
    notice is rendered.
    """

    def __init__(self, removed: Optional[Dict[str, CategoryDefinition]] = None):
        self.removed: Dict[str, CategoryDefinition] = dict(removed or {})

    def record(self, definition: CategoryDefinition):
        self.removed[definition.identifier] = definition

    @property
    def removed_identifiers(self) -> FrozenSet[str]:
        return frozenset(self.removed)

    @property
    def removed_definitions(self) -> List[CategoryDefinition]:
        """Removed definitions in configuration order."""
        return list(self.removed.values())

    @property
    def any_invalid(self) -> bool:
        return bool(self.removed)


class CategoryValidator:
    """Checks configured categories against the taxonomy store."""

    def __init__(self, term_lookup: TermLookup, taxonomy_kind: str = "category"):
        """
        Initialize validator.

        Args:
            term_lookup: Anything providing lookup_term_by_slug()
            taxonomy_kind: Taxonomy the category slugs live in
        """
        self.term_lookup = term_lookup
        self.taxonomy_kind = taxonomy_kind

    async def is_valid(self, definition: CategoryDefinition) -> bool:
        """True iff the term exists and its name matches exactly."""
        term = await self.term_lookup.lookup_term_by_slug(definition.identifier, self.taxonomy_kind)
        if term is None:
            return False
        return term.name == definition.display_name

    async def validate(self, registry: CategoryRegistry) -> ValidationResult:
        """
        Remove every invalid category from the registry.

        Missing or misnamed terms are expected and never raise. Running
        this again against an unchanged taxonomy removes nothing.

        Args:
            registry: Registry to prune in place (must not be frozen)

        Returns:
            ValidationResult naming the removed categories
        """
        result = ValidationResult()

        for definition in registry:
            if await self.is_valid(definition):
                continue

            registry.remove(definition.identifier)
            result.record(definition)
            logger.warning(
                f"Category '{definition.display_name}' ({definition.identifier}) is missing "
                f"or misnamed in taxonomy '{self.taxonomy_kind}'; removed",
                extra={"category": definition.identifier},
            )

        logger.info(
            f"Category validation complete: {len(registry)} active, {len(result.removed)} removed"
        )
        return result
