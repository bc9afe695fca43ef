"""
Static category configuration for the admin category listing.

Each category is keyed by its taxonomy slug and carries the display name
expected on the matching term plus how many posts its admin page lists.
The registry is built at startup, pruned once by the validator and then
frozen for the rest of the process.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple


class CategoryConfigurationError(Exception):
    """Raised when the static category configuration is malformed."""
    pass


class CategoryRegistryFrozenError(CategoryConfigurationError):
    """Raised when a frozen registry is mutated."""
    pass


# Categories from the business requirements: slug, nice name, post count
DEFAULT_CATEGORIES: List[Dict[str, Any]] = [
    {"slug": "sports", "name": "Sports", "count": 25},
    {"slug": "animals", "name": "Animals", "count": 10},
    {"slug": "business", "name": "Business", "count": 12},
    {"slug": "entertainment", "name": "Entertainment", "count": 50},
    {"slug": "world-and-news", "name": "World and News", "count": 100},
]


@dataclass(frozen=True)
class CategoryDefinition:
    """One configured category."""
    identifier: str
    display_name: str
    item_limit: int

    def __post_init__(self):
        if not isinstance(self.identifier, str) or not self.identifier:
            raise CategoryConfigurationError("Category identifier must be a non-empty string")
        if not isinstance(self.display_name, str) or not self.display_name:
            raise CategoryConfigurationError(
                f"Category '{self.identifier}' needs a non-empty display name"
            )
        # bool is an int subclass; True is not a limit
        if isinstance(self.item_limit, bool) or not isinstance(self.item_limit, int):
            raise CategoryConfigurationError(
                f"Category '{self.identifier}' item limit must be an integer"
            )
        if self.item_limit < 1:
            raise CategoryConfigurationError(
                f"Category '{self.identifier}' item limit must be at least 1, got {self.item_limit}"
            )

    @classmethod
    def from_config(cls, entry: Dict[str, Any]) -> "CategoryDefinition":
        """Build from a {"slug", "name", "count"} config entry."""
        try:
            return cls(
                identifier=entry["slug"],
                display_name=entry["name"],
                item_limit=entry["count"],
            )
        except KeyError as e:
            raise CategoryConfigurationError(f"Category entry {entry!r} is missing {e}") from e


class CategoryRegistry:
    """
    Ordered mapping of category identifier to CategoryDefinition.

    Insertion order drives menu and route ordering. The only mutation
    after construction is removal (done by the validator); once frozen
    the registry is read-only.
    """

    def __init__(self, definitions: Iterable[CategoryDefinition] = ()):
        self._definitions: Dict[str, CategoryDefinition] = {}
        self._frozen = False
        for definition in definitions:
            self._add(definition)

    @classmethod
    def from_config(cls, entries: Iterable[Dict[str, Any]] = DEFAULT_CATEGORIES) -> "CategoryRegistry":
        """Build a registry from config entries, preserving their order."""
        return cls(CategoryDefinition.from_config(entry) for entry in entries)

    def _add(self, definition: CategoryDefinition):
        if definition.identifier in self._definitions:
            raise CategoryConfigurationError(
                f"Category '{definition.identifier}' is configured more than once"
            )
        self._definitions[definition.identifier] = definition

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self):
        """End the validation phase; further removals raise."""
        self._frozen = True

    def remove(self, identifier: str) -> CategoryDefinition:
        """
        Remove a category.

        Raises:
            CategoryRegistryFrozenError: If the registry is frozen
            KeyError: If no such category is configured
        """
        if self._frozen:
            raise CategoryRegistryFrozenError(
                f"Cannot remove '{identifier}': category registry is frozen"
            )
        return self._definitions.pop(identifier)

    def get(self, identifier: str) -> Optional[CategoryDefinition]:
        return self._definitions.get(identifier)

    def snapshot(self) -> Tuple[CategoryDefinition, ...]:
        """Immutable copy of the current definitions, in order."""
        return tuple(self._definitions.values())

    def identifiers(self) -> List[str]:
        return list(self._definitions)

    def __iter__(self) -> Iterator[CategoryDefinition]:
        # Iterate a copy so the validator can remove while looping
        return iter(self.snapshot())

    def __len__(self) -> int:
        return len(self._definitions)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._definitions
