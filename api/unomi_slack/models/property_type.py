"""Profile property type metadata."""

from dataclasses import dataclass, field
from typing import Callable, Optional


@dataclass(frozen=True)
class PropertyType:
    id: str
    name: Optional[str] = None
    system_tags: frozenset[str] = field(default_factory=frozenset)


PropertyTypeLookup = Callable[[str], Optional[PropertyType]]


class PropertyTypeCatalog:
    """
    In-memory property type registry.

    Instances are callable and can be passed wherever a
    ``PropertyTypeLookup`` is expected.
    """

    def __init__(self, property_types: Optional[list[PropertyType]] = None):
        self._types: dict[str, PropertyType] = {}
        for property_type in property_types or []:
            self.register(property_type)

    def register(self, property_type: PropertyType) -> None:
        self._types[property_type.id] = property_type

    def get(self, key: str) -> Optional[PropertyType]:
        return self._types.get(key)

    def __call__(self, key: str) -> Optional[PropertyType]:
        return self.get(key)
