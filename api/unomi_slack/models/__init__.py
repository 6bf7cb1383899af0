from unomi_slack.models.event import (
    NO_CHANGE,
    Action,
    Event,
    Goal,
    Item,
    Profile,
    Session,
    Target,
)
from unomi_slack.models.property_type import PropertyType, PropertyTypeCatalog, PropertyTypeLookup

__all__ = [
    "NO_CHANGE",
    "Action",
    "Event",
    "Goal",
    "Item",
    "Profile",
    "Session",
    "Target",
    "PropertyType",
    "PropertyTypeCatalog",
    "PropertyTypeLookup",
]
