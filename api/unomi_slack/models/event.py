"""Host event graph consumed by the Slack action.

These are read-only views of the objects the Unomi host hands to an action.
The host adapter decides the target kind (``Goal`` or ``Item``) once, so the
payload builder never has to inspect host types.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Union

# Status code returned to the host event pipeline
NO_CHANGE = 0


@dataclass(frozen=True)
class Goal:
    """A visitor objective defined on the host."""
    id: str
    name: str


@dataclass(frozen=True)
class Item:
    """Any other host item an event can point at."""
    item_id: str
    item_type: str


Target = Union[Goal, Item]


@dataclass
class Profile:
    item_id: str = ""
    properties: dict[str, Any] = field(default_factory=dict)


@dataclass
class Session:
    item_id: str = ""
    properties: dict[str, Any] = field(default_factory=dict)

    def get_property(self, key: str) -> Any:
        return self.properties.get(key)


@dataclass
class Action:
    """The rule action instance that triggered the execution."""
    action_type_id: str
    parameter_values: dict[str, Any] = field(default_factory=dict)


@dataclass
class Event:
    event_type: str
    scope: str
    profile_id: str
    profile: Profile = field(default_factory=Profile)
    session: Session = field(default_factory=Session)
    target: Optional[Target] = None
    source: Optional[Target] = None
    item_id: str = ""
    properties: dict[str, Any] = field(default_factory=dict)
