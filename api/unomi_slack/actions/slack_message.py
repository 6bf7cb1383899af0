"""Rule action posting a Slack message for each matching visitor event."""

import logging
from typing import Optional

import httpx

from unomi_slack.channels.dispatcher import send_notification
from unomi_slack.channels.slack import format_slack
from unomi_slack.channels.validate import validate_settings
from unomi_slack.config import Settings
from unomi_slack.models import NO_CHANGE, Action, Event, Goal, PropertyTypeLookup, Target

logger = logging.getLogger(__name__)


class SlackMessageAction:
    """
    Host-facing action executor.

    Holds only immutable settings and collaborators, so a single instance can
    serve concurrent events. ``execute`` never mutates host state and never
    raises: it always reports ``NO_CHANGE`` to the event pipeline.
    """

    def __init__(
        self,
        settings: Settings,
        property_types: PropertyTypeLookup,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.settings = settings
        self.property_types = property_types
        self.transport = transport

    def execute(self, action: Action, event: Event) -> int:
        try:
            logger.debug(
                "Execute action %s for event id %s and type %s",
                action.action_type_id, event.item_id, event.event_type,
            )
            logger.debug("Action parameters %s", action.parameter_values)

            self._internal_execute(event)

            logger.debug(
                "Action %s is done for event id %s and type %s",
                action.action_type_id, event.item_id, event.event_type,
            )
        except Exception:
            logger.exception("Error when executing action")
            logger.error("action %s", action)
            logger.error("event %s", event)

        return NO_CHANGE

    def _internal_execute(self, event: Event) -> None:
        err = validate_settings(self.settings)
        if err:
            logger.error("Slack webhook is not configured, message not sent: %s", err)
            return

        if logger.isEnabledFor(logging.DEBUG):
            log_event_details(event)

        payload = format_slack(event, self.settings, self.property_types)
        send_notification(payload, transport=self.transport)


def log_event_details(event: Event) -> None:
    """Dump the parts of an event that drive the message, for troubleshooting rules."""
    logger.debug("Event type: %s - scope: %s - profile: %s", event.event_type, event.scope, event.profile_id)
    for key, value in event.properties.items():
        logger.debug("Event property %s - %s", key, value)
    _log_item("Source", event.source)
    _log_item("Target", event.target)


def _log_item(label: str, item: Optional[Target]) -> None:
    if item is None:
        return
    if isinstance(item, Goal):
        logger.debug("%s - goal id %s - name %s", label, item.id, item.name)
    else:
        logger.debug("%s - item id: %s - item type: %s", label, item.item_id, item.item_type)
