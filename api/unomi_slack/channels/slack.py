"""Slack channel adapter."""

import logging
import time
from typing import Optional

from unomi_slack.channels import ChannelPayload
from unomi_slack.channels.format_value import format_value, truncate
from unomi_slack.config import Settings
from unomi_slack.models import Event, Goal, PropertyType, PropertyTypeLookup
from unomi_slack.schemas.slack import SlackAttachment, SlackButton, SlackField, SlackMessage

logger = logging.getLogger(__name__)

UNKNOWN_TRIGGER_TITLE = "A visitor triggered an unknown event"
FOOTER = "Apache Unomi / Slack integration"
FOOTER_ICON = (
    "https://www.jahia.com/files/live/sites/jahiacom/files/platform/"
    "Marketing%20Factory/Images/unomi-logo.png"
)
PROFILE_BUTTON_TEXT = "Look at the profile in MFactory"

# Session property key -> field title, in emission order
SESSION_FIELDS = (
    ("deviceCategory", "Device Category"),
    ("sessionCountryName", "Country"),
    ("sessionCity", "City"),
)


def build_slack_message(
    event: Event,
    settings: Settings,
    property_types: PropertyTypeLookup,
) -> SlackMessage:
    """
    Build the Slack attachments message describing a visitor event.

    The message always holds a single attachment: title and footer depend on
    whether the event targets a goal, fields list the displayable profile
    properties followed by device category, country and city from the session.
    """
    scope = event.scope or ""
    profile_id = event.profile_id or ""

    if isinstance(event.target, Goal):
        title = settings.message_title.replace("{goalName}", event.target.name)
        tech_info = f" - Scope: {scope} - Goal id: {event.target.id}"
    else:
        title = UNKNOWN_TRIGGER_TITLE
        tech_info = ""

    profile_url = settings.profile_url.replace("{scope}", scope).replace("{profileId}", profile_id)

    fields = _profile_fields(event, settings, property_types) + _session_fields(event)

    attachment = SlackAttachment(
        title=title,
        pretext=settings.message_pretext.replace("{scope}", scope),
        thumb_url=settings.message_thumb_url,
        color=settings.message_color,
        text=settings.message_text,
        fallback=settings.message_fallback,
        footer=f"{FOOTER}{tech_info}",
        footer_icon=FOOTER_ICON,
        ts=int(time.time()),
        actions=[SlackButton(text=PROFILE_BUTTON_TEXT, url=profile_url)],
        fields=fields,
    )
    return SlackMessage(attachments=[attachment])


def format_slack(
    event: Event,
    settings: Settings,
    property_types: PropertyTypeLookup,
) -> ChannelPayload:
    """
    Format a notification for the Slack incoming webhook.

    Settings expects:
        - hook_service_url, hook_workspace_id, hook_token: webhook location
        - message_* and profile_url templates
    """
    message = build_slack_message(event, settings, property_types)
    body = message.model_dump_json()
    logger.debug("Slack payload for event %s: %s", event.item_id, body)

    return ChannelPayload(
        method="POST",
        url=settings.webhook_url,
        headers={
            "Content-Type": "application/json",
            "Accept": "application/json",
        },
        body=body,
    )


def parse_excluded_tags(raw: str) -> list[str]:
    # Plain split, items are compared untrimmed
    return raw.split(",")


def is_displayable(property_type: Optional[PropertyType], excluded_tags: list[str]) -> bool:
    """Return True if a profile property with this type may appear in the message."""
    if property_type is None or not property_type.name:
        return False
    if not property_type.system_tags:
        return False
    return not any(tag in property_type.system_tags for tag in excluded_tags)


def _profile_fields(
    event: Event,
    settings: Settings,
    property_types: PropertyTypeLookup,
) -> list[SlackField]:
    if event.profile is None:
        return []

    excluded_tags = parse_excluded_tags(settings.system_tags_exclude)
    fields = []
    for key, value in event.profile.properties.items():
        if value is None:
            continue

        property_type = property_types(key)
        if not is_displayable(property_type, excluded_tags):
            logger.debug("Skipping profile property %s", key)
            continue

        fields.append(SlackField(
            title=property_type.name,
            value=truncate(format_value(value)),
            short=True,
        ))
    return fields


def _session_fields(event: Event) -> list[SlackField]:
    if event.session is None:
        return []

    fields = []
    for key, title in SESSION_FIELDS:
        value = format_value(event.session.get_property(key))
        if value:
            fields.append(SlackField(title=title, value=truncate(value), short=True))
    return fields
