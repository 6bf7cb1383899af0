"""Notification dispatcher for the Slack channel."""

import logging
from typing import Optional

import httpx

from unomi_slack.channels import ChannelPayload

logger = logging.getLogger(__name__)


def send_notification(
    payload: ChannelPayload,
    transport: Optional[httpx.BaseTransport] = None,
) -> None:
    """
    Send a single notification via HTTP. Never raises.

    The client lives for this request only and is closed on every exit path.
    Any response is accepted; non-2xx statuses and transport errors are logged.

    Args:
        payload: ChannelPayload instance
        transport: Optional httpx transport, the default network transport if omitted
    """
    try:
        with httpx.Client(transport=transport) as client:
            response = client.request(
                method=payload.method,
                url=payload.url,
                headers=payload.headers,
                content=payload.body,
            )

        if not response.is_success:
            logger.error(
                "Error when executing request to slack, status %s: %s",
                response.status_code,
                response.text[:200],
            )
        else:
            logger.debug("Successfully sent notification to %s", payload.url)

    except Exception as e:
        logger.error(f"Failed to send notification to slack: {e}", exc_info=True)
