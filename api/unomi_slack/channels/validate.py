"""Config validation for the Slack channel."""

from typing import Optional
from urllib.parse import urlparse

from unomi_slack.config import Settings


def validate_settings(settings: Settings) -> Optional[str]:
    """
    Validate the webhook part of the settings.
    Returns None if valid, or an error message string if invalid.
    """
    err = _validate_url(settings.hook_service_url, "hook_service_url")
    if err:
        return err
    return _require_fields(settings, ["hook_workspace_id", "hook_token"])


# --- Internal validators ---


def _require_fields(settings: Settings, fields: list[str]) -> Optional[str]:
    for field in fields:
        if not getattr(settings, field):
            return f"Missing required field: {field}"
    return None


def _validate_url(value, field_name: str) -> Optional[str]:
    if not isinstance(value, str) or not value:
        return f"Missing required field: {field_name}"
    try:
        parsed = urlparse(value)
        if parsed.scheme not in ("http", "https"):
            return f"{field_name} must use http or https protocol"
        if not parsed.netloc:
            return f"{field_name} is not a valid URL"
    except ValueError:
        return f"{field_name} is not a valid URL"
    return None
