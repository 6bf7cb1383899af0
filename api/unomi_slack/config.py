from pydantic_settings import BaseSettings

DEFAULT_PROFILE_URL = (
    "http://localhost:8080/cms/edit/default/en/sites/{scope}.wem-profile.html"
    "?wemProfileType=profiles&wemProfileId={profileId}"
)


class Settings(BaseSettings):
    # Slack incoming webhook: <hook_service_url>/<workspace id>/<token>
    hook_service_url: str = "https://hooks.slack.com/services"
    hook_workspace_id: str = ""
    hook_token: str = ""

    # Message templates ({goalName} in title, {scope} in pretext)
    message_title: str = "Goal reached: {goalName}"
    message_pretext: str = "New visitor activity on {scope}"
    message_thumb_url: str = ""
    message_color: str = "#36a64f"
    message_text: str = ""
    message_fallback: str = "A visitor triggered a rule"

    # Profile deep link ({scope}, {profileId})
    profile_url: str = DEFAULT_PROFILE_URL

    # Comma-separated system tags; matching properties are not displayed
    system_tags_exclude: str = ""

    model_config = {
        "env_prefix": "UNOMI_SLACK_",
        "env_file": ".env",
        "extra": "ignore",
        "frozen": True,
    }

    @property
    def webhook_url(self) -> str:
        base = self.hook_service_url.rstrip("/")
        return f"{base}/{self.hook_workspace_id}/{self.hook_token}"
