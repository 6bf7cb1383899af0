"""Pydantic schemas for the Slack attachments message."""

from pydantic import BaseModel, Field


class SlackField(BaseModel):
    title: str
    value: str
    short: bool = Field(True, description="Slack may lay out two short fields per row")


class SlackButton(BaseModel):
    type: str = "button"
    text: str
    url: str


class SlackAttachment(BaseModel):
    title: str
    pretext: str
    thumb_url: str
    color: str
    text: str
    fallback: str
    footer: str
    footer_icon: str
    ts: int = Field(..., description="Unix time in seconds")
    actions: list[SlackButton] = Field(default_factory=list)
    fields: list[SlackField] = Field(default_factory=list)


class SlackMessage(BaseModel):
    attachments: list[SlackAttachment]
