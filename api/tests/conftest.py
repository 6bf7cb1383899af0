"""Shared fixtures for unomi_slack tests."""

import httpx
import pytest

from unomi_slack.config import Settings
from unomi_slack.models import Event, Goal, Profile, PropertyType, PropertyTypeCatalog, Session

PROFILE_ID = "2c2c150f-ae2e-48fb-a221-45d1bee96276"


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        hook_service_url="https://hooks.slack.com/services/",
        hook_workspace_id="T04CA9GN2",
        hook_token="BE09GNA2X/secret",
        message_title="Goal reached: {goalName}",
        message_pretext="New visitor on {scope}",
        message_thumb_url="https://example.com/thumb.png",
        message_color="#ff0000",
        message_text="Someone did something",
        message_fallback="Visitor notification",
        profile_url="http://localhost:8080/sites/{scope}/profiles/{profileId}",
        system_tags_exclude="personalIdentifierProperties,hidden",
    )


@pytest.fixture
def catalog():
    return PropertyTypeCatalog([
        PropertyType("firstName", "First name", frozenset({"basicProfileProperties"})),
        PropertyType("lastName", "Last name", frozenset({"basicProfileProperties"})),
        PropertyType("company", "Company", frozenset({"workProfileProperties"})),
        PropertyType("email", "Email", frozenset({"personalIdentifierProperties"})),
    ])


@pytest.fixture
def event():
    return Event(
        event_type="pageViewEvent",
        scope="digitall",
        profile_id=PROFILE_ID,
        item_id="event-1",
        profile=Profile(
            item_id=PROFILE_ID,
            properties={"firstName": "Romain", "lastName": "Gauthier", "company": "Jahia"},
        ),
        session=Session(properties={
            "deviceCategory": "Desktop",
            "sessionCountryName": "France",
            "sessionCity": "Paris",
        }),
        target=Goal(id="newsletter-goal", name="Newsletter signup"),
    )


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it receives."""

    def __init__(self, status_code=200, exc=None):
        self.requests = []

        def handler(request):
            self.requests.append(request)
            if exc is not None:
                raise exc
            return httpx.Response(status_code, text="ok" if status_code == 200 else "invalid_token")

        super().__init__(handler)


@pytest.fixture
def transport():
    return RecordingTransport()
