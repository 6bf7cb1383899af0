"""Tests for HTTP dispatch of Slack notifications."""

import logging

import httpx

from unomi_slack.channels import ChannelPayload
from unomi_slack.channels.dispatcher import send_notification

from conftest import RecordingTransport

URL = "https://hooks.slack.com/services/T0/B0/token"


def _payload():
    return ChannelPayload(
        method="POST",
        url=URL,
        headers={"Content-Type": "application/json", "Accept": "application/json"},
        body='{"attachments": []}',
    )


def test_posts_json_body(transport):
    send_notification(_payload(), transport=transport)

    assert len(transport.requests) == 1
    request = transport.requests[0]
    assert request.method == "POST"
    assert str(request.url) == URL
    assert request.headers["content-type"] == "application/json"
    assert request.headers["accept"] == "application/json"
    assert request.content == b'{"attachments": []}'


def test_non_200_logs_error_and_returns(caplog):
    transport = RecordingTransport(status_code=404)
    with caplog.at_level(logging.ERROR, logger="unomi_slack"):
        result = send_notification(_payload(), transport=transport)

    assert result is None
    assert len(transport.requests) == 1  # no retry
    assert any("404" in r.getMessage() for r in caplog.records)
    assert all(r.levelno == logging.ERROR for r in caplog.records)


def test_connection_error_is_swallowed(caplog):
    transport = RecordingTransport(exc=httpx.ConnectError("connection refused"))
    with caplog.at_level(logging.ERROR, logger="unomi_slack"):
        send_notification(_payload(), transport=transport)

    assert len(transport.requests) == 1
    assert any("connection refused" in r.getMessage() for r in caplog.records)


def test_success_logs_no_error(transport, caplog):
    with caplog.at_level(logging.ERROR, logger="unomi_slack"):
        send_notification(_payload(), transport=transport)
    assert caplog.records == []
