"""Tests for the Sessions namespace and the QoDSession model."""

from unittest.mock import MagicMock

import pytest

from network_as_code import errors
from network_as_code.models import QoDSession

QOS_URL = "https://quality-of-service-on-demand.p-eu.rapidapi.com"


def _session(started_at, expires_at) -> QoDSession:
    return QoDSession(
        _api=MagicMock(),
        id="1234",
        profile="QOS_L",
        status="AVAILABLE",
        started_at=started_at,
        expires_at=expires_at,
    )


# ---------------------------------------------------------------------------
# duration()
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("started_at", "expires_at", "expected"),
    [
        (1691671102, 1691757502, 86400),
        (0, 1641494400, 1641494400),
        (1700000000, 1700000000, 0),
        (1700000060, 1700000000, -60),
    ],
)
def test_duration_is_expiry_minus_start(started_at, expires_at, expected):
    """duration() is expires_at - started_at, zero and negative included."""
    assert _session(started_at, expires_at).duration() == expected


def test_duration_makes_no_request():
    """duration() works from cached timestamps only."""
    session = _session(0, 60)
    session.duration()
    session._api.sessions.get_session.assert_not_called()


@pytest.mark.parametrize(("started_at", "expires_at"), [(None, 60), (0, None)])
def test_duration_none_without_timestamps(started_at, expires_at):
    """Without both timestamps there is no duration."""
    assert _session(started_at, expires_at).duration() is None


# ---------------------------------------------------------------------------
# Sessions.get
# ---------------------------------------------------------------------------


def test_get_session(client, fake_api):
    """Sessions.get fetches one session by ID."""
    fake_api.add(
        "GET",
        f"{QOS_URL}/sessions/1234",
        {
            "sessionId": "1234",
            "qosProfile": "QOS_L",
            "qosStatus": "BLA",
            "expiresAt": 1641494400,
            "startedAt": 0,
        },
    )

    session = client.sessions.get("1234")

    assert session.id == "1234"
    assert session.profile == "QOS_L"
    assert session.status == "BLA"
    assert session.device is None


def test_get_session_with_bindings(client, fake_api):
    """Device and application server bindings are read from the response."""
    fake_api.add(
        "GET",
        f"{QOS_URL}/sessions/1234",
        {
            "sessionId": "1234",
            "qosProfile": "QOS_L",
            "qosStatus": "AVAILABLE",
            "device": {
                "networkAccessIdentifier": "testuser@open5glab.net",
                "ipv4Address": {"publicAddress": "1.1.1.2", "publicPort": 80},
            },
            "applicationServer": {"ipv4Address": "5.6.7.8"},
            "devicePorts": {"ranges": [{"from": 80, "to": 90}]},
        },
    )

    session = client.sessions.get("1234")

    assert session.device is not None
    assert session.device.network_access_identifier == "testuser@open5glab.net"
    assert session.device.ipv4_address.public_port == 80
    assert session.service_ipv4 == "5.6.7.8"
    assert session.service_ipv6 is None
    assert session.device_ports.ranges[0].start == 80
    assert session.device_ports.ranges[0].end == 90


def test_get_session_with_empty_device_echo(client, fake_api):
    """A device echo without identifiers leaves the session unbound."""
    fake_api.add(
        "GET",
        f"{QOS_URL}/sessions/1234",
        {
            "sessionId": "1234",
            "qosProfile": "QOS_L",
            "qosStatus": "AVAILABLE",
            "device": {"ipv4Address": {"publicPort": 80}},
        },
    )
    assert client.sessions.get("1234").device is None


def test_get_session_unauthenticated(client, fake_api):
    """A 403 raises AuthError and returns no session."""
    fake_api.add(
        "GET",
        f"{QOS_URL}/sessions/1234",
        {"message": "Invalid API key."},
        status=403,
    )

    result = None
    with pytest.raises(errors.AuthError):
        result = client.sessions.get("1234")
    assert result is None
    assert len(fake_api.requests) == 1


def test_get_session_not_found(client, fake_api):
    """A 404 raises NotFoundError."""
    fake_api.add("GET", f"{QOS_URL}/sessions/nope", {"message": "no"}, status=404)
    with pytest.raises(errors.NotFoundError):
        client.sessions.get("nope")


def test_get_twice_returns_distinct_objects(client, fake_api):
    """Two gets for the same session give independent objects."""
    fake_api.add(
        "GET",
        f"{QOS_URL}/sessions/1234",
        {"sessionId": "1234", "qosProfile": "QOS_L", "qosStatus": "AVAILABLE"},
    )

    first = client.sessions.get("1234")
    second = client.sessions.get("1234")
    first.status = "UNAVAILABLE"

    assert first is not second
    assert second.status == "AVAILABLE"


# ---------------------------------------------------------------------------
# refresh / delete
# ---------------------------------------------------------------------------


def test_refresh_overwrites_in_place(client, fake_api):
    """refresh() updates status and timestamps of the same object."""
    fake_api.add(
        "GET",
        f"{QOS_URL}/sessions/1234",
        {"sessionId": "1234", "qosProfile": "QOS_L", "qosStatus": "REQUESTED"},
    )
    fake_api.add(
        "GET",
        f"{QOS_URL}/sessions/1234",
        {
            "sessionId": "1234",
            "qosProfile": "QOS_L",
            "qosStatus": "AVAILABLE",
            "startedAt": 1700000000,
            "expiresAt": 1700003600,
        },
    )
    session = client.sessions.get("1234")
    assert session.duration() is None

    session.refresh()

    assert session.status == "AVAILABLE"
    assert session.duration() == 3600


def test_delete_keeps_local_object(client, fake_api):
    """delete() informs the server; the local object keeps its state."""
    fake_api.add(
        "GET",
        f"{QOS_URL}/sessions/1234",
        {"sessionId": "1234", "qosProfile": "QOS_L", "qosStatus": "AVAILABLE"},
    )
    fake_api.add("DELETE", f"{QOS_URL}/sessions/1234", status=204)
    session = client.sessions.get("1234")

    session.delete()

    assert fake_api.requests[-1].method == "DELETE"
    assert session.status == "AVAILABLE"
