"""Quality-on-demand session endpoints."""

from typing import Any

from .. import errors
from .service import ServiceClient, parse, path_segment
from .types import RawSession


class QodApi:
    """Endpoints of the quality-of-service-on-demand service."""

    def __init__(self, service: ServiceClient):
        self.service = service

    def create_session(self, body: dict[str, Any]) -> RawSession:
        """Create a session from a fully built request body."""
        data = self.service.request("POST", "/sessions", json=body)
        return parse(RawSession, data)

    def get_session(self, session_id: str) -> RawSession:
        data = self.service.request("GET", f"/sessions/{path_segment(session_id)}")
        return parse(RawSession, data)

    def list_sessions(self, network_access_identifier: str) -> list[RawSession]:
        """List the sessions of one device.

        Args:
            network_access_identifier: Device to scope the listing to.

        Returns:
            Validated sessions in server order.

        Raises:
            ServerError: If the body is not a JSON array of sessions.
        """
        data = self.service.request(
            "GET",
            "/sessions",
            params={"networkAccessIdentifier": network_access_identifier},
        )
        if data is None:
            return []
        if not isinstance(data, list):
            msg = "Expected a list of sessions"
            raise errors.ServerError(msg, details=data)
        return [parse(RawSession, item) for item in data]

    def delete_session(self, session_id: str) -> None:
        self.service.request("DELETE", f"/sessions/{path_segment(session_id)}")
