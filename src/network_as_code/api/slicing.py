"""Network slicing endpoints."""

from typing import Any

from .. import errors
from .service import ServiceClient, parse, path_segment
from .types import RawSlice


class SlicingApi:
    """Endpoints of the network slicing service."""

    def __init__(self, service: ServiceClient):
        self.service = service

    def create(self, body: dict[str, Any]) -> RawSlice:
        """Create a slice from a fully built request body."""
        data = self.service.request("POST", "/slices", json=body)
        return parse(RawSlice, data)

    def get(self, name: str) -> RawSlice:
        data = self.service.request("GET", f"/slices/{path_segment(name)}")
        return parse(RawSlice, data)

    def list_slices(self) -> list[RawSlice]:
        """List every slice visible to the API key.

        Raises:
            ServerError: If the body is not a JSON array of slices.
        """
        data = self.service.request("GET", "/slices")
        if data is None:
            return []
        if not isinstance(data, list):
            msg = "Expected a list of slices"
            raise errors.ServerError(msg, details=data)
        return [parse(RawSlice, item) for item in data]

    def activate(self, name: str) -> RawSlice | None:
        return self._transition("POST", f"/slices/{path_segment(name)}/activate")

    def deactivate(self, name: str) -> RawSlice | None:
        return self._transition("POST", f"/slices/{path_segment(name)}/deactivate")

    def delete(self, name: str) -> RawSlice | None:
        return self._transition("DELETE", f"/slices/{path_segment(name)}")

    def _transition(self, method: str, endpoint: str) -> RawSlice | None:
        """Request a state transition.

        Returns:
            The slice representation when the service echoes one, else None.
        """
        data = self.service.request(method, endpoint)
        if not data:
            return None
        return parse(RawSlice, data)
