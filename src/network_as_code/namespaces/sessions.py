"""Sessions namespace."""

from ..models import Device, QoDSession
from .namespace import Namespace


class Sessions(Namespace):
    """Access to QoS sessions by their server-issued ID."""

    def get(self, session_id: str) -> QoDSession:
        """Get a QoS session by its ID.

        Args:
            session_id: ID of the QoS session.

        Raises:
            AuthError: If the API key is rejected. Not retried.
            NotFoundError: If no such session exists.
        """
        raw = self.api.sessions.get_session(session_id)
        device = None
        if raw.device is not None:
            device = Device.from_raw(self.api, raw.device)
        return QoDSession.from_raw(self.api, raw, device=device)
